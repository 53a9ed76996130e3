#!/usr/bin/env python3
"""
Exception hierarchy for the cmsearch output parser.
All custom exceptions should inherit from CMSearchError.
"""
from typing import Dict, Any, Optional


class CMSearchError(Exception):
    """Base exception for all cmsearch parsing errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize with error message and optional details

        Args:
            message: Error message
            details: Optional details dictionary with context
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(CMSearchError):
    """Error related to configuration issues"""
    pass


class FileOperationError(CMSearchError):
    """Error during file operations"""
    pass


class ParserStateError(CMSearchError):
    """Parser or line source used in a way its state does not allow"""
    pass


class ParseError(CMSearchError):
    """Input line the parser does not understand

    Carries the line number and raw content of the offending line so the
    caller can diagnose a format mismatch.
    """

    def __init__(self, message: str, line_number: Optional[int] = None,
                 line: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        self.line_number = line_number
        self.line = line
        context = dict(details or {})
        if line_number is not None:
            context['line_number'] = line_number
        if line is not None:
            context['line'] = line
        if line_number is not None:
            message = f"{message} (line {line_number}: {line!r})"
        super().__init__(message, context)
