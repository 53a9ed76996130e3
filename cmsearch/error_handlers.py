#!/usr/bin/env python3
"""
Error reporting for cmsearch-parse and the parser driver.
"""
import sys
import traceback
import logging
from functools import wraps
from typing import Callable, Any, Dict, Optional

from .exceptions import CMSearchError

# Order in which known detail keys are reported; anything else follows sorted
DETAIL_ORDER = ('path', 'line_number', 'line', 'encoding', 'reason')


def _format_details(details: Dict[str, Any]) -> str:
    keys = [key for key in DETAIL_ORDER if key in details]
    keys += sorted(key for key in details if key not in DETAIL_ORDER)
    lines = []
    for key in keys:
        value = details[key]
        if value is None:
            continue
        # report lines exactly as read, including trailing whitespace
        shown = repr(value) if key == 'line' else value
        lines.append(f"  {key}: {shown}")
    return "\n".join(lines)


def format_error(error: Exception, verbose: bool = False) -> str:
    """Format an error message for display

    Args:
        error: Exception object
        verbose: Add the error's details (input path, line number, offending
            line) or, for unexpected errors, the traceback

    Returns:
        Formatted error message
    """
    if isinstance(error, CMSearchError):
        msg = f"{error.__class__.__name__}: {error.message}"
        if verbose and error.details:
            details = _format_details(error.details)
            if details:
                msg += f"\nDetails:\n{details}"
        return msg

    if verbose:
        return f"Unexpected Error ({error.__class__.__name__}): {str(error)}\n{traceback.format_exc()}"
    return f"Unexpected Error: {str(error)}"


def handle_exceptions(command: Callable[..., int]) -> Callable[..., int]:
    """Decorator turning exceptions from a CLI command into exit codes

    The command takes the parsed argparse namespace as its first argument;
    its ``verbose`` count decides how much of each error is printed.
    Exit codes: 1 for parser errors, 2 for unexpected errors, 130 when
    interrupted.
    """
    @wraps(command)
    def wrapper(args, *rest, **kwargs) -> int:
        logger = logging.getLogger(command.__module__)
        verbose = getattr(args, 'verbose', 0) > 0
        try:
            return command(args, *rest, **kwargs)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            print("\nOperation cancelled by user", file=sys.stderr)
            return 130  # Standard exit code for SIGINT
        except CMSearchError as e:
            logger.error(str(e))
            print(format_error(e, verbose=verbose), file=sys.stderr)
            return 1
        except Exception as e:
            logger.error(f"Unexpected error: {str(e)}", exc_info=True)
            print(format_error(e, verbose=verbose), file=sys.stderr)
            if not verbose:
                print("Run with -v to print the traceback.", file=sys.stderr)
            return 2
    return wrapper


def log_exception(logger: logging.Logger,
                  error: Exception,
                  level: int = logging.ERROR,
                  context: Optional[Dict[str, Any]] = None) -> None:
    """Log an exception with context

    Args:
        logger: Logger instance
        error: Exception object
        level: Logging level
        context: Additional context for the log
    """
    if isinstance(error, CMSearchError):
        # Include any details from the error
        ctx = {**(error.details or {}), **(context or {})}
        logger.log(level, f"{error.__class__.__name__}: {error.message}",
                   extra={"context": ctx} if ctx else None,
                   exc_info=True)
    else:
        logger.log(level, f"Unexpected error: {str(error)}",
                   extra={"context": context} if context else None,
                   exc_info=True)
