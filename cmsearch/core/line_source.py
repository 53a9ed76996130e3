#!/usr/bin/env python3
"""
Line source with one line of lookahead for the cmsearch parser
"""
import os
import logging
from typing import Iterable, Iterator, Optional

from ..exceptions import FileOperationError, ParserStateError


class LineSource:
    """Sequential line reader supporting a single pushed-back line

    Wraps any iterable of lines (an open file, a list, a generator); byte
    lines are decoded as UTF-8.
    ``pull`` returns lines with their trailing newline intact and ``None``
    once the input is exhausted.
    """

    def __init__(self, lines: Iterable[str], logger=None):
        self.logger = logger or logging.getLogger("cmsearch.line_source")
        self._lines: Iterator[str] = iter(lines)
        self.path = getattr(lines, 'name', None)
        self._handle = None
        self._pending: Optional[str] = None
        self._exhausted = False
        self.line_number = 0

    @classmethod
    def from_path(cls, path: str, logger=None) -> 'LineSource':
        """Open a file and read it line by line

        Raises:
            FileOperationError: If the file is missing or cannot be opened;
                the file is read as UTF-8 and a line that does not decode raises
                it later from ``pull``
        """
        if not os.path.exists(path):
            raise FileOperationError(f"File not found: {path}", {'path': path})
        try:
            handle = open(path, 'rb')
        except OSError as e:
            raise FileOperationError(f"Cannot open {path}: {str(e)}", {'path': path}) from e

        source = cls(handle, logger)
        source._handle = handle
        return source

    def pull(self) -> Optional[str]:
        """Return the next line, or None at end of input

        Raises:
            FileOperationError: If the underlying file cannot be decoded
        """
        if self._pending is not None:
            line, self._pending = self._pending, None
            self.line_number += 1
            return line

        if self._exhausted:
            return None

        try:
            line = next(self._lines, None)
        except UnicodeDecodeError as e:
            # text handles decode ahead in chunks, so the line is approximate
            raise self._decode_error(e) from e
        if line is None:
            self._exhausted = True
            return None

        if isinstance(line, bytes):
            line = self._decode(line)

        self.line_number += 1
        return line

    def _decode(self, raw: bytes) -> str:
        """Decode one line read from a binary handle, translating CRLF"""
        try:
            line = raw.decode('utf-8')
        except UnicodeDecodeError as e:
            raise self._decode_error(e) from e
        if line.endswith('\r\n'):
            line = line[:-2] + '\n'
        return line

    def _decode_error(self, error: UnicodeDecodeError) -> FileOperationError:
        self._exhausted = True
        line_number = self.line_number + 1
        return FileOperationError(
            f"Cannot decode line {line_number} of {self.path or 'input'}: {error.reason}",
            {'path': self.path, 'line_number': line_number,
             'encoding': error.encoding, 'reason': str(error)}
        )

    def push_back(self, line: str) -> None:
        """Queue a line to be returned by the next pull

        Raises:
            ParserStateError: If a line is already pending
        """
        if line is None:
            return
        if self._pending is not None:
            raise ParserStateError(
                "Only one line can be pushed back",
                {'pending': self._pending, 'line': line, 'line_number': self.line_number}
            )
        self._pending = line
        self.line_number -= 1

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def close(self) -> None:
        """Close the underlying file if this source opened it"""
        if self._handle is not None:
            self._handle.close()
            self.logger.debug(f"Closed {getattr(self._handle, 'name', 'input')}")
            self._handle = None

    def __enter__(self) -> 'LineSource':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
