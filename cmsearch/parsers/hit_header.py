#!/usr/bin/env python3
"""
Recognition of the per-sequence and per-hit header lines of cmsearch output
"""

import re
import logging
from typing import Optional

from cmsearch.exceptions import ParseError
from cmsearch.models.alignment import PendingHit


class HitHeaderScanner:
    """
    Tracks the current target sequence name and the most recent hit summary.

    ``sequence: <name>`` lines set the name, which stays in effect for every
    hit until the next sequence line. ``hit <n> : <start> <end> <score> bits``
    lines replace the pending hit; a pending hit that never gets an alignment
    block is simply overwritten.
    """

    SEQUENCE_RE = re.compile(r'^sequence:\s+(\S+)')
    HIT_RE = re.compile(r'^hit\s+(\S+)\s*:\s*(\S+)\s+(\S+)\s+(\S+)\s+bits\b')
    HIT_PREFIX_RE = re.compile(r'^hit\b')

    def __init__(self, logger=None):
        """Initialize scanner with logger"""
        self.logger = logger or logging.getLogger("cmsearch.hit_header")
        self.sequence_name: Optional[str] = None
        self.pending: Optional[PendingHit] = None

    def scan(self, line: str, line_number: Optional[int] = None) -> bool:
        """
        Consume a header line, updating scanner state

        Args:
            line: Raw input line
            line_number: Position of the line in the input, for error context

        Returns:
            True if the line was a blank, sequence or hit line

        Raises:
            ParseError: If a hit summary line cannot be parsed
        """
        stripped = line.strip()
        if not stripped:
            return True

        match = self.SEQUENCE_RE.match(stripped)
        if match:
            self.sequence_name = match.group(1)
            self.logger.debug(f"Current sequence: {self.sequence_name}")
            return True

        if self.HIT_PREFIX_RE.match(stripped):
            self.pending = self.parse_hit_line(stripped, line_number)
            return True

        return False

    def parse_hit_line(self, line: str, line_number: Optional[int] = None) -> PendingHit:
        """
        Parse a hit summary line into a PendingHit

        Args:
            line: Hit summary line
            line_number: Position of the line in the input, for error context

        Returns:
            PendingHit with normalised coordinates

        Raises:
            ParseError: If coordinates or score are not numbers
        """
        match = self.HIT_RE.match(line.strip())
        if not match:
            raise ParseError("Unrecognised hit summary line", line_number, line.rstrip('\r\n'))

        index, raw_start, raw_end, raw_score = match.groups()
        if not (index.isdigit() and raw_start.isdigit() and raw_end.isdigit()):
            raise ParseError("Hit index and coordinates must be unsigned integers",
                             line_number, line.rstrip('\r\n'))
        try:
            score = float(raw_score)
        except ValueError:
            raise ParseError(f"Invalid bit score {raw_score!r}",
                             line_number, line.rstrip('\r\n'))

        hit = PendingHit.from_summary(self.sequence_name, int(raw_start), int(raw_end), score)
        if self.pending is not None:
            self.logger.debug(f"Discarding hit without alignment: {self.pending}")
        self.logger.debug(f"Hit {index}: {hit.sequence_name} {hit.start}-{hit.end} "
                          f"strand {hit.strand} score {hit.score}")
        return hit

    def take_pending(self) -> Optional[PendingHit]:
        """Return the pending hit and clear it"""
        hit, self.pending = self.pending, None
        return hit
