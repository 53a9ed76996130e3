#!/usr/bin/env python3
"""
Assembly of wrapped structure/model/midline/hit alignment blocks
"""

import re
import logging
from typing import Optional

from cmsearch.core.line_source import LineSource
from cmsearch.models.alignment import AlignmentBlock


class BlockAssembler:
    """
    Reads one alignment from a LineSource into an AlignmentBlock.

    cmsearch prints an alignment as repeated groups of four lines:

        structure   ::<<<<____>>>>::
        model       aaGCCUuuaaGGCaa
        midline       GCC     GGC
        hit seq     UUGCCAAUAAGGCGA

    The structure line carries no coordinates, so its leading whitespace
    gives the column where alignment text starts on every line of the group,
    and its length gives where it stops. Anything outside that window (the
    position numbers on the model and hit lines) is dropped. Long alignments
    repeat the group; the windows are concatenated in order.
    """

    BLOCK_START_RE = re.compile(r'^(\s+)[<>{}()\[\]:_,\-.]+')
    TERMINATORS = ('sequence', 'hit')

    def __init__(self, logger=None):
        """Initialize assembler with logger"""
        self.logger = logger or logging.getLogger("cmsearch.block_assembler")

    def is_block_start(self, line: str) -> bool:
        """Check whether a line opens a structure block"""
        return self.BLOCK_START_RE.match(line) is not None

    def column_offset(self, line: str) -> int:
        """Width of the leading whitespace on a structure line"""
        match = self.BLOCK_START_RE.match(line)
        if match:
            return len(match.group(1))
        return len(line) - len(line.lstrip())

    def assemble(self, source: LineSource) -> Optional[AlignmentBlock]:
        """
        Consume lines from the source until the block ends

        The block ends at end of input or at a line starting with "sequence"
        or "hit", which is pushed back for the header scanner. Blank lines are
        skipped and do not count towards the 4-line cycle.

        Args:
            source: Line source positioned at the first structure line

        Returns:
            Assembled block, or None if no alignment lines were found
        """
        block = None

        while True:
            line = source.pull()
            if line is None:
                break

            line = line.rstrip('\r\n')
            if not line.strip():
                continue

            if line.startswith(self.TERMINATORS):
                source.push_back(line)
                break

            if block is None:
                block = AlignmentBlock(column_offset=self.column_offset(line))

            if block.role == 'structure':
                block.field_width = len(line) - block.column_offset

            start = block.column_offset
            stop = start + block.field_width
            if len(line) < stop:
                self.logger.debug(
                    f"Line {source.line_number} shorter than alignment window "
                    f"{start}-{stop} ({block.role}), clipping at {len(line)}"
                )
            block.append(line[start:stop])

        if block is None:
            return None

        if block.lines_consumed % len(AlignmentBlock.ROLES):
            self.logger.debug(
                f"Alignment block ended mid-cycle after {block.lines_consumed} lines"
            )
        self.logger.debug(
            f"Assembled block: {block.cycles} cycle(s), {len(block.structure)} columns"
        )
        return block
