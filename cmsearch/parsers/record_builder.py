#!/usr/bin/env python3
"""
Conversion of assembled alignment blocks into AlignmentRecords
"""

import re
import logging
from typing import Optional

from cmsearch.config.parser_config import ParserConfig
from cmsearch.models.alignment import AlignmentBlock, AlignmentRecord, PendingHit


class RecordBuilder:
    """Combines a finished block with its hit summary and applies the score filter"""

    # Best effort only: gi|12345|gb|U32687.1| -> 12345
    ACCESSION_RE = re.compile(
        r'(?:gb|gi|emb|dbj|sp|pdb|bbs|ref|lcl)\|(\d+)((?::|\|)\w+\|(\S*.\d+)\|)?'
    )
    RESIDUE_RE = re.compile(r'[A-Za-z]')

    def __init__(self, config: Optional[ParserConfig] = None, logger=None):
        """Initialize builder with parser settings and logger"""
        self.config = config or ParserConfig()
        self.logger = logger or logging.getLogger("cmsearch.record_builder")

    def extract_sequence_id(self, name: str) -> str:
        """Accession embedded in a database-style name, else the name itself"""
        match = self.ACCESSION_RE.search(name or "")
        if match:
            return match.group(1)
        return name or ""

    @classmethod
    def ungapped_length(cls, aligned: str) -> int:
        """Number of residue letters in an aligned string"""
        return len(cls.RESIDUE_RE.findall(aligned))

    def passes_filter(self, score: float) -> bool:
        return score > self.config.minscore

    def build(self, block: Optional[AlignmentBlock], hit: Optional[PendingHit]) -> Optional[AlignmentRecord]:
        """
        Build a record from a block and the hit summary that preceded it

        Args:
            block: Assembled alignment block
            hit: Hit summary consumed by this block

        Returns:
            AlignmentRecord, or None if the block is empty, has no hit summary
            or scores at or below minscore
        """
        if block is None or block.is_empty:
            return None

        if hit is None:
            self.logger.debug("Skipping alignment block with no preceding hit line")
            return None

        if not self.passes_filter(hit.score):
            self.logger.debug(
                f"Skipping {hit.sequence_name} {hit.start}-{hit.end}: "
                f"score {hit.score} <= minscore {self.config.minscore}"
            )
            return None

        config = self.config
        return AlignmentRecord(
            model_end=self.ungapped_length(block.model),
            hit_start=hit.start,
            hit_end=hit.end,
            hit_strand=hit.strand,
            score=hit.score,
            sequence_id=self.extract_sequence_id(hit.sequence_name),
            raw_sequence_name=hit.sequence_name,
            secondary_structure=block.structure,
            model_line=block.model,
            midline=block.midline,
            hit_line=block.hit_sequence,
            primary_tag=config.primary_tag,
            source_tag=config.source_tag,
            display_name=config.descriptor_label,
            model_name=config.model_identifier,
            model_accession=config.accession,
        )
