#!/usr/bin/env python3
"""
CMSearchParser - pull parser for Infernal cmsearch (0.7/0.71) text output
"""

import os
import logging
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Union

from cmsearch.config.parser_config import ParserConfig
from cmsearch.core.line_source import LineSource
from cmsearch.error_handlers import log_exception
from cmsearch.exceptions import CMSearchError
from cmsearch.models.alignment import AlignmentRecord
from cmsearch.parsers.block_assembler import BlockAssembler
from cmsearch.parsers.hit_header import HitHeaderScanner
from cmsearch.parsers.record_builder import RecordBuilder


class ParserState(Enum):
    SCANNING = "scanning"
    ASSEMBLING = "assembling"
    DONE = "done"


class CMSearchParser:
    """
    Iterates the alignments of a cmsearch report as AlignmentRecords.

    Lines are read one at a time: header lines update the current sequence
    and hit, structure lines hand control to the BlockAssembler, and each
    finished block is turned into at most one record. Records scoring at or
    below ``minscore`` are skipped silently.

    Example:
        with CMSearchParser.open("lysine.cmsearch", minscore=20,
                                 model_identifier="Lysine") as parser:
            for record in parser:
                print(record.sequence_id, record.hit_start, record.score)

    A parser keeps a pushed-back line and a cycle position between calls, so
    one instance must only be consumed from one place at a time.
    """

    def __init__(self, source: Union[LineSource, Iterable[str], str, os.PathLike],
                 config: Optional[ParserConfig] = None, logger=None, **options):
        """
        Initialize parser

        Args:
            source: LineSource, open file or other iterable of lines, or a
                path to a cmsearch output file
            config: Parser settings (defaults if omitted)
            logger: Logger instance
            **options: ParserConfig fields overriding ``config``

        Raises:
            ConfigurationError: If the settings are invalid
            FileOperationError: If a path is given and cannot be opened
        """
        self.logger = logger or logging.getLogger("cmsearch.parser")

        config = config or ParserConfig()
        if options:
            values = config.to_dict()
            values.update(options)
            config = ParserConfig.from_dict(values)
        self.config = config

        self._owns_source = False
        if isinstance(source, LineSource):
            self.source = source
        elif isinstance(source, (str, os.PathLike)):
            self.source = LineSource.from_path(os.fspath(source), self.logger)
            self._owns_source = True
        else:
            self.source = LineSource(source, self.logger)

        self.scanner = HitHeaderScanner(self.logger)
        self.assembler = BlockAssembler(self.logger)
        self.builder = RecordBuilder(self.config, self.logger)
        self.state = ParserState.SCANNING

    @classmethod
    def open(cls, path: Union[str, os.PathLike], config: Optional[ParserConfig] = None,
             logger=None, **options) -> 'CMSearchParser':
        """Create a parser reading from a file; close it with close() or a with block"""
        return cls(os.fspath(path), config, logger, **options)

    @property
    def minscore(self) -> float:
        return self.config.minscore

    @property
    def current_sequence(self) -> Optional[str]:
        """Name from the most recent sequence line"""
        return self.scanner.sequence_name

    def next_prediction(self) -> Optional[AlignmentRecord]:
        """
        Return the next record scoring above minscore

        Returns:
            AlignmentRecord, or None once the input is exhausted

        Raises:
            ParseError: If a hit summary line is malformed
            FileOperationError: If the input cannot be read or decoded

            The parser is finished after either error.
        """
        while self.state is not ParserState.DONE:
            try:
                record = self._advance()
            except CMSearchError as e:
                log_exception(self.logger, e, level=logging.DEBUG)
                self.state = ParserState.DONE
                raise

            if record is not None:
                return record

        return None

    def _advance(self) -> Optional[AlignmentRecord]:
        """Consume one line, or one whole block when a block starts there"""
        line = self.source.pull()
        if line is None:
            self.state = ParserState.DONE
            return None

        if self.scanner.scan(line, self.source.line_number):
            return None
        if not self.assembler.is_block_start(line):
            return None

        self.state = ParserState.ASSEMBLING
        self.source.push_back(line)
        block = self.assembler.assemble(self.source)
        record = self.builder.build(block, self.scanner.take_pending())
        self.state = ParserState.SCANNING if self.source.has_pending else ParserState.DONE
        return record

    # Alias kept for callers written against the feature-oriented name
    next_feature = next_prediction

    def __iter__(self) -> Iterator[AlignmentRecord]:
        return self

    def __next__(self) -> AlignmentRecord:
        record = self.next_prediction()
        if record is None:
            raise StopIteration
        return record

    def close(self) -> None:
        """Close the input if the parser opened it"""
        if self._owns_source:
            self.source.close()

    def __enter__(self) -> 'CMSearchParser':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def parse_cmsearch_file(path: Union[str, os.PathLike], config: Optional[ParserConfig] = None,
                        logger=None, **options) -> List[AlignmentRecord]:
    """
    Parse a whole cmsearch output file

    Args:
        path: Path to cmsearch output
        config: Parser settings
        logger: Logger instance
        **options: ParserConfig fields overriding ``config``

    Returns:
        List of records scoring above minscore, in file order
    """
    with CMSearchParser.open(path, config, logger, **options) as parser:
        return list(parser)
