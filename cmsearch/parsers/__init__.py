#!/usr/bin/env python3
"""
Parsers for Infernal cmsearch output
"""
from .hit_header import HitHeaderScanner
from .block_assembler import BlockAssembler
from .record_builder import RecordBuilder
from .cmsearch_parser import CMSearchParser, ParserState, parse_cmsearch_file

__all__ = [
    'HitHeaderScanner', 'BlockAssembler', 'RecordBuilder',
    'CMSearchParser', 'ParserState', 'parse_cmsearch_file'
]
