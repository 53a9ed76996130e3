#!/usr/bin/env python3
"""
pycmsearch

Parser turning Infernal cmsearch reports into covariance model / target
sequence alignment records.
"""

__version__ = '0.1.0'
__license__ = 'MIT'

from .exceptions import CMSearchError, ParseError
from .config import ParserConfig
from .models import AlignmentRecord
from .parsers import CMSearchParser, parse_cmsearch_file

__all__ = [
    'CMSearchError', 'ParseError', 'ParserConfig', 'AlignmentRecord',
    'CMSearchParser', 'parse_cmsearch_file'
]
