#!/usr/bin/env python3
"""
Shared fixtures for the cmsearch parser tests
"""

from pathlib import Path
from typing import List

import pytest

from cmsearch.tests.helpers import format_block

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def sample_path() -> Path:
    """cmsearch report with three alignments and one hit without a block"""
    return DATA_DIR / "sample.cmsearch"


@pytest.fixture
def block_lines():
    """Factory for correctly aligned alignment blocks"""
    return format_block


@pytest.fixture
def seqa_lines() -> List[str]:
    """Single reverse-strand hit on seqA with a gapped model line"""
    return [
        "sequence: seqA\n",
        "hit 1 : 120 45 30.5 bits\n",
    ] + format_block([("<<<..>>>", "AAA--AAA", "AAA  AAA", "AAACCAAA")])

