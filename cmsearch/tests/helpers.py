"""
Builders for cmsearch-style alignment text used across the tests
"""
from typing import List, Sequence, Tuple

# Column where alignment text starts in the generated blocks
OFFSET = 11


def format_cycle(structure: str, model: str, midline: str, hit: str,
                 model_from: int = 1, hit_from: int = 1) -> List[str]:
    """Lay out one structure/model/midline/hit group the way cmsearch prints it"""
    model_to = model_from + sum(c.isalpha() for c in model) - 1
    hit_to = hit_from + sum(c.isalpha() for c in hit) - 1
    return [
        f"{'':{OFFSET}}{structure}\n",
        f"{model_from:>{OFFSET - 1}} {model} {model_to}\n",
        f"{'':{OFFSET}}{midline}\n",
        f"{hit_from:>{OFFSET - 1}} {hit} {hit_to}\n",
    ]


def format_block(cycles: Sequence[Tuple[str, str, str, str]]) -> List[str]:
    """Several groups separated by blank lines, as for a wrapped alignment"""
    lines = []
    for cycle in cycles:
        lines.extend(format_cycle(*cycle))
        lines.append("\n")
    return lines
