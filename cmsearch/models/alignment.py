"""
Alignment models for cmsearch output

PendingHit and AlignmentBlock are the mutable parser state for one hit and
its wrapped alignment; AlignmentRecord is the immutable query/hit pair handed
to callers. Feature objects come from Biopython so records plug straight into
SeqRecord-based annotation code.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any, ClassVar, Tuple

from Bio.SeqFeature import SeqFeature, SimpleLocation


@dataclass
class PendingHit:
    """Coordinates and score from the most recent hit summary line"""
    sequence_name: str
    start: int
    end: int
    strand: int
    score: float

    @classmethod
    def from_summary(cls, sequence_name: str, start: int, end: int, score: float) -> 'PendingHit':
        """Create a hit with start <= end, recording reversed input as strand -1"""
        if start > end:
            return cls(sequence_name or "", end, start, -1, score)
        return cls(sequence_name or "", start, end, 1, score)


@dataclass
class AlignmentBlock:
    """Accumulator for one alignment's structure/model/midline/hit cycle"""
    column_offset: int
    field_width: int = 0
    structure: str = ""
    model: str = ""
    midline: str = ""
    hit_sequence: str = ""
    lines_consumed: int = 0

    ROLES: ClassVar[Tuple[str, ...]] = ('structure', 'model', 'midline', 'hit_sequence')

    @property
    def role(self) -> str:
        """Role of the next line to be consumed"""
        return self.ROLES[self.lines_consumed % len(self.ROLES)]

    @property
    def cycles(self) -> int:
        """Number of 4-line cycles started so far"""
        return (self.lines_consumed + len(self.ROLES) - 1) // len(self.ROLES)

    def append(self, text: str) -> None:
        """Append a column window to the field for the current role"""
        role = self.role
        setattr(self, role, getattr(self, role) + text)
        self.lines_consumed += 1

    @property
    def is_empty(self) -> bool:
        return self.lines_consumed == 0


@dataclass(frozen=True)
class AlignmentRecord:
    """One covariance model / target sequence match

    Coordinates are 1-based and inclusive. The query side always starts at 1
    and ends at the ungapped model length; the model itself has no strand.
    """
    model_end: int
    hit_start: int
    hit_end: int
    hit_strand: int
    score: float
    sequence_id: str
    raw_sequence_name: str
    secondary_structure: str
    model_line: str
    midline: str
    hit_line: str
    primary_tag: str
    source_tag: str
    display_name: str = ""
    model_name: str = ""
    model_accession: str = ""

    model_start: ClassVar[int] = 1
    model_strand: ClassVar[int] = 0

    def __post_init__(self):
        if self.model_end < 0:
            raise ValueError(f"model_end must be >= 0, got {self.model_end}")
        if self.hit_start > self.hit_end:
            raise ValueError(f"hit_start {self.hit_start} is after hit_end {self.hit_end}")
        if self.hit_strand not in (1, -1):
            raise ValueError(f"hit_strand must be 1 or -1, got {self.hit_strand}")

    @property
    def tags(self) -> Dict[str, str]:
        """Tag values shared by both features of the pair"""
        return {
            'secstructure': self.secondary_structure,
            'model': self.model_line,
            'midline': self.midline,
            'hit': self.hit_line,
            'seq_name': self.raw_sequence_name,
        }

    def _qualifiers(self, name: str) -> Dict[str, list]:
        qualifiers = {
            'source': [self.source_tag],
            'score': [self.score],
        }
        if name:
            qualifiers['name'] = [name]
        return qualifiers

    def query_feature(self) -> SeqFeature:
        """Model side of the pair as a Biopython feature"""
        return SeqFeature(
            SimpleLocation(self.model_start - 1, self.model_end, strand=self.model_strand),
            type=self.primary_tag,
            id=self.model_accession,
            qualifiers=self._qualifiers(self.model_name),
        )

    def hit_feature(self) -> SeqFeature:
        """Target sequence side of the pair as a Biopython feature"""
        qualifiers = self._qualifiers(self.display_name)
        qualifiers.update({key: [value] for key, value in self.tags.items()})
        return SeqFeature(
            SimpleLocation(self.hit_start - 1, self.hit_end, strand=self.hit_strand),
            type=self.primary_tag,
            id=self.sequence_id,
            qualifiers=qualifiers,
        )

    def feature_pair(self) -> Tuple[SeqFeature, SeqFeature]:
        """(query, hit) features"""
        return self.query_feature(), self.hit_feature()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serialisable dictionary"""
        result = asdict(self)
        result['model_start'] = self.model_start
        result['model_strand'] = self.model_strand
        return result

    def __str__(self) -> str:
        strand = '+' if self.hit_strand > 0 else '-'
        return (f"{self.sequence_id}:{self.hit_start}-{self.hit_end}({strand}) "
                f"model 1-{self.model_end} {self.score:.2f} bits")
