#!/usr/bin/env python3
"""
Immutable per-parser settings stamped onto every emitted record.
"""
import re
from dataclasses import dataclass, fields
from typing import Dict, Any, ClassVar, Tuple

from ..exceptions import ConfigurationError
from .defaults import (
    DEFAULT_MINSCORE, DEFAULT_PRIMARY_TAG, DEFAULT_SOURCE_LABEL,
    DEFAULT_DESCRIPTOR_LABEL, DEFAULT_PROGRAM_VERSION, DEFAULT_ANALYSIS_METHOD
)


@dataclass(frozen=True)
class ParserConfig:
    """Settings for a single CMSearchParser

    Only ``minscore`` changes what the parser returns; the remaining values
    label the records it builds.
    """
    minscore: float = DEFAULT_MINSCORE
    model_identifier: str = ""  # covariance model name, query display name
    accession: str = ""  # external accession (e.g. Rfam), query sequence id
    source_label: str = DEFAULT_SOURCE_LABEL
    descriptor_label: str = DEFAULT_DESCRIPTOR_LABEL
    primary_tag: str = DEFAULT_PRIMARY_TAG
    program_version: str = DEFAULT_PROGRAM_VERSION
    analysis_method: str = DEFAULT_ANALYSIS_METHOD

    LABEL_FIELDS: ClassVar[Tuple[str, ...]] = (
        'model_identifier', 'accession', 'source_label', 'descriptor_label',
        'primary_tag', 'program_version', 'analysis_method'
    )

    def __post_init__(self):
        # frozen, so normalise through object.__setattr__
        for name in self.LABEL_FIELDS:
            value = getattr(self, name)
            object.__setattr__(self, name, '' if value is None else str(value))

        if isinstance(self.minscore, bool) or not isinstance(self.minscore, (int, float)):
            raise ConfigurationError(
                f"minscore must be a number, got {self.minscore!r}",
                {'minscore': self.minscore}
            )
        if not re.search(r'infernal', self.analysis_method, re.IGNORECASE):
            raise ConfigurationError(
                f"method {self.analysis_method} not supported by the cmsearch parser",
                {'analysis_method': self.analysis_method}
            )
        object.__setattr__(self, 'minscore', float(self.minscore))

    @property
    def source_tag(self) -> str:
        """Source label followed by the program version"""
        return f"{self.source_label} {self.program_version}".strip()

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> 'ParserConfig':
        """Create config from a mapping, ignoring unknown keys and None values"""
        known = {f.name for f in fields(cls)}
        kwargs = {key: value for key, value in values.items()
                  if key in known and value is not None}
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {f.name: getattr(self, f.name) for f in fields(self)}
