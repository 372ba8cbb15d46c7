"""Configuration management for the PDB record parser.

Settings can be given directly, loaded from a YAML file, or picked up from
environment variables prefixed with ``PDBRECORDS_`` (for example
``PDBRECORDS_ERROR_POLICY=raise``).
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class ErrorPolicy(str, Enum):
    """What to do when a record's content grammar fails."""

    DEFAULT = "default"  # substitute a default-valued record and log a warning
    RAISE = "raise"      # propagate RecordGrammarError to the caller


# Dispatcher priority. The first 22 entries follow the header section order;
# the remaining ones carry parsing through REMARK and primary structure.
DEFAULT_RECORD_PRIORITY = (
    "HEADER",
    "OBSLTE",
    "TITLE",
    "SPLIT",
    "CAVEAT",
    "SPRSDE",
    "COMPND",
    "SOURCE",
    "KEYWDS",
    "EXPDTA",
    "NUMMDL",
    "MDLTYP",
    "AUTHOR",
    "REVDAT",
    "JRNL AUTH",
    "JRNL TITL",
    "JRNL EDIT",
    "JRNL REFN",
    "JRNL REF",
    "JRNL PUBL",
    "JRNL PMID",
    "JRNL DOI",
    "REMARK",
    "DBREF",
    "DBREF1/DBREF2",
    "SEQADV",
    "SEQRES",
    "MODRES",
)

DEFAULT_CENTURY_PIVOT = 69

# Grammars that exist but are not part of the default order.
OPTIONAL_RECORD_GRAMMARS = ("DBREF1", "DBREF2")

KNOWN_RECORD_GRAMMARS = frozenset(DEFAULT_RECORD_PRIORITY + OPTIONAL_RECORD_GRAMMARS)


class ParserConfig(BaseSettings):
    """Parser configuration.

    Attributes:
        error_policy: Handling of record-grammar failures
        century_pivot: Two-digit years below the pivot resolve to 20xx,
            the rest to 19xx. None keeps the literal year.
        strict_continuation: Reject multi-line records whose continuation
            indices are out of sequence
        record_priority: Grammar names tried by the dispatcher, in order
    """

    error_policy: ErrorPolicy = Field(
        default=ErrorPolicy.DEFAULT,
        description="Recover to a default record or raise on grammar failure"
    )
    century_pivot: Optional[int] = Field(
        default=DEFAULT_CENTURY_PIVOT,
        ge=0,
        le=100,
        description="Pivot for resolving two-digit years (None for literal years)"
    )
    strict_continuation: bool = Field(
        default=False,
        description="Validate continuation indices run blank/1, 2, 3, ..."
    )
    record_priority: List[str] = Field(
        default_factory=lambda: list(DEFAULT_RECORD_PRIORITY),
        description="Ordered record grammar names tried at each line"
    )

    model_config = {"env_prefix": "PDBRECORDS_"}

    @field_validator("record_priority")
    @classmethod
    def validate_record_priority(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("record_priority must name at least one grammar")
        unknown = [name for name in v if name not in KNOWN_RECORD_GRAMMARS]
        if unknown:
            raise ValueError(f"Unknown record grammars: {', '.join(unknown)}")
        return v

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ParserConfig":
        """Load configuration from YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to YAML file."""
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)

    def to_dict(self) -> dict:
        """Convert configuration to dictionary."""
        return self.model_dump(mode="json")
