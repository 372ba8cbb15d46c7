"""Key/value tokens found in COMPND and SOURCE records.

A COMPND or SOURCE record is a ``;``-separated list of ``TAG: value``
pairs once its continuation lines are folded. Each pair becomes a
:class:`Token` whose kind identifies the tag and whose value type depends
on the kind (integer, boolean, string or tuple of strings/integers).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union


class TokenKind(Enum):
    """COMPND/SOURCE specification tags. The value is the tag text."""

    # COMPND
    MOL_ID = "MOL_ID"
    MOLECULE = "MOLECULE"
    CHAIN = "CHAIN"
    FRAGMENT = "FRAGMENT"
    SYNONYM = "SYNONYM"
    EC = "EC"
    ENGINEERED = "ENGINEERED"
    MUTATION = "MUTATION"
    OTHER_DETAILS = "OTHER_DETAILS"

    # SOURCE
    SYNTHETIC = "SYNTHETIC"
    ORGANISM_SCIENTIFIC = "ORGANISM_SCIENTIFIC"
    ORGANISM_COMMON = "ORGANISM_COMMON"
    ORGANISM_TAXID = "ORGANISM_TAXID"
    STRAIN = "STRAIN"
    VARIANT = "VARIANT"
    CELL_LINE = "CELL_LINE"
    ATCC = "ATCC"
    ORGAN = "ORGAN"
    TISSUE = "TISSUE"
    CELL = "CELL"
    ORGANELLE = "ORGANELLE"
    SECRETION = "SECRETION"
    CELLULAR_LOCATION = "CELLULAR_LOCATION"
    PLASMID = "PLASMID"
    GENE = "GENE"
    EXPRESSION_SYSTEM = "EXPRESSION_SYSTEM"
    EXPRESSION_SYSTEM_COMMON = "EXPRESSION_SYSTEM_COMMON"
    EXPRESSION_SYSTEM_TAXID = "EXPRESSION_SYSTEM_TAXID"
    EXPRESSION_SYSTEM_STRAIN = "EXPRESSION_SYSTEM_STRAIN"
    EXPRESSION_SYSTEM_VARIANT = "EXPRESSION_SYSTEM_VARIANT"
    EXPRESSION_SYSTEM_CELL_LINE = "EXPRESSION_SYSTEM_CELL_LINE"
    EXPRESSION_SYSTEM_ATCC_NUMBER = "EXPRESSION_SYSTEM_ATCC_NUMBER"
    EXPRESSION_SYSTEM_ORGAN = "EXPRESSION_SYSTEM_ORGAN"
    EXPRESSION_SYSTEM_TISSUE = "EXPRESSION_SYSTEM_TISSUE"
    EXPRESSION_SYSTEM_CELL = "EXPRESSION_SYSTEM_CELL"
    EXPRESSION_SYSTEM_ORGANELLE = "EXPRESSION_SYSTEM_ORGANELLE"
    EXPRESSION_SYSTEM_CELLULAR_LOCATION = "EXPRESSION_SYSTEM_CELLULAR_LOCATION"
    EXPRESSION_SYSTEM_VECTOR_TYPE = "EXPRESSION_SYSTEM_VECTOR_TYPE"
    EXPRESSION_SYSTEM_VECTOR = "EXPRESSION_SYSTEM_VECTOR"
    EXPRESSION_SYSTEM_PLASMID = "EXPRESSION_SYSTEM_PLASMID"
    EXPRESSION_SYSTEM_GENE = "EXPRESSION_SYSTEM_GENE"

    @property
    def tag(self) -> str:
        return self.value


TokenValue = Union[int, bool, str, Tuple[str, ...], Tuple[int, ...]]


@dataclass(frozen=True)
class Token:
    """One ``TAG: value`` pair.

    Attributes:
        kind: Which specification tag this token carries
        value: Parsed value; its type is fixed by ``kind``
    """

    kind: TokenKind
    value: TokenValue

    @property
    def tag(self) -> str:
        return self.kind.value

    def __str__(self) -> str:
        if isinstance(self.value, tuple):
            text = ", ".join(str(v) for v in self.value)
        elif isinstance(self.value, bool):
            text = "YES" if self.value else "NO"
        else:
            text = str(self.value)
        return f"{self.kind.value}: {text}"
