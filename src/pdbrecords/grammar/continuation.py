"""Continuation folding for multi-line PDB records.

A continuation record (TITLE, COMPND, JRNL TITL, ...) repeats its record
name on every physical line, followed by a continuation index (blank on
the first line, then 2, 3, ...) and a fragment of free text. The folder
collects consecutive lines of one record kind and joins their fragments
into a single logical string:

    TITLE     RHIZOPUSPEPSIN COMPLEXED WITH REDUCED PEPTIDE
    TITLE    2 INHIBITOR

folds to ``"RHIZOPUSPEPSIN COMPLEXED WITH REDUCED PEPTIDE INHIBITOR"``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from pdbrecords.errors import ContinuationError, PrimitiveMismatch
from pdbrecords.grammar.lines import SourceLines
from pdbrecords.grammar.primitives import fixed_width_integer, record_name, tag


@dataclass(frozen=True)
class ContinuationLayout:
    """Column layout of a continuation record kind (0-based offsets).

    Attributes:
        name: Record name in columns 1-6
        index_start: First column of the continuation index
        index_width: Width of the continuation index field
        text_start: First column of the free-text fragment
        sub_tag: JRNL sub-record name in columns 13-16, if any
    """

    name: str
    index_start: int = 8
    index_width: int = 2
    text_start: int = 10
    sub_tag: Optional[str] = None

    @property
    def key(self) -> str:
        if self.sub_tag:
            return f"{self.name} {self.sub_tag}"
        return self.name

    @classmethod
    def standard(cls, name: str) -> "ContinuationLayout":
        """Index in columns 9-10, text from column 11."""
        return cls(name)

    @classmethod
    def wide(cls, name: str) -> "ContinuationLayout":
        """Index in columns 8-10 (COMPND, SOURCE), text from column 11."""
        return cls(name, index_start=7, index_width=3)

    @classmethod
    def journal(cls, sub_tag: str) -> "ContinuationLayout":
        """JRNL sub-record: index in columns 17-18, text from column 20."""
        return cls("JRNL", index_start=16, index_width=2, text_start=19, sub_tag=sub_tag)


@dataclass(frozen=True)
class Continuation:
    """One physical line of a continuation record.

    Attributes:
        record: Layout key of the record kind the line belongs to
        index: Continuation index, 0 when the field is blank
        text: Free-text fragment with surrounding whitespace removed
    """

    record: str
    index: int
    text: str


def fold_remainders(remainders: Iterable[str]) -> str:
    """Join free-text fragments into one logical value.

    Each fragment is appended right-trimmed, preceded by a single space
    once the accumulated text is non-empty. A blank fragment adds nothing.
    """
    folded = ""
    for remainder in remainders:
        if folded:
            folded += (" " + remainder).rstrip()
        else:
            folded = remainder.rstrip()
    return folded


class ContinuationFolder:
    """Collects and folds the physical lines of one continuation record kind."""

    def __init__(self, layout: ContinuationLayout):
        self.layout = layout
        self._name = record_name(layout.name)
        self._sub_tag = tag(layout.sub_tag.ljust(4)) if layout.sub_tag else None
        self._index = fixed_width_integer(layout.index_width)

    @property
    def key(self) -> str:
        return self.layout.key

    def parse_line(self, line: str) -> Continuation:
        """Parse one padded physical line.

        Raises:
            PrimitiveMismatch: If the line does not belong to this record kind
        """
        layout = self.layout
        _, pos = self._name(line, 0)
        if self._sub_tag is not None:
            if line[pos:12].strip():
                raise PrimitiveMismatch("blank columns 7-12", pos, line[pos:12])
            self._sub_tag(line, 12)
            pos = 16
        if line[pos:layout.index_start].strip():
            raise PrimitiveMismatch("blank columns before continuation", pos, line[pos:layout.index_start])

        index_field = line[layout.index_start:layout.index_start + layout.index_width]
        if index_field.strip():
            index, _ = self._index(line, layout.index_start)
        else:
            index = 0
        return Continuation(self.key, index, line[layout.text_start:].strip())

    def collect(self, lines: SourceLines, index: int) -> Tuple[List[Continuation], int]:
        """Parse one or more consecutive lines starting at ``index``.

        Returns:
            The parsed continuations and the index of the first line after them

        Raises:
            PrimitiveMismatch: If the line at ``index`` is not of this kind
        """
        if not lines.has(index):
            raise PrimitiveMismatch(self.key, index, "end of input")
        continuations = [self.parse_line(lines[index])]
        index += 1
        while lines.has(index):
            try:
                continuations.append(self.parse_line(lines[index]))
            except PrimitiveMismatch:
                break
            index += 1
        return continuations, index

    def fold(self, continuations: Sequence[Continuation]) -> str:
        """Fold collected continuations in input order."""
        for item in continuations:
            if item.record != self.key:
                raise ValueError(f"Cannot fold a {item.record} line into {self.key}")
        return fold_remainders(item.text for item in continuations)

    def check_sequence(self, continuations: Sequence[Continuation], line_number: int) -> None:
        """Require indices blank or 1 on the first line, then 2, 3, ...

        Args:
            continuations: Collected lines of one record
            line_number: 1-based line number of the first continuation

        Raises:
            ContinuationError: On the first out-of-sequence index
        """
        for position, item in enumerate(continuations):
            allowed = (0, 1) if position == 0 else (position + 1,)
            if item.index not in allowed:
                raise ContinuationError(
                    self.key,
                    line_number + position,
                    f"continuation {item.index}, expected {allowed[-1]}",
                )
