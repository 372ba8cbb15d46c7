"""Read-only query façade over parsed PDB records.

Records are grouped by section:

- ``PdbFile.header``: title-section records (HEADER, TITLE, COMPND, ...)
- ``PdbFile.journal``: JRNL sub-records
- ``PdbFile.primary``: primary-structure records (SEQRES, DBREF, ...)

Single-valued accessors return the first matching record, or None, so a
file with duplicate records answers with the first occurrence.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Type, TypeVar

from pdbrecords.data.records import (
    Authors,
    Caveat,
    Cmpnd,
    Dbref,
    Experimental,
    Header,
    JournalAuthors,
    JournalCitation,
    JournalDoi,
    JournalEditors,
    JournalPublication,
    JournalPubMedId,
    JournalReference,
    JournalTitle,
    Keywds,
    Mdltyp,
    Modres,
    Nummdl,
    Obslte,
    Record,
    Remark,
    Revdats,
    Seqadv,
    Seqres,
    Source,
    Split,
    Sprsde,
    Title,
)


R = TypeVar("R", bound=Record)


def _first(record_type: Type[R]) -> Callable[["_Section"], Optional[R]]:
    def accessor(self: "_Section") -> Optional[R]:
        return self._first(record_type)
    accessor.__doc__ = f"First {record_type.__name__} record, or None."
    return accessor


def _all(record_type: Type[R]) -> Callable[["_Section"], List[R]]:
    def accessor(self: "_Section") -> List[R]:
        return self._all(record_type)
    accessor.__doc__ = f"All {record_type.__name__} records in input order."
    return accessor


class _Section:
    def __init__(self, records: Sequence[Record]):
        self._records = records

    def _first(self, record_type: Type[R]) -> Optional[R]:
        for record in self._records:
            if isinstance(record, record_type):
                return record
        return None

    def _all(self, record_type: Type[R]) -> List[R]:
        return [r for r in self._records if isinstance(r, record_type)]


class HeaderSection(_Section):
    """Title-section accessors."""

    header = _first(Header)
    title = _first(Title)
    obslte = _first(Obslte)
    split = _first(Split)
    caveat = _first(Caveat)
    sprsde = _first(Sprsde)
    cmpnd = _first(Cmpnd)
    source = _first(Source)
    keywds = _first(Keywds)
    expdta = _first(Experimental)
    nummdl = _first(Nummdl)
    mdltyp = _first(Mdltyp)
    authors = _first(Authors)
    revdats = _first(Revdats)

    def remarks(self, number: Optional[int] = None) -> List[Remark]:
        """REMARK records, optionally only those with ``number``."""
        remarks = self._all(Remark)
        if number is None:
            return remarks
        return [r for r in remarks if r.remark_number == number]


class JournalSection(_Section):
    """Primary citation (JRNL) accessors."""

    authors = _first(JournalAuthors)
    title = _first(JournalTitle)
    editors = _first(JournalEditors)
    reference = _first(JournalReference)
    citation = _first(JournalCitation)
    publication = _first(JournalPublication)
    pubmedid = _first(JournalPubMedId)
    doi = _first(JournalDoi)


class PrimarySection(_Section):
    """Primary-structure accessors. Each returns every matching record."""

    seqres = _all(Seqres)
    dbrefs = _all(Dbref)
    seqadvs = _all(Seqadv)
    modres = _all(Modres)


class PdbFile:
    """Parsed contents of one PDB file.

    Attributes:
        records: Records in input order
        remaining: Input text the parser did not consume
    """

    def __init__(self, records: Sequence[Record], remaining: str = ""):
        self.records = list(records)
        self.remaining = remaining

    @property
    def header(self) -> HeaderSection:
        return HeaderSection(self.records)

    @property
    def journal(self) -> JournalSection:
        return JournalSection(self.records)

    @property
    def primary(self) -> PrimarySection:
        return PrimarySection(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __repr__(self) -> str:
        header = self.header.header()
        id_code = header.id_code if header else "?"
        return f"PdbFile(id_code={id_code!r}, records={len(self.records)})"
