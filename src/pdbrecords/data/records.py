"""Record data classes for parsed PDB files.

Every successfully parsed logical record (one or more physical lines) is
represented by exactly one immutable :class:`Record` subclass instance.
All payload fields carry defaults, so ``Header()`` and friends are the
default-valued records substituted when a record's content cannot be
parsed.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from enum import Enum, auto
from typing import Any, ClassVar, Dict, Optional, Tuple

from pdbrecords.data.tokens import Token


class RecordKind(Enum):
    """Record types produced by the parser."""

    HEADER = "HEADER"
    OBSLTE = "OBSLTE"
    TITLE = "TITLE"
    SPLIT = "SPLIT"
    CAVEAT = "CAVEAT"
    SPRSDE = "SPRSDE"
    SEQRES = "SEQRES"
    MDLTYP = "MDLTYP"
    REVDAT = "REVDAT"
    COMPND = "COMPND"
    SOURCE = "SOURCE"
    KEYWDS = "KEYWDS"
    EXPDTA = "EXPDTA"
    NUMMDL = "NUMMDL"
    AUTHOR = "AUTHOR"
    JRNL_AUTH = "JRNL AUTH"
    JRNL_TITL = "JRNL TITL"
    JRNL_EDIT = "JRNL EDIT"
    JRNL_REF = "JRNL REF"
    JRNL_REFN = "JRNL REFN"
    JRNL_PUBL = "JRNL PUBL"
    JRNL_PMID = "JRNL PMID"
    JRNL_DOI = "JRNL DOI"
    DBREF = "DBREF"
    DBREF1 = "DBREF1"
    DBREF2 = "DBREF2"
    SEQADV = "SEQADV"
    MODRES = "MODRES"
    REMARK = "REMARK"


class ModificationType(Enum):
    """REVDAT modification type (column 32)."""

    INITIAL_RELEASE = auto()
    OTHER_MODIFICATION = auto()
    UNKNOWN_MODIFICATION = auto()

    @classmethod
    def from_code(cls, code: str) -> "ModificationType":
        """Classify a one-character code. Never fails."""
        if code == "0":
            return cls.INITIAL_RELEASE
        if code == "1":
            return cls.OTHER_MODIFICATION
        return cls.UNKNOWN_MODIFICATION


class SerialNumber(Enum):
    """Kind of serial number in a JRNL REFN record."""

    ISSN = "ISSN"
    ESSN = "ESSN"


class ExperimentalTechnique(Enum):
    """Permitted EXPDTA technique names."""

    X_RAY_DIFFRACTION = "X-RAY DIFFRACTION"
    FIBER_DIFFRACTION = "FIBER DIFFRACTION"
    NEUTRON_DIFFRACTION = "NEUTRON DIFFRACTION"
    ELECTRON_CRYSTALLOGRAPHY = "ELECTRON CRYSTALLOGRAPHY"
    ELECTRON_MICROSCOPY = "ELECTRON MICROSCOPY"
    SOLID_STATE_NMR = "SOLID-STATE NMR"
    SOLUTION_NMR = "SOLUTION NMR"
    SOLUTION_SCATTERING = "SOLUTION SCATTERING"

    @classmethod
    def from_name(cls, name: str) -> "ExperimentalTechnique":
        """Look up a technique, ignoring surrounding and repeated spaces.

        Raises:
            ValueError: If the name is not a permitted technique
        """
        return cls(" ".join(name.split()))


@dataclass(frozen=True)
class Author:
    """An author or editor name, stored without surrounding whitespace."""

    name: str

    def __post_init__(self):
        object.__setattr__(self, "name", self.name.strip())

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Revdat:
    """One modification entry of the REVDAT record.

    Attributes:
        modification_number: Modification number (columns 8-10)
        modification_date: Date of the modification
        idcode: ID code of the entry
        modification_type: Initial release, other, or unknown
        modification_detail: Names of the record types that changed
    """

    modification_number: int = 0
    modification_date: Optional[date] = None
    idcode: str = ""
    modification_type: ModificationType = ModificationType.UNKNOWN_MODIFICATION
    modification_detail: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Record:
    """Base class for all parsed records."""

    kind: ClassVar[RecordKind]

    def to_dict(self) -> Dict[str, Any]:
        """Convert the record to a dictionary, including its kind."""
        data = asdict(self)
        data["kind"] = self.kind.value
        return data


# =============================================================================
# Title section
# =============================================================================


@dataclass(frozen=True)
class Header(Record):
    kind: ClassVar[RecordKind] = RecordKind.HEADER

    classification: str = ""
    deposition_date: Optional[date] = None
    id_code: str = ""


@dataclass(frozen=True)
class Obslte(Record):
    """Entry withdrawn and replaced by newer entries."""

    kind: ClassVar[RecordKind] = RecordKind.OBSLTE

    replacement_date: Optional[date] = None
    id_code: str = ""
    replacement_ids: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Title(Record):
    kind: ClassVar[RecordKind] = RecordKind.TITLE

    title: str = ""


@dataclass(frozen=True)
class Split(Record):
    """Entries that together make up one large structure."""

    kind: ClassVar[RecordKind] = RecordKind.SPLIT

    id_codes: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Caveat(Record):
    kind: ClassVar[RecordKind] = RecordKind.CAVEAT

    id_code: str = ""
    comment: str = ""


@dataclass(frozen=True)
class Sprsde(Record):
    """Entries superseded by this one."""

    kind: ClassVar[RecordKind] = RecordKind.SPRSDE

    sprsde_date: Optional[date] = None
    id_code: str = ""
    superseded: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Cmpnd(Record):
    kind: ClassVar[RecordKind] = RecordKind.COMPND

    tokens: Tuple[Token, ...] = ()


@dataclass(frozen=True)
class Source(Record):
    kind: ClassVar[RecordKind] = RecordKind.SOURCE

    tokens: Tuple[Token, ...] = ()


@dataclass(frozen=True)
class Keywds(Record):
    kind: ClassVar[RecordKind] = RecordKind.KEYWDS

    keywords: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Experimental(Record):
    kind: ClassVar[RecordKind] = RecordKind.EXPDTA

    techniques: Tuple[ExperimentalTechnique, ...] = ()


@dataclass(frozen=True)
class Nummdl(Record):
    kind: ClassVar[RecordKind] = RecordKind.NUMMDL

    num: int = 0


@dataclass(frozen=True)
class Mdltyp(Record):
    kind: ClassVar[RecordKind] = RecordKind.MDLTYP

    structural_annotation: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Authors(Record):
    kind: ClassVar[RecordKind] = RecordKind.AUTHOR

    authors: Tuple[Author, ...] = ()


@dataclass(frozen=True)
class Revdats(Record):
    """All REVDAT lines of a file, one entry per modification number."""

    kind: ClassVar[RecordKind] = RecordKind.REVDAT

    revdat: Tuple[Revdat, ...] = ()


# =============================================================================
# Journal sub-records
# =============================================================================


@dataclass(frozen=True)
class JournalAuthors(Record):
    kind: ClassVar[RecordKind] = RecordKind.JRNL_AUTH

    authors: Tuple[Author, ...] = ()


@dataclass(frozen=True)
class JournalTitle(Record):
    kind: ClassVar[RecordKind] = RecordKind.JRNL_TITL

    title: str = ""


@dataclass(frozen=True)
class JournalEditors(Record):
    kind: ClassVar[RecordKind] = RecordKind.JRNL_EDIT

    editors: Tuple[Author, ...] = ()


@dataclass(frozen=True)
class JournalReference(Record):
    """Publication name, volume, first page and year of a citation."""

    kind: ClassVar[RecordKind] = RecordKind.JRNL_REF

    publication_name: str = ""
    volume: Optional[int] = None
    page: Optional[int] = None
    year: Optional[int] = None


@dataclass(frozen=True)
class JournalCitation(Record):
    kind: ClassVar[RecordKind] = RecordKind.JRNL_REFN

    serial_type: Optional[SerialNumber] = None
    serial: Optional[str] = None


@dataclass(frozen=True)
class JournalPublication(Record):
    kind: ClassVar[RecordKind] = RecordKind.JRNL_PUBL

    publication: str = ""


@dataclass(frozen=True)
class JournalPubMedId(Record):
    kind: ClassVar[RecordKind] = RecordKind.JRNL_PMID

    id: int = 0


@dataclass(frozen=True)
class JournalDoi(Record):
    kind: ClassVar[RecordKind] = RecordKind.JRNL_DOI

    doi: str = ""


# =============================================================================
# Primary structure section
# =============================================================================


@dataclass(frozen=True)
class Seqres(Record):
    """Residue sequence of one chain.

    Attributes:
        chain_id: Chain identifier, None when column 12 is blank
        num_residues: Residue count declared on the first line
        residues: Residue names in sequence order
    """

    kind: ClassVar[RecordKind] = RecordKind.SEQRES

    chain_id: Optional[str] = None
    num_residues: int = 0
    residues: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Dbref(Record):
    """Cross-reference from a chain segment to a sequence database.

    Produced from a single DBREF line or a merged DBREF1/DBREF2 pair.
    """

    kind: ClassVar[RecordKind] = RecordKind.DBREF

    idcode: str = ""
    chain_id: Optional[str] = None
    seq_begin: int = 0
    initial_sequence: Optional[str] = None
    seq_end: int = 0
    ending_sequence: Optional[str] = None
    database: str = ""
    db_accession: str = ""
    db_idcode: str = ""
    db_seq_begin: int = 0
    idbns_begin: Optional[str] = None
    db_seq_end: int = 0
    dbins_end: Optional[str] = None


@dataclass(frozen=True)
class Dbref1(Record):
    kind: ClassVar[RecordKind] = RecordKind.DBREF1

    idcode: str = ""
    chain_id: Optional[str] = None
    seq_begin: int = 0
    initial_sequence: Optional[str] = None
    seq_end: int = 0
    ending_sequence: Optional[str] = None
    database: str = ""
    db_idcode: str = ""


@dataclass(frozen=True)
class Dbref2(Record):
    kind: ClassVar[RecordKind] = RecordKind.DBREF2

    idcode: str = ""
    chain_id: Optional[str] = None
    db_accession: str = ""
    seq_begin: int = 0
    seq_end: int = 0


@dataclass(frozen=True)
class Seqadv(Record):
    """Conflict between SEQRES and the referenced database sequence."""

    kind: ClassVar[RecordKind] = RecordKind.SEQADV

    idcode: str = ""
    residue_name: str = ""
    chain_id: Optional[str] = None
    seq_num: int = 0
    insertion_code: Optional[str] = None
    database: str = ""
    db_accession: str = ""
    db_residue: Optional[str] = None
    db_seq_num: Optional[int] = None
    conflict: str = ""


@dataclass(frozen=True)
class Modres(Record):
    """Modified residue and its standard parent residue."""

    kind: ClassVar[RecordKind] = RecordKind.MODRES

    idcode: str = ""
    residue_name: str = ""
    chain_id: Optional[str] = None
    seq_num: int = 0
    insertion_code: Optional[str] = None
    standard_residue_name: str = ""
    comment: str = ""


@dataclass(frozen=True)
class Remark(Record):
    """Consecutive REMARK lines sharing one remark number."""

    kind: ClassVar[RecordKind] = RecordKind.REMARK

    remark_number: int = 0
    lines: Tuple[str, ...] = ()
