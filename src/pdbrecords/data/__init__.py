"""Data model for parsed PDB records."""

from pdbrecords.data.records import (
    Author,
    Authors,
    Caveat,
    Cmpnd,
    Dbref,
    Dbref1,
    Dbref2,
    Experimental,
    ExperimentalTechnique,
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
    ModificationType,
    Modres,
    Nummdl,
    Obslte,
    Record,
    RecordKind,
    Remark,
    Revdat,
    Revdats,
    Seqadv,
    Seqres,
    SerialNumber,
    Source,
    Split,
    Sprsde,
    Title,
)
from pdbrecords.data.tokens import Token, TokenKind

__all__ = [
    "Author",
    "Authors",
    "Caveat",
    "Cmpnd",
    "Dbref",
    "Dbref1",
    "Dbref2",
    "Experimental",
    "ExperimentalTechnique",
    "Header",
    "JournalAuthors",
    "JournalCitation",
    "JournalDoi",
    "JournalEditors",
    "JournalPublication",
    "JournalPubMedId",
    "JournalReference",
    "JournalTitle",
    "Keywds",
    "Mdltyp",
    "ModificationType",
    "Modres",
    "Nummdl",
    "Obslte",
    "Record",
    "RecordKind",
    "Remark",
    "Revdat",
    "Revdats",
    "Seqadv",
    "Seqres",
    "SerialNumber",
    "Source",
    "Split",
    "Sprsde",
    "Title",
    "Token",
    "TokenKind",
]
