"""Grammars for JRNL sub-records.

Every JRNL line carries ``JRNL`` in columns 1-6 and a sub-record name in
columns 13-16 (AUTH, TITL, EDIT, REF, PUBL, REFN, PMID, DOI). Each
sub-record is an independent record with its own grammar:

- AUTH, EDIT: author lists folded over continuation lines
- TITL, PUBL: free text folded over continuation lines
- REF: publication name folded over continuation lines; volume, page
  and year taken from the first line that has them
- REFN, PMID, DOI: single line
"""

from __future__ import annotations

from typing import Optional

from pdbrecords.config import ParserConfig
from pdbrecords.data.records import (
    JournalAuthors,
    JournalCitation,
    JournalDoi,
    JournalEditors,
    JournalPublication,
    JournalPubMedId,
    JournalReference,
    JournalTitle,
    SerialNumber,
)
from pdbrecords.grammar.base import ContinuationBlock, ContinuationGrammar
from pdbrecords.grammar.compound import author_list_parser
from pdbrecords.grammar.continuation import ContinuationLayout, fold_remainders
from pdbrecords.grammar.primitives import (
    expect_end,
    fixed_text,
    fixed_width_integer,
    integer,
    opt,
)


class JournalAuthorsGrammar(ContinuationGrammar):
    layout = ContinuationLayout.journal("AUTH")
    record_type = JournalAuthors

    def build_text(self, text: str, config: ParserConfig) -> JournalAuthors:
        authors, pos = author_list_parser(text)
        expect_end(text, pos, "author name")
        return JournalAuthors(authors=tuple(authors))


class JournalTitleGrammar(ContinuationGrammar):
    layout = ContinuationLayout.journal("TITL")
    record_type = JournalTitle

    def build_text(self, text: str, config: ParserConfig) -> JournalTitle:
        return JournalTitle(title=text)


class JournalEditorsGrammar(ContinuationGrammar):
    layout = ContinuationLayout.journal("EDIT")
    record_type = JournalEditors

    def build_text(self, text: str, config: ParserConfig) -> JournalEditors:
        editors, pos = author_list_parser(text)
        expect_end(text, pos, "editor name")
        return JournalEditors(editors=tuple(editors))


_volume = opt(fixed_width_integer(4))
_page = opt(fixed_width_integer(5))
_year = opt(fixed_width_integer(4))


class JournalReferenceGrammar(ContinuationGrammar):
    """JRNL REF: publication name (20-47), volume (52-55), page (57-61),
    year (63-66).

    Only the publication name continues across lines. For volume, page
    and year the first line that carries a value wins.
    """

    layout = ContinuationLayout.journal("REF")
    record_type = JournalReference

    def build(self, content: ContinuationBlock, config: ParserConfig) -> JournalReference:
        if config.strict_continuation:
            self.folder.check_sequence(content.continuations, content.first_line)

        names = []
        volume: Optional[int] = None
        page: Optional[int] = None
        year: Optional[int] = None
        for line in content.lines:
            name, _ = fixed_text(line, 19, 28)
            names.append(name)
            if volume is None:
                volume, _ = _volume(line, 51)
            if page is None:
                page, _ = _page(line, 56)
            if year is None:
                year, _ = _year(line, 62)
        return JournalReference(
            publication_name=fold_remainders(names),
            volume=volume,
            page=page,
            year=year,
        )


class JournalCitationGrammar(ContinuationGrammar):
    """JRNL REFN: ISSN or ESSN marker (36-39) and serial number (41-65)."""

    layout = ContinuationLayout.journal("REFN")
    record_type = JournalCitation
    single_line = True

    def build(self, content: ContinuationBlock, config: ParserConfig) -> JournalCitation:
        line = content.lines[0]
        marker, _ = fixed_text(line, 35, 4)
        serial, _ = fixed_text(line, 40, 25)
        serial_type = SerialNumber(marker) if marker in ("ISSN", "ESSN") else None
        return JournalCitation(serial_type=serial_type, serial=serial or None)


class JournalPublicationGrammar(ContinuationGrammar):
    layout = ContinuationLayout.journal("PUBL")
    record_type = JournalPublication

    def build_text(self, text: str, config: ParserConfig) -> JournalPublication:
        return JournalPublication(publication=text)


class JournalPubMedIdGrammar(ContinuationGrammar):
    layout = ContinuationLayout.journal("PMID")
    record_type = JournalPubMedId
    single_line = True

    def build_text(self, text: str, config: ParserConfig) -> JournalPubMedId:
        pubmed_id, pos = integer(text)
        expect_end(text, pos, "PubMed ID")
        return JournalPubMedId(id=pubmed_id)


class JournalDoiGrammar(ContinuationGrammar):
    layout = ContinuationLayout.journal("DOI")
    record_type = JournalDoi
    single_line = True

    def build_text(self, text: str, config: ParserConfig) -> JournalDoi:
        return JournalDoi(doi=text)


jrnl_auth_record_parser = JournalAuthorsGrammar()
jrnl_titl_record_parser = JournalTitleGrammar()
jrnl_edit_record_parser = JournalEditorsGrammar()
jrnl_ref_record_parser = JournalReferenceGrammar()
jrnl_refn_record_parser = JournalCitationGrammar()
jrnl_publ_record_parser = JournalPublicationGrammar()
jrnl_pmid_record_parser = JournalPubMedIdGrammar()
jrnl_doi_record_parser = JournalDoiGrammar()
