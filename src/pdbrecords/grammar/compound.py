"""Grammars for COMPND, SOURCE, KEYWDS, EXPDTA, AUTHOR and REVDAT.

REVDAT differs from the other continuation records: its lines are grouped
by modification number (columns 8-10) rather than folded as one block,
and each group becomes one :class:`Revdat` entry of a single
:class:`Revdats` record.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from pdbrecords.config import ParserConfig
from pdbrecords.data.records import (
    Author,
    Authors,
    Cmpnd,
    Experimental,
    ExperimentalTechnique,
    Keywds,
    ModificationType,
    Revdat,
    Revdats,
    Source,
)
from pdbrecords.errors import PdbParseError, PrimitiveMismatch
from pdbrecords.grammar.base import ContinuationGrammar, RecordGrammar
from pdbrecords.grammar.continuation import ContinuationLayout, fold_remainders
from pdbrecords.grammar.lines import SourceLines
from pdbrecords.grammar.primitives import (
    alphanum_word,
    date_parser,
    delimited_text,
    expect_end,
    idcode_list,
    record_name,
    separated_list,
    space0,
    space1,
    take,
    threedigit_integer,
)
from pdbrecords.grammar.tokens import parse_token_list


_comma_list = separated_list(delimited_text(","), ",")
_semicolon_list = separated_list(delimited_text(";"), ";")


def author_list_parser(text: str, pos: int = 0) -> Tuple[List[Author], int]:
    """Comma-separated author names, blank entries dropped."""
    names, pos = _comma_list(text, pos)
    return [Author(name) for name in names if name], pos


class CmpndGrammar(ContinuationGrammar):
    """COMPND: specification tokens describing the macromolecules."""

    layout = ContinuationLayout.wide("COMPND")
    record_type = Cmpnd

    def build_text(self, text: str, config: ParserConfig) -> Cmpnd:
        return Cmpnd(tokens=tuple(parse_token_list(text)))


class SourceGrammar(ContinuationGrammar):
    """SOURCE: specification tokens describing the biological source."""

    layout = ContinuationLayout.wide("SOURCE")
    record_type = Source

    def build_text(self, text: str, config: ParserConfig) -> Source:
        return Source(tokens=tuple(parse_token_list(text)))


class KeywdsGrammar(ContinuationGrammar):
    layout = ContinuationLayout.standard("KEYWDS")
    record_type = Keywds

    def build_text(self, text: str, config: ParserConfig) -> Keywds:
        keywords, pos = _comma_list(text)
        expect_end(text, pos, "keyword")
        return Keywds(keywords=tuple(k for k in keywords if k))


class ExpdtaGrammar(ContinuationGrammar):
    """EXPDTA: ``;``-separated experimental techniques."""

    layout = ContinuationLayout.standard("EXPDTA")
    record_type = Experimental

    def build_text(self, text: str, config: ParserConfig) -> Experimental:
        names, pos = _semicolon_list(text)
        expect_end(text, pos, "technique")
        techniques = []
        for name in names:
            if not name:
                continue
            try:
                techniques.append(ExperimentalTechnique.from_name(name))
            except ValueError as e:
                raise PrimitiveMismatch("experimental technique", 0, name) from e
        return Experimental(techniques=tuple(techniques))


class AuthorGrammar(ContinuationGrammar):
    layout = ContinuationLayout.standard("AUTHOR")
    record_type = Authors

    def build_text(self, text: str, config: ParserConfig) -> Authors:
        authors, pos = author_list_parser(text)
        expect_end(text, pos, "author name")
        return Authors(authors=tuple(authors))


class RevdatGrammar(RecordGrammar):
    """REVDAT: revision history, grouped by modification number.

    Line layout: modification number (8-10), continuation (11-12),
    then date (14-22), ID code (24-27), modification type (32) and up to
    four modified record names (40-66). Continuation lines of a
    modification carry only record names.
    """

    name = "REVDAT"
    record_type = Revdats

    def __init__(self):
        self._tag = record_name("REVDAT")

    def _parse_line(self, line: str) -> Tuple[int, str]:
        self._tag(line, 0)
        number, _ = threedigit_integer(line, 7)
        return number, line[12:].strip()

    def match(self, lines: SourceLines, index: int) -> Tuple[List[Tuple[int, int, str]], int]:
        if not lines.has(index):
            raise PrimitiveMismatch(self.name, index, "end of input")
        number, text = self._parse_line(lines[index])
        entries = [(number, index + 1, text)]
        index += 1
        while lines.has(index):
            try:
                number, text = self._parse_line(lines[index])
            except PrimitiveMismatch:
                break
            entries.append((number, index + 1, text))
            index += 1
        return entries, index

    def build(self, entries: List[Tuple[int, int, str]], config: ParserConfig) -> Revdats:
        groups: Dict[int, List[Tuple[int, str]]] = {}
        for number, line_number, text in entries:
            groups.setdefault(number, []).append((line_number, text))

        revdat = []
        for number, group in groups.items():
            text = fold_remainders(text for _, text in group)
            try:
                revdat.append(self._parse_group(number, text, config))
            except PdbParseError as e:
                self.handle_failure(e, group[0][0], config)
                revdat.append(Revdat(modification_number=number))
        return Revdats(revdat=tuple(revdat))

    def _parse_group(self, number: int, text: str, config: ParserConfig) -> Revdat:
        _, pos = space0(text)
        modification_date, pos = date_parser(text, pos, config.century_pivot)
        _, pos = space1(text, pos)
        idcode, pos = alphanum_word(text, pos)
        _, pos = space1(text, pos)
        code, pos = take(text, pos, 1)
        detail, pos = idcode_list(text, pos)
        expect_end(text, pos, "record name")
        return Revdat(
            modification_number=number,
            modification_date=modification_date,
            idcode=idcode,
            modification_type=ModificationType.from_code(code),
            modification_detail=tuple(detail),
        )


cmpnd_record_parser = CmpndGrammar()
source_record_parser = SourceGrammar()
keywds_record_parser = KeywdsGrammar()
expdta_record_parser = ExpdtaGrammar()
author_record_parser = AuthorGrammar()
revdat_record_parser = RevdatGrammar()
