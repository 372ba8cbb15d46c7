"""Grammars for the title section: HEADER, OBSLTE, TITLE, SPLIT, CAVEAT,
SPRSDE, NUMMDL and MDLTYP."""

from __future__ import annotations

from pdbrecords.config import ParserConfig
from pdbrecords.data.records import (
    Caveat,
    Header,
    Mdltyp,
    Nummdl,
    Obslte,
    Split,
    Sprsde,
    Title,
)
from pdbrecords.errors import PrimitiveMismatch
from pdbrecords.grammar.base import ContinuationGrammar, SingleLineGrammar
from pdbrecords.grammar.continuation import ContinuationLayout
from pdbrecords.grammar.primitives import (
    alphanum_word,
    date_parser,
    delimited_text,
    expect_end,
    fixed_text,
    fourdigit_integer,
    idcode_list,
    separated_list,
    space0,
    space1,
)


class HeaderGrammar(SingleLineGrammar):
    """HEADER: classification (11-50), deposition date (51-59), ID code (63-66)."""

    name = "HEADER"
    record_type = Header

    def build(self, line: str, config: ParserConfig) -> Header:
        classification, _ = fixed_text(line, 10, 40)
        deposition_date, _ = date_parser(line, 50, config.century_pivot)
        id_code, end = alphanum_word(line, 62)
        if end != 66:
            raise PrimitiveMismatch("4-character ID code", 62, line[62:66])
        return Header(
            classification=classification,
            deposition_date=deposition_date,
            id_code=id_code,
        )


class ObslteGrammar(ContinuationGrammar):
    """OBSLTE: replacement date, this entry's ID code, replacing ID codes."""

    layout = ContinuationLayout.standard("OBSLTE")
    record_type = Obslte

    def build_text(self, text: str, config: ParserConfig) -> Obslte:
        _, pos = space0(text)
        replacement_date, pos = date_parser(text, pos, config.century_pivot)
        _, pos = space1(text, pos)
        id_code, pos = alphanum_word(text, pos)
        replacement_ids, pos = idcode_list(text, pos)
        expect_end(text, pos, "ID code")
        return Obslte(
            replacement_date=replacement_date,
            id_code=id_code,
            replacement_ids=tuple(replacement_ids),
        )


class TitleGrammar(ContinuationGrammar):
    layout = ContinuationLayout.standard("TITLE")
    record_type = Title

    def build_text(self, text: str, config: ParserConfig) -> Title:
        return Title(title=text)


class SplitGrammar(ContinuationGrammar):
    layout = ContinuationLayout.standard("SPLIT")
    record_type = Split

    def build_text(self, text: str, config: ParserConfig) -> Split:
        id_codes, pos = idcode_list(text)
        expect_end(text, pos, "ID code")
        return Split(id_codes=tuple(id_codes))


class CaveatGrammar(ContinuationGrammar):
    """CAVEAT: ID code (12-15) followed by a free-text comment."""

    layout = ContinuationLayout.standard("CAVEAT")
    record_type = Caveat

    def build_text(self, text: str, config: ParserConfig) -> Caveat:
        id_code, pos = alphanum_word(text)
        return Caveat(id_code=id_code, comment=text[pos:].strip())


class SprsdeGrammar(ContinuationGrammar):
    """SPRSDE: supersession date, this entry's ID code, superseded ID codes."""

    layout = ContinuationLayout.standard("SPRSDE")
    record_type = Sprsde

    def build_text(self, text: str, config: ParserConfig) -> Sprsde:
        _, pos = space0(text)
        sprsde_date, pos = date_parser(text, pos, config.century_pivot)
        _, pos = space1(text, pos)
        id_code, pos = alphanum_word(text, pos)
        superseded, pos = idcode_list(text, pos)
        expect_end(text, pos, "ID code")
        return Sprsde(
            sprsde_date=sprsde_date,
            id_code=id_code,
            superseded=tuple(superseded),
        )


class NummdlGrammar(SingleLineGrammar):
    """NUMMDL: number of models (11-14)."""

    name = "NUMMDL"
    record_type = Nummdl

    def build(self, line: str, config: ParserConfig) -> Nummdl:
        num, _ = fourdigit_integer(line, 10)
        return Nummdl(num=num)


_annotation_list = separated_list(delimited_text(";"), ";")


class MdltypGrammar(ContinuationGrammar):
    """MDLTYP: ``;``-separated structural annotations."""

    layout = ContinuationLayout.standard("MDLTYP")
    record_type = Mdltyp

    def build_text(self, text: str, config: ParserConfig) -> Mdltyp:
        annotations, pos = _annotation_list(text)
        expect_end(text, pos, "annotation")
        return Mdltyp(structural_annotation=tuple(a for a in annotations if a))


header_record_parser = HeaderGrammar()
obslte_record_parser = ObslteGrammar()
title_record_parser = TitleGrammar()
split_record_parser = SplitGrammar()
caveat_record_parser = CaveatGrammar()
sprsde_record_parser = SprsdeGrammar()
nummdl_record_parser = NummdlGrammar()
mdltyp_record_parser = MdltypGrammar()
