"""Grammars for the primary structure section: SEQRES, DBREF, DBREF1,
DBREF2, SEQADV and MODRES.

All fields are read from fixed columns. Blank chain identifiers, insertion
codes and optional fields become None.
"""

from __future__ import annotations

from typing import List, Tuple

from pdbrecords.config import ParserConfig
from pdbrecords.data.records import Dbref, Dbref1, Dbref2, Modres, Seqadv, Seqres
from pdbrecords.errors import PrimitiveMismatch
from pdbrecords.grammar.base import RecordGrammar, SingleLineGrammar
from pdbrecords.grammar.lines import SourceLines
from pdbrecords.grammar.primitives import (
    expect_end,
    fivedigit_integer,
    fixed_text,
    fixed_width_integer,
    fourdigit_integer,
    opt,
    optional_char,
    record_name,
    residue_list_parser,
    threedigit_integer,
)


_seq_number = fixed_width_integer(4, signed=True)
_db_seq_number = opt(fixed_width_integer(5, signed=True))
_dbref2_seq_number = fixed_width_integer(10)


def _required_text(line: str, start: int, width: int, what: str) -> str:
    value, _ = fixed_text(line, start, width)
    if not value:
        raise PrimitiveMismatch(what, start, line[start:start + width])
    return value


class SeqresGrammar(RecordGrammar):
    """SEQRES: residue sequence of one chain.

    Consecutive SEQRES lines with the same chain identifier (column 12)
    form one record. Line layout: serial number (8-10), chain (12),
    residue count (14-17), up to 13 residue names (20-70).
    """

    name = "SEQRES"
    record_type = Seqres

    def __init__(self):
        self._tag = record_name("SEQRES")

    def match(self, lines: SourceLines, index: int) -> Tuple[List[str], int]:
        if not lines.has(index):
            raise PrimitiveMismatch(self.name, index, "end of input")
        first = lines[index]
        self._tag(first, 0)
        chain = first[11]
        group = [first]
        index += 1
        while lines.has(index) and lines[index].startswith("SEQRES") and lines[index][11] == chain:
            group.append(lines[index])
            index += 1
        return group, index

    def build(self, group: List[str], config: ParserConfig) -> Seqres:
        chain_id, _ = optional_char(group[0], 11)
        num_residues, _ = fourdigit_integer(group[0], 13)
        residues: List[str] = []
        for line in group:
            threedigit_integer(line, 7)
            names, pos = residue_list_parser(line, 19)
            expect_end(line, pos, "residue name")
            residues.extend(names)
        return Seqres(chain_id=chain_id, num_residues=num_residues, residues=tuple(residues))


class DbrefGrammar(SingleLineGrammar):
    """DBREF: one-line cross-reference to a sequence database."""

    name = "DBREF"
    record_type = Dbref

    def build(self, line: str, config: ParserConfig) -> Dbref:
        chain_id, _ = optional_char(line, 12)
        seq_begin, _ = _seq_number(line, 14)
        initial_sequence, _ = optional_char(line, 18)
        seq_end, _ = _seq_number(line, 20)
        ending_sequence, _ = optional_char(line, 24)
        db_accession, _ = fixed_text(line, 33, 8)
        db_idcode, _ = fixed_text(line, 42, 12)
        db_seq_begin, _ = fivedigit_integer(line, 55)
        idbns_begin, _ = optional_char(line, 60)
        db_seq_end, _ = fivedigit_integer(line, 62)
        dbins_end, _ = optional_char(line, 67)
        return Dbref(
            idcode=_required_text(line, 7, 4, "ID code"),
            chain_id=chain_id,
            seq_begin=seq_begin,
            initial_sequence=initial_sequence,
            seq_end=seq_end,
            ending_sequence=ending_sequence,
            database=_required_text(line, 26, 6, "database name"),
            db_accession=db_accession,
            db_idcode=db_idcode,
            db_seq_begin=db_seq_begin,
            idbns_begin=idbns_begin,
            db_seq_end=db_seq_end,
            dbins_end=dbins_end,
        )


class Dbref1Grammar(SingleLineGrammar):
    """DBREF1: first line of a long-identifier cross-reference."""

    name = "DBREF1"
    record_type = Dbref1

    def build(self, line: str, config: ParserConfig) -> Dbref1:
        chain_id, _ = optional_char(line, 12)
        seq_begin, _ = _seq_number(line, 14)
        initial_sequence, _ = optional_char(line, 18)
        seq_end, _ = _seq_number(line, 20)
        ending_sequence, _ = optional_char(line, 24)
        return Dbref1(
            idcode=_required_text(line, 7, 4, "ID code"),
            chain_id=chain_id,
            seq_begin=seq_begin,
            initial_sequence=initial_sequence,
            seq_end=seq_end,
            ending_sequence=ending_sequence,
            database=_required_text(line, 26, 6, "database name"),
            db_idcode=_required_text(line, 47, 20, "database ID code"),
        )


class Dbref2Grammar(SingleLineGrammar):
    """DBREF2: accession (19-40) and database sequence range (46-55, 58-67)."""

    name = "DBREF2"
    record_type = Dbref2

    def build(self, line: str, config: ParserConfig) -> Dbref2:
        chain_id, _ = optional_char(line, 12)
        seq_begin, _ = _dbref2_seq_number(line, 45)
        seq_end, _ = _dbref2_seq_number(line, 57)
        return Dbref2(
            idcode=_required_text(line, 7, 4, "ID code"),
            chain_id=chain_id,
            db_accession=_required_text(line, 18, 22, "database accession"),
            seq_begin=seq_begin,
            seq_end=seq_end,
        )


class DbrefPairGrammar(RecordGrammar):
    """A DBREF1 line immediately followed by its DBREF2 line.

    Both lines must name the same entry (columns 8-11) and chain
    (column 13). The pair is merged into one :class:`Dbref`.
    """

    name = "DBREF1/DBREF2"
    record_type = Dbref

    def __init__(self):
        self.first = Dbref1Grammar()
        self.second = Dbref2Grammar()

    def match(self, lines: SourceLines, index: int) -> Tuple[Tuple[str, str], int]:
        first, _ = self.first.match(lines, index)
        second, _ = self.second.match(lines, index + 1)
        if first[7:13] != second[7:13]:
            raise PrimitiveMismatch("DBREF2 for the same entry and chain", 7, second[7:13])
        return (first, second), index + 2

    def build(self, pair: Tuple[str, str], config: ParserConfig) -> Dbref:
        first = self.first.build(pair[0], config)
        second = self.second.build(pair[1], config)
        return Dbref(
            idcode=first.idcode,
            chain_id=first.chain_id,
            seq_begin=first.seq_begin,
            initial_sequence=first.initial_sequence,
            seq_end=first.seq_end,
            ending_sequence=first.ending_sequence,
            database=first.database,
            db_accession=second.db_accession,
            db_idcode=first.db_idcode,
            db_seq_begin=second.seq_begin,
            db_seq_end=second.seq_end,
        )


class SeqadvGrammar(SingleLineGrammar):
    """SEQADV: difference between SEQRES and the database sequence."""

    name = "SEQADV"
    record_type = Seqadv

    def build(self, line: str, config: ParserConfig) -> Seqadv:
        chain_id, _ = optional_char(line, 16)
        seq_num, _ = _seq_number(line, 18)
        insertion_code, _ = optional_char(line, 22)
        db_residue, _ = fixed_text(line, 39, 3)
        db_seq_num, _ = _db_seq_number(line, 43)
        conflict, _ = fixed_text(line, 49, 21)
        return Seqadv(
            idcode=_required_text(line, 7, 4, "ID code"),
            residue_name=_required_text(line, 12, 3, "residue name"),
            chain_id=chain_id,
            seq_num=seq_num,
            insertion_code=insertion_code,
            database=_required_text(line, 24, 4, "database name"),
            db_accession=_required_text(line, 29, 9, "database accession"),
            db_residue=db_residue or None,
            db_seq_num=db_seq_num,
            conflict=conflict,
        )


class ModresGrammar(SingleLineGrammar):
    """MODRES: a modified residue and its standard parent."""

    name = "MODRES"
    record_type = Modres

    def build(self, line: str, config: ParserConfig) -> Modres:
        chain_id, _ = optional_char(line, 16)
        seq_num, _ = _seq_number(line, 18)
        insertion_code, _ = optional_char(line, 22)
        comment, _ = fixed_text(line, 29, 41)
        return Modres(
            idcode=_required_text(line, 7, 4, "ID code"),
            residue_name=_required_text(line, 12, 3, "residue name"),
            chain_id=chain_id,
            seq_num=seq_num,
            insertion_code=insertion_code,
            standard_residue_name=_required_text(line, 24, 3, "standard residue name"),
            comment=comment,
        )


seqres_record_parser = SeqresGrammar()
dbref_record_parser = DbrefGrammar()
dbref1_record_parser = Dbref1Grammar()
dbref2_record_parser = Dbref2Grammar()
dbref_pair_record_parser = DbrefPairGrammar()
seqadv_record_parser = SeqadvGrammar()
modres_record_parser = ModresGrammar()
