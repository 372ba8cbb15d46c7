"""Tests for the record dispatcher, configuration, file parser and façade."""

from datetime import date

import pytest


# =============================================================================
# Dispatcher
# =============================================================================


class TestDispatcher:
    """Tests for the top-level parse loop."""

    def test_empty_input(self):
        """Test that empty input yields no records."""
        from pdbrecords import parse

        result = parse("")

        assert result.records == []
        assert result.remaining == ""
        assert result.lines_consumed == 0

    def test_header_section(self, ejg_header):
        """Test that every record of the 1EJG header section is parsed in order."""
        from pdbrecords import parse

        result = parse(ejg_header)

        assert [r.kind.value for r in result.records] == [
            "HEADER",
            "TITLE",
            "COMPND",
            "SOURCE",
            "KEYWDS",
            "AUTHOR",
            "JRNL AUTH",
            "JRNL TITL",
            "JRNL REF",
            "JRNL REFN",
            "JRNL PMID",
            "JRNL DOI",
        ]
        assert result.remaining == ""
        assert result.lines_consumed == 20

    def test_stops_at_unmodeled_record(self, ejg_header, atom_line):
        """Test that the first unmodeled record ends the parse."""
        from pdbrecords import parse

        text = ejg_header + atom_line + "END\n"

        result = parse(text)

        assert len(result.records) == 12
        assert result.remaining == atom_line + "END\n"

    def test_stops_in_the_middle(self):
        """Test that records after an unknown line are left unparsed."""
        from pdbrecords import parse

        text = (
            "HEADER    PHOTOSYNTHESIS                          28-MAR-07   2UXK \n"
            "FOO       BAR\n"
            "TITLE     CRAMBIN\n"
        )

        result = parse(text)

        assert len(result.records) == 1
        assert result.remaining == "FOO       BAR\nTITLE     CRAMBIN\n"

    def test_line_endings(self, ejg_header):
        """Test that CRLF and a missing final newline give the same records."""
        from pdbrecords import parse

        expected = parse(ejg_header).records

        assert parse(ejg_header.replace("\n", "\r\n")).records == expected
        assert parse(ejg_header.rstrip("\n")).records == expected

    def test_parse_is_repeatable(self, ejg_header):
        """Test that one dispatcher gives identical results on repeated parses."""
        from pdbrecords import RecordDispatcher

        dispatcher = RecordDispatcher()

        assert dispatcher.parse(ejg_header) == dispatcher.parse(ejg_header)

    def test_bytes_input(self, ejg_header, atom_line):
        """Test that byte input returns a byte remainder."""
        from pdbrecords import parse

        result = parse((ejg_header + atom_line).encode("utf-8"))

        assert len(result.records) == 12
        assert result.remaining == atom_line.encode("utf-8")

    def test_invalid_utf8(self):
        """Test that undecodable bytes are rejected."""
        from pdbrecords import parse
        from pdbrecords.errors import InputDecodeError, PdbParseError

        with pytest.raises(InputDecodeError) as exc_info:
            parse(b"HEADER    \xff\xfe\n")
        assert isinstance(exc_info.value, PdbParseError)

    def test_primary_structure(self, insulin_primary):
        """Test REMARK and primary-structure records up to HET."""
        from pdbrecords import parse

        result = parse(insulin_primary)

        assert [r.kind.value for r in result.records] == [
            "REMARK",
            "REMARK",
            "DBREF",
            "SEQADV",
            "SEQRES",
            "SEQRES",
            "MODRES",
        ]
        assert result.records[5].chain_id == "B"
        assert len(result.records[5].residues) == 30
        assert result.remaining == "HET    NAG  A 901      14\n"

    def test_dbref_pair_dispatch(self):
        """Test that a DBREF1/DBREF2 pair becomes one DBREF record."""
        from pdbrecords import parse
        from pdbrecords.data.records import Dbref

        text = (
            "DBREF1 1ABC A   61   322  UNIMES               UPI000148A153\n"
            "DBREF2 1ABC A     MES00005880000                     61         322\n"
        )

        result = parse(text)

        assert len(result.records) == 1
        assert isinstance(result.records[0], Dbref)
        assert result.records[0].db_accession == "MES00005880000"

    def test_record_priority(self, ejg_header):
        """Test that only configured grammars are tried."""
        from pdbrecords import ParserConfig, parse
        from pdbrecords.data.records import Dbref1, Dbref2

        result = parse(ejg_header, ParserConfig(record_priority=["HEADER"]))
        assert len(result.records) == 1
        assert result.remaining.startswith("TITLE")

        text = (
            "DBREF1 1ABC A   61   322  UNIMES               UPI000148A153\n"
            "DBREF2 1ABC A     MES00005880000                     61         322\n"
        )
        result = parse(text, ParserConfig(record_priority=["DBREF1", "DBREF2"]))
        assert [type(r) for r in result.records] == [Dbref1, Dbref2]

    @pytest.mark.integration
    def test_complete_file(self, ejg_header, revdat_1bxo, insulin_primary):
        """Test a file combining title, journal and primary records."""
        from pdbrecords import parse

        result = parse(ejg_header + revdat_1bxo + insulin_primary)

        assert len(result.records) == 12 + 1 + 7
        assert result.remaining.startswith("HET ")


class TestErrorPolicy:
    """Tests for recovery from unparsable records."""

    def _broken(self, ejg_header):
        return ejg_header.replace("FRAGMENT: CRAMBIN", "FRAGMENTS: CRAMBIN")

    def test_default_policy_recovers(self, ejg_header, caplog):
        """Test that a bad record is replaced and parsing continues."""
        import logging

        from pdbrecords import parse
        from pdbrecords.data.records import Cmpnd

        with caplog.at_level(logging.WARNING, logger="pdbrecords"):
            result = parse(self._broken(ejg_header))

        assert len(result.records) == 12
        assert result.records[2] == Cmpnd()
        assert result.records[3].kind.value == "SOURCE"
        assert "Unparsable COMPND record at line 3" in caplog.text

    def test_raise_policy(self, ejg_header, raise_config):
        """Test that the raise policy reports the record and line."""
        from pdbrecords import parse
        from pdbrecords.errors import RecordGrammarError

        with pytest.raises(RecordGrammarError) as exc_info:
            parse(self._broken(ejg_header), raise_config)

        assert exc_info.value.record == "COMPND"
        assert exc_info.value.line == 3
        assert "COMPND" in str(exc_info.value)


# =============================================================================
# Configuration
# =============================================================================


class TestParserConfig:
    """Tests for ParserConfig."""

    def test_defaults(self):
        """Test default settings."""
        from pdbrecords.config import DEFAULT_RECORD_PRIORITY, ErrorPolicy, ParserConfig

        config = ParserConfig()

        assert config.error_policy == ErrorPolicy.DEFAULT
        assert config.century_pivot == 69
        assert config.strict_continuation is False
        assert config.record_priority == list(DEFAULT_RECORD_PRIORITY)

    def test_yaml_round_trip(self, temp_dir):
        """Test saving and loading configuration as YAML."""
        from pdbrecords.config import ErrorPolicy, ParserConfig

        config = ParserConfig(
            error_policy=ErrorPolicy.RAISE,
            century_pivot=50,
            record_priority=["HEADER", "TITLE"],
        )
        path = temp_dir / "parser.yaml"

        config.to_yaml(path)
        loaded = ParserConfig.from_yaml(path)

        assert loaded == config
        assert loaded.to_dict()["error_policy"] == "raise"

    def test_empty_yaml(self, temp_dir):
        """Test that an empty YAML file gives the defaults."""
        from pdbrecords.config import ParserConfig

        path = temp_dir / "empty.yaml"
        path.write_text("")

        assert ParserConfig.from_yaml(path) == ParserConfig()

    def test_environment(self, monkeypatch):
        """Test settings from PDBRECORDS_ environment variables."""
        from pdbrecords.config import ErrorPolicy, ParserConfig

        monkeypatch.setenv("PDBRECORDS_ERROR_POLICY", "raise")
        monkeypatch.setenv("PDBRECORDS_STRICT_CONTINUATION", "true")

        config = ParserConfig()

        assert config.error_policy == ErrorPolicy.RAISE
        assert config.strict_continuation is True

    def test_validation(self):
        """Test rejection of unknown grammars and out-of-range pivots."""
        from pydantic import ValidationError

        from pdbrecords.config import ParserConfig

        with pytest.raises(ValidationError):
            ParserConfig(record_priority=["ATOM"])
        with pytest.raises(ValidationError):
            ParserConfig(record_priority=[])
        with pytest.raises(ValidationError):
            ParserConfig(century_pivot=101)


# =============================================================================
# File Parser and Façade
# =============================================================================


class TestPdbParser:
    """Tests for PdbParser."""

    def test_parse_path(self, ejg_header, atom_line, temp_dir):
        """Test parsing a plain PDB file."""
        from pdbrecords import PdbParser

        path = temp_dir / "1ejg.pdb"
        path.write_text(ejg_header + atom_line)

        pdb = PdbParser().parse(path)

        assert len(pdb) == 12
        assert pdb.remaining == atom_line

    def test_parse_gzip(self, ejg_header, temp_dir):
        """Test parsing a gzip-compressed PDB file."""
        import gzip

        from pdbrecords import PdbParser

        path = temp_dir / "pdb1ejg.ent.gz"
        with gzip.open(path, "wt") as f:
            f.write(ejg_header)

        pdb = PdbParser().parse(str(path))

        assert pdb.header.header().id_code == "1EJG"

    def test_parse_file_objects(self, ejg_header):
        """Test parsing text and binary file objects."""
        import io

        from pdbrecords import PdbParser

        parser = PdbParser()

        assert len(parser.parse(io.StringIO(ejg_header))) == 12
        assert len(parser.parse(io.BytesIO(ejg_header.encode("utf-8")))) == 12

    def test_parser_config(self, ejg_header, raise_config):
        """Test that the parser passes its configuration on."""
        from pdbrecords import PdbParser
        from pdbrecords.errors import RecordGrammarError

        parser = PdbParser(raise_config)
        broken = ejg_header.replace("02-MAR-00", "02-MAR-XX")

        with pytest.raises(RecordGrammarError):
            parser.parse_string(broken)


class TestPdbFile:
    """Tests for the PdbFile query façade."""

    def test_header_section(self, ejg_header):
        """Test title-section accessors."""
        from pdbrecords import PdbParser

        pdb = PdbParser().parse_string(ejg_header)

        assert pdb.header.header().deposition_date == date(2000, 3, 2)
        assert pdb.header.title().title.startswith("CRAMBIN AT ULTRAHIGH")
        assert len(pdb.header.authors().authors) == 6
        assert pdb.header.obslte() is None
        assert pdb.header.remarks() == []
        assert repr(pdb) == "PdbFile(id_code='1EJG', records=12)"

    def test_journal_section(self, ejg_header):
        """Test JRNL accessors."""
        from pdbrecords import PdbParser

        pdb = PdbParser().parse_string(ejg_header)

        assert pdb.journal.pubmedid().id == 10737790
        assert pdb.journal.reference().year == 2000
        assert pdb.journal.doi().doi == "10.1073/PNAS.97.7.3171"
        assert pdb.journal.editors() is None

    def test_primary_section(self, insulin_primary):
        """Test primary-structure and REMARK accessors."""
        from pdbrecords import PdbParser

        pdb = PdbParser().parse_string(insulin_primary)

        assert [s.chain_id for s in pdb.primary.seqres()] == ["A", "B"]
        assert pdb.primary.dbrefs()[0].db_idcode == "UNG_VIBCH"
        assert len(pdb.primary.seqadvs()) == 1
        assert pdb.primary.modres()[0].comment == "GLYCOSYLATION SITE"
        assert len(pdb.header.remarks(2)[0].lines) == 2
        assert pdb.header.remarks(3)[0].remark_number == 3

    def test_first_record_wins(self):
        """Test that duplicate records answer with the first occurrence."""
        from pdbrecords import PdbParser

        text = (
            "TITLE     FIRST\n"
            "NUMMDL    20\n"
            "TITLE     SECOND\n"
        )

        pdb = PdbParser().parse_string(text)

        assert len(pdb) == 3
        assert pdb.header.title().title == "FIRST"

    def test_record_to_dict(self, ejg_header):
        """Test converting records to dictionaries."""
        from pdbrecords import PdbParser

        header = PdbParser().parse_string(ejg_header).header.header()

        assert header.to_dict() == {
            "kind": "HEADER",
            "classification": "PLANT PROTEIN",
            "deposition_date": date(2000, 3, 2),
            "id_code": "1EJG",
        }
