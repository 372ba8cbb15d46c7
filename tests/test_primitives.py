"""Tests for the primitive lexicon and physical line handling."""

from datetime import date

import pytest


class TestIntegers:
    """Tests for fixed- and variable-width integer primitives."""

    def test_fixed_width_integers(self):
        """Test that fixed-width integers consume exactly their width."""
        from pdbrecords.grammar.primitives import (
            fivedigit_integer,
            fourdigit_integer,
            threedigit_integer,
            twodigit_integer,
        )

        assert twodigit_integer(" 7") == (7, 2)
        assert threedigit_integer("  12", 1) == (12, 4)
        assert fourdigit_integer("  74 ") == (74, 4)
        assert fivedigit_integer("    1") == (1, 5)

    def test_fixed_width_integer_rejects_blank_and_short_fields(self):
        """Test that blank, non-numeric or truncated fields are mismatches."""
        from pdbrecords.errors import PrimitiveMismatch
        from pdbrecords.grammar.primitives import fourdigit_integer, twodigit_integer

        with pytest.raises(PrimitiveMismatch):
            fourdigit_integer("    ")
        with pytest.raises(PrimitiveMismatch):
            twodigit_integer("ab")
        with pytest.raises(PrimitiveMismatch):
            fourdigit_integer("12")

    def test_signed_fixed_width_integer(self):
        """Test negative residue numbers."""
        from pdbrecords.errors import PrimitiveMismatch
        from pdbrecords.grammar.primitives import fixed_width_integer

        parser = fixed_width_integer(4, signed=True)
        assert parser("  -1") == (-1, 4)

        with pytest.raises(PrimitiveMismatch):
            fixed_width_integer(4)("  -1")

    def test_integer_and_integer_list(self):
        """Test variable-width integers and comma-separated lists."""
        from pdbrecords.errors import PrimitiveMismatch
        from pdbrecords.grammar.primitives import integer, integer_list

        assert integer("10737790 rest") == (10737790, 8)
        assert integer_list("9606, 10090") == ([9606, 10090], 11)
        assert integer_list("") == ([], 0)

        with pytest.raises(PrimitiveMismatch):
            integer("x")


class TestWords:
    """Tests for word, list and text primitives."""

    def test_alphanum_words(self):
        """Test alphanumeric words with and without inner spaces."""
        from pdbrecords.errors import PrimitiveMismatch
        from pdbrecords.grammar.primitives import (
            alphanum_word,
            alphanum_word_with_spaces_inside,
        )

        assert alphanum_word("1ABC rest") == ("1ABC", 4)
        assert alphanum_word_with_spaces_inside("  A B  ;") == ("A B", 7)

        with pytest.raises(PrimitiveMismatch):
            alphanum_word(" 1ABC")

    def test_yes_no(self):
        """Test YES/NO flags."""
        from pdbrecords.errors import PrimitiveMismatch
        from pdbrecords.grammar.primitives import yes_no_parser

        assert yes_no_parser("YES") == (True, 3)
        assert yes_no_parser("NO;") == (False, 2)

        with pytest.raises(PrimitiveMismatch):
            yes_no_parser("MAYBE")

    def test_chain_and_ec_lists(self):
        """Test that list items are trimmed and blank items dropped."""
        from pdbrecords.grammar.primitives import chain_value_parser, ec_value_parser

        assert chain_value_parser("A,  C") == (["A", "C"], 5)
        assert chain_value_parser("A, , B") == (["A", "B"], 6)
        assert ec_value_parser("3.2.1.14, 3.2.1.17") == (["3.2.1.14", "3.2.1.17"], 18)

    def test_idcode_list(self):
        """Test whitespace-separated ID codes."""
        from pdbrecords.grammar.primitives import idcode_list

        assert idcode_list("1VOQ 1VOR  1VOS ") == (["1VOQ", "1VOR", "1VOS"], 15)
        assert idcode_list("") == ([], 0)

    def test_residue_list(self):
        """Test residue names of one to three characters."""
        from pdbrecords.errors import PrimitiveMismatch
        from pdbrecords.grammar.primitives import residue_list_parser, residue_parser

        assert residue_list_parser("GLY ILE VAL  A") == (["GLY", "ILE", "VAL", "A"], 14)

        with pytest.raises(PrimitiveMismatch):
            residue_parser("GLYX")

    def test_delimited_text_stops_at_line_ending(self):
        """Test that free text never crosses a line ending."""
        from pdbrecords.grammar.primitives import delimited_text

        free_text = delimited_text(";")
        assert free_text(" CRAMBIN ; X") == ("CRAMBIN", 9)
        assert free_text("CRAMBIN\nX") == ("CRAMBIN", 7)

    def test_optional_char_and_fixed_text(self):
        """Test blank single columns and fixed-width text fields."""
        from pdbrecords.grammar.primitives import fixed_text, optional_char

        assert optional_char("A B", 1) == (None, 2)
        assert optional_char("A B", 2) == ("B", 3)
        assert fixed_text("HEADER    PLANT PROTEIN    ", 10, 40) == ("PLANT PROTEIN", 50)

    def test_combinators(self):
        """Test opt and separated_list."""
        from pdbrecords.grammar.primitives import integer, opt, separated_list

        assert opt(integer)("x", 0) == (None, 0)
        assert opt(integer)("12", 0) == (12, 2)
        assert separated_list(integer, "/")("1/2/x") == ([1, 2], 3)


class TestDates:
    """Tests for DD-MMM-YY dates."""

    def test_century_pivot(self):
        """Test that two-digit years resolve around the default pivot."""
        from pdbrecords.grammar.primitives import date_parser

        assert date_parser("28-MAR-07") == (date(2007, 3, 28), 9)
        assert date_parser("14-OCT-98") == (date(1998, 10, 14), 9)
        assert date_parser("01-JAN-69")[0] == date(1969, 1, 1)
        assert date_parser("01-JAN-68")[0] == date(2068, 1, 1)

    def test_literal_years(self):
        """Test that four-digit years and a None pivot are taken literally."""
        from pdbrecords.grammar.primitives import date_parser

        assert date_parser("01-JAN-2001")[0] == date(2001, 1, 1)
        assert date_parser("28-MAR-07", century_pivot=None)[0] == date(7, 3, 28)

    def test_invalid_dates(self):
        """Test that unknown months and impossible dates are mismatches."""
        from pdbrecords.errors import PrimitiveMismatch
        from pdbrecords.grammar.primitives import date_parser

        for text in ("28-Mar-07", "31-FEB-07", "28-XYZ-07", "2007-03-28"):
            with pytest.raises(PrimitiveMismatch):
                date_parser(text)


class TestLines:
    """Tests for physical line splitting."""

    def test_split_lines_keeps_terminators(self):
        """Test LF, CRLF and a missing final terminator."""
        from pdbrecords.grammar.lines import split_lines

        assert split_lines("A\nB\r\nC") == ["A\n", "B\r\n", "C"]
        assert split_lines("") == []

    def test_source_lines_pad_and_remainder(self):
        """Test padded access and verbatim remainders."""
        from pdbrecords.grammar.lines import LINE_WIDTH, SourceLines

        lines = SourceLines("TITLE     X\r\nATOM\n")

        assert len(lines) == 2
        assert lines[0] == "TITLE     X".ljust(LINE_WIDTH)
        assert lines.has(1) and not lines.has(2)
        assert lines.remainder(1) == "ATOM\n"
        assert lines.remainder(2) == ""

    def test_till_line_ending(self):
        """Test reading up to a line terminator."""
        from pdbrecords.grammar.primitives import line_ending, till_line_ending

        assert till_line_ending("abc\r\ndef") == ("abc", 3)
        assert line_ending("\r\ndef") == ("\r\n", 2)
