"""Primitive lexicon for PDB record grammars.

Every primitive has the shape ``parser(text, pos) -> (value, new_pos)``:
it consumes a prefix of ``text`` starting at ``pos`` and returns the parsed
value together with the position just past what it consumed. A primitive
that does not match raises :class:`PrimitiveMismatch`; it never raises
anything else on malformed input.

Primitives fall into a few groups:
- Fixed-width integers (``twodigit_integer`` ... ``fivedigit_integer``)
- Variable-width integers and integer lists
- Words, free text and delimited lists
- Dates in ``DD-MMM-YY`` form
- Literal tags and line handling
- Combinators (``opt``, ``separated_list``)
"""

from __future__ import annotations

import re
from datetime import date
from typing import Any, Callable, List, Optional, Tuple

from pdbrecords.config import DEFAULT_CENTURY_PIVOT
from pdbrecords.errors import PrimitiveMismatch


Primitive = Callable[..., Tuple[Any, int]]

MONTHS = {
    "JAN": 1, "FEB": 2, "MAR": 3, "APR": 4, "MAY": 5, "JUN": 6,
    "JUL": 7, "AUG": 8, "SEP": 9, "OCT": 10, "NOV": 11, "DEC": 12,
}

_UNSIGNED = re.compile(r"[0-9]+")
_SIGNED = re.compile(r"-?[0-9]+")
_ALNUM = re.compile(r"[A-Za-z0-9]+")
_ALNUM_SPACES = re.compile(r"[A-Za-z0-9 \t]*")
_EC_NUMBER = re.compile(r"[0-9. \t-]*")
_SPACE0 = re.compile(r"[ \t]*")
_SPACE1 = re.compile(r"[ \t]+")
_DATE = re.compile(r"([0-9]+)-([A-Za-z]+)-([0-9]+)")
_TILL_EOL = re.compile(r"[^\r\n]*")
_RESIDUE = re.compile(r"[A-Za-z0-9]{1,3}(?![A-Za-z0-9])")


# =============================================================================
# Combinators
# =============================================================================


def opt(parser: Primitive) -> Primitive:
    """Make a primitive optional: a mismatch yields ``(None, pos)``."""
    def parse(text: str, pos: int = 0) -> Tuple[Any, int]:
        try:
            return parser(text, pos)
        except PrimitiveMismatch:
            return None, pos
    return parse


def separated_list(element: Primitive, separator: str = ",") -> Primitive:
    """Zero or more ``element`` values separated by ``separator``.

    Stops before the first separator that is not followed by a valid
    element, so an empty or unparsable input yields an empty list.
    """
    def parse(text: str, pos: int = 0) -> Tuple[List[Any], int]:
        values: List[Any] = []
        try:
            value, pos = element(text, pos)
        except PrimitiveMismatch:
            return values, pos
        values.append(value)
        while text.startswith(separator, pos):
            try:
                value, next_pos = element(text, pos + len(separator))
            except PrimitiveMismatch:
                break
            values.append(value)
            pos = next_pos
        return values, pos
    return parse


# =============================================================================
# Whitespace, tags and lines
# =============================================================================


def space0(text: str, pos: int = 0) -> Tuple[str, int]:
    """Zero or more spaces or tabs."""
    match = _SPACE0.match(text, pos)
    return match.group(), match.end()


def space1(text: str, pos: int = 0) -> Tuple[str, int]:
    """One or more spaces or tabs."""
    match = _SPACE1.match(text, pos)
    if match is None:
        raise PrimitiveMismatch("whitespace", pos, text[pos:pos + 1])
    return match.group(), match.end()


def tag(literal: str) -> Primitive:
    """Match ``literal`` exactly (case-sensitive)."""
    def parse(text: str, pos: int = 0) -> Tuple[str, int]:
        if not text.startswith(literal, pos):
            raise PrimitiveMismatch(repr(literal), pos, text[pos:pos + len(literal)])
        return literal, pos + len(literal)
    return parse


def record_name(name: str) -> Primitive:
    """Match a record name in columns 1-6, padded with spaces."""
    return tag(name.ljust(6))


def take(text: str, pos: int, count: int) -> Tuple[str, int]:
    """Consume exactly ``count`` characters."""
    end = pos + count
    if end > len(text):
        raise PrimitiveMismatch(f"{count} characters", pos, text[pos:])
    return text[pos:end], end


def till_line_ending(text: str, pos: int = 0) -> Tuple[str, int]:
    """Everything up to, but excluding, ``\\r`` or ``\\n``."""
    match = _TILL_EOL.match(text, pos)
    return match.group(), match.end()


def line_ending(text: str, pos: int = 0) -> Tuple[str, int]:
    """A ``\\r\\n``, ``\\n`` or lone ``\\r`` line terminator."""
    for ending in ("\r\n", "\n", "\r"):
        if text.startswith(ending, pos):
            return ending, pos + len(ending)
    raise PrimitiveMismatch("line ending", pos, text[pos:pos + 1])


def expect_end(text: str, pos: int, what: str = "end of text") -> int:
    """Require that only whitespace remains after ``pos``."""
    if text[pos:].strip():
        raise PrimitiveMismatch(what, pos, text[pos:pos + 20])
    return len(text)


# =============================================================================
# Integers
# =============================================================================


def fixed_width_integer(width: int, signed: bool = False) -> Primitive:
    """Build a parser that reads an integer from exactly ``width`` characters.

    The field is trimmed before conversion; an empty or non-numeric field
    is a mismatch.

    Args:
        width: Number of characters the field occupies
        signed: Accept a leading minus sign

    Returns:
        Primitive returning ``(int, pos + width)``
    """
    pattern = _SIGNED if signed else _UNSIGNED

    def parse(text: str, pos: int = 0) -> Tuple[int, int]:
        chunk, end = take(text, pos, width)
        digits = chunk.strip()
        if not pattern.fullmatch(digits):
            raise PrimitiveMismatch(f"{width}-column integer", pos, chunk)
        return int(digits), end

    parse.__name__ = f"integer_{width}"
    return parse


twodigit_integer = fixed_width_integer(2)
threedigit_integer = fixed_width_integer(3)
fourdigit_integer = fixed_width_integer(4)
fivedigit_integer = fixed_width_integer(5)


def integer(text: str, pos: int = 0) -> Tuple[int, int]:
    """One or more ASCII digits."""
    match = _UNSIGNED.match(text, pos)
    if match is None:
        raise PrimitiveMismatch("integer", pos, text[pos:pos + 1])
    return int(match.group()), match.end()


def integer_with_spaces(text: str, pos: int = 0) -> Tuple[int, int]:
    """An integer with optional surrounding spaces."""
    _, pos = space0(text, pos)
    value, pos = integer(text, pos)
    _, pos = space0(text, pos)
    return value, pos


integer_list = separated_list(integer_with_spaces, ",")


# =============================================================================
# Words and text
# =============================================================================


def alphanum_word(text: str, pos: int = 0) -> Tuple[str, int]:
    """One or more ASCII letters or digits."""
    match = _ALNUM.match(text, pos)
    if match is None:
        raise PrimitiveMismatch("alphanumeric word", pos, text[pos:pos + 1])
    return match.group(), match.end()


def alphanum_word_with_spaces_inside(text: str, pos: int = 0) -> Tuple[str, int]:
    """Zero or more letters, digits or spaces, returned trimmed."""
    match = _ALNUM_SPACES.match(text, pos)
    return match.group().strip(), match.end()


def delimited_text(delimiters: str) -> Primitive:
    """Build a parser for free text up to the first of ``delimiters``.

    The text never crosses a line ending and is returned trimmed.
    """
    pattern = re.compile(f"[^{re.escape(delimiters)}\\r\\n]*")

    def parse(text: str, pos: int = 0) -> Tuple[str, int]:
        match = pattern.match(text, pos)
        return match.group().strip(), match.end()

    return parse


def yes_no_parser(text: str, pos: int = 0) -> Tuple[bool, int]:
    """``YES`` is True, ``NO`` is False."""
    if text.startswith("YES", pos):
        return True, pos + 3
    if text.startswith("NO", pos):
        return False, pos + 2
    raise PrimitiveMismatch("YES or NO", pos, text[pos:pos + 3])


def chain_value_parser(text: str, pos: int = 0) -> Tuple[List[str], int]:
    """Comma-separated chain identifiers, blank items dropped."""
    items, pos = separated_list(alphanum_word_with_spaces_inside, ",")(text, pos)
    return [item for item in items if item], pos


def ec_value_parser(text: str, pos: int = 0) -> Tuple[List[str], int]:
    """Comma-separated enzyme commission numbers such as ``3.2.1.14``."""
    def ec_number(text: str, pos: int) -> Tuple[str, int]:
        match = _EC_NUMBER.match(text, pos)
        return match.group().strip(), match.end()

    items, pos = separated_list(ec_number, ",")(text, pos)
    return [item for item in items if item], pos


def idcode_list(text: str, pos: int = 0) -> Tuple[List[str], int]:
    """Zero or more whitespace-separated alphanumeric ID codes."""
    codes: List[str] = []
    while True:
        _, start = space0(text, pos)
        try:
            code, end = alphanum_word(text, start)
        except PrimitiveMismatch:
            return codes, pos
        codes.append(code)
        pos = end


def residue_parser(text: str, pos: int = 0) -> Tuple[str, int]:
    """A residue name of one to three letters or digits."""
    match = _RESIDUE.match(text, pos)
    if match is None:
        raise PrimitiveMismatch("residue name", pos, text[pos:pos + 4])
    return match.group(), match.end()


def residue_list_parser(text: str, pos: int = 0) -> Tuple[List[str], int]:
    """Zero or more whitespace-separated residue names."""
    residues: List[str] = []
    while True:
        _, start = space0(text, pos)
        try:
            residue, end = residue_parser(text, start)
        except PrimitiveMismatch:
            return residues, pos
        residues.append(residue)
        pos = end


def optional_char(text: str, pos: int = 0) -> Tuple[Optional[str], int]:
    """One column; a blank (or missing) column yields None."""
    char = text[pos:pos + 1]
    return (char if char.strip() else None), pos + 1


def fixed_text(text: str, pos: int, width: int) -> Tuple[str, int]:
    """A ``width``-column field, trimmed. Short input reads as blank."""
    return text[pos:pos + width].strip(), pos + width


# =============================================================================
# Dates
# =============================================================================


def resolve_year(year: int, digits: int, century_pivot: Optional[int]) -> int:
    """Resolve a two-digit year against ``century_pivot``.

    Years written with more than two digits, or any year when the pivot is
    None, are taken literally.
    """
    if century_pivot is None or digits > 2:
        return year
    if year < century_pivot:
        return 2000 + year
    return 1900 + year


def date_parser(
    text: str,
    pos: int = 0,
    century_pivot: Optional[int] = DEFAULT_CENTURY_PIVOT,
) -> Tuple[date, int]:
    """A ``DD-MMM-YY`` date such as ``28-MAR-07``.

    The month must be an upper-case three-letter English abbreviation.

    Args:
        text: Input text
        pos: Start position
        century_pivot: See :func:`resolve_year`

    Returns:
        Parsed date and the position after it
    """
    match = _DATE.match(text, pos)
    if match is None:
        raise PrimitiveMismatch("date DD-MMM-YY", pos, text[pos:pos + 9])
    day, month_name, year_text = match.groups()
    month = MONTHS.get(month_name)
    if month is None:
        raise PrimitiveMismatch("month abbreviation", match.start(2), month_name)
    year = resolve_year(int(year_text), len(year_text), century_pivot)
    try:
        return date(year, month, int(day)), match.end()
    except ValueError as e:
        raise PrimitiveMismatch("valid calendar date", pos, match.group()) from e
