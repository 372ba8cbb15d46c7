"""Token grammar for COMPND and SOURCE records.

The folded text of a COMPND or SOURCE record is a list of specification
tokens::

    token_list := token (";" token)*
    token      := TAG ":" value

``TOKEN_GRAMMAR`` maps each tag to the parser for its value. Tags are
disjoint keywords terminated by ``:``, so a tag is recognized by reading
the keyword and looking it up rather than by trying every entry.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, List, Tuple

from pdbrecords.data.tokens import Token, TokenKind, TokenValue
from pdbrecords.errors import PrimitiveMismatch
from pdbrecords.grammar.primitives import (
    chain_value_parser,
    delimited_text,
    ec_value_parser,
    expect_end,
    integer_list,
    integer_with_spaces,
    space0,
    yes_no_parser,
)


ValueParser = Callable[[str, int], Tuple[TokenValue, int]]

_TAG = re.compile(r"[A-Z_]+")
_TRAILING_SEPARATORS = re.compile(r"[;\s]*")

free_text = delimited_text(";")
_list_item = delimited_text(",;")


def text_list(text: str, pos: int = 0) -> Tuple[Tuple[str, ...], int]:
    """Comma-separated free-text items, blank items dropped."""
    items = []
    item, pos = _list_item(text, pos)
    items.append(item)
    while text.startswith(",", pos):
        item, pos = _list_item(text, pos + 1)
        items.append(item)
    return tuple(item for item in items if item), pos


def _as_tuple(parser: Callable[[str, int], Tuple[list, int]]) -> ValueParser:
    def parse(text: str, pos: int) -> Tuple[TokenValue, int]:
        values, pos = parser(text, pos)
        return tuple(values), pos
    return parse


# Declared order of the COMPND and SOURCE specification tags.
TOKEN_GRAMMAR: Tuple[Tuple[TokenKind, ValueParser], ...] = (
    (TokenKind.MOLECULE, free_text),
    (TokenKind.MOL_ID, integer_with_spaces),
    (TokenKind.CHAIN, _as_tuple(chain_value_parser)),
    (TokenKind.FRAGMENT, free_text),
    (TokenKind.SYNONYM, text_list),
    (TokenKind.EC, _as_tuple(ec_value_parser)),
    (TokenKind.ENGINEERED, yes_no_parser),
    (TokenKind.MUTATION, yes_no_parser),
    (TokenKind.OTHER_DETAILS, free_text),
    (TokenKind.SYNTHETIC, free_text),
    (TokenKind.ORGANISM_SCIENTIFIC, free_text),
    (TokenKind.ORGANISM_COMMON, text_list),
    (TokenKind.ORGANISM_TAXID, _as_tuple(integer_list)),
    (TokenKind.STRAIN, free_text),
    (TokenKind.VARIANT, free_text),
    (TokenKind.CELL_LINE, free_text),
    (TokenKind.ATCC, integer_with_spaces),
    (TokenKind.ORGAN, free_text),
    (TokenKind.TISSUE, free_text),
    (TokenKind.CELL, free_text),
    (TokenKind.ORGANELLE, free_text),
    (TokenKind.SECRETION, free_text),
    (TokenKind.CELLULAR_LOCATION, free_text),
    (TokenKind.PLASMID, free_text),
    (TokenKind.GENE, text_list),
    (TokenKind.EXPRESSION_SYSTEM, free_text),
    (TokenKind.EXPRESSION_SYSTEM_COMMON, text_list),
    (TokenKind.EXPRESSION_SYSTEM_TAXID, _as_tuple(integer_list)),
    (TokenKind.EXPRESSION_SYSTEM_STRAIN, free_text),
    (TokenKind.EXPRESSION_SYSTEM_VARIANT, free_text),
    (TokenKind.EXPRESSION_SYSTEM_CELL_LINE, free_text),
    (TokenKind.EXPRESSION_SYSTEM_ATCC_NUMBER, integer_with_spaces),
    (TokenKind.EXPRESSION_SYSTEM_ORGAN, free_text),
    (TokenKind.EXPRESSION_SYSTEM_TISSUE, free_text),
    (TokenKind.EXPRESSION_SYSTEM_CELL, free_text),
    (TokenKind.EXPRESSION_SYSTEM_ORGANELLE, free_text),
    (TokenKind.EXPRESSION_SYSTEM_CELLULAR_LOCATION, free_text),
    (TokenKind.EXPRESSION_SYSTEM_VECTOR_TYPE, free_text),
    (TokenKind.EXPRESSION_SYSTEM_VECTOR, free_text),
    (TokenKind.EXPRESSION_SYSTEM_PLASMID, free_text),
    (TokenKind.EXPRESSION_SYSTEM_GENE, free_text),
)

_VALUE_PARSERS: Dict[str, Tuple[TokenKind, ValueParser]] = {
    kind.value: (kind, parser) for kind, parser in TOKEN_GRAMMAR
}


def token_parser(text: str, pos: int = 0) -> Tuple[Token, int]:
    """Parse one ``TAG: value`` token.

    The value must extend to the next ``;`` or the end of the text.

    Raises:
        PrimitiveMismatch: On an unknown tag, a missing ``:`` or a value
            the tag's parser cannot read completely
    """
    _, pos = space0(text, pos)
    match = _TAG.match(text, pos)
    if match is None or not text.startswith(":", match.end()):
        raise PrimitiveMismatch("TAG:", pos, text[pos:pos + 20])
    entry = _VALUE_PARSERS.get(match.group())
    if entry is None:
        raise PrimitiveMismatch("specification tag", pos, match.group())
    kind, value_parser = entry

    _, value_pos = space0(text, match.end() + 1)
    value, end = value_parser(text, value_pos)
    _, end = space0(text, end)
    if end < len(text) and text[end] != ";":
        raise PrimitiveMismatch(f"{kind.value} value", value_pos, text[value_pos:end + 10])
    return Token(kind, value), end


def tokens_parser(text: str, pos: int = 0) -> Tuple[List[Token], int]:
    """Parse ``token (";" token)*``.

    Stops before the first ``;`` not followed by a valid token, so trailing
    separators are left unconsumed. Zero tokens is not an error.
    """
    tokens: List[Token] = []
    try:
        token, pos = token_parser(text, pos)
    except PrimitiveMismatch:
        return tokens, pos
    tokens.append(token)
    while text.startswith(";", pos):
        try:
            token, next_pos = token_parser(text, pos + 1)
        except PrimitiveMismatch:
            break
        tokens.append(token)
        pos = next_pos
    return tokens, pos


def parse_token_list(text: str) -> List[Token]:
    """Parse a complete COMPND/SOURCE value.

    Trailing ``;`` separators and whitespace are allowed.

    Raises:
        PrimitiveMismatch: If anything else is left unparsed
    """
    tokens, pos = tokens_parser(text)
    pos = _TRAILING_SEPARATORS.match(text, pos).end()
    expect_end(text, pos, "specification token")
    return tokens
