"""Record dispatcher: the top-level parse loop.

At each line the dispatcher tries the configured record grammars in
priority order. The first grammar whose lines match consumes its whole
record (continuations included) and the dispatcher moves on. When no
grammar matches, parsing stops; the rest of the input is returned
unparsed rather than rejected, so record types that are not modeled
(ATOM, HETATM, CONECT, ...) simply end the parse.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from pdbrecords.config import ParserConfig
from pdbrecords.data.records import Record
from pdbrecords.errors import InputDecodeError, PrimitiveMismatch
from pdbrecords.grammar import GRAMMARS, RecordGrammar
from pdbrecords.grammar.lines import SourceLines


logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """Outcome of one parse.

    Attributes:
        records: Parsed records in input order
        remaining: Unconsumed input, of the same type as the input
        lines_consumed: Number of physical lines consumed
    """

    records: List[Record] = field(default_factory=list)
    remaining: Union[str, bytes] = ""
    lines_consumed: int = 0


def decode_input(data: Union[str, bytes]) -> str:
    """Decode byte input as UTF-8; text input is returned unchanged."""
    if isinstance(data, str):
        return data
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InputDecodeError(f"PDB input is not valid UTF-8: {e}") from e


class RecordDispatcher:
    """Ordered alternation over record grammars.

    The priority order comes from ``ParserConfig.record_priority``. The
    dispatcher keeps no state between parses.
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        """Initialize the dispatcher.

        Args:
            config: Parser configuration (defaults to ``ParserConfig()``)
        """
        self.config = config or ParserConfig()
        self.grammars: List[RecordGrammar] = [
            GRAMMARS[name] for name in self.config.record_priority
        ]

    def parse(self, data: Union[str, bytes]) -> ParseResult:
        """Parse as many records as possible from the start of ``data``.

        Args:
            data: Complete PDB file contents

        Returns:
            ParseResult with the records and the unconsumed remainder

        Raises:
            InputDecodeError: If ``data`` is bytes but not valid UTF-8
            RecordGrammarError: Under ``ErrorPolicy.RAISE`` when a record
                cannot be parsed
        """
        lines = SourceLines(decode_input(data))
        records: List[Record] = []
        index = 0

        while lines.has(index):
            for grammar in self.grammars:
                try:
                    record, index = grammar.parse(lines, index, self.config)
                except PrimitiveMismatch:
                    continue
                records.append(record)
                break
            else:
                logger.debug(
                    f"No record grammar matches line {index + 1} "
                    f"({lines[index][:6].rstrip()!r}), stopping"
                )
                break

        logger.debug(f"Parsed {len(records)} records from {index} of {len(lines)} lines")

        remaining: Union[str, bytes] = lines.remainder(index)
        if isinstance(data, bytes):
            remaining = remaining.encode("utf-8")
        return ParseResult(records=records, remaining=remaining, lines_consumed=index)


def parse(data: Union[str, bytes], config: Optional[ParserConfig] = None) -> ParseResult:
    """Parse PDB records from ``data``.

    Empty input yields an empty record list.
    """
    return RecordDispatcher(config).parse(data)
