"""Exception hierarchy for PDB record parsing.

All errors derive from :class:`PdbParseError`, itself a ``ValueError``:

- :class:`PrimitiveMismatch` signals that a grammar does not apply at the
  current position. Alternation points recover from it.
- :class:`RecordGrammarError` signals that a record's tag matched but its
  content could not be parsed.
"""

from __future__ import annotations

from typing import Optional


class PdbParseError(ValueError):
    """Base class for all PDB parsing errors."""


class InputDecodeError(PdbParseError):
    """Raised when byte input is not valid UTF-8."""


class PrimitiveMismatch(PdbParseError):
    """Input does not have the expected shape.

    Attributes:
        expected: Short description of what was expected
        position: Offset into the parsed text where matching failed
    """

    def __init__(self, expected: str, position: int = 0, found: str = ""):
        self.expected = expected
        self.position = position
        self.found = found
        message = f"expected {expected} at position {position}"
        if found:
            message += f", found {found!r}"
        super().__init__(message)


class RecordGrammarError(PdbParseError):
    """A record whose tag matched could not be parsed.

    Attributes:
        record: Grammar name, e.g. "COMPND" or "JRNL REF"
        line: 1-based physical line number where the record starts
    """

    def __init__(self, record: str, line: Optional[int] = None, reason: str = ""):
        self.record = record
        self.line = line
        self.reason = reason
        location = f" at line {line}" if line is not None else ""
        message = f"cannot parse {record} record{location}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ContinuationError(RecordGrammarError):
    """Continuation indices of a multi-line record are out of sequence."""
