"""Base classes for record grammars.

A record grammar works in two stages:

1. ``match`` recognizes the physical lines that belong to the record
   (record name, JRNL sub-tag, continuation lines). A
   :class:`PrimitiveMismatch` here means "this grammar does not apply" and
   lets the dispatcher try the next one.
2. ``build`` parses the matched content into a :class:`Record`. Any
   :class:`PdbParseError` here is a record-grammar failure and is handled
   according to ``ParserConfig.error_policy``: the record is either
   replaced by its default-valued instance (with a warning) or a
   :class:`RecordGrammarError` is raised.

Grammar instances are callable, ``grammar(text, config=None)``, returning
the parsed record and the unconsumed text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Tuple, Type

from pdbrecords.config import ErrorPolicy, ParserConfig
from pdbrecords.data.records import Record
from pdbrecords.errors import PdbParseError, PrimitiveMismatch, RecordGrammarError
from pdbrecords.grammar.continuation import (
    Continuation,
    ContinuationFolder,
    ContinuationLayout,
)
from pdbrecords.grammar.lines import SourceLines
from pdbrecords.grammar.primitives import record_name


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContinuationBlock:
    """Lines matched by a continuation grammar.

    Attributes:
        continuations: Parsed continuation lines in input order
        lines: The same lines, padded to 80 columns
        first_line: 1-based line number of the first line
    """

    continuations: Tuple[Continuation, ...]
    lines: Tuple[str, ...]
    first_line: int


class RecordGrammar:
    """Base class for all record grammars.

    Attributes:
        name: Grammar name used in configuration and error messages
        record_type: Record class produced; its no-argument instance is
            the default record
    """

    name: ClassVar[str] = ""
    record_type: ClassVar[Type[Record]] = Record

    def match(self, lines: SourceLines, index: int) -> Tuple[Any, int]:
        """Recognize the record at ``index``.

        Returns:
            Content handed to :meth:`build` and the index after the record

        Raises:
            PrimitiveMismatch: If the record does not start at ``index``
        """
        raise NotImplementedError

    def build(self, content: Any, config: ParserConfig) -> Record:
        """Parse matched content into a record."""
        raise NotImplementedError

    def default(self) -> Record:
        return self.record_type()

    def parse(self, lines: SourceLines, index: int, config: ParserConfig) -> Tuple[Record, int]:
        """Match and build one record starting at line ``index``."""
        content, end = self.match(lines, index)
        try:
            record = self.build(content, config)
        except PdbParseError as e:
            self.handle_failure(e, index + 1, config)
            record = self.default()
        return record, end

    def handle_failure(self, error: PdbParseError, line_number: int, config: ParserConfig) -> None:
        """Apply the error policy to a failed record.

        Returns normally when the caller should substitute a default value.

        Raises:
            RecordGrammarError: Under ``ErrorPolicy.RAISE``
        """
        if config.error_policy is ErrorPolicy.RAISE:
            if isinstance(error, RecordGrammarError):
                raise error
            raise RecordGrammarError(self.name, line_number, str(error)) from error
        logger.warning(
            f"Unparsable {self.name} record at line {line_number}, using defaults: {error}"
        )

    def __call__(self, text: str, config: Optional[ParserConfig] = None) -> Tuple[Record, str]:
        """Parse one record from the start of ``text``.

        Args:
            text: PDB text starting with this record
            config: Parser configuration (defaults to ``ParserConfig()``)

        Returns:
            The record and the text following it
        """
        config = config or ParserConfig()
        lines = SourceLines(text)
        record, end = self.parse(lines, 0, config)
        return record, lines.remainder(end)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class SingleLineGrammar(RecordGrammar):
    """A record occupying exactly one physical line."""

    def __init__(self):
        self._tag = record_name(self.name)

    def match(self, lines: SourceLines, index: int) -> Tuple[str, int]:
        if not lines.has(index):
            raise PrimitiveMismatch(self.name, index, "end of input")
        line = lines[index]
        self._tag(line, 0)
        return line, index + 1


class ContinuationGrammar(RecordGrammar):
    """A record folded from one or more continuation lines.

    Subclasses set ``layout`` and implement :meth:`build_text`, which
    receives the folded text.
    """

    layout: ClassVar[ContinuationLayout]
    single_line: ClassVar[bool] = False

    def __init__(self):
        self.folder = ContinuationFolder(self.layout)

    @property
    def name(self) -> str:  # type: ignore[override]
        return self.layout.key

    def match(self, lines: SourceLines, index: int) -> Tuple[ContinuationBlock, int]:
        if self.single_line:
            if not lines.has(index):
                raise PrimitiveMismatch(self.name, index, "end of input")
            continuations = [self.folder.parse_line(lines[index])]
            end = index + 1
        else:
            continuations, end = self.folder.collect(lines, index)
        block = ContinuationBlock(
            continuations=tuple(continuations),
            lines=tuple(lines[i] for i in range(index, end)),
            first_line=index + 1,
        )
        return block, end

    def build(self, content: ContinuationBlock, config: ParserConfig) -> Record:
        if config.strict_continuation:
            self.folder.check_sequence(content.continuations, content.first_line)
        return self.build_text(self.folder.fold(content.continuations), config)

    def build_text(self, text: str, config: ParserConfig) -> Record:
        raise NotImplementedError
