"""Grammar for REMARK records.

Consecutive REMARK lines sharing a remark number (columns 8-10) form one
record. The text of each line (column 12 onwards) is kept as-is apart
from trailing padding; remark contents are not interpreted.
"""

from __future__ import annotations

from typing import List, Tuple

from pdbrecords.config import ParserConfig
from pdbrecords.data.records import Remark
from pdbrecords.errors import PrimitiveMismatch
from pdbrecords.grammar.base import RecordGrammar
from pdbrecords.grammar.lines import SourceLines
from pdbrecords.grammar.primitives import record_name, threedigit_integer


class RemarkGrammar(RecordGrammar):
    name = "REMARK"
    record_type = Remark

    def __init__(self):
        self._tag = record_name("REMARK")

    def _remark_number(self, line: str) -> int:
        self._tag(line, 0)
        number, _ = threedigit_integer(line, 7)
        return number

    def match(self, lines: SourceLines, index: int) -> Tuple[Tuple[int, List[str]], int]:
        if not lines.has(index):
            raise PrimitiveMismatch(self.name, index, "end of input")
        number = self._remark_number(lines[index])
        group = [lines[index]]
        index += 1
        while lines.has(index):
            try:
                if self._remark_number(lines[index]) != number:
                    break
            except PrimitiveMismatch:
                break
            group.append(lines[index])
            index += 1
        return (number, group), index

    def build(self, content: Tuple[int, List[str]], config: ParserConfig) -> Remark:
        number, group = content
        return Remark(
            remark_number=number,
            lines=tuple(line[11:].rstrip() for line in group),
        )


remark_record_parser = RemarkGrammar()
