"""Physical line access over decoded PDB text."""

from __future__ import annotations

from typing import List

from pdbrecords.grammar.primitives import line_ending, opt, till_line_ending

LINE_WIDTH = 80


def split_lines(text: str) -> List[str]:
    """Split text into physical lines, keeping each line's terminator.

    The last line may lack a terminator. Empty input yields no lines.
    """
    lines: List[str] = []
    pos = 0
    while pos < len(text):
        _, end = till_line_ending(text, pos)
        _, end = opt(line_ending)(text, end)
        lines.append(text[pos:end])
        pos = end
    return lines


class SourceLines:
    """Indexed physical lines of one input text.

    ``lines[i]`` is line ``i`` without its terminator, padded with spaces
    to 80 columns so fixed-column slices never run short. The raw text is
    kept so the unconsumed remainder can be returned verbatim.
    """

    def __init__(self, text: str):
        self._raw = split_lines(text)
        self._padded = [
            till_line_ending(raw)[0].ljust(LINE_WIDTH) for raw in self._raw
        ]

    def __len__(self) -> int:
        return len(self._raw)

    def __getitem__(self, index: int) -> str:
        return self._padded[index]

    def has(self, index: int) -> bool:
        return 0 <= index < len(self._raw)

    def remainder(self, index: int) -> str:
        """Raw text of lines ``index`` onwards, terminators included."""
        return "".join(self._raw[index:])
