"""Positions, extracted spans and offset mapping.

Documents are addressed two ways: as (line, character) positions, and as
flat character offsets into the joined text where every line break counts as
one character. :class:`LineIndex` converts between the two.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .quotes import QuoteStyle


@dataclass(frozen=True, slots=True)
class Position:
    """A zero-based (line, character) location in a document."""

    line: int
    character: int


@dataclass(frozen=True, slots=True)
class ExtractedString:
    """A quoted string found around a cursor."""

    content: str
    """Text strictly between the delimiters (no prefix, no quotes)."""

    start: Position
    """First character of the whole token, prefix included."""

    end: Position
    """Character immediately after the closing delimiter."""

    quote_style: QuoteStyle
    """The quote style that matched."""


class LineIndex:
    """Maps between flat character offsets and line/character positions.

    ``line_starts[i]`` is the offset of the first character of line ``i``;
    each line contributes its length plus one separator character.
    """

    __slots__ = ("line_lengths", "line_starts")

    def __init__(self, line_starts: list[int], line_lengths: list[int]) -> None:
        self.line_starts = line_starts
        self.line_lengths = line_lengths

    @staticmethod
    def build(lines: list[str]) -> LineIndex:
        """Construct an index from the document's lines (without separators)."""
        starts: list[int] = []
        lengths: list[int] = []
        pos = 0
        for line in lines:
            starts.append(pos)
            lengths.append(len(line))
            pos += len(line) + 1  # +1 for \n separator
        return LineIndex(line_starts=starts, line_lengths=lengths)

    def offset_at(self, position: Position) -> int:
        """Flat offset of *position*.

        Out-of-range lines and characters are clamped to the document, the
        same way editors validate positions before converting them.
        """
        if not self.line_starts:
            return 0
        line = min(max(position.line, 0), len(self.line_starts) - 1)
        character = min(max(position.character, 0), self.line_lengths[line])
        return self.line_starts[line] + character

    def position_at(self, offset: int) -> Position:
        """Position of flat *offset*, found via the last line start not past it."""
        if not self.line_starts:
            return Position(0, 0)
        offset = max(offset, 0)
        line = bisect_right(self.line_starts, offset) - 1
        return Position(line, offset - self.line_starts[line])
