"""Text document abstraction consumed by the extractor."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from .spans import LineIndex, Position


@runtime_checkable
class TextDocument(Protocol):
    """Read-only view of a document the extractor can scan.

    Editor integrations wrap their own document type in this shape; the
    extractor never mutates it.
    """

    @property
    def line_count(self) -> int: ...

    def get_text(self) -> str: ...

    def line_at(self, line: int) -> str: ...

    def offset_at(self, position: Position) -> int: ...

    def position_at(self, offset: int) -> Position: ...


class Document:
    """Immutable in-memory text snapshot.

    Lines are split on ``\\n`` only; a ``\\r`` before a line break stays part
    of the line text so offsets always agree with :meth:`get_text`.
    """

    __slots__ = ("_index", "_lines", "_text")

    def __init__(self, text: str) -> None:
        self._text = text
        self._lines = text.split("\n")
        self._index = LineIndex.build(self._lines)

    @classmethod
    def from_path(cls, path: str | Path, encoding: str = "utf-8") -> Document:
        return cls(Path(path).read_text(encoding=encoding))

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_text(self) -> str:
        return self._text

    def line_at(self, line: int) -> str:
        """Text of *line* without its separator.

        Raises:
            IndexError: If *line* is outside the document.
        """
        if not 0 <= line < len(self._lines):
            raise IndexError(f"line {line} out of range (document has {len(self._lines)} lines)")
        return self._lines[line]

    def offset_at(self, position: Position) -> int:
        return self._index.offset_at(position)

    def position_at(self, offset: int) -> Position:
        return self._index.position_at(offset)

    def __repr__(self) -> str:
        return f"Document(lines={len(self._lines)}, chars={len(self._text)})"
