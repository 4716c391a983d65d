"""Quote-pair scanner.

One forward pass per quote style finds every non-overlapping span that
style delimits. The same procedure serves both scopes the extractor uses:
a single line (character indices) and a whole document (flat offsets).
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .quotes import QuoteStyle


@dataclass(frozen=True, slots=True)
class RawSpan:
    """Offsets of one quoted token within the scanned text."""

    start: int
    """First character of the token, prefix included."""

    content_start: int
    content_end: int

    end: int
    """One past the closing delimiter."""

    def contains(self, offset: int) -> bool:
        """Whether *offset* falls on the token, delimiters included."""
        return self.start <= offset < self.end


def _is_escaped(text: str, idx: int, floor: int) -> bool:
    """Odd run of backslashes directly before *idx* (not looking before *floor*)."""
    count = 0
    i = idx - 1
    while i >= floor and text[i] == "\\":
        count += 1
        i -= 1
    return count % 2 == 1


def _find_close(text: str, close: str, content_start: int, supports_escape: bool) -> int:
    """Index of the first real closing delimiter at or after *content_start*, or -1."""
    pos = content_start
    while True:
        idx = text.find(close, pos)
        if idx == -1 or not supports_escape:
            return idx
        if not _is_escaped(text, idx, content_start):
            return idx
        pos = idx + 1


def iter_spans(text: str, style: QuoteStyle, start: int = 0) -> Iterator[RawSpan]:
    """Yield every span of *style* in *text*, left to right.

    Scanning resumes just past each token, so spans never overlap. An opening
    delimiter with no closing one ends the scan.
    """
    prefix = style.prefix or ""
    n = len(text)
    i = start

    while i < n:
        if prefix and not text.startswith(prefix, i):
            i += 1
            continue

        opened = style.resolve_open(text, i + len(prefix))
        if opened is None:
            i += 1
            continue

        content_start, close = opened
        close_at = _find_close(text, close, content_start, style.supports_escape)
        if close_at == -1:
            return

        end = close_at + len(close)
        yield RawSpan(start=i, content_start=content_start, content_end=close_at, end=end)
        i = end


def find_span(text: str, style: QuoteStyle, cursor: int) -> RawSpan | None:
    """First span of *style* in *text* that contains *cursor*."""
    for span in iter_spans(text, style):
        if span.start > cursor:
            # Later spans start even further right
            return None
        if span.contains(cursor):
            return span
    return None


def find_span_in_line(line: str, style: QuoteStyle, character: int) -> RawSpan | None:
    """Single-line scan: *line* is one line of text, *character* the cursor column."""
    return find_span(line, style, character)


def find_span_in_text(text: str, style: QuoteStyle, offset: int) -> RawSpan | None:
    """Multi-line scan over a whole document, *offset* being the flat cursor offset."""
    return find_span(text, style, offset)
