"""Find the quoted string around a cursor.

Styles are tried in table order. Single-line styles only look at the
cursor's line; multi-line styles scan the whole document. The first style
that produces a span containing the cursor wins.
"""

from __future__ import annotations

from collections.abc import Iterable

from .document import TextDocument
from .quotes import DEFAULT_QUOTE_STYLES, QuoteStyle
from .scanner import find_span_in_line, find_span_in_text
from .spans import ExtractedString, Position


class StringExtractor:
    """Extracts strings at a position using a fixed quote style table."""

    def __init__(self, quote_styles: Iterable[QuoteStyle] | None = None) -> None:
        self.quote_styles: tuple[QuoteStyle, ...] = (
            tuple(quote_styles) if quote_styles is not None else DEFAULT_QUOTE_STYLES
        )

    def extract(self, document: TextDocument, position: Position) -> str | None:
        """Content of the string at *position*, or ``None`` if there is none."""
        details = self.extract_with_details(document, position)
        return details.content if details is not None else None

    def extract_with_details(
        self, document: TextDocument, position: Position
    ) -> ExtractedString | None:
        """Content, bounds and matching style of the string at *position*."""
        if not 0 <= position.line < document.line_count:
            return None

        line_text: str | None = None
        full_text: str | None = None
        cursor_offset = 0

        for style in self.quote_styles:
            if style.multi_line:
                if full_text is None:
                    full_text = document.get_text()
                    cursor_offset = document.offset_at(position)
                span = find_span_in_text(full_text, style, cursor_offset)
                if span is None:
                    continue
                return ExtractedString(
                    content=full_text[span.content_start : span.content_end],
                    start=document.position_at(span.start),
                    end=document.position_at(span.end),
                    quote_style=style,
                )

            if line_text is None:
                line_text = document.line_at(position.line)
            span = find_span_in_line(line_text, style, position.character)
            if span is None:
                continue
            return ExtractedString(
                content=line_text[span.content_start : span.content_end],
                start=Position(position.line, span.start),
                end=Position(position.line, span.end),
                quote_style=style,
            )

        return None


_default_extractor = StringExtractor()


def extract_string_at_position(
    document: TextDocument,
    position: Position,
    quote_styles: Iterable[QuoteStyle] | None = None,
) -> str | None:
    """Extract the string content at *position* (without quotes)."""
    extractor = _default_extractor if quote_styles is None else StringExtractor(quote_styles)
    return extractor.extract(document, position)


def extract_string_with_details(
    document: TextDocument,
    position: Position,
    quote_styles: Iterable[QuoteStyle] | None = None,
) -> ExtractedString | None:
    """Extract the string at *position* along with its bounds and quote style."""
    extractor = _default_extractor if quote_styles is None else StringExtractor(quote_styles)
    return extractor.extract_with_details(document, position)
