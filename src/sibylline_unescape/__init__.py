"""Unescape: find the string literal under a cursor and decode its escapes."""

from .codec import EscapeStats, count_escape_sequences, escape, format_escape_stats, unescape
from .config import UnescapeConfig
from .document import Document, TextDocument
from .errors import InvalidStructuredDataError, NothingToUnescapeError, UnescapeError
from .extractor import StringExtractor, extract_string_at_position, extract_string_with_details
from .formatting import detect_language, format_json
from .preview import Preview, PreviewStore, unescape_preview
from .quotes import (
    DEFAULT_QUOTE_STYLES,
    QuoteStyle,
    fenced_close,
    get_resolver,
    list_resolvers,
    register_resolver,
)
from .spans import ExtractedString, Position
from .status import format_status, status_text

__all__ = [
    "extract_string_at_position",
    "extract_string_with_details",
    "StringExtractor",
    "ExtractedString",
    "Position",
    "Document",
    "TextDocument",
    "QuoteStyle",
    "DEFAULT_QUOTE_STYLES",
    "fenced_close",
    "register_resolver",
    "get_resolver",
    "list_resolvers",
    "unescape",
    "escape",
    "count_escape_sequences",
    "format_escape_stats",
    "EscapeStats",
    "format_json",
    "detect_language",
    "UnescapeConfig",
    "PreviewStore",
    "Preview",
    "unescape_preview",
    "status_text",
    "format_status",
    "UnescapeError",
    "InvalidStructuredDataError",
    "NothingToUnescapeError",
]
