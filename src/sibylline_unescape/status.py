"""Status line text describing the string under the cursor."""

from __future__ import annotations

from .codec import count_escape_sequences, format_escape_stats
from .document import TextDocument
from .extractor import StringExtractor
from .spans import Position

STATUS_ICON = "$(symbol-string)"


def format_status(content: str) -> str:
    """E.g. ``$(symbol-string) 12 chars | 2 escape seq (\\n:1, \\t:1)``.

    The escape part is left out when *content* has no escape sequences.
    """
    parts = [f"{STATUS_ICON} {len(content)} chars"]
    stats = count_escape_sequences(content)
    if stats.total > 0:
        parts.append(format_escape_stats(stats))
    return " | ".join(parts)


def status_text(
    document: TextDocument,
    position: Position,
    *,
    enabled: bool = True,
    extractor: StringExtractor | None = None,
) -> str | None:
    """Status line for the string at *position*.

    Returns ``None`` when disabled or when the cursor is not in a string, in
    which case the status item should be hidden.
    """
    if not enabled:
        return None

    result = (extractor or StringExtractor()).extract_with_details(document, position)
    if result is None:
        return None
    return format_status(result.content)
