"""Backslash escape sequence codec.

Converts a fixed set of escape tokens to the characters they stand for and
back, and counts the tokens present in a piece of text. Anything that does
not match the token grammar (unknown letters, short ``\\u`` / ``\\x`` digit
runs) passes through untouched.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

# \uXXXX and \xXX must be tried before the single-character tokens
ESCAPE_TOKEN = re.compile(r"\\(u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|[nrtbfv\\'\"0])")

SIMPLE_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "\\": "\\",
    '"': '"',
    "'": "'",
    "0": "\0",
}

# Encode direction: literal character -> token (quotes handled separately)
_REVERSE_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\b": "\\b",
    "\f": "\\f",
    "\v": "\\v",
    "\0": "\\0",
}

_SURROGATE = re.compile("[\ud800-\udfff]")


@dataclass(slots=True)
class EscapeStats:
    """Escape sequence counts for a piece of text."""

    total: int = 0
    """Number of escape tokens found."""

    breakdown: dict[str, int] = field(default_factory=dict)
    """Display name (``\\n``, ``\\u``, ``\\x`` ...) to occurrence count."""


def _decode_token(match: re.Match[str]) -> str:
    token = match.group(1)
    if token[0] in "ux":
        return chr(int(token[1:], 16))
    return SIMPLE_ESCAPES.get(token, match.group(0))


def unescape(text: str) -> str:
    """Replace every recognized escape token in *text* with its character.

    ``\\uXXXX`` yields a UTF-16 code unit; a high/low surrogate pair produced
    by two consecutive ``\\u`` tokens is joined into the single code point it
    encodes. Lone surrogates are kept as-is.
    """
    if "\\" not in text:
        return text

    decoded = ESCAPE_TOKEN.sub(_decode_token, text)
    if _SURROGATE.search(decoded):
        decoded = decoded.encode("utf-16-le", "surrogatepass").decode(
            "utf-16-le", "surrogatepass"
        )
    return decoded


def escape(text: str, quote: str = '"') -> str:
    """Inverse of :func:`unescape` for the single-character tokens.

    Backslashes and control characters with a dedicated token are escaped,
    as is *quote* (pass ``""`` to leave quotes alone).
    """
    parts: list[str] = []
    for ch in text:
        if ch in _REVERSE_ESCAPES:
            parts.append(_REVERSE_ESCAPES[ch])
        elif quote and ch == quote:
            parts.append("\\" + ch)
        else:
            parts.append(ch)
    return "".join(parts)


def _display_name(token: str) -> str:
    if token[0] == "u":
        return "\\u"
    if token[0] == "x":
        return "\\x"
    return f"\\{token}"


def count_escape_sequences(text: str) -> EscapeStats:
    """Count escape tokens in *text* using the same grammar as :func:`unescape`."""
    stats = EscapeStats()
    for match in ESCAPE_TOKEN.finditer(text):
        name = _display_name(match.group(1))
        stats.breakdown[name] = stats.breakdown.get(name, 0) + 1
        stats.total += 1
    return stats


def format_escape_stats(stats: EscapeStats) -> str:
    """Render stats for a status line, e.g. ``2 escape seq (\\n:1, \\t:1)``."""
    if stats.total == 0:
        return "No escape sequences"

    parts = [f"{name}:{count}" for name, count in stats.breakdown.items()]
    return f"{stats.total} escape seq ({', '.join(parts)})"
