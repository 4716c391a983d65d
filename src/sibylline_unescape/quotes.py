"""Quote style table.

Every quoting convention the extractor understands is one immutable
:class:`QuoteStyle` row. The scanner is generic over these rows, so a new
convention is added by adding a row, not by touching the scan.

Table order is priority: the extractor stops at the first style that yields
a span around the cursor, so prefixed and triple-delimiter styles must come
before the plain styles they would otherwise be mistaken for.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class QuoteStyle:
    """One string delimiting convention."""

    name: str
    open: str
    close: str
    supports_escape: bool = True
    """A closing delimiter after an odd run of backslashes does not close."""

    multi_line: bool = False
    """Spans may cross line breaks, so the whole document is scanned."""

    prefix: str | None = None
    """Literal that must directly precede ``open`` (e.g. ``r`` or ``@``)."""

    prefix_disables_escape: bool = False
    """Content is conventionally not escape-processed. Not used by the scanner."""

    close_resolver: CloseResolver | None = None
    """Computes the real opening extent and closing delimiter per match."""

    def resolve_open(self, text: str, pos: int) -> tuple[int, str] | None:
        """Match the opening delimiter at *pos*.

        Returns ``(content_start, close)`` or ``None``.
        """
        if self.close_resolver is not None:
            return self.close_resolver(text, pos, self)
        if text.startswith(self.open, pos):
            return pos + len(self.open), self.close
        return None


CloseResolver = Callable[[str, int, QuoteStyle], tuple[int, str] | None]
"""``resolver(text, pos, style) -> (content_start, close) | None``.

Called with *pos* just past the style's prefix (or at the token start when
there is no prefix). Returns where the content begins and the closing
delimiter to search for, or ``None`` if no opening delimiter is at *pos*.
"""


# ---------------------------------------------------------------------------
# Closing-delimiter resolvers
# ---------------------------------------------------------------------------


def fenced_close(marker: str = "#") -> CloseResolver:
    """Resolver for raw strings fenced by a repeated *marker* character.

    The fence width is the number of markers in the opening token, counting
    those at the end of the style's prefix and any that follow it, so
    ``r##"..."##`` must close with ``"##`` and ``r#"..."#`` with ``"#``.
    """

    def resolve(text: str, pos: int, style: QuoteStyle) -> tuple[int, str] | None:
        prefix = style.prefix or ""
        width = len(prefix) - len(prefix.rstrip(marker))
        i = pos
        while i < len(text) and text[i] == marker:
            i += 1
        width += i - pos
        if not text.startswith(style.open, i):
            return None
        return i + len(style.open), style.close + marker * width

    return resolve


_RESOLVERS: dict[str, CloseResolver] = {}


def register_resolver(name: str, resolver: CloseResolver) -> CloseResolver:
    """Register a closing-delimiter resolver under *name* for use in config files."""
    _RESOLVERS[name] = resolver
    return resolver


def get_resolver(name: str) -> CloseResolver:
    """Look up a registered resolver by name.

    Raises:
        ValueError: If the resolver name is not registered.
    """
    if name not in _RESOLVERS:
        available = ", ".join(sorted(_RESOLVERS.keys()))
        raise ValueError(f"Unknown close resolver {name!r}. Available resolvers: {available}")
    return _RESOLVERS[name]


def list_resolvers() -> list[str]:
    """Return sorted list of registered resolver names."""
    return sorted(_RESOLVERS.keys())


register_resolver("fence", fenced_close("#"))


# ---------------------------------------------------------------------------
# Default table
# ---------------------------------------------------------------------------

DEFAULT_QUOTE_STYLES: tuple[QuoteStyle, ...] = (
    # Rust r#"..."#, r##"..."## ...
    QuoteStyle(
        name="rust-raw",
        open='"',
        close='"',
        supports_escape=False,
        multi_line=True,
        prefix="r#",
        prefix_disables_escape=True,
        close_resolver=get_resolver("fence"),
    ),
    QuoteStyle(
        name="python-raw-triple-double",
        open='"""',
        close='"""',
        multi_line=True,
        prefix="r",
        prefix_disables_escape=True,
    ),
    QuoteStyle(
        name="python-raw-triple-single",
        open="'''",
        close="'''",
        multi_line=True,
        prefix="r",
        prefix_disables_escape=True,
    ),
    # C# @"..."
    QuoteStyle(
        name="csharp-verbatim",
        open='"',
        close='"',
        supports_escape=False,
        multi_line=True,
        prefix="@",
        prefix_disables_escape=True,
    ),
    QuoteStyle(name="triple-double", open='"""', close='"""', multi_line=True),
    QuoteStyle(name="triple-single", open="'''", close="'''", multi_line=True),
    QuoteStyle(name="backtick", open="`", close="`", multi_line=True),
    QuoteStyle(name="double", open='"', close='"'),
    QuoteStyle(name="single", open="'", close="'"),
)


def get_quote_style(name: str, styles: tuple[QuoteStyle, ...] = DEFAULT_QUOTE_STYLES) -> QuoteStyle:
    """Look up a style in *styles* by name.

    Raises:
        ValueError: If no style has that name.
    """
    for style in styles:
        if style.name == name:
            return style
    available = ", ".join(s.name for s in styles)
    raise ValueError(f"Unknown quote style {name!r}. Available styles: {available}")


def quote_style_from_dict(data: Mapping[str, Any]) -> QuoteStyle:
    """Build a :class:`QuoteStyle` from a config mapping.

    ``close`` defaults to ``open``; ``close_resolver`` names a registered
    resolver.

    Raises:
        ValueError: If ``open`` is missing, a delimiter is empty, or the
            resolver is unknown.
    """
    open_ = data.get("open")
    if not isinstance(open_, str) or not open_:
        raise ValueError(f"quote style needs a non-empty 'open' delimiter: {dict(data)!r}")
    close = data.get("close", open_)
    if not isinstance(close, str) or not close:
        raise ValueError(f"quote style needs a non-empty 'close' delimiter: {dict(data)!r}")

    prefix = data.get("prefix") or None
    resolver_name = data.get("close_resolver")
    resolver = get_resolver(resolver_name) if resolver_name else None

    return QuoteStyle(
        name=str(data.get("name") or f"{prefix or ''}{open_}"),
        open=open_,
        close=close,
        supports_escape=bool(data.get("supports_escape", True)),
        multi_line=bool(data.get("multi_line", False)),
        prefix=str(prefix) if prefix is not None else None,
        prefix_disables_escape=bool(data.get("prefix_disables_escape", False)),
        close_resolver=resolver,
    )
