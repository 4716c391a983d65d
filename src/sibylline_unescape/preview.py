"""Unescape preview documents.

A preview is the unescaped form of a selection or of the string under the
cursor, stored under a virtual ``unescape-preview:/preview-<n>`` URI so an
editor can open it as a read-only document.
"""

from __future__ import annotations

from dataclasses import dataclass

from .codec import unescape
from .document import TextDocument
from .errors import NothingToUnescapeError
from .extractor import StringExtractor
from .formatting import detect_language
from .formatting import format_json as _format_json
from .spans import Position

SCHEME = "unescape-preview"


@dataclass(frozen=True, slots=True)
class Preview:
    """A stored preview document."""

    uri: str
    content: str
    language: str
    """Detected language of ``content`` (``json``, ``xml``, ``yaml`` or ``plaintext``)."""


class PreviewStore:
    """Process-scoped map of preview paths to their content.

    Create one when the integration starts and call :meth:`clear` when it
    shuts down. Path numbers keep increasing across :meth:`clear` calls so a
    stale URI never resolves to newer content.
    """

    def __init__(self, scheme: str = SCHEME) -> None:
        self.scheme = scheme
        self._counter = 0
        self._contents: dict[str, str] = {}

    def add(self, content: str) -> str:
        """Store *content* under a fresh path and return its URI."""
        self._counter += 1
        path = f"/preview-{self._counter}"
        self._contents[path] = content
        return f"{self.scheme}:{path}"

    def _path(self, uri_or_path: str) -> str:
        prefix = f"{self.scheme}:"
        return uri_or_path[len(prefix) :] if uri_or_path.startswith(prefix) else uri_or_path

    def get(self, uri_or_path: str) -> str:
        """Content for a URI or bare path; empty string when unknown."""
        return self._contents.get(self._path(uri_or_path), "")

    def clear(self) -> None:
        self._contents.clear()

    def __len__(self) -> int:
        return len(self._contents)

    def __contains__(self, uri_or_path: object) -> bool:
        if not isinstance(uri_or_path, str):
            return False
        return self._path(uri_or_path) in self._contents


def unescape_preview(
    document: TextDocument,
    position: Position,
    selection: str | None = None,
    *,
    store: PreviewStore,
    extractor: StringExtractor | None = None,
    format_json: bool = False,
    indent: int = 2,
) -> Preview:
    """Unescape the selection, or the string at *position*, into a preview.

    A non-empty *selection* wins over the cursor. With *format_json* the
    unescaped text is re-formatted as JSON with *indent*.

    Raises:
        NothingToUnescapeError: Nothing selected and no string at the cursor.
        InvalidStructuredDataError: *format_json* is set and the text is not JSON.
    """
    text = selection
    if not text:
        text = (extractor or StringExtractor()).extract(document, position)
    if not text:
        raise NothingToUnescapeError()

    content = unescape(text)
    if format_json:
        content = _format_json(content, indent=indent)

    uri = store.add(content)
    return Preview(uri=uri, content=content, language=detect_language(content))
