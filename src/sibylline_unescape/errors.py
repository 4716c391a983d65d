"""Exceptions raised by sibylline-unescape.

Not finding a string is not an error: extraction returns ``None``. These
cover the failures a caller has to report to the user.
"""

from __future__ import annotations


class UnescapeError(Exception):
    """Base class for all sibylline-unescape errors."""


class InvalidStructuredDataError(UnescapeError, ValueError):
    """Text handed to a structured-data formatter does not parse."""

    def __init__(self, message: str, *, line: int | None = None, column: int | None = None):
        super().__init__(message)
        self.line = line
        self.column = column


class NothingToUnescapeError(UnescapeError, LookupError):
    """No selection was given and the cursor is not inside a string."""

    def __init__(self, message: str = "No text selected or found at cursor position"):
        super().__init__(message)
