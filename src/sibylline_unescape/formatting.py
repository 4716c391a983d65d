"""Re-formatting of unescaped text and best-effort language detection."""

from __future__ import annotations

import json
import re

from .errors import InvalidStructuredDataError

_XML_START = re.compile(r"^\s*<(?:[A-Za-z_][\w.\-:]*|\?xml|!--|!DOCTYPE)", re.IGNORECASE)
_YAML_MAPPING = re.compile(r"^[ \t]*-?[ \t]*[\w\"'][\w .\"'\-]*:(?:[ \t]|$)", re.MULTILINE)
_YAML_DOCUMENT = re.compile(r"^---[ \t]*$", re.MULTILINE)


def format_json(text: str, indent: int = 2) -> str:
    """Parse *text* as JSON and pretty-print it.

    Keys keep their original order and non-ASCII characters are written as
    is. ``indent=0`` produces compact output with no whitespace at all.

    Raises:
        InvalidStructuredDataError: If *text* is not valid JSON.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidStructuredDataError(
            f"Invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})",
            line=exc.lineno,
            column=exc.colno,
        ) from exc

    if indent <= 0:
        return json.dumps(data, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(data, ensure_ascii=False, indent=indent)


def _looks_like_json(text: str) -> bool:
    stripped = text.strip()
    if not stripped or stripped[0] not in "{[":
        return False
    try:
        json.loads(stripped)
    except json.JSONDecodeError:
        return False
    return True


def _looks_like_yaml(text: str) -> bool:
    if not (_YAML_DOCUMENT.search(text) or _YAML_MAPPING.search(text)):
        return False

    import yaml

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError:
        return False
    return isinstance(data, (dict, list))


def detect_language(text: str) -> str:
    """Guess the language of *text* for display purposes.

    Returns ``"json"``, ``"xml"``, ``"yaml"`` or ``"plaintext"``. JSON is
    only reported when the text actually parses; YAML needs both a
    mapping-looking line and a successful parse into a mapping or list.
    """
    if _looks_like_json(text):
        return "json"
    if _XML_START.match(text):
        return "xml"
    if _looks_like_yaml(text):
        return "yaml"
    return "plaintext"
