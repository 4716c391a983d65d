"""Configuration loader for quote styles and output settings.

Loads a single YAML file with priority resolution:
1. Explicit path passed by the caller (highest priority)
2. User config: ~/.config/{app_name}/config.yaml
3. Project config: .{app_name}/config.yaml in current directory
4. Built-in defaults (fallback)

Example::

    settings:
      json_indent: 4
      status_bar: true
      format_json: false
    extra_quote_styles:
      - name: lua-long
        open: "[["
        close: "]]"
        supports_escape: false
        multi_line: true
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .quotes import DEFAULT_QUOTE_STYLES, QuoteStyle, quote_style_from_dict

logger = logging.getLogger(__name__)

# Lazy import yaml to avoid startup cost
_yaml = None


def _get_yaml():
    """Lazy-load PyYAML."""
    global _yaml
    if _yaml is None:
        import yaml

        _yaml = yaml
    return _yaml


DEFAULT_SETTINGS: dict[str, Any] = {
    "json_indent": 2,
    "status_bar": True,
    "format_json": False,
}


class UnescapeConfig:
    """Settings and quote style table with priority resolution.

    Config locations are checked in priority order:
    1. ``path`` argument - Explicit file, which must exist
    2. ~/.config/{app_name}/config.yaml - User overrides
    3. .{app_name}/config.yaml - Project-specific settings
    4. Built-in defaults

    Only the first file found is used. ``quote_styles`` in that file replaces
    the built-in table; ``extra_quote_styles`` are tried before it.
    """

    FILENAME = "config.yaml"

    def __init__(self, path: str | Path | None = None, app_name: str = "unescape"):
        """Initialize and load configuration.

        Args:
            path: Explicit config file. Takes precedence over the user and
                  project locations.
            app_name: Application name for config directory resolution
                     (e.g., ~/.config/{app_name}/config.yaml).

        Raises:
            FileNotFoundError: If an explicit *path* is given but is not a file.
        """
        self._app_name = app_name
        self._config_locations = [
            Path.home() / ".config" / app_name / self.FILENAME,  # User overrides
            Path.cwd() / f".{app_name}" / self.FILENAME,  # Project config
        ]
        if path is not None:
            explicit = Path(path)
            if not explicit.is_file():
                raise FileNotFoundError(f"Config file not found: {explicit}")
            self._config_locations.insert(0, explicit)

        self._settings: dict[str, Any] = dict(DEFAULT_SETTINGS)
        self._quote_styles: tuple[QuoteStyle, ...] = DEFAULT_QUOTE_STYLES
        self.source: Path | None = None
        self._load()

    def _find_config_file(self) -> Path | None:
        """Return the first existing config file, or None."""
        for config_file in self._config_locations:
            if config_file.is_file():
                return config_file
        return None

    def _load(self) -> None:
        config_file = self._find_config_file()
        if config_file is None:
            return

        yaml = _get_yaml()

        try:
            data = yaml.safe_load(config_file.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            logger.warning("Ignoring unreadable config file %s: %s", config_file, exc)
            return

        if not data:
            return
        if not isinstance(data, dict):
            logger.warning("Ignoring config file %s: top level must be a mapping", config_file)
            return

        self.source = config_file

        settings = data.get("settings")
        if isinstance(settings, dict):
            for key, value in settings.items():
                if key in DEFAULT_SETTINGS:
                    self._settings[key] = value
                else:
                    logger.warning("Unknown setting %r in %s", key, config_file)

        base = DEFAULT_QUOTE_STYLES
        if "quote_styles" in data:
            base = self._parse_styles(data["quote_styles"], config_file)
        extra = self._parse_styles(data.get("extra_quote_styles") or [], config_file)
        self._quote_styles = extra + base

    @staticmethod
    def _parse_styles(entries: Any, config_file: Path) -> tuple[QuoteStyle, ...]:
        if not isinstance(entries, list):
            logger.warning("Quote styles in %s must be a list", config_file)
            return ()

        styles: list[QuoteStyle] = []
        for entry in entries:
            if not isinstance(entry, dict):
                logger.warning("Skipping quote style %r in %s: not a mapping", entry, config_file)
                continue
            try:
                styles.append(quote_style_from_dict(entry))
            except ValueError as exc:
                # Skip invalid styles
                logger.warning("Skipping quote style in %s: %s", config_file, exc)
        return tuple(styles)

    @property
    def quote_styles(self) -> tuple[QuoteStyle, ...]:
        """Quote style table in priority order."""
        return self._quote_styles

    @property
    def json_indent(self) -> int:
        try:
            return max(int(self._settings["json_indent"]), 0)
        except (TypeError, ValueError):
            return DEFAULT_SETTINGS["json_indent"]

    @property
    def status_bar_enabled(self) -> bool:
        return bool(self._settings["status_bar"])

    @property
    def format_json(self) -> bool:
        return bool(self._settings["format_json"])

    def get_settings(self) -> dict[str, Any]:
        """Get a copy of the resolved settings."""
        return self._settings.copy()
