"""Command line interface.

Unescapes a whole file, or the string literal at a given line/column::

    sibylline-unescape payload.json --line 3 --column 15 --format-json
    echo '"a\\tb"' | sibylline-unescape - --line 1 --column 2
"""

from __future__ import annotations

import argparse
import json
import sys

from .codec import unescape
from .config import UnescapeConfig
from .document import Document
from .errors import InvalidStructuredDataError, NothingToUnescapeError
from .extractor import StringExtractor
from .formatting import format_json
from .spans import ExtractedString, Position
from .status import format_status, status_text

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_INVALID_DATA = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sibylline-unescape",
        description="Convert escape sequences in a file, or in the string at a position, "
        "into literal characters",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="Input file (default: stdin, also '-')",
    )
    parser.add_argument(
        "--line",
        type=int,
        default=None,
        help="1-based line of the cursor; extract the string literal there",
    )
    parser.add_argument(
        "--column",
        type=int,
        default=None,
        help="1-based column of the cursor (required with --line)",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--details",
        action="store_true",
        help="Print the matched span and quote style as JSON instead of unescaping",
    )
    mode.add_argument(
        "--stats",
        action="store_true",
        help="Print length and escape sequence counts instead of unescaping",
    )
    parser.add_argument(
        "--format-json",
        action="store_true",
        default=None,
        help="Pretty-print the unescaped text as JSON (default: from config)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="JSON indent width, 0 for compact output (default: from config or 2)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML config file, must exist (default: ~/.config/unescape/config.yaml or "
        ".unescape/config.yaml)",
    )
    return parser


def _read_input(path: str) -> Document:
    if path == "-":
        return Document(sys.stdin.read())
    return Document.from_path(path)


def _details_payload(result: ExtractedString) -> dict:
    style = result.quote_style
    return {
        "content": result.content,
        "start": {"line": result.start.line, "character": result.start.character},
        "end": {"line": result.end.line, "character": result.end.character},
        "quote_style": {
            "name": style.name,
            "open": style.open,
            "close": style.close,
            "prefix": style.prefix,
            "multi_line": style.multi_line,
            "prefix_disables_escape": style.prefix_disables_escape,
        },
    }


def run(args: argparse.Namespace, config: UnescapeConfig, document: Document) -> int:
    if args.stats and not config.status_bar_enabled:
        # Status line switched off in config
        return EXIT_OK

    extractor = StringExtractor(config.quote_styles)

    position = None
    if args.line is not None:
        position = Position(args.line - 1, args.column - 1)

    if position is None:
        text = document.get_text()
    elif args.details:
        result = extractor.extract_with_details(document, position)
        if result is None:
            print(NothingToUnescapeError(), file=sys.stderr)
            return EXIT_NOT_FOUND
        print(json.dumps(_details_payload(result), ensure_ascii=False, indent=2))
        return EXIT_OK
    elif args.stats:
        line = status_text(document, position, extractor=extractor)
        if line is None:
            print(NothingToUnescapeError(), file=sys.stderr)
            return EXIT_NOT_FOUND
        print(line)
        return EXIT_OK
    else:
        text = extractor.extract(document, position)
        if not text:
            print(NothingToUnescapeError(), file=sys.stderr)
            return EXIT_NOT_FOUND

    if args.stats:
        print(format_status(text))
        return EXIT_OK

    content = unescape(text)
    do_format = args.format_json if args.format_json is not None else config.format_json
    if do_format:
        indent = args.indent if args.indent is not None else config.json_indent
        try:
            content = format_json(content, indent=indent)
        except InvalidStructuredDataError as exc:
            print(exc, file=sys.stderr)
            return EXIT_INVALID_DATA

    print(content)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if (args.line is None) != (args.column is None):
        parser.error("--line and --column must be given together")
    if args.line is not None and (args.line < 1 or args.column < 1):
        parser.error("--line and --column are 1-based")
    if args.details and args.line is None:
        parser.error("--details requires --line and --column")
    if args.indent is not None and args.indent < 0:
        parser.error("--indent must be >= 0")

    try:
        config = UnescapeConfig(path=args.config)
        document = _read_input(args.file)
    except (OSError, UnicodeDecodeError) as exc:
        parser.error(str(exc))

    return run(args, config, document)


if __name__ == "__main__":
    sys.exit(main())
