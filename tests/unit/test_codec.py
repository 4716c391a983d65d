"""Unit tests for the escape sequence codec."""

import pytest

from sibylline_unescape.codec import (
    EscapeStats,
    count_escape_sequences,
    escape,
    format_escape_stats,
    unescape,
)

# -----------------------------------------------------------------------
# unescape
# -----------------------------------------------------------------------


class TestUnescape:
    def test_newline_and_tab(self):
        assert unescape(r"Hello\nWorld\t!") == "Hello\nWorld\t!"

    @pytest.mark.parametrize(
        "token, expected",
        [
            (r"\n", "\n"),
            (r"\t", "\t"),
            (r"\r", "\r"),
            (r"\\", "\\"),
            (r"\"", '"'),
            (r"\'", "'"),
            (r"\b", "\b"),
            (r"\f", "\f"),
            (r"\v", "\v"),
            (r"\0", "\0"),
        ],
    )
    def test_simple_escapes(self, token, expected):
        assert unescape(token) == expected

    def test_unicode_escape(self):
        assert unescape(r"\u0048\u0065\u006c\u006c\u006f") == "Hello"

    def test_unicode_escape_uppercase_hex(self):
        assert unescape(r"\u00E9") == "\u00e9"

    def test_hex_escape(self):
        assert unescape(r"\x41\x42") == "AB"

    def test_surrogate_pair_joined(self):
        assert unescape(r"\ud83d\ude00") == "\U0001f600"

    def test_lone_surrogate_kept(self):
        assert unescape(r"\ud83d") == "\ud83d"

    def test_no_backslash_is_identity(self):
        text = "plain text with 'quotes' and \"doubles\""
        assert unescape(text) == text

    def test_unknown_escape_passes_through(self):
        assert unescape(r"\q\z") == r"\q\z"

    def test_short_unicode_escape_passes_through(self):
        assert unescape(r"\u12") == r"\u12"

    def test_short_hex_escape_passes_through(self):
        assert unescape(r"\x4") == r"\x4"

    def test_escaped_backslash_consumed_first(self):
        # \\n is an escaped backslash followed by a literal n
        assert unescape(r"\\n") == "\\n"

    def test_trailing_backslash(self):
        assert unescape("abc\\") == "abc\\"

    def test_not_idempotent(self):
        once = unescape(r"\\n")
        assert unescape(once) == "\n"


# -----------------------------------------------------------------------
# escape
# -----------------------------------------------------------------------


class TestEscape:
    def test_control_characters(self):
        assert escape("a\nb\tc\\") == r"a\nb\tc\\"

    def test_quote_escaped(self):
        assert escape('say "hi"') == r"say \"hi\""

    def test_other_quote_untouched(self):
        assert escape("it's", quote='"') == "it's"

    def test_single_quote(self):
        assert escape("it's", quote="'") == r"it\'s"

    def test_no_quote(self):
        assert escape('"x"', quote="") == '"x"'

    def test_inverse_of_unescape(self):
        text = 'line one\nline "two"\t\\end\0'
        assert unescape(escape(text)) == text


# -----------------------------------------------------------------------
# count / format
# -----------------------------------------------------------------------


class TestEscapeStats:
    def test_count_breakdown(self):
        stats = count_escape_sequences(r"a\nb\tc")
        assert stats.total == 2
        assert stats.breakdown == {r"\n": 1, r"\t": 1}

    def test_unicode_and_hex_buckets(self):
        stats = count_escape_sequences(r"\u0041\u0042\x43")
        assert stats.total == 3
        assert stats.breakdown == {r"\u": 2, r"\x": 1}

    def test_repeated_tokens(self):
        stats = count_escape_sequences(r"\n\n\n")
        assert stats.total == 3
        assert stats.breakdown == {r"\n": 3}

    def test_malformed_not_counted(self):
        stats = count_escape_sequences(r"\u12 \q")
        assert stats.total == 0
        assert stats.breakdown == {}

    def test_format_empty(self):
        assert format_escape_stats(EscapeStats()) == "No escape sequences"

    def test_format_counts(self):
        stats = count_escape_sequences(r"a\nb\tc\n")
        assert format_escape_stats(stats) == r"3 escape seq (\n:2, \t:1)"
