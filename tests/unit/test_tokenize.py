"""
Unit tests for the row tokenizer (axon_parser.tokenize).

Tests separator handling, quoting, escapes and the trailing-token rule
using short inline row strings.
"""

from __future__ import annotations

import pytest

from axon_parser.tokenize import split_row, unescape


class TestSplitRow:
    """Tests for split_row()."""

    # -----------------------------------------------------------------
    # Separators
    # -----------------------------------------------------------------

    def test_simple_tokens(self):
        assert split_row("a|b|c") == ["a", "b", "c"]

    def test_single_token(self):
        assert split_row("abc") == ["abc"]

    def test_empty_line_yields_no_tokens(self):
        assert split_row("") == []

    def test_trailing_separator_keeps_empty_token(self):
        """'a|' must yield a trailing empty token, not drop it."""
        assert split_row("a|") == ["a", ""]

    def test_empty_middle_token(self):
        assert split_row("a||c") == ["a", "", "c"]

    def test_leading_separator(self):
        assert split_row("|a") == ["", "a"]

    def test_only_separator(self):
        assert split_row("|") == ["", ""]

    def test_whitespace_is_preserved(self):
        """Tokens are not trimmed."""
        assert split_row("a | b") == ["a ", " b"]

    # -----------------------------------------------------------------
    # Quoting
    # -----------------------------------------------------------------

    def test_pipe_inside_quotes_is_literal(self):
        assert split_row('a|"b|c"|d') == ["a", "b|c", "d"]

    def test_quotes_are_not_kept(self):
        assert split_row('"hello"') == ["hello"]

    def test_quotes_mid_token(self):
        """Quotes toggle mode anywhere, not just at token start."""
        assert split_row('ab"c|d"e|f') == ["abc|de", "f"]

    def test_empty_quoted_token_is_dropped_at_end_of_line(self):
        """'""' at end of line yields an empty token that is not pushed."""
        assert split_row('a|""') == ["a"]

    def test_unterminated_quote_swallows_rest(self):
        assert split_row('a|"b|c') == ["a", "b|c"]

    # -----------------------------------------------------------------
    # Escapes
    # -----------------------------------------------------------------

    @pytest.mark.parametrize(
        "line, expected",
        [
            (r"a\nb", "a\nb"),
            (r"a\tb", "a\tb"),
            (r"a\rb", "a\rb"),
            (r"a\\b", "a\\b"),
            (r"a\xb", "axb"),
        ],
    )
    def test_escape_table(self, line, expected):
        assert split_row(line) == [expected]

    def test_escaped_separator_is_literal(self):
        assert split_row(r"a\|b|c") == ["a|b", "c"]

    def test_escaped_quote_is_literal(self):
        assert split_row(r'say \"hi\"') == ['say "hi"']

    def test_trailing_backslash_is_dropped(self):
        assert split_row("ab\\") == ["ab"]

    def test_escaped_trailing_separator_still_counts_as_trailing(self):
        """The trailing rule looks at the raw last character only."""
        assert split_row(r"a\|") == ["a|"]


class TestUnescape:
    """Tests for unescape()."""

    def test_no_backslash_returns_input(self):
        assert unescape("plain text") == "plain text"

    def test_newline_escape(self):
        assert unescape(r"a\nb") == "a\nb"

    def test_unknown_escape_yields_character(self):
        assert unescape(r"\q") == "q"

    def test_double_backslash(self):
        assert unescape("a\\\\b") == "a\\b"

    def test_trailing_backslash_dropped(self):
        assert unescape("abc\\") == "abc"
