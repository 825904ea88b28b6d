"""
Row tokenizer for AXON data rows.

Splits one row line into positional string tokens. The scan is a small
state machine with two flags:

- ``escaped``: the previous character was ``\\``; the current one is
  resolved through the escape table and appended as-is.
- ``in_quote``: inside ``"..."``; the separator ``|`` is literal.

Quote characters are structural and never appear in a token. Escapes are
resolved during tokenizing, so ``\\|`` and ``\\"`` yield a literal pipe
or quote.
"""

from __future__ import annotations

SEPARATOR = "|"
QUOTE = '"'
ESCAPE = "\\"

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r"}


def unescape_char(c: str) -> str:
    """Resolve the character following a backslash."""
    return _ESCAPES.get(c, c)


def unescape(text: str) -> str:
    """Resolve backslash escape sequences in *text*.

    A trailing lone backslash is dropped.
    """
    if ESCAPE not in text:
        return text

    out: list[str] = []
    escaped = False
    for c in text:
        if escaped:
            out.append(unescape_char(c))
            escaped = False
        elif c == ESCAPE:
            escaped = True
        else:
            out.append(c)
    return "".join(out)


def split_row(line: str) -> list[str]:
    """Split a row line into raw tokens.

    Examples::

        split_row("a|b|c")        # ["a", "b", "c"]
        split_row("a|")           # ["a", ""]
        split_row("")             # []
        split_row('a|"b|c"|d')    # ["a", "b|c", "d"]

    The last token is kept only if it is non-empty or the line ends with
    the separator, so a trailing empty field survives as ``""``.
    """
    tokens: list[str] = []
    current: list[str] = []
    in_quote = False
    escaped = False

    for c in line:
        if escaped:
            current.append(unescape_char(c))
            escaped = False
        elif c == ESCAPE:
            escaped = True
        elif c == QUOTE:
            in_quote = not in_quote
        elif c == SEPARATOR and not in_quote:
            tokens.append("".join(current))
            current = []
        else:
            current.append(c)

    if current or line.endswith(SEPARATOR):
        tokens.append("".join(current))

    return tokens
