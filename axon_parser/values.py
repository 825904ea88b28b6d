"""
Value coercion for AXON row tokens.

Converts raw tokens (output of ``split_row``) into typed ``Value``
variants according to each field's declared ``FieldType``:

- String: backslash escapes are resolved, then wrapped as StringValue.
- Integer: strict signed decimal in the 64-bit range.
- Float: strict float literal; ``inf``/``infinity``/``nan`` are accepted.
- Boolean: ``"1"`` is true, every other token is false (never fails).
- Timestamp: kept verbatim.

The null sentinel ``_`` is handled one level up in ``parse_row`` and maps
to ``NULL`` for every type, nullable or not.
"""

from __future__ import annotations

import re

from axon_parser.exceptions import InvalidFloatError, InvalidIntegerError
from axon_parser.tokenize import split_row, unescape
from axon_parser.types import (
    NULL,
    BooleanValue,
    FieldType,
    FloatValue,
    IntegerValue,
    Row,
    Schema,
    StringValue,
    TimestampValue,
    Value,
)

NULL_SENTINEL = "_"

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

# int()/float() also accept surrounding whitespace, digit separators and
# non-ASCII digits; these patterns restrict input to plain literals.
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def _parse_integer(token: str, field_name: str) -> IntegerValue:
    if not _INT_PATTERN.fullmatch(token):
        raise InvalidIntegerError(token, field_name)
    value = int(token)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise InvalidIntegerError(token, field_name)
    return IntegerValue(value)


def _parse_float(token: str, field_name: str) -> FloatValue:
    if not _FLOAT_PATTERN.fullmatch(token):
        raise InvalidFloatError(token, field_name)
    return FloatValue(float(token))


def parse_value(token: str, field_type: FieldType, field_name: str = "") -> Value:
    """Coerce a single token into a typed value.

    Args:
        token: Raw token text from ``split_row``.
        field_type: The declared type of the target field.
        field_name: Used only in error messages.

    Returns:
        The typed Value variant.

    Raises:
        InvalidIntegerError: If an Integer token is not a valid int64.
        InvalidFloatError: If a Float token is not a valid float literal.
    """
    if field_type is FieldType.STRING:
        return StringValue(unescape(token))
    if field_type is FieldType.INTEGER:
        return _parse_integer(token, field_name)
    if field_type is FieldType.FLOAT:
        return _parse_float(token, field_name)
    if field_type is FieldType.BOOLEAN:
        return BooleanValue(token == "1")
    return TimestampValue(token)


def parse_row(line: str, schema: Schema) -> Row:
    """Parse one row line against *schema*.

    Tokens are matched to fields by position. Extra tokens are ignored;
    fields beyond the last token are left out of the row entirely
    (absent), which is distinct from an explicit ``_`` (``NULL``).
    """
    tokens = split_row(line)
    row: Row = {}
    for fdef, token in zip(schema.fields, tokens):
        if token == NULL_SENTINEL:
            row[fdef.name] = NULL
        else:
            row[fdef.name] = parse_value(token, fdef.type, fdef.name)
    return row
