"""
Custom exception hierarchy for axon-parser.

Why a custom hierarchy:
- Callers can catch specific exceptions (e.g., SchemaNotFoundError vs
  InvalidIntegerError) without relying on generic ValueError/RuntimeError.
- Each exception keeps the offending value as an attribute, so callers
  can report it without parsing the message text.

Every ParseError is fatal: the parse is aborted and no partial result
is returned.
"""

from __future__ import annotations


class AxonError(Exception):
    """Base exception for all axon-parser errors."""


class ParseError(AxonError):
    """Base class for errors raised while parsing an AXON document."""


class UnknownTypeCodeError(ParseError):
    """Raised when a schema field declares an unrecognized type code.

    An empty type spec (e.g. ``name:`` or ``name:?``) is reported with
    ``code == ""``.
    """

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unknown type code: {code!r}")


class InvalidDataHeaderError(ParseError):
    """Raised when a ``@data`` line does not match ``@data Name[count]``."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"Invalid @data header: {line}")


class SchemaNotFoundError(ParseError):
    """Raised when a data block references a schema not declared before it."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Schema not found: {name}")


class InvalidIntegerError(ParseError):
    """Raised when a token cannot be parsed as a 64-bit signed integer."""

    def __init__(self, token: str, field: str):
        self.token = token
        self.field = field
        super().__init__(f"Invalid integer {token!r} for field '{field}'")


class InvalidFloatError(ParseError):
    """Raised when a token cannot be parsed as a 64-bit float."""

    def __init__(self, token: str, field: str):
        self.token = token
        self.field = field
        super().__init__(f"Invalid float {token!r} for field '{field}'")


class MalformedFieldLineError(ParseError):
    """Raised in pedantic mode for a schema line without exactly one colon.

    The default (lenient) parser skips such lines instead.
    """

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"Malformed schema field line: {line}")


class UnterminatedBlockError(ParseError):
    """Raised in pedantic mode when a block reaches end of input without @end."""

    def __init__(self, keyword: str, name: str):
        self.keyword = keyword
        self.name = name
        super().__init__(f"{keyword} block '{name}' is missing its @end marker")


class RowCountMismatchError(ParseError):
    """Raised in pedantic mode when a data block's declared count is wrong."""

    def __init__(self, schema_name: str, declared: int, actual: int):
        self.schema_name = schema_name
        self.declared = declared
        self.actual = actual
        super().__init__(
            f"@data {schema_name}[{declared}] declares {declared} row(s) "
            f"but contains {actual}"
        )


class ConfigValidationError(AxonError):
    """Raised when a parser config file cannot be used.

    For example, if the YAML file is empty. Field-level problems are
    reported by Pydantic as ``pydantic.ValidationError``.
    """
