"""
Data model for parsed AXON documents.

Everything here is built once during a single top-to-bottom scan of the
input and never mutated afterwards, so the containers are frozen
dataclasses holding tuples.

Key types:
- FieldType: the closed set of column types, keyed by one-letter code.
- FieldDefinition / Schema: what a ``@schema`` block declares.
- Value: a closed union of frozen variants (NullValue, StringValue, ...).
- Row: ``dict[str, Value]``. A missing key means the row had no token for
  that field; a key mapped to ``NULL`` means the token was ``_``.
- DataBlock / ParseResult: what a ``@data`` block and a document produce.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from axon_parser.exceptions import UnknownTypeCodeError


class FieldType(Enum):
    """Column type, valued by its single-character type code."""

    STRING = "S"
    INTEGER = "I"
    FLOAT = "F"
    BOOLEAN = "B"
    TIMESTAMP = "T"

    @classmethod
    def from_code(cls, code: str) -> FieldType:
        """Resolve a type code such as ``"I"``.

        Raises:
            UnknownTypeCodeError: If *code* is not one of S/I/F/B/T.
        """
        try:
            return cls(code)
        except ValueError:
            raise UnknownTypeCodeError(code) from None


@dataclass(frozen=True)
class FieldDefinition:
    """One declared field of a schema."""
    name: str
    type: FieldType
    nullable: bool = False


@dataclass(frozen=True)
class Schema:
    """A named, ordered set of field declarations.

    Field order defines the positional mapping from row tokens to fields.
    """
    name: str
    fields: tuple[FieldDefinition, ...] = ()

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NullValue:
    """The value of a ``_`` token."""

    def to_python(self) -> None:
        return None


@dataclass(frozen=True)
class StringValue:
    value: str

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True)
class IntegerValue:
    value: int

    def to_python(self) -> int:
        return self.value


@dataclass(frozen=True)
class FloatValue:
    value: float

    def to_python(self) -> float:
        return self.value


@dataclass(frozen=True)
class BooleanValue:
    value: bool

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True)
class TimestampValue:
    """A timestamp kept verbatim; it is never parsed or validated."""
    value: str

    def to_python(self) -> str:
        return self.value


NULL = NullValue()

Value = Union[
    NullValue, StringValue, IntegerValue, FloatValue, BooleanValue, TimestampValue
]

Row = dict[str, Value]


# ---------------------------------------------------------------------------
# Blocks and results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DataBlock:
    """Rows of one ``@data`` block.

    Attributes:
        schema_name: The schema name from the header.
        count: The row count declared in the header. It is not checked
            against ``len(rows)`` unless pedantic mode is enabled.
        rows: Parsed rows in source order.
    """
    schema_name: str
    count: int
    rows: tuple[Row, ...] = ()


@dataclass(frozen=True)
class ParseResult:
    """Standardized output of a successful parse.

    Attributes:
        schemas: Every ``@schema`` block in document order (duplicates kept).
        data_blocks: Every ``@data`` block in document order.
    """
    schemas: tuple[Schema, ...] = field(default_factory=tuple)
    data_blocks: tuple[DataBlock, ...] = field(default_factory=tuple)

    def find_schema(self, name: str) -> Schema | None:
        """Return the first schema named *name*, or ``None``."""
        return find_schema(self.schemas, name)


def find_schema(catalog: tuple[Schema, ...] | list[Schema], name: str) -> Schema | None:
    """Return the first schema in *catalog* whose name equals *name*.

    Later declarations with the same name never shadow earlier ones.
    """
    return next((s for s in catalog if s.name == name), None)
