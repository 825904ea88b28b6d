"""
axon-parser: Python library for parsing AXON schema + data documents.

An AXON document declares typed schemas and then carries rows for them::

    @schema User
    id:I
    name:S
    age:I?
    @end
    @data User[2]
    1|Alice|28
    2|Bob|_
    @end

Public API surface:

- ``parse(text, config=None)`` -- **main entry point**. Parses a document
  held in memory and returns a ``ParseResult``.

- ``parse_file(path, ...)`` -- Reads a document from disk, then ``parse()``.

- ``to_dataframes(result)`` / ``to_dataframe(block, schema)`` -- pandas
  view of the parsed data blocks.

- ``describe(result)`` -- Structural summary, including declared vs.
  actual row counts.

- ``ParserConfig`` / ``load_config`` / ``save_config`` -- opt-in pedantic
  checks; the defaults reproduce the lenient format exactly.
"""

from __future__ import annotations

from axon_parser.config import ParserConfig, load_config, save_config
from axon_parser.exceptions import (
    AxonError,
    ConfigValidationError,
    InvalidDataHeaderError,
    InvalidFloatError,
    InvalidIntegerError,
    MalformedFieldLineError,
    ParseError,
    RowCountMismatchError,
    SchemaNotFoundError,
    UnknownTypeCodeError,
    UnterminatedBlockError,
)
from axon_parser.frames import to_dataframe, to_dataframes
from axon_parser.parser import AxonParser, parse, parse_file
from axon_parser.summary import BlockSummary, ParseSummary, describe
from axon_parser.tokenize import split_row, unescape
from axon_parser.types import (
    NULL,
    BooleanValue,
    DataBlock,
    FieldDefinition,
    FieldType,
    FloatValue,
    IntegerValue,
    NullValue,
    ParseResult,
    Row,
    Schema,
    StringValue,
    TimestampValue,
    Value,
)
from axon_parser.values import parse_row, parse_value

__version__ = "0.1.0"

__all__ = [
    # Parsing
    "parse",
    "parse_file",
    "AxonParser",
    "split_row",
    "unescape",
    "parse_value",
    "parse_row",
    # Config
    "ParserConfig",
    "load_config",
    "save_config",
    # Results
    "describe",
    "ParseSummary",
    "BlockSummary",
    "to_dataframe",
    "to_dataframes",
    # Data model
    "FieldType",
    "FieldDefinition",
    "Schema",
    "DataBlock",
    "ParseResult",
    "Row",
    "Value",
    "NULL",
    "NullValue",
    "StringValue",
    "IntegerValue",
    "FloatValue",
    "BooleanValue",
    "TimestampValue",
    # Errors
    "AxonError",
    "ParseError",
    "UnknownTypeCodeError",
    "InvalidDataHeaderError",
    "SchemaNotFoundError",
    "InvalidIntegerError",
    "InvalidFloatError",
    "MalformedFieldLineError",
    "UnterminatedBlockError",
    "RowCountMismatchError",
    "ConfigValidationError",
]
