"""
DataFrame view of parsed AXON data blocks.

Converts each DataBlock into a pandas DataFrame with one column per
schema field, in declaration order, so callers can hand results straight
to analysis code. Nothing is written to disk.

Column dtypes use pandas' nullable extension types so that ``_`` values
survive as ``pd.NA`` without turning integer columns into floats:

  String, Timestamp -> "string"
  Integer           -> "Int64"
  Float             -> "Float64"
  Boolean           -> "boolean"

Timestamps stay as text; they are never parsed.

A field absent from a row (short row) and a field holding ``NULL`` both
become ``pd.NA`` here. Callers that need to tell them apart should read
``DataBlock.rows`` directly. A float reading of ``nan`` stays NaN and is
not counted as missing: ``isna()`` reports only ``_`` and absent fields.
"""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from axon_parser.exceptions import SchemaNotFoundError
from axon_parser.types import (
    DataBlock,
    FieldDefinition,
    FieldType,
    NullValue,
    ParseResult,
    Schema,
    Value,
)

logger = logging.getLogger(__name__)

_DTYPES: dict[FieldType, str] = {
    FieldType.STRING: "string",
    FieldType.INTEGER: "Int64",
    FieldType.FLOAT: "Float64",
    FieldType.BOOLEAN: "boolean",
    FieldType.TIMESTAMP: "string",
}


def _is_missing(value: Value | None) -> bool:
    return value is None or isinstance(value, NullValue)


def _cell(value: Value | None) -> object:
    """Python scalar for a row value; absent and NULL both map to pd.NA."""
    if _is_missing(value):
        return pd.NA
    return value.to_python()


def _float_column(values: list[Value | None]) -> pd.Series:
    """Float64 column whose NA mask comes from the row values, not from NaN.

    ``pd.Series(..., dtype="Float64")`` folds NaN into NA, which would make
    a ``nan`` reading indistinguishable from ``_``.
    """
    mask = np.array([_is_missing(v) for v in values], dtype=bool)
    data = np.array(
        [0.0 if missing else v.to_python() for v, missing in zip(values, mask)],
        dtype="float64",
    )
    return pd.Series(pd.arrays.FloatingArray(data, mask))


def _column(block: DataBlock, fdef: FieldDefinition) -> pd.Series:
    values = [row.get(fdef.name) for row in block.rows]
    if fdef.type is FieldType.FLOAT:
        return _float_column(values)
    return pd.Series([_cell(v) for v in values], dtype=_DTYPES[fdef.type])


def to_dataframe(block: DataBlock, schema: Schema) -> pd.DataFrame:
    """Build a DataFrame from *block*, typed according to *schema*.

    Args:
        block: A parsed data block.
        schema: The schema the block was parsed against.

    Returns:
        DataFrame with ``len(block.rows)`` rows and one column per field.
    """
    columns = {fdef.name: _column(block, fdef) for fdef in schema.fields}
    df = pd.DataFrame(columns)
    logger.debug(
        "Built DataFrame for '%s': %d rows x %d columns",
        block.schema_name, len(df), len(df.columns),
    )
    return df


def to_dataframes(result: ParseResult) -> list[pd.DataFrame]:
    """Convert every data block in *result* to a DataFrame, in order.

    Each block is typed by the first schema with its name, which is the
    schema it was parsed against.

    Raises:
        SchemaNotFoundError: If *result* was assembled by hand and lacks
            the schema for one of its blocks.
    """
    frames: list[pd.DataFrame] = []
    for block in result.data_blocks:
        schema = result.find_schema(block.schema_name)
        if schema is None:
            raise SchemaNotFoundError(block.schema_name)
        frames.append(to_dataframe(block, schema))
    return frames
