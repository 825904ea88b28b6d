"""
Data block parser for AXON documents.

Input structure:
  @data User[2]
  1|Alice|1|28
  2|Bob|0|_
  @end

The header names a schema and declares a row count. The schema is
resolved against the catalog of schemas declared *earlier* in the
document; when several share the name, the first one wins.

Each non-blank body line is one row (see values.parse_row). A row error
aborts the whole parse.

The declared count is stored as-is and only compared with the actual row
count in pedantic mode.
"""

from __future__ import annotations

import logging
import re

from axon_parser.blocks.base import BlockParser, BlockResult
from axon_parser.exceptions import (
    InvalidDataHeaderError,
    RowCountMismatchError,
    SchemaNotFoundError,
)
from axon_parser.types import DataBlock, Schema, find_schema
from axon_parser.values import parse_row

logger = logging.getLogger(__name__)

DATA_KEYWORD = "@data"

_HEADER_PATTERN = re.compile(r"@data\s+(\w+)\[(\d+)\]")


def parse_data_header(line: str) -> tuple[str, int]:
    """Extract ``(schema_name, count)`` from a ``@data Name[count]`` line.

    Raises:
        InvalidDataHeaderError: If the line does not match.
    """
    match = _HEADER_PATTERN.search(line)
    if match is None:
        raise InvalidDataHeaderError(line)
    return match.group(1), int(match.group(2))


class DataBlockParser(BlockParser):
    """Parser for ``@data Name[count] ... @end`` sections."""

    keyword = DATA_KEYWORD

    def parse(
        self,
        lines: list[str],
        start: int,
        catalog: list[Schema],
    ) -> BlockResult[DataBlock]:
        schema_name, count = parse_data_header(lines[start])

        schema = find_schema(catalog, schema_name)
        if schema is None:
            raise SchemaNotFoundError(schema_name)

        body = self._scan(lines, start, schema_name)
        rows = tuple(parse_row(line, schema) for line in body.lines)

        if len(rows) != count:
            if self.config.check_row_count:
                raise RowCountMismatchError(schema_name, count, len(rows))
            logger.debug(
                "@data %s declares %d row(s), found %d (not validated)",
                schema_name, count, len(rows),
            )

        logger.debug("Parsed data block '%s' with %d row(s)", schema_name, len(rows))
        return BlockResult(DataBlock(schema_name, count, rows), body.next_index)
