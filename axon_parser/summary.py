"""
Structural summary of a ParseResult.

``describe()`` reports what a document contained without converting any
rows: schema names, field counts, and for each data block the declared
row count next to the actual one.

The parser never validates a block's declared count (unless pedantic
mode is on), so this is where mismatches surface: they are logged at
WARNING and listed in ``ParseSummary.count_mismatches``, never raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from axon_parser.types import ParseResult

logger = logging.getLogger(__name__)


@dataclass
class BlockSummary:
    """Declared vs. actual size of one data block."""
    schema_name: str
    declared_count: int
    row_count: int

    @property
    def count_matches(self) -> bool:
        return self.declared_count == self.row_count


@dataclass
class ParseSummary:
    """Structured overview of a parsed document, returned by ``describe()``.

    Attributes:
        schemas: Mapping of schema name -> field names. For duplicate
            names only the first declaration is listed, since it is the
            one data blocks resolve against.
        duplicate_schemas: Schema names declared more than once.
        blocks: One BlockSummary per data block, in document order.
        total_rows: Sum of actual row counts across all blocks.
    """
    schemas: dict[str, list[str]] = field(default_factory=dict)
    duplicate_schemas: list[str] = field(default_factory=list)
    blocks: list[BlockSummary] = field(default_factory=list)
    total_rows: int = 0

    @property
    def count_mismatches(self) -> list[BlockSummary]:
        return [b for b in self.blocks if not b.count_matches]


def describe(result: ParseResult) -> ParseSummary:
    """Summarize *result*.

    Returns:
        A ``ParseSummary`` instance.
    """
    summary = ParseSummary()

    for schema in result.schemas:
        if schema.name in summary.schemas:
            if schema.name not in summary.duplicate_schemas:
                summary.duplicate_schemas.append(schema.name)
            continue
        summary.schemas[schema.name] = schema.field_names

    for block in result.data_blocks:
        summary.blocks.append(
            BlockSummary(block.schema_name, block.count, len(block.rows))
        )
        summary.total_rows += len(block.rows)

    for b in summary.count_mismatches:
        logger.warning(
            "@data %s declares %d row(s) but contains %d",
            b.schema_name, b.declared_count, b.row_count,
        )
    if summary.duplicate_schemas:
        logger.info(
            "Schemas declared more than once (first wins): %s",
            summary.duplicate_schemas,
        )

    return summary
