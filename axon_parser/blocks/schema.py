"""
Schema block parser for AXON documents.

Input structure:
  @schema User
  id:I
  name:S
  age:I?
  @end

Each body line is ``<name>:<type-spec>``. The type spec is a single type
code (S/I/F/B/T), optionally followed by ``?`` to mark the field
nullable. Only the first character of the spec is read, so ``I`` and
``Int`` both declare an Integer.

Leniency: a body line that does not split into exactly two parts around
``:`` is skipped, and a block that runs to end of input without ``@end``
keeps the fields collected so far. Both become errors in pedantic mode.
"""

from __future__ import annotations

import logging

from axon_parser.blocks.base import BlockParser, BlockResult
from axon_parser.exceptions import MalformedFieldLineError, UnknownTypeCodeError
from axon_parser.types import FieldDefinition, FieldType, Schema

logger = logging.getLogger(__name__)

SCHEMA_KEYWORD = "@schema"
NULLABLE_MARKER = "?"


def parse_type_spec(spec: str) -> tuple[FieldType, bool]:
    """Parse a type spec such as ``"I"`` or ``"S?"``.

    Returns:
        ``(field_type, nullable)``.

    Raises:
        UnknownTypeCodeError: If the code is unknown, or the spec is empty
            once the nullable marker is removed.
    """
    spec = spec.strip()
    nullable = spec.endswith(NULLABLE_MARKER)
    if nullable:
        spec = spec[:-1]
    if not spec:
        raise UnknownTypeCodeError("")
    return FieldType.from_code(spec[0]), nullable


class SchemaParser(BlockParser):
    """Parser for ``@schema Name ... @end`` sections."""

    keyword = SCHEMA_KEYWORD

    def parse(
        self,
        lines: list[str],
        start: int,
        catalog: list[Schema],
    ) -> BlockResult[Schema]:
        name = lines[start].replace(self.keyword, "").strip()
        body = self._scan(lines, start, name)

        fields: list[FieldDefinition] = []
        for line in body.lines:
            parts = line.split(":")
            if len(parts) != 2:
                if self.config.check_field_lines:
                    raise MalformedFieldLineError(line)
                logger.debug("Skipping malformed field line in schema '%s': %s", name, line)
                continue
            field_type, nullable = parse_type_spec(parts[1])
            fields.append(FieldDefinition(parts[0].strip(), field_type, nullable))

        logger.debug("Parsed schema '%s' with %d field(s)", name, len(fields))
        return BlockResult(Schema(name, tuple(fields)), body.next_index)
