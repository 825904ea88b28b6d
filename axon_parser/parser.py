"""
Document driver for AXON.

Scans a document top to bottom and hands each section to the block parser
registered for its keyword:

1. Split the input into lines and strip each one.
2. At each line, find the first parser whose keyword starts the line.
   a. ``@schema`` -> SchemaParser; the schema joins the catalog.
   b. ``@data``   -> DataBlockParser; resolved against the catalog so far.
3. Any other line (blank, comment, stray text) is skipped silently.
4. Resume at the index returned by the block parser.

Any ParseError aborts the scan; callers get a full ParseResult or an
exception, never a partial result.
"""

from __future__ import annotations

import logging
from pathlib import Path

from axon_parser.blocks.base import BlockParser
from axon_parser.blocks.data import DataBlockParser
from axon_parser.blocks.schema import SchemaParser
from axon_parser.config import ParserConfig
from axon_parser.types import DataBlock, ParseResult, Schema

logger = logging.getLogger(__name__)

# Checked in order; the first parser whose keyword matches wins.
_PARSER_CLASSES: tuple[type[BlockParser], ...] = (SchemaParser, DataBlockParser)


def split_lines(text: str) -> list[str]:
    """Split a document into stripped lines (``\\r\\n`` and ``\\n`` endings)."""
    return [line.strip() for line in text.split("\n")]


class AxonParser:
    """Reusable parser bound to a ParserConfig.

    Holds no per-document state, so one instance may be shared across
    threads.
    """

    def __init__(self, config: ParserConfig | None = None):
        self.config = config or ParserConfig()
        self.block_parsers: list[BlockParser] = [
            cls(self.config) for cls in _PARSER_CLASSES
        ]

    def _parser_for(self, line: str) -> BlockParser | None:
        for block_parser in self.block_parsers:
            if block_parser.matches(line):
                return block_parser
        return None

    def parse(self, text: str) -> ParseResult:
        """Parse an AXON document.

        Raises:
            ParseError: On the first invalid section or row.
        """
        lines = split_lines(text)
        schemas: list[Schema] = []
        data_blocks: list[DataBlock] = []

        i = 0
        while i < len(lines):
            line = lines[i]
            block_parser = self._parser_for(line)
            if block_parser is None:
                if line:
                    logger.debug("Skipping unrecognized line %d: %s", i + 1, line)
                i += 1
                continue

            result = block_parser.parse(lines, i, schemas)
            if isinstance(result.block, Schema):
                schemas.append(result.block)
            else:
                data_blocks.append(result.block)
            i = result.next_index

        logger.info(
            "Parsed %d schema(s) and %d data block(s)", len(schemas), len(data_blocks)
        )
        return ParseResult(schemas=tuple(schemas), data_blocks=tuple(data_blocks))


def parse(text: str, config: ParserConfig | None = None) -> ParseResult:
    """Parse an AXON document held in memory.

    Args:
        text: The document text.
        config: Optional strictness settings; lenient defaults if ``None``.

    Returns:
        ParseResult with every schema and data block in document order.

    Raises:
        UnknownTypeCodeError, InvalidDataHeaderError, SchemaNotFoundError,
        InvalidIntegerError, InvalidFloatError: On invalid input.
        MalformedFieldLineError, UnterminatedBlockError,
        RowCountMismatchError: Only when enabled in *config*.
    """
    return AxonParser(config).parse(text)


def parse_file(
    path: str | Path,
    encoding: str = "utf-8-sig",
    config: ParserConfig | None = None,
) -> ParseResult:
    """Read an AXON document from disk and parse it.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ParseError: As for ``parse()``.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"AXON file not found: {path}")
    logger.info("Parsing %s", path)
    return parse(path.read_text(encoding=encoding), config=config)
