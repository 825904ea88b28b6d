"""
Base block parser ABC for axon-parser.

All section parsers implement this interface. The contract is:
1. parse() takes the document's stripped lines, the index of the section
   header, and the schema catalog accumulated so far.
2. It returns a BlockResult holding the parsed entity and the index of
   the first line after the section's ``@end``.

Parsers hold only their config, so one instance can serve any number of
documents.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from axon_parser.config import ParserConfig
from axon_parser.exceptions import UnterminatedBlockError
from axon_parser.types import Schema

END_KEYWORD = "@end"

T = TypeVar("T")


@dataclass
class BlockResult(Generic[T]):
    """A parsed section plus the index where scanning resumes."""
    block: T
    next_index: int


@dataclass
class SectionBody:
    """The non-blank lines between a section header and its ``@end``.

    Attributes:
        lines: Body lines in order, blank lines removed.
        next_index: Index of the first line after ``@end`` (or the number
            of lines, if the section ran to end of input).
        terminated: Whether an ``@end`` line was found.
    """
    lines: list[str] = field(default_factory=list)
    next_index: int = 0
    terminated: bool = False


def scan_body(lines: list[str], start: int) -> SectionBody:
    """Collect the body of the section whose header is ``lines[start]``."""
    body = SectionBody()
    i = start + 1
    while i < len(lines):
        line = lines[i]
        if line == END_KEYWORD:
            body.next_index = i + 1
            body.terminated = True
            return body
        if line:
            body.lines.append(line)
        i += 1
    body.next_index = i
    return body


class BlockParser(ABC):
    """Abstract base class for AXON section parsers.

    Subclasses set ``keyword`` and implement parse().
    """

    keyword: str = ""

    def __init__(self, config: ParserConfig | None = None):
        self.config = config or ParserConfig()

    def matches(self, line: str) -> bool:
        """Whether *line* opens a section handled by this parser."""
        return line.startswith(self.keyword)

    def _scan(self, lines: list[str], start: int, name: str) -> SectionBody:
        """scan_body() plus the pedantic ``@end`` check."""
        body = scan_body(lines, start)
        if not body.terminated and self.config.check_end_marker:
            raise UnterminatedBlockError(self.keyword, name)
        return body

    @abstractmethod
    def parse(
        self,
        lines: list[str],
        start: int,
        catalog: list[Schema],
    ) -> BlockResult:
        """Parse the section whose header is ``lines[start]``.

        Args:
            lines: All document lines, already stripped.
            start: Index of the section header line.
            catalog: Schemas declared earlier in the document.

        Returns:
            BlockResult with the parsed entity and the resume index.

        Raises:
            ParseError: If the section is invalid.
        """
