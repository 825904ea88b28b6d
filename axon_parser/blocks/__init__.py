"""
Block parsers sub-package for axon-parser.

Contains one parser per top-level section kind. Each parser consumes its
section starting at the header line and reports where the caller should
resume scanning.

Design: Strategy Pattern
- base.py defines the BlockParser ABC and the shared end-of-block scan.
- schema.py implements SchemaParser for ``@schema ... @end``.
- data.py implements DataBlockParser for ``@data Name[count] ... @end``.

The document driver (parser.py) selects a parser by the keyword that
starts the line.
"""
