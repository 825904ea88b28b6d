"""
Demo script: parse the bundled sample documents via the public API.

Usage:
    uv run python scripts/run_example.py               # lenient (default)
    uv run python scripts/run_example.py --pedantic    # enable strict checks

Each document under inputs/ is parsed, its schemas and rows are logged,
and every data block is printed as a DataFrame.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

INPUT_FILES = [
    "inputs/users.axon",
    "inputs/lenient.axon",
]

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("run_example")


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------

def _format_row(row) -> str:
    """Render a row as ``key=value`` pairs; explicit nulls print as ``null``."""
    parts = []
    for key, value in row.items():
        py = value.to_python()
        parts.append(f"{key}={'null' if py is None else py!r}")
    return " ".join(parts)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> None:
    import axon_parser

    config = axon_parser.ParserConfig(pedantic="--pedantic" in sys.argv)

    for input_path in INPUT_FILES:
        if not Path(input_path).exists():
            log.warning("SKIP  %s  (file not found)", input_path)
            continue

        log.info("=" * 70)
        log.info("Processing: %s", input_path)
        log.info("=" * 70)

        try:
            result = axon_parser.parse_file(input_path, config=config)
        except axon_parser.ParseError as exc:
            log.error("FAILED  %s: %s", input_path, exc)
            continue

        for schema in result.schemas:
            log.info("Schema: %s", schema.name)
            for f in schema.fields:
                log.info("  - %s: %s%s", f.name, f.type.name, "?" if f.nullable else "")

        for block in result.data_blocks:
            log.info("Data: %s (%d rows)", block.schema_name, len(block.rows))
            for row in block.rows:
                log.info("  %s", _format_row(row))

        summary = axon_parser.describe(result)
        log.info("Total rows: %d", summary.total_rows)

        for block, df in zip(result.data_blocks, axon_parser.to_dataframes(result)):
            print(f"\n{block.schema_name}:\n{df}\n")

    log.info("All files processed.")


if __name__ == "__main__":
    main()
