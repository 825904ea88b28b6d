"""
Parser configuration models and YAML I/O for axon-parser.

The AXON format is lenient by default: malformed schema lines are
skipped, a missing ``@end`` simply ends the block at end of input, and a
data block's declared row count is never checked. ``ParserConfig`` lets a
caller opt into a stricter "pedantic" mode without changing the default
behaviour.

Key functions:
- load_config(path) -> ParserConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.

Why Pydantic + YAML:
- Pydantic gives us strict validation and clear error messages.
- YAML is human-editable and can live next to the documents it governs.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from axon_parser.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class ParserConfig(BaseModel):
    """Strictness switches for the parser. All default to the lenient format.

    ``pedantic`` is never expanded into the stored flags. Block parsers read
    the ``check_*`` properties, so assigning ``pedantic`` after construction
    takes effect and the saved YAML matches the in-memory object.
    """

    pedantic: bool = Field(
        False, description="Shorthand that enables every strict check below"
    )
    validate_row_count: bool = Field(
        False,
        description="If True, a @data block's declared count must equal its row count",
    )
    reject_malformed_fields: bool = Field(
        False,
        description="If True, schema lines without exactly one ':' are errors",
    )
    require_end_marker: bool = Field(
        False,
        description="If True, blocks must be closed by @end before end of input",
    )

    @property
    def check_row_count(self) -> bool:
        return self.pedantic or self.validate_row_count

    @property
    def check_field_lines(self) -> bool:
        return self.pedantic or self.reject_malformed_fields

    @property
    def check_end_marker(self) -> bool:
        return self.pedantic or self.require_end_marker


def load_config(path: str | Path) -> ParserConfig:
    """Load and validate a parser config YAML file.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"Config file must contain a mapping, got {type(raw).__name__}: {path}"
        )
    logger.info("Loaded config from %s", path)
    return ParserConfig.model_validate(raw)


def save_config(config: ParserConfig, path: str | Path) -> None:
    """Serialize a ParserConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# axon-parser configuration\n")
        f.write("# Set pedantic: true to enable every strict check.\n\n")
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
    logger.info("Saved config to %s", path)
