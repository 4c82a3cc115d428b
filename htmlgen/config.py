"""Render configuration."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .constants import DOCTYPE, INDENT_WIDTH
from .errors import ConfigError

logger = logging.getLogger(__name__)


class RenderConfig(BaseModel):
    """Settings shared by every node during a single render call."""

    indent_width: int = Field(
        INDENT_WIDTH, ge=0, description="Spaces added per nesting level in pretty mode."
    )
    doctype: str = Field(
        DOCTYPE, description="Declaration written before a document root element."
    )
    undefined: str = Field(
        "undefined", description="Substitution for variables missing from the environment."
    )
    encoding: str = Field(
        "utf-8", description="Encoding used when the sink is a binary stream."
    )

    model_config = ConfigDict(frozen=True, extra="forbid")


DEFAULT_CONFIG = RenderConfig()


def load_render_config(path: Path) -> RenderConfig:
    """Load a RenderConfig from a YAML file; an empty file yields the defaults."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping of render settings.")
    try:
        config = RenderConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid render config in {path}: {exc}") from exc
    logger.debug("Loaded render config from %s: %s", path, config)
    return config
