"""
Global Configuration and Viewer Defaults.

Centralizes the defaults used when rendering an outline in the terminal.
Values can be overridden with environment variables or a YAML settings file
(``.gqlens.yaml`` in the working directory, or ``--config PATH``).
"""

import logging
import os
from pathlib import Path
from typing import Dict

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

# --- Layout ---
# Spaces per nesting level in the terminal outline
INDENT_WIDTH = int(os.getenv("GQLENS_INDENT_WIDTH", "2"))

# --- Styles (rich style strings) ---
HIGHLIGHT_STYLE = os.getenv("GQLENS_HIGHLIGHT_STYLE", "bold black on yellow")

# Keyed by outline segment role
ROLE_STYLES: Dict[str, str] = {
    "keyword": "bold magenta",
    "definition_name": "blue",
    "name": "cyan",
    "alias": "medium_purple",
    "type": "yellow",
    "variable": "dark_orange",
    "argument": "medium_purple",
    "value": "green",
    "directive": "magenta",
    "punctuation": "grey50",
}

# --- Safety Limits ---
# CLI input larger than this is truncated before parsing (library calls are unbounded)
MAX_DOCUMENT_BYTES = 1024 * 1024

DEFAULT_SETTINGS_FILE = Path(".gqlens.yaml")


class SettingsError(Exception):
    """Raised when a settings file cannot be read or is invalid."""


class ViewerSettings(BaseModel):
    """Effective settings for terminal rendering."""
    indent_width: int = Field(default=INDENT_WIDTH, ge=0, le=16)
    highlight_style: str = HIGHLIGHT_STYLE
    role_styles: Dict[str, str] = Field(default_factory=lambda: dict(ROLE_STYLES))
    max_document_bytes: int = Field(default=MAX_DOCUMENT_BYTES, gt=0)

    def style_for(self, role: str) -> str:
        return self.role_styles.get(role, "")


def load_settings(path: Path | None = None) -> ViewerSettings:
    """
    Load viewer settings.

    Args:
        path (Path | None): Explicit settings file. When omitted,
            ``.gqlens.yaml`` is used if it exists.

    Returns:
        ViewerSettings: Defaults merged with the file's values.

    Raises:
        SettingsError: If the file cannot be read or fails validation.
    """
    if path is None:
        if not DEFAULT_SETTINGS_FILE.exists():
            return ViewerSettings()
        path = DEFAULT_SETTINGS_FILE

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise SettingsError(f"Cannot read settings file {path}: {e}") from e

    if not isinstance(data, dict):
        raise SettingsError(f"Settings file {path} must contain a mapping")

    # Partial role style maps extend the defaults instead of replacing them
    if isinstance(data.get("role_styles"), dict):
        data["role_styles"] = {**ROLE_STYLES, **data["role_styles"]}

    try:
        settings = ViewerSettings(**data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {path}: {e}") from e

    logger.debug(f"Loaded settings from {path}")
    return settings
