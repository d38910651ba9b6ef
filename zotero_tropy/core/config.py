"""Configuration management for zotero-tropy.

The converter has a single runtime switch: whether attachment paths are
rewritten into a flat ``files/`` directory or kept in their nested storage
layout. The switch can come from a JSON config file, the environment, or
explicit overrides (the command-line flags), in that order of precedence.

Example config file:
    {
        "layout": "nested"
    }
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from zotero_tropy.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

LAYOUT_ENV_VAR = "ZOTERO_TROPY_LAYOUT"

LAYOUT_FLAT = "flat"
LAYOUT_NESTED = "nested"
VALID_LAYOUTS = frozenset({LAYOUT_FLAT, LAYOUT_NESTED})


def parse_layout(value: str) -> bool:
    """Convert a layout name into the ``flat_layout`` flag.

    Args:
        value: "flat" or "nested" (case-insensitive)

    Returns:
        True for the flat layout, False for the nested one

    Raises:
        ConfigurationError: If the layout name is not recognised
    """
    layout = str(value).strip().lower()
    if layout not in VALID_LAYOUTS:
        raise ConfigurationError(
            f"Unknown layout '{value}'",
            f"expected one of: {', '.join(sorted(VALID_LAYOUTS))}",
        )
    return layout == LAYOUT_FLAT


@dataclass
class ExportConfig:
    """Export configuration."""

    # Attachment layout: True writes files/<id>-<name>, False keeps ./<path>
    flat_layout: bool = True

    _config_path: Optional[Path] = field(default=None, repr=False, compare=False)

    @property
    def layout(self) -> str:
        """Name of the configured attachment layout."""
        return LAYOUT_FLAT if self.flat_layout else LAYOUT_NESTED

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExportConfig":
        """Create an ExportConfig from a configuration dictionary.

        Accepts either ``{"flat_layout": bool}`` or ``{"layout": "flat"|"nested"}``.
        Unknown keys are ignored.

        Raises:
            ConfigurationError: If a value has the wrong type or is unknown
        """
        config = cls()
        if "layout" in data:
            config.flat_layout = parse_layout(data["layout"])
        if "flat_layout" in data:
            value = data["flat_layout"]
            if not isinstance(value, bool):
                raise ConfigurationError(
                    "Invalid value for 'flat_layout'",
                    f"expected a boolean, got {type(value).__name__}",
                )
            config.flat_layout = value
        return config

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "ExportConfig":
        """Load configuration from a JSON file.

        A missing path (None) yields the defaults.

        Raises:
            ConfigurationError: If the file cannot be read or is not a JSON object
        """
        if config_path is None:
            return cls()

        config_path = Path(config_path)
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(
                "Configuration file not found", str(config_path)
            ) from e
        except (json.JSONDecodeError, OSError) as e:
            raise ConfigurationError(
                f"Could not load configuration from {config_path}", str(e)
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Invalid configuration in {config_path}",
                f"expected a JSON object, got {type(data).__name__}",
            )

        config = cls.from_dict(data)
        config._config_path = config_path
        logger.debug(
            "Loaded configuration",
            extra={"config_path": str(config_path), "layout": config.layout},
        )
        return config


def resolve_config(
    config_path: Optional[Path] = None,
    overrides: Optional[dict[str, Any]] = None,
) -> ExportConfig:
    """Resolve the export configuration from all sources.

    Configuration resolution order (later wins):
    1. Dataclass defaults
    2. JSON config file, if ``config_path`` is given
    3. ``ZOTERO_TROPY_LAYOUT`` environment variable
    4. Explicit overrides (e.g. command-line flags)

    Args:
        config_path: Optional path to a JSON config file
        overrides: Optional dictionary accepted by ``ExportConfig.from_dict``

    Returns:
        Resolved ExportConfig

    Raises:
        ConfigurationError: If any source holds an invalid value
    """
    config = ExportConfig.load(config_path)

    env_layout = os.environ.get(LAYOUT_ENV_VAR)
    if env_layout:
        config.flat_layout = parse_layout(env_layout)

    if overrides:
        override_config = ExportConfig.from_dict(overrides)
        if "layout" in overrides or "flat_layout" in overrides:
            config.flat_layout = override_config.flat_layout

    return config
