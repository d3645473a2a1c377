"""Configuration loader for Unattend Validator.

Loads the JSON configuration file and returns a validated ValidatorConfig.
Uses module-level caching so the config is only parsed once per process.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from unattend_validator.config.models import ValidatorConfig
from unattend_validator.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Module-level cache
_config_cache: dict[str, ValidatorConfig] = {}

# Default config path lives next to this module
_DEFAULT_CONFIG_PATH = Path(__file__).parent / "unattend_default.json"


def load_config(path: Optional[Path] = None) -> ValidatorConfig:
    """Load and validate configuration from a JSON file.

    Parameters
    ----------
    path : Path | None
        Path to a custom JSON config file.
        If ``None``, the built-in ``unattend_default.json`` is used.

    Returns
    -------
    ValidatorConfig
        Validated configuration instance.

    Raises
    ------
    FileNotFoundError
        If the specified path does not exist.
    ConfigurationError
        If the file is not valid JSON or does not match the expected schema.
    """
    config_path = path or _DEFAULT_CONFIG_PATH
    cache_key = str(config_path.resolve())

    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
        config = ValidatorConfig.model_validate(raw)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ConfigurationError(f"Invalid configuration {config_path}: {exc}") from exc

    logger.debug("Loaded configuration from %s", config_path)
    _config_cache[cache_key] = config
    return config


def get_config() -> ValidatorConfig:
    """Get the default configuration (cached)."""
    return load_config()


def clear_cache() -> None:
    """Clear the config cache, useful for testing."""
    _config_cache.clear()
