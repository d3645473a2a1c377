"""Unattend Validator configuration package."""

from unattend_validator.config.loader import get_config, load_config
from unattend_validator.config.models import ValidatorConfig

__all__ = ["ValidatorConfig", "get_config", "load_config"]
