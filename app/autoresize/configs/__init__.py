"""Batch resize configuration models and TOML I/O."""

from autoresize.configs.loader import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigurationMissingError,
    ConfigValidationError,
    load_config,
    require_config,
    save_config,
)
from autoresize.configs.models import AutoresizeConfig, RulesetSettings, TaskSettings

__all__ = [
    "AutoresizeConfig",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "ConfigurationMissingError",
    "RulesetSettings",
    "TaskSettings",
    "load_config",
    "require_config",
    "save_config",
]
