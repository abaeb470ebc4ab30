"""Shared types and helpers for CLI commands.

This module provides common enums and option handling used across
multiple CLI command modules.
"""

from enum import Enum
from pathlib import Path

from autoresize.configs.loader import require_config
from autoresize.configs.models import AutoresizeConfig


class OutputFormat(str, Enum):
    """Output format options for listing commands."""

    TABLE = "table"
    JSON = "json"


def load_task_config(
    config_path: Path | None,
    directories: list[str] | None = None,
    excludes: list[str] | None = None,
) -> AutoresizeConfig:
    """Load the configuration and apply command line overrides.

    Args:
        config_path: Optional custom config path.
        directories: Watched specs replacing the configured ones.
        excludes: Excluded specs replacing the configured ones.

    Returns:
        Configuration with overrides applied.

    Raises:
        typer.Exit: If the configuration cannot be loaded.
    """
    config = require_config(config_path)
    updates: dict[str, object] = {}
    if directories:
        updates["directories"] = directories
    if excludes:
        updates["exclude_directories"] = excludes
    if updates:
        config = config.model_copy(update={"task": config.task.model_copy(update=updates)})
    return config
