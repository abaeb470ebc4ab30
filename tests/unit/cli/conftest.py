"""Fixtures for CLI command tests."""

from pathlib import Path

import pytest
from autoresize.configs.loader import save_config
from autoresize.configs.models import AutoresizeConfig, RulesetSettings, TaskSettings


@pytest.fixture
def site_config(fileadmin_site: Path, tmp_path: Path) -> Path:
    """Config file watching the fileadmin tree for JPEG and PNG images."""
    config = AutoresizeConfig(
        task=TaskSettings(site_root=fileadmin_site, directories=["fileadmin/"]),
        rulesets=RulesetSettings(directories=["fileadmin/"], file_types=["jpg", "png"]),
    )
    return save_config(config, tmp_path / "config" / "config.toml")
