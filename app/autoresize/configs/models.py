"""Configuration models for batch resize runs.

This module defines the Pydantic models representing the config.toml
structure: the ``[task]`` section describing what a batch run walks and
the ``[rulesets]`` section handed to the resizer collaborator.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from autoresize.resizer.loader import BUILTIN_REPORTER


def _clean_specs(value: object) -> object:
    """Accept newline-separated strings and drop blank entries."""
    if isinstance(value, str):
        value = value.splitlines()
    if isinstance(value, list):
        return [str(item).strip() for item in value if str(item).strip()]
    return value


class TaskSettings(BaseModel):
    """Batch task section of the configuration.

    Attributes:
        site_root: Absolute directory relative specs refer to.
        directories: Watched directory specs. Empty means every directory
            known to the rule sets.
        exclude_directories: Directory specs whose subtrees are skipped.
        interactive: Show notifications on the console instead of logging them.
        resizer: Resizer reference (``module:attribute`` or ``"report"``).
    """

    model_config = ConfigDict(extra="forbid")

    site_root: Annotated[Path, Field(description="Absolute site root directory")]
    directories: Annotated[
        list[str],
        Field(default_factory=list, description="Watched directory specs"),
    ]
    exclude_directories: Annotated[
        list[str],
        Field(default_factory=list, description="Excluded directory specs"),
    ]
    interactive: Annotated[bool, Field(description="Console notifications")] = False
    resizer: Annotated[str, Field(description="Resizer reference")] = BUILTIN_REPORTER

    @field_validator("site_root")
    @classmethod
    def validate_site_root(cls, v: Path) -> Path:
        """Validate that the site root is absolute."""
        if not v.is_absolute():
            msg = f"site_root must be an absolute path, got {v}"
            raise ValueError(msg)
        return v

    @field_validator("directories", "exclude_directories", mode="before")
    @classmethod
    def clean_specs(cls, v: object) -> object:
        """Normalize directory spec lists."""
        return _clean_specs(v)


class RulesetSettings(BaseModel):
    """Rule set section handed to the resizer collaborator.

    Only ``directories`` and ``file_types`` are interpreted here; any
    other key is passed through to the resizer untouched.

    Attributes:
        directories: Directory specs watched by the rule sets.
        file_types: File extensions handled by the rule sets.
    """

    model_config = ConfigDict(extra="allow")

    directories: Annotated[
        list[str],
        Field(default_factory=list, description="Directories watched by rule sets"),
    ]
    file_types: Annotated[
        list[str],
        Field(default_factory=list, description="Extensions handled by rule sets"),
    ]

    @field_validator("directories", mode="before")
    @classmethod
    def clean_directories(cls, v: object) -> object:
        """Normalize directory spec lists."""
        return _clean_specs(v)

    @field_validator("file_types", mode="before")
    @classmethod
    def clean_file_types(cls, v: object) -> object:
        """Normalize extensions to lower case without leading dots.

        A comma-separated string is accepted as well.
        """
        if isinstance(v, str):
            v = v.split(",")
        if isinstance(v, list):
            cleaned = (str(item).strip().lstrip(".").lower() for item in v)
            return list(dict.fromkeys(ext for ext in cleaned if ext))
        return v

    def as_configuration(self) -> dict[str, object]:
        """Return the section as a plain mapping for the resizer."""
        return self.model_dump()


class AutoresizeConfig(BaseModel):
    """Complete batch resize configuration.

    Attributes:
        task: Batch task settings.
        rulesets: Rule set settings handed to the resizer.
    """

    model_config = ConfigDict(extra="forbid")

    task: Annotated[TaskSettings, Field(description="Batch task settings")]
    rulesets: Annotated[
        RulesetSettings,
        Field(default_factory=RulesetSettings, description="Resizer rule sets"),
    ]
