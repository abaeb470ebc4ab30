"""Traversal domain models.

This module defines the data structures produced while selecting
candidate files: the per-file candidate record, the reasons a file can
be skipped, and per-root walk statistics.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class SkipReason(str, Enum):
    """Reason why a visited file is not dispatched.

    Attributes:
        HIDDEN: Base name starts with the hidden-file marker.
        RECYCLER: File lives below a recycler (trash) directory.
        EXCLUDED: Containing directory is covered by an exclusion rule.
        NO_EXTENSION: Base name has no extension.
        UNRECOGNIZED: Extension is not a recognized file type.
    """

    HIDDEN = "hidden"
    RECYCLER = "recycler"
    EXCLUDED = "excluded"
    NO_EXTENSION = "no_extension"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True, slots=True)
class FileCandidate:
    """A visited file that passed every skip filter.

    Attributes:
        path: Absolute path of the file.
        directory: Absolute path of the containing directory.
        name: Base name of the file.
        extension: Lower-cased extension without the leading dot.
    """

    path: Path
    directory: Path
    name: str
    extension: str

    def __post_init__(self) -> None:
        """Validate candidate data after initialization."""
        if not self.path.is_absolute():
            msg = f"Candidate path must be absolute, got {self.path}"
            raise ValueError(msg)
        if not self.extension or self.extension != self.extension.lower():
            msg = f"Extension must be non-empty and lower case, got {self.extension!r}"
            raise ValueError(msg)


@dataclass(slots=True)
class WalkStats:
    """Counters collected while walking one root.

    Attributes:
        root: Root directory that was walked.
        visited: Number of files visited.
        dispatched: Number of files handed to the dispatch callback.
        skipped: Number of skipped files, keyed by reason.
    """

    root: Path
    visited: int = 0
    dispatched: int = 0
    skipped: dict[SkipReason, int] = field(default_factory=dict)

    def record_skip(self, reason: SkipReason) -> None:
        """Count one skipped file."""
        self.skipped[reason] = self.skipped.get(reason, 0) + 1
