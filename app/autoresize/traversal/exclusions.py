"""Exclusion rules for directory traversal.

Excluded directories are configured like watched directories (relative
to the site root or absolute) and cover their whole subtree. The
recycler directory is always excluded.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from autoresize.traversal.segments import is_path_prefix, resolve_spec, split_segments

# Conventional trash directory name, never traversed.
RECYCLER_MARKER = "_recycler_"

# Base names starting with this marker are hidden.
HIDDEN_MARKER = "."


class ExclusionRules:
    """Resolved set of excluded directories.

    Args:
        directories: Absolute excluded directories.
        recycler_marker: Directory name treated as a recycler.
    """

    def __init__(
        self,
        directories: Iterable[Path] = (),
        *,
        recycler_marker: str = RECYCLER_MARKER,
    ) -> None:
        self._directories = tuple(directories)
        self._recycler_marker = recycler_marker

    @classmethod
    def from_specs(
        cls,
        specs: Iterable[str],
        site_root: Path,
        *,
        recycler_marker: str = RECYCLER_MARKER,
    ) -> ExclusionRules:
        """Resolve exclusion specs the same way watched roots are resolved.

        Args:
            specs: Excluded directory specs.
            site_root: Absolute site root that relative specs refer to.
            recycler_marker: Directory name treated as a recycler.

        Returns:
            ExclusionRules for the resolved directories.
        """
        return cls(
            (resolve_spec(spec, site_root) for spec in specs if spec.strip()),
            recycler_marker=recycler_marker,
        )

    @property
    def directories(self) -> tuple[Path, ...]:
        """Resolved excluded directories."""
        return self._directories

    def is_excluded(self, directory: Path) -> bool:
        """Check whether a directory is, or lies below, an excluded directory."""
        return any(is_path_prefix(rule, directory) for rule in self._directories)

    def is_recycler(self, directory: Path) -> bool:
        """Check whether a directory is, or lies below, a recycler directory."""
        return self._recycler_marker in split_segments(directory)

    def __len__(self) -> int:
        return len(self._directories)
