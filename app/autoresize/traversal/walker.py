"""Recursive candidate selection below a single root.

The walker visits every file below a root directory, drops hidden files,
files in recycler or excluded directories and files whose extension is
not recognized, and hands the remaining candidates to a dispatch
callback. Whether a candidate actually needs resizing is left to the
callback.
"""

import logging
import os
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from autoresize.traversal.exclusions import HIDDEN_MARKER, ExclusionRules
from autoresize.traversal.models import FileCandidate, SkipReason, WalkStats

logger = logging.getLogger(__name__)

DispatchCallback = Callable[[Path], None]


class TraversalError(Exception):
    """Base exception for traversal errors."""


class RootNotFoundError(TraversalError):
    """Raised when a root directory to walk does not exist."""

    def __init__(self, root: Path) -> None:
        super().__init__(f'Given directory "{root}" does not exist')
        self.root = root


class RootUnreadableError(TraversalError):
    """Raised when a root directory exists but cannot be listed."""

    def __init__(self, root: Path, reason: str) -> None:
        super().__init__(f'Cannot read directory "{root}": {reason}')
        self.root = root


def normalize_extensions(extensions: Iterable[str]) -> frozenset[str]:
    """Normalize file extensions to lower case without a leading dot.

    Args:
        extensions: Extensions such as ``"JPG"`` or ``".png"``.

    Returns:
        Set of normalized, non-empty extensions.
    """
    normalized = (ext.strip().lstrip(".").lower() for ext in extensions)
    return frozenset(ext for ext in normalized if ext)


def file_extension(name: str) -> str | None:
    """Return the lower-cased text after the last dot of a base name.

    Returns None when the name has no dot or ends with one.
    """
    _, dot, extension = name.rpartition(".")
    if not dot or not extension:
        return None
    return extension.lower()


class TreeWalker:
    """Walks root directories and selects candidate files.

    Args:
        exclusions: Excluded and recycler directory rules.
        extensions: Recognized file extensions (case-insensitive).
        hidden_marker: Prefix marking hidden base names.
    """

    def __init__(
        self,
        exclusions: ExclusionRules,
        extensions: Iterable[str],
        *,
        hidden_marker: str = HIDDEN_MARKER,
    ) -> None:
        self._exclusions = exclusions
        self._extensions = normalize_extensions(extensions)
        self._hidden_marker = hidden_marker

    @property
    def extensions(self) -> frozenset[str]:
        """Recognized file extensions."""
        return self._extensions

    def walk(self, root: Path, dispatch: DispatchCallback) -> WalkStats:
        """Dispatch every candidate file below ``root``.

        Args:
            root: Absolute root directory.
            dispatch: Callback receiving the absolute path of each candidate.

        Returns:
            Counters for the walk.

        Raises:
            RootNotFoundError: If ``root`` is not an existing directory.
            RootUnreadableError: If ``root`` cannot be listed.
        """
        stats = WalkStats(root=root)
        for candidate in self._iter_candidates(root, stats):
            dispatch(candidate.path)
            stats.dispatched += 1

        logger.debug(
            "Walked %s: %d visited, %d dispatched", root, stats.visited, stats.dispatched
        )
        return stats

    def candidates(self, root: Path) -> Iterator[FileCandidate]:
        """Yield the candidate files below ``root`` without dispatching them.

        Raises:
            RootNotFoundError: If ``root`` is not an existing directory.
            RootUnreadableError: If ``root`` cannot be listed.
        """
        yield from self._iter_candidates(root, WalkStats(root=root))

    def classify(self, path: Path) -> SkipReason | None:
        """Determine why a file would be skipped.

        Args:
            path: Absolute path of a file.

        Returns:
            The skip reason, or None if the file is a candidate.
        """
        directory = path.parent
        if path.name.startswith(self._hidden_marker):
            return SkipReason.HIDDEN
        if self._exclusions.is_recycler(directory):
            return SkipReason.RECYCLER
        if self._exclusions.is_excluded(directory):
            return SkipReason.EXCLUDED
        extension = file_extension(path.name)
        if extension is None:
            return SkipReason.NO_EXTENSION
        if extension not in self._extensions:
            return SkipReason.UNRECOGNIZED
        return None

    def _iter_candidates(self, root: Path, stats: WalkStats) -> Iterator[FileCandidate]:
        if not root.is_dir():
            raise RootNotFoundError(root)

        def on_error(error: OSError) -> None:
            # Only the root itself fails the walk, unreadable subdirectories are skipped
            if error.filename == str(root):
                raise RootUnreadableError(root, error.strerror or str(error)) from error
            _log_walk_error(error)

        for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
            directory = Path(dirpath)
            # Stable order for a given filesystem state
            dirnames.sort()

            pruned = self._directory_skip_reason(directory)
            if pruned is not None:
                # Nothing below an excluded or recycler directory qualifies
                dirnames.clear()
                for _ in filenames:
                    stats.visited += 1
                    stats.record_skip(pruned)
                continue

            for name in sorted(filenames):
                stats.visited += 1
                path = directory / name
                reason = self.classify(path)
                if reason is not None:
                    stats.record_skip(reason)
                    continue
                yield FileCandidate(
                    path=path,
                    directory=directory,
                    name=name,
                    extension=file_extension(name) or "",
                )

    def _directory_skip_reason(self, directory: Path) -> SkipReason | None:
        if self._exclusions.is_recycler(directory):
            return SkipReason.RECYCLER
        if self._exclusions.is_excluded(directory):
            return SkipReason.EXCLUDED
        return None


def _log_walk_error(error: OSError) -> None:
    logger.warning("Cannot list directory %s: %s", error.filename, error.strerror)
