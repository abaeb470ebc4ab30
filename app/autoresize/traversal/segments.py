"""Path-segment algebra for roots and exclusion rules.

Ancestry checks compare whole path segments, so ``/site/media`` is an
ancestor of ``/site/media/2020`` but not of ``/site/media2``.
"""

import os
from pathlib import Path, PurePosixPath

SEPARATOR = "/"


def split_segments(path: str | Path) -> tuple[str, ...]:
    """Split a path into its normalized segments.

    Empty segments (doubled or trailing separators) and ``.`` self
    references are dropped. A leading ``/`` is kept as the first segment
    so absolute and relative paths never compare equal.

    Args:
        path: Path or path string to split.

    Returns:
        Tuple of path segments.
    """
    raw = str(path)
    parts = [p for p in raw.split(SEPARATOR) if p and p != "."]
    if raw.startswith(SEPARATOR):
        return (SEPARATOR, *parts)
    return tuple(parts)


def is_path_prefix(prefix: str | Path, path: str | Path) -> bool:
    """Check whether ``prefix`` equals ``path`` or is one of its ancestors.

    Args:
        prefix: Candidate ancestor path.
        path: Path to test.

    Returns:
        True if every segment of ``prefix`` matches the leading segments
        of ``path``.
    """
    prefix_parts = split_segments(prefix)
    path_parts = split_segments(path)
    if not prefix_parts or len(prefix_parts) > len(path_parts):
        return False
    return path_parts[: len(prefix_parts)] == prefix_parts


def resolve_spec(spec: str, site_root: Path) -> Path:
    """Resolve a directory spec to an absolute path.

    Absolute specs are kept, relative specs are joined onto the site
    root. The result is normalized but symlinks are not followed.

    Args:
        spec: Directory spec from configuration.
        site_root: Absolute site root directory.

    Returns:
        Absolute, normalized path.
    """
    candidate = PurePosixPath(spec)
    if not candidate.is_absolute():
        candidate = PurePosixPath(site_root) / candidate
    return Path(os.path.normpath(candidate))


def relative_spec(path: Path, site_root: Path) -> str:
    """Express a directory below the site root as a spec string.

    Specs for directories always end with a separator.

    Args:
        path: Absolute directory path below ``site_root``.
        site_root: Absolute site root directory.

    Returns:
        Relative spec with a trailing separator.
    """
    root_parts = split_segments(site_root)
    path_parts = split_segments(path)
    relative = path_parts[len(root_parts) :]
    return SEPARATOR.join(relative) + SEPARATOR
