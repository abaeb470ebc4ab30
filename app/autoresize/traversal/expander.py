"""Wildcard expansion of watched directory specs.

A watched directory spec is either a literal directory (``fileadmin/``)
or contains wildcard segments (``media/*/photos/``), where each ``*``
stands for exactly one directory name at that position. Wildcard specs
are expanded against the real filesystem into the concrete directories
they denote.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from autoresize.traversal.segments import SEPARATOR, resolve_spec, split_segments

logger = logging.getLogger(__name__)

WILDCARD = "*"


def has_wildcard(spec: str) -> bool:
    """Check if a directory spec contains a wildcard segment."""
    return WILDCARD in split_segments(spec)


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """Segment-wise matcher derived from a wildcard spec.

    Literal segments must match exactly, a ``*`` segment matches any
    single directory name. Candidates must have exactly as many segments
    as the pattern.

    Attributes:
        segments: Normalized pattern segments.
    """

    segments: tuple[str, ...]

    @classmethod
    def from_spec(cls, spec: str) -> CompiledPattern:
        """Compile a directory spec into a pattern.

        Args:
            spec: Directory spec containing at least one wildcard segment.

        Returns:
            Compiled pattern for the spec.

        Raises:
            ValueError: If the spec has no wildcard segment.
        """
        segments = split_segments(spec)
        if WILDCARD not in segments:
            msg = f"Directory spec has no wildcard segment: {spec!r}"
            raise ValueError(msg)
        return cls(segments)

    @property
    def base_segments(self) -> tuple[str, ...]:
        """Literal segments before the first wildcard."""
        return self.segments[: self.segments.index(WILDCARD)]

    def matches(self, candidate: str | Path) -> bool:
        """Check whether a candidate path is a member of the pattern.

        Args:
            candidate: Path in the same form as the spec (relative to the
                site root for relative specs).

        Returns:
            True if every segment matches.
        """
        parts = split_segments(candidate)
        if len(parts) != len(self.segments):
            return False
        return all(_segment_matches(p, s) for p, s in zip(self.segments, parts, strict=True))

    def could_contain_match(self, candidate: str | Path) -> bool:
        """Check whether matches may exist below a candidate directory.

        Used to prune the traversal: a directory whose path already
        diverges from the pattern, or is as deep as the pattern, cannot
        have matching descendants.
        """
        parts = split_segments(candidate)
        if len(parts) >= len(self.segments):
            return False
        return all(_segment_matches(p, s) for p, s in zip(self.segments, parts, strict=False))


def _segment_matches(pattern: str, segment: str) -> bool:
    return pattern == WILDCARD or pattern == segment


def expand(spec: str, site_root: Path) -> list[str]:
    """Expand one directory spec into concrete directory specs.

    Literal specs are returned unchanged as a one-element list. Wildcard
    specs are matched against every directory found below their literal
    base path, visited depth-first with each directory before its
    children and siblings in name order. Matches keep the form of the
    spec (relative or absolute) and end with a separator.

    Relative specs may climb out of the site root with leading ``..``
    segments; their matches keep those segments.

    A missing base path yields no matches; wildcard specs are
    speculative, so this is not an error.

    Args:
        spec: Watched directory spec.
        site_root: Absolute site root that relative specs refer to.

    Returns:
        Concrete directory specs in discovery order.
    """
    # Collapses "a/../b" so patterns line up with rendered paths, leading ".." is kept
    normalized = os.path.normpath(spec)
    if not has_wildcard(normalized):
        return [spec]

    pattern = CompiledPattern.from_spec(normalized)
    is_absolute = spec.startswith(SEPARATOR)
    base_parts = pattern.base_segments
    if is_absolute:
        base_path = Path(*base_parts)
    else:
        base_path = resolve_spec(SEPARATOR.join(base_parts), site_root) if base_parts else site_root

    if not base_path.is_dir():
        logger.debug("Wildcard base %s does not exist, no matches for %s", base_path, spec)
        return []

    matches: list[str] = []
    for directory in _walk_directories(base_path, pattern, site_root, is_absolute):
        name = _spec_form(directory, site_root, is_absolute)
        if pattern.matches(name):
            matches.append(name.rstrip(SEPARATOR) + SEPARATOR)

    logger.debug("Expanded %s into %d director(ies)", spec, len(matches))
    return matches


def expand_all(specs: Iterable[str], site_root: Path) -> list[str]:
    """Expand several specs, concatenating the results in input order.

    Args:
        specs: Watched directory specs.
        site_root: Absolute site root that relative specs refer to.

    Returns:
        Concrete directory specs.
    """
    expanded: list[str] = []
    for spec in specs:
        expanded.extend(expand(spec, site_root))
    return expanded


def _walk_directories(
    base: Path,
    pattern: CompiledPattern,
    site_root: Path,
    is_absolute: bool,
) -> Iterator[Path]:
    """Yield directories below ``base`` depth-first, self first.

    Symbolic links to directories are not followed. Subtrees that cannot
    contain a match are not entered.
    """
    stack: list[Path] = [base]
    while stack:
        current = stack.pop()
        yield current
        if not pattern.could_contain_match(_spec_form(current, site_root, is_absolute)):
            continue
        try:
            with os.scandir(current) as entries:
                children = sorted(
                    Path(entry.path) for entry in entries if entry.is_dir(follow_symlinks=False)
                )
        except PermissionError:
            logger.warning("Permission denied expanding directory: %s", current)
            continue
        except OSError as e:
            logger.warning("Cannot list directory %s: %s", current, e)
            continue
        # Reverse so the smallest name is popped first
        stack.extend(reversed(children))


def _spec_form(directory: Path, site_root: Path, is_absolute: bool) -> str:
    """Render a directory the way its spec was written."""
    if is_absolute:
        return str(directory)
    return os.path.relpath(directory, site_root)
