"""Directory resolution and traversal.

This module provides wildcard expansion of watched directory specs,
removal of overlapping roots, exclusion rules and the tree walker that
selects candidate files for resizing.
"""

from autoresize.traversal.dedup import deduplicate_roots
from autoresize.traversal.exclusions import HIDDEN_MARKER, RECYCLER_MARKER, ExclusionRules
from autoresize.traversal.expander import CompiledPattern, expand, expand_all, has_wildcard
from autoresize.traversal.models import FileCandidate, SkipReason, WalkStats
from autoresize.traversal.segments import is_path_prefix, resolve_spec, split_segments
from autoresize.traversal.walker import (
    RootNotFoundError,
    RootUnreadableError,
    TraversalError,
    TreeWalker,
    file_extension,
    normalize_extensions,
)

__all__ = [
    "HIDDEN_MARKER",
    "RECYCLER_MARKER",
    "CompiledPattern",
    "ExclusionRules",
    "FileCandidate",
    "RootNotFoundError",
    "RootUnreadableError",
    "SkipReason",
    "TraversalError",
    "TreeWalker",
    "WalkStats",
    "deduplicate_roots",
    "expand",
    "expand_all",
    "file_extension",
    "has_wildcard",
    "is_path_prefix",
    "normalize_extensions",
    "resolve_spec",
    "split_segments",
]
