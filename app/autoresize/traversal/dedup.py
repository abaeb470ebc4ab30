"""Removal of overlapping traversal roots.

Watched directories commonly overlap, either because a parent and one
of its children are both configured or because wildcard expansion
produced nested matches. Walking both would hand the same files to the
resizer twice.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from autoresize.traversal.segments import is_path_prefix

logger = logging.getLogger(__name__)


def deduplicate_roots(roots: Iterable[Path]) -> list[Path]:
    """Reduce roots to a set in which no root contains another.

    Candidates are considered in input order. A candidate is rejected
    when an accepted root equals it or is one of its ancestors. A
    candidate that is an ancestor of roots accepted earlier replaces
    them, taking the position of the first one it replaces.

    Args:
        roots: Absolute root directories in processing order.

    Returns:
        Accepted roots in first-seen order.
    """
    accepted: list[Path] = []
    for candidate in roots:
        covering = next((root for root in accepted if is_path_prefix(root, candidate)), None)
        if covering is not None:
            logger.debug("Skipping root %s, already covered by %s", candidate, covering)
            continue

        nested = [i for i, root in enumerate(accepted) if is_path_prefix(candidate, root)]
        if nested:
            for i in reversed(nested):
                logger.debug("Root %s now covered by %s", accepted[i], candidate)
                del accepted[i]
            accepted.insert(nested[0], candidate)
            continue

        accepted.append(candidate)
    return accepted
