"""Batch resize run coordination.

A run expands the watched directory specs, drops roots already covered
by another root, walks every remaining root and hands each candidate
file to the resizer exactly once. The outcome is a single success flag:
a missing or unreadable root fails the run without stopping the other
roots, and a failure inside the resizer for one file never stops the
walk.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from autoresize.configs.loader import ConfigurationMissingError
from autoresize.configs.models import AutoresizeConfig
from autoresize.notify.notifier import Notifier, Severity, select_notifier
from autoresize.resizer.base import Resizer
from autoresize.traversal.dedup import deduplicate_roots
from autoresize.traversal.exclusions import RECYCLER_MARKER, ExclusionRules
from autoresize.traversal.expander import expand_all
from autoresize.traversal.segments import resolve_spec
from autoresize.traversal.walker import TraversalError, TreeWalker

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RunOutcome:
    """Result of one batch run.

    Attributes:
        success: True if every attempted root could be walked.
        roots: Roots that were attempted, in processing order.
        skipped_roots: Roots dropped because another root covers them.
        failed_roots: Roots that do not exist or cannot be listed.
        dispatched: Number of files handed to the resizer.
        file_errors: Number of files the resizer failed on.
    """

    success: bool = True
    roots: list[Path] = field(default_factory=list)
    skipped_roots: list[Path] = field(default_factory=list)
    failed_roots: list[Path] = field(default_factory=list)
    dispatched: int = 0
    file_errors: int = 0

    def __bool__(self) -> bool:
        return self.success


@dataclass(frozen=True, slots=True)
class RootPlan:
    """Roots selected for a run before any file is visited.

    Attributes:
        specs: Watched specs the plan was built from.
        expanded: Concrete specs after wildcard expansion.
        roots: Absolute roots to walk.
        skipped: Absolute roots covered by another root.
    """

    specs: tuple[str, ...]
    expanded: tuple[str, ...]
    roots: tuple[Path, ...]
    skipped: tuple[Path, ...]


class BatchCoordinator:
    """Runs batch resizes over watched directories.

    Args:
        resizer: Resizer collaborator, already primed with rule sets.
        site_root: Absolute directory relative specs refer to.
        notifier: Channel for notable events of this run.
        recycler_marker: Directory name that is never traversed.
    """

    def __init__(
        self,
        resizer: Resizer,
        site_root: Path,
        notifier: Notifier,
        *,
        recycler_marker: str = RECYCLER_MARKER,
    ) -> None:
        self._resizer = resizer
        self._site_root = site_root
        self._notifier = notifier
        self._recycler_marker = recycler_marker

    @property
    def notifier(self) -> Notifier:
        """Notification channel of this coordinator."""
        return self._notifier

    def plan_roots(
        self,
        watched: Sequence[str],
        fallback: Sequence[str] | None = None,
    ) -> RootPlan:
        """Expand and deduplicate the watched specs.

        Args:
            watched: Watched directory specs.
            fallback: Specs used when ``watched`` is empty. Defaults to
                every directory known to the resizer's rule sets.

        Returns:
            The roots to walk and the roots dropped as covered.
        """
        specs = list(watched)
        if not specs:
            specs = list(fallback) if fallback is not None else self._resizer.get_all_directories()
            logger.debug("No watched directories configured, using %d fallback spec(s)", len(specs))

        expanded = expand_all(specs, self._site_root)
        resolved = [resolve_spec(spec, self._site_root) for spec in expanded]
        roots = deduplicate_roots(resolved)
        skipped = [path for path in dict.fromkeys(resolved) if path not in roots]

        return RootPlan(
            specs=tuple(specs),
            expanded=tuple(expanded),
            roots=tuple(roots),
            skipped=tuple(skipped),
        )

    def build_walker(self, excluded: Sequence[str]) -> TreeWalker:
        """Create the tree walker for a run.

        Args:
            excluded: Excluded directory specs.

        Returns:
            Walker recognizing the resizer's file types.
        """
        exclusions = ExclusionRules.from_specs(
            excluded, self._site_root, recycler_marker=self._recycler_marker
        )
        return TreeWalker(exclusions, self._resizer.get_all_file_types())

    def run_batch(
        self,
        watched: Sequence[str],
        excluded: Sequence[str],
        fallback: Sequence[str] | None = None,
    ) -> RunOutcome:
        """Run one batch over the watched directories.

        Args:
            watched: Watched directory specs, possibly with wildcards.
            excluded: Excluded directory specs.
            fallback: Specs used when ``watched`` is empty.

        Returns:
            Outcome of the run.
        """
        plan = self.plan_roots(watched, fallback)
        walker = self.build_walker(excluded)
        outcome = RunOutcome(skipped_roots=list(plan.skipped))

        if not walker.extensions:
            self._notifier.notify("No file types configured, nothing to resize", Severity.WARNING)

        for root in plan.roots:
            outcome.roots.append(root)
            root_ok = self._walk_root(walker, root, outcome)
            # Evaluate the root first so a failure never skips later roots
            outcome.success = root_ok and outcome.success

        logger.info(
            "Batch run finished: %d root(s), %d file(s) dispatched, %d failed root(s)",
            len(outcome.roots),
            outcome.dispatched,
            len(outcome.failed_roots),
        )
        return outcome

    def _walk_root(self, walker: TreeWalker, root: Path, outcome: RunOutcome) -> bool:
        def dispatch(path: Path) -> None:
            outcome.dispatched += 1
            try:
                self._resizer.process_file(
                    path,
                    "",  # target file name
                    "",  # target directory
                    None,
                    None,  # batch runs never apply user group rule sets
                    self._notifier,
                )
            except Exception as e:
                outcome.file_errors += 1
                logger.exception("Resizer failed on %s", path)
                self._notifier.notify(f"Could not process {path}: {e}", Severity.ERROR)

        try:
            walker.walk(root, dispatch)
        except TraversalError as e:
            logger.debug("Root %s failed: %s", root, e)
            self._notifier.notify(str(e), Severity.ERROR)
            outcome.failed_roots.append(root)
            return False
        return True


def run_task(
    config: AutoresizeConfig | None,
    resizer: Resizer,
    *,
    interactive: bool,
    console: Console,
    fallback: Sequence[str] | None = None,
) -> RunOutcome:
    """Run one batch resize task from configuration.

    Args:
        config: Loaded configuration.
        resizer: Resizer collaborator to prime and dispatch to.
        interactive: True when an administrator watches the run.
        console: Console for interactive notifications.
        fallback: Specs used when no watched directories are configured.
            Defaults to the directories of the rule sets.

    Returns:
        Outcome of the run.

    Raises:
        ConfigurationMissingError: If no configuration is given.
    """
    if config is None:
        raise ConfigurationMissingError("No configuration found")

    resizer.initialize_rulesets(config.rulesets.as_configuration())
    notifier = select_notifier(interactive, console)
    coordinator = BatchCoordinator(resizer, config.task.site_root, notifier)
    return coordinator.run_batch(
        config.task.directories,
        config.task.exclude_directories,
        fallback,
    )
