"""Abstract base class for resizer collaborators.

This module defines the Resizer interface consumed by batch runs. The
resize algorithm and its rule sets live behind this interface; batch
runs only select candidate files and hand them over.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path

from autoresize.notify.notifier import Notifier


class Resizer(ABC):
    """Abstract base class for all resizer collaborators.

    Example:
        >>> resizer = CandidateReporter()
        >>> resizer.initialize_rulesets({"file_types": ["jpg"], "directories": ["fileadmin/"]})
        >>> resizer.get_all_file_types()
        {'jpg'}
    """

    @abstractmethod
    def initialize_rulesets(self, configuration: Mapping[str, object]) -> None:
        """Prime the resizer from configuration, once per run.

        Args:
            configuration: Rule set configuration section.
        """

    @abstractmethod
    def get_all_file_types(self) -> set[str]:
        """Return every file extension handled by any rule set.

        Returns:
            Lower-case extensions without a leading dot.
        """

    @abstractmethod
    def get_all_directories(self) -> list[str]:
        """Return every directory spec watched by any rule set.

        Returns:
            Directory specs, possibly containing wildcard segments.
        """

    @abstractmethod
    def process_file(
        self,
        file_path: Path,
        target_name: str = "",
        target_directory: str = "",
        ruleset: Mapping[str, object] | None = None,
        user: object | None = None,
        notifier: Notifier | None = None,
    ) -> None:
        """Resize a single file if its rule set requires it.

        Batch runs pass empty target name and directory (resize in
        place), no rule set override and no user, so user-group rule
        sets never apply.

        Args:
            file_path: Absolute path of the candidate file.
            target_name: New file name, empty to keep the current one.
            target_directory: New directory, empty to keep the current one.
            ruleset: Rule set overriding the configured ones.
            user: User whose group rule sets apply.
            notifier: Channel for per-file outcome messages.
        """
