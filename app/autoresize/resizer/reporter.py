"""Dry-run resizer that reports candidates instead of resizing them."""

import logging
from collections.abc import Mapping
from pathlib import Path

from autoresize.notify.notifier import Notifier, Severity
from autoresize.resizer.base import Resizer
from autoresize.traversal.walker import normalize_extensions

logger = logging.getLogger(__name__)


class CandidateReporter(Resizer):
    """Records every dispatched file and reports it as a candidate.

    Rule sets come from the ``[rulesets]`` configuration section, of
    which ``directories`` and ``file_types`` are used.

    Attributes:
        processed: Paths received through process_file, in order.
    """

    def __init__(self) -> None:
        self._file_types: set[str] = set()
        self._directories: list[str] = []
        self.processed: list[Path] = []

    def initialize_rulesets(self, configuration: Mapping[str, object]) -> None:
        self._file_types = set(normalize_extensions(_string_list(configuration, "file_types")))
        self._directories = _string_list(configuration, "directories")
        self.processed = []
        logger.debug(
            "Rule sets initialized: %d file type(s), %d director(ies)",
            len(self._file_types),
            len(self._directories),
        )

    def get_all_file_types(self) -> set[str]:
        return set(self._file_types)

    def get_all_directories(self) -> list[str]:
        return list(self._directories)

    def process_file(
        self,
        file_path: Path,
        target_name: str = "",
        target_directory: str = "",
        ruleset: Mapping[str, object] | None = None,
        user: object | None = None,
        notifier: Notifier | None = None,
    ) -> None:
        self.processed.append(file_path)
        if notifier is not None:
            notifier.notify(f"Candidate for resizing: {file_path}", Severity.OK)


def _string_list(configuration: Mapping[str, object], key: str) -> list[str]:
    value = configuration.get(key, [])
    if isinstance(value, str):
        value = value.splitlines()
    if not isinstance(value, list | tuple):
        msg = f"Rule set option '{key}' must be a list of strings"
        raise ValueError(msg)
    return [str(item).strip() for item in value if str(item).strip()]
