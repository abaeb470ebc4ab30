"""Notification channels for batch runs.

The resizer reports per-file outcomes through a Notifier without knowing
who is watching. Interactive runs, started by an administrator, show
messages on the console; unattended runs write them to the log.
"""

import logging
from abc import ABC, abstractmethod
from enum import IntEnum

from rich.console import Console
from rich.markup import escape

logger = logging.getLogger(__name__)

# Maximum number of routine messages shown on the console per run
DEFAULT_ROUTINE_LIMIT = 20


class Severity(IntEnum):
    """Severity of a notification, ordered from least to most severe.

    Attributes:
        NOTICE: Low-priority notice.
        INFO: Informational message.
        OK: Operation completed as expected.
        WARNING: Something needs attention.
        ERROR: Operation failed.
    """

    NOTICE = -2
    INFO = -1
    OK = 0
    WARNING = 1
    ERROR = 2

    @property
    def is_routine(self) -> bool:
        """Check whether this severity is an "all clear" style message."""
        return self <= Severity.OK


_LOG_LEVELS: dict[Severity, int] = {
    Severity.NOTICE: logging.INFO,
    Severity.INFO: logging.INFO,
    Severity.OK: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}

_STYLES: dict[Severity, str] = {
    Severity.NOTICE: "notice",
    Severity.INFO: "info",
    Severity.OK: "success",
    Severity.WARNING: "warning",
    Severity.ERROR: "error",
}


class Notifier(ABC):
    """Channel receiving notifications during a batch run."""

    @abstractmethod
    def notify(self, message: str, severity: Severity = Severity.OK) -> None:
        """Deliver a message.

        Args:
            message: Human-readable message.
            severity: Severity of the message.
        """


class UserVisibleNotifier(Notifier):
    """Shows notifications on a Rich console.

    Routine messages (NOTICE, INFO and OK) are capped per instance so a
    large tree does not flood the screen; warnings and errors are always
    shown. Routine messages over the cap go to the log at debug level.

    Args:
        console: Console to print to.
        limit: Maximum number of routine messages to show.
    """

    def __init__(self, console: Console, *, limit: int = DEFAULT_ROUTINE_LIMIT) -> None:
        self._console = console
        self._limit = limit
        self._routine_count = 0
        self.delivered = 0
        self.suppressed = 0

    def notify(self, message: str, severity: Severity = Severity.OK) -> None:
        if severity.is_routine:
            self._routine_count += 1
            if self._routine_count > self._limit:
                self.suppressed += 1
                logger.debug("%s (not shown: %s)", message, severity.name)
                return

        style = _STYLES[severity]
        self._console.print(f"[{style}]{severity.name.capitalize()}:[/] {escape(message)}")
        self.delivered += 1


class LogNotifier(Notifier):
    """Writes every notification to a logger, without any cap.

    Args:
        log: Logger to write to. Defaults to this module's logger.
    """

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger
        self.delivered = 0

    def notify(self, message: str, severity: Severity = Severity.OK) -> None:
        self._log.log(_LOG_LEVELS[severity], message)
        self.delivered += 1


def select_notifier(interactive: bool, console: Console) -> Notifier:
    """Choose the notification channel for a run.

    Args:
        interactive: True when an administrator watches the run.
        console: Console used by interactive runs.

    Returns:
        A fresh notifier, so caps never carry over between runs.
    """
    if interactive:
        return UserVisibleNotifier(console)
    return LogNotifier()
