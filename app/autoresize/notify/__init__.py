"""Notification channels for interactive and unattended batch runs."""

from autoresize.notify.notifier import (
    DEFAULT_ROUTINE_LIMIT,
    LogNotifier,
    Notifier,
    Severity,
    UserVisibleNotifier,
    select_notifier,
)

__all__ = [
    "DEFAULT_ROUTINE_LIMIT",
    "LogNotifier",
    "Notifier",
    "Severity",
    "UserVisibleNotifier",
    "select_notifier",
]
