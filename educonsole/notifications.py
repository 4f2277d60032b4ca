"""User-facing failure notifications.

The HTTP client reports every failed envelope to exactly one ``Notifier``.
What a notification looks like (a toast, a status-bar line, a log entry) is
decided by whoever constructs the client, so the transport code stays free of
presentation concerns.
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol

logger = logging.getLogger("educonsole.notifications")


class Notifier(Protocol):
    def error(self, message: str) -> None: ...


class LogNotifier:
    """Default notifier: one WARNING line per failed call."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def error(self, message: str) -> None:
        self._log.warning("%s", message)


class NullNotifier:
    """Swallows notifications; for scripted use where callers branch on ``success``."""

    def error(self, message: str) -> None:
        return None


class CallbackNotifier:
    """Forwards each message to a callable (UI toast hooks, test spies)."""

    def __init__(self, callback: Callable[[str], None]) -> None:
        self._callback = callback

    def error(self, message: str) -> None:
        self._callback(message)
