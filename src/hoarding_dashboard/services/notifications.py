"""User-visible transient notifications."""

import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import Protocol

_logger = logging.getLogger(__name__)


class NotificationLevel(StrEnum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


_LOG_LEVELS = {
    NotificationLevel.SUCCESS: logging.INFO,
    NotificationLevel.INFO: logging.INFO,
    NotificationLevel.WARNING: logging.WARNING,
    NotificationLevel.ERROR: logging.ERROR,
}


@dataclass(frozen=True)
class Notification:
    """A single toast shown to the user."""

    level: NotificationLevel
    message: str
    created_at: datetime


class Notifier(Protocol):
    """Interface for emitting user-visible notifications."""

    def notify(self, level: NotificationLevel, message: str) -> None:
        """Emit a notification at the given level."""


@dataclass
class NotificationCenter(Notifier):
    """Bounded in-memory notification feed."""

    history_size: int = 50
    _items: deque[Notification] = field(init=False)

    def __post_init__(self) -> None:
        self._items = deque(maxlen=self.history_size)

    def notify(self, level: NotificationLevel, message: str) -> None:
        """Record a notification and mirror it to the log."""
        _logger.log(_LOG_LEVELS[level], "Notification (%s): %s", level, message)
        self._items.append(
            Notification(level=level, message=message, created_at=datetime.now(tz=UTC))
        )

    @property
    def items(self) -> list[Notification]:
        """Return pending notifications, oldest first."""
        return list(self._items)

    def drain(self) -> list[Notification]:
        """Return and clear pending notifications."""
        drained = list(self._items)
        self._items.clear()
        return drained
