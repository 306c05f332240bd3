"""
Notification Service - single transient message shown to the user

At most one message is live. A new message replaces the previous one, and
each message carries a monotonic ``sequence_id``; an auto-dismiss timer only
clears the message it was scheduled for.
"""
import asyncio
import enum
import itertools
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional
import logging

from pointsdesk.core.config import settings

logger = logging.getLogger(__name__)


class NotificationKind(str, enum.Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class NotificationMessage:
    text: str
    kind: NotificationKind
    sequence_id: int

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "kind": self.kind.value, "sequenceId": self.sequence_id}


class NotificationChannel:
    """
    Owns the live notification and its auto-dismiss timer.
    """

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = settings.NOTIFICATION_TIMEOUT_SECONDS if timeout is None else timeout
        self._sequence = itertools.count(1)
        self._current: Optional[NotificationMessage] = None
        self._timer: Optional[asyncio.TimerHandle] = None
        self._listeners: List[Callable[[Optional[NotificationMessage]], None]] = []

    @property
    def current(self) -> Optional[NotificationMessage]:
        return self._current

    def subscribe(self, callback: Callable[[Optional[NotificationMessage]], None]) -> Callable[[], None]:
        """Register a change listener; returns an unsubscribe function"""
        self._listeners.append(callback)
        return lambda: self._listeners.remove(callback)

    def notify(self, text: str, kind: NotificationKind = NotificationKind.INFO) -> Optional[NotificationMessage]:
        """Publish ``text``; empty text is ignored"""
        if not text:
            return None

        message = NotificationMessage(text=text, kind=NotificationKind(kind), sequence_id=next(self._sequence))
        self._current = message
        logger.debug(f"Notification #{message.sequence_id} [{message.kind.value}]: {text}")
        self._schedule_expiry(message.sequence_id)
        self._emit()
        return message

    def success(self, text: str) -> Optional[NotificationMessage]:
        return self.notify(text, NotificationKind.SUCCESS)

    def error(self, text: str) -> Optional[NotificationMessage]:
        return self.notify(text, NotificationKind.ERROR)

    def info(self, text: str) -> Optional[NotificationMessage]:
        return self.notify(text, NotificationKind.INFO)

    def dismiss(self) -> None:
        """Clear the live message immediately"""
        self._cancel_timer()
        if self._current is not None:
            self._current = None
            self._emit()

    def _schedule_expiry(self, sequence_id: int) -> None:
        self._cancel_timer()
        if not self.timeout or self.timeout <= 0:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No event loop (synchronous caller): the message stays until dismissed
            logger.debug("No running event loop; notification auto-dismiss disabled")
            return
        self._timer = loop.call_later(self.timeout, self._expire, sequence_id)

    def _expire(self, sequence_id: int) -> None:
        # A newer message owns the channel; leave it alone
        if self._current is None or self._current.sequence_id != sequence_id:
            return
        self._timer = None
        self._current = None
        self._emit()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _emit(self) -> None:
        for callback in list(self._listeners):
            callback(self._current)
