"""Publish/subscribe registry for transient user notifications (toasts)."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional, Union

from config import load_config
from models import DEFAULT_NOTIFICATION_DURATION_MS, Notification, NotificationKind

logger = logging.getLogger(__name__)

Subscriber = Callable[[Notification], None]


class NotificationBus:
    """Explicit handle for raising notifications without a global callback.

    Whoever renders notifications subscribes; whoever needs to notify is
    given the bus. Delivery is synchronous and in subscription order.
    """

    def __init__(self, default_duration_ms: int = DEFAULT_NOTIFICATION_DURATION_MS) -> None:
        self._default_duration_ms = default_duration_ms
        self._subscribers: list[Subscriber] = []
        self._last_id = 0
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls) -> "NotificationBus":
        """Build a bus using COURSECAST_NOTIFICATION_DURATION_MS as the default lifetime."""
        return cls(default_duration_ms=load_config()["notification_duration_ms"])

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register *callback* and return a function that unregisters it."""
        with self._lock:
            self._subscribers.append(callback)

        def _unsubscribe() -> None:
            self.unsubscribe(callback)

        return _unsubscribe

    def unsubscribe(self, callback: Subscriber) -> None:
        with self._lock:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

    def notify(
        self,
        message: str,
        kind: Union[NotificationKind, str] = NotificationKind.INFO,
        duration_ms: Optional[int] = None,
    ) -> Optional[Notification]:
        """Deliver a notification to every subscriber.

        Returns the delivered Notification, or None when nobody is
        subscribed and the message is dropped.

        Raises:
            ValueError: If *kind* is not a known NotificationKind.
        """
        kind = NotificationKind(kind)
        with self._lock:
            subscribers = list(self._subscribers)
            if not subscribers:
                logger.debug("No notification subscribers, dropping %r", message)
                return None
            self._last_id += 1
            notification = Notification(
                id=self._last_id,
                message=message,
                kind=kind,
                duration_ms=self._default_duration_ms if duration_ms is None else duration_ms,
            )

        for callback in subscribers:
            try:
                callback(notification)
            except Exception:
                logger.exception("Notification subscriber %r failed", callback)
        return notification

    def success(self, message: str) -> Optional[Notification]:
        return self.notify(message, NotificationKind.SUCCESS)

    def error(self, message: str) -> Optional[Notification]:
        return self.notify(message, NotificationKind.ERROR)

    def info(self, message: str) -> Optional[Notification]:
        return self.notify(message, NotificationKind.INFO)

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscribers)
