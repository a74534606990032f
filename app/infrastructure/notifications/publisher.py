"""Persist notifications and signal subscribers on per-user channels."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from anyio import from_thread
from sqlalchemy.orm import Session

from app.domain.entities import NotificationDraft
from app.infrastructure.repositories import NotificationRepository

from .broker import NotificationBroker, notification_broker

logger = logging.getLogger(__name__)

NOTIFICATIONS_CHANNEL = "notifications"
NOTIFICATIONS_COUNT_CHANNEL = "notificationsCount"
CHANNELS = (NOTIFICATIONS_CHANNEL, NOTIFICATIONS_COUNT_CHANNEL)


def user_channel(channel: str, recipient_id: int) -> str:
    """Return the per-user channel name subscribers listen on."""

    return f"{channel}_{recipient_id}"


@dataclass(frozen=True)
class NotificationEvent:
    """Refresh signal sent to subscribers; carries no notification content."""

    channel: str
    recipient_id: int
    notification_id: int | None = None


class NotificationPublisher:
    """Two-phase publisher: :meth:`record` commits, :meth:`broadcast` signals.

    Callers broadcast only after the write they announce has been committed.
    """

    def __init__(self, broker: NotificationBroker) -> None:
        self._broker = broker

    def record(self, session: Session, draft: NotificationDraft) -> int:
        """Persist ``draft`` and return the new notification id."""

        notification = NotificationRepository(session).create(draft)
        return notification.id

    def broadcast(
        self, channel: str, recipient_id: int, notification_id: int | None = None
    ) -> None:
        """Schedule a refresh signal on ``channel`` for ``recipient_id``."""

        if channel not in CHANNELS:
            raise ValueError(f"Unknown notification channel: {channel}")
        event = NotificationEvent(
            channel=channel, recipient_id=recipient_id, notification_id=notification_id
        )
        target = user_channel(channel, recipient_id)
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            try:
                from_thread.run_sync(self._broker.publish, target, event)
            except RuntimeError:
                # Not inside an AnyIO worker thread (scripts, tests).
                self._broker.publish(target, event)
        else:
            self._broker.publish(target, event)
        logger.debug("Broadcast %s to user %s", channel, recipient_id)

    def publish(
        self,
        channel: str,
        recipient_id: int,
        *,
        session: Session | None = None,
        draft: NotificationDraft | None = None,
    ) -> int | None:
        """Record ``draft`` when given, then broadcast on ``channel``."""

        notification_id = None
        if draft is not None:
            if session is None:
                raise ValueError("A session is required to record a notification")
            notification_id = self.record(session, draft)
        self.broadcast(channel, recipient_id, notification_id)
        return notification_id


notification_publisher = NotificationPublisher(notification_broker)


__all__ = [
    "CHANNELS",
    "NOTIFICATIONS_CHANNEL",
    "NOTIFICATIONS_COUNT_CHANNEL",
    "NotificationEvent",
    "NotificationPublisher",
    "notification_publisher",
    "user_channel",
]
