"""Use cases that move notifications from unread to read."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.errors import EntityNotFoundError, ServiceError
from app.domain.entities import Notification
from app.infrastructure.repositories import NotificationRepository
from app.utils import now_in_app_timezone

from .events import broadcast_notification_refresh

logger = logging.getLogger(__name__)


def mark_notification_as_read(
    session: Session, *, notification_id: int, recipient_id: int
) -> Notification:
    """Stamp ``read_at`` on one of the caller's notifications.

    Repeated calls keep the first timestamp. Ids that do not exist and ids
    owned by another user raise the same :class:`EntityNotFoundError`.
    """

    try:
        notification = NotificationRepository(session).mark_as_read(
            notification_id, recipient_id=recipient_id, read_at=now_in_app_timezone()
        )
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception(
            "mark_notification_as_read failed for notification %s", notification_id
        )
        raise ServiceError("Failed to mark notification as read") from exc
    if notification is None:
        raise EntityNotFoundError("Notification")
    broadcast_notification_refresh(recipient_id, notification.id)
    return notification


def mark_all_notifications_as_read(session: Session, *, recipient_id: int) -> bool:
    try:
        updated = NotificationRepository(session).mark_all_as_read(
            recipient_id, read_at=now_in_app_timezone()
        )
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("mark_all_notifications_as_read failed for user %s", recipient_id)
        raise ServiceError("Failed to mark all notifications as read") from exc
    logger.debug("Marked %s notifications as read for user %s", updated, recipient_id)
    broadcast_notification_refresh(recipient_id)
    return True


__all__ = ["mark_all_notifications_as_read", "mark_notification_as_read"]
