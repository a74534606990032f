"""Use cases for reading a user's notifications."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.errors import ServiceError
from app.domain.entities import Notification, NotificationFilter
from app.infrastructure.repositories import NotificationRepository

from ..pagination import Page, Pagination
from .filters import parse_notification_filters

logger = logging.getLogger(__name__)


def list_notifications(
    session: Session, *, recipient_id: int, pagination: Pagination | None = None
) -> Page[Notification]:
    """Return a page of notifications owned by ``recipient_id``.

    ``count`` is the total under the same filters, ignoring limit and offset.
    """

    pagination = pagination or Pagination()
    filters = parse_notification_filters(pagination.filters)
    repository = NotificationRepository(session)
    try:
        data = repository.list_for_recipient(
            recipient_id,
            filters=filters,
            limit=pagination.limit,
            offset=pagination.offset,
            ascending=pagination.ascending,
        )
        count = repository.count_for_recipient(recipient_id, filters=filters)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("list_notifications failed for user %s", recipient_id)
        raise ServiceError("Failed to fetch notifications") from exc
    return Page(data=data, count=count)


def count_unread_notifications(session: Session, *, recipient_id: int) -> int:
    try:
        return NotificationRepository(session).count_for_recipient(
            recipient_id, filters=[NotificationFilter.UNREAD]
        )
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("count_notifications failed for user %s", recipient_id)
        raise ServiceError("Failed to count notifications") from exc


__all__ = ["count_unread_notifications", "list_notifications"]
