"""Notification queries, mutations and per-user subscriptions."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator

import strawberry
from anyio import to_thread
from strawberry.types import Info

from app.application.errors import AuthenticationRequiredError
from app.application.use_cases.notifications import (
    count_unread_notifications,
    list_notifications,
    mark_all_notifications_as_read,
    mark_notification_as_read,
)
from app.application.use_cases.pagination import Pagination
from app.infrastructure.database import SessionLocal
from app.infrastructure.notifications import (
    NOTIFICATIONS_CHANNEL,
    NOTIFICATIONS_COUNT_CHANNEL,
    notification_broker,
    user_channel,
)
from app.infrastructure.security import parse_bearer_token

from ..context import parse_id, require_user, resolve_user, run_in_session
from ..types import NotificationResult, NotificationType, PaginationInput, to_pagination

logger = logging.getLogger(__name__)

CONNECTION_TOKEN_KEYS = ("Authorization", "authorization", "token")


@strawberry.type
class NotificationQuery:
    @strawberry.field
    async def notifications(
        self, info: Info, pagination: PaginationInput | None = None
    ) -> NotificationResult:
        user = require_user(info)
        page = await run_in_session(
            info,
            list_notifications,
            recipient_id=user.id,
            pagination=to_pagination(pagination),
        )
        return NotificationResult.from_page(page)

    @strawberry.field
    async def count_notifications(self, info: Info) -> int:
        user = require_user(info)
        return await run_in_session(info, count_unread_notifications, recipient_id=user.id)


@strawberry.type
class NotificationMutation:
    @strawberry.mutation
    async def mark_notification_as_read(
        self, info: Info, id: strawberry.ID
    ) -> NotificationType:
        user = require_user(info)
        notification = await run_in_session(
            info,
            mark_notification_as_read,
            notification_id=parse_id(id),
            recipient_id=user.id,
        )
        return NotificationType.from_entity(notification)

    @strawberry.mutation
    async def mark_all_notifications_as_read(self, info: Info) -> bool:
        user = require_user(info)
        return await run_in_session(
            info, mark_all_notifications_as_read, recipient_id=user.id
        )


def _subscription_token(info: Info) -> str | None:
    params = getattr(info.context, "connection_params", None) or {}
    for key in CONNECTION_TOKEN_KEYS:
        value = params.get(key)
        if value:
            return parse_bearer_token(str(value))
    return info.context.token


def _authenticate(token: str | None) -> int:
    with SessionLocal() as session:
        user = resolve_user(session, token)
    if user is None:
        raise AuthenticationRequiredError()
    return user.id


def _load_notifications(user_id: int, pagination: Pagination) -> NotificationResult:
    with SessionLocal() as session:
        page = list_notifications(session, recipient_id=user_id, pagination=pagination)
    return NotificationResult.from_page(page)


def _load_count(user_id: int) -> int:
    with SessionLocal() as session:
        return count_unread_notifications(session, recipient_id=user_id)


@strawberry.type
class NotificationSubscription:
    @strawberry.subscription
    async def notifications(
        self, info: Info, pagination: PaginationInput | None = None
    ) -> AsyncGenerator[NotificationResult, None]:
        user_id = await to_thread.run_sync(_authenticate, _subscription_token(info))
        resolved = to_pagination(pagination)
        subscription = notification_broker.subscribe(
            user_channel(NOTIFICATIONS_CHANNEL, user_id)
        )
        logger.debug("User %s subscribed to notifications", user_id)
        try:
            yield await to_thread.run_sync(_load_notifications, user_id, resolved)
            async for _event in subscription:
                yield await to_thread.run_sync(_load_notifications, user_id, resolved)
        finally:
            subscription.close()
            logger.debug("User %s unsubscribed from notifications", user_id)

    @strawberry.subscription
    async def count_notifications(self, info: Info) -> AsyncGenerator[int, None]:
        user_id = await to_thread.run_sync(_authenticate, _subscription_token(info))
        subscription = notification_broker.subscribe(
            user_channel(NOTIFICATIONS_COUNT_CHANNEL, user_id)
        )
        logger.debug("User %s subscribed to notification count", user_id)
        try:
            yield await to_thread.run_sync(_load_count, user_id)
            async for _event in subscription:
                yield await to_thread.run_sync(_load_count, user_id)
        finally:
            subscription.close()
            logger.debug("User %s unsubscribed from notification count", user_id)


__all__ = ["NotificationMutation", "NotificationQuery", "NotificationSubscription"]
