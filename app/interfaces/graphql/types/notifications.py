"""GraphQL types for notifications."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

import strawberry
from strawberry.scalars import JSON

from app.application.use_cases.pagination import Page
from app.domain.entities import Notification


@strawberry.type(name="Notification")
class NotificationType:
    id: strawberry.ID
    title: str | None
    content: str | None
    type: str
    action: str
    entity_id: strawberry.ID
    metadata: Optional[JSON]
    read_at: datetime | None
    created_at: datetime | None

    @classmethod
    def from_entity(cls, notification: Notification) -> "NotificationType":
        return cls(
            id=strawberry.ID(str(notification.id)),
            title=notification.title,
            content=notification.content,
            type=notification.type,
            action=notification.action,
            entity_id=strawberry.ID(notification.entity_id),
            metadata=notification.metadata or None,
            read_at=notification.read_at,
            created_at=notification.created_at,
        )


@strawberry.type
class NotificationResult:
    data: list[NotificationType]
    count: int

    @classmethod
    def from_page(cls, page: Page[Notification]) -> "NotificationResult":
        return cls(
            data=[NotificationType.from_entity(item) for item in page.data],
            count=page.count,
        )


__all__ = ["NotificationResult", "NotificationType"]
