"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

NOTIFICATION_TYPES = (
    "program",
    "application",
    "milestone",
    "comment",
    "contract",
    "system",
)

NOTIFICATION_ACTIONS = (
    "created",
    "accepted",
    "rejected",
    "submitted",
    "completed",
    "broadcast",
    "invited",
    "updated",
    "deleted",
)


@dataclass
class Notification:
    """Information message delivered to a specific user."""

    id: int | None
    recipient_id: int
    type: str
    action: str
    entity_id: str
    title: str | None = None
    content: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    read_at: datetime | None = None

    @property
    def is_read(self) -> bool:
        return self.read_at is not None


@dataclass(frozen=True)
class NotificationDraft:
    """Notification content waiting to be persisted."""

    recipient_id: int
    type: str
    action: str
    entity_id: str
    title: str | None = None
    content: str | None = None
    metadata: dict[str, Any] | None = None


class NotificationFilter(str, Enum):
    """Closed set of predicates a notification listing can be narrowed by."""

    TAB_ALL = "tab:all"
    TAB_RECLAIM = "tab:reclaim"
    TAB_INVESTMENT_CONDITION = "tab:investment_condition"
    TAB_PROGRESS = "tab:progress"
    UNREAD = "unread:true"
    ALL_READ_STATES = "unread:false"


RECLAIM_TYPES = frozenset({"program", "milestone", "application"})
RECLAIM_REASON = "deadline_passed"

# Actions that count as progress for each notification type.
PROGRESS_ACTIONS: dict[str, frozenset[str]] = {
    "program": frozenset({"accepted", "rejected"}),
    "application": frozenset({"accepted", "rejected", "submitted", "created"}),
    "milestone": frozenset({"accepted", "submitted", "created"}),
}


__all__ = [
    "Notification",
    "NotificationDraft",
    "NotificationFilter",
    "RECLAIM_TYPES",
    "RECLAIM_REASON",
    "PROGRESS_ACTIONS",
    "NOTIFICATION_TYPES",
    "NOTIFICATION_ACTIONS",
]
