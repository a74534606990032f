"""Domain entity representing a builder application to a program."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

APPLICATION_STATUS_PENDING = "pending"
APPLICATION_STATUS_ACCEPTED = "accepted"
APPLICATION_STATUS_REJECTED = "rejected"
APPLICATION_STATUS_SUBMITTED = "submitted"
APPLICATION_STATUS_COMPLETED = "completed"
APPLICATION_STATUS_WITHDRAWN = "withdrawn"
APPLICATION_STATUSES = (
    APPLICATION_STATUS_PENDING,
    APPLICATION_STATUS_ACCEPTED,
    APPLICATION_STATUS_REJECTED,
    APPLICATION_STATUS_SUBMITTED,
    APPLICATION_STATUS_COMPLETED,
    APPLICATION_STATUS_WITHDRAWN,
)


@dataclass
class Application:
    """Proposal submitted by a builder for a program."""

    id: int | None
    program_id: int
    applicant_id: int
    name: str
    content: str | None = None
    price: str = "0"
    status: str = APPLICATION_STATUS_PENDING
    rejection_reason: str | None = None
    metadata: dict[str, Any] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = [
    "Application",
    "APPLICATION_STATUS_PENDING",
    "APPLICATION_STATUS_ACCEPTED",
    "APPLICATION_STATUS_REJECTED",
    "APPLICATION_STATUS_SUBMITTED",
    "APPLICATION_STATUS_COMPLETED",
    "APPLICATION_STATUS_WITHDRAWN",
    "APPLICATION_STATUSES",
]
