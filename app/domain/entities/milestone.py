"""Domain entity representing a deliverable of an application."""

from dataclasses import dataclass
from datetime import datetime

MILESTONE_STATUS_PENDING = "pending"
MILESTONE_STATUS_SUBMITTED = "submitted"
MILESTONE_STATUS_COMPLETED = "completed"
MILESTONE_STATUS_REVISION_REQUESTED = "revision_requested"
MILESTONE_STATUSES = (
    MILESTONE_STATUS_PENDING,
    MILESTONE_STATUS_SUBMITTED,
    MILESTONE_STATUS_COMPLETED,
    MILESTONE_STATUS_REVISION_REQUESTED,
)


@dataclass
class Milestone:
    """Unit of work that a validator reviews before payout."""

    id: int | None
    application_id: int
    title: str
    price: str = "0"
    currency: str = "ETH"
    description: str | None = None
    status: str = MILESTONE_STATUS_PENDING
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = [
    "Milestone",
    "MILESTONE_STATUS_PENDING",
    "MILESTONE_STATUS_SUBMITTED",
    "MILESTONE_STATUS_COMPLETED",
    "MILESTONE_STATUS_REVISION_REQUESTED",
    "MILESTONE_STATUSES",
]
