"""Domain entities for sponsor programs and per-program role assignments."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

PROGRAM_VISIBILITY_PUBLIC = "public"
PROGRAM_VISIBILITY_RESTRICTED = "restricted"
PROGRAM_VISIBILITY_PRIVATE = "private"
PROGRAM_VISIBILITIES = (
    PROGRAM_VISIBILITY_PRIVATE,
    PROGRAM_VISIBILITY_RESTRICTED,
    PROGRAM_VISIBILITY_PUBLIC,
)

PROGRAM_STATUS_PENDING = "pending"
PROGRAM_STATUS_PUBLISHED = "published"
PROGRAM_STATUS_CLOSED = "closed"
PROGRAM_STATUS_COMPLETED = "completed"
PROGRAM_STATUS_CANCELLED = "cancelled"
PROGRAM_STATUSES = (
    PROGRAM_STATUS_PENDING,
    PROGRAM_STATUS_PUBLISHED,
    PROGRAM_STATUS_CLOSED,
    PROGRAM_STATUS_COMPLETED,
    PROGRAM_STATUS_CANCELLED,
)
PROGRAM_FINAL_STATUSES = frozenset(
    {PROGRAM_STATUS_COMPLETED, PROGRAM_STATUS_CANCELLED, PROGRAM_STATUS_CLOSED}
)

PROGRAM_ROLE_SPONSOR = "sponsor"
PROGRAM_ROLE_VALIDATOR = "validator"
PROGRAM_ROLE_BUILDER = "builder"
PROGRAM_ROLE_TYPES = (
    PROGRAM_ROLE_SPONSOR,
    PROGRAM_ROLE_VALIDATOR,
    PROGRAM_ROLE_BUILDER,
)


@dataclass
class Program:
    """Funding program published by a sponsor."""

    id: int | None
    name: str
    creator_id: int
    price: str = "0"
    currency: str = "ETH"
    summary: str | None = None
    description: str | None = None
    deadline: datetime | None = None
    status: str = PROGRAM_STATUS_PENDING
    visibility: str = PROGRAM_VISIBILITY_PUBLIC
    validator_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class ProgramUserRole:
    """Role held by a user within a single program."""

    id: int | None
    program_id: int
    user_id: int
    role_type: str
    created_at: datetime | None = None


__all__ = [
    "Program",
    "ProgramUserRole",
    "PROGRAM_VISIBILITY_PUBLIC",
    "PROGRAM_VISIBILITY_RESTRICTED",
    "PROGRAM_VISIBILITY_PRIVATE",
    "PROGRAM_VISIBILITIES",
    "PROGRAM_STATUS_PENDING",
    "PROGRAM_STATUS_PUBLISHED",
    "PROGRAM_STATUS_CLOSED",
    "PROGRAM_STATUS_COMPLETED",
    "PROGRAM_STATUS_CANCELLED",
    "PROGRAM_STATUSES",
    "PROGRAM_FINAL_STATUSES",
    "PROGRAM_ROLE_SPONSOR",
    "PROGRAM_ROLE_VALIDATOR",
    "PROGRAM_ROLE_BUILDER",
    "PROGRAM_ROLE_TYPES",
]
