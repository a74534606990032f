"""Domain entities for funding applications through investments."""

from dataclasses import dataclass
from datetime import datetime

INVESTMENT_TIERS = ("bronze", "silver", "gold", "platinum")

INVESTMENT_STATUS_PENDING = "pending"
INVESTMENT_STATUS_CONFIRMED = "confirmed"
INVESTMENT_STATUS_FAILED = "failed"
INVESTMENT_STATUS_REFUNDED = "refunded"
INVESTMENT_STATUSES = (
    INVESTMENT_STATUS_PENDING,
    INVESTMENT_STATUS_CONFIRMED,
    INVESTMENT_STATUS_FAILED,
    INVESTMENT_STATUS_REFUNDED,
)
# Investments that still count against limits.
INVESTMENT_ACTIVE_STATUSES = frozenset(
    {INVESTMENT_STATUS_PENDING, INVESTMENT_STATUS_CONFIRMED}
)

PAYOUT_STATUS_PENDING = "pending"
PAYOUT_STATUS_PROCESSING = "processing"
PAYOUT_STATUS_COMPLETED = "completed"
PAYOUT_STATUS_FAILED = "failed"
PAYOUT_STATUSES = (
    PAYOUT_STATUS_PENDING,
    PAYOUT_STATUS_PROCESSING,
    PAYOUT_STATUS_COMPLETED,
    PAYOUT_STATUS_FAILED,
)


@dataclass
class UserTierAssignment:
    """Investment tier granted to a supporter within one program."""

    id: int | None
    program_id: int
    user_id: int
    tier: str
    max_investment_amount: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class InvestmentTerm:
    """Offer a builder attaches to an application."""

    id: int | None
    application_id: int
    title: str
    price: str
    description: str | None = None
    purchase_limit: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Investment:
    id: int | None
    application_id: int
    user_id: int
    amount: str
    investment_term_id: int | None = None
    tier: str | None = None
    tx_hash: str | None = None
    status: str = INVESTMENT_STATUS_PENDING
    reclaim_tx_hash: str | None = None
    reclaimed_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class MilestonePayout:
    """Share of an investment released when a milestone is completed."""

    id: int | None
    milestone_id: int
    investment_id: int
    amount: str
    percentage: str
    status: str = PAYOUT_STATUS_PENDING
    tx_hash: str | None = None
    error_message: str | None = None
    processed_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = [
    "INVESTMENT_ACTIVE_STATUSES",
    "INVESTMENT_STATUSES",
    "INVESTMENT_STATUS_CONFIRMED",
    "INVESTMENT_STATUS_FAILED",
    "INVESTMENT_STATUS_PENDING",
    "INVESTMENT_STATUS_REFUNDED",
    "INVESTMENT_TIERS",
    "Investment",
    "InvestmentTerm",
    "MilestonePayout",
    "PAYOUT_STATUSES",
    "PAYOUT_STATUS_COMPLETED",
    "PAYOUT_STATUS_FAILED",
    "PAYOUT_STATUS_PENDING",
    "PAYOUT_STATUS_PROCESSING",
    "UserTierAssignment",
]
