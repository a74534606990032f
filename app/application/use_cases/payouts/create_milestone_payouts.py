"""Use case splitting confirmed investments into per-milestone payouts."""

from __future__ import annotations

import logging
from decimal import ROUND_DOWN, Decimal

from sqlalchemy.orm import Session

from app.domain.entities import PAYOUT_STATUS_PENDING, Milestone, MilestonePayout
from app.infrastructure.repositories import (
    InvestmentRepository,
    MilestonePayoutRepository,
    MilestoneRepository,
)

from ..amounts import format_amount, total_amount

logger = logging.getLogger(__name__)

AMOUNT_QUANTUM = Decimal("1e-18")
PERCENTAGE_QUANTUM = Decimal("0.01")


def milestone_share(session: Session, milestone: Milestone) -> Decimal:
    """Return the fraction of the application budget ``milestone`` releases.

    Milestones are weighted by price; when every price is zero they share
    the budget equally.
    """

    prices = MilestoneRepository(session).list_prices_for_application(
        milestone.application_id
    )
    total = total_amount(prices)
    if total == 0:
        return Decimal(1) / Decimal(len(prices) or 1)
    return Decimal(milestone.price) / total


def create_milestone_payouts(session: Session, milestone: Milestone) -> list[MilestonePayout]:
    """Create one pending payout per confirmed investment of the milestone's application."""

    investments = InvestmentRepository(session).list_confirmed_for_application(
        milestone.application_id
    )
    if not investments:
        return []
    share = milestone_share(session, milestone)
    percentage = format_amount((share * 100).quantize(PERCENTAGE_QUANTUM))
    payouts = [
        MilestonePayout(
            id=None,
            milestone_id=milestone.id,
            investment_id=investment.id,
            amount=format_amount(
                (Decimal(investment.amount) * share).quantize(AMOUNT_QUANTUM, rounding=ROUND_DOWN)
            ),
            percentage=percentage,
            status=PAYOUT_STATUS_PENDING,
        )
        for investment in investments
    ]
    created = MilestonePayoutRepository(session).create_many(payouts)
    logger.info("Created %s payouts for milestone %s", len(created), milestone.id)
    return created
