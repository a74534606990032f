"""GraphQL types for investment tiers, terms, investments and payouts."""

from __future__ import annotations

from datetime import datetime

import strawberry

from app.application.use_cases.pagination import Page
from app.domain.entities import (
    Investment,
    InvestmentTerm,
    MilestonePayout,
    UserTierAssignment,
)


@strawberry.type(name="UserTierAssignment")
class UserTierAssignmentType:
    id: strawberry.ID
    program_id: strawberry.ID
    user_id: strawberry.ID
    tier: str
    max_investment_amount: str
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, assignment: UserTierAssignment) -> "UserTierAssignmentType":
        return cls(
            id=strawberry.ID(str(assignment.id)),
            program_id=strawberry.ID(str(assignment.program_id)),
            user_id=strawberry.ID(str(assignment.user_id)),
            tier=assignment.tier,
            max_investment_amount=assignment.max_investment_amount,
            created_at=assignment.created_at,
            updated_at=assignment.updated_at,
        )


@strawberry.type(name="InvestmentTerm")
class InvestmentTermType:
    id: strawberry.ID
    application_id: strawberry.ID
    title: str
    price: str
    description: str | None
    purchase_limit: int | None
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, term: InvestmentTerm) -> "InvestmentTermType":
        return cls(
            id=strawberry.ID(str(term.id)),
            application_id=strawberry.ID(str(term.application_id)),
            title=term.title,
            price=term.price,
            description=term.description,
            purchase_limit=term.purchase_limit,
            created_at=term.created_at,
            updated_at=term.updated_at,
        )


@strawberry.type
class PaginatedInvestmentTerms:
    data: list[InvestmentTermType]
    count: int

    @classmethod
    def from_page(cls, page: Page[InvestmentTerm]) -> "PaginatedInvestmentTerms":
        return cls(
            data=[InvestmentTermType.from_entity(item) for item in page.data], count=page.count
        )


@strawberry.type(name="Investment")
class InvestmentType:
    id: strawberry.ID
    application_id: strawberry.ID
    user_id: strawberry.ID
    investment_term_id: strawberry.ID | None
    amount: str
    tier: str | None
    tx_hash: str | None
    status: str
    reclaim_tx_hash: str | None
    reclaimed_at: datetime | None
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, investment: Investment) -> "InvestmentType":
        return cls(
            id=strawberry.ID(str(investment.id)),
            application_id=strawberry.ID(str(investment.application_id)),
            user_id=strawberry.ID(str(investment.user_id)),
            investment_term_id=(
                strawberry.ID(str(investment.investment_term_id))
                if investment.investment_term_id is not None
                else None
            ),
            amount=investment.amount,
            tier=investment.tier,
            tx_hash=investment.tx_hash,
            status=investment.status,
            reclaim_tx_hash=investment.reclaim_tx_hash,
            reclaimed_at=investment.reclaimed_at,
            created_at=investment.created_at,
            updated_at=investment.updated_at,
        )


@strawberry.type
class PaginatedInvestments:
    data: list[InvestmentType]
    count: int

    @classmethod
    def from_page(cls, page: Page[Investment]) -> "PaginatedInvestments":
        return cls(data=[InvestmentType.from_entity(item) for item in page.data], count=page.count)


@strawberry.type(name="MilestonePayout")
class MilestonePayoutType:
    id: strawberry.ID
    milestone_id: strawberry.ID
    investment_id: strawberry.ID
    amount: str
    percentage: str
    status: str
    tx_hash: str | None
    error_message: str | None
    processed_at: datetime | None
    created_at: datetime | None

    @classmethod
    def from_entity(cls, payout: MilestonePayout) -> "MilestonePayoutType":
        return cls(
            id=strawberry.ID(str(payout.id)),
            milestone_id=strawberry.ID(str(payout.milestone_id)),
            investment_id=strawberry.ID(str(payout.investment_id)),
            amount=payout.amount,
            percentage=payout.percentage,
            status=payout.status,
            tx_hash=payout.tx_hash,
            error_message=payout.error_message,
            processed_at=payout.processed_at,
            created_at=payout.created_at,
        )


@strawberry.type
class PaginatedMilestonePayouts:
    data: list[MilestonePayoutType]
    count: int

    @classmethod
    def from_page(cls, page: Page[MilestonePayout]) -> "PaginatedMilestonePayouts":
        return cls(
            data=[MilestonePayoutType.from_entity(item) for item in page.data], count=page.count
        )


@strawberry.input
class CreateInvestmentTermInput:
    application_id: strawberry.ID
    title: str
    price: str
    description: str | None = None
    purchase_limit: int | None = None


@strawberry.input
class UpdateInvestmentTermInput:
    id: strawberry.ID
    title: str | None = None
    price: str | None = None
    description: str | None = None
    purchase_limit: int | None = None


@strawberry.input
class CreateInvestmentInput:
    application_id: strawberry.ID
    amount: str
    investment_term_id: strawberry.ID | None = None
    tx_hash: str | None = None


__all__ = [
    "CreateInvestmentInput",
    "CreateInvestmentTermInput",
    "InvestmentTermType",
    "InvestmentType",
    "MilestonePayoutType",
    "PaginatedInvestmentTerms",
    "PaginatedInvestments",
    "PaginatedMilestonePayouts",
    "UpdateInvestmentTermInput",
    "UserTierAssignmentType",
]
