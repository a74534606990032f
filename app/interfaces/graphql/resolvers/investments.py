"""Investment term, investment and payout queries and mutations."""

from __future__ import annotations

import strawberry
from strawberry.types import Info

from app.application.use_cases.investments import (
    create_investment,
    create_investment_term,
    delete_investment_term,
    get_investment,
    list_investment_terms,
    list_investments,
    reclaim_investment,
    update_investment_term,
)
from app.application.use_cases.payouts import (
    list_milestone_payouts,
    process_milestone_payouts,
)

from ..context import parse_id, require_user, run_in_session
from ..types import (
    CreateInvestmentInput,
    CreateInvestmentTermInput,
    InvestmentTermType,
    InvestmentType,
    MilestonePayoutType,
    PaginatedInvestments,
    PaginatedInvestmentTerms,
    PaginatedMilestonePayouts,
    PaginationInput,
    UpdateInvestmentTermInput,
    to_pagination,
)


@strawberry.type
class InvestmentQuery:
    @strawberry.field
    async def investment_terms(
        self, info: Info, pagination: PaginationInput | None = None
    ) -> PaginatedInvestmentTerms:
        page = await run_in_session(
            info, list_investment_terms, pagination=to_pagination(pagination)
        )
        return PaginatedInvestmentTerms.from_page(page)

    @strawberry.field
    async def investment(self, info: Info, id: strawberry.ID) -> InvestmentType:
        require_user(info)
        investment = await run_in_session(info, get_investment, investment_id=parse_id(id))
        return InvestmentType.from_entity(investment)

    @strawberry.field
    async def investments(
        self, info: Info, pagination: PaginationInput | None = None
    ) -> PaginatedInvestments:
        require_user(info)
        page = await run_in_session(info, list_investments, pagination=to_pagination(pagination))
        return PaginatedInvestments.from_page(page)

    @strawberry.field
    async def milestone_payouts(
        self, info: Info, pagination: PaginationInput | None = None
    ) -> PaginatedMilestonePayouts:
        require_user(info)
        page = await run_in_session(
            info, list_milestone_payouts, pagination=to_pagination(pagination)
        )
        return PaginatedMilestonePayouts.from_page(page)


@strawberry.type
class InvestmentMutation:
    @strawberry.mutation
    async def create_investment_term(
        self, info: Info, input: CreateInvestmentTermInput
    ) -> InvestmentTermType:
        user = require_user(info)
        term = await run_in_session(
            info,
            create_investment_term,
            application_id=parse_id(input.application_id, "applicationId"),
            user_id=user.id,
            title=input.title,
            price=input.price,
            description=input.description,
            purchase_limit=input.purchase_limit,
        )
        return InvestmentTermType.from_entity(term)

    @strawberry.mutation
    async def update_investment_term(
        self, info: Info, input: UpdateInvestmentTermInput
    ) -> InvestmentTermType:
        user = require_user(info)
        term = await run_in_session(
            info,
            update_investment_term,
            term_id=parse_id(input.id),
            user_id=user.id,
            title=input.title,
            price=input.price,
            description=input.description,
            purchase_limit=input.purchase_limit,
        )
        return InvestmentTermType.from_entity(term)

    @strawberry.mutation
    async def delete_investment_term(self, info: Info, id: strawberry.ID) -> bool:
        user = require_user(info)
        return await run_in_session(
            info, delete_investment_term, term_id=parse_id(id), user_id=user.id
        )

    @strawberry.mutation
    async def create_investment(
        self, info: Info, input: CreateInvestmentInput
    ) -> InvestmentType:
        user = require_user(info)
        investment = await run_in_session(
            info,
            create_investment,
            application_id=parse_id(input.application_id, "applicationId"),
            user_id=user.id,
            amount=input.amount,
            investment_term_id=(
                parse_id(input.investment_term_id, "investmentTermId")
                if input.investment_term_id is not None
                else None
            ),
            tx_hash=input.tx_hash,
        )
        return InvestmentType.from_entity(investment)

    @strawberry.mutation
    async def reclaim_investment(
        self, info: Info, id: strawberry.ID, tx_hash: str | None = None
    ) -> InvestmentType:
        user = require_user(info)
        investment = await run_in_session(
            info,
            reclaim_investment,
            investment_id=parse_id(id),
            user_id=user.id,
            tx_hash=tx_hash,
        )
        return InvestmentType.from_entity(investment)

    @strawberry.mutation
    async def process_milestone_payouts(
        self, info: Info, milestone_id: strawberry.ID
    ) -> list[MilestonePayoutType]:
        user = require_user(info)
        payouts = await run_in_session(
            info,
            process_milestone_payouts,
            milestone_id=parse_id(milestone_id, "milestoneId"),
            user_id=user.id,
        )
        return [MilestonePayoutType.from_entity(item) for item in payouts]


__all__ = ["InvestmentMutation", "InvestmentQuery"]
