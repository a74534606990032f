"""Program queries and mutations."""

from __future__ import annotations

import strawberry
from strawberry.types import Info

from app.application.use_cases.access import can_apply_to_program
from app.application.use_cases.programs import (
    assign_investment_tier,
    assign_program_role,
    check_program_completion,
    create_program,
    get_program,
    list_programs,
)

from ..context import optional_user, parse_id, require_user, run_in_session
from ..types import (
    AccessDecisionType,
    AssignInvestmentTierInput,
    AssignProgramRoleInput,
    CreateProgramInput,
    PaginatedPrograms,
    PaginationInput,
    ProgramType,
    ProgramUserRoleType,
    UserTierAssignmentType,
    to_pagination,
)


def _user_id(info: Info) -> int | None:
    user = optional_user(info)
    return user.id if user else None


@strawberry.type
class ProgramQuery:
    @strawberry.field
    async def program(self, info: Info, id: strawberry.ID) -> ProgramType:
        program = await run_in_session(
            info, get_program, program_id=parse_id(id), user_id=_user_id(info)
        )
        return ProgramType.from_entity(program)

    @strawberry.field
    async def programs(
        self, info: Info, pagination: PaginationInput | None = None
    ) -> PaginatedPrograms:
        page = await run_in_session(
            info,
            list_programs,
            viewer_id=_user_id(info),
            pagination=to_pagination(pagination),
        )
        return PaginatedPrograms.from_page(page)

    @strawberry.field
    async def can_apply_to_program(
        self, info: Info, program_id: strawberry.ID
    ) -> AccessDecisionType:
        decision = await run_in_session(
            info,
            can_apply_to_program,
            program_id=parse_id(program_id, "programId"),
            user_id=_user_id(info),
        )
        return AccessDecisionType.from_decision(decision)


@strawberry.type
class ProgramMutation:
    @strawberry.mutation
    async def create_program(self, info: Info, input: CreateProgramInput) -> ProgramType:
        user = require_user(info)
        program = await run_in_session(
            info,
            create_program,
            creator_id=user.id,
            name=input.name,
            price=input.price,
            currency=input.currency,
            summary=input.summary,
            description=input.description,
            deadline=input.deadline,
            visibility=input.visibility,
            validator_id=(
                parse_id(input.validator_id, "validatorId")
                if input.validator_id is not None
                else None
            ),
        )
        return ProgramType.from_entity(program)

    @strawberry.mutation
    async def assign_program_role(
        self, info: Info, input: AssignProgramRoleInput
    ) -> ProgramUserRoleType:
        user = require_user(info)
        role = await run_in_session(
            info,
            assign_program_role,
            program_id=parse_id(input.program_id, "programId"),
            user_id=parse_id(input.user_id, "userId"),
            role_type=input.role_type,
            assigned_by=user.id,
        )
        return ProgramUserRoleType.from_entity(role)

    @strawberry.mutation
    async def assign_investment_tier(
        self, info: Info, input: AssignInvestmentTierInput
    ) -> UserTierAssignmentType:
        user = require_user(info)
        assignment = await run_in_session(
            info,
            assign_investment_tier,
            program_id=parse_id(input.program_id, "programId"),
            user_id=parse_id(input.user_id, "userId"),
            tier=input.tier,
            max_investment_amount=input.max_investment_amount,
            assigned_by=user.id,
        )
        return UserTierAssignmentType.from_entity(assignment)

    @strawberry.mutation
    async def check_program_completion(self, info: Info, id: strawberry.ID) -> ProgramType:
        user = require_user(info)
        program = await run_in_session(
            info, check_program_completion, program_id=parse_id(id), user_id=user.id
        )
        return ProgramType.from_entity(program)


__all__ = ["ProgramMutation", "ProgramQuery"]
