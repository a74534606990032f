"""GraphQL types for programs and role assignments."""

from __future__ import annotations

from datetime import datetime

import strawberry

from app.application.use_cases.access import AccessDecision
from app.application.use_cases.pagination import Page
from app.domain.entities import Program, ProgramUserRole


@strawberry.type(name="Program")
class ProgramType:
    id: strawberry.ID
    name: str
    summary: str | None
    description: str | None
    price: str
    currency: str
    deadline: datetime | None
    status: str
    visibility: str
    creator_id: strawberry.ID
    validator_id: strawberry.ID | None
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, program: Program) -> "ProgramType":
        return cls(
            id=strawberry.ID(str(program.id)),
            name=program.name,
            summary=program.summary,
            description=program.description,
            price=program.price,
            currency=program.currency,
            deadline=program.deadline,
            status=program.status,
            visibility=program.visibility,
            creator_id=strawberry.ID(str(program.creator_id)),
            validator_id=(
                strawberry.ID(str(program.validator_id))
                if program.validator_id is not None
                else None
            ),
            created_at=program.created_at,
            updated_at=program.updated_at,
        )


@strawberry.type
class PaginatedPrograms:
    data: list[ProgramType]
    count: int

    @classmethod
    def from_page(cls, page: Page[Program]) -> "PaginatedPrograms":
        return cls(data=[ProgramType.from_entity(item) for item in page.data], count=page.count)


@strawberry.type(name="ProgramUserRole")
class ProgramUserRoleType:
    id: strawberry.ID
    program_id: strawberry.ID
    user_id: strawberry.ID
    role_type: str
    created_at: datetime | None

    @classmethod
    def from_entity(cls, role: ProgramUserRole) -> "ProgramUserRoleType":
        return cls(
            id=strawberry.ID(str(role.id)),
            program_id=strawberry.ID(str(role.program_id)),
            user_id=strawberry.ID(str(role.user_id)),
            role_type=role.role_type,
            created_at=role.created_at,
        )


@strawberry.type
class AccessDecisionType:
    allowed: bool
    reason: str | None

    @classmethod
    def from_decision(cls, decision: AccessDecision) -> "AccessDecisionType":
        return cls(allowed=decision.allowed, reason=decision.reason)


@strawberry.input
class CreateProgramInput:
    name: str
    price: str = "0"
    currency: str = "ETH"
    summary: str | None = None
    description: str | None = None
    deadline: datetime | None = None
    visibility: str = "public"
    validator_id: strawberry.ID | None = None


@strawberry.input
class AssignProgramRoleInput:
    program_id: strawberry.ID
    user_id: strawberry.ID
    role_type: str


@strawberry.input
class AssignInvestmentTierInput:
    program_id: strawberry.ID
    user_id: strawberry.ID
    tier: str
    max_investment_amount: str


__all__ = [
    "AccessDecisionType",
    "AssignInvestmentTierInput",
    "AssignProgramRoleInput",
    "CreateProgramInput",
    "PaginatedPrograms",
    "ProgramType",
    "ProgramUserRoleType",
]
