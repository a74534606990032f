"""Application and milestone queries and mutations."""

from __future__ import annotations

import strawberry
from strawberry.types import Info

from app.application.use_cases.applications import (
    accept_application,
    create_application,
    list_applications,
    reject_application,
)
from app.application.use_cases.milestones import (
    MilestoneDraft,
    check_milestone,
    create_milestones,
    list_milestones,
    submit_milestone,
)

from ..context import optional_user, parse_id, require_user, run_in_session
from ..types import (
    ApplicationType,
    CreateApplicationInput,
    MilestoneInput,
    MilestoneType,
    PaginatedApplications,
    PaginatedMilestones,
    PaginationInput,
    to_pagination,
)


@strawberry.type
class ApplicationQuery:
    @strawberry.field
    async def applications(
        self, info: Info, pagination: PaginationInput | None = None
    ) -> PaginatedApplications:
        user = optional_user(info)
        page = await run_in_session(
            info,
            list_applications,
            viewer_id=user.id if user else None,
            pagination=to_pagination(pagination),
        )
        return PaginatedApplications.from_page(page)

    @strawberry.field
    async def milestones(
        self, info: Info, pagination: PaginationInput | None = None
    ) -> PaginatedMilestones:
        page = await run_in_session(
            info, list_milestones, pagination=to_pagination(pagination)
        )
        return PaginatedMilestones.from_page(page)


@strawberry.type
class ApplicationMutation:
    @strawberry.mutation
    async def create_application(
        self, info: Info, input: CreateApplicationInput
    ) -> ApplicationType:
        user = require_user(info)
        application = await run_in_session(
            info,
            create_application,
            program_id=parse_id(input.program_id, "programId"),
            applicant_id=user.id,
            name=input.name,
            content=input.content,
            price=input.price,
            metadata=input.metadata,
        )
        return ApplicationType.from_entity(application)

    @strawberry.mutation
    async def accept_application(self, info: Info, id: strawberry.ID) -> ApplicationType:
        user = require_user(info)
        application = await run_in_session(
            info, accept_application, application_id=parse_id(id), user_id=user.id
        )
        return ApplicationType.from_entity(application)

    @strawberry.mutation
    async def reject_application(
        self, info: Info, id: strawberry.ID, reason: str | None = None
    ) -> ApplicationType:
        user = require_user(info)
        application = await run_in_session(
            info,
            reject_application,
            application_id=parse_id(id),
            user_id=user.id,
            reason=reason,
        )
        return ApplicationType.from_entity(application)

    @strawberry.mutation
    async def create_milestones(
        self, info: Info, application_id: strawberry.ID, milestones: list[MilestoneInput]
    ) -> list[MilestoneType]:
        user = require_user(info)
        created = await run_in_session(
            info,
            create_milestones,
            application_id=parse_id(application_id, "applicationId"),
            user_id=user.id,
            milestones=[
                MilestoneDraft(
                    title=item.title,
                    price=item.price,
                    currency=item.currency,
                    description=item.description,
                )
                for item in milestones
            ],
        )
        return [MilestoneType.from_entity(item) for item in created]

    @strawberry.mutation
    async def submit_milestone(
        self, info: Info, id: strawberry.ID, description: str | None = None
    ) -> MilestoneType:
        user = require_user(info)
        milestone = await run_in_session(
            info,
            submit_milestone,
            milestone_id=parse_id(id),
            user_id=user.id,
            description=description,
        )
        return MilestoneType.from_entity(milestone)

    @strawberry.mutation
    async def check_milestone(
        self, info: Info, id: strawberry.ID, status: str
    ) -> MilestoneType:
        user = require_user(info)
        milestone = await run_in_session(
            info, check_milestone, milestone_id=parse_id(id), user_id=user.id, status=status
        )
        return MilestoneType.from_entity(milestone)


__all__ = ["ApplicationMutation", "ApplicationQuery"]
