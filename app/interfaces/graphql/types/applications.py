"""GraphQL types for applications and milestones."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

import strawberry
from strawberry.scalars import JSON

from app.application.use_cases.pagination import Page
from app.domain.entities import Application, Milestone


@strawberry.type(name="Application")
class ApplicationType:
    id: strawberry.ID
    program_id: strawberry.ID
    applicant_id: strawberry.ID
    name: str
    content: str | None
    price: str
    status: str
    rejection_reason: str | None
    metadata: Optional[JSON]
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, application: Application) -> "ApplicationType":
        return cls(
            id=strawberry.ID(str(application.id)),
            program_id=strawberry.ID(str(application.program_id)),
            applicant_id=strawberry.ID(str(application.applicant_id)),
            name=application.name,
            content=application.content,
            price=application.price,
            status=application.status,
            rejection_reason=application.rejection_reason,
            metadata=application.metadata,
            created_at=application.created_at,
            updated_at=application.updated_at,
        )


@strawberry.type
class PaginatedApplications:
    data: list[ApplicationType]
    count: int

    @classmethod
    def from_page(cls, page: Page[Application]) -> "PaginatedApplications":
        return cls(
            data=[ApplicationType.from_entity(item) for item in page.data], count=page.count
        )


@strawberry.type(name="Milestone")
class MilestoneType:
    id: strawberry.ID
    application_id: strawberry.ID
    title: str
    description: str | None
    price: str
    currency: str
    status: str
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, milestone: Milestone) -> "MilestoneType":
        return cls(
            id=strawberry.ID(str(milestone.id)),
            application_id=strawberry.ID(str(milestone.application_id)),
            title=milestone.title,
            description=milestone.description,
            price=milestone.price,
            currency=milestone.currency,
            status=milestone.status,
            created_at=milestone.created_at,
            updated_at=milestone.updated_at,
        )


@strawberry.type
class PaginatedMilestones:
    data: list[MilestoneType]
    count: int

    @classmethod
    def from_page(cls, page: Page[Milestone]) -> "PaginatedMilestones":
        return cls(data=[MilestoneType.from_entity(item) for item in page.data], count=page.count)


@strawberry.input
class CreateApplicationInput:
    program_id: strawberry.ID
    name: str
    content: str | None = None
    price: str = "0"
    metadata: Optional[JSON] = None


@strawberry.input
class MilestoneInput:
    title: str
    price: str = "0"
    currency: str = "ETH"
    description: str | None = None


__all__ = [
    "ApplicationType",
    "CreateApplicationInput",
    "MilestoneInput",
    "MilestoneType",
    "PaginatedApplications",
    "PaginatedMilestones",
]
