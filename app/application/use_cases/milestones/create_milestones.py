"""Use case for a builder laying out the milestones of an application."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.errors import InvalidInputError, ServiceError
from app.domain.entities import (
    APPLICATION_STATUS_ACCEPTED,
    APPLICATION_STATUS_PENDING,
    MILESTONE_STATUS_PENDING,
    Milestone,
)
from app.infrastructure.repositories import (
    AccessRepository,
    ApplicationRepository,
    MilestoneRepository,
)
from app.utils import now_in_app_timezone

from ..access import Scope, require_scope
from ..amounts import format_amount, parse_price
from ..notifications import notify_milestones

logger = logging.getLogger(__name__)

OPEN_APPLICATION_STATUSES = (APPLICATION_STATUS_PENDING, APPLICATION_STATUS_ACCEPTED)


@dataclass(frozen=True)
class MilestoneDraft:
    title: str
    price: str = "0"
    currency: str = "ETH"
    description: str | None = None


def create_milestones(
    session: Session,
    *,
    application_id: int,
    user_id: int,
    milestones: Sequence[MilestoneDraft],
) -> list[Milestone]:
    """Create ``milestones`` for the caller's application and tell the validator."""

    require_scope(
        session,
        scope=Scope.APPLICATION_BUILDER,
        user_id=user_id,
        entity_id=application_id,
        entity="Application",
        message="Only the applicant can add milestones",
    )
    if not milestones:
        raise InvalidInputError("At least one milestone is required")
    if any(not draft.title or not draft.title.strip() for draft in milestones):
        raise InvalidInputError("Milestone title is required")
    application = ApplicationRepository(session).get(application_id)
    if application.status not in OPEN_APPLICATION_STATUSES:
        raise InvalidInputError(f"Application is already {application.status}")

    now = now_in_app_timezone()
    entities = [
        Milestone(
            id=None,
            application_id=application_id,
            title=draft.title.strip(),
            price=format_amount(parse_price(draft.price)),
            currency=draft.currency,
            description=draft.description,
            status=MILESTONE_STATUS_PENDING,
            created_at=now,
        )
        for draft in milestones
    ]
    try:
        created = MilestoneRepository(session).create_many(entities)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("create_milestones failed for application %s", application_id)
        raise ServiceError("Failed to create milestones") from exc

    owners = AccessRepository(session).application_owners(application_id)
    if owners is not None and owners.validator_id is not None:
        notify_milestones(session, created, validator_id=owners.validator_id, action="created")
    return created
