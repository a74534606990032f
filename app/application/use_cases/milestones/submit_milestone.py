"""Use case for a builder submitting milestone work for review."""

from sqlalchemy.orm import Session

from app.application.errors import InvalidInputError
from app.domain.entities import (
    MILESTONE_STATUS_PENDING,
    MILESTONE_STATUS_REVISION_REQUESTED,
    MILESTONE_STATUS_SUBMITTED,
    Milestone,
)
from app.infrastructure.repositories import AccessRepository, MilestoneRepository

from ..access import Scope, require_scope
from ..notifications import notify_milestones


def submit_milestone(
    session: Session,
    *,
    milestone_id: int,
    user_id: int,
    description: str | None = None,
) -> Milestone:
    require_scope(
        session,
        scope=Scope.MILESTONE_BUILDER,
        user_id=user_id,
        entity_id=milestone_id,
        entity="Milestone",
        message="Only the applicant can submit this milestone",
    )
    repository = MilestoneRepository(session)
    milestone = repository.get(milestone_id)
    if milestone.status not in (MILESTONE_STATUS_PENDING, MILESTONE_STATUS_REVISION_REQUESTED):
        raise InvalidInputError(f"Milestone is already {milestone.status}")

    milestone = repository.update(
        milestone_id, status=MILESTONE_STATUS_SUBMITTED, description=description
    )
    owners = AccessRepository(session).milestone_owners(milestone_id)
    if owners is not None and owners.validator_id is not None:
        notify_milestones(
            session, [milestone], validator_id=owners.validator_id, action="submitted"
        )
    return milestone
