"""Use case for a validator reviewing a submitted milestone."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.application.errors import InvalidInputError
from app.domain.entities import (
    APPLICATION_STATUS_COMPLETED,
    MILESTONE_STATUS_COMPLETED,
    MILESTONE_STATUS_REVISION_REQUESTED,
    MILESTONE_STATUS_SUBMITTED,
    Milestone,
)
from app.infrastructure.repositories import (
    AccessRepository,
    ApplicationRepository,
    MilestoneRepository,
)

from ..access import Scope, require_scope
from ..notifications import notify_milestone_reviewed
from ..payouts import create_milestone_payouts

logger = logging.getLogger(__name__)

REVIEW_ACTIONS = {
    MILESTONE_STATUS_COMPLETED: "accepted",
    MILESTONE_STATUS_REVISION_REQUESTED: "rejected",
}


def check_milestone(
    session: Session, *, milestone_id: int, user_id: int, status: str
) -> Milestone:
    """Accept (``completed``) or send back (``revision_requested``) a milestone.

    Once every milestone of the application is completed the application
    itself becomes completed.
    """

    if status not in REVIEW_ACTIONS:
        raise InvalidInputError(f"Unsupported milestone status: {status}")
    require_scope(
        session,
        scope=Scope.MILESTONE_VALIDATOR,
        user_id=user_id,
        entity_id=milestone_id,
        entity="Milestone",
        message="Only the program validator can review milestones",
    )
    repository = MilestoneRepository(session)
    milestone = repository.get(milestone_id)
    if milestone.status != MILESTONE_STATUS_SUBMITTED:
        raise InvalidInputError("Only submitted milestones can be reviewed")

    milestone = repository.update(milestone_id, status=status)
    owners = AccessRepository(session).milestone_owners(milestone_id)
    notify_milestone_reviewed(
        session, milestone, applicant_id=owners.applicant_id, action=REVIEW_ACTIONS[status]
    )
    if status == MILESTONE_STATUS_COMPLETED:
        create_milestone_payouts(session, milestone)

    statuses = repository.list_statuses_for_application(milestone.application_id)
    if statuses and all(item == MILESTONE_STATUS_COMPLETED for item in statuses):
        ApplicationRepository(session).update_status(
            milestone.application_id, APPLICATION_STATUS_COMPLETED
        )
        logger.info("Application %s completed", milestone.application_id)
    return milestone
