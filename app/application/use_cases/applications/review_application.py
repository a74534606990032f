"""Use cases for validators accepting or rejecting applications."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.application.errors import InvalidInputError
from app.domain.entities import (
    APPLICATION_STATUS_ACCEPTED,
    APPLICATION_STATUS_PENDING,
    APPLICATION_STATUS_REJECTED,
    Application,
)
from app.infrastructure.repositories import ApplicationRepository

from ..access import Scope, require_scope
from ..notifications import notify_application_reviewed


def _review(
    session: Session,
    *,
    application_id: int,
    user_id: int,
    status: str,
    rejection_reason: str | None = None,
) -> Application:
    require_scope(
        session,
        scope=Scope.APPLICATION_VALIDATOR,
        user_id=user_id,
        entity_id=application_id,
        entity="Application",
        message="Only the program validator can review applications",
    )
    repository = ApplicationRepository(session)
    application = repository.get(application_id)
    if application.status != APPLICATION_STATUS_PENDING:
        raise InvalidInputError(f"Application is already {application.status}")
    application = repository.update_status(
        application_id, status, rejection_reason=rejection_reason
    )
    notify_application_reviewed(session, application)
    return application


def accept_application(session: Session, *, application_id: int, user_id: int) -> Application:
    return _review(
        session,
        application_id=application_id,
        user_id=user_id,
        status=APPLICATION_STATUS_ACCEPTED,
    )


def reject_application(
    session: Session,
    *,
    application_id: int,
    user_id: int,
    reason: str | None = None,
) -> Application:
    return _review(
        session,
        application_id=application_id,
        user_id=user_id,
        status=APPLICATION_STATUS_REJECTED,
        rejection_reason=reason,
    )
