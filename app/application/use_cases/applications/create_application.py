"""Use case for applying to a program."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.errors import (
    EntityNotFoundError,
    ForbiddenError,
    InvalidInputError,
    ServiceError,
)
from app.domain.entities import (
    APPLICATION_STATUS_PENDING,
    PROGRAM_FINAL_STATUSES,
    Application,
)
from app.infrastructure.repositories import ApplicationRepository, ProgramRepository
from app.utils import now_in_app_timezone

from ..access import can_apply_to_program
from ..notifications import notify_application_created

logger = logging.getLogger(__name__)


def create_application(
    session: Session,
    *,
    program_id: int,
    applicant_id: int,
    name: str,
    content: str | None = None,
    price: str = "0",
    metadata: dict[str, Any] | None = None,
) -> Application:
    """Submit an application and notify the program validator."""

    program = ProgramRepository(session).get(program_id)
    if program is None:
        raise EntityNotFoundError("Program")
    decision = can_apply_to_program(session, program_id, applicant_id)
    if not decision.allowed:
        raise ForbiddenError(decision.reason)
    if program.status in PROGRAM_FINAL_STATUSES:
        raise InvalidInputError("Program is no longer accepting applications")
    if not name or not name.strip():
        raise InvalidInputError("Application name is required")

    application = Application(
        id=None,
        program_id=program_id,
        applicant_id=applicant_id,
        name=name.strip(),
        content=content,
        price=price,
        status=APPLICATION_STATUS_PENDING,
        metadata=metadata,
        created_at=now_in_app_timezone(),
    )
    try:
        application = ApplicationRepository(session).create(application)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("create_application failed for program %s", program_id)
        raise ServiceError("Failed to create application") from exc

    if program.validator_id is not None:
        notify_application_created(session, application, validator_id=program.validator_id)
    return application
