"""Use case for creating programs."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.errors import EntityNotFoundError, InvalidInputError, ServiceError
from app.domain.entities import (
    PROGRAM_STATUS_PENDING,
    PROGRAM_VISIBILITIES,
    PROGRAM_VISIBILITY_PUBLIC,
    Program,
)
from app.infrastructure.repositories import ProgramRepository, UserRepository
from app.utils import ensure_app_timezone, now_in_app_timezone

logger = logging.getLogger(__name__)


def create_program(
    session: Session,
    *,
    creator_id: int,
    name: str,
    price: str = "0",
    currency: str = "ETH",
    summary: str | None = None,
    description: str | None = None,
    deadline: datetime | None = None,
    visibility: str = PROGRAM_VISIBILITY_PUBLIC,
    validator_id: int | None = None,
) -> Program:
    """Create a program owned by ``creator_id``.

    When ``validator_id`` is given the program records it and the validator
    receives a ``validator`` role row.
    """

    if not name or not name.strip():
        raise InvalidInputError("Program name is required")
    if visibility not in PROGRAM_VISIBILITIES:
        raise InvalidInputError(f"Unsupported visibility: {visibility}")
    users = UserRepository(session)
    if validator_id is not None and users.get(validator_id) is None:
        raise EntityNotFoundError("Validator")

    program = Program(
        id=None,
        name=name.strip(),
        creator_id=creator_id,
        price=price,
        currency=currency,
        summary=summary,
        description=description,
        deadline=ensure_app_timezone(deadline),
        status=PROGRAM_STATUS_PENDING,
        visibility=visibility,
        validator_id=validator_id,
        created_at=now_in_app_timezone(),
    )
    try:
        return ProgramRepository(session).create(program)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("create_program failed for user %s", creator_id)
        raise ServiceError("Failed to create program") from exc
