"""Use case for granting a user a role inside a program."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.application.errors import EntityNotFoundError, InvalidInputError
from app.domain.entities import PROGRAM_ROLE_TYPES, ProgramUserRole
from app.infrastructure.repositories import (
    ProgramRepository,
    ProgramUserRoleRepository,
    UserRepository,
)
from app.utils import now_in_app_timezone

from ..access import Scope, require_scope
from ..notifications import notify_program_invited

logger = logging.getLogger(__name__)


def assign_program_role(
    session: Session,
    *,
    program_id: int,
    user_id: int,
    role_type: str,
    assigned_by: int,
) -> ProgramUserRole:
    """Grant ``role_type`` to ``user_id`` and invite them to the program.

    Only the program creator may assign roles. Assigning a role the user
    already holds returns the existing row without a second invitation.
    """

    if role_type not in PROGRAM_ROLE_TYPES:
        raise InvalidInputError(f"Unsupported role type: {role_type}")
    require_scope(
        session,
        scope=Scope.PROGRAM_CREATOR,
        user_id=assigned_by,
        entity_id=program_id,
        entity="Program",
        message="Only the program creator can assign roles",
    )
    if UserRepository(session).get(user_id) is None:
        raise EntityNotFoundError("User")

    roles = ProgramUserRoleRepository(session)
    existing = roles.get(program_id=program_id, user_id=user_id, role_type=role_type)
    if existing is not None:
        return existing

    try:
        role = roles.create(
            ProgramUserRole(
                id=None,
                program_id=program_id,
                user_id=user_id,
                role_type=role_type,
                created_at=now_in_app_timezone(),
            )
        )
    except IntegrityError:
        # Lost a race against an identical assignment.
        session.rollback()
        existing = roles.get(program_id=program_id, user_id=user_id, role_type=role_type)
        if existing is None:
            raise
        return existing

    program = ProgramRepository(session).get(program_id)
    notify_program_invited(session, program, user_id=user_id, role_type=role_type)
    logger.info("User %s assigned %s on program %s", user_id, role_type, program_id)
    return role
