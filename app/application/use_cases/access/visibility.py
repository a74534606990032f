"""Program visibility and application eligibility rules."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.domain.entities import (
    PROGRAM_ROLE_BUILDER,
    PROGRAM_ROLE_VALIDATOR,
    PROGRAM_VISIBILITY_PRIVATE,
)
from app.infrastructure.repositories import ProgramRepository, ProgramUserRoleRepository


@dataclass(frozen=True)
class AccessDecision:
    allowed: bool
    reason: str | None = None


ALLOWED = AccessDecision(allowed=True)


def can_access_program(
    session: Session, program_id: int, user_id: int | None
) -> AccessDecision:
    """Decide whether ``user_id`` (``None`` for anonymous) may view a program.

    Public and restricted programs are open to everyone. Private programs are
    visible to their creator and to any user holding a role in them.
    """

    program = ProgramRepository(session).get(program_id)
    if program is None:
        return AccessDecision(False, "Program not found")
    if program.visibility != PROGRAM_VISIBILITY_PRIVATE:
        return ALLOWED
    if user_id is None:
        return AccessDecision(False, "Authentication required for private programs")
    if program.creator_id == user_id:
        return ALLOWED
    roles = ProgramUserRoleRepository(session).list_for_user(
        program_id=program_id, user_id=user_id
    )
    if roles:
        return ALLOWED
    return AccessDecision(False, "You do not have access to this private program")


def can_apply_to_program(
    session: Session, program_id: int, user_id: int | None
) -> AccessDecision:
    """Decide whether ``user_id`` may submit an application to a program.

    Creators never apply to their own program. On private programs a
    validator role vetoes the application even when a builder role exists.
    """

    if user_id is None:
        return AccessDecision(False, "Authentication required to apply")
    program = ProgramRepository(session).get(program_id)
    if program is None:
        return AccessDecision(False, "Program not found")
    if program.creator_id == user_id:
        return AccessDecision(False, "Program creators cannot apply to their own programs")
    if program.visibility != PROGRAM_VISIBILITY_PRIVATE:
        return ALLOWED

    role_types = {
        role.role_type
        for role in ProgramUserRoleRepository(session).list_for_user(
            program_id=program_id, user_id=user_id
        )
    }
    if PROGRAM_ROLE_VALIDATOR in role_types:
        return AccessDecision(False, "Validators cannot apply to programs they validate")
    if PROGRAM_ROLE_BUILDER in role_types:
        return ALLOWED
    return AccessDecision(False, "You must be invited to apply to this private program")


__all__ = ["AccessDecision", "can_access_program", "can_apply_to_program"]
