"""Use case for retrieving a single program."""

from sqlalchemy.orm import Session

from app.application.errors import (
    AuthenticationRequiredError,
    EntityNotFoundError,
    ForbiddenError,
)
from app.domain.entities import Program
from app.infrastructure.repositories import ProgramRepository

from ..access import can_access_program


def get_program(session: Session, program_id: int, *, user_id: int | None = None) -> Program:
    """Return the program when ``user_id`` is allowed to see it."""

    program = ProgramRepository(session).get(program_id)
    if program is None:
        raise EntityNotFoundError("Program")
    decision = can_access_program(session, program_id, user_id)
    if not decision.allowed:
        if user_id is None:
            raise AuthenticationRequiredError(decision.reason)
        raise ForbiddenError(decision.reason)
    return program
