"""Use case closing programs whose work is over."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.domain.entities import (
    APPLICATION_STATUS_COMPLETED,
    PROGRAM_FINAL_STATUSES,
    PROGRAM_STATUS_COMPLETED,
    RECLAIM_REASON,
    Program,
)
from app.infrastructure.repositories import ApplicationRepository, ProgramRepository
from app.utils import ensure_app_timezone, now_in_app_timezone

from ..access import Scope, require_scope
from ..notifications import notify_program_completed

logger = logging.getLogger(__name__)

ALL_APPLICATIONS_COMPLETED = "all_applications_completed"


def _completion_reason(session: Session, program: Program) -> str | None:
    deadline = ensure_app_timezone(program.deadline)
    if deadline is not None and deadline < now_in_app_timezone():
        return RECLAIM_REASON
    statuses = ApplicationRepository(session).list_statuses_for_program(program.id)
    if statuses and all(status == APPLICATION_STATUS_COMPLETED for status in statuses):
        return ALL_APPLICATIONS_COMPLETED
    return None


def check_program_completion(session: Session, *, program_id: int, user_id: int) -> Program:
    """Complete the program when its deadline passed or all applications finished.

    A deadline completion notifies the creator with a reclaimable
    ``program/completed`` notification. Programs already in a final status
    are returned unchanged.
    """

    require_scope(
        session,
        scope=Scope.PROGRAM_CREATOR,
        user_id=user_id,
        entity_id=program_id,
        entity="Program",
        message="Only the program creator can complete the program",
    )
    repository = ProgramRepository(session)
    program = repository.get(program_id)
    if program.status in PROGRAM_FINAL_STATUSES:
        return program

    reason = _completion_reason(session, program)
    if reason is None:
        return program

    program = repository.update_status(program_id, PROGRAM_STATUS_COMPLETED)
    logger.info("Program %s completed (%s)", program_id, reason)
    notify_program_completed(session, program, reason=reason)
    return program
