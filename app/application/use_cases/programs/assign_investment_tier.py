"""Use case for granting a supporter an investment tier in a program."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.application.errors import EntityNotFoundError, InvalidInputError
from app.domain.entities import INVESTMENT_TIERS, UserTierAssignment
from app.infrastructure.repositories import (
    ProgramRepository,
    UserRepository,
    UserTierAssignmentRepository,
)

from ..access import Scope, require_scope
from ..amounts import format_amount, parse_amount
from ..notifications import notify_investment_tier

logger = logging.getLogger(__name__)


def assign_investment_tier(
    session: Session,
    *,
    program_id: int,
    user_id: int,
    tier: str,
    max_investment_amount: str,
    assigned_by: int,
) -> UserTierAssignment:
    """Set the tier and investment cap of ``user_id`` in ``program_id``.

    The supporter is invited with a ``tier`` in the notification metadata.
    Re-sending the same tier and cap changes nothing and sends no invitation.
    """

    if tier not in INVESTMENT_TIERS:
        raise InvalidInputError(f"Unsupported investment tier: {tier}")
    cap = format_amount(parse_amount(max_investment_amount, "maxInvestmentAmount"))
    require_scope(
        session,
        scope=Scope.PROGRAM_CREATOR,
        user_id=assigned_by,
        entity_id=program_id,
        entity="Program",
        message="Only the program creator can assign investment tiers",
    )
    if UserRepository(session).get(user_id) is None:
        raise EntityNotFoundError("User")

    repository = UserTierAssignmentRepository(session)
    existing = repository.get(program_id=program_id, user_id=user_id)
    if existing is not None and existing.tier == tier and existing.max_investment_amount == cap:
        return existing

    assignment = repository.save(
        program_id=program_id, user_id=user_id, tier=tier, max_investment_amount=cap
    )
    program = ProgramRepository(session).get(program_id)
    notify_investment_tier(session, program, assignment)
    logger.info("User %s assigned tier %s on program %s", user_id, tier, program_id)
    return assignment
