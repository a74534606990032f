"""Use case for backing an accepted application with funds."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.errors import (
    EntityNotFoundError,
    ForbiddenError,
    InvalidInputError,
    ServiceError,
)
from app.domain.entities import (
    APPLICATION_STATUS_ACCEPTED,
    INVESTMENT_STATUS_CONFIRMED,
    INVESTMENT_STATUS_PENDING,
    PROGRAM_FINAL_STATUSES,
    Investment,
)
from app.infrastructure.repositories import (
    ApplicationRepository,
    InvestmentRepository,
    InvestmentTermRepository,
    ProgramRepository,
    UserRepository,
    UserTierAssignmentRepository,
)
from app.utils import ensure_app_timezone, now_in_app_timezone

from ..amounts import format_amount, parse_amount, total_amount
from ..notifications import notify_investment_received

logger = logging.getLogger(__name__)


def create_investment(
    session: Session,
    *,
    application_id: int,
    user_id: int,
    amount: str,
    investment_term_id: int | None = None,
    tx_hash: str | None = None,
) -> Investment:
    """Record an investment and notify the applicant.

    Only accepted applications of a program that is still open can be backed.
    A supporter holding a tier in the program may not exceed its cap across
    all their active investments in that program. An investment carrying a
    transaction hash is stored as confirmed, otherwise as pending.
    """

    application = ApplicationRepository(session).get(application_id)
    if application is None:
        raise EntityNotFoundError("Application")
    if application.status != APPLICATION_STATUS_ACCEPTED:
        raise InvalidInputError("Only accepted applications can receive investments")
    if application.applicant_id == user_id:
        raise ForbiddenError("You cannot invest in your own application")

    program = ProgramRepository(session).get(application.program_id)
    deadline = ensure_app_timezone(program.deadline)
    if program.status in PROGRAM_FINAL_STATUSES or (
        deadline is not None and deadline < now_in_app_timezone()
    ):
        raise InvalidInputError("Investments are not currently being accepted")

    value = parse_amount(amount)
    investments = InvestmentRepository(session)

    if investment_term_id is not None:
        term = InvestmentTermRepository(session).get(investment_term_id)
        if term is None or term.application_id != application_id:
            raise EntityNotFoundError("Investment term")
        if term.purchase_limit is not None:
            sold = len(investments.active_amounts(investment_term_id=investment_term_id))
            if sold >= term.purchase_limit:
                raise InvalidInputError(
                    f"This investment term has reached its purchase limit of {term.purchase_limit}"
                )

    assignment = UserTierAssignmentRepository(session).get(
        program_id=program.id, user_id=user_id
    )
    if assignment is not None:
        cap = parse_amount(assignment.max_investment_amount, "maxInvestmentAmount")
        invested = total_amount(investments.active_amounts(user_id=user_id, program_id=program.id))
        if invested + value > cap:
            raise InvalidInputError(
                f"Total investments would exceed your tier limit of {format_amount(cap)}"
            )

    investment = Investment(
        id=None,
        application_id=application_id,
        user_id=user_id,
        amount=format_amount(value),
        investment_term_id=investment_term_id,
        tier=assignment.tier if assignment is not None else None,
        tx_hash=tx_hash,
        status=INVESTMENT_STATUS_CONFIRMED if tx_hash else INVESTMENT_STATUS_PENDING,
    )
    try:
        investment = investments.create(investment)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("create_investment failed for application %s", application_id)
        raise ServiceError("Failed to create investment") from exc

    investor = UserRepository(session).get(user_id)
    notify_investment_received(
        session,
        investment,
        applicant_id=application.applicant_id,
        investor_email=investor.email if investor is not None else "",
    )
    logger.info(
        "User %s invested %s in application %s", user_id, investment.amount, application_id
    )
    return investment
