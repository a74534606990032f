"""Use case for an investor taking funds back from a stalled program."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.application.errors import EntityNotFoundError, ForbiddenError, InvalidInputError
from app.domain.entities import (
    APPLICATION_STATUS_COMPLETED,
    INVESTMENT_STATUS_CONFIRMED,
    INVESTMENT_STATUS_REFUNDED,
    Investment,
)
from app.infrastructure.repositories import (
    ApplicationRepository,
    InvestmentRepository,
    ProgramRepository,
)
from app.utils import ensure_app_timezone, now_in_app_timezone

from ..notifications import notify_investment_refunded

logger = logging.getLogger(__name__)


def reclaim_investment(
    session: Session, *, investment_id: int, user_id: int, tx_hash: str | None = None
) -> Investment:
    """Refund a confirmed investment once the program deadline passed unfinished."""

    repository = InvestmentRepository(session)
    investment = repository.get(investment_id)
    if investment is None:
        raise EntityNotFoundError("Investment")
    if investment.user_id != user_id:
        raise ForbiddenError("You can only reclaim your own investments")
    if investment.status == INVESTMENT_STATUS_REFUNDED:
        raise InvalidInputError("Investment already refunded")
    if investment.status != INVESTMENT_STATUS_CONFIRMED:
        raise InvalidInputError("Only confirmed investments can be refunded")

    application = ApplicationRepository(session).get(investment.application_id)
    program = ProgramRepository(session).get(application.program_id)
    deadline = ensure_app_timezone(program.deadline)
    now = now_in_app_timezone()
    if (
        deadline is None
        or deadline >= now
        or application.status == APPLICATION_STATUS_COMPLETED
    ):
        raise InvalidInputError("Investment is not eligible for reclaim")

    investment = repository.update(
        investment_id,
        status=INVESTMENT_STATUS_REFUNDED,
        reclaim_tx_hash=tx_hash,
        reclaimed_at=now,
    )
    notify_investment_refunded(session, investment, applicant_id=application.applicant_id)
    logger.info("Investment %s reclaimed by user %s", investment_id, user_id)
    return investment
