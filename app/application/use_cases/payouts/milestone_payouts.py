"""Use cases for reading and releasing milestone payouts."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.application.errors import InvalidFilterError, InvalidInputError
from app.domain.entities import (
    PAYOUT_STATUS_PENDING,
    PAYOUT_STATUS_PROCESSING,
    PAYOUT_STATUSES,
    MilestonePayout,
)
from app.infrastructure.repositories import MilestonePayoutRepository

from ..access import Scope, require_scope
from ..pagination import Page, Pagination, collect_field_filters, parse_int_filter

logger = logging.getLogger(__name__)

SUPPORTED_FILTERS = ("milestoneId", "investmentId", "status")


def list_milestone_payouts(
    session: Session, *, pagination: Pagination | None = None
) -> Page[MilestonePayout]:
    pagination = pagination or Pagination()
    filters = collect_field_filters(pagination, SUPPORTED_FILTERS)
    equals: dict[str, object] = {}
    if "milestoneId" in filters:
        equals["milestone_id"] = parse_int_filter("milestoneId", filters["milestoneId"])
    if "investmentId" in filters:
        equals["investment_id"] = parse_int_filter("investmentId", filters["investmentId"])
    if "status" in filters:
        if filters["status"] not in PAYOUT_STATUSES:
            raise InvalidFilterError("status", filters["status"])
        equals["status"] = filters["status"]
    data, count = MilestonePayoutRepository(session).list(
        equals=equals,
        limit=pagination.limit,
        offset=pagination.offset,
        ascending=pagination.ascending,
    )
    return Page(data=data, count=count)


def process_milestone_payouts(
    session: Session, *, milestone_id: int, user_id: int
) -> list[MilestonePayout]:
    """Hand the pending payouts of a milestone over for transfer.

    Only the program validator may release payouts.
    """

    require_scope(
        session,
        scope=Scope.MILESTONE_VALIDATOR,
        user_id=user_id,
        entity_id=milestone_id,
        entity="Milestone",
        message="Only the program validator can process payouts",
    )
    repository = MilestonePayoutRepository(session)
    ids = repository.transition(
        milestone_id, from_status=PAYOUT_STATUS_PENDING, to_status=PAYOUT_STATUS_PROCESSING
    )
    if not ids:
        raise InvalidInputError("No pending payouts found for this milestone")
    logger.info("Processing %s payouts for milestone %s", len(ids), milestone_id)
    return repository.get_many(ids)
