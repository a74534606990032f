"""Use cases for reading investments."""

from sqlalchemy.orm import Session

from app.application.errors import EntityNotFoundError, InvalidFilterError
from app.domain.entities import INVESTMENT_STATUSES, Investment
from app.infrastructure.repositories import InvestmentRepository

from ..pagination import Page, Pagination, collect_field_filters, parse_int_filter

SUPPORTED_FILTERS = ("applicationId", "userId", "status")


def get_investment(session: Session, investment_id: int) -> Investment:
    investment = InvestmentRepository(session).get(investment_id)
    if investment is None:
        raise EntityNotFoundError("Investment")
    return investment


def list_investments(
    session: Session, *, pagination: Pagination | None = None
) -> Page[Investment]:
    pagination = pagination or Pagination()
    filters = collect_field_filters(pagination, SUPPORTED_FILTERS)
    equals: dict[str, object] = {}
    if "applicationId" in filters:
        equals["application_id"] = parse_int_filter("applicationId", filters["applicationId"])
    if "userId" in filters:
        equals["user_id"] = parse_int_filter("userId", filters["userId"])
    if "status" in filters:
        if filters["status"] not in INVESTMENT_STATUSES:
            raise InvalidFilterError("status", filters["status"])
        equals["status"] = filters["status"]
    data, count = InvestmentRepository(session).list(
        equals=equals,
        limit=pagination.limit,
        offset=pagination.offset,
        ascending=pagination.ascending,
    )
    return Page(data=data, count=count)
