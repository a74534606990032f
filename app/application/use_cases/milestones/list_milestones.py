"""Use case for listing milestones."""

from sqlalchemy.orm import Session

from app.application.errors import InvalidFilterError
from app.domain.entities import MILESTONE_STATUSES, Milestone
from app.infrastructure.repositories import MilestoneRepository

from ..pagination import Page, Pagination, collect_field_filters, parse_int_filter

SUPPORTED_FILTERS = ("applicationId", "status")


def list_milestones(session: Session, *, pagination: Pagination | None = None) -> Page[Milestone]:
    pagination = pagination or Pagination()
    filters = collect_field_filters(pagination, SUPPORTED_FILTERS)
    equals: dict[str, object] = {}
    if "applicationId" in filters:
        equals["application_id"] = parse_int_filter("applicationId", filters["applicationId"])
    if "status" in filters:
        if filters["status"] not in MILESTONE_STATUSES:
            raise InvalidFilterError("status", filters["status"])
        equals["status"] = filters["status"]

    data, count = MilestoneRepository(session).list(
        equals=equals,
        limit=pagination.limit,
        offset=pagination.offset,
        ascending=pagination.ascending,
    )
    return Page(data=data, count=count)
