"""Use case for listing applications."""

from sqlalchemy.orm import Session

from app.application.errors import InvalidFilterError
from app.domain.entities import APPLICATION_STATUSES, Application
from app.infrastructure.repositories import ApplicationRepository

from ..pagination import Page, Pagination, collect_field_filters, parse_int_filter
from ..programs import get_program

SUPPORTED_FILTERS = ("programId", "applicantId", "status")


def list_applications(
    session: Session,
    *,
    viewer_id: int | None = None,
    pagination: Pagination | None = None,
) -> Page[Application]:
    """Return applications matching the ``programId``/``applicantId``/``status`` filters.

    Filtering by a private program requires access to that program.
    """

    pagination = pagination or Pagination()
    filters = collect_field_filters(pagination, SUPPORTED_FILTERS)
    equals: dict[str, object] = {}
    if "programId" in filters:
        program_id = parse_int_filter("programId", filters["programId"])
        get_program(session, program_id, user_id=viewer_id)
        equals["program_id"] = program_id
    if "applicantId" in filters:
        equals["applicant_id"] = parse_int_filter("applicantId", filters["applicantId"])
    if "status" in filters:
        if filters["status"] not in APPLICATION_STATUSES:
            raise InvalidFilterError("status", filters["status"])
        equals["status"] = filters["status"]

    data, count = ApplicationRepository(session).list(
        equals=equals,
        limit=pagination.limit,
        offset=pagination.offset,
        ascending=pagination.ascending,
    )
    return Page(data=data, count=count)
