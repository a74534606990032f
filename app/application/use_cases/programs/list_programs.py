"""Use case for listing programs visible to a viewer."""

from sqlalchemy.orm import Session

from app.application.errors import InvalidFilterError
from app.domain.entities import PROGRAM_STATUSES, PROGRAM_VISIBILITIES, Program
from app.infrastructure.repositories import ProgramRepository

from ..pagination import Page, Pagination, collect_field_filters, parse_int_filter

SUPPORTED_FILTERS = ("creatorId", "validatorId", "status", "visibility")


def _equals(filters: dict[str, str]) -> dict[str, object]:
    equals: dict[str, object] = {}
    for field, value in filters.items():
        if field == "creatorId":
            equals["creator_id"] = parse_int_filter(field, value)
        elif field == "validatorId":
            equals["validator_id"] = parse_int_filter(field, value)
        elif field == "status":
            if value not in PROGRAM_STATUSES:
                raise InvalidFilterError(field, value)
            equals["status"] = value
        elif field == "visibility":
            if value not in PROGRAM_VISIBILITIES:
                raise InvalidFilterError(field, value)
            equals["visibility"] = value
    return equals


def list_programs(
    session: Session,
    *,
    viewer_id: int | None = None,
    pagination: Pagination | None = None,
) -> Page[Program]:
    """Return programs ``viewer_id`` may see, newest first by default."""

    pagination = pagination or Pagination()
    equals = _equals(collect_field_filters(pagination, SUPPORTED_FILTERS))
    data, count = ProgramRepository(session).list(
        equals=equals,
        viewer_id=viewer_id,
        limit=pagination.limit,
        offset=pagination.offset,
        ascending=pagination.ascending,
    )
    return Page(data=data, count=count)
