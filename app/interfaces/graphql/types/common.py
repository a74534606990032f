"""Shared GraphQL inputs for paginated queries."""

from __future__ import annotations

from enum import Enum

import strawberry

from app.application.use_cases.pagination import FieldFilter, Pagination


@strawberry.enum
class SortOrder(Enum):
    ASC = "asc"
    DESC = "desc"


@strawberry.input
class FilterInput:
    field: str
    value: str | None = None


@strawberry.input
class PaginationInput:
    limit: int | None = None
    offset: int | None = None
    sort: SortOrder | None = None
    filter: list[FilterInput] | None = None


def to_pagination(value: PaginationInput | None) -> Pagination:
    if value is None:
        return Pagination()
    return Pagination.build(
        limit=value.limit,
        offset=value.offset,
        sort=value.sort.value if value.sort else None,
        filters=[FieldFilter(field=item.field, value=item.value) for item in value.filter or []],
    )


__all__ = ["FilterInput", "PaginationInput", "SortOrder", "to_pagination"]
