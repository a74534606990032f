"""Shared limit/offset/sort/filter contract for list queries."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from app.application.errors import InvalidFilterError, InvalidInputError

T = TypeVar("T")

DEFAULT_LIMIT = 10
MAX_LIMIT = 100
SORT_ASC = "asc"
SORT_DESC = "desc"


@dataclass(frozen=True)
class FieldFilter:
    """Raw ``{field, value}`` pair as sent by the client."""

    field: str
    value: str | None = None


@dataclass(frozen=True)
class Pagination:
    limit: int = DEFAULT_LIMIT
    offset: int = 0
    sort: str = SORT_DESC
    filters: tuple[FieldFilter, ...] = ()

    @classmethod
    def build(
        cls,
        *,
        limit: int | None = None,
        offset: int | None = None,
        sort: str | None = None,
        filters: Iterable[FieldFilter] | None = None,
    ) -> "Pagination":
        """Apply defaults and validate client supplied values."""

        resolved_limit = DEFAULT_LIMIT if limit is None else limit
        if resolved_limit < 1:
            raise InvalidInputError("limit must be a positive integer")
        resolved_offset = 0 if offset is None else offset
        if resolved_offset < 0:
            raise InvalidInputError("offset must not be negative")
        resolved_sort = (sort or SORT_DESC).lower()
        if resolved_sort not in (SORT_ASC, SORT_DESC):
            raise InvalidInputError("sort must be 'asc' or 'desc'")
        return cls(
            limit=min(resolved_limit, MAX_LIMIT),
            offset=resolved_offset,
            sort=resolved_sort,
            filters=tuple(filters or ()),
        )

    @property
    def ascending(self) -> bool:
        return self.sort == SORT_ASC


@dataclass(frozen=True)
class Page(Generic[T]):
    """A window of results plus the total matching the same filters."""

    data: Sequence[T]
    count: int


def collect_field_filters(
    pagination: Pagination, supported: Iterable[str]
) -> dict[str, str]:
    """Return ``{field: value}`` for ``pagination`` after validating field names.

    Used by list queries whose filters are plain equality matches. Unknown
    fields and empty values raise :class:`InvalidFilterError`.
    """

    allowed = set(supported)
    collected: dict[str, str] = {}
    for item in pagination.filters:
        if item.field not in allowed or item.value in (None, ""):
            raise InvalidFilterError(item.field, item.value)
        collected[item.field] = item.value
    return collected


def parse_int_filter(item_field: str, value: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise InvalidFilterError(item_field, value) from exc


__all__ = [
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "FieldFilter",
    "Page",
    "Pagination",
    "collect_field_filters",
    "parse_int_filter",
]
