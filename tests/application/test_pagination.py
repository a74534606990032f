"""Tests for the shared pagination contract."""

from __future__ import annotations

import pytest

from app.application.errors import InvalidFilterError, InvalidInputError
from app.application.use_cases.pagination import (
    MAX_LIMIT,
    FieldFilter,
    Pagination,
    collect_field_filters,
    parse_int_filter,
)


def test_defaults():
    pagination = Pagination.build()

    assert (pagination.limit, pagination.offset, pagination.sort) == (10, 0, "desc")
    assert pagination.filters == ()
    assert pagination.ascending is False


def test_limit_is_clamped_to_maximum():
    assert Pagination.build(limit=5000).limit == MAX_LIMIT


@pytest.mark.parametrize(
    "kwargs",
    [{"limit": 0}, {"limit": -3}, {"offset": -1}, {"sort": "sideways"}],
)
def test_invalid_values_are_rejected(kwargs):
    with pytest.raises(InvalidInputError):
        Pagination.build(**kwargs)


def test_sort_is_case_insensitive():
    assert Pagination.build(sort="ASC").ascending is True


def test_collect_field_filters():
    pagination = Pagination.build(
        filters=[FieldFilter("status", "pending"), FieldFilter("programId", "4")]
    )

    assert collect_field_filters(pagination, ("status", "programId")) == {
        "status": "pending",
        "programId": "4",
    }


@pytest.mark.parametrize(
    "item", [FieldFilter("owner", "1"), FieldFilter("status", ""), FieldFilter("status")]
)
def test_collect_field_filters_rejects_unknown_or_empty(item):
    with pytest.raises(InvalidFilterError):
        collect_field_filters(Pagination.build(filters=[item]), ("status",))


def test_parse_int_filter():
    assert parse_int_filter("programId", "12") == 12
    with pytest.raises(InvalidFilterError, match="programId=abc"):
        parse_int_filter("programId", "abc")
