"""Parsing and formatting of token amounts stored as strings."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal, InvalidOperation

from app.application.errors import InvalidInputError


def parse_amount(value: str | None, field: str = "amount") -> Decimal:
    """Return ``value`` as a strictly positive :class:`Decimal`."""

    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise InvalidInputError(f"{field} must be a positive number") from exc
    if not amount.is_finite() or amount <= 0:
        raise InvalidInputError(f"{field} must be a positive number")
    return amount


def parse_price(value: str | None, field: str = "price") -> Decimal:
    """Return ``value`` as a non-negative :class:`Decimal`; zero is allowed."""

    try:
        price = Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise InvalidInputError(f"{field} must be a non-negative number") from exc
    if not price.is_finite() or price < 0:
        raise InvalidInputError(f"{field} must be a non-negative number")
    return price


def total_amount(values: Iterable[str]) -> Decimal:
    return sum((Decimal(value) for value in values), Decimal(0))


def format_amount(value: Decimal) -> str:
    if value == 0:
        return "0"
    return f"{value.normalize():f}"


__all__ = ["format_amount", "parse_amount", "parse_price", "total_amount"]
