"""Use cases for the investment terms a builder offers on an application."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.errors import EntityNotFoundError, InvalidInputError, ServiceError
from app.domain.entities import InvestmentTerm
from app.infrastructure.repositories import InvestmentTermRepository

from ..access import Scope, require_scope
from ..amounts import format_amount, parse_amount
from ..pagination import Page, Pagination, collect_field_filters, parse_int_filter

logger = logging.getLogger(__name__)

SUPPORTED_FILTERS = ("applicationId",)


def _require_builder(session: Session, application_id: int, user_id: int) -> None:
    require_scope(
        session,
        scope=Scope.APPLICATION_BUILDER,
        user_id=user_id,
        entity_id=application_id,
        entity="Application",
        message="Only the applicant can manage investment terms",
    )


def _validate_purchase_limit(purchase_limit: int | None) -> None:
    if purchase_limit is not None and purchase_limit < 1:
        raise InvalidInputError("purchaseLimit must be a positive integer")


def _get_term(repository: InvestmentTermRepository, term_id: int) -> InvestmentTerm:
    term = repository.get(term_id)
    if term is None:
        raise EntityNotFoundError("Investment term")
    return term


def create_investment_term(
    session: Session,
    *,
    application_id: int,
    user_id: int,
    title: str,
    price: str,
    description: str | None = None,
    purchase_limit: int | None = None,
) -> InvestmentTerm:
    _require_builder(session, application_id, user_id)
    if not title or not title.strip():
        raise InvalidInputError("Investment term title is required")
    _validate_purchase_limit(purchase_limit)
    term = InvestmentTerm(
        id=None,
        application_id=application_id,
        title=title.strip(),
        price=format_amount(parse_amount(price, "price")),
        description=description,
        purchase_limit=purchase_limit,
    )
    try:
        return InvestmentTermRepository(session).create(term)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("create_investment_term failed for application %s", application_id)
        raise ServiceError("Failed to create investment term") from exc


def update_investment_term(
    session: Session,
    *,
    term_id: int,
    user_id: int,
    title: str | None = None,
    price: str | None = None,
    description: str | None = None,
    purchase_limit: int | None = None,
) -> InvestmentTerm:
    """Change the given fields of a term; omitted fields keep their value."""

    repository = InvestmentTermRepository(session)
    term = _get_term(repository, term_id)
    _require_builder(session, term.application_id, user_id)

    fields: dict[str, object] = {}
    if title is not None:
        if not title.strip():
            raise InvalidInputError("Investment term title is required")
        fields["title"] = title.strip()
    if price is not None:
        fields["price"] = format_amount(parse_amount(price, "price"))
    if description is not None:
        fields["description"] = description
    if purchase_limit is not None:
        _validate_purchase_limit(purchase_limit)
        fields["purchase_limit"] = purchase_limit
    if not fields:
        return term
    try:
        return repository.update(term_id, **fields)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("update_investment_term failed for term %s", term_id)
        raise ServiceError("Failed to update investment term") from exc


def delete_investment_term(session: Session, *, term_id: int, user_id: int) -> bool:
    repository = InvestmentTermRepository(session)
    term = _get_term(repository, term_id)
    _require_builder(session, term.application_id, user_id)
    try:
        return repository.delete(term_id)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("delete_investment_term failed for term %s", term_id)
        raise ServiceError("Failed to delete investment term") from exc


def list_investment_terms(
    session: Session, *, pagination: Pagination | None = None
) -> Page[InvestmentTerm]:
    pagination = pagination or Pagination()
    filters = collect_field_filters(pagination, SUPPORTED_FILTERS)
    equals = {}
    if "applicationId" in filters:
        equals["application_id"] = parse_int_filter("applicationId", filters["applicationId"])
    data, count = InvestmentTermRepository(session).list(
        equals=equals,
        limit=pagination.limit,
        offset=pagination.offset,
        ascending=pagination.ascending,
    )
    return Page(data=data, count=count)
