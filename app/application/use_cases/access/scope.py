"""Scope checks tying a user to a program, application or milestone."""

from __future__ import annotations

from enum import Enum

from sqlalchemy.orm import Session

from app.application.errors import EntityNotFoundError, ForbiddenError
from app.infrastructure.repositories import AccessRepository, ScopeOwners


class Scope(str, Enum):
    """Relationship a user must hold with an entity to act on it."""

    PROGRAM_CREATOR = "program_creator"
    PROGRAM_VALIDATOR = "program_validator"
    APPLICATION_BUILDER = "application_builder"
    APPLICATION_VALIDATOR = "application_validator"
    MILESTONE_BUILDER = "milestone_builder"
    MILESTONE_VALIDATOR = "milestone_validator"


class ScopeCheck(str, Enum):
    GRANTED = "granted"
    DENIED = "denied"
    NOT_FOUND = "not_found"


def _owners(repository: AccessRepository, scope: Scope, entity_id: int) -> ScopeOwners | None:
    if scope in (Scope.PROGRAM_CREATOR, Scope.PROGRAM_VALIDATOR):
        return repository.program_owners(entity_id)
    if scope in (Scope.APPLICATION_BUILDER, Scope.APPLICATION_VALIDATOR):
        return repository.application_owners(entity_id)
    return repository.milestone_owners(entity_id)


def _owner_for(scope: Scope, owners: ScopeOwners) -> int | None:
    if scope is Scope.PROGRAM_CREATOR:
        return owners.creator_id
    if scope in (Scope.APPLICATION_BUILDER, Scope.MILESTONE_BUILDER):
        return owners.applicant_id
    return owners.validator_id


def check_scope(
    session: Session, *, scope: Scope | str, user_id: int, entity_id: int
) -> ScopeCheck:
    """Return whether ``user_id`` holds ``scope`` over ``entity_id``.

    ``scope`` outside :class:`Scope` raises :class:`ValueError`. A missing row
    anywhere on the program/application/milestone chain yields ``NOT_FOUND``.
    """

    resolved = Scope(scope)
    owners = _owners(AccessRepository(session), resolved, entity_id)
    if owners is None:
        return ScopeCheck.NOT_FOUND
    owner_id = _owner_for(resolved, owners)
    if owner_id is not None and owner_id == user_id:
        return ScopeCheck.GRANTED
    return ScopeCheck.DENIED


def is_in_same_scope(
    session: Session, *, scope: Scope | str, user_id: int, entity_id: int
) -> bool:
    result = check_scope(session, scope=scope, user_id=user_id, entity_id=entity_id)
    return result is ScopeCheck.GRANTED


def require_scope(
    session: Session,
    *,
    scope: Scope | str,
    user_id: int,
    entity_id: int,
    entity: str,
    message: str,
) -> None:
    """Raise unless ``user_id`` holds ``scope`` over ``entity_id``."""

    result = check_scope(session, scope=scope, user_id=user_id, entity_id=entity_id)
    if result is ScopeCheck.NOT_FOUND:
        raise EntityNotFoundError(entity)
    if result is ScopeCheck.DENIED:
        raise ForbiddenError(message)


__all__ = ["Scope", "ScopeCheck", "check_scope", "is_in_same_scope", "require_scope"]
