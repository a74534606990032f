"""Errors raised by use cases and translated by the GraphQL layer."""

from __future__ import annotations


class DomainError(Exception):
    """Base class for failures whose message is safe to show to clients."""

    code = "BAD_REQUEST"

    @property
    def extensions(self) -> dict[str, str]:
        """GraphQL error extensions, picked up when the error is located."""

        return {"code": self.code}


class AuthenticationRequiredError(DomainError):
    code = "UNAUTHENTICATED"

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


class ForbiddenError(DomainError):
    code = "FORBIDDEN"


class EntityNotFoundError(DomainError):
    """A referenced entity does not exist (or is not visible to the caller)."""

    code = "NOT_FOUND"

    def __init__(self, entity: str) -> None:
        super().__init__(f"{entity} not found")
        self.entity = entity


class InvalidInputError(DomainError):
    code = "BAD_USER_INPUT"


class InvalidFilterError(InvalidInputError):
    """A pagination filter names an unsupported field/value combination."""

    def __init__(self, field: str, value: str | None) -> None:
        super().__init__(f"Unsupported filter: {field}={value}")
        self.field = field
        self.value = value


class ServiceError(DomainError):
    """Infrastructure failure reported with a generic message.

    The original exception is chained and logged, never shown to clients.
    """

    code = "INTERNAL"


__all__ = [
    "DomainError",
    "AuthenticationRequiredError",
    "ForbiddenError",
    "EntityNotFoundError",
    "InvalidInputError",
    "InvalidFilterError",
    "ServiceError",
]
