"""GraphQL types for users and authentication."""

from __future__ import annotations

from datetime import datetime

import strawberry

from app.domain.entities import User


@strawberry.type(name="User")
class UserType:
    id: strawberry.ID
    email: str
    first_name: str | None
    last_name: str | None
    role: str
    created_at: datetime | None

    @classmethod
    def from_entity(cls, user: User) -> "UserType":
        return cls(
            id=strawberry.ID(str(user.id)),
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role,
            created_at=user.created_at,
        )


@strawberry.type
class LoginPayload:
    token: str
    user: UserType


__all__ = ["LoginPayload", "UserType"]
