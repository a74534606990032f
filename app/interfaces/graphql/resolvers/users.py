"""Authentication and current-user resolvers."""

from __future__ import annotations

import strawberry
from strawberry.types import Info

from app.application.use_cases.users import login

from ..context import require_user, run_in_session
from ..types import LoginPayload, UserType


@strawberry.type
class UserQuery:
    @strawberry.field
    def me(self, info: Info) -> UserType:
        return UserType.from_entity(require_user(info))


@strawberry.type
class UserMutation:
    @strawberry.mutation
    async def login(self, info: Info, email: str, external_id: str) -> LoginPayload:
        token, user = await run_in_session(
            info, login, email=email, external_id=external_id
        )
        return LoginPayload(token=token, user=UserType.from_entity(user))


__all__ = ["UserMutation", "UserQuery"]
