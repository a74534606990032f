"""Per-request GraphQL context and authentication helpers."""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial
from typing import Any, TypeVar

from anyio import Lock, to_thread
from fastapi import Depends
from sqlalchemy.orm import Session
from starlette.requests import HTTPConnection
from strawberry.fastapi import BaseContext
from strawberry.types import Info

from app.application.errors import AuthenticationRequiredError, InvalidInputError
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import (
    decode_access_token,
    extract_user_id,
    parse_bearer_token,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GraphQLContext(BaseContext):
    """Database session and caller identity shared by every resolver."""

    def __init__(self, db: Session, token: str | None, user: User | None) -> None:
        super().__init__()
        self.db = db
        self.token = token
        self.user = user
        # Resolvers of one operation may run concurrently but share ``db``.
        self.db_lock = Lock()
        # Filled by the websocket handler from the ``connection_init`` payload.
        self.connection_params: dict[str, Any] | None = None


def resolve_user(db: Session, token: str | None) -> User | None:
    """Return the user a bearer token belongs to, or ``None`` when it is unusable."""

    if not token:
        return None
    try:
        user_id = extract_user_id(decode_access_token(token))
    except ValueError:
        logger.debug("Rejected invalid access token")
        return None
    return UserRepository(db).get(user_id)


def get_context(
    connection: HTTPConnection, db: Session = Depends(get_db)
) -> GraphQLContext:
    token = parse_bearer_token(connection.headers.get("authorization"))
    if token is None:
        token = connection.query_params.get("token")
    return GraphQLContext(db=db, token=token, user=resolve_user(db, token))


def optional_user(info: Info) -> User | None:
    return info.context.user


def require_user(info: Info) -> User:
    user = info.context.user
    if user is None:
        raise AuthenticationRequiredError()
    return user


async def run_in_session(info: Info, func: Callable[..., T], /, **kwargs: Any) -> T:
    """Call the blocking use case ``func(db, **kwargs)`` in a worker thread.

    The event loop stays free for other requests and live subscriptions while
    the database work runs. Calls sharing the request session are serialized.
    """

    context = info.context
    async with context.db_lock:
        return await to_thread.run_sync(partial(func, context.db, **kwargs))


def parse_id(value: Any, name: str = "id") -> int:
    """Convert a GraphQL ``ID`` argument into a database key."""

    try:
        parsed = int(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"Invalid {name}: {value}") from exc
    if parsed < 1:
        raise InvalidInputError(f"Invalid {name}: {value}")
    return parsed


__all__ = [
    "GraphQLContext",
    "get_context",
    "optional_user",
    "parse_id",
    "require_user",
    "resolve_user",
    "run_in_session",
]
