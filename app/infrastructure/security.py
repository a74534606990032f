"""Security helpers for token generation and verification."""

from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt

from app.config import get_settings

ALGORITHM = "HS256"


def create_access_token(
    payload: dict[str, Any], expires_delta: timedelta | None = None
) -> str:
    """Sign ``payload`` as ``{"payload": ..., "iat": ..., "exp": ...}``."""

    settings = get_settings()
    issued_at = datetime.now(timezone.utc)
    expire = issued_at + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    claims = {"payload": payload, "iat": issued_at, "exp": expire}
    return jwt.encode(claims, settings.secret_key, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    try:
        return jwt.decode(token, get_settings().secret_key, algorithms=[ALGORITHM])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc


def extract_user_id(claims: dict[str, Any]) -> int:
    """Return the user id carried by decoded token ``claims``."""

    payload = claims.get("payload")
    if not isinstance(payload, dict):
        raise ValueError("Could not validate credentials")
    try:
        return int(payload["id"])
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError("Could not validate credentials") from exc


def parse_bearer_token(header_value: str | None) -> str | None:
    """Return the raw token from an ``Authorization`` header value."""

    if not header_value:
        return None
    scheme, _, token = header_value.strip().partition(" ")
    if not token:
        # Websocket clients often send the bare token in connection params.
        return scheme or None
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


__all__ = [
    "create_access_token",
    "decode_access_token",
    "extract_user_id",
    "parse_bearer_token",
]
