"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime

USER_ROLE_USER = "user"
USER_ROLE_ADMIN = "admin"
USER_ROLE_SUPERADMIN = "superadmin"


@dataclass
class User:
    """Core attributes describing a platform user."""

    id: int | None
    email: str
    first_name: str | None = None
    last_name: str | None = None
    external_id: str | None = None
    role: str = USER_ROLE_USER
    created_at: datetime | None = None


__all__ = ["User", "USER_ROLE_USER", "USER_ROLE_ADMIN", "USER_ROLE_SUPERADMIN"]
