"""Use case for creating users."""

from sqlalchemy.orm import Session

from app.application.errors import InvalidInputError
from app.domain.entities import USER_ROLE_USER, User
from app.infrastructure.repositories import UserRepository
from app.utils import now_in_app_timezone


def create_user(
    session: Session,
    *,
    email: str,
    first_name: str | None = None,
    last_name: str | None = None,
    role: str = USER_ROLE_USER,
    external_id: str | None = None,
) -> User:
    """Create a new user ensuring unique email addresses."""

    repository = UserRepository(session)
    normalized_email = email.strip().lower()
    if not normalized_email:
        raise InvalidInputError("Email is required")
    if repository.get_by_email(normalized_email):
        raise InvalidInputError("Email is already registered")

    user = User(
        id=None,
        email=normalized_email,
        first_name=first_name,
        last_name=last_name,
        external_id=external_id,
        role=role,
        created_at=now_in_app_timezone(),
    )
    return repository.create(user)
