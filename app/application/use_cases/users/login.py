"""Use case for exchanging an external login for an API token."""

import logging

from sqlalchemy.orm import Session

from app.application.errors import EntityNotFoundError, InvalidInputError
from app.domain.entities import User
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import create_access_token

logger = logging.getLogger(__name__)


def login(session: Session, *, email: str, external_id: str) -> tuple[str, User]:
    """Return a signed token for the user registered under ``email``.

    The identity provider id is stored on every login so it follows the
    provider when it rotates.
    """

    if not external_id:
        raise InvalidInputError("External id is required")
    repository = UserRepository(session)
    user = repository.get_by_email(email.strip().lower())
    if user is None:
        raise EntityNotFoundError("User")
    if user.external_id != external_id:
        user = repository.set_external_id(user.id, external_id)

    token = create_access_token({"id": user.id, "email": user.email})
    logger.info("User %s logged in", user.id)
    return token, user
