"""Use case for publishing a post."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.errors import InvalidInputError, ServiceError
from app.domain.entities import Post
from app.infrastructure.repositories import PostRepository

logger = logging.getLogger(__name__)


def create_post(
    session: Session,
    *,
    author_id: int,
    title: str,
    content: str,
    summary: str = "",
) -> Post:
    if not title or not title.strip():
        raise InvalidInputError("Post title is required")
    if not content or not content.strip():
        raise InvalidInputError("Post content is required")

    post = Post(
        id=None,
        author_id=author_id,
        title=title.strip(),
        content=content,
        summary=summary or "",
    )
    try:
        return PostRepository(session).create(post)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("create_post failed for user %s", author_id)
        raise ServiceError("Failed to create post") from exc
