"""Use case for commenting on posts, programs, applications and milestones."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.errors import EntityNotFoundError, InvalidInputError, ServiceError
from app.domain.entities import COMMENTABLE_TYPES, Comment
from app.infrastructure.repositories import (
    ApplicationRepository,
    CommentRepository,
    MilestoneRepository,
    PostRepository,
)

from ..notifications import notify_comment_created
from ..programs import get_program

logger = logging.getLogger(__name__)


def _target_owner(
    session: Session, commentable_type: str, commentable_id: int, user_id: int
) -> int:
    """Return the user who owns the commented entity, enforcing program visibility."""

    if commentable_type == "post":
        post = PostRepository(session).get(commentable_id)
        if post is None:
            raise EntityNotFoundError("Post")
        return post.author_id
    if commentable_type == "program":
        return get_program(session, commentable_id, user_id=user_id).creator_id

    if commentable_type == "milestone":
        milestone = MilestoneRepository(session).get(commentable_id)
        if milestone is None:
            raise EntityNotFoundError("Milestone")
        application_id = milestone.application_id
    else:
        application_id = commentable_id
    application = ApplicationRepository(session).get(application_id)
    if application is None:
        raise EntityNotFoundError("Application")
    get_program(session, application.program_id, user_id=user_id)
    return application.applicant_id


def create_comment(
    session: Session,
    *,
    author_id: int,
    commentable_type: str,
    commentable_id: int,
    content: str,
    parent_id: int | None = None,
) -> Comment:
    """Store a comment and notify the owner of the target and the parent's author.

    Replies are one level deep: a reply must point at a top-level comment of
    the same target.
    """

    if commentable_type not in COMMENTABLE_TYPES:
        raise InvalidInputError(f"Unsupported commentable type: {commentable_type}")
    if not content or not content.strip():
        raise InvalidInputError("Comment content is required")
    recipients = [_target_owner(session, commentable_type, commentable_id, author_id)]

    repository = CommentRepository(session)
    if parent_id is not None:
        parent = repository.get(parent_id)
        if parent is None:
            raise EntityNotFoundError("Parent comment")
        if parent.parent_id is not None:
            raise InvalidInputError("Cannot reply to a comment that is already a reply")
        if (parent.commentable_type, parent.commentable_id) != (
            commentable_type,
            commentable_id,
        ):
            raise InvalidInputError("Parent comment belongs to another thread")
        recipients.append(parent.author_id)

    comment = Comment(
        id=None,
        author_id=author_id,
        commentable_type=commentable_type,
        commentable_id=commentable_id,
        content=content,
        parent_id=parent_id,
    )
    try:
        comment = repository.create(comment)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("create_comment failed for user %s", author_id)
        raise ServiceError("Failed to create comment") from exc

    notify_comment_created(session, comment, recipient_ids=recipients)
    return comment
