"""Use case for editing a post."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.application.errors import EntityNotFoundError, ForbiddenError, InvalidInputError
from app.domain.entities import USER_ROLE_ADMIN, USER_ROLE_SUPERADMIN, Post
from app.infrastructure.repositories import PostRepository, UserRepository


def update_post(
    session: Session,
    *,
    post_id: int,
    user_id: int,
    title: str | None = None,
    content: str | None = None,
    summary: str | None = None,
) -> Post:
    """Apply the non-empty fields to the post.

    Only the author, or a platform admin, may edit a post.
    """

    repository = PostRepository(session)
    post = repository.get(post_id)
    if post is None:
        raise EntityNotFoundError("Post")
    if post.author_id != user_id:
        editor = UserRepository(session).get(user_id)
        if editor is None or editor.role not in (USER_ROLE_ADMIN, USER_ROLE_SUPERADMIN):
            raise ForbiddenError("You are not the author of this post")

    changes = {
        name: value
        for name, value in (("title", title), ("content", content), ("summary", summary))
        if value
    }
    if "title" in changes:
        changes["title"] = changes["title"].strip()
        if not changes["title"]:
            raise InvalidInputError("Post title is required")
    if not changes:
        return post
    return repository.update(post_id, **changes)
