"""Domain entities for community posts and their comments."""

from dataclasses import dataclass
from datetime import datetime

COMMENTABLE_TYPES = ("post", "program", "application", "milestone")


@dataclass
class Post:
    """Article published by a user."""

    id: int | None
    author_id: int
    title: str
    content: str
    summary: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Comment:
    """Comment attached to a post, program, application or milestone.

    Replies point at a top-level comment through ``parent_id``; replies to
    replies are not allowed.
    """

    id: int | None
    author_id: int
    commentable_type: str
    commentable_id: int
    content: str
    parent_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["COMMENTABLE_TYPES", "Comment", "Post"]
