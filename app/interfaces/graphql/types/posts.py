"""GraphQL types for posts and comments."""

from __future__ import annotations

from datetime import datetime

import strawberry

from app.application.use_cases.pagination import Page
from app.domain.entities import Comment, Post


def _id(value: int | None) -> strawberry.ID | None:
    return strawberry.ID(str(value)) if value is not None else None


@strawberry.type(name="Post")
class PostType:
    id: strawberry.ID
    author_id: strawberry.ID
    title: str
    content: str
    summary: str
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, post: Post) -> "PostType":
        return cls(
            id=strawberry.ID(str(post.id)),
            author_id=strawberry.ID(str(post.author_id)),
            title=post.title,
            content=post.content,
            summary=post.summary,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


@strawberry.type
class PaginatedPosts:
    data: list[PostType]
    count: int

    @classmethod
    def from_page(cls, page: Page[Post]) -> "PaginatedPosts":
        return cls(data=[PostType.from_entity(item) for item in page.data], count=page.count)


@strawberry.type(name="Comment")
class CommentType:
    id: strawberry.ID
    author_id: strawberry.ID
    commentable_type: str
    commentable_id: strawberry.ID
    parent_id: strawberry.ID | None
    content: str
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, comment: Comment) -> "CommentType":
        return cls(
            id=strawberry.ID(str(comment.id)),
            author_id=strawberry.ID(str(comment.author_id)),
            commentable_type=comment.commentable_type,
            commentable_id=strawberry.ID(str(comment.commentable_id)),
            parent_id=_id(comment.parent_id),
            content=comment.content,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


@strawberry.type
class PaginatedComments:
    data: list[CommentType]
    count: int

    @classmethod
    def from_page(cls, page: Page[Comment]) -> "PaginatedComments":
        return cls(data=[CommentType.from_entity(item) for item in page.data], count=page.count)


@strawberry.input
class CreatePostInput:
    title: str
    content: str
    summary: str = ""


@strawberry.input
class UpdatePostInput:
    id: strawberry.ID
    title: str | None = None
    content: str | None = None
    summary: str | None = None


@strawberry.input
class CreateCommentInput:
    commentable_type: str
    commentable_id: strawberry.ID
    content: str
    parent_id: strawberry.ID | None = None


__all__ = [
    "CommentType",
    "CreateCommentInput",
    "CreatePostInput",
    "PaginatedComments",
    "PaginatedPosts",
    "PostType",
    "UpdatePostInput",
]
