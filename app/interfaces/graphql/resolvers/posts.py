"""Post and comment queries and mutations."""

from __future__ import annotations

import strawberry
from strawberry.types import Info

from app.application.use_cases.comments import create_comment, get_comment, list_comments
from app.application.use_cases.posts import create_post, get_post, list_posts, update_post

from ..context import optional_user, parse_id, require_user, run_in_session
from ..types import (
    CommentType,
    CreateCommentInput,
    CreatePostInput,
    PaginatedComments,
    PaginatedPosts,
    PaginationInput,
    PostType,
    UpdatePostInput,
    to_pagination,
)


@strawberry.type
class PostQuery:
    @strawberry.field
    async def post(self, info: Info, id: strawberry.ID) -> PostType:
        post = await run_in_session(info, get_post, post_id=parse_id(id))
        return PostType.from_entity(post)

    @strawberry.field
    async def posts(
        self, info: Info, pagination: PaginationInput | None = None
    ) -> PaginatedPosts:
        page = await run_in_session(info, list_posts, pagination=to_pagination(pagination))
        return PaginatedPosts.from_page(page)

    @strawberry.field
    async def comment(self, info: Info, id: strawberry.ID) -> CommentType:
        comment = await run_in_session(info, get_comment, comment_id=parse_id(id))
        return CommentType.from_entity(comment)

    @strawberry.field
    async def comments(
        self,
        info: Info,
        pagination: PaginationInput | None = None,
        top_level_only: bool = False,
    ) -> PaginatedComments:
        user = optional_user(info)
        page = await run_in_session(
            info,
            list_comments,
            viewer_id=user.id if user else None,
            pagination=to_pagination(pagination),
            top_level_only=top_level_only,
        )
        return PaginatedComments.from_page(page)


@strawberry.type
class PostMutation:
    @strawberry.mutation
    async def create_post(self, info: Info, input: CreatePostInput) -> PostType:
        user = require_user(info)
        post = await run_in_session(
            info,
            create_post,
            author_id=user.id,
            title=input.title,
            content=input.content,
            summary=input.summary,
        )
        return PostType.from_entity(post)

    @strawberry.mutation
    async def update_post(self, info: Info, input: UpdatePostInput) -> PostType:
        user = require_user(info)
        post = await run_in_session(
            info,
            update_post,
            post_id=parse_id(input.id),
            user_id=user.id,
            title=input.title,
            content=input.content,
            summary=input.summary,
        )
        return PostType.from_entity(post)

    @strawberry.mutation
    async def create_comment(self, info: Info, input: CreateCommentInput) -> CommentType:
        user = require_user(info)
        comment = await run_in_session(
            info,
            create_comment,
            author_id=user.id,
            commentable_type=input.commentable_type,
            commentable_id=parse_id(input.commentable_id, "commentableId"),
            content=input.content,
            parent_id=(
                parse_id(input.parent_id, "parentId") if input.parent_id is not None else None
            ),
        )
        return CommentType.from_entity(comment)


__all__ = ["PostMutation", "PostQuery"]
