"""Tests for posts and the comment threads attached to them."""

from __future__ import annotations

import pytest

from app.application.errors import (
    EntityNotFoundError,
    ForbiddenError,
    InvalidFilterError,
    InvalidInputError,
)
from app.application.use_cases.applications import create_application
from app.application.use_cases.comments import create_comment, get_comment, list_comments
from app.application.use_cases.notifications import list_notifications
from app.application.use_cases.pagination import FieldFilter, Pagination
from app.application.use_cases.posts import create_post, get_post, list_posts, update_post
from app.application.use_cases.programs import create_program


def _comment_inbox(session, user):
    page = list_notifications(session, recipient_id=user.id, pagination=Pagination.build(limit=100))
    return [item for item in page.data if item.type == "comment"]


def _filters(*pairs):
    return Pagination.build(filters=[FieldFilter(field, value) for field, value in pairs])


@pytest.fixture()
def post(session, people):
    return create_post(
        session,
        author_id=people["creator"].id,
        title="  Roadmap  ",
        content="What ships next",
    )


def test_create_and_get_post(session, people, post):
    assert post.title == "Roadmap"
    assert get_post(session, post.id).content == "What ships next"
    with pytest.raises(EntityNotFoundError, match="Post not found"):
        get_post(session, 999)
    with pytest.raises(InvalidInputError):
        create_post(session, author_id=people["creator"].id, title=" ", content="x")


def test_list_posts_filters(session, people, post):
    create_post(session, author_id=people["builder"].id, title="Hiring", content="Join us")

    by_author = list_posts(session, pagination=_filters(("authorId", str(people["creator"].id))))
    by_title = list_posts(session, pagination=_filters(("title", "road")))

    assert [item.id for item in by_author.data] == [post.id]
    assert [item.id for item in by_title.data] == [post.id]
    assert list_posts(session).count == 2
    with pytest.raises(InvalidFilterError):
        list_posts(session, pagination=_filters(("status", "draft")))


def test_only_author_or_admin_updates_post(session, people, post, make_user):
    with pytest.raises(ForbiddenError, match="not the author"):
        update_post(session, post_id=post.id, user_id=people["builder"].id, title="Hijacked")

    edited = update_post(session, post_id=post.id, user_id=people["creator"].id, summary="Q3")
    admin = make_user(role="admin")
    renamed = update_post(session, post_id=post.id, user_id=admin.id, title="Roadmap 2")

    assert edited.summary == "Q3"
    assert renamed.title == "Roadmap 2"
    assert renamed.content == "What ships next"


def test_comment_notifies_post_author(session, people, post):
    comment = create_comment(
        session,
        author_id=people["builder"].id,
        commentable_type="post",
        commentable_id=post.id,
        content="Looks great",
    )

    inbox = _comment_inbox(session, people["creator"])
    assert len(inbox) == 1
    assert inbox[0].action == "created"
    assert inbox[0].entity_id == str(comment.id)
    assert inbox[0].metadata == {"commentableType": "post", "commentableId": str(post.id)}
    assert get_comment(session, comment.id).content == "Looks great"


def test_own_comment_sends_no_notification(session, people, post):
    create_comment(
        session,
        author_id=people["creator"].id,
        commentable_type="post",
        commentable_id=post.id,
        content="Replying to myself",
    )

    assert _comment_inbox(session, people["creator"]) == []


def test_reply_notifies_parent_author_and_owner(session, people, post):
    parent = create_comment(
        session,
        author_id=people["builder"].id,
        commentable_type="post",
        commentable_id=post.id,
        content="Question",
    )
    reply = create_comment(
        session,
        author_id=people["outsider"].id,
        commentable_type="post",
        commentable_id=post.id,
        content="Answer",
        parent_id=parent.id,
    )

    builder_inbox = _comment_inbox(session, people["builder"])
    assert len(builder_inbox) == 1
    assert builder_inbox[0].metadata["parentId"] == str(parent.id)
    assert len(_comment_inbox(session, people["creator"])) == 2

    with pytest.raises(InvalidInputError, match="already a reply"):
        create_comment(
            session,
            author_id=people["creator"].id,
            commentable_type="post",
            commentable_id=post.id,
            content="Too deep",
            parent_id=reply.id,
        )


def test_comment_validation(session, people, post):
    other = create_post(session, author_id=people["builder"].id, title="Other", content="x")
    parent = create_comment(
        session,
        author_id=people["builder"].id,
        commentable_type="post",
        commentable_id=post.id,
        content="Question",
    )

    with pytest.raises(InvalidInputError, match="Unsupported commentable type"):
        create_comment(
            session,
            author_id=people["builder"].id,
            commentable_type="user",
            commentable_id=1,
            content="x",
        )
    with pytest.raises(EntityNotFoundError, match="Post not found"):
        create_comment(
            session,
            author_id=people["builder"].id,
            commentable_type="post",
            commentable_id=999,
            content="x",
        )
    with pytest.raises(InvalidInputError, match="another thread"):
        create_comment(
            session,
            author_id=people["builder"].id,
            commentable_type="post",
            commentable_id=other.id,
            content="x",
            parent_id=parent.id,
        )


def test_comment_on_application_notifies_applicant(session, people):
    program = create_program(session, creator_id=people["creator"].id, name="Grants")
    application = create_application(
        session, program_id=program.id, applicant_id=people["builder"].id, name="Wallet"
    )

    create_comment(
        session,
        author_id=people["creator"].id,
        commentable_type="application",
        commentable_id=application.id,
        content="Please add a budget",
    )

    inbox = _comment_inbox(session, people["builder"])
    assert [item.metadata["commentableType"] for item in inbox] == ["application"]


def test_private_program_comments_need_access(session, people):
    private = create_program(
        session, creator_id=people["creator"].id, name="Closed", visibility="private"
    )

    with pytest.raises(ForbiddenError):
        create_comment(
            session,
            author_id=people["outsider"].id,
            commentable_type="program",
            commentable_id=private.id,
            content="Let me in",
        )
    with pytest.raises(ForbiddenError):
        list_comments(
            session,
            viewer_id=people["outsider"].id,
            pagination=_filters(("commentableType", "program"), ("commentableId", str(private.id))),
        )


def test_list_comments_filters(session, people, post):
    parent = create_comment(
        session,
        author_id=people["builder"].id,
        commentable_type="post",
        commentable_id=post.id,
        content="Question",
    )
    create_comment(
        session,
        author_id=people["creator"].id,
        commentable_type="post",
        commentable_id=post.id,
        content="Answer",
        parent_id=parent.id,
    )
    thread = _filters(("commentableType", "post"), ("commentableId", str(post.id)))

    assert list_comments(session, pagination=thread).count == 2
    top_level = list_comments(session, pagination=thread, top_level_only=True)
    assert [item.id for item in top_level.data] == [parent.id]
    replies = list_comments(session, pagination=_filters(("parentId", str(parent.id))))
    assert replies.count == 1
    with pytest.raises(InvalidFilterError):
        list_comments(session, pagination=_filters(("commentableType", "user")))
