"""Use cases for reading comments."""

from sqlalchemy.orm import Session

from app.application.errors import EntityNotFoundError, InvalidFilterError
from app.domain.entities import COMMENTABLE_TYPES, Comment
from app.infrastructure.repositories import CommentRepository

from ..pagination import Page, Pagination, collect_field_filters, parse_int_filter
from ..programs import get_program

SUPPORTED_FILTERS = ("authorId", "commentableType", "commentableId", "parentId")

_COLUMNS = {
    "authorId": "author_id",
    "commentableId": "commentable_id",
    "parentId": "parent_id",
}


def get_comment(session: Session, comment_id: int) -> Comment:
    comment = CommentRepository(session).get(comment_id)
    if comment is None:
        raise EntityNotFoundError("Comment")
    return comment


def list_comments(
    session: Session,
    *,
    viewer_id: int | None = None,
    pagination: Pagination | None = None,
    top_level_only: bool = False,
) -> Page[Comment]:
    """Return comments matching the filters; ``top_level_only`` drops replies.

    Listing the comments of a program requires access to that program.
    """

    pagination = pagination or Pagination()
    filters = collect_field_filters(pagination, SUPPORTED_FILTERS)
    equals: dict[str, object] = {
        column: parse_int_filter(field, filters[field])
        for field, column in _COLUMNS.items()
        if field in filters
    }
    if "commentableType" in filters:
        if filters["commentableType"] not in COMMENTABLE_TYPES:
            raise InvalidFilterError("commentableType", filters["commentableType"])
        equals["commentable_type"] = filters["commentableType"]
        if filters["commentableType"] == "program" and "commentable_id" in equals:
            get_program(session, equals["commentable_id"], user_id=viewer_id)

    data, count = CommentRepository(session).list(
        equals=equals,
        top_level_only=top_level_only,
        limit=pagination.limit,
        offset=pagination.offset,
        ascending=pagination.ascending,
    )
    return Page(data=data, count=count)
