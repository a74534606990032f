"""Use cases for reading posts."""

from sqlalchemy.orm import Session

from app.application.errors import EntityNotFoundError
from app.domain.entities import Post
from app.infrastructure.repositories import PostRepository

from ..pagination import Page, Pagination, collect_field_filters, parse_int_filter

SUPPORTED_FILTERS = ("authorId", "title")


def get_post(session: Session, post_id: int) -> Post:
    post = PostRepository(session).get(post_id)
    if post is None:
        raise EntityNotFoundError("Post")
    return post


def list_posts(session: Session, *, pagination: Pagination | None = None) -> Page[Post]:
    """Return posts filtered by ``authorId`` or a case-insensitive ``title`` fragment."""

    pagination = pagination or Pagination()
    filters = collect_field_filters(pagination, SUPPORTED_FILTERS)
    author_id = None
    if "authorId" in filters:
        author_id = parse_int_filter("authorId", filters["authorId"])

    data, count = PostRepository(session).list(
        author_id=author_id,
        title_contains=filters.get("title"),
        limit=pagination.limit,
        offset=pagination.offset,
        ascending=pagination.ascending,
    )
    return Page(data=data, count=count)
