"""Persistence helpers for community posts."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.domain.entities import Post
from app.infrastructure.models import PostModel
from app.utils import ensure_app_timezone


class PostRepository:
    """Provide CRUD operations for :class:`Post` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, post_id: int) -> Post | None:
        model = self.session.get(PostModel, post_id)
        return self._to_entity(model) if model else None

    def list(
        self,
        *,
        author_id: int | None = None,
        title_contains: str | None = None,
        limit: int = 10,
        offset: int = 0,
        ascending: bool = False,
    ) -> tuple[Sequence[Post], int]:
        conditions = []
        if author_id is not None:
            conditions.append(PostModel.author_id == author_id)
        if title_contains:
            conditions.append(PostModel.title.ilike(f"%{title_contains}%"))
        ordering = (
            (PostModel.created_at.asc(), PostModel.id.asc())
            if ascending
            else (PostModel.created_at.desc(), PostModel.id.desc())
        )
        models = (
            self.session.execute(
                select(PostModel)
                .where(*conditions)
                .order_by(*ordering)
                .limit(limit)
                .offset(offset)
            )
            .scalars()
            .all()
        )
        total = self.session.execute(
            select(func.count(PostModel.id)).where(*conditions)
        ).scalar_one()
        return [self._to_entity(model) for model in models], int(total)

    def create(self, post: Post) -> Post:
        model = PostModel(
            author_id=post.author_id,
            title=post.title,
            content=post.content,
            summary=post.summary,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, post_id: int, **fields: Any) -> Post:
        model = self.session.get(PostModel, post_id)
        if model is None:
            raise ValueError(f"Post with id {post_id} not found")
        for name, value in fields.items():
            setattr(model, name, value)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: PostModel) -> Post:
        return Post(
            id=model.id,
            author_id=model.author_id,
            title=model.title,
            content=model.content,
            summary=model.summary,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["PostRepository"]
