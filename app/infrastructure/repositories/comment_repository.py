"""Persistence helpers for comments."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.domain.entities import Comment
from app.infrastructure.models import CommentModel
from app.utils import ensure_app_timezone


class CommentRepository:
    """Provide CRUD operations for :class:`Comment` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, comment_id: int) -> Comment | None:
        model = self.session.get(CommentModel, comment_id)
        return self._to_entity(model) if model else None

    def list(
        self,
        *,
        equals: dict[str, Any] | None = None,
        top_level_only: bool = False,
        limit: int = 10,
        offset: int = 0,
        ascending: bool = False,
    ) -> tuple[Sequence[Comment], int]:
        conditions = [
            getattr(CommentModel, column) == value
            for column, value in (equals or {}).items()
        ]
        if top_level_only:
            conditions.append(CommentModel.parent_id.is_(None))
        ordering = (
            (CommentModel.created_at.asc(), CommentModel.id.asc())
            if ascending
            else (CommentModel.created_at.desc(), CommentModel.id.desc())
        )
        models = (
            self.session.execute(
                select(CommentModel)
                .where(*conditions)
                .order_by(*ordering)
                .limit(limit)
                .offset(offset)
            )
            .scalars()
            .all()
        )
        total = self.session.execute(
            select(func.count(CommentModel.id)).where(*conditions)
        ).scalar_one()
        return [self._to_entity(model) for model in models], int(total)

    def create(self, comment: Comment) -> Comment:
        model = CommentModel(
            author_id=comment.author_id,
            commentable_type=comment.commentable_type,
            commentable_id=comment.commentable_id,
            parent_id=comment.parent_id,
            content=comment.content,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: CommentModel) -> Comment:
        return Comment(
            id=model.id,
            author_id=model.author_id,
            commentable_type=model.commentable_type,
            commentable_id=model.commentable_id,
            content=model.content,
            parent_id=model.parent_id,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["CommentRepository"]
