"""Persistence helpers for application investment terms."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from app.domain.entities import InvestmentTerm
from app.infrastructure.models import InvestmentTermModel
from app.utils import ensure_app_timezone


class InvestmentTermRepository:
    """Provide CRUD operations for :class:`InvestmentTerm` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, term_id: int) -> InvestmentTerm | None:
        model = self.session.get(InvestmentTermModel, term_id)
        return self._to_entity(model) if model else None

    def list(
        self,
        *,
        equals: dict[str, Any] | None = None,
        limit: int = 10,
        offset: int = 0,
        ascending: bool = True,
    ) -> tuple[Sequence[InvestmentTerm], int]:
        conditions = [
            getattr(InvestmentTermModel, column) == value
            for column, value in (equals or {}).items()
        ]
        ordering = (
            (InvestmentTermModel.created_at.asc(), InvestmentTermModel.id.asc())
            if ascending
            else (InvestmentTermModel.created_at.desc(), InvestmentTermModel.id.desc())
        )
        models = (
            self.session.execute(
                select(InvestmentTermModel)
                .where(*conditions)
                .order_by(*ordering)
                .limit(limit)
                .offset(offset)
            )
            .scalars()
            .all()
        )
        total = self.session.execute(
            select(func.count(InvestmentTermModel.id)).where(*conditions)
        ).scalar_one()
        return [self._to_entity(model) for model in models], int(total)

    def create(self, term: InvestmentTerm) -> InvestmentTerm:
        model = InvestmentTermModel(
            application_id=term.application_id,
            title=term.title,
            description=term.description,
            price=term.price,
            purchase_limit=term.purchase_limit,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, term_id: int, **fields: Any) -> InvestmentTerm:
        model = self.session.get(InvestmentTermModel, term_id)
        if model is None:
            raise ValueError(f"Investment term with id {term_id} not found")
        for name, value in fields.items():
            setattr(model, name, value)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, term_id: int) -> bool:
        result = self.session.execute(
            delete(InvestmentTermModel).where(InvestmentTermModel.id == term_id)
        )
        self.session.commit()
        return bool(result.rowcount)

    @staticmethod
    def _to_entity(model: InvestmentTermModel) -> InvestmentTerm:
        return InvestmentTerm(
            id=model.id,
            application_id=model.application_id,
            title=model.title,
            price=model.price,
            description=model.description,
            purchase_limit=model.purchase_limit,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["InvestmentTermRepository"]
