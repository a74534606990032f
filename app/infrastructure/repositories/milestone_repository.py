"""Persistence helpers for application milestones."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.domain.entities import Milestone
from app.infrastructure.models import MilestoneModel
from app.utils import ensure_app_timezone


class MilestoneRepository:
    """Provide CRUD operations for :class:`Milestone` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, milestone_id: int) -> Milestone | None:
        model = self.session.get(MilestoneModel, milestone_id)
        return self._to_entity(model) if model else None

    def list(
        self,
        *,
        equals: dict[str, Any] | None = None,
        limit: int = 10,
        offset: int = 0,
        ascending: bool = True,
    ) -> tuple[Sequence[Milestone], int]:
        conditions = [
            getattr(MilestoneModel, column) == value
            for column, value in (equals or {}).items()
        ]
        ordering = (
            (MilestoneModel.created_at.asc(), MilestoneModel.id.asc())
            if ascending
            else (MilestoneModel.created_at.desc(), MilestoneModel.id.desc())
        )
        models = (
            self.session.execute(
                select(MilestoneModel)
                .where(*conditions)
                .order_by(*ordering)
                .limit(limit)
                .offset(offset)
            )
            .scalars()
            .all()
        )
        total = self.session.execute(
            select(func.count(MilestoneModel.id)).where(*conditions)
        ).scalar_one()
        return [self._to_entity(model) for model in models], int(total)

    def list_statuses_for_application(self, application_id: int) -> list[str]:
        return list(
            self.session.execute(
                select(MilestoneModel.status).where(
                    MilestoneModel.application_id == application_id
                )
            )
            .scalars()
            .all()
        )

    def list_prices_for_application(self, application_id: int) -> list[str]:
        return list(
            self.session.execute(
                select(MilestoneModel.price).where(
                    MilestoneModel.application_id == application_id
                )
            )
            .scalars()
            .all()
        )

    def create_many(self, milestones: Iterable[Milestone]) -> list[Milestone]:
        models = [
            MilestoneModel(
                application_id=milestone.application_id,
                title=milestone.title,
                description=milestone.description,
                price=milestone.price,
                currency=milestone.currency,
                status=milestone.status,
            )
            for milestone in milestones
        ]
        self.session.add_all(models)
        self.session.commit()
        for model in models:
            self.session.refresh(model)
        return [self._to_entity(model) for model in models]

    def update(
        self,
        milestone_id: int,
        *,
        status: str,
        description: str | None = None,
    ) -> Milestone:
        model = self.session.get(MilestoneModel, milestone_id)
        if model is None:
            raise ValueError(f"Milestone with id {milestone_id} not found")
        model.status = status
        if description is not None:
            model.description = description
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: MilestoneModel) -> Milestone:
        return Milestone(
            id=model.id,
            application_id=model.application_id,
            title=model.title,
            price=model.price,
            currency=model.currency,
            description=model.description,
            status=model.status,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["MilestoneRepository"]
