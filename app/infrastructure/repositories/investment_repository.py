"""Persistence helpers for investments."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.domain.entities import (
    INVESTMENT_ACTIVE_STATUSES,
    INVESTMENT_STATUS_CONFIRMED,
    Investment,
)
from app.infrastructure.models import ApplicationModel, InvestmentModel
from app.utils import ensure_app_timezone


class InvestmentRepository:
    """Provide CRUD operations for :class:`Investment` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, investment_id: int) -> Investment | None:
        model = self.session.get(InvestmentModel, investment_id)
        return self._to_entity(model) if model else None

    def list(
        self,
        *,
        equals: dict[str, Any] | None = None,
        limit: int = 10,
        offset: int = 0,
        ascending: bool = False,
    ) -> tuple[Sequence[Investment], int]:
        conditions = [
            getattr(InvestmentModel, column) == value
            for column, value in (equals or {}).items()
        ]
        ordering = (
            (InvestmentModel.created_at.asc(), InvestmentModel.id.asc())
            if ascending
            else (InvestmentModel.created_at.desc(), InvestmentModel.id.desc())
        )
        models = (
            self.session.execute(
                select(InvestmentModel)
                .where(*conditions)
                .order_by(*ordering)
                .limit(limit)
                .offset(offset)
            )
            .scalars()
            .all()
        )
        total = self.session.execute(
            select(func.count(InvestmentModel.id)).where(*conditions)
        ).scalar_one()
        return [self._to_entity(model) for model in models], int(total)

    def list_confirmed_for_application(self, application_id: int) -> list[Investment]:
        models = (
            self.session.execute(
                select(InvestmentModel)
                .where(
                    InvestmentModel.application_id == application_id,
                    InvestmentModel.status == INVESTMENT_STATUS_CONFIRMED,
                )
                .order_by(InvestmentModel.id.asc())
            )
            .scalars()
            .all()
        )
        return [self._to_entity(model) for model in models]

    def active_amounts(
        self,
        *,
        user_id: int | None = None,
        program_id: int | None = None,
        investment_term_id: int | None = None,
    ) -> list[str]:
        """Return amounts of pending or confirmed investments matching the arguments."""

        statement = select(InvestmentModel.amount).where(
            InvestmentModel.status.in_(sorted(INVESTMENT_ACTIVE_STATUSES))
        )
        if user_id is not None:
            statement = statement.where(InvestmentModel.user_id == user_id)
        if investment_term_id is not None:
            statement = statement.where(
                InvestmentModel.investment_term_id == investment_term_id
            )
        if program_id is not None:
            statement = statement.join(
                ApplicationModel, ApplicationModel.id == InvestmentModel.application_id
            ).where(ApplicationModel.program_id == program_id)
        return list(self.session.execute(statement).scalars().all())

    def create(self, investment: Investment) -> Investment:
        model = InvestmentModel(
            application_id=investment.application_id,
            user_id=investment.user_id,
            investment_term_id=investment.investment_term_id,
            amount=investment.amount,
            tier=investment.tier,
            tx_hash=investment.tx_hash,
            status=investment.status,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, investment_id: int, **fields: Any) -> Investment:
        model = self.session.get(InvestmentModel, investment_id)
        if model is None:
            raise ValueError(f"Investment with id {investment_id} not found")
        for name, value in fields.items():
            setattr(model, name, value)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: InvestmentModel) -> Investment:
        return Investment(
            id=model.id,
            application_id=model.application_id,
            user_id=model.user_id,
            amount=model.amount,
            investment_term_id=model.investment_term_id,
            tier=model.tier,
            tx_hash=model.tx_hash,
            status=model.status,
            reclaim_tx_hash=model.reclaim_tx_hash,
            reclaimed_at=ensure_app_timezone(model.reclaimed_at),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["InvestmentRepository"]
