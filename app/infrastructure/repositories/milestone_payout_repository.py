"""Persistence helpers for milestone payouts."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from app.domain.entities import MilestonePayout
from app.infrastructure.models import MilestonePayoutModel
from app.utils import ensure_app_timezone


class MilestonePayoutRepository:
    """Provide CRUD operations for :class:`MilestonePayout` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        equals: dict[str, Any] | None = None,
        limit: int = 10,
        offset: int = 0,
        ascending: bool = False,
    ) -> tuple[Sequence[MilestonePayout], int]:
        conditions = [
            getattr(MilestonePayoutModel, column) == value
            for column, value in (equals or {}).items()
        ]
        ordering = (
            (MilestonePayoutModel.created_at.asc(), MilestonePayoutModel.id.asc())
            if ascending
            else (MilestonePayoutModel.created_at.desc(), MilestonePayoutModel.id.desc())
        )
        models = (
            self.session.execute(
                select(MilestonePayoutModel)
                .where(*conditions)
                .order_by(*ordering)
                .limit(limit)
                .offset(offset)
            )
            .scalars()
            .all()
        )
        total = self.session.execute(
            select(func.count(MilestonePayoutModel.id)).where(*conditions)
        ).scalar_one()
        return [self._to_entity(model) for model in models], int(total)

    def create_many(self, payouts: Iterable[MilestonePayout]) -> list[MilestonePayout]:
        models = [
            MilestonePayoutModel(
                milestone_id=payout.milestone_id,
                investment_id=payout.investment_id,
                amount=payout.amount,
                percentage=payout.percentage,
                status=payout.status,
            )
            for payout in payouts
        ]
        self.session.add_all(models)
        self.session.commit()
        for model in models:
            self.session.refresh(model)
        return [self._to_entity(model) for model in models]

    def transition(self, milestone_id: int, *, from_status: str, to_status: str) -> list[int]:
        """Move every ``from_status`` payout of ``milestone_id`` to ``to_status``.

        Returns the ids that changed.
        """

        ids = list(
            self.session.execute(
                select(MilestonePayoutModel.id).where(
                    MilestonePayoutModel.milestone_id == milestone_id,
                    MilestonePayoutModel.status == from_status,
                )
            )
            .scalars()
            .all()
        )
        if ids:
            self.session.execute(
                update(MilestonePayoutModel)
                .where(
                    MilestonePayoutModel.id.in_(ids),
                    MilestonePayoutModel.status == from_status,
                )
                .values(status=to_status)
                .execution_options(synchronize_session=False)
            )
        self.session.commit()
        return ids

    def get_many(self, payout_ids: Iterable[int]) -> list[MilestonePayout]:
        ids = list(payout_ids)
        if not ids:
            return []
        models = (
            self.session.execute(
                select(MilestonePayoutModel)
                .where(MilestonePayoutModel.id.in_(ids))
                .order_by(MilestonePayoutModel.id.asc())
            )
            .scalars()
            .all()
        )
        return [self._to_entity(model) for model in models]

    @staticmethod
    def _to_entity(model: MilestonePayoutModel) -> MilestonePayout:
        return MilestonePayout(
            id=model.id,
            milestone_id=model.milestone_id,
            investment_id=model.investment_id,
            amount=model.amount,
            percentage=model.percentage,
            status=model.status,
            tx_hash=model.tx_hash,
            error_message=model.error_message,
            processed_at=ensure_app_timezone(model.processed_at),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["MilestonePayoutRepository"]
