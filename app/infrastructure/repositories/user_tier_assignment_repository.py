"""Persistence helpers for per-program investment tiers."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.domain.entities import UserTierAssignment
from app.infrastructure.models import UserTierAssignmentModel
from app.utils import ensure_app_timezone


class UserTierAssignmentRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, *, program_id: int, user_id: int) -> UserTierAssignment | None:
        model = self._get_model(program_id, user_id)
        return self._to_entity(model) if model else None

    def save(
        self, *, program_id: int, user_id: int, tier: str, max_investment_amount: str
    ) -> UserTierAssignment:
        """Insert or replace the tier ``user_id`` holds in ``program_id``."""

        model = self._get_model(program_id, user_id)
        if model is None:
            model = UserTierAssignmentModel(program_id=program_id, user_id=user_id)
            self.session.add(model)
        model.tier = tier
        model.max_investment_amount = max_investment_amount
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def _get_model(self, program_id: int, user_id: int) -> UserTierAssignmentModel | None:
        return self.session.execute(
            select(UserTierAssignmentModel).where(
                UserTierAssignmentModel.program_id == program_id,
                UserTierAssignmentModel.user_id == user_id,
            )
        ).scalar_one_or_none()

    @staticmethod
    def _to_entity(model: UserTierAssignmentModel) -> UserTierAssignment:
        return UserTierAssignment(
            id=model.id,
            program_id=model.program_id,
            user_id=model.user_id,
            tier=model.tier,
            max_investment_amount=model.max_investment_amount,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["UserTierAssignmentRepository"]
