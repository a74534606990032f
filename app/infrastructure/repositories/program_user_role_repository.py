"""Persistence helpers for per-program role assignments."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.domain.entities import ProgramUserRole
from app.infrastructure.models import ProgramUserRoleModel
from app.utils import ensure_app_timezone


class ProgramUserRoleRepository:
    """Provide lookups and inserts for :class:`ProgramUserRole` rows."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(self, *, program_id: int, user_id: int) -> Sequence[ProgramUserRole]:
        models = (
            self.session.execute(
                select(ProgramUserRoleModel).where(
                    ProgramUserRoleModel.program_id == program_id,
                    ProgramUserRoleModel.user_id == user_id,
                )
            )
            .scalars()
            .all()
        )
        return [self._to_entity(model) for model in models]

    def get(
        self, *, program_id: int, user_id: int, role_type: str
    ) -> ProgramUserRole | None:
        model = self.session.execute(
            select(ProgramUserRoleModel).where(
                ProgramUserRoleModel.program_id == program_id,
                ProgramUserRoleModel.user_id == user_id,
                ProgramUserRoleModel.role_type == role_type,
            )
        ).scalar_one_or_none()
        return self._to_entity(model) if model else None

    def create(self, role: ProgramUserRole) -> ProgramUserRole:
        model = ProgramUserRoleModel(
            program_id=role.program_id,
            user_id=role.user_id,
            role_type=role.role_type,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: ProgramUserRoleModel) -> ProgramUserRole:
        return ProgramUserRole(
            id=model.id,
            program_id=model.program_id,
            user_id=model.user_id,
            role_type=model.role_type,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["ProgramUserRoleRepository"]
