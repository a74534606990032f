"""Persistence helpers for programs."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import exists, func, or_, select
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from app.domain.entities import (
    PROGRAM_ROLE_VALIDATOR,
    PROGRAM_VISIBILITY_PRIVATE,
    Program,
)
from app.infrastructure.models import ProgramModel, ProgramUserRoleModel
from app.utils import ensure_app_timezone


class ProgramRepository:
    """Provide CRUD operations for :class:`Program` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, program_id: int) -> Program | None:
        model = self.session.get(ProgramModel, program_id)
        return self._to_entity(model) if model else None

    def list(
        self,
        *,
        equals: dict[str, Any] | None = None,
        viewer_id: int | None = None,
        limit: int = 10,
        offset: int = 0,
        ascending: bool = False,
    ) -> tuple[Sequence[Program], int]:
        """Return a page of programs and the total matching the same filters.

        Private programs are only included for ``viewer_id`` when that user is
        the creator or holds a role in the program.
        """

        conditions = self._conditions(equals or {}, viewer_id)
        column = ProgramModel.created_at
        ordering = (column.asc(), ProgramModel.id.asc()) if ascending else (
            column.desc(),
            ProgramModel.id.desc(),
        )
        models = (
            self.session.execute(
                select(ProgramModel)
                .where(*conditions)
                .order_by(*ordering)
                .limit(limit)
                .offset(offset)
            )
            .scalars()
            .all()
        )
        total = self.session.execute(
            select(func.count(ProgramModel.id)).where(*conditions)
        ).scalar_one()
        return [self._to_entity(model) for model in models], int(total)

    def create(self, program: Program) -> Program:
        model = ProgramModel(
            name=program.name,
            summary=program.summary,
            description=program.description,
            price=program.price,
            currency=program.currency,
            deadline=program.deadline,
            status=program.status,
            visibility=program.visibility,
            creator_id=program.creator_id,
            validator_id=program.validator_id,
        )
        self.session.add(model)
        self.session.flush()
        if program.validator_id is not None:
            self.session.add(
                ProgramUserRoleModel(
                    program_id=model.id,
                    user_id=program.validator_id,
                    role_type=PROGRAM_ROLE_VALIDATOR,
                )
            )
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_status(self, program_id: int, status: str) -> Program:
        model = self.session.get(ProgramModel, program_id)
        if model is None:
            raise ValueError(f"Program with id {program_id} not found")
        model.status = status
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _conditions(
        equals: dict[str, Any], viewer_id: int | None
    ) -> list[ColumnElement[bool]]:
        conditions: list[ColumnElement[bool]] = [
            getattr(ProgramModel, column) == value for column, value in equals.items()
        ]
        not_private = ProgramModel.visibility != PROGRAM_VISIBILITY_PRIVATE
        if viewer_id is None:
            conditions.append(not_private)
        else:
            has_role = exists().where(
                ProgramUserRoleModel.program_id == ProgramModel.id,
                ProgramUserRoleModel.user_id == viewer_id,
            )
            conditions.append(
                or_(not_private, ProgramModel.creator_id == viewer_id, has_role)
            )
        return conditions

    @staticmethod
    def _to_entity(model: ProgramModel) -> Program:
        return Program(
            id=model.id,
            name=model.name,
            creator_id=model.creator_id,
            price=model.price,
            currency=model.currency,
            summary=model.summary,
            description=model.description,
            deadline=ensure_app_timezone(model.deadline),
            status=model.status,
            visibility=model.visibility,
            validator_id=model.validator_id,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["ProgramRepository"]
