"""Persistence helpers for program applications."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.domain.entities import Application
from app.infrastructure.models import ApplicationModel
from app.utils import ensure_app_timezone


class ApplicationRepository:
    """Provide CRUD operations for :class:`Application` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, application_id: int) -> Application | None:
        model = self.session.get(ApplicationModel, application_id)
        return self._to_entity(model) if model else None

    def list(
        self,
        *,
        equals: dict[str, Any] | None = None,
        limit: int = 10,
        offset: int = 0,
        ascending: bool = False,
    ) -> tuple[Sequence[Application], int]:
        conditions = [
            getattr(ApplicationModel, column) == value
            for column, value in (equals or {}).items()
        ]
        ordering = (
            (ApplicationModel.created_at.asc(), ApplicationModel.id.asc())
            if ascending
            else (ApplicationModel.created_at.desc(), ApplicationModel.id.desc())
        )
        models = (
            self.session.execute(
                select(ApplicationModel)
                .where(*conditions)
                .order_by(*ordering)
                .limit(limit)
                .offset(offset)
            )
            .scalars()
            .all()
        )
        total = self.session.execute(
            select(func.count(ApplicationModel.id)).where(*conditions)
        ).scalar_one()
        return [self._to_entity(model) for model in models], int(total)

    def list_statuses_for_program(self, program_id: int) -> list[str]:
        return list(
            self.session.execute(
                select(ApplicationModel.status).where(
                    ApplicationModel.program_id == program_id
                )
            )
            .scalars()
            .all()
        )

    def create(self, application: Application) -> Application:
        model = ApplicationModel(
            program_id=application.program_id,
            applicant_id=application.applicant_id,
            name=application.name,
            content=application.content,
            price=application.price,
            status=application.status,
            metadata_=application.metadata,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_status(
        self,
        application_id: int,
        status: str,
        *,
        rejection_reason: str | None = None,
    ) -> Application:
        model = self.session.get(ApplicationModel, application_id)
        if model is None:
            raise ValueError(f"Application with id {application_id} not found")
        model.status = status
        if rejection_reason is not None:
            model.rejection_reason = rejection_reason
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: ApplicationModel) -> Application:
        return Application(
            id=model.id,
            program_id=model.program_id,
            applicant_id=model.applicant_id,
            name=model.name,
            content=model.content,
            price=model.price,
            status=model.status,
            rejection_reason=model.rejection_reason,
            metadata=model.metadata_,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["ApplicationRepository"]
