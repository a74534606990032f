"""Persistence layer for user data."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.models import UserModel
from app.utils import ensure_app_timezone


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = self.session.execute(
            select(UserModel).where(UserModel.email == email)
        ).scalar_one_or_none()
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel(
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            external_id=user.external_id,
            role=user.role,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def set_external_id(self, user_id: int, external_id: str) -> User:
        model = self.session.get(UserModel, user_id)
        if model is None:
            raise ValueError(f"User with id {user_id} not found")
        model.external_id = external_id
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            first_name=model.first_name,
            last_name=model.last_name,
            external_id=model.external_id,
            role=model.role,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["UserRepository"]
