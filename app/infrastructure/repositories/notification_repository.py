"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime

from sqlalchemy import and_, false, func, or_, select, update
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from app.domain.entities import (
    PROGRESS_ACTIONS,
    RECLAIM_REASON,
    RECLAIM_TYPES,
    Notification,
    NotificationDraft,
    NotificationFilter,
)
from app.infrastructure.models import NotificationModel
from app.utils import ensure_app_timezone, now_in_app_timezone


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_recipient(
        self,
        recipient_id: int,
        *,
        filters: Iterable[NotificationFilter] = (),
        limit: int = 10,
        offset: int = 0,
        ascending: bool = False,
    ) -> Sequence[Notification]:
        conditions = self._conditions(recipient_id, filters)
        if ascending:
            ordering = (NotificationModel.created_at.asc(), NotificationModel.id.asc())
        else:
            ordering = (NotificationModel.created_at.desc(), NotificationModel.id.desc())
        statement = (
            select(NotificationModel)
            .where(*conditions)
            .order_by(*ordering)
            .limit(limit)
            .offset(offset)
        )
        models = self.session.execute(statement).scalars().all()
        return [self._to_entity(model) for model in models]

    def count_for_recipient(
        self,
        recipient_id: int,
        *,
        filters: Iterable[NotificationFilter] = (),
    ) -> int:
        statement = (
            select(func.count(NotificationModel.id))
            .select_from(NotificationModel)
            .where(*self._conditions(recipient_id, filters))
        )
        return int(self.session.execute(statement).scalar_one())

    def get_for_recipient(
        self, notification_id: int, *, recipient_id: int
    ) -> Notification | None:
        model = self._get_owned_model(notification_id, recipient_id)
        return self._to_entity(model) if model else None

    def create(self, draft: NotificationDraft) -> Notification:
        model = NotificationModel(
            recipient_id=draft.recipient_id,
            type=draft.type,
            action=draft.action,
            entity_id=str(draft.entity_id),
            title=draft.title,
            content=draft.content,
            metadata_=dict(draft.metadata) if draft.metadata else None,
            created_at=now_in_app_timezone(),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_as_read(
        self, notification_id: int, *, recipient_id: int, read_at: datetime
    ) -> Notification | None:
        """Stamp ``read_at`` on an unread notification owned by ``recipient_id``.

        Returns ``None`` when the row does not exist or belongs to someone
        else. Already-read rows are returned untouched.
        """

        self.session.execute(
            update(NotificationModel)
            .where(
                NotificationModel.id == notification_id,
                NotificationModel.recipient_id == recipient_id,
                NotificationModel.read_at.is_(None),
            )
            .values(read_at=read_at)
            .execution_options(synchronize_session=False)
        )
        self.session.commit()
        model = self._get_owned_model(notification_id, recipient_id)
        return self._to_entity(model) if model else None

    def mark_all_as_read(self, recipient_id: int, *, read_at: datetime) -> int:
        result = self.session.execute(
            update(NotificationModel)
            .where(
                NotificationModel.recipient_id == recipient_id,
                NotificationModel.read_at.is_(None),
            )
            .values(read_at=read_at)
            .execution_options(synchronize_session=False)
        )
        self.session.commit()
        return result.rowcount or 0

    def _get_owned_model(
        self, notification_id: int, recipient_id: int
    ) -> NotificationModel | None:
        statement = select(NotificationModel).where(
            NotificationModel.id == notification_id,
            NotificationModel.recipient_id == recipient_id,
        )
        return self.session.execute(statement).scalar_one_or_none()

    @classmethod
    def _conditions(
        cls, recipient_id: int, filters: Iterable[NotificationFilter]
    ) -> list[ColumnElement[bool]]:
        conditions: list[ColumnElement[bool]] = [
            NotificationModel.recipient_id == recipient_id
        ]
        for item in filters:
            condition = cls._filter_condition(item)
            if condition is not None:
                conditions.append(condition)
        return conditions

    @staticmethod
    def _filter_condition(item: NotificationFilter) -> ColumnElement[bool] | None:
        if item is NotificationFilter.TAB_RECLAIM:
            return and_(
                NotificationModel.type.in_(sorted(RECLAIM_TYPES)),
                NotificationModel.action == "completed",
                NotificationModel.metadata_["reason"].as_string() == RECLAIM_REASON,
            )
        if item is NotificationFilter.TAB_INVESTMENT_CONDITION:
            return and_(
                NotificationModel.type == "program",
                NotificationModel.action == "invited",
                NotificationModel.metadata_["tier"].as_string().is_not(None),
            )
        if item is NotificationFilter.TAB_PROGRESS:
            branches = [
                and_(
                    NotificationModel.type == notification_type,
                    NotificationModel.action.in_(sorted(actions)),
                )
                for notification_type, actions in PROGRESS_ACTIONS.items()
            ]
            return or_(*branches) if branches else false()
        if item is NotificationFilter.UNREAD:
            return NotificationModel.read_at.is_(None)
        # TAB_ALL and ALL_READ_STATES add no predicate.
        return None

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            recipient_id=model.recipient_id,
            type=model.type,
            action=model.action,
            entity_id=model.entity_id,
            title=model.title,
            content=model.content,
            metadata=model.metadata_ or {},
            created_at=ensure_app_timezone(model.created_at),
            read_at=ensure_app_timezone(model.read_at),
        )


__all__ = ["NotificationRepository"]
