"""Translate client ``{field, value}`` pairs into notification filters."""

from __future__ import annotations

from collections.abc import Iterable

from app.application.errors import InvalidFilterError
from app.domain.entities import NotificationFilter

from ..pagination import FieldFilter

_FILTERS_BY_PAIR = {
    (item.value.split(":", 1)[0], item.value.split(":", 1)[1]): item
    for item in NotificationFilter
}


def parse_notification_filters(items: Iterable[FieldFilter]) -> list[NotificationFilter]:
    """Return the :class:`NotificationFilter` for every pair in ``items``.

    Only ``tab`` (all, reclaim, investment_condition, progress) and ``unread``
    (true, false) are understood; anything else raises
    :class:`InvalidFilterError`.
    """

    parsed: list[NotificationFilter] = []
    for item in items:
        value = (item.value or "").strip().lower()
        notification_filter = _FILTERS_BY_PAIR.get((item.field, value))
        if notification_filter is None:
            raise InvalidFilterError(item.field, item.value)
        parsed.append(notification_filter)
    return parsed


__all__ = ["parse_notification_filters"]
