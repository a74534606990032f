"""Aggregate application use cases."""

from .notifications import (
    count_unread_notifications,
    list_notifications,
    mark_all_notifications_as_read,
    mark_notification_as_read,
)
from .users import create_user, login

__all__ = [
    "count_unread_notifications",
    "create_user",
    "list_notifications",
    "login",
    "mark_all_notifications_as_read",
    "mark_notification_as_read",
]
