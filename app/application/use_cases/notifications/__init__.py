"""Use cases for the notification store and its realtime signals."""

from .events import (
    broadcast_notification_refresh,
    notify_application_created,
    notify_application_reviewed,
    notify_comment_created,
    notify_investment_received,
    notify_investment_refunded,
    notify_investment_tier,
    notify_milestone_reviewed,
    notify_milestones,
    notify_program_completed,
    notify_program_invited,
    send_notification,
)
from .filters import parse_notification_filters
from .list_notifications import count_unread_notifications, list_notifications
from .mark_as_read import mark_all_notifications_as_read, mark_notification_as_read

__all__ = [
    "broadcast_notification_refresh",
    "count_unread_notifications",
    "list_notifications",
    "mark_all_notifications_as_read",
    "mark_notification_as_read",
    "notify_application_created",
    "notify_application_reviewed",
    "notify_comment_created",
    "notify_investment_received",
    "notify_investment_refunded",
    "notify_investment_tier",
    "notify_milestone_reviewed",
    "notify_milestones",
    "notify_program_completed",
    "notify_program_invited",
    "parse_notification_filters",
    "send_notification",
]
