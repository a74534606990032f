"""Realtime notification helpers for the infrastructure layer."""

from .broker import ChannelSubscription, NotificationBroker, notification_broker
from .publisher import (
    CHANNELS,
    NOTIFICATIONS_CHANNEL,
    NOTIFICATIONS_COUNT_CHANNEL,
    NotificationEvent,
    NotificationPublisher,
    notification_publisher,
    user_channel,
)

__all__ = [
    "ChannelSubscription",
    "NotificationBroker",
    "notification_broker",
    "CHANNELS",
    "NOTIFICATIONS_CHANNEL",
    "NOTIFICATIONS_COUNT_CHANNEL",
    "NotificationEvent",
    "NotificationPublisher",
    "notification_publisher",
    "user_channel",
]
