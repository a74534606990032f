"""Tests for the in-process broker and the two-phase publisher."""

from __future__ import annotations

import asyncio

import pytest

from app.domain.entities import NotificationDraft
from app.infrastructure.notifications import (
    NotificationBroker,
    NotificationEvent,
    NotificationPublisher,
    user_channel,
)
from app.infrastructure.repositories import NotificationRepository


def test_publish_reaches_every_current_subscriber():
    broker = NotificationBroker()
    first = broker.subscribe("notifications_1")
    second = broker.subscribe("notifications_1")
    other = broker.subscribe("notifications_2")

    delivered = broker.publish("notifications_1", "refresh")

    assert delivered == 2
    assert (first.pending(), second.pending(), other.pending()) == (1, 1, 0)


def test_events_without_subscribers_are_dropped():
    broker = NotificationBroker()

    assert broker.publish("notifications_1", "lost") == 0

    late = broker.subscribe("notifications_1")
    assert late.pending() == 0


def test_closed_subscription_stops_receiving():
    broker = NotificationBroker()
    subscription = broker.subscribe("notifications_1")

    subscription.close()
    subscription.close()

    assert subscription.closed
    assert broker.subscriber_count("notifications_1") == 0
    assert broker.publish("notifications_1", "refresh") == 0


@pytest.mark.anyio
async def test_subscription_iterates_published_events():
    broker = NotificationBroker()
    subscription = broker.subscribe("notificationsCount_3")

    broker.publish("notificationsCount_3", "a")
    broker.publish("notificationsCount_3", "b")

    assert await subscription.__anext__() == "a"
    assert await subscription.__anext__() == "b"
    subscription.close()
    with pytest.raises(StopAsyncIteration):
        await subscription.__anext__()


@pytest.mark.anyio
async def test_listen_unsubscribes_when_consumer_stops():
    broker = NotificationBroker()
    stream = broker.listen("notifications_4")

    waiting = asyncio.ensure_future(stream.__anext__())
    await asyncio.sleep(0)
    assert broker.subscriber_count("notifications_4") == 1

    broker.publish("notifications_4", "refresh")
    assert await waiting == "refresh"

    await stream.aclose()
    assert broker.subscriber_count("notifications_4") == 0


def test_broadcast_uses_per_user_channel():
    broker = NotificationBroker()
    publisher = NotificationPublisher(broker)
    mine = broker.subscribe(user_channel("notifications", 7))
    theirs = broker.subscribe(user_channel("notifications", 8))

    publisher.broadcast("notifications", 7, notification_id=11)

    assert mine.pending() == 1
    assert theirs.pending() == 0


def test_broadcast_rejects_unknown_channels():
    publisher = NotificationPublisher(NotificationBroker())

    with pytest.raises(ValueError):
        publisher.broadcast("comments", 1)


@pytest.mark.anyio
async def test_publish_records_before_broadcasting(session, people):
    broker = NotificationBroker()
    publisher = NotificationPublisher(broker)
    recipient = people["builder"]
    subscription = broker.subscribe(user_channel("notifications", recipient.id))
    draft = NotificationDraft(
        recipient_id=recipient.id,
        type="program",
        action="invited",
        entity_id="3",
        metadata={"tier": "silver"},
    )

    notification_id = publisher.publish(
        "notifications", recipient.id, session=session, draft=draft
    )

    stored = NotificationRepository(session).get_for_recipient(
        notification_id, recipient_id=recipient.id
    )
    assert stored.metadata == {"tier": "silver"}
    assert stored.read_at is None
    assert subscription.pending() == 1
    event = await subscription.__anext__()
    assert event == NotificationEvent(
        channel="notifications", recipient_id=recipient.id, notification_id=notification_id
    )


def test_publish_draft_requires_session():
    publisher = NotificationPublisher(NotificationBroker())
    draft = NotificationDraft(recipient_id=1, type="system", action="broadcast", entity_id="1")

    with pytest.raises(ValueError):
        publisher.publish("notifications", 1, draft=draft)
