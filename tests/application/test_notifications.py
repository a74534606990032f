"""Tests for the notification store, its filters and read markers."""

from __future__ import annotations

import pytest

from app.application.errors import EntityNotFoundError, InvalidFilterError
from app.application.use_cases.notifications import (
    count_unread_notifications,
    list_notifications,
    mark_all_notifications_as_read,
    mark_notification_as_read,
    parse_notification_filters,
    send_notification,
)
from app.application.use_cases.pagination import FieldFilter, Pagination
from app.domain.entities import NotificationFilter
from app.infrastructure.notifications import notification_broker, user_channel
from app.infrastructure.repositories import NotificationRepository


def _notify(session, recipient, type="system", action="broadcast", metadata=None):
    return send_notification(
        session,
        recipient_id=recipient.id,
        type=type,
        action=action,
        entity_id=1,
        title=f"{type}/{action}",
        metadata=metadata,
    )


def _page(session, user, *filters, **kwargs):
    pagination = Pagination.build(
        filters=[FieldFilter(field, value) for field, value in filters], **kwargs
    )
    return list_notifications(session, recipient_id=user.id, pagination=pagination)


@pytest.fixture()
def inbox(session, people):
    """A mixed set of notifications for the builder plus one for the outsider."""

    builder = people["builder"]
    ids = {
        "reclaim": _notify(
            session, builder, "program", "completed", {"reason": "deadline_passed"}
        ),
        "completed": _notify(session, builder, "milestone", "completed"),
        "invited_tier": _notify(session, builder, "program", "invited", {"tier": "gold"}),
        "invited": _notify(session, builder, "program", "invited"),
        "accepted": _notify(session, builder, "application", "accepted"),
        "milestone_rejected": _notify(session, builder, "milestone", "rejected"),
        "system": _notify(session, builder),
    }
    _notify(session, people["outsider"])
    return ids


def _ids(page):
    return {int(item.id) for item in page.data}


def test_lists_only_the_callers_notifications(session, people, inbox):
    page = _page(session, people["builder"], limit=100)

    assert page.count == len(inbox)
    assert _ids(page) == set(inbox.values())
    assert all(item.recipient_id == people["builder"].id for item in page.data)


def test_default_order_is_newest_first(session, people, inbox):
    newest = _page(session, people["builder"], limit=2)
    oldest = _page(session, people["builder"], limit=2, sort="asc")

    assert [item.id for item in newest.data] == [inbox["system"], inbox["milestone_rejected"]]
    assert [item.id for item in oldest.data] == [inbox["reclaim"], inbox["completed"]]


def test_count_ignores_limit_and_offset(session, people, inbox):
    page = _page(session, people["builder"], limit=2, offset=3)

    assert len(page.data) == 2
    assert page.count == len(inbox)


@pytest.mark.parametrize(
    ("tab", "expected"),
    [
        ("reclaim", {"reclaim"}),
        ("investment_condition", {"invited_tier"}),
        ("progress", {"accepted"}),
    ],
)
def test_tab_filters(session, people, inbox, tab, expected):
    page = _page(session, people["builder"], ("tab", tab))

    assert _ids(page) == {inbox[name] for name in expected}
    assert page.count == len(expected)


def test_tab_all_and_unread_false_add_no_predicate(session, people, inbox):
    page = _page(session, people["builder"], ("tab", "all"), ("unread", "false"), limit=100)

    assert page.count == len(inbox)


def test_unread_filter(session, people, inbox):
    builder = people["builder"]
    mark_notification_as_read(session, notification_id=inbox["system"], recipient_id=builder.id)

    page = _page(session, builder, ("unread", "true"), limit=100)

    assert inbox["system"] not in _ids(page)
    assert page.count == len(inbox) - 1
    assert count_unread_notifications(session, recipient_id=builder.id) == len(inbox) - 1


@pytest.mark.parametrize(
    ("field", "value"),
    [("tab", "archived"), ("unread", "maybe"), ("recipientId", "1"), ("tab", None)],
)
def test_unknown_filters_are_rejected(session, people, field, value):
    with pytest.raises(InvalidFilterError):
        _page(session, people["builder"], (field, value))


def test_filter_parsing_is_case_insensitive_on_values():
    parsed = parse_notification_filters([FieldFilter("unread", "TRUE")])

    assert parsed == [NotificationFilter.UNREAD]


def test_mark_as_read_keeps_the_first_timestamp(session, people, inbox):
    builder = people["builder"]

    first = mark_notification_as_read(
        session, notification_id=inbox["system"], recipient_id=builder.id
    )
    second = mark_notification_as_read(
        session, notification_id=inbox["system"], recipient_id=builder.id
    )

    assert first.is_read
    assert second.read_at == first.read_at


def test_foreign_and_missing_ids_raise_the_same_error(session, people, inbox):
    outsider = people["outsider"]

    with pytest.raises(EntityNotFoundError) as foreign:
        mark_notification_as_read(
            session, notification_id=inbox["system"], recipient_id=outsider.id
        )
    with pytest.raises(EntityNotFoundError) as missing:
        mark_notification_as_read(session, notification_id=9999, recipient_id=outsider.id)

    assert str(foreign.value) == str(missing.value) == "Notification not found"
    stored = NotificationRepository(session).get_for_recipient(
        inbox["system"], recipient_id=people["builder"].id
    )
    assert stored.read_at is None


def test_mark_all_only_touches_the_callers_rows(session, people, inbox):
    assert mark_all_notifications_as_read(session, recipient_id=people["builder"].id) is True

    assert count_unread_notifications(session, recipient_id=people["builder"].id) == 0
    assert count_unread_notifications(session, recipient_id=people["outsider"].id) == 1


def test_read_markers_signal_both_channels(session, people, inbox):
    builder = people["builder"]
    streams = [
        notification_broker.subscribe(user_channel("notifications", builder.id)),
        notification_broker.subscribe(user_channel("notificationsCount", builder.id)),
    ]
    try:
        mark_notification_as_read(
            session, notification_id=inbox["system"], recipient_id=builder.id
        )
        assert [stream.pending() for stream in streams] == [1, 1]

        mark_all_notifications_as_read(session, recipient_id=builder.id)
        mark_all_notifications_as_read(session, recipient_id=builder.id)
        assert [stream.pending() for stream in streams] == [3, 3]
    finally:
        for stream in streams:
            stream.close()


def test_failed_mark_as_read_does_not_signal(session, people, inbox):
    outsider = people["outsider"]
    stream = notification_broker.subscribe(user_channel("notifications", outsider.id))
    try:
        with pytest.raises(EntityNotFoundError):
            mark_notification_as_read(
                session, notification_id=inbox["system"], recipient_id=outsider.id
            )
        assert stream.pending() == 0
    finally:
        stream.close()


def test_unsupported_notification_kind_is_rejected(session, people):
    with pytest.raises(ValueError):
        _notify(session, people["builder"], "payout", "created")
