"""In-process channel broker backing GraphQL subscriptions."""

from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from collections.abc import AsyncIterator
from typing import Any, DefaultDict, Set

logger = logging.getLogger(__name__)


class ChannelSubscription:
    """Async iterator of events published on a single channel.

    The iterator never ends on its own; call :meth:`close` to release it.
    """

    def __init__(self, broker: "NotificationBroker", channel: str) -> None:
        self.channel = channel
        self._broker = broker
        self._queue: asyncio.Queue[Any] = asyncio.Queue()
        self._closed = False

    def __aiter__(self) -> "ChannelSubscription":
        return self

    async def __anext__(self) -> Any:
        if self._closed:
            raise StopAsyncIteration
        return await self._queue.get()

    @property
    def closed(self) -> bool:
        return self._closed

    def pending(self) -> int:
        """Return the number of events delivered but not consumed yet."""

        return self._queue.qsize()

    def deliver(self, event: Any) -> None:
        if not self._closed:
            self._queue.put_nowait(event)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._broker.unsubscribe(self)


class NotificationBroker:
    """Fan published events out to every live subscription of a channel.

    Delivery is at-most-once: events published while nobody listens are
    dropped, and nothing is persisted or replayed.
    """

    def __init__(self) -> None:
        self._subscriptions: DefaultDict[str, Set[ChannelSubscription]] = defaultdict(set)

    def subscribe(self, channel: str) -> ChannelSubscription:
        subscription = ChannelSubscription(self, channel)
        self._subscriptions[channel].add(subscription)
        logger.debug("Subscribed to channel %s", channel)
        return subscription

    def unsubscribe(self, subscription: ChannelSubscription) -> None:
        subscriptions = self._subscriptions.get(subscription.channel)
        if subscriptions is None:
            return
        subscriptions.discard(subscription)
        if not subscriptions:
            self._subscriptions.pop(subscription.channel, None)
        logger.debug("Unsubscribed from channel %s", subscription.channel)

    def subscriber_count(self, channel: str) -> int:
        return len(self._subscriptions.get(channel, ()))

    def publish(self, channel: str, event: Any) -> int:
        """Deliver ``event`` to current subscribers and return how many got it."""

        subscriptions = list(self._subscriptions.get(channel, ()))
        for subscription in subscriptions:
            subscription.deliver(event)
        return len(subscriptions)

    async def listen(self, channel: str) -> AsyncIterator[Any]:
        """Yield events for ``channel`` until the consumer stops iterating."""

        subscription = self.subscribe(channel)
        try:
            async for event in subscription:
                yield event
        finally:
            subscription.close()


notification_broker = NotificationBroker()


__all__ = ["ChannelSubscription", "NotificationBroker", "notification_broker"]
