"""
Change feed for live-updating lists.

Supports an in-memory fallback for tests/local runs and a Redis pub/sub
implementation for production, mirroring the row-insert notifications a
hosted database would push to subscribed clients.
"""

from __future__ import annotations

import json
import logging
import queue
import threading
from dataclasses import dataclass, field
from typing import Optional, Protocol

import redis

logger = logging.getLogger(__name__)

CHANNELS = ("messages", "playlist", "photos-guests", "photos-civil", "survey")


class Subscription(Protocol):
    def get(self, timeout: float = 1.0) -> Optional[dict]:
        ...

    def close(self) -> None:
        ...


class ChangeFeed(Protocol):
    """Minimal publish/subscribe interface for row change events."""

    def publish(self, channel: str, event: dict) -> None:
        ...

    def subscribe(self, channel: str) -> Subscription:
        ...


def change_event(event_type: str, table: str, record: dict) -> dict:
    return {"type": event_type, "table": table, "record": record}


@dataclass
class InMemorySubscription:
    feed: "InMemoryChangeFeed"
    channel: str
    events: "queue.Queue[dict]" = field(default_factory=queue.Queue)

    def get(self, timeout: float = 1.0) -> Optional[dict]:
        try:
            return self.events.get(timeout=timeout)
        except queue.Empty:
            return None

    def close(self) -> None:
        self.feed._unsubscribe(self)


class InMemoryChangeFeed:
    """Fan-out to per-subscriber queues within a single process."""

    def __init__(self):
        self._lock = threading.Lock()
        self._subscribers: dict[str, list[InMemorySubscription]] = {}
        self.published: list[tuple[str, dict]] = []

    def publish(self, channel: str, event: dict) -> None:
        with self._lock:
            self.published.append((channel, event))
            subscribers = list(self._subscribers.get(channel, []))
        for subscription in subscribers:
            subscription.events.put(event)

    def subscribe(self, channel: str) -> InMemorySubscription:
        subscription = InMemorySubscription(feed=self, channel=channel)
        with self._lock:
            self._subscribers.setdefault(channel, []).append(subscription)
        return subscription

    def subscriber_count(self, channel: str) -> int:
        with self._lock:
            return len(self._subscribers.get(channel, []))

    def reset(self) -> None:
        with self._lock:
            self._subscribers.clear()
            self.published.clear()

    def _unsubscribe(self, subscription: InMemorySubscription) -> None:
        with self._lock:
            subscribers = self._subscribers.get(subscription.channel, [])
            if subscription in subscribers:
                subscribers.remove(subscription)


@dataclass
class RedisSubscription:
    pubsub: "redis.client.PubSub"

    def get(self, timeout: float = 1.0) -> Optional[dict]:
        message = self.pubsub.get_message(
            ignore_subscribe_messages=True, timeout=timeout
        )
        if not message or message.get("type") != "message":
            return None
        data = message["data"]
        if isinstance(data, bytes):
            data = data.decode("utf-8")
        return json.loads(data)

    def close(self) -> None:
        self.pubsub.close()


@dataclass
class RedisChangeFeed:
    """Redis-backed feed using pub/sub channels."""

    url: str
    prefix: str = "wedding:changes"

    def __post_init__(self):
        self.client = redis.Redis.from_url(self.url)

    def _channel_key(self, channel: str) -> str:
        return f"{self.prefix}:{channel}"

    def publish(self, channel: str, event: dict) -> None:
        self.client.publish(self._channel_key(channel), json.dumps(event, default=str))

    def subscribe(self, channel: str) -> RedisSubscription:
        pubsub = self.client.pubsub()
        pubsub.subscribe(self._channel_key(channel))
        return RedisSubscription(pubsub=pubsub)


def publish_quietly(feed: ChangeFeed, channel: str, event: dict) -> None:
    """Publish an event; a feed outage must not fail the write that caused it."""
    try:
        feed.publish(channel, event)
    except redis.RedisError:
        logger.exception("Failed to publish %s event on %s", event.get("type"), channel)
