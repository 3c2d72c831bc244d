"""
Staging area for files shared into the app from the OS share sheet.

The share-target POST arrives without a guest session, so files are staged
under an opaque token and picked up by the page the guest lands on.
"""

from __future__ import annotations

import base64
import json
import time
import uuid
from dataclasses import dataclass, field
from typing import Optional, Protocol

import redis


@dataclass
class SharedFile:
    name: str
    content_type: str
    data: bytes
    timestamp: float = field(default_factory=lambda: time.time())

    def to_json(self) -> str:
        return json.dumps(
            {
                "name": self.name,
                "content_type": self.content_type,
                "data": base64.b64encode(self.data).decode("ascii"),
                "timestamp": self.timestamp,
            }
        )

    @classmethod
    def from_json(cls, raw: bytes | str) -> "SharedFile":
        payload = json.loads(raw)
        return cls(
            name=payload["name"],
            content_type=payload["content_type"],
            data=base64.b64decode(payload["data"]),
            timestamp=payload["timestamp"],
        )


class SharedFileInbox(Protocol):
    """Minimal inbox interface: stage files under a token, then pop them all."""

    def stage(self, files: list[SharedFile]) -> str:
        ...

    def peek(self, token: str) -> list[SharedFile]:
        ...

    def pop_all(self, token: str) -> list[SharedFile]:
        ...


def new_token() -> str:
    return uuid.uuid4().hex


@dataclass
class InMemorySharedFileInbox:
    """Dict of token -> staged files for testing/dev."""

    items: dict[str, list[SharedFile]] = field(default_factory=dict)

    def stage(self, files: list[SharedFile]) -> str:
        token = new_token()
        self.items[token] = list(files)
        return token

    def peek(self, token: str) -> list[SharedFile]:
        return list(self.items.get(token, []))

    def pop_all(self, token: str) -> list[SharedFile]:
        return self.items.pop(token, [])

    def reset(self) -> None:
        self.items.clear()


@dataclass
class RedisSharedFileInbox:
    """Redis-backed inbox storing each token's files in a list with a TTL."""

    url: str
    prefix: str = "wedding:share-inbox"
    ttl_seconds: Optional[int] = 3600

    def __post_init__(self):
        self.client = redis.Redis.from_url(self.url)

    def _key(self, token: str) -> str:
        return f"{self.prefix}:{token}"

    def stage(self, files: list[SharedFile]) -> str:
        token = new_token()
        key = self._key(token)
        pipe = self.client.pipeline()
        for shared in files:
            pipe.rpush(key, shared.to_json())
        if self.ttl_seconds:
            pipe.expire(key, self.ttl_seconds)
        pipe.execute()
        return token

    def peek(self, token: str) -> list[SharedFile]:
        raw_items = self.client.lrange(self._key(token), 0, -1)
        return [SharedFile.from_json(raw) for raw in raw_items]

    def pop_all(self, token: str) -> list[SharedFile]:
        key = self._key(token)
        pipe = self.client.pipeline()
        pipe.lrange(key, 0, -1)
        pipe.delete(key)
        raw_items, _ = pipe.execute()
        return [SharedFile.from_json(raw) for raw in raw_items]
