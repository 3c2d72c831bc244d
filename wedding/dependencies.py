"""
Dependency wiring for the FastAPI app.
"""

from __future__ import annotations

import logging

from wedding.config import get_settings
from wedding.db import DbClient, InMemoryDbClient, PostgresDbClient
from wedding.realtime import ChangeFeed, InMemoryChangeFeed, RedisChangeFeed
from wedding.share_inbox import (
    InMemorySharedFileInbox,
    RedisSharedFileInbox,
    SharedFileInbox,
)
from wedding.storage import InMemoryStorageClient, S3StorageClient, StorageClient

logger = logging.getLogger(__name__)

_db_client: DbClient | None = None
_storage_client: StorageClient | None = None
_change_feed: ChangeFeed | None = None
_share_inbox: SharedFileInbox | None = None


def get_db_client() -> DbClient:
    """
    Return a singleton DB client so in-memory state persists across requests.
    """
    global _db_client
    if _db_client:
        return _db_client

    settings = get_settings()
    if settings.use_in_memory_backends or not settings.database_url:
        logger.warning("DATABASE_URL not configured; using in-memory database")
        _db_client = InMemoryDbClient()
    else:
        _db_client = PostgresDbClient(settings.database_url)
    return _db_client


def get_storage_client() -> StorageClient:
    global _storage_client
    if _storage_client:
        return _storage_client

    settings = get_settings()
    if settings.use_in_memory_backends or not settings.storage_endpoint:
        _storage_client = InMemoryStorageClient()
    else:
        _storage_client = S3StorageClient(
            endpoint=settings.storage_endpoint,
            region=settings.storage_region or "",
            access_key_id=settings.aws_access_key_id or "",
            secret_access_key=settings.aws_secret_access_key or "",
            public_base_url=settings.storage_public_base_url,
        )
    return _storage_client


def get_change_feed() -> ChangeFeed:
    """
    Return a singleton change feed so every subscriber sees every publish.
    """
    global _change_feed
    if _change_feed:
        return _change_feed

    settings = get_settings()
    if settings.redis_url and not settings.use_in_memory_backends:
        _change_feed = RedisChangeFeed(
            url=settings.redis_url, prefix=settings.realtime_channel_prefix
        )
    else:
        _change_feed = InMemoryChangeFeed()
    return _change_feed


def get_share_inbox() -> SharedFileInbox:
    global _share_inbox
    if _share_inbox:
        return _share_inbox

    settings = get_settings()
    if settings.redis_url and not settings.use_in_memory_backends:
        _share_inbox = RedisSharedFileInbox(
            url=settings.redis_url,
            prefix=settings.share_inbox_prefix,
            ttl_seconds=settings.share_inbox_ttl_seconds,
        )
    else:
        _share_inbox = InMemorySharedFileInbox()
    return _share_inbox
