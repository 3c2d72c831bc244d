"""
WebSocket bridge from the change feed to browsers.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import anyio
import anyio.to_thread
from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from wedding.config import Settings, get_settings
from wedding.dependencies import get_change_feed
from wedding.realtime import CHANNELS, Subscription

logger = logging.getLogger(__name__)

router = APIRouter()

UNKNOWN_CHANNEL_CLOSE_CODE = 4404
POLL_SECONDS = 1.0

_poll_limiter: Optional[anyio.CapacityLimiter] = None


def get_poll_limiter(total_tokens: int) -> anyio.CapacityLimiter:
    """
    Worker threads for subscribers waiting on their feed, separate from the
    default threadpool that runs the sync routes.
    """
    global _poll_limiter
    if _poll_limiter is None:
        _poll_limiter = anyio.CapacityLimiter(total_tokens)
    elif _poll_limiter.total_tokens != total_tokens:
        _poll_limiter.total_tokens = total_tokens
    return _poll_limiter


async def _pump_events(
    websocket: WebSocket, subscription: Subscription, limiter: anyio.CapacityLimiter
) -> None:
    while True:
        event = await anyio.to_thread.run_sync(
            subscription.get, POLL_SECONDS, limiter=limiter
        )
        if event is not None:
            await websocket.send_json(event)


async def _wait_for_disconnect(websocket: WebSocket) -> None:
    # Clients never send anything meaningful; reading surfaces the disconnect.
    while True:
        await websocket.receive_text()


@router.websocket("/realtime/{channel}")
async def realtime_channel(
    websocket: WebSocket,
    channel: str,
    settings: Settings = Depends(get_settings),
):
    await websocket.accept()
    if channel not in CHANNELS:
        await websocket.close(code=UNKNOWN_CHANNEL_CLOSE_CODE)
        return

    limiter = get_poll_limiter(settings.realtime_poll_threads)
    subscription = get_change_feed().subscribe(channel)
    logger.info("Realtime subscriber joined %s", channel)
    await websocket.send_json({"type": "subscribed", "channel": channel})

    tasks = [
        asyncio.ensure_future(_pump_events(websocket, subscription, limiter)),
        asyncio.ensure_future(_wait_for_disconnect(websocket)),
    ]
    try:
        done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        for task in done:
            exc = task.exception()
            if exc is not None and not isinstance(exc, WebSocketDisconnect):
                raise exc
    finally:
        for task in tasks:
            task.cancel()
        subscription.close()
        logger.info("Realtime subscriber left %s", channel)
