import asyncio
import unittest
from unittest import mock

import anyio
import anyio.to_thread
import redis
from starlette.websockets import WebSocketDisconnect

from wedding.realtime import (
    InMemoryChangeFeed,
    RedisChangeFeed,
    RedisSubscription,
    change_event,
    publish_quietly,
)
from wedding.routes import realtime as realtime_routes
from wedding.tests.base import ApiTestCase


class InMemoryChangeFeedTests(unittest.TestCase):
    def test_fan_out_per_channel(self):
        feed = InMemoryChangeFeed()
        first = feed.subscribe("messages")
        second = feed.subscribe("messages")
        other = feed.subscribe("playlist")

        event = change_event("INSERT", "messages", {"id": "m1"})
        feed.publish("messages", event)

        self.assertEqual(first.get(timeout=0.1), event)
        self.assertEqual(second.get(timeout=0.1), event)
        self.assertIsNone(other.get(timeout=0.01))

    def test_close_unsubscribes(self):
        feed = InMemoryChangeFeed()
        subscription = feed.subscribe("survey")
        self.assertEqual(feed.subscriber_count("survey"), 1)
        subscription.close()
        self.assertEqual(feed.subscriber_count("survey"), 0)


class RedisChangeFeedTests(unittest.TestCase):
    def test_publish_uses_prefixed_channel(self):
        with mock.patch("wedding.realtime.redis.Redis.from_url") as from_url:
            feed = RedisChangeFeed(url="redis://localhost:6379/0", prefix="test")
            feed.publish("photos-civil", {"type": "INSERT"})
        from_url.return_value.publish.assert_called_once_with(
            "test:photos-civil", '{"type": "INSERT"}'
        )

    def test_subscription_decodes_messages(self):
        pubsub = mock.Mock()
        pubsub.get_message.return_value = {"type": "message", "data": b'{"id": 1}'}
        self.assertEqual(RedisSubscription(pubsub=pubsub).get(timeout=0.1), {"id": 1})
        pubsub.get_message.return_value = None
        self.assertIsNone(RedisSubscription(pubsub=pubsub).get(timeout=0.1))

    def test_publish_quietly_swallows_redis_outage(self):
        feed = mock.Mock()
        feed.publish.side_effect = redis.ConnectionError("down")
        with self.assertLogs("wedding.realtime", level="ERROR"):
            publish_quietly(feed, "messages", {"type": "INSERT"})


class RealtimeWebSocketTests(ApiTestCase):
    def test_subscriber_receives_published_events(self):
        with self.client.websocket_connect("/api/realtime/messages") as ws:
            self.assertEqual(ws.receive_json(), {"type": "subscribed", "channel": "messages"})
            event = change_event("INSERT", "messages", {"id": "m1", "message": "hola"})
            self.feed.publish("messages", event)
            self.assertEqual(ws.receive_json(), event)

    def test_posted_message_reaches_subscriber(self):
        with self.client.websocket_connect("/api/realtime/messages") as ws:
            ws.receive_json()
            posted = self.client.post(
                "/api/messages",
                headers={"X-Access-Code": "casapupis", "X-Guest-Name": "Ana"},
                json={"message": "¡Vivan los novios!"},
            ).json()
            pushed = ws.receive_json()
        self.assertEqual(pushed["type"], "INSERT")
        self.assertEqual(pushed["record"]["id"], posted["id"])

    def test_unknown_channel_is_closed(self):
        with self.client.websocket_connect("/api/realtime/secrets") as ws:
            with self.assertRaises(WebSocketDisconnect) as ctx:
                ws.receive_json()
        self.assertEqual(ctx.exception.code, 4404)


class PollLimiterTests(unittest.TestCase):
    def setUp(self):
        patcher = mock.patch.object(realtime_routes, "_poll_limiter", None)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_limiter_is_shared_and_resized(self):
        async def main():
            first = realtime_routes.get_poll_limiter(10)
            second = realtime_routes.get_poll_limiter(25)
            return first, second, anyio.to_thread.current_default_thread_limiter()

        first, second, default = asyncio.run(main())
        self.assertIs(first, second)
        self.assertEqual(second.total_tokens, 25)
        self.assertIsNot(first, default)

    def test_waiting_subscriber_leaves_default_pool_free(self):
        feed = InMemoryChangeFeed()
        subscription = feed.subscribe("messages")
        websocket = mock.AsyncMock()
        event = change_event("INSERT", "messages", {"id": "m1"})

        async def main():
            limiter = realtime_routes.get_poll_limiter(5)
            pump = asyncio.ensure_future(
                realtime_routes._pump_events(websocket, subscription, limiter)
            )
            await asyncio.sleep(0.2)
            borrowed = (
                limiter.borrowed_tokens,
                anyio.to_thread.current_default_thread_limiter().borrowed_tokens,
            )
            feed.publish("messages", event)
            for _ in range(40):
                if websocket.send_json.await_count:
                    break
                await asyncio.sleep(0.05)
            pump.cancel()
            await asyncio.gather(pump, return_exceptions=True)
            return borrowed

        self.assertEqual(asyncio.run(main()), (1, 0))
        websocket.send_json.assert_awaited_once_with(event)
        subscription.close()


if __name__ == "__main__":
    unittest.main()
