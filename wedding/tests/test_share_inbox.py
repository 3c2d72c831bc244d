import unittest
from unittest import mock

from wedding.share_inbox import InMemorySharedFileInbox, RedisSharedFileInbox, SharedFile


class SharedFileTests(unittest.TestCase):
    def test_json_keeps_binary_payload(self):
        shared = SharedFile(name="a.jpg", content_type="image/jpeg", data=b"\xff\xd8\x00")
        restored = SharedFile.from_json(shared.to_json())
        self.assertEqual(restored, shared)


class InMemoryInboxTests(unittest.TestCase):
    def test_pop_clears_the_inbox(self):
        inbox = InMemorySharedFileInbox()
        token = inbox.stage([SharedFile(name="a.jpg", content_type="image/jpeg", data=b"1")])
        self.assertEqual(len(inbox.peek(token)), 1)
        self.assertEqual(len(inbox.pop_all(token)), 1)
        self.assertEqual(inbox.pop_all(token), [])
        self.assertEqual(inbox.peek("unknown"), [])


class RedisInboxTests(unittest.TestCase):
    def test_stage_sets_ttl(self):
        with mock.patch("wedding.share_inbox.redis.Redis.from_url") as from_url:
            inbox = RedisSharedFileInbox(url="redis://localhost:6379/0", prefix="p", ttl_seconds=60)
            token = inbox.stage([SharedFile(name="a.jpg", content_type="image/jpeg", data=b"1")])
        pipe = from_url.return_value.pipeline.return_value
        pipe.rpush.assert_called_once()
        self.assertEqual(pipe.rpush.call_args[0][0], f"p:{token}")
        pipe.expire.assert_called_once_with(f"p:{token}", 60)
        pipe.execute.assert_called_once()

    def test_pop_reads_and_deletes(self):
        shared = SharedFile(name="a.jpg", content_type="image/jpeg", data=b"1")
        with mock.patch("wedding.share_inbox.redis.Redis.from_url") as from_url:
            pipe = from_url.return_value.pipeline.return_value
            pipe.execute.return_value = [[shared.to_json().encode()], 1]
            inbox = RedisSharedFileInbox(url="redis://localhost:6379/0", prefix="p")
            self.assertEqual(inbox.pop_all("tok"), [shared])
        pipe.delete.assert_called_once_with("p:tok")


if __name__ == "__main__":
    unittest.main()
