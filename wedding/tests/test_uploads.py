import threading
import time
import unittest

from wedding.db import InMemoryDbClient
from wedding.realtime import InMemoryChangeFeed
from wedding.storage import GUEST_PHOTOS_BUCKET, InMemoryStorageClient
from wedding.tests.base import make_image
from wedding.uploads import UploadFile, run_with_concurrency, upload_photos


class RunWithConcurrencyTests(unittest.TestCase):
    def test_results_keep_task_order(self):
        def task(value, delay):
            def run():
                time.sleep(delay)
                return value

            return run

        results = run_with_concurrency(
            [task("slow", 0.05), task("fast", 0.0), task("mid", 0.02)], concurrency=3
        )
        self.assertEqual([r.value for r in results], ["slow", "fast", "mid"])
        self.assertTrue(all(r.ok for r in results))

    def test_failures_are_settled_not_raised(self):
        def boom():
            raise RuntimeError("no space left")

        results = run_with_concurrency([lambda: 1, boom, lambda: 3], concurrency=2)
        self.assertEqual([r.status for r in results], ["fulfilled", "rejected", "fulfilled"])
        self.assertIsInstance(results[1].reason, RuntimeError)
        self.assertEqual(results[2].value, 3)

    def test_never_exceeds_concurrency(self):
        lock = threading.Lock()
        in_flight = 0
        peak = 0

        def task():
            nonlocal in_flight, peak
            with lock:
                in_flight += 1
                peak = max(peak, in_flight)
            time.sleep(0.01)
            with lock:
                in_flight -= 1

        run_with_concurrency([task] * 12, concurrency=3)
        self.assertLessEqual(peak, 3)

    def test_edge_cases(self):
        self.assertEqual(run_with_concurrency([], concurrency=5), [])
        with self.assertRaises(ValueError):
            run_with_concurrency([lambda: 1], concurrency=0)


class UploadPhotosTests(unittest.TestCase):
    def setUp(self):
        self.db = InMemoryDbClient()
        self.storage = InMemoryStorageClient()
        self.feed = InMemoryChangeFeed()

    def upload(self, files, **kwargs):
        return upload_photos(
            files,
            guest_name="Ana",
            gallery="guests",
            db=self.db,
            storage=self.storage,
            feed=self.feed,
            **kwargs,
        )

    def test_completed_uploads_survive_sibling_failure(self):
        files = [
            UploadFile(name="a.png", data=make_image()),
            UploadFile(name="b.txt", data=b"plain text"),
            UploadFile(name="c.png", data=make_image()),
        ]
        with self.assertLogs("wedding.uploads", level="ERROR"):
            summary = self.upload(files)
        self.assertEqual((summary.uploaded, summary.failed, summary.skipped), (2, 1, 0))
        self.assertEqual([r.status for r in summary.results], ["done", "error", "done"])
        self.assertEqual(len(self.db.photos), 2)
        self.assertEqual(len(self.feed.published), 2)

    def test_slots_limit_batch(self):
        files = [UploadFile(name=f"{i}.png", data=make_image()) for i in range(3)]
        summary = self.upload(files, available_slots=1, caption="  ")
        self.assertEqual((summary.uploaded, summary.skipped), (1, 2))
        photo = summary.results[0].photo
        self.assertIsNone(photo["caption"])
        self.assertIn((GUEST_PHOTOS_BUCKET, photo["storage_path"]), self.storage.stored_objects)


if __name__ == "__main__":
    unittest.main()
