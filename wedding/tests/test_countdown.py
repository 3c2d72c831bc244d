import unittest
from datetime import datetime, timedelta, timezone

from wedding.countdown import parse_wedding_date, time_left


class CountdownTests(unittest.TestCase):
    def test_breaks_down_remaining_time(self):
        target = parse_wedding_date("2026-02-21T16:00:00-03:00")
        now = target - timedelta(days=2, hours=3, minutes=4, seconds=5)
        remaining = time_left(target, now=now)
        self.assertEqual(
            (remaining.days, remaining.hours, remaining.minutes, remaining.seconds),
            (2, 3, 4, 5),
        )
        self.assertFalse(remaining.is_past)

    def test_zero_once_past(self):
        target = parse_wedding_date("2026-02-21T16:00:00-03:00")
        remaining = time_left(target, now=target + timedelta(seconds=1))
        self.assertTrue(remaining.is_past)
        self.assertEqual(remaining.days + remaining.hours + remaining.seconds, 0)

    def test_naive_dates_are_utc(self):
        parsed = parse_wedding_date("2026-02-21T19:00:00")
        self.assertEqual(parsed, datetime(2026, 2, 21, 19, tzinfo=timezone.utc))


if __name__ == "__main__":
    unittest.main()
