from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass
class TimeLeft:
    days: int
    hours: int
    minutes: int
    seconds: int
    is_past: bool


def parse_wedding_date(value: str) -> datetime:
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def time_left(target: datetime, now: Optional[datetime] = None) -> TimeLeft:
    """Whole days/hours/minutes/seconds until `target`, all zero once it passed."""
    now = now or datetime.now(timezone.utc)
    distance = int((target - now).total_seconds())
    if distance <= 0:
        return TimeLeft(days=0, hours=0, minutes=0, seconds=0, is_past=True)

    days, remainder = divmod(distance, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, seconds = divmod(remainder, 60)
    return TimeLeft(
        days=days, hours=hours, minutes=minutes, seconds=seconds, is_past=False
    )
