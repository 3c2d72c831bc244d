"""
Our story timeline helpers: defaults, normalization and Spotify embeds.
"""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlparse

from wedding.content import WEDDING, is_placeholder
from wedding.db import DbClient, MilestoneRecord

logger = logging.getLogger(__name__)

SPOTIFY_HOST = "open.spotify.com"


def is_valid_spotify_url(url: Optional[str]) -> bool:
    if not url:
        return False
    try:
        return urlparse(url).hostname == SPOTIFY_HOST
    except ValueError:
        return False


def to_spotify_embed_url(url: str) -> str:
    """Map open.spotify.com/{type}/{id} to its embeddable player URL."""
    if not is_valid_spotify_url(url):
        return url
    parts = urlparse(url).path.split("/")
    if len(parts) >= 3 and parts[1] and parts[2]:
        return (
            f"https://{SPOTIFY_HOST}/embed/{parts[1]}/{parts[2]}"
            "?utm_source=generator&theme=0"
        )
    return url


def clean_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


def default_milestones() -> list[MilestoneRecord]:
    """Configured milestones with placeholder values hidden."""
    return [
        MilestoneRecord(
            id=f"default-{index + 1}",
            order=index + 1,
            title=item.title,
            date=None if is_placeholder(item.date) else item.date,
            description=item.description,
            image_url=None if is_placeholder(item.image_url) else item.image_url,
            spotify_url=item.spotify_url,
            created_at=0.0,
            updated_at=0.0,
        )
        for index, item in enumerate(WEDDING.history)
    ]


def seed_story(db: DbClient, force: bool = False) -> int:
    """Insert the defaults into an empty timeline; returns how many were written."""
    existing = db.list_milestones()
    if existing and not force:
        logger.info("Timeline already has %d milestones; use --force to replace", len(existing))
        return 0
    for milestone in existing:
        db.delete_milestone(milestone.id)

    for default in default_milestones():
        db.save_milestone(
            MilestoneRecord(
                order=default.order,
                title=default.title,
                date=default.date,
                description=default.description,
                image_url=default.image_url,
                spotify_url=default.spotify_url,
            )
        )
    logger.info("Seeded %d milestones (replaced %d)", len(WEDDING.history), len(existing))
    return len(WEDDING.history)
