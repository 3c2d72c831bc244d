"""
Backend package for the wedding site.

This package provides a FastAPI application with database, storage and
realtime abstractions so every guest-facing feature (RSVP, wall, playlist,
photos, bingo, games, our story) can run against hosted services or fully
in memory.
"""
