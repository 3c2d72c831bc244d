"""
API routers for the wedding site.
"""

from fastapi import APIRouter

from wedding.routes import games, guests, photos, realtime, rsvp, story, todos, wall

router = APIRouter()
router.include_router(guests.router, tags=["guests"])
router.include_router(rsvp.router, tags=["rsvp"])
router.include_router(wall.router, tags=["wall"])
router.include_router(photos.router, tags=["photos"])
router.include_router(games.router, tags=["games"])
router.include_router(story.router, tags=["story"])
router.include_router(todos.router, tags=["todos"])
router.include_router(realtime.router, tags=["realtime"])
