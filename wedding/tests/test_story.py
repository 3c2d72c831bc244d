import unittest

from wedding.content import WEDDING
from wedding.db import InMemoryDbClient, MilestoneRecord
from wedding.storage import COUPLE_GALLERY_BUCKET
from wedding.story import (
    default_milestones,
    is_valid_spotify_url,
    seed_story,
    to_spotify_embed_url,
)
from wedding.tests.base import ADMIN_PIN, ApiTestCase, make_image

PIN = {"X-Admin-Pin": ADMIN_PIN}
TRACK = "https://open.spotify.com/track/4uLU6hMCjMI75M1A2tKUQC?si=abc"


class SpotifyHelperTests(unittest.TestCase):
    def test_valid_urls(self):
        self.assertTrue(is_valid_spotify_url(TRACK))
        self.assertFalse(is_valid_spotify_url("https://spotify.com/track/1"))
        self.assertFalse(is_valid_spotify_url(None))
        self.assertFalse(is_valid_spotify_url("not a url"))

    def test_embed_url(self):
        self.assertEqual(
            to_spotify_embed_url(TRACK),
            "https://open.spotify.com/embed/track/4uLU6hMCjMI75M1A2tKUQC"
            "?utm_source=generator&theme=0",
        )
        self.assertEqual(
            to_spotify_embed_url("https://example.test/song"), "https://example.test/song"
        )
        self.assertEqual(
            to_spotify_embed_url("https://open.spotify.com/"), "https://open.spotify.com/"
        )

    def test_default_milestones_hide_placeholders(self):
        milestones = default_milestones()
        self.assertEqual(len(milestones), len(WEDDING.history))
        self.assertEqual([m.order for m in milestones], list(range(1, len(milestones) + 1)))
        self.assertIsNone(milestones[0].date)
        self.assertEqual(milestones[-1].date, "2026-02-21")
        self.assertTrue(all(m.image_url is None for m in milestones))


class SeedStoryTests(unittest.TestCase):
    def test_seeds_empty_timeline_only(self):
        db = InMemoryDbClient()
        self.assertEqual(seed_story(db), len(WEDDING.history))
        first_ids = [m.id for m in db.list_milestones()]
        self.assertFalse(any(i.startswith("default-") for i in first_ids))

        self.assertEqual(seed_story(db), 0)
        self.assertEqual([m.id for m in db.list_milestones()], first_ids)

    def test_force_replaces_existing(self):
        db = InMemoryDbClient()
        db.save_milestone(MilestoneRecord(title="Custom", order=1))
        seed_story(db, force=True)
        titles = [m.title for m in db.list_milestones()]
        self.assertNotIn("Custom", titles)
        self.assertEqual(len(titles), len(WEDDING.history))


class StoryApiTests(ApiTestCase):
    def save(self, **fields):
        return self.client.post("/api/story", headers=PIN, json=fields)

    def test_defaults_until_something_is_saved(self):
        story = self.client.get("/api/story").json()
        self.assertTrue(story["is_default"])
        self.assertEqual(story["milestones"][0]["id"], "default-1")

        self.assertEqual(self.save(order=1, title="Nos conocimos").status_code, 200)
        story = self.client.get("/api/story").json()
        self.assertFalse(story["is_default"])
        self.assertEqual(len(story["milestones"]), 1)

    def test_editing_a_default_milestone_stores_it(self):
        response = self.save(id="default-1", order=1, title="Edited default")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["id"], "default-1")

        story = self.client.get("/api/story").json()
        self.assertFalse(story["is_default"])
        self.assertEqual(
            [(m["id"], m["title"]) for m in story["milestones"]],
            [("default-1", "Edited default")],
        )

    def test_editing_requires_pin(self):
        response = self.client.post("/api/story", json={"order": 1, "title": "x"})
        self.assertEqual(response.status_code, 403)
        wrong = self.client.post(
            "/api/story", headers={"X-Admin-Pin": "9999"}, json={"order": 1, "title": "x"}
        )
        self.assertEqual(wrong.status_code, 403)

    def test_upsert_blanks_and_spotify(self):
        created = self.save(
            order=1, title=" Primer viaje ", date=" ", description="", spotify_url=TRACK
        ).json()
        self.assertEqual(created["title"], "Primer viaje")
        self.assertIsNone(created["date"])
        self.assertIsNone(created["description"])
        self.assertIn("/embed/track/", created["spotify_embed_url"])

        updated = self.save(id=created["id"], order=2, title="Primer viaje juntos").json()
        self.assertEqual(updated["id"], created["id"])
        self.assertEqual(updated["order"], 2)
        self.assertIsNone(updated["spotify_embed_url"])

        bad = self.save(order=1, title="x", spotify_url="https://example.test/x")
        self.assertEqual(bad.status_code, 400)
        unknown = self.save(id="nope", order=1, title="x")
        self.assertEqual(unknown.status_code, 200)
        self.assertEqual(unknown.json()["id"], "nope")
        self.assertEqual(self.db.get_milestone("nope").title, "x")
        blank_title = self.save(order=1, title="  ")
        self.assertEqual(blank_title.status_code, 400)

    def test_reorder_and_delete(self):
        a = self.save(order=1, title="A").json()["id"]
        b = self.save(order=2, title="B").json()["id"]
        c = self.save(order=3, title="C").json()["id"]

        reordered = self.client.post(
            "/api/story/reorder", headers=PIN, json={"ids": [c, a, b]}
        ).json()
        self.assertEqual([m["title"] for m in reordered["milestones"]], ["C", "A", "B"])
        self.assertEqual([m["order"] for m in reordered["milestones"]], [1, 2, 3])

        self.assertEqual(
            self.client.delete(f"/api/story/{a}", headers=PIN).status_code, 200
        )
        self.assertEqual(
            self.client.delete(f"/api/story/{a}", headers=PIN).status_code, 404
        )

    def test_image_upload(self):
        response = self.client.post(
            "/api/story/image",
            headers=PIN,
            files={"file": ("viaje.png", make_image(), "image/png")},
        )
        self.assertEqual(response.status_code, 200)
        [(bucket, path)] = list(self.storage.stored_objects)
        self.assertEqual(bucket, COUPLE_GALLERY_BUCKET)
        self.assertTrue(path.startswith("historia/"))
        self.assertEqual(response.json()["url"], self.storage.public_url(bucket, path))

        gallery = self.client.get("/api/gallery").json()
        self.assertEqual(gallery["photos"], [])


if __name__ == "__main__":
    unittest.main()
