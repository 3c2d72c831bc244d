import io
import unittest

from fastapi.testclient import TestClient
from PIL import Image

from wedding import dependencies
from wedding.app import create_app
from wedding.config import Settings, get_settings
from wedding.db import InMemoryDbClient
from wedding.realtime import InMemoryChangeFeed
from wedding.share_inbox import InMemorySharedFileInbox
from wedding.storage import InMemoryStorageClient

ADMIN_PIN = "2102"
GUEST = {"X-Access-Code": "casapupis", "X-Guest-Name": "Ana"}
OTHER_GUEST = {"X-Access-Code": "casapupis", "X-Guest-Name": "Bruno"}
ADMIN = {"X-Access-Code": "casapupis", "X-Guest-Name": "Julian"}
OTHER_ADMIN = {"X-Access-Code": "casapupis", "X-Guest-Name": "Jacqueline"}


def make_image(width=64, height=48, color=(200, 80, 120), fmt="PNG") -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), color).save(buffer, format=fmt)
    return buffer.getvalue()


def make_settings(**overrides) -> Settings:
    values = dict(
        admin_pin=ADMIN_PIN,
        photo_limit_per_guest=3,
        use_in_memory_backends=True,
    )
    values.update(overrides)
    return Settings(**values)


class ApiTestCase(unittest.TestCase):
    """Runs the app against fresh in-memory backends."""

    settings_overrides: dict = {}

    def setUp(self):
        self.db = InMemoryDbClient()
        self.storage = InMemoryStorageClient()
        self.feed = InMemoryChangeFeed()
        self.inbox = InMemorySharedFileInbox()
        dependencies._db_client = self.db
        dependencies._storage_client = self.storage
        dependencies._change_feed = self.feed
        dependencies._share_inbox = self.inbox

        self.settings = make_settings(**self.settings_overrides)
        app = create_app()
        app.dependency_overrides[get_settings] = lambda: self.settings
        self.client = TestClient(app)

    def tearDown(self):
        dependencies._db_client = None
        dependencies._storage_client = None
        dependencies._change_feed = None
        dependencies._share_inbox = None
