"""Shared base class for application tests."""

import unittest
from unittest.mock import patch

from golfmanager import create_app
from golfmanager.data import get_store
from tests.mock_utils import MockFirestoreBuilder, patch_mockfirestore

patch_mockfirestore()

TEST_DATE_NS = 1_748_736_000_000_000_000  # 2025-06-01 UTC


class AppTestCase(unittest.TestCase):
    """Runs the app against an in-memory Firestore."""

    config: dict = {}

    def setUp(self) -> None:
        self.mock_db = MockFirestoreBuilder.build_db()
        patcher = patch(
            "golfmanager.gateway.services.firestore",
            new=MockFirestoreBuilder.build_firestore_module(self.mock_db),
        )
        patcher.start()
        self.addCleanup(patcher.stop)

        self.app = create_app(
            {
                "TESTING": True,
                "WTF_CSRF_ENABLED": False,
                "SEED_MAX_WORKERS": 1,
                **self.config,
            }
        )
        self.client = self.app.test_client()
        self.app_context = self.app.app_context()
        self.app_context.push()
        self.store = get_store()
        self.gateway = self.store.gateway

    def tearDown(self) -> None:
        self.app_context.pop()

    def create_tournament(self, tournament_id="t1", name="Club Championship", **kw):
        self.gateway.create_tournament(
            tournament_id,
            name,
            kw.get("date", TEST_DATE_NS),
            kw.get("format", "strokePlay"),
            kw.get("location", "Pine Valley"),
        )
        if "status" in kw:
            self.gateway.update_tournament(tournament_id, status=kw["status"])
        self.store.invalidate_all()

    def create_player(self, player_id="p1", name="Ann Lee", handicap=10):
        self.gateway.create_player(player_id, name, handicap)
        self.store.invalidate_all()

    def register(self, tournament_id, player_id):
        self.gateway.register_player_to_tournament(tournament_id, player_id)
        self.store.invalidate_all()

    def documents(self, collection):
        return [
            doc.to_dict() | {"id": doc.id}
            for doc in self.mock_db.collection(collection).stream()
            if doc.exists
        ]
