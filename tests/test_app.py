"""Tests for application setup and error pages."""

import unittest
from unittest.mock import patch

from golfmanager import create_app
from golfmanager.data import GolfStore
from golfmanager.errors import GatewayError
from golfmanager.seed import DemoSeeder
from tests.helpers import AppTestCase


class AppFactoryTestCase(unittest.TestCase):
    def test_extensions_are_registered(self) -> None:
        app = create_app({"TESTING": True})

        self.assertIsInstance(app.extensions["golf_store"], GolfStore)
        self.assertIsInstance(app.extensions["demo_seeder"], DemoSeeder)
        self.assertFalse(app.config["SEED_DEMO_DATA"])
        self.assertFalse(app.config["LEADERBOARD_CLIENT_SORT"])

    def test_staleness_comes_from_config(self) -> None:
        app = create_app({"TESTING": True, "CACHE_STALE_SCORES": 2.5})

        self.assertEqual(app.extensions["golf_store"].staleness["scores"], 2.5)

    def test_env_flags(self) -> None:
        with patch.dict(
            "os.environ", {"SEED_DEMO_DATA": "true", "LEADERBOARD_CLIENT_SORT": "1"}
        ):
            app = create_app({"TESTING": True})

        self.assertTrue(app.config["SEED_DEMO_DATA"])
        self.assertTrue(app.config["LEADERBOARD_CLIENT_SORT"])

    def test_firebase_is_not_initialized_when_testing(self) -> None:
        with patch("firebase_admin.initialize_app") as initialize_app:
            create_app({"TESTING": True})

        initialize_app.assert_not_called()

    def test_seed_command_is_registered(self) -> None:
        app = create_app({"TESTING": True})

        self.assertIn("seed-demo", app.cli.commands)


class ErrorPageTestCase(AppTestCase):
    def test_health_check(self) -> None:
        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data, b"OK")

    def test_unknown_route(self) -> None:
        response = self.client.get("/does-not-exist")

        self.assertEqual(response.status_code, 404)
        self.assertIn(b"Page Not Found", response.data)

    def test_unknown_tournament(self) -> None:
        response = self.client.get("/tournaments/missing")

        self.assertEqual(response.status_code, 404)
        self.assertIn(b"Tournament not found.", response.data)

    def test_unknown_player(self) -> None:
        response = self.client.get("/players/missing")

        self.assertEqual(response.status_code, 404)
        self.assertIn(b"Player not found.", response.data)

    def test_gateway_failure_renders_error_page(self) -> None:
        with patch.object(
            self.gateway,
            "get_all_players",
            side_effect=GatewayError("get_all_players failed: 503 down"),
        ):
            response = self.client.get("/players/")

        self.assertEqual(response.status_code, 502)
        self.assertIn(b"The data service is unavailable", response.data)


class SeedCommandTestCase(AppTestCase):
    def test_seed_command_loads_demo_data(self) -> None:
        result = self.app.test_cli_runner().invoke(args=["seed-demo"])

        self.assertIn("Demo data loaded.", result.output)
        self.assertEqual(len(self.documents("tournaments")), 3)

    def test_seed_command_is_a_noop_with_data(self) -> None:
        self.create_tournament()

        result = self.app.test_cli_runner().invoke(args=["seed-demo"])

        self.assertIn("nothing to do", result.output)
        self.assertEqual(len(self.documents("tournaments")), 1)


if __name__ == "__main__":
    unittest.main()
