"""Tests for the query cache."""

import unittest
from unittest.mock import MagicMock

from golfmanager.data import QueryCache


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class QueryCacheTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.clock = FakeClock()
        self.cache = QueryCache(clock=self.clock)

    def test_fresh_entry_skips_loader(self) -> None:
        loader = MagicMock(return_value=[1, 2])

        first = self.cache.fetch(("players",), loader, 30)
        self.clock.now = 29
        second = self.cache.fetch(("players",), loader, 30)

        self.assertEqual(first, [1, 2])
        self.assertEqual(second, [1, 2])
        loader.assert_called_once()

    def test_stale_entry_is_refetched(self) -> None:
        loader = MagicMock(side_effect=["old", "new"])

        self.cache.fetch(("players",), loader, 30)
        self.clock.now = 30
        value = self.cache.fetch(("players",), loader, 30)

        self.assertEqual(value, "new")
        self.assertEqual(loader.call_count, 2)

    def test_failed_load_leaves_cache_untouched(self) -> None:
        self.cache.set(("scores", "t1", "p1"), ["cached"])
        self.clock.now = 100
        loader = MagicMock(side_effect=RuntimeError("boom"))

        with self.assertRaises(RuntimeError):
            self.cache.fetch(("scores", "t1", "p1"), loader, 10)

        self.assertEqual(self.cache.keys(), [("scores", "t1", "p1")])
        hit, _ = self.cache.get(("scores", "t1", "p1"), 1000)
        self.assertTrue(hit)

    def test_invalidate_by_prefix(self) -> None:
        for key in (
            ("scores", "t1", "p1"),
            ("scores", "t1", "p2"),
            ("scores", "t2", "p1"),
            ("leaderboard", "t1"),
        ):
            self.cache.set(key, object())

        removed = self.cache.invalidate("scores", "t1")

        self.assertEqual(removed, 2)
        self.assertNotIn(("scores", "t1", "p1"), self.cache)
        self.assertIn(("scores", "t2", "p1"), self.cache)
        self.assertIn(("leaderboard", "t1"), self.cache)

    def test_invalidate_exact_key(self) -> None:
        self.cache.set(("scores", "t1", "p1"), 1)
        self.cache.set(("scores", "t1", "p10"), 2)

        self.cache.invalidate("scores", "t1", "p1")

        self.assertEqual(self.cache.keys(), [("scores", "t1", "p10")])

    def test_invalidate_missing_prefix(self) -> None:
        self.assertEqual(self.cache.invalidate("players"), 0)

    def test_clear(self) -> None:
        self.cache.set(("players",), [])
        self.cache.clear()
        self.assertEqual(len(self.cache), 0)

    def test_load_overtaken_by_invalidate_is_not_stored(self) -> None:
        def loader() -> str:
            self.cache.invalidate("players")
            return "old"

        value = self.cache.fetch(("players",), loader, 30)

        self.assertEqual(value, "old")
        self.assertNotIn(("players",), self.cache)

        reload = MagicMock(return_value="new")
        self.assertEqual(self.cache.fetch(("players",), reload, 30), "new")
        reload.assert_called_once()
        self.assertIn(("players",), self.cache)

    def test_load_overtaken_by_unrelated_invalidate_is_not_stored(self) -> None:
        def loader() -> str:
            self.cache.invalidate("scores", "t1")
            return "old"

        self.cache.fetch(("players",), loader, 30)

        self.assertEqual(len(self.cache), 0)

    def test_load_overtaken_by_clear_is_not_stored(self) -> None:
        def loader() -> str:
            self.cache.clear()
            return "old"

        self.cache.fetch(("players",), loader, 30)

        self.assertEqual(len(self.cache), 0)


if __name__ == "__main__":
    unittest.main()
