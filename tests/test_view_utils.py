"""Tests for the helpers behind the tournament, player and leaderboard views."""

import unittest

from golfmanager.leaderboard.utils import default_tournament, is_stableford
from golfmanager.player.utils import search_players
from golfmanager.tournament.utils import (
    available_players,
    filter_and_sort,
    select_player,
    status_tabs,
)

TOURNAMENTS = [
    {"id": "a", "status": "completed"},
    {"id": "b", "status": "upcoming"},
    {"id": "c", "status": "inProgress"},
    {"id": "d", "status": "upcoming"},
]


class TournamentUtilsTestCase(unittest.TestCase):
    def test_status_tabs_count_each_status(self) -> None:
        tabs = {tab["key"]: tab["count"] for tab in status_tabs(TOURNAMENTS)}

        self.assertEqual(
            tabs, {"all": 4, "upcoming": 2, "inProgress": 1, "completed": 1}
        )

    def test_all_tab_sorts_by_status(self) -> None:
        ordered = [t["id"] for t in filter_and_sort(TOURNAMENTS)]

        self.assertEqual(ordered, ["c", "b", "d", "a"])

    def test_status_tab_filters(self) -> None:
        ordered = [t["id"] for t in filter_and_sort(TOURNAMENTS, "upcoming")]

        self.assertEqual(ordered, ["b", "d"])

    def test_available_players(self) -> None:
        players = [
            {"id": "1", "name": "zed"},
            {"id": "2", "name": "Amy"},
            {"id": "3", "name": "bob"},
        ]

        available = available_players(players, [{"id": "3"}])

        self.assertEqual([p["id"] for p in available], ["2", "1"])

    def test_select_player(self) -> None:
        roster = [{"id": "1"}, {"id": "2"}]

        self.assertEqual(select_player(roster, "2"), {"id": "2"})
        self.assertEqual(select_player(roster, "9"), {"id": "1"})
        self.assertIsNone(select_player([], None))


class PlayerUtilsTestCase(unittest.TestCase):
    def test_search_players(self) -> None:
        players = [{"name": "Sarah Mitchell"}, {"name": "emma clarke"}, {"name": "Tom"}]

        self.assertEqual(
            [p["name"] for p in search_players(players, " AR ")],
            ["emma clarke", "Sarah Mitchell"],
        )
        self.assertEqual(len(search_players(players)), 3)


class LeaderboardUtilsTestCase(unittest.TestCase):
    def test_default_tournament(self) -> None:
        self.assertEqual(default_tournament(TOURNAMENTS)["id"], "c")
        self.assertEqual(default_tournament(TOURNAMENTS, "d")["id"], "d")
        self.assertEqual(default_tournament(TOURNAMENTS[:2])["id"], "a")
        self.assertIsNone(default_tournament([]))

    def test_is_stableford(self) -> None:
        self.assertTrue(is_stableford({"format": "stableford"}))
        self.assertFalse(is_stableford({"format": "strokePlay"}))
        self.assertFalse(is_stableford(None))


if __name__ == "__main__":
    unittest.main()
