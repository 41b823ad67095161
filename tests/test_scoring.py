"""Tests for the scoring and ranking engine."""

import unittest

from golfmanager.core.constants import BACK_NINE, FRONT_NINE
from golfmanager.scoring import (
    avatar_color,
    build_score_map,
    compose_leaderboard,
    format_to_par,
    format_value,
    hole_rows,
    player_initials,
    rank_entries,
    stableford_points,
    summarize_scorecard,
    to_par_class,
)
from golfmanager.scoring.display import AVATAR_COLORS


def _entry(player_id, total, handicap=0):
    return {
        "player": {"id": player_id, "name": player_id.title(), "handicap": handicap},
        "totalGrossScore": total,
    }


class StablefordTestCase(unittest.TestCase):
    def test_points_table(self) -> None:
        expected = {1: 4, 2: 4, 3: 3, 4: 2, 5: 1, 6: 0, 15: 0}
        for strokes, points in expected.items():
            with self.subTest(strokes=strokes):
                self.assertEqual(stableford_points(strokes), points)

    def test_points_with_explicit_par(self) -> None:
        self.assertEqual(stableford_points(4, par=5), 3)
        self.assertEqual(stableford_points(5, par=3), 0)


class FormattingTestCase(unittest.TestCase):
    def test_format_to_par(self) -> None:
        self.assertEqual(format_to_par(0), "E")
        self.assertEqual(format_to_par(3), "+3")
        self.assertEqual(format_to_par(-2), "-2")
        self.assertEqual(format_to_par(None), "—")

    def test_format_value(self) -> None:
        self.assertEqual(format_value(None), "—")
        self.assertEqual(format_value(0), "0")
        self.assertEqual(format_value(81), "81")

    def test_to_par_class(self) -> None:
        self.assertEqual(to_par_class(-1), "under")
        self.assertEqual(to_par_class(2), "over")
        self.assertEqual(to_par_class(0), "even")
        self.assertEqual(to_par_class(None), "even")


class ScorecardTestCase(unittest.TestCase):
    def test_score_map_keeps_last_record_per_hole(self) -> None:
        scores = [
            {"hole": 1, "strokes": 6},
            {"hole": 2, "strokes": 4},
            {"hole": 1, "strokes": 5},
        ]

        self.assertEqual(build_score_map(scores), {1: 5, 2: 4})

    def test_empty_card(self) -> None:
        summary = summarize_scorecard({}, handicap=10)

        self.assertEqual(summary.holes_played, 0)
        self.assertFalse(summary.has_scores)
        self.assertIsNone(summary.gross_display)
        self.assertIsNone(summary.net_display)
        self.assertIsNone(summary.to_par_display)
        self.assertEqual(summary.stableford_total, 0)
        self.assertIsNone(summary.stableford_display)

    def test_partial_card_totals(self) -> None:
        summary = summarize_scorecard({1: 4, 2: 5, 3: 3}, handicap=2)

        self.assertEqual(summary.holes_played, 3)
        self.assertEqual(summary.gross_total, 12)
        self.assertEqual(summary.net_total, 10)
        # Par for three holes is 12
        self.assertEqual(summary.to_par, 0)
        self.assertEqual(summary.stableford_total, 2 + 1 + 3)
        self.assertEqual(summary.stableford_display, 6)

    def test_handicap_ten_card(self) -> None:
        summary = summarize_scorecard({1: 4, 2: 5, 3: 3}, handicap=10)

        self.assertEqual(summary.net_display, 2)
        self.assertEqual(format_to_par(summary.to_par_display), "E")

    def test_net_can_be_negative(self) -> None:
        summary = summarize_scorecard({1: 4}, handicap=18)

        self.assertEqual(summary.net_total, -14)

    def test_holes_outside_the_course_are_ignored(self) -> None:
        summary = summarize_scorecard({1: 4, 19: 9, 0: 3}, handicap=0)

        self.assertEqual(summary.holes_played, 1)
        self.assertEqual(summary.gross_total, 4)

    def test_hole_rows(self) -> None:
        rows = hole_rows({2: 6}, FRONT_NINE)

        self.assertEqual([r.hole for r in rows], list(range(1, 10)))
        self.assertIsNone(rows[0].strokes)
        self.assertIsNone(rows[0].diff)
        self.assertIsNone(rows[0].points)
        self.assertEqual(rows[1].diff, 2)
        self.assertEqual(rows[1].points, 0)
        self.assertEqual([r.hole for r in hole_rows({}, BACK_NINE)][0], 10)

    def test_stepping_an_empty_hole_starts_from_par(self) -> None:
        empty, scored = hole_rows({2: 6}, (1, 2))

        self.assertEqual(empty.next_strokes(1), 5)
        self.assertEqual(empty.next_strokes(-1), 3)
        self.assertEqual(scored.next_strokes(1), 7)


class LeaderboardTestCase(unittest.TestCase):
    def test_rank_entries_puts_unscored_last(self) -> None:
        entries = [_entry("a", 0), _entry("b", 80), _entry("c", 75), _entry("d", 80)]

        ranked = rank_entries(entries)

        self.assertEqual([e["player"]["id"] for e in ranked], ["c", "b", "d", "a"])

    def test_compose_trusts_gateway_order_by_default(self) -> None:
        entries = [_entry("b", 80), _entry("c", 75)]

        rows = compose_leaderboard(entries)

        self.assertEqual([r.player["id"] for r in rows], ["b", "c"])
        self.assertEqual([r.rank for r in rows], [1, 2])

    def test_compose_resorts_when_asked(self) -> None:
        entries = [_entry("a", 0), _entry("b", 80), _entry("c", 75)]

        rows = compose_leaderboard(entries, resort=True)

        self.assertEqual([r.player["id"] for r in rows], ["c", "b", "a"])

    def test_row_values(self) -> None:
        rows = compose_leaderboard([_entry("a", 70, handicap=4), _entry("b", 0)])

        leader, unscored = rows
        self.assertEqual(leader.gross_display, 70)
        self.assertEqual(leader.net, 66)
        self.assertEqual(leader.to_par, -2)
        self.assertEqual(leader.medal, "gold")
        self.assertFalse(unscored.has_score)
        self.assertIsNone(unscored.gross_display)
        self.assertIsNone(unscored.net)
        self.assertIsNone(unscored.to_par)
        self.assertEqual(unscored.medal, "silver")

    def test_handicap_comes_from_roster(self) -> None:
        roster = [{"id": "a", "name": "A", "handicap": 10}]

        (row,) = compose_leaderboard([_entry("a", 80, handicap=2)], roster)

        self.assertEqual(row.handicap, 10)
        self.assertEqual(row.net, 70)

    def test_stableford_has_no_to_par(self) -> None:
        (row,) = compose_leaderboard([_entry("a", 80)], tournament_format="stableford")

        self.assertEqual(row.gross_display, 80)
        self.assertIsNone(row.to_par)

    def test_two_player_stroke_play_board(self) -> None:
        rows = compose_leaderboard(
            [_entry("a", 70, handicap=5), _entry("b", 75, handicap=10)]
        )

        self.assertEqual(
            [(r.rank, r.net, format_to_par(r.to_par)) for r in rows],
            [(1, 65, "-2"), (2, 65, "+3")],
        )

    def test_medals_stop_after_third(self) -> None:
        rows = compose_leaderboard([_entry(str(i), 70 + i) for i in range(5)])

        self.assertEqual(
            [r.medal for r in rows], ["gold", "silver", "bronze", None, None]
        )


class DisplayTestCase(unittest.TestCase):
    def test_initials(self) -> None:
        self.assertEqual(player_initials("James Wilson"), "JW")
        self.assertEqual(player_initials("Mary Ann Smith"), "MS")
        self.assertEqual(player_initials("cher"), "CH")

    def test_avatar_color_is_stable(self) -> None:
        self.assertEqual(avatar_color("Emma Clarke"), avatar_color("Emma Clarke"))
        self.assertIn(avatar_color("Emma Clarke"), AVATAR_COLORS)
        # "A" is 65, 65 % 8 == 1
        self.assertEqual(avatar_color("A"), AVATAR_COLORS[1])


if __name__ == "__main__":
    unittest.main()
