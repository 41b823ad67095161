"""Scoring and ranking engine. Pure functions, no I/O."""

from .display import avatar_color, player_initials
from .leaderboard import LeaderboardRow, compose_leaderboard, rank_entries
from .points import format_to_par, format_value, stableford_points, to_par_class
from .scorecard import (
    HoleRow,
    ScorecardSummary,
    build_score_map,
    hole_rows,
    summarize_scorecard,
)

__all__ = [
    "HoleRow",
    "LeaderboardRow",
    "ScorecardSummary",
    "avatar_color",
    "build_score_map",
    "compose_leaderboard",
    "format_to_par",
    "format_value",
    "hole_rows",
    "player_initials",
    "rank_entries",
    "stableford_points",
    "summarize_scorecard",
    "to_par_class",
]
