"""Utility functions for leaderboard views."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from flask import current_app

from golfmanager.gateway.models import TournamentFormat, TournamentStatus
from golfmanager.scoring import LeaderboardRow, compose_leaderboard

if TYPE_CHECKING:
    from golfmanager.data import GolfStore


def tournament_leaderboard(
    store: GolfStore, tournament: dict[str, Any]
) -> list[LeaderboardRow]:
    """Ranked rows for a tournament from the cached aggregate and roster."""
    tournament_id = tournament["id"]
    return compose_leaderboard(
        store.leaderboard(tournament_id),
        store.tournament_players(tournament_id),
        tournament.get("format") or TournamentFormat.STROKE_PLAY,
        resort=current_app.config.get("LEADERBOARD_CLIENT_SORT", False),
    )


def default_tournament(
    tournaments: list[dict[str, Any]], selected_id: str | None = None
) -> dict[str, Any] | None:
    """The requested tournament, else the first live one, else the first."""
    if selected_id:
        for t in tournaments:
            if t["id"] == selected_id:
                return t
    for t in tournaments:
        if t.get("status") == TournamentStatus.IN_PROGRESS:
            return t
    return tournaments[0] if tournaments else None


def is_stableford(tournament: dict[str, Any] | None) -> bool:
    return bool(tournament) and tournament.get("format") == TournamentFormat.STABLEFORD
