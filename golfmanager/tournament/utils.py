"""Utility functions for tournament views."""

from __future__ import annotations

from typing import Any

from golfmanager.gateway.models import STATUS_LABELS, TournamentStatus

ALL_TAB = "all"

# In-progress tournaments first, then upcoming, then completed
STATUS_ORDER = {
    TournamentStatus.IN_PROGRESS.value: 0,
    TournamentStatus.UPCOMING.value: 1,
    TournamentStatus.COMPLETED.value: 2,
}

DETAIL_TABS = ("scorecard", "players", "leaderboard")


def status_tabs(tournaments: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Tabs for the tournament list with the number of tournaments in each."""
    tabs = [{"key": ALL_TAB, "label": "All", "count": len(tournaments)}]
    for status, label in STATUS_LABELS.items():
        tabs.append(
            {
                "key": status.value,
                "label": label,
                "count": sum(1 for t in tournaments if t.get("status") == status),
            }
        )
    return tabs


def filter_and_sort(
    tournaments: list[dict[str, Any]], tab: str = ALL_TAB
) -> list[dict[str, Any]]:
    """Keep the tournaments of a status tab, ordered by status."""
    if tab != ALL_TAB:
        tournaments = [t for t in tournaments if t.get("status") == tab]
    return sorted(
        tournaments, key=lambda t: STATUS_ORDER.get(t.get("status", ""), len(STATUS_ORDER))
    )


def available_players(
    players: list[dict[str, Any]], roster: list[dict[str, Any]]
) -> list[dict[str, Any]]:
    """Players not yet registered, sorted by name."""
    registered = {p["id"] for p in roster}
    return sorted(
        (p for p in players if p["id"] not in registered),
        key=lambda p: p.get("name", "").lower(),
    )


def select_player(
    roster: list[dict[str, Any]], player_id: str | None
) -> dict[str, Any] | None:
    """The roster player to show on the scorecard, defaulting to the first."""
    for player in roster:
        if player["id"] == player_id:
            return player
    return roster[0] if roster else None
