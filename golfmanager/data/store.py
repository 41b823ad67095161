"""Cached access to the gateway, with invalidation after mutations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from golfmanager.core import constants
from golfmanager.utils import new_id

from .cache import QueryCache

if TYPE_CHECKING:
    from golfmanager.gateway import (
        FirestoreGateway,
        LeaderboardEntry,
        Player,
        Score,
        Tournament,
        TournamentFormat,
        TournamentStatus,
    )

logger = logging.getLogger(__name__)

# Every key kind in the cache; broad mutations invalidate all of them
ALL_KINDS = (
    "tournaments",
    "players",
    "tournament",
    "player",
    "leaderboard",
    "tournamentPlayers",
    "scores",
    "playerTournaments",
)

DEFAULT_STALENESS = {
    "tournaments": constants.STALE_TOURNAMENTS,
    "tournament": constants.STALE_TOURNAMENTS,
    "players": constants.STALE_PLAYERS,
    "player": constants.STALE_PLAYERS,
    "tournamentPlayers": constants.STALE_ROSTER,
    "playerTournaments": constants.STALE_ROSTER,
    "scores": constants.STALE_SCORES,
    "leaderboard": constants.STALE_LEADERBOARD,
}


class GolfStore:
    """Reads go through a ``QueryCache``; writes go to the gateway.

    A mutation invalidates only after the gateway call succeeds. Player,
    tournament and registration changes invalidate the whole key space;
    recording a score drops just that player's scores and the tournament's
    leaderboard. Nothing is updated optimistically.
    """

    def __init__(
        self,
        gateway: FirestoreGateway,
        cache: QueryCache | None = None,
        staleness: dict[str, float] | None = None,
    ) -> None:
        self.gateway = gateway
        self.cache = cache or QueryCache()
        self.staleness = {**DEFAULT_STALENESS, **(staleness or {})}

    def _read(self, kind: str, *params: Any, loader: Any) -> Any:
        return self.cache.fetch((kind, *params), loader, self.staleness[kind])

    # Invalidation -----------------------------------------------------------

    def invalidate_all(self) -> None:
        """Drop every cached query."""
        logger.debug("Invalidating all cached queries")
        for kind in ALL_KINDS:
            self.cache.invalidate(kind)

    def invalidate_scores(self, tournament_id: str, player_id: str) -> None:
        """Drop one player's scores and the tournament's leaderboard."""
        self.cache.invalidate("scores", tournament_id, player_id)
        self.cache.invalidate("leaderboard", tournament_id)

    def refresh_leaderboard(self, tournament_id: str) -> None:
        """Force the next leaderboard read to hit the gateway."""
        self.cache.invalidate("leaderboard", tournament_id)

    # Reads ------------------------------------------------------------------

    def tournaments(self) -> list[Tournament]:
        return self._read("tournaments", loader=self.gateway.get_all_tournaments)

    def players(self) -> list[Player]:
        return self._read("players", loader=self.gateway.get_all_players)

    def tournament(self, tournament_id: str) -> Tournament:
        return self._read(
            "tournament",
            tournament_id,
            loader=lambda: self.gateway.get_tournament(tournament_id),
        )

    def player(self, player_id: str) -> Player:
        return self._read(
            "player", player_id, loader=lambda: self.gateway.get_player(player_id)
        )

    def tournament_players(self, tournament_id: str) -> list[Player]:
        return self._read(
            "tournamentPlayers",
            tournament_id,
            loader=lambda: self.gateway.get_players_for_tournament(tournament_id),
        )

    def player_tournaments(self, player_id: str) -> list[Tournament]:
        return self._read(
            "playerTournaments",
            player_id,
            loader=lambda: self.gateway.get_tournaments_for_player(player_id),
        )

    def scores(self, tournament_id: str, player_id: str) -> list[Score]:
        return self._read(
            "scores",
            tournament_id,
            player_id,
            loader=lambda: self.gateway.get_scores_for_player(tournament_id, player_id),
        )

    def leaderboard(self, tournament_id: str) -> list[LeaderboardEntry]:
        return self._read(
            "leaderboard",
            tournament_id,
            loader=lambda: self.gateway.get_tournament_leaderboard(tournament_id),
        )

    # Player mutations -------------------------------------------------------

    def create_player(self, name: str, handicap: int) -> str:
        """Create a player and return the generated id."""
        player_id = new_id()
        self.gateway.create_player(player_id, name, handicap)
        self.invalidate_all()
        return player_id

    def update_player(
        self, player_id: str, name: str | None = None, handicap: int | None = None
    ) -> None:
        self.gateway.update_player(player_id, name, handicap)
        self.invalidate_all()

    def delete_player(self, player_id: str) -> None:
        self.gateway.delete_player(player_id)
        self.invalidate_all()

    # Tournament mutations ---------------------------------------------------

    def create_tournament(
        self, name: str, date: int, format: TournamentFormat | str, location: str
    ) -> str:
        """Create a tournament and return the generated id."""
        tournament_id = new_id()
        self.gateway.create_tournament(tournament_id, name, date, format, location)
        self.invalidate_all()
        return tournament_id

    def update_tournament(  # noqa: PLR0913
        self,
        tournament_id: str,
        name: str | None = None,
        date: int | None = None,
        format: TournamentFormat | str | None = None,
        status: TournamentStatus | str | None = None,
        location: str | None = None,
    ) -> None:
        self.gateway.update_tournament(
            tournament_id, name, date, format, status, location
        )
        self.invalidate_all()

    def delete_tournament(self, tournament_id: str) -> None:
        self.gateway.delete_tournament(tournament_id)
        self.invalidate_all()

    # Registration -----------------------------------------------------------

    def register_player(self, tournament_id: str, player_id: str) -> None:
        self.gateway.register_player_to_tournament(tournament_id, player_id)
        self.invalidate_all()

    def remove_player(self, tournament_id: str, player_id: str) -> None:
        self.gateway.remove_player_from_tournament(tournament_id, player_id)
        self.invalidate_all()

    # Scores -----------------------------------------------------------------

    def record_score(
        self, tournament_id: str, player_id: str, hole: int, strokes: int
    ) -> None:
        """Record strokes for a hole under a freshly generated score id."""
        self.gateway.record_score(new_id(), tournament_id, player_id, hole, strokes)
        self.invalidate_scores(tournament_id, player_id)
