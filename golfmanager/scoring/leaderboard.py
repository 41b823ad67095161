"""Tournament leaderboard composition."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from golfmanager.core.constants import MEDALS, TOTAL_PAR
from golfmanager.gateway.models import TournamentFormat


@dataclass(frozen=True)
class LeaderboardRow:
    """A ranked leaderboard line with its derived values."""

    rank: int
    player: dict[str, Any]
    handicap: int
    gross: int
    show_to_par: bool

    @property
    def has_score(self) -> bool:
        return self.gross > 0

    @property
    def gross_display(self) -> int | None:
        return self.gross if self.has_score else None

    @property
    def net(self) -> int | None:
        return self.gross - self.handicap if self.has_score else None

    @property
    def to_par(self) -> int | None:
        if not self.has_score or not self.show_to_par:
            return None
        return self.gross - TOTAL_PAR

    @property
    def medal(self) -> str | None:
        return MEDALS[self.rank - 1] if self.rank <= len(MEDALS) else None


def rank_entries(entries: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Order entries by gross ascending, players without a score last.

    The sort is stable, so ties keep the order the entries arrived in.
    """
    return sorted(
        entries,
        key=lambda e: (int(e["totalGrossScore"]) <= 0, int(e["totalGrossScore"])),
    )


def compose_leaderboard(
    entries: Iterable[dict[str, Any]],
    roster: Iterable[dict[str, Any]] = (),
    tournament_format: TournamentFormat | str = TournamentFormat.STROKE_PLAY,
    resort: bool = False,
) -> list[LeaderboardRow]:
    """Turn aggregate gross totals into ranked leaderboard rows.

    Ranks follow the order of ``entries`` unless ``resort`` is set. Handicaps
    come from the tournament roster when the player is on it. Stableford
    tournaments are still ranked on gross strokes, without a to-par column.
    """
    entries = list(entries)
    if resort:
        entries = rank_entries(entries)

    roster_map = {p["id"]: p for p in roster}
    show_to_par = TournamentFormat(tournament_format) != TournamentFormat.STABLEFORD

    rows = []
    for index, entry in enumerate(entries):
        player = roster_map.get(entry["player"]["id"], entry["player"])
        rows.append(
            LeaderboardRow(
                rank=index + 1,
                player=player,
                handicap=int(player.get("handicap") or 0),
                gross=int(entry["totalGrossScore"]),
                show_to_par=show_to_par,
            )
        )
    return rows
