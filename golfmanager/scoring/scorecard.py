"""Aggregation of a player's scorecard for one tournament."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from golfmanager.core.constants import HOLES, PAR_PER_HOLE

from .points import stableford_points


def build_score_map(scores: Iterable[dict[str, Any]]) -> dict[int, int]:
    """Reduce fetched score records to a mapping of hole to strokes.

    Later records overwrite earlier ones for the same hole, so the order in
    which the scores were fetched decides which one is current.
    """
    score_map: dict[int, int] = {}
    for score in scores:
        score_map[int(score["hole"])] = int(score["strokes"])
    return score_map


@dataclass(frozen=True)
class ScorecardSummary:
    """Totals for the holes a player has recorded so far."""

    holes_played: int
    gross_total: int
    stableford_total: int
    handicap: int

    @property
    def net_total(self) -> int:
        return self.gross_total - self.handicap

    @property
    def to_par(self) -> int:
        # Against par for the holes played, not the full round
        return self.gross_total - self.holes_played * PAR_PER_HOLE

    @property
    def has_scores(self) -> bool:
        return self.holes_played > 0

    @property
    def gross_display(self) -> int | None:
        return self.gross_total if self.has_scores else None

    @property
    def net_display(self) -> int | None:
        return self.net_total if self.has_scores else None

    @property
    def to_par_display(self) -> int | None:
        return self.to_par if self.has_scores else None

    @property
    def stableford_display(self) -> int | None:
        return self.stableford_total if self.has_scores else None


def summarize_scorecard(score_map: dict[int, int], handicap: int) -> ScorecardSummary:
    """Compute holes played, gross, stableford points and handicap for a card."""
    holes_played = 0
    gross_total = 0
    stableford_total = 0
    for hole in HOLES:
        strokes = score_map.get(hole)
        if strokes is None:
            continue
        holes_played += 1
        gross_total += strokes
        stableford_total += stableford_points(strokes, PAR_PER_HOLE)
    return ScorecardSummary(
        holes_played=holes_played,
        gross_total=gross_total,
        stableford_total=stableford_total,
        handicap=int(handicap),
    )


@dataclass(frozen=True)
class HoleRow:
    """One row of the scorecard grid."""

    hole: int
    par: int
    strokes: int | None

    @property
    def diff(self) -> int | None:
        return None if self.strokes is None else self.strokes - self.par

    @property
    def points(self) -> int | None:
        return None if self.strokes is None else stableford_points(self.strokes, self.par)

    def next_strokes(self, delta: int) -> int:
        """Stroke count after pressing +/-; an empty hole starts from par."""
        base = self.par if self.strokes is None else self.strokes
        return base + delta


def hole_rows(score_map: dict[int, int], holes: Iterable[int]) -> list[HoleRow]:
    """Build grid rows for the given holes."""
    return [HoleRow(hole, PAR_PER_HOLE, score_map.get(hole)) for hole in holes]
