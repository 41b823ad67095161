"""Data models for the remote data gateway."""

from __future__ import annotations

import enum
from typing import TypedDict

from golfmanager.core.types import FirestoreDocument


class TournamentFormat(str, enum.Enum):
    """How scores of a tournament are interpreted."""

    STROKE_PLAY = "strokePlay"
    MATCH_PLAY = "matchPlay"
    STABLEFORD = "stableford"


class TournamentStatus(str, enum.Enum):
    """Lifecycle status of a tournament. Any status may follow any other."""

    UPCOMING = "upcoming"
    IN_PROGRESS = "inProgress"
    COMPLETED = "completed"


FORMAT_LABELS = {
    TournamentFormat.STROKE_PLAY: "Stroke Play",
    TournamentFormat.MATCH_PLAY: "Match Play",
    TournamentFormat.STABLEFORD: "Stableford",
}

STATUS_LABELS = {
    TournamentStatus.UPCOMING: "Upcoming",
    TournamentStatus.IN_PROGRESS: "In Progress",
    TournamentStatus.COMPLETED: "Completed",
}


class Player(FirestoreDocument, total=False):
    """A player document in Firestore."""

    name: str
    handicap: int


class Tournament(FirestoreDocument, total=False):
    """A tournament document in Firestore."""

    name: str
    date: int
    location: str
    format: str
    status: str


class Registration(TypedDict, total=False):
    """Links a player to a tournament. Keyed by ``{tournamentId}_{playerId}``."""

    tournamentId: str
    playerId: str
    createdAt: int


class Score(FirestoreDocument, total=False):
    """Strokes taken by a player on one hole of a tournament."""

    tournamentId: str
    playerId: str
    hole: int
    strokes: int


class LeaderboardEntry(TypedDict):
    """A player's total gross score for a tournament."""

    player: Player
    totalGrossScore: int
