"""Remote data gateway over Firestore."""

from .models import (
    LeaderboardEntry,
    Player,
    Score,
    Tournament,
    TournamentFormat,
    TournamentStatus,
)
from .services import FirestoreGateway

__all__ = [
    "FirestoreGateway",
    "LeaderboardEntry",
    "Player",
    "Score",
    "Tournament",
    "TournamentFormat",
    "TournamentStatus",
]
