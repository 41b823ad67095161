"""Fixtures loaded by the demo seeder."""

from golfmanager.gateway.models import TournamentFormat, TournamentStatus

DEMO_PLAYERS = (
    ("James Wilson", 12),
    ("Sarah Mitchell", 8),
    ("Tom Bradley", 18),
    ("Emma Clarke", 5),
    ("Michael Torres", 22),
    ("Lisa Park", 14),
    ("David Chen", 3),
    ("Rachel Adams", 16),
)

CHAMPIONSHIP = {
    "name": "Summer Club Championship",
    "days_from_now": 0,
    "format": TournamentFormat.STROKE_PLAY,
    "location": "Pebble Beach Golf Links",
    "status": TournamentStatus.IN_PROGRESS,
}

STABLEFORD_MONTHLY = {
    "name": "Stableford Monthly",
    "days_from_now": 14,
    "format": TournamentFormat.STABLEFORD,
    "location": "Augusta National",
    "status": TournamentStatus.UPCOMING,
}

SPRING_OPEN = {
    "name": "Spring Open",
    "days_from_now": -30,
    "format": TournamentFormat.STROKE_PLAY,
    "location": "St Andrews Links",
    "status": TournamentStatus.COMPLETED,
}

DEMO_TOURNAMENTS = (CHAMPIONSHIP, STABLEFORD_MONTHLY, SPRING_OPEN)

# Front nine in progress for every player
CHAMPIONSHIP_SCORES = {
    "David Chen": (4, 3, 4, 5, 3, 4, 4, 3, 4),
    "Emma Clarke": (4, 4, 5, 4, 4, 3, 5, 4, 4),
    "Sarah Mitchell": (4, 4, 5, 4, 5, 4, 4, 3, 5),
    "James Wilson": (5, 4, 5, 5, 4, 5, 4, 4, 5),
    "Lisa Park": (5, 5, 4, 5, 4, 5, 5, 4, 5),
    "Tom Bradley": (5, 5, 6, 5, 5, 5, 5, 4, 6),
    "Rachel Adams": (5, 5, 6, 5, 5, 6, 5, 4, 5),
    "Michael Torres": (6, 5, 6, 6, 5, 6, 5, 5, 6),
}

# Full rounds for the first six players
SPRING_OPEN_SCORES = {
    "James Wilson": (5, 4, 5, 5, 4, 5, 4, 4, 5, 5, 4, 5, 5, 4, 5, 4, 4, 5),
    "Sarah Mitchell": (4, 4, 5, 4, 5, 4, 4, 3, 5, 4, 4, 5, 4, 4, 4, 4, 3, 5),
    "Tom Bradley": (5, 5, 6, 5, 5, 5, 5, 4, 6, 5, 5, 6, 5, 5, 5, 5, 4, 6),
    "Emma Clarke": (4, 4, 4, 4, 4, 3, 5, 4, 4, 4, 4, 4, 4, 3, 4, 5, 4, 4),
    "Michael Torres": (6, 5, 6, 6, 5, 6, 5, 5, 6, 6, 5, 6, 5, 5, 6, 5, 5, 6),
    "Lisa Park": (5, 5, 4, 5, 4, 5, 5, 4, 5, 5, 5, 4, 5, 4, 5, 5, 4, 5),
}
