"""Global constants for the golfmanager application."""

# Firestore collections
PLAYERS_COLLECTION = "players"
TOURNAMENTS_COLLECTION = "tournaments"
REGISTRATIONS_COLLECTION = "registrations"
SCORES_COLLECTION = "scores"

FIRESTORE_BATCH_LIMIT = 400

# Course layout: every hole is a par 4
PAR_PER_HOLE = 4
HOLE_COUNT = 18
TOTAL_PAR = PAR_PER_HOLE * HOLE_COUNT
HOLES = tuple(range(1, HOLE_COUNT + 1))
FRONT_NINE = HOLES[:9]
BACK_NINE = HOLES[9:]

# Input limits enforced by the forms only
MIN_HANDICAP = 0
MAX_HANDICAP = 54
MIN_STROKES = 1
MAX_STROKES = 15

# Cache staleness windows, in seconds
STALE_TOURNAMENTS = 30
STALE_PLAYERS = 30
STALE_ROSTER = 30
STALE_SCORES = 10
STALE_LEADERBOARD = 15

# Leaderboard medals for the top three ranks
MEDALS = ("gold", "silver", "bronze")

# Dashboard
UPCOMING_PREVIEW_LIMIT = 3

SEED_MAX_WORKERS = 8
