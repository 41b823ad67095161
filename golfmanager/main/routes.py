"""Routes for the main blueprint."""

from __future__ import annotations

from typing import Any

from flask import current_app, flash, render_template

from golfmanager.core.constants import UPCOMING_PREVIEW_LIMIT
from golfmanager.data import get_store
from golfmanager.errors import GatewayError, SeedError
from golfmanager.gateway.models import TournamentStatus
from golfmanager.seed import get_seeder

from . import bp


def _maybe_seed(tournaments: list[Any]) -> list[Any]:
    """Load demo data on first visit to an empty store, when enabled."""
    if not current_app.config.get("SEED_DEMO_DATA"):
        return tournaments
    try:
        if get_seeder().seed_if_empty(tournaments):
            flash("Demo data loaded.", "info")
            return get_store().tournaments()
    except SeedError as e:
        current_app.logger.error(f"Demo seeding failed: {e.message}")
        flash("Demo data could not be loaded. It will be retried.", "warning")
    return tournaments


@bp.route("/", methods=["GET"])
def dashboard() -> Any:
    """Show tournament counts, live tournaments and the next upcoming ones."""
    store = get_store()
    try:
        tournaments = _maybe_seed(store.tournaments())
        players = store.players()
    except GatewayError as e:
        current_app.logger.error(f"Error loading dashboard: {e.message}")
        flash("Failed to load tournaments.", "danger")
        tournaments, players = [], []

    in_progress = [
        t for t in tournaments if t.get("status") == TournamentStatus.IN_PROGRESS
    ]
    upcoming = [t for t in tournaments if t.get("status") == TournamentStatus.UPCOMING]
    completed = [t for t in tournaments if t.get("status") == TournamentStatus.COMPLETED]

    return render_template(
        "dashboard.html",
        tournaments=tournaments,
        players=players,
        in_progress=in_progress,
        upcoming=upcoming[:UPCOMING_PREVIEW_LIMIT],
        completed=completed,
    )
