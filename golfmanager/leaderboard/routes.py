"""Routes for the leaderboard blueprint."""

from __future__ import annotations

from typing import Any

from flask import redirect, render_template, request, url_for

from golfmanager.data import get_store

from . import bp
from .utils import default_tournament, is_stableford, tournament_leaderboard


@bp.route("/", methods=["GET"])
def view_leaderboard() -> Any:
    """Show the ranked leaderboard of the selected tournament."""
    store = get_store()
    tournaments = store.tournaments()
    selected = default_tournament(tournaments, request.args.get("tournament_id"))
    rows = tournament_leaderboard(store, selected) if selected else []

    return render_template(
        "leaderboard.html",
        tournaments=tournaments,
        selected=selected,
        rows=rows,
        is_stableford=is_stableford(selected),
    )


@bp.route("/<string:tournament_id>/refresh", methods=["POST"])
def refresh_leaderboard(tournament_id: str) -> Any:
    """Drop the cached leaderboard so the next view refetches it."""
    get_store().refresh_leaderboard(tournament_id)
    target = request.form.get("next")
    if target == "tournament":
        return redirect(
            url_for(
                "tournament.view_tournament",
                tournament_id=tournament_id,
                tab="leaderboard",
            )
        )
    return redirect(url_for(".view_leaderboard", tournament_id=tournament_id))
