"""Routes for the tournament blueprint."""

from __future__ import annotations

from typing import Any

from flask import (
    current_app,
    flash,
    redirect,
    render_template,
    request,
    url_for,
)

from golfmanager.core.constants import (
    BACK_NINE,
    FRONT_NINE,
    HOLE_COUNT,
    MAX_STROKES,
    MIN_STROKES,
)
from golfmanager.data import get_store
from golfmanager.errors import GatewayError
from golfmanager.leaderboard.utils import is_stableford, tournament_leaderboard
from golfmanager.scoring import build_score_map, hole_rows, summarize_scorecard
from golfmanager.utils import date_to_ns, ns_to_date

from . import bp
from .forms import EditTournamentForm, RegisterPlayerForm, ScoreForm, TournamentForm
from .utils import (
    ALL_TAB,
    DETAIL_TABS,
    available_players,
    filter_and_sort,
    select_player,
    status_tabs,
)


@bp.route("/", methods=["GET"])
def list_tournaments() -> Any:
    """List tournaments, optionally filtered by a status tab."""
    tournaments = get_store().tournaments()
    tab = request.args.get("tab", ALL_TAB)
    return render_template(
        "tournament/list.html",
        tournaments=filter_and_sort(tournaments, tab),
        tabs=status_tabs(tournaments),
        active_tab=tab,
    )


@bp.route("/create", methods=["GET", "POST"])
def create_tournament() -> Any:
    """Create a new tournament."""
    form = TournamentForm()
    if form.validate_on_submit():
        try:
            tournament_id = get_store().create_tournament(
                name=form.name.data,
                date=date_to_ns(form.date.data),
                format=form.format.data,
                location=form.location.data,
            )
            flash("Tournament created!", "success")
            return redirect(url_for(".view_tournament", tournament_id=tournament_id))
        except GatewayError as e:
            current_app.logger.error(f"Error creating tournament: {e.message}")
            flash("Failed to create tournament.", "danger")
    elif request.method == "POST":
        flash("Please fill in all required fields.", "danger")

    return render_template("tournament/create.html", form=form)


def _scorecard_context(tournament: dict[str, Any], roster: list[Any]) -> dict[str, Any]:
    player = select_player(roster, request.args.get("player_id"))
    if player is None:
        return {"selected_player": None}

    scores = get_store().scores(tournament["id"], player["id"])
    score_map = build_score_map(scores)
    return {
        "selected_player": player,
        "summary": summarize_scorecard(score_map, player.get("handicap") or 0),
        "front_nine": hole_rows(score_map, FRONT_NINE),
        "back_nine": hole_rows(score_map, BACK_NINE),
        "hole_count": HOLE_COUNT,
        "min_strokes": MIN_STROKES,
        "max_strokes": MAX_STROKES,
    }


@bp.route("/<string:tournament_id>", methods=["GET"])
def view_tournament(tournament_id: str) -> Any:
    """View a tournament's scorecard, roster or leaderboard tab."""
    store = get_store()
    tournament = store.tournament(tournament_id)
    roster = store.tournament_players(tournament_id)

    tab = request.args.get("tab", DETAIL_TABS[0])
    if tab not in DETAIL_TABS:
        tab = DETAIL_TABS[0]

    context: dict[str, Any] = {}
    if tab == "scorecard":
        context = _scorecard_context(tournament, roster)
    elif tab == "players":
        register_form = RegisterPlayerForm(formdata=None)
        candidates = available_players(store.players(), roster)
        register_form.player_id.choices = [
            (p["id"], f"{p['name']} (HCP {p.get('handicap', 0)})") for p in candidates
        ]
        context = {"register_form": register_form, "candidates": candidates}
    else:
        context = {"rows": tournament_leaderboard(store, tournament)}

    return render_template(
        "tournament/view.html",
        tournament=tournament,
        roster=roster,
        tab=tab,
        tabs=DETAIL_TABS,
        is_stableford=is_stableford(tournament),
        **context,
    )


@bp.route("/<string:tournament_id>/edit", methods=["GET", "POST"])
def edit_tournament(tournament_id: str) -> Any:
    """Edit the name, date, location, format and status of a tournament."""
    store = get_store()
    tournament = store.tournament(tournament_id)
    form = EditTournamentForm()

    if form.validate_on_submit():
        try:
            store.update_tournament(
                tournament_id,
                name=form.name.data,
                date=date_to_ns(form.date.data),
                format=form.format.data,
                status=form.status.data,
                location=form.location.data,
            )
            flash("Tournament updated.", "success")
            return redirect(url_for(".view_tournament", tournament_id=tournament_id))
        except GatewayError as e:
            current_app.logger.error(f"Error updating tournament: {e.message}")
            flash("Failed to update tournament.", "danger")
    elif request.method == "GET":
        form.name.data = tournament.get("name")
        form.location.data = tournament.get("location")
        form.format.data = tournament.get("format")
        form.status.data = tournament.get("status")
        if tournament.get("date") is not None:
            form.date.data = ns_to_date(tournament["date"])
    else:
        flash("Please fill in all required fields.", "danger")

    return render_template("tournament/edit.html", form=form, tournament=tournament)


@bp.route("/<string:tournament_id>/delete", methods=["POST"])
def delete_tournament(tournament_id: str) -> Any:
    """Delete a tournament with its registrations and scores."""
    try:
        get_store().delete_tournament(tournament_id)
    except GatewayError as e:
        current_app.logger.error(f"Error deleting tournament: {e.message}")
        flash("Failed to delete tournament.", "danger")
        return redirect(url_for(".view_tournament", tournament_id=tournament_id))

    flash("Tournament deleted.", "success")
    return redirect(url_for(".list_tournaments"))


@bp.route("/<string:tournament_id>/players", methods=["POST"])
def register_player(tournament_id: str) -> Any:
    """Add a player to the tournament roster."""
    store = get_store()
    form = RegisterPlayerForm()
    form.player_id.choices = [(p["id"], p["name"]) for p in store.players()]

    if form.validate_on_submit():
        try:
            store.register_player(tournament_id, form.player_id.data)
            flash("Player added.", "success")
        except GatewayError as e:
            current_app.logger.error(f"Error registering player: {e.message}")
            flash("Failed to add player.", "danger")
    else:
        flash("Please choose a player to add.", "danger")

    return redirect(url_for(".view_tournament", tournament_id=tournament_id, tab="players"))


@bp.route("/<string:tournament_id>/players/<string:player_id>/remove", methods=["POST"])
def remove_player(tournament_id: str, player_id: str) -> Any:
    """Remove a player from the tournament roster."""
    store = get_store()
    player_name = next(
        (
            p["name"]
            for p in store.tournament_players(tournament_id)
            if p["id"] == player_id
        ),
        "Player",
    )
    try:
        store.remove_player(tournament_id, player_id)
        flash(f"{player_name} removed.", "success")
    except GatewayError as e:
        current_app.logger.error(f"Error removing player: {e.message}")
        flash("Failed to remove player.", "danger")

    return redirect(url_for(".view_tournament", tournament_id=tournament_id, tab="players"))


@bp.route(
    "/<string:tournament_id>/scorecard/<string:player_id>/holes/<int:hole>",
    methods=["POST"],
)
def record_score(tournament_id: str, player_id: str, hole: int) -> Any:
    """Save the stroke count posted by a scorecard +/- button."""
    form = ScoreForm()
    back = url_for(
        ".view_tournament", tournament_id=tournament_id, player_id=player_id
    )

    if not 1 <= hole <= HOLE_COUNT:
        flash(f"Hole {hole} does not exist.", "danger")
        return redirect(back)

    if not form.validate_on_submit():
        for error in form.strokes.errors:
            flash(error, "warning")
        return redirect(back)

    try:
        get_store().record_score(tournament_id, player_id, hole, form.strokes.data)
    except GatewayError as e:
        current_app.logger.error(f"Error recording score: {e.message}")
        flash(f"Failed to save score for hole {hole}.", "danger")

    return redirect(back)
