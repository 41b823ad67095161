"""Routes for the player blueprint."""

from __future__ import annotations

from typing import Any

from flask import current_app, flash, redirect, render_template, request, url_for

from golfmanager.data import get_store
from golfmanager.errors import GatewayError

from . import bp
from .forms import PlayerForm
from .utils import search_players


@bp.route("/", methods=["GET", "POST"])
def list_players() -> Any:
    """List and search players; POST adds a new one."""
    store = get_store()
    form = PlayerForm()

    if form.validate_on_submit():
        try:
            store.create_player(form.name.data, form.handicap.data)
            flash(f"{form.name.data} added.", "success")
            return redirect(url_for(".list_players"))
        except GatewayError as e:
            current_app.logger.error(f"Error creating player: {e.message}")
            flash("Failed to add player.", "danger")
    elif request.method == "POST":
        for errors in form.errors.values():
            for error in errors:
                flash(error, "danger")

    query = request.args.get("q", "")
    players = store.players()
    return render_template(
        "player/list.html",
        form=form,
        players=search_players(players, query),
        total=len(players),
        query=query,
    )


@bp.route("/<string:player_id>", methods=["GET"])
def view_player(player_id: str) -> Any:
    """Show a player's profile and tournament history."""
    store = get_store()
    player = store.player(player_id)
    history = sorted(
        store.player_tournaments(player_id),
        key=lambda t: t.get("date") or 0,
        reverse=True,
    )
    return render_template("player/view.html", player=player, history=history)


@bp.route("/<string:player_id>/edit", methods=["GET", "POST"])
def edit_player(player_id: str) -> Any:
    """Edit a player's name and handicap."""
    store = get_store()
    player = store.player(player_id)
    form = PlayerForm(data=player) if request.method == "GET" else PlayerForm()

    if form.validate_on_submit():
        try:
            store.update_player(
                player_id, name=form.name.data, handicap=form.handicap.data
            )
            flash("Player updated.", "success")
            return redirect(url_for(".view_player", player_id=player_id))
        except GatewayError as e:
            current_app.logger.error(f"Error updating player: {e.message}")
            flash("Failed to update player.", "danger")

    return render_template("player/edit.html", form=form, player=player)


@bp.route("/<string:player_id>/delete", methods=["POST"])
def delete_player(player_id: str) -> Any:
    """Delete a player along with their registrations and scores."""
    try:
        get_store().delete_player(player_id)
    except GatewayError as e:
        current_app.logger.error(f"Error deleting player: {e.message}")
        flash("Failed to delete player.", "danger")
        return redirect(url_for(".view_player", player_id=player_id))

    flash("Player deleted.", "success")
    return redirect(url_for(".list_players"))
