"""Demo data bootstrap."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from flask import current_app
from flask.cli import with_appcontext

from .services import DemoSeeder

if TYPE_CHECKING:
    from flask import Flask

EXTENSION_KEY = "demo_seeder"


def get_seeder() -> DemoSeeder:
    """Return the seeder of the current application."""
    return current_app.extensions[EXTENSION_KEY]


@click.command("seed-demo")
@with_appcontext
def seed_demo_command() -> None:
    """Load demo players, tournaments and scores into an empty store."""
    seeder = get_seeder()
    if seeder.seed_if_empty(seeder.store.gateway.get_all_tournaments()):
        click.echo("Demo data loaded.")
    else:
        click.echo("Tournaments already exist; nothing to do.")


def init_app(app: Flask) -> None:
    app.cli.add_command(seed_demo_command)


__all__ = ["DemoSeeder", "get_seeder", "init_app", "seed_demo_command"]
