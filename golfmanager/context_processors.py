"""Context processors and template filters for the Flask application."""

from __future__ import annotations

import os
from datetime import datetime
from typing import Any

from .gateway.models import FORMAT_LABELS, STATUS_LABELS, TournamentFormat, TournamentStatus
from .scoring import (
    avatar_color,
    format_to_par,
    format_value,
    player_initials,
    to_par_class,
)
from .utils import format_ns_date

VERSION_THRESHOLD = 10
VERSION_SHORT_LENGTH = 7


def inject_global_context() -> dict[str, Any]:
    """Injects global context variables into templates."""
    # APP_VERSION wins over a build commit hash; fall back to "dev"
    version = (
        os.environ.get("APP_VERSION")
        or os.environ.get("GITHUB_SHA")
        or os.environ.get("RENDER_GIT_COMMIT")
        or "dev"
    )

    # If it's a long git hash, shorten it
    if len(version) > VERSION_THRESHOLD and version != "dev":
        version = version[:VERSION_SHORT_LENGTH]

    return {
        "current_year": datetime.now().year,
        "app_version": version,
    }


def format_label(value: str | None) -> str:
    """Display name of a tournament format."""
    try:
        return FORMAT_LABELS[TournamentFormat(value)]
    except ValueError:
        return value or ""


def status_label(value: str | None) -> str:
    """Display name of a tournament status."""
    try:
        return STATUS_LABELS[TournamentStatus(value)]
    except ValueError:
        return value or ""


TEMPLATE_FILTERS = {
    "ns_date": format_ns_date,
    "to_par": format_to_par,
    "to_par_class": to_par_class,
    "value_or_dash": format_value,
    "initials": player_initials,
    "avatar_color": avatar_color,
    "format_label": format_label,
    "status_label": status_label,
}
