"""Utility functions for player views."""

from __future__ import annotations

from typing import Any


def search_players(
    players: list[dict[str, Any]], query: str | None = None
) -> list[dict[str, Any]]:
    """Players whose name contains ``query`` (case-insensitive), sorted by name."""
    needle = (query or "").strip().lower()
    matches = [p for p in players if needle in (p.get("name") or "").lower()]
    return sorted(matches, key=lambda p: (p.get("name") or "").lower())
