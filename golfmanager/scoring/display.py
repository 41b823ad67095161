"""Presentational helpers for player avatars."""

from __future__ import annotations

AVATAR_COLORS = (
    "emerald",
    "teal",
    "green",
    "cyan",
    "lime",
    "sky",
    "indigo",
    "violet",
)


def player_initials(name: str) -> str:
    """Initials of the first and last word, or the first two letters."""
    parts = name.strip().split()
    if len(parts) >= 2:
        return (parts[0][0] + parts[-1][0]).upper()
    return name.strip()[:2].upper()


def avatar_color(name: str) -> str:
    """Pick a stable palette colour for a name."""
    total = 0
    for char in name:
        total = (total + ord(char)) % len(AVATAR_COLORS)
    return AVATAR_COLORS[total]
