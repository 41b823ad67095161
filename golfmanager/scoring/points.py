"""Per-hole scoring rules."""

from __future__ import annotations

from golfmanager.core.constants import PAR_PER_HOLE

NO_VALUE = "—"

# Points awarded by strokes relative to par, clamped to [-2, +2]
_STABLEFORD_TABLE = {-2: 4, -1: 3, 0: 2, 1: 1, 2: 0}


def stableford_points(strokes: int, par: int = PAR_PER_HOLE) -> int:
    """Return the stableford points for one hole.

    Eagle or better scores 4, birdie 3, par 2, bogey 1, anything worse 0.
    """
    diff = max(-2, min(2, strokes - par))
    return _STABLEFORD_TABLE[diff]


def format_to_par(value: int | None) -> str:
    """Render a score relative to par: ``E`` for even, ``+3``, ``-2``."""
    if value is None:
        return NO_VALUE
    if value == 0:
        return "E"
    if value > 0:
        return f"+{value}"
    return str(value)


def format_value(value: int | None) -> str:
    """Render an optional total, using a dash when there is nothing to show."""
    return NO_VALUE if value is None else str(value)


def to_par_class(value: int | None) -> str:
    """CSS modifier for a to-par value: under, over or even."""
    if value is None or value == 0:
        return "even"
    return "under" if value < 0 else "over"
