"""Utility functions for the application."""

from __future__ import annotations

import datetime
import time
import uuid

NANOS_PER_SECOND = 1_000_000_000


def new_id() -> str:
    """Generate a random identifier for a new document."""
    return str(uuid.uuid4())


def now_ns() -> int:
    """Return the current time as nanoseconds since the epoch."""
    return time.time_ns()


def days_from_now_ns(days: int) -> int:
    """Return the time ``days`` from now as nanoseconds since the epoch."""
    return now_ns() + days * 86_400 * NANOS_PER_SECOND


def date_to_ns(value: datetime.date) -> int:
    """Convert a calendar date to nanoseconds at UTC midnight."""
    midnight = datetime.datetime.combine(
        value, datetime.time.min, tzinfo=datetime.timezone.utc
    )
    return int(midnight.timestamp()) * NANOS_PER_SECOND


def ns_to_date(value: int) -> datetime.date:
    """Convert nanoseconds since the epoch to a UTC calendar date."""
    seconds = value // NANOS_PER_SECOND
    return datetime.datetime.fromtimestamp(seconds, tz=datetime.timezone.utc).date()


def format_ns_date(value: int | None, long: bool = False) -> str:
    """Format a nanosecond timestamp as e.g. ``Jun 01, 2025``."""
    if value is None:
        return ""
    fmt = "%B %d, %Y" if long else "%b %d, %Y"
    return ns_to_date(int(value)).strftime(fmt)
