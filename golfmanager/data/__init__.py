"""Cached data access for the views."""

from __future__ import annotations

from flask import current_app

from .cache import QueryCache
from .store import GolfStore

EXTENSION_KEY = "golf_store"


def get_store() -> GolfStore:
    """Return the store of the current application."""
    return current_app.extensions[EXTENSION_KEY]


__all__ = ["EXTENSION_KEY", "GolfStore", "QueryCache", "get_store"]
