"""Player blueprint."""

from flask import Blueprint

bp = Blueprint("player", __name__, url_prefix="/players")

from . import routes  # noqa: E402, F401
