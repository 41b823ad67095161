"""Initialize the Flask app and its extensions."""

import json
import os

import firebase_admin
from firebase_admin import credentials
from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix

from .core import constants
from .extensions import csrf


def _env_flag(name, default="false"):
    return (os.environ.get(name) or default).lower() in ["true", "1", "t"]


def _init_firebase(app):
    """Initialize the Firebase Admin SDK from env, file or default credentials."""
    cred = None
    project_id = None

    # First, try to load from environment variable (for production)
    cred_json = os.environ.get("FIREBASE_CREDENTIALS_JSON")
    if cred_json:
        try:
            cred_info = json.loads(cred_json)
            project_id = cred_info.get("project_id")
            cred = credentials.Certificate(cred_info)
        except (json.JSONDecodeError, ValueError) as e:
            app.logger.error(f"Error parsing FIREBASE_CREDENTIALS_JSON: {e}")

    # If env var fails or is not present, try loading from file (for local dev)
    if not cred:
        cred_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)), "firebase_credentials.json"
        )
        if os.path.exists(cred_path):
            try:
                with open(cred_path, "r") as f:
                    cred_info = json.load(f)
                project_id = cred_info.get("project_id")
                cred = credentials.Certificate(cred_path)
            except (json.JSONDecodeError, ValueError) as e:
                app.logger.error(f"Error loading credentials from file: {e}")

    # If both methods fail, fallback to default credentials
    if not cred:
        try:
            cred = credentials.ApplicationDefault()
            project_id = os.environ.get("FIREBASE_PROJECT_ID")
        except Exception as e:
            app.logger.error(
                f"Could not find any valid credentials (env, file, or default): {e}"
            )

    if cred and not firebase_admin._apps:
        try:
            options = {"projectId": project_id} if project_id else None
            firebase_admin.initialize_app(cred, options)
        except ValueError:
            # This can happen if the app is already initialized, which is fine.
            app.logger.info("Firebase app already initialized.")


def create_app(test_config=None):
    """Create and configure an instance of the Flask application."""
    app = Flask(
        __name__,
        instance_relative_config=True,
        static_folder="static",
        static_url_path="/static",
    )

    # Load configuration
    app.config.from_mapping(
        SECRET_KEY=os.environ.get("SECRET_KEY") or "dev",
        SEED_DEMO_DATA=_env_flag("SEED_DEMO_DATA"),
        LEADERBOARD_CLIENT_SORT=_env_flag("LEADERBOARD_CLIENT_SORT"),
        SEED_MAX_WORKERS=int(
            os.environ.get("SEED_MAX_WORKERS") or constants.SEED_MAX_WORKERS
        ),
        CACHE_STALE_TOURNAMENTS=float(
            os.environ.get("CACHE_STALE_TOURNAMENTS") or constants.STALE_TOURNAMENTS
        ),
        CACHE_STALE_PLAYERS=float(
            os.environ.get("CACHE_STALE_PLAYERS") or constants.STALE_PLAYERS
        ),
        CACHE_STALE_ROSTER=float(
            os.environ.get("CACHE_STALE_ROSTER") or constants.STALE_ROSTER
        ),
        CACHE_STALE_SCORES=float(
            os.environ.get("CACHE_STALE_SCORES") or constants.STALE_SCORES
        ),
        CACHE_STALE_LEADERBOARD=float(
            os.environ.get("CACHE_STALE_LEADERBOARD") or constants.STALE_LEADERBOARD
        ),
    )

    if test_config:
        app.config.update(test_config)

    # Initialize Firebase Admin SDK only if not in testing mode
    if not app.config.get("TESTING"):
        _init_firebase(app)

    # Initialize extensions
    csrf.init_app(app)

    from .data import EXTENSION_KEY as STORE_KEY
    from .data import GolfStore
    from .gateway import FirestoreGateway

    app.extensions[STORE_KEY] = GolfStore(
        FirestoreGateway(),
        staleness={
            "tournaments": app.config["CACHE_STALE_TOURNAMENTS"],
            "tournament": app.config["CACHE_STALE_TOURNAMENTS"],
            "players": app.config["CACHE_STALE_PLAYERS"],
            "player": app.config["CACHE_STALE_PLAYERS"],
            "tournamentPlayers": app.config["CACHE_STALE_ROSTER"],
            "playerTournaments": app.config["CACHE_STALE_ROSTER"],
            "scores": app.config["CACHE_STALE_SCORES"],
            "leaderboard": app.config["CACHE_STALE_LEADERBOARD"],
        },
    )

    from . import seed

    app.extensions[seed.EXTENSION_KEY] = seed.DemoSeeder(
        app.extensions[STORE_KEY], max_workers=app.config["SEED_MAX_WORKERS"]
    )
    seed.init_app(app)

    # Register blueprints
    from . import main as main_bp

    app.register_blueprint(main_bp.bp)

    from . import tournament as tournament_bp

    app.register_blueprint(tournament_bp.bp)

    from . import player as player_bp

    app.register_blueprint(player_bp.bp)

    from . import leaderboard as leaderboard_bp

    app.register_blueprint(leaderboard_bp.bp)

    from . import error_handlers

    app.register_blueprint(error_handlers.error_handlers_bp)

    from .context_processors import TEMPLATE_FILTERS, inject_global_context

    app.context_processor(inject_global_context)
    for name, func in TEMPLATE_FILTERS.items():
        app.add_template_filter(func, name)

    @app.route("/health")
    def health_check():
        """Perform a simple health check."""
        return "OK", 200

    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)

    return app
