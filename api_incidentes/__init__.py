"""Flask application factory for the incidents API."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from flask import Flask, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from .config import Config
from .extensions import db, init_extensions

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _configure_logging(app: Flask) -> None:
    """Apply LOG_LEVEL / LOG_FILE from the config to the root logger."""
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)

    log_file = app.config.get("LOG_FILE")
    if log_file and not any(getattr(h, "baseFilename", None) == log_file for h in root.handlers):
        handler = RotatingFileHandler(
            log_file,
            maxBytes=int(app.config.get("LOG_FILE_MAX_BYTES", 5 * 1024 * 1024)),
            backupCount=int(app.config.get("LOG_FILE_BACKUP_COUNT", 3)),
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)


def _register_blueprints(app: Flask) -> None:
    """Register all API blueprints used by the project."""
    from .incident_states import bp as incident_states_bp
    from .incident_types import bp as incident_types_bp
    from .incidents import bp as incidents_bp
    from .locations import bp as locations_bp

    app.register_blueprint(incident_states_bp)
    app.register_blueprint(incident_types_bp)
    app.register_blueprint(locations_bp)
    app.register_blueprint(incidents_bp)


def _register_common_routes(app: Flask) -> None:
    @app.get("/health")
    def health():
        return ("", 204)

    @app.get("/ready")
    def ready():
        try:
            db.session.execute(text("SELECT 1"))
        except SQLAlchemyError:
            app.logger.exception("Database not reachable")
            db.session.rollback()
            return jsonify(status="unavailable"), 503
        return jsonify(status="ok"), 200


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(404)
    def _not_found(_err):
        return jsonify(error="Recurso no encontrado"), 404

    @app.errorhandler(405)
    def _method_not_allowed(_err):
        return jsonify(error="Método no permitido"), 405

    @app.errorhandler(500)
    def _internal_error(_err):
        return jsonify(error="Error interno del servidor."), 500


def create_app(config_class: type[Config] = Config) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.json.ensure_ascii = False

    _configure_logging(app)

    from . import db_compat  # noqa: F401  (SQLite foreign keys)

    init_extensions(app)

    if app.config.get("AUTO_CREATE_SCHEMA", True):
        with app.app_context():
            from . import models  # noqa: F401
            db.create_all()

    from .commands import register_commands

    _register_blueprints(app)
    _register_common_routes(app)
    _register_error_handlers(app)
    register_commands(app)
    return app
