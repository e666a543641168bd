"""
Flask extension objects.

Extensions live in their own module so that models, services and
blueprints can import them without circular imports, and so tests can
bind them to a freshly built application.
"""

from __future__ import annotations

from flask import Flask
from flask_sqlalchemy import SQLAlchemy

# Bound to the application inside create_app() (see api_incidentes/__init__.py).
db = SQLAlchemy()


def init_services(app: Flask) -> None:
    """Build the service registry for this app and keep it in ``app.extensions``."""
    from .services import build_services

    app.extensions["incidentes_services"] = build_services(
        db.session,
        atomic_incident_save=bool(app.config.get("INCIDENT_SAVE_ATOMIC", True)),
    )


def init_extensions(app: Flask) -> None:
    """Init all Flask extensions in one place."""
    db.init_app(app)
    init_services(app)
