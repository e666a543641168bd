"""
Application configuration.

Flask configuration classes for each environment. Values come from
environment variables (optionally preloaded from ``.env`` by
``env_loader.load_dotenv_like``) so that secrets and paths stay out of
the code and switching environments only means picking another class.
"""

import os


def _env_flag(name: str, default: str) -> bool:
    return (os.environ.get(name, default) or default).strip().lower() in {"1", "true", "yes", "y"}


class Config:
    """Base configuration."""

    BASE_DIR = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))

    # Main database. SQLite file next to the project by default; point
    # DATABASE_URI at PostgreSQL in production.
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URI", f"sqlite:///{os.path.join(BASE_DIR, 'incidentes.db')}"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Create missing tables on startup. Production schemas are managed by
    # Alembic (see alembic/versions).
    AUTO_CREATE_SCHEMA = _env_flag("AUTO_CREATE_SCHEMA", "1")

    # Incident creation persists citizen, team, state, location and type
    # before the incident itself. When atomic, all of them share one
    # transaction and a failure rolls everything back; otherwise every
    # related row is committed as soon as it is saved.
    INCIDENT_SAVE_ATOMIC = _env_flag("INCIDENT_SAVE_ATOMIC", "1")

    # Logging. LOG_FILE unset means stdout only.
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FILE = os.environ.get("LOG_FILE")
    LOG_FILE_MAX_BYTES = int(os.environ.get("LOG_FILE_MAX_BYTES", 5 * 1024 * 1024))
    LOG_FILE_BACKUP_COUNT = int(os.environ.get("LOG_FILE_BACKUP_COUNT", 3))


class DevelopmentConfig(Config):
    """Development settings."""

    DEBUG = True
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG")


class TestingConfig(Config):
    """Test settings."""

    TESTING = True
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.environ.get("TEST_DATABASE_URI", "sqlite://")
    AUTO_CREATE_SCHEMA = True
    INCIDENT_SAVE_ATOMIC = True


class ProductionConfig(Config):
    """Production settings."""

    DEBUG = False
    AUTO_CREATE_SCHEMA = _env_flag("AUTO_CREATE_SCHEMA", "0")
