"""WSGI entry point for production.

Used by gunicorn:
    gunicorn -c deploy/gunicorn.conf.py wsgi:app
"""

import os

from env_loader import load_dotenv_like

load_dotenv_like()

from api_incidentes import create_app  # noqa: E402
from api_incidentes.config import DevelopmentConfig, ProductionConfig, TestingConfig  # noqa: E402

CONFIG_CLASSES = {
    "prod": ProductionConfig,
    "production": ProductionConfig,
    "dev": DevelopmentConfig,
    "development": DevelopmentConfig,
    "test": TestingConfig,
    "testing": TestingConfig,
}


def get_config_class():
    """APP_CONFIG selects the config class; unknown values fall back to production."""
    return CONFIG_CLASSES.get(os.environ.get("APP_CONFIG", "production").lower(), ProductionConfig)


app = create_app(get_config_class())
