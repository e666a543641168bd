# Development entry point (Flask debug server).
# In production use wsgi.py behind gunicorn (see deploy/gunicorn.conf.py).

"""Run the incidents API locally.

The configuration class is picked from the environment:

- ``APP_ENV=production`` or ``FLASK_ENV=production`` -> ProductionConfig
- anything else -> DevelopmentConfig.
"""

import os

from env_loader import load_dotenv_like

load_dotenv_like()

from api_incidentes import create_app  # noqa: E402
from api_incidentes.config import DevelopmentConfig, ProductionConfig  # noqa: E402


def _select_config_class() -> type:
    env = (os.getenv('APP_ENV') or os.getenv('FLASK_ENV') or 'development').lower()
    if env.startswith('prod'):
        return ProductionConfig
    return DevelopmentConfig


def main() -> None:
    app = create_app(_select_config_class())
    app.run(host='0.0.0.0', port=int(os.environ.get('PORT', 8080)), debug=app.config.get('DEBUG', True))


if __name__ == '__main__':
    main()
