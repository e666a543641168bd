"""Blueprint for the incident states API.

Registered in ``api_incidentes/__init__.py``; every route lives under
``/api-incidentes/v1/estados-incidentes``.
"""

from flask import Blueprint

bp = Blueprint('incident_states', __name__, url_prefix='/api-incidentes/v1/estados-incidentes')

from . import routes  # noqa: F401,E402
