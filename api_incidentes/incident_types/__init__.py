"""Blueprint for the incident types API (``/api-incidentes/v1/tipos-incidentes``)."""

from flask import Blueprint

bp = Blueprint('incident_types', __name__, url_prefix='/api-incidentes/v1/tipos-incidentes')

from . import routes  # noqa: F401,E402
