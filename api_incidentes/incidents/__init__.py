"""Blueprint for the incidents API.

Besides CRUD, incidents expose one assignment endpoint per relation
(citizen, team, state, type, location):
``POST /api-incidentes/v1/incidentes/<id>/asignar-.../<related_id>``.
"""

from flask import Blueprint

bp = Blueprint('incidents', __name__, url_prefix='/api-incidentes/v1/incidentes')

from . import routes  # noqa: F401,E402
