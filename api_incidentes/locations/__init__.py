"""Blueprint for the locations API.

The prefix is ``/api-incidente`` (singular), unlike the other resources.
Existing clients call it that way, so it stays.
"""

from flask import Blueprint

bp = Blueprint('locations', __name__, url_prefix='/api-incidente/v1/ubicaciones')

from . import routes  # noqa: F401,E402
