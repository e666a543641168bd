"""Routes for locations.

Each location is a street address (street, number, comuna, region). The
handlers only parse the body and delegate to
:class:`~api_incidentes.services.LocationService`.
"""

from __future__ import annotations

from flask import Response, jsonify

from ..helpers import api_errors, load_payload
from ..schemas import LocationSchema
from ..services import get_services

from . import bp

NOT_FOUND_MESSAGE = "Ubicacion no encontrada"


@bp.get("")
@api_errors()
def list_locations():
    """List every location; 204 when there are none."""
    locations = get_services().locations.find_all()
    if not locations:
        return Response(status=204)
    return jsonify([loc.to_dict() for loc in locations]), 200


@bp.get("/<int:location_id>")
@api_errors(NOT_FOUND_MESSAGE)
def get_location(location_id: int):
    location = get_services().locations.find_by_id(location_id)
    return jsonify(location.to_dict()), 200


@bp.post("")
@api_errors(NOT_FOUND_MESSAGE)
def create_location():
    payload = load_payload(LocationSchema)
    location = get_services().locations.save(payload.to_entity())
    return jsonify({"message": "Ubicacion creada con éxito.", "id": location.id}), 201


@bp.put("/<int:location_id>")
@api_errors(NOT_FOUND_MESSAGE)
def update_location(location_id: int):
    """Partial update; the merged address must still be complete and valid."""
    payload = load_payload(LocationSchema)
    location = get_services().locations.update(payload.to_entity(), location_id)
    return jsonify({"message": "Actualizado con éxito", "id": location.id}), 200


@bp.delete("/<int:location_id>")
@api_errors(NOT_FOUND_MESSAGE)
def delete_location(location_id: int):
    get_services().locations.delete(location_id)
    return jsonify({"message": "Ubicacion eliminada con éxito.", "id": location_id}), 200
