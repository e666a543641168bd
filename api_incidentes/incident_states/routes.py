"""Routes for incident states.

Thin HTTP wrappers over :class:`~api_incidentes.services.IncidentStateService`.
"""

from __future__ import annotations

from flask import Response, jsonify

from ..helpers import api_errors, load_payload
from ..schemas import IncidentStateSchema
from ..services import get_services

from . import bp

NOT_FOUND_MESSAGE = "Estado Incidente no encontrado"


@bp.get("")
@api_errors()
def list_incident_states():
    """List every incident state; 204 when there are none."""
    states = get_services().incident_states.find_all()
    if not states:
        return Response(status=204)
    return jsonify([s.to_dict() for s in states]), 200


@bp.get("/<int:state_id>")
@api_errors(NOT_FOUND_MESSAGE)
def get_incident_state(state_id: int):
    state = get_services().incident_states.find_by_id(state_id)
    return jsonify(state.to_dict()), 200


@bp.post("")
@api_errors(NOT_FOUND_MESSAGE)
def create_incident_state():
    payload = load_payload(IncidentStateSchema)
    state = get_services().incident_states.save(payload.to_entity())
    return jsonify({"message": "Estado Incidente creado con éxito.", "id": state.id}), 201


@bp.put("/<int:state_id>")
@api_errors(NOT_FOUND_MESSAGE)
def update_incident_state(state_id: int):
    """Partial update: fields missing from the body keep their value."""
    payload = load_payload(IncidentStateSchema)
    state = get_services().incident_states.update(payload.to_entity(), state_id)
    return jsonify({"message": "Actualizado con éxito", "id": state.id}), 200


@bp.delete("/<int:state_id>")
@api_errors(NOT_FOUND_MESSAGE)
def delete_incident_state(state_id: int):
    get_services().incident_states.delete(state_id)
    return jsonify({"message": "Estado Incidente eliminado con éxito.", "id": state_id}), 200
