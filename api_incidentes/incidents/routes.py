"""Routes for incidents.

CRUD plus the five assignment endpoints. Creating an incident persists its
citizen, team, state, location and type as well (see
:meth:`IncidentService.save`). Assignment endpoints answer 404 with the
message of whichever side is missing.
"""

from __future__ import annotations

from flask import Response, jsonify

from ..helpers import api_errors, load_payload
from ..schemas import IncidentSchema
from ..services import get_services

from . import bp

NOT_FOUND_MESSAGE = "Incidente no encontrado"


@bp.get("")
@api_errors()
def list_incidents():
    """List every incident with its related entities; 204 when empty."""
    incidents = get_services().incidents.find_all()
    if not incidents:
        return Response(status=204)
    return jsonify([i.to_dict() for i in incidents]), 200


@bp.get("/<int:incident_id>")
@api_errors(NOT_FOUND_MESSAGE)
def get_incident(incident_id: int):
    incident = get_services().incidents.find_by_id(incident_id)
    return jsonify(incident.to_dict()), 200


@bp.post("")
@api_errors(NOT_FOUND_MESSAGE)
def create_incident():
    payload = load_payload(IncidentSchema)
    incident = get_services().incidents.save(payload.to_entity())
    return jsonify({"message": "Incidente creado con éxito.", "id": incident.id}), 201


@bp.put("/<int:incident_id>")
@api_errors(NOT_FOUND_MESSAGE)
def update_incident(incident_id: int):
    payload = load_payload(IncidentSchema)
    incident = get_services().incidents.update(payload.to_entity(), incident_id)
    return jsonify({"message": "Actualizado con éxito", "id": incident.id}), 200


@bp.delete("/<int:incident_id>")
@api_errors(NOT_FOUND_MESSAGE)
def delete_incident(incident_id: int):
    get_services().incidents.delete(incident_id)
    return jsonify({"message": "Incidente eliminado con éxito.", "id": incident_id}), 200


# -----------------------------------------------------------------------------
# Assignments


@bp.post("/<int:incident_id>/asignar-ciudadano/<int:citizen_id>")
@api_errors()
def assign_citizen(incident_id: int, citizen_id: int):
    get_services().incidents.assign_citizen(incident_id, citizen_id)
    return jsonify({"message": "Ciudadano asignado al Incidente exitosamente"}), 200


@bp.post("/<int:incident_id>/asignar-estado-incidente/<int:state_id>")
@api_errors()
def assign_incident_state(incident_id: int, state_id: int):
    get_services().incidents.assign_incident_state(incident_id, state_id)
    return jsonify({"message": "Estado Incidente asignado al Incidente exitosamente"}), 200


@bp.post("/<int:incident_id>/asignar-tipo-incidente/<int:type_id>")
@api_errors()
def assign_incident_type(incident_id: int, type_id: int):
    get_services().incidents.assign_incident_type(incident_id, type_id)
    return jsonify({"message": "Tipo Incidente asignado al Incidente exitosamente"}), 200


@bp.post("/<int:incident_id>/asignar-equipo/<int:team_id>")
@api_errors()
def assign_team(incident_id: int, team_id: int):
    get_services().incidents.assign_team(incident_id, team_id)
    return jsonify({"message": "Equipo asignado al Incidente exitosamente"}), 200


@bp.post("/<int:incident_id>/asignar-ubicacion/<int:location_id>")
@api_errors()
def assign_location(incident_id: int, location_id: int):
    get_services().incidents.assign_location(incident_id, location_id)
    return jsonify({"message": "Ubicacion asignada al incidente exitosamente"}), 200
