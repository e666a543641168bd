"""Routes for incident types."""

from __future__ import annotations

from flask import Response, jsonify

from ..helpers import api_errors, load_payload
from ..schemas import IncidentTypeSchema
from ..services import get_services

from . import bp

NOT_FOUND_MESSAGE = "Tipo Incidente no encontrado"


@bp.get("")
@api_errors()
def list_incident_types():
    types = get_services().incident_types.find_all()
    if not types:
        return Response(status=204)
    return jsonify([t.to_dict() for t in types]), 200


@bp.get("/<int:type_id>")
@api_errors(NOT_FOUND_MESSAGE)
def get_incident_type(type_id: int):
    incident_type = get_services().incident_types.find_by_id(type_id)
    return jsonify(incident_type.to_dict()), 200


@bp.post("")
@api_errors(NOT_FOUND_MESSAGE)
def create_incident_type():
    payload = load_payload(IncidentTypeSchema)
    incident_type = get_services().incident_types.save(payload.to_entity())
    return jsonify({"message": "Tipo Incidente creado con éxito.", "id": incident_type.id}), 201


@bp.put("/<int:type_id>")
@api_errors(NOT_FOUND_MESSAGE)
def update_incident_type(type_id: int):
    payload = load_payload(IncidentTypeSchema)
    incident_type = get_services().incident_types.update(payload.to_entity(), type_id)
    return jsonify({"message": "Actualizado con éxito", "id": incident_type.id}), 200


@bp.delete("/<int:type_id>")
@api_errors(NOT_FOUND_MESSAGE)
def delete_incident_type(type_id: int):
    get_services().incident_types.delete(type_id)
    return jsonify({"message": "Tipo Incidente eliminado con éxito.", "id": type_id}), 200
