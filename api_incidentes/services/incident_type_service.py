"""Service layer for incident types (incident categories)."""

from __future__ import annotations

from ..models import SHORT_TEXT, IncidentType
from .base import EntityService
from .validation import require_text


class IncidentTypeService(EntityService):
    model = IncidentType
    fields = ("name",)
    not_found_message = "Tipo de incidente no encontrado con ID: {id}"
    in_use_message = "El Tipo de incidente está asignado a uno o más incidentes y no puede eliminarse"

    def validate(self, entity: IncidentType) -> None:
        require_text(
            entity.name,
            SHORT_TEXT,
            "El nombre del Tipo de incidente es requerido",
            "El nombre no puede exceder los 50 caracteres",
        )
