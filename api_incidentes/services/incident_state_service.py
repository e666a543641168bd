"""Service layer for incident states."""

from __future__ import annotations

from ..models import SHORT_TEXT, IncidentState
from .base import EntityService
from .validation import require_text


class IncidentStateService(EntityService):
    model = IncidentState
    fields = ("detail",)
    not_found_message = "Estado Incidente con ID {id} no encontrado"
    in_use_message = "El Estado Incidente está asignado a uno o más incidentes y no puede eliminarse"

    def validate(self, entity: IncidentState) -> None:
        require_text(
            entity.detail,
            SHORT_TEXT,
            "El detalle del estado de incidente es requerido",
            "El valor Detalle excede máximo de caracteres (50)",
        )
