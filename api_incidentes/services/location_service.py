"""Service layer for incident locations.

A location is a street/number/comuna/region tuple. All four fields are
mandatory; the house number is checked first, like the registration forms
of the platform do.
"""

from __future__ import annotations

from ..models import SHORT_TEXT, Location
from .base import EntityService
from .validation import require_house_number, require_text


class LocationService(EntityService):
    model = Location
    fields = ("street", "number", "district", "region")
    not_found_message = "Ubicacion no encontrada con ID: {id}"
    in_use_message = "La Ubicacion está asignada a uno o más incidentes y no puede eliminarse"

    def validate(self, entity: Location) -> None:
        require_house_number(entity.number)
        require_text(
            entity.street,
            SHORT_TEXT,
            "El nombre de la calle es requerido",
            "El nombre de la calle no puede exceder 50 caracteres",
        )
        require_text(
            entity.district,
            SHORT_TEXT,
            "El nombre de la comuna es requerido",
            "El nombre de la comuna no puede exceder 50 caracteres",
        )
        require_text(
            entity.region,
            SHORT_TEXT,
            "El nombre de la Región es requerido",
            "El nombre de la Región no puede exceder 50 caracteres",
        )
