"""Service layer.

Services are plain objects that receive their collaborators when they are
built. ``build_services`` wires them once per application and
``get_services`` returns the registry of the current application, which is
what routes and CLI commands use.
"""

from __future__ import annotations

from dataclasses import dataclass

from flask import current_app

from .errors import NotFoundError, ValidationError
from .incident_service import IncidentService
from .incident_state_service import IncidentStateService
from .incident_type_service import IncidentTypeService
from .location_service import LocationService

__all__ = [
    "IncidentService",
    "IncidentStateService",
    "IncidentTypeService",
    "LocationService",
    "NotFoundError",
    "ServiceRegistry",
    "ValidationError",
    "build_services",
    "get_services",
]


@dataclass(frozen=True)
class ServiceRegistry:
    incident_states: IncidentStateService
    incident_types: IncidentTypeService
    locations: LocationService
    incidents: IncidentService


def build_services(session, atomic_incident_save: bool = True) -> ServiceRegistry:
    """Create every service on top of ``session``, leaves first."""
    states = IncidentStateService(session)
    types = IncidentTypeService(session)
    locations = LocationService(session)
    incidents = IncidentService(
        session,
        state_service=states,
        location_service=locations,
        type_service=types,
        atomic_save=atomic_incident_save,
    )
    return ServiceRegistry(
        incident_states=states,
        incident_types=types,
        locations=locations,
        incidents=incidents,
    )


def get_services() -> ServiceRegistry:
    """Registry of the current application (requires an app context)."""
    return current_app.extensions["incidentes_services"]
