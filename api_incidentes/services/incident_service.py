"""Service layer for incidents.

Creating an incident also persists everything it points at: citizen, team,
incident state, location and incident type. Each related payload either
references an existing row by ``id`` or is created on the fly (states,
locations and types through their own services, so they are validated the
same way as when created directly). Fields sent next to an ``id`` are
merged into that row, again through its service.

By default the whole cascade is one transaction. With
``atomic_save=False`` every related row is committed as soon as it is
saved, so a failure on the incident itself leaves those rows behind.
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from ..models import LONG_TEXT, SHORT_TEXT, Citizen, Incident, Team
from .base import EntityService
from .errors import NotFoundError, ValidationError
from .validation import is_row_id, limit_text

logger = logging.getLogger(__name__)


class IncidentService(EntityService):
    model = Incident
    fields = ("title", "detail")
    not_found_message = "No se encontró Incidente con ID: {id}"
    #: Assignment routes report a missing incident with a fixed text.
    assignment_not_found_message = "Incidente no encontrado"
    #: Columns of citizens and teams copied from a payload that references them by id.
    external_fields = {Citizen: ("name", "phone"), Team: ("name",)}

    def __init__(self, session, state_service, location_service, type_service, atomic_save: bool = True) -> None:
        super().__init__(session)
        self.state_service = state_service
        self.location_service = location_service
        self.type_service = type_service
        self.atomic_save = atomic_save

    def validate(self, entity: Incident) -> None:
        limit_text(entity.title, SHORT_TEXT, "El Titulo no puede exceder 50 caracteres")
        limit_text(entity.detail, LONG_TEXT, "El detalle no puede exceder 400 caracteres")

    # ------------------------------------------------------------------
    # CRUD

    def save(self, incident: Incident) -> Incident:
        """Persist the related rows, then the incident.

        Any failure is reported as a single ``ValidationError`` prefixed with
        ``Error al guardar el incidente``.
        """
        commit_each = not self.atomic_save
        try:
            citizen = self._resolve_external(Citizen, incident.citizen, "El ciudadano", commit_each)
            team = self._resolve_external(Team, incident.team, "El equipo", commit_each)
            state = self._resolve(self.state_service, incident.state, "El estado de incidente", commit_each)
            location = self._resolve(self.location_service, incident.location, "La ubicación", commit_each)
            incident_type = self._resolve(self.type_service, incident.type, "El tipo de incidente", commit_each)

            incident.citizen = citizen
            incident.team = team
            incident.state = state
            incident.location = location
            incident.type = incident_type

            self.validate(incident)
            self.session.add(incident)
            self.session.commit()
        except (NotFoundError, ValidationError) as exc:
            self.session.rollback()
            logger.warning("Incident not saved (atomic=%s): %s", self.atomic_save, exc)
            raise ValidationError(f"Error al guardar el incidente: {exc}") from exc
        except SQLAlchemyError:
            self.session.rollback()
            raise

        logger.info("Incident %s created", incident.id)
        return incident

    def update(self, incident: Incident, incident_id: int) -> Incident:
        """Merge the non-null parts of ``incident`` into the stored one.

        Related entities present in the payload are resolved the same way as
        on creation and replace the stored references. Everything is written
        with a single commit.
        """
        existing = self.find_by_id(incident_id)
        try:
            if incident.state is not None:
                existing.state = self._resolve(self.state_service, incident.state, "El estado de incidente", False)
            if incident.location is not None:
                existing.location = self._resolve(self.location_service, incident.location, "La ubicación", False)
            if incident.type is not None:
                existing.type = self._resolve(self.type_service, incident.type, "El tipo de incidente", False)
            if incident.team is not None:
                existing.team = self._resolve_external(Team, incident.team, "El equipo", False)
            if incident.citizen is not None:
                existing.citizen = self._resolve_external(Citizen, incident.citizen, "El ciudadano", False)

            for name, value in self.changes(incident).items():
                setattr(existing, name, value)

            self.validate(existing)
            self.session.commit()
        except (NotFoundError, ValidationError) as exc:
            self.session.rollback()
            raise ValidationError(f"Error al actualizar incidente: {exc}") from exc
        except SQLAlchemyError:
            self.session.rollback()
            raise

        logger.info("Incident %s updated", incident_id)
        return existing

    # ------------------------------------------------------------------
    # Assignments

    def assign_citizen(self, incident_id: int, citizen_id: int) -> Incident:
        incident = self._get_incident(incident_id)
        citizen = self._get_external(Citizen, citizen_id, "Ciudadano no encontrado")
        return self._assign(incident, "citizen", citizen)

    def assign_team(self, incident_id: int, team_id: int) -> Incident:
        incident = self._get_incident(incident_id)
        team = self._get_external(Team, team_id, "Equipo no encontrado")
        return self._assign(incident, "team", team)

    def assign_incident_state(self, incident_id: int, state_id: int) -> Incident:
        incident = self._get_incident(incident_id)
        return self._assign(incident, "state", self.state_service.find_by_id(state_id))

    def assign_incident_type(self, incident_id: int, type_id: int) -> Incident:
        incident = self._get_incident(incident_id)
        return self._assign(incident, "type", self.type_service.find_by_id(type_id))

    def assign_location(self, incident_id: int, location_id: int) -> Incident:
        incident = self._get_incident(incident_id)
        return self._assign(incident, "location", self.location_service.find_by_id(location_id))

    # ------------------------------------------------------------------
    # Helpers

    def _assign(self, incident: Incident, attribute: str, related) -> Incident:
        setattr(incident, attribute, related)
        self.session.commit()
        logger.info("Incident %s: %s set to %s", incident.id, attribute, related.id)
        return incident

    def _get_incident(self, incident_id: int) -> Incident:
        return self._get_external(Incident, incident_id, self.assignment_not_found_message)

    def _get_external(self, model, entity_id: int, message: str):
        entity = self.session.get(model, entity_id) if is_row_id(entity_id) else None
        if entity is None:
            raise NotFoundError(message)
        return entity

    def _flush_or_commit(self, commit: bool) -> None:
        if commit:
            self.session.commit()
        else:
            self.session.flush()

    def _resolve(self, service: EntityService, ref, label: str, commit: bool):
        """Return the row ``ref`` stands for.

        ``ref`` without id is created through ``service``. With an id, the
        existing row is used; any other field present in ``ref`` is merged
        into it through ``service.update``, so the same rules apply.
        """
        if ref is None:
            raise ValidationError(f"{label} es requerido")
        if ref.id is None:
            return service.save(ref, commit=commit)
        if service.changes(ref):
            return service.update(ref, ref.id, commit=commit)
        return service.find_by_id(ref.id)

    def _resolve_external(self, model, ref: Optional[object], label: str, commit: bool):
        """Same as :meth:`_resolve` for citizens and teams, which have no rules here."""
        if ref is None:
            raise ValidationError(f"{label} es requerido")
        if ref.id is None:
            self.session.add(ref)
            self._flush_or_commit(commit)
            return ref

        existing = self._get_external(model, ref.id, f"{label} con ID {ref.id} no existe")
        changed = False
        for name in self.external_fields[model]:
            value = getattr(ref, name)
            if value is not None:
                setattr(existing, name, value)
                changed = True
        if changed:
            self._flush_or_commit(commit)
        return existing
