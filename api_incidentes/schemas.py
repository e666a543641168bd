"""Pydantic v2 contracts for API request bodies.

The schemas only check the *shape* of a payload (known fields, types).
Every field is optional: required/length rules belong to the services,
which also rely on "missing means unchanged" for updates.

``to_entity`` turns a payload into a transient model instance. Top-level
ids are dropped (rows get generated ids); ids of nested relations are kept
because they mean "reuse this existing row".
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .models import Citizen, Incident, IncidentState, IncidentType, Location, Team
from .services.validation import MAX_ROW_ID


class StrictSchema(BaseModel):
    """Base strict schema: forbids unknown fields and strips strings."""

    model_config = ConfigDict(extra='forbid', str_strip_whitespace=True)


class CitizenSchema(StrictSchema):
    id: int | None = Field(default=None, ge=1, le=MAX_ROW_ID)
    name: str | None = None
    phone: str | None = None

    def to_entity(self, with_id: bool = False) -> Citizen:
        return Citizen(id=self.id if with_id else None, name=self.name, phone=self.phone)


class TeamSchema(StrictSchema):
    id: int | None = Field(default=None, ge=1, le=MAX_ROW_ID)
    name: str | None = None

    def to_entity(self, with_id: bool = False) -> Team:
        return Team(id=self.id if with_id else None, name=self.name)


class IncidentStateSchema(StrictSchema):
    id: int | None = Field(default=None, ge=1, le=MAX_ROW_ID)
    detail: str | None = None

    def to_entity(self, with_id: bool = False) -> IncidentState:
        return IncidentState(id=self.id if with_id else None, detail=self.detail)


class IncidentTypeSchema(StrictSchema):
    id: int | None = Field(default=None, ge=1, le=MAX_ROW_ID)
    name: str | None = None

    def to_entity(self, with_id: bool = False) -> IncidentType:
        return IncidentType(id=self.id if with_id else None, name=self.name)


class LocationSchema(StrictSchema):
    id: int | None = Field(default=None, ge=1, le=MAX_ROW_ID)
    street: str | None = None
    number: int | None = None
    district: str | None = None
    region: str | None = None

    def to_entity(self, with_id: bool = False) -> Location:
        return Location(
            id=self.id if with_id else None,
            street=self.street,
            number=self.number,
            district=self.district,
            region=self.region,
        )


class IncidentSchema(StrictSchema):
    """Incident payload with its related entities embedded.

    A related object holding only ``id`` references an existing row; one
    without ``id`` is created together with the incident.
    """

    id: int | None = Field(default=None, ge=1, le=MAX_ROW_ID)
    title: str | None = None
    detail: str | None = None
    citizen: CitizenSchema | None = None
    team: TeamSchema | None = None
    state: IncidentStateSchema | None = None
    type: IncidentTypeSchema | None = None
    location: LocationSchema | None = None

    def to_entity(self, with_id: bool = False) -> Incident:
        return Incident(
            id=self.id if with_id else None,
            title=self.title,
            detail=self.detail,
            citizen=self.citizen.to_entity(with_id=True) if self.citizen else None,
            team=self.team.to_entity(with_id=True) if self.team else None,
            state=self.state.to_entity(with_id=True) if self.state else None,
            type=self.type.to_entity(with_id=True) if self.type else None,
            location=self.location.to_entity(with_id=True) if self.location else None,
        )
