"""
Database models.

An ``Incident`` points at exactly one citizen, team, incident state,
incident type and location. All relationships are many-to-one and are
navigated only from the incident side; none of the referenced tables keeps
a back-reference collection.

``Citizen`` and ``Team`` belong to other services of the platform. They are
mapped here only so incidents can reference and create them.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from .extensions import db


# Column sizes mirror the validation limits in services/validation.py.
SHORT_TEXT = 50
LONG_TEXT = 400


class Citizen(db.Model):
    """Citizen who reported an incident (owned by the citizens service)."""

    __tablename__ = 'citizens'
    id: int = db.Column(db.Integer, primary_key=True)
    name: str = db.Column(db.String(100), nullable=True)
    phone: str = db.Column(db.String(20), nullable=True)

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'name': self.name, 'phone': self.phone}


class Team(db.Model):
    """Response team (owned by the teams service)."""

    __tablename__ = 'teams'
    id: int = db.Column(db.Integer, primary_key=True)
    name: str = db.Column(db.String(100), nullable=True)

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'name': self.name}


class IncidentState(db.Model):
    """Short status label attachable to an incident (``Abierto``, ``Cerrado``...)."""

    __tablename__ = 'incident_states'
    id: int = db.Column(db.Integer, primary_key=True)
    detail: str = db.Column(db.String(SHORT_TEXT), nullable=False)

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'detail': self.detail}


class IncidentType(db.Model):
    """Category of an incident (``Incendio``, ``Rescate``...)."""

    __tablename__ = 'incident_types'
    id: int = db.Column(db.Integer, primary_key=True)
    name: str = db.Column(db.String(SHORT_TEXT), nullable=False)

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'name': self.name}


class Location(db.Model):
    """Street address of an incident.

    ``district`` is the *comuna*. ``number`` is the house number, a positive
    integer of at most five digits.
    """

    __tablename__ = 'locations'
    id: int = db.Column(db.Integer, primary_key=True)
    street: str = db.Column(db.String(SHORT_TEXT), nullable=False)
    number: int = db.Column(db.Integer, nullable=False)
    district: str = db.Column(db.String(SHORT_TEXT), nullable=False)
    region: str = db.Column(db.String(SHORT_TEXT), nullable=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'street': self.street,
            'number': self.number,
            'district': self.district,
            'region': self.region,
        }


class Incident(db.Model):
    """Emergency incident.

    ``title`` and ``detail`` describe the event. The five references are
    nullable at the column level; the incident service fills all of them on
    creation and each one can be reassigned later through the assignment
    endpoints.
    """

    __tablename__ = 'incidents'
    __table_args__ = (
        db.Index('ix_incidents_created_at', 'created_at'),
    )
    id: int = db.Column(db.Integer, primary_key=True)
    title: str = db.Column(db.String(SHORT_TEXT), nullable=True)
    detail: str = db.Column(db.String(LONG_TEXT), nullable=True)
    citizen_id: int = db.Column(db.Integer, db.ForeignKey('citizens.id'), nullable=True, index=True)
    team_id: int = db.Column(db.Integer, db.ForeignKey('teams.id'), nullable=True, index=True)
    state_id: int = db.Column(db.Integer, db.ForeignKey('incident_states.id'), nullable=True, index=True)
    type_id: int = db.Column(db.Integer, db.ForeignKey('incident_types.id'), nullable=True, index=True)
    location_id: int = db.Column(db.Integer, db.ForeignKey('locations.id'), nullable=True, index=True)
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # Relationships. No backrefs: navigation is one-directional.
    citizen = db.relationship('Citizen', lazy='selectin')
    team = db.relationship('Team', lazy='selectin')
    state = db.relationship('IncidentState', lazy='selectin')
    type = db.relationship('IncidentType', lazy='selectin')
    location = db.relationship('Location', lazy='selectin')

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'title': self.title,
            'detail': self.detail,
            'citizen': self.citizen.to_dict() if self.citizen else None,
            'team': self.team.to_dict() if self.team else None,
            'state': self.state.to_dict() if self.state else None,
            'type': self.type.to_dict() if self.type else None,
            'location': self.location.to_dict() if self.location else None,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }
