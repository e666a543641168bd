"""Flask CLI commands."""

from __future__ import annotations

import click
from flask.cli import with_appcontext

from .extensions import db
from .models import IncidentState, IncidentType
from .services import get_services

DEFAULT_INCIDENT_STATES = ("Abierto", "En curso", "Cerrado")
DEFAULT_INCIDENT_TYPES = ("Incendio", "Accidente de tránsito", "Rescate")


@click.command('init-db')
@with_appcontext
def init_db_command() -> None:
    """Create the tables that do not exist yet."""
    from . import models  # noqa: F401

    db.create_all()
    click.echo('Database tables created.')


@click.command('seed-catalogs')
@with_appcontext
def seed_catalogs_command() -> None:
    """Insert the default incident states and types, skipping existing ones."""
    services = get_services()

    known_states = {s.detail for s in services.incident_states.find_all()}
    for detail in DEFAULT_INCIDENT_STATES:
        if detail not in known_states:
            services.incident_states.save(IncidentState(detail=detail))

    known_types = {t.name for t in services.incident_types.find_all()}
    for name in DEFAULT_INCIDENT_TYPES:
        if name not in known_types:
            services.incident_types.save(IncidentType(name=name))

    click.echo(
        f'Catalogs ready: {len(services.incident_states.find_all())} states, '
        f'{len(services.incident_types.find_all())} types.'
    )


def register_commands(app) -> None:
    app.cli.add_command(init_db_command)
    app.cli.add_command(seed_catalogs_command)
