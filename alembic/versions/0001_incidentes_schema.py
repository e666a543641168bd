"""incidents schema

Revision ID: 0001_incidentes_schema
Revises:
Create Date: 2026-10-19

Creates the incidents table and the five tables it references: citizens,
teams, incident_states, incident_types and locations. Downgrade drops them
in reverse dependency order.
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = '0001_incidentes_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'citizens',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=100), nullable=True),
        sa.Column('phone', sa.String(length=20), nullable=True),
    )
    op.create_table(
        'teams',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=100), nullable=True),
    )
    op.create_table(
        'incident_states',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('detail', sa.String(length=50), nullable=False),
    )
    op.create_table(
        'incident_types',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=50), nullable=False),
    )
    op.create_table(
        'locations',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('street', sa.String(length=50), nullable=False),
        sa.Column('number', sa.Integer(), nullable=False),
        sa.Column('district', sa.String(length=50), nullable=False),
        sa.Column('region', sa.String(length=50), nullable=False),
    )
    op.create_table(
        'incidents',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(length=50), nullable=True),
        sa.Column('detail', sa.String(length=400), nullable=True),
        sa.Column('citizen_id', sa.Integer(), sa.ForeignKey('citizens.id'), nullable=True),
        sa.Column('team_id', sa.Integer(), sa.ForeignKey('teams.id'), nullable=True),
        sa.Column('state_id', sa.Integer(), sa.ForeignKey('incident_states.id'), nullable=True),
        sa.Column('type_id', sa.Integer(), sa.ForeignKey('incident_types.id'), nullable=True),
        sa.Column('location_id', sa.Integer(), sa.ForeignKey('locations.id'), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_incidents_created_at', 'incidents', ['created_at'])
    for column in ('citizen_id', 'team_id', 'state_id', 'type_id', 'location_id'):
        op.create_index(f'ix_incidents_{column}', 'incidents', [column])


def downgrade():
    for column in ('citizen_id', 'team_id', 'state_id', 'type_id', 'location_id'):
        op.drop_index(f'ix_incidents_{column}', table_name='incidents')
    op.drop_index('ix_incidents_created_at', table_name='incidents')
    op.drop_table('incidents')
    op.drop_table('locations')
    op.drop_table('incident_types')
    op.drop_table('incident_states')
    op.drop_table('teams')
    op.drop_table('citizens')
