"""Create location tables: countries, provinces, cities

Revision ID: 001_locations
Revises:
Create Date: 2026-10-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_locations'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the country -> province -> city hierarchy."""

    # ==========================================
    # countries
    # ==========================================
    op.create_table(
        'countries',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('slug', sa.String(255), nullable=False),
        sa.Column('code', sa.String(3), nullable=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.UniqueConstraint('code', name='uq_countries_code'),
    )
    op.create_index('ix_countries_slug', 'countries', ['slug'], unique=True)

    # ==========================================
    # provinces - States/Provinces/Regions
    # ==========================================
    op.create_table(
        'provinces',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('country_id', sa.Integer(), sa.ForeignKey('countries.id', ondelete='CASCADE'), nullable=False),
        sa.Column('slug', sa.String(255), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('code', sa.String(10), nullable=True),
        sa.Column('city_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.UniqueConstraint('country_id', 'slug', name='uq_provinces_country_slug'),
    )
    op.create_index('ix_provinces_country_id', 'provinces', ['country_id'])
    op.create_index('ix_provinces_slug_country', 'provinces', ['slug', 'country_id'])

    # ==========================================
    # cities
    # ==========================================
    op.create_table(
        'cities',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('country_id', sa.Integer(), sa.ForeignKey('countries.id', ondelete='CASCADE'), nullable=False),
        sa.Column('province_id', sa.Integer(), sa.ForeignKey('provinces.id', ondelete='SET NULL'), nullable=True),
        sa.Column('slug', sa.String(255), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('place_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.UniqueConstraint('country_id', 'slug', name='uq_cities_country_slug'),
    )
    op.create_index('ix_cities_country_id', 'cities', ['country_id'])
    op.create_index('ix_cities_province_id', 'cities', ['province_id'])


def downgrade() -> None:
    """Drop location tables in reverse order."""
    op.drop_table('cities')
    op.drop_table('provinces')
    op.drop_table('countries')
