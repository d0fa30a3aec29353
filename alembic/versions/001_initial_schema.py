"""Initial schema: countries and country_neighbors.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

country_neighbors has no foreign keys to countries: referential checks are
done by the neighbor service at insert time.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "countries",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("currency", sa.String(100), nullable=False),
        sa.Column("currency_code", sa.String(10), nullable=True),
        sa.Column("cca3", sa.String(3), nullable=True),
        sa.Column("capital", sa.String(200), nullable=False),
        sa.Column("region", sa.String(100), nullable=False),
        sa.Column("subregion", sa.String(100), nullable=False),
        sa.Column("area", sa.Float, nullable=False),
        sa.Column("population", sa.BigInteger, nullable=False),
        sa.Column("flag_url", sa.Text, nullable=False),
        sa.Column("map_url", sa.Text, nullable=True),
        sa.Column("neighbors", sa.JSON, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "country_neighbors",
        sa.Column("seq", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("country_id", sa.String(36), nullable=False),
        sa.Column("neighbor_id", sa.String(36), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("country_id", "neighbor_id", name="uq_country_neighbors_pair"),
    )
    op.create_index(
        "ix_country_neighbors_country_id", "country_neighbors", ["country_id"],
    )


def downgrade() -> None:
    op.drop_index("ix_country_neighbors_country_id", table_name="country_neighbors")
    op.drop_table("country_neighbors")
    op.drop_table("countries")
