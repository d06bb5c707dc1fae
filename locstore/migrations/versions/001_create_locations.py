"""create locations table

Revision ID: 001
Revises: None
Create Date: 2026-10-19

Creates the table only when it is missing, so databases that already carry a
``locations`` table from before Alembic was introduced can be upgraded
without error.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    from sqlalchemy import inspect as sa_inspect

    # Offline (--sql) runs have no live connection to inspect
    offline = op.get_context().as_sql
    if offline or not sa_inspect(op.get_bind()).has_table("locations"):
        op.create_table(
            "locations",
            sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column("source", sa.Text(), nullable=False),
            sa.Column("latitude", sa.Float(), nullable=False),
            sa.Column("longitude", sa.Float(), nullable=False),
            sa.Column(
                "created_at",
                sa.DateTime(),
                nullable=False,
                server_default=sa.func.now(),
            ),
            sqlite_autoincrement=True,
        )


def downgrade() -> None:
    op.drop_table("locations")
