"""Create rsvps table

Revision ID: 3f9c2a7b1d04
Revises:
Create Date: 2026-10-19 12:00:00

"""
from typing import Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f9c2a7b1d04"
down_revision: Union[str, None] = None
branch_labels: Union[str, None] = None
depends_on: Union[str, None] = None


def upgrade() -> None:
    op.create_table(
        "rsvps",
        sa.Column("sequence", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("id", sa.String(32), nullable=False, unique=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("attendance", sa.String(8), nullable=False),
        sa.Column("diet", sa.String(255), nullable=True),
        sa.Column("allergies", sa.Text, nullable=True),
        sa.Column("message", sa.Text, nullable=True),
        sa.Column("submitted_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_rsvps_email", "rsvps", ["email"])


def downgrade() -> None:
    op.drop_index("ix_rsvps_email", table_name="rsvps")
    op.drop_table("rsvps")
