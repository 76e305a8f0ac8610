"""Doctor and slot tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "doctor",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("error", sa.Boolean(), nullable=False, server_default=sa.false()),
    )

    op.create_table(
        "slot",
        sa.Column("doctor_id", sa.Integer(), primary_key=True),
        sa.Column("start_at", sa.DateTime(timezone=True), primary_key=True),
        sa.Column("end_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("touched_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_slot_touched_at", "slot", ["touched_at"])


def downgrade() -> None:
    op.drop_index("ix_slot_touched_at", table_name="slot")
    op.drop_table("slot")
    op.drop_table("doctor")
