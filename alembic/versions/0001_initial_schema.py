"""Applications table

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19

"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "applications",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("full_name", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=60), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("dob", sa.String(length=40), nullable=False),
        sa.Column("gender", sa.String(length=60), nullable=False),
        sa.Column("age", sa.Integer(), nullable=True),
        sa.Column("city", sa.String(length=120), nullable=False),
        sa.Column("ssn", sa.String(length=40), nullable=False),
        sa.Column("past_due_rent", sa.Float(), nullable=True),
        sa.Column("applied_before", sa.String(length=20), nullable=False),
        sa.Column("receiving_ss", sa.String(length=20), nullable=False),
        sa.Column("verified_idme", sa.String(length=20), nullable=False),
        # Biography group; required only when REQUIRE_BIOGRAPHY is set.
        sa.Column("mothers_maiden_name", sa.String(length=255), nullable=True),
        sa.Column("mothers_full_name", sa.String(length=255), nullable=True),
        sa.Column("fathers_full_name", sa.String(length=255), nullable=True),
        sa.Column("place_of_birth", sa.String(length=255), nullable=True),
        sa.Column("city_of_birth", sa.String(length=120), nullable=True),
        sa.Column("dl_front", sa.Text(), nullable=True),
        sa.Column("dl_back", sa.Text(), nullable=True),
        sa.Column("submitted_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_applications_submitted_at", "applications", ["submitted_at"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_applications_submitted_at", table_name="applications")
    op.drop_table("applications")
