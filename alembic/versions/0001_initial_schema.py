"""Initial schema

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


def _has_table(insp: sa.Inspector, table: str) -> bool:
    return table in insp.get_table_names()


def upgrade() -> None:
    bind = op.get_bind()
    insp = sa.inspect(bind)

    if not _has_table(insp, "jobs"):
        op.create_table(
            "jobs",
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("title", sa.String(length=255), nullable=False, server_default=""),
            sa.Column("company", sa.String(length=255), nullable=False, server_default=""),
            sa.Column("location", sa.String(length=255), nullable=False, server_default=""),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
            sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        )

    if not _has_table(insp, "applications"):
        op.create_table(
            "applications",
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("name", sa.String(length=255), nullable=False),
            sa.Column("email", sa.String(length=255), nullable=False),
            sa.Column("resumes_json", sa.JSON(), nullable=False, server_default=sa.text("'[]'")),
            sa.Column("cover_letters_json", sa.JSON(), nullable=False, server_default=sa.text("'[]'")),
            sa.Column("portfolios_json", sa.JSON(), nullable=False, server_default=sa.text("'[]'")),
            sa.Column("job_id", sa.Integer(), nullable=False),
            sa.Column("applied_at", sa.DateTime(timezone=True), nullable=False),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
            sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        )
        op.create_index("ix_applications_job_id", "applications", ["job_id"], unique=False)


def downgrade() -> None:
    bind = op.get_bind()
    insp = sa.inspect(bind)

    if _has_table(insp, "applications"):
        op.drop_index("ix_applications_job_id", table_name="applications")
        op.drop_table("applications")
    if _has_table(insp, "jobs"):
        op.drop_table("jobs")
