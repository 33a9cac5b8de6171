"""Create students table

Revision ID: 001
Revises: None
Create Date: 2026-10-17 00:00:00.000000+00:00

What:  Creates the `students` table resolved by the {student} route binding.
How:   Portable column types only, so the same revision runs on PostgreSQL
       and on SQLite (local runs and tests).

Rollback: downgrade() drops the table entirely (destructive, all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the students table with its unique alternate keys."""
    op.create_table(
        "students",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "name",
            sa.String(255),
            nullable=False,
            comment="Full display name",
        ),
        sa.Column(
            "email",
            sa.String(255),
            nullable=False,
            comment="Contact email address",
        ),
        # Bound by GET /student/by-number/{student}/detail
        sa.Column(
            "student_number",
            sa.String(32),
            nullable=False,
            comment="Registrar-issued student number (alternate lookup key)",
        ),
        sa.Column(
            "enrolled_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When the student enrolled (UTC)",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_students_email"),
        sa.UniqueConstraint("student_number", name="uq_students_student_number"),
    )


def downgrade() -> None:
    """Drop the students table."""
    op.drop_table("students")
