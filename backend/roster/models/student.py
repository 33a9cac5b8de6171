"""
Roster Backend — Student SQLAlchemy Model
==========================================

What:  ORM model representing the `students` table.
Who:   Resolved by the route binding layer; created by Alembic revision 001.

Table Design:
    - Integer primary key: the key route parameters carry (/student/7/detail)
    - student_number: unique alternate key, also bindable from the URL
    - email: unique contact address
    - enrolled_at: UTC with timezone (never use naive datetimes)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from roster.database import Base


class Student(Base):
    """
    A student record.

    Query Patterns:
        - Bind by id: SELECT ... WHERE id = :id (primary key, identity map)
        - Bind by number: SELECT ... WHERE student_number = :number LIMIT 1
          → Uses the unique index on student_number
    """

    __tablename__ = "students"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Full display name",
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        comment="Contact email address",
    )

    # Registrar-issued number, e.g. S-2024-0007
    student_number: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        unique=True,
        comment="Registrar-issued student number (alternate lookup key)",
    )

    enrolled_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When the student enrolled (UTC)",
    )

    def __repr__(self) -> str:
        return f"<Student(id={self.id}, student_number='{self.student_number}')>"
