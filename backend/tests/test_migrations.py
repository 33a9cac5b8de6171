"""
Roster Backend — Migration Tests
=================================

What:  Runs the Alembic revisions against a throwaway SQLite file.
Why:   The students table the binding resolves must match the ORM model.
"""

from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from roster.database import Base

ALEMBIC_DIR = Path(__file__).resolve().parents[1] / "alembic"


def _alembic_config(db_file: Path) -> Config:
    config = Config()
    config.set_main_option("script_location", str(ALEMBIC_DIR))
    config.set_main_option("sqlalchemy.url", f"sqlite+aiosqlite:///{db_file}")
    return config


def test_upgrade_creates_students_table(tmp_path):
    db_file = tmp_path / "migrate.db"
    command.upgrade(_alembic_config(db_file), "head")

    engine = create_engine(f"sqlite:///{db_file}")
    try:
        inspector = inspect(engine)
        assert "students" in inspector.get_table_names()
        columns = {c["name"] for c in inspector.get_columns("students")}
        assert columns == set(Base.metadata.tables["students"].columns.keys())
        unique = {tuple(u["column_names"]) for u in inspector.get_unique_constraints("students")}
        assert ("email",) in unique
        assert ("student_number",) in unique
    finally:
        engine.dispose()


def test_downgrade_drops_students_table(tmp_path):
    db_file = tmp_path / "migrate.db"
    config = _alembic_config(db_file)
    command.upgrade(config, "head")
    command.downgrade(config, "base")

    engine = create_engine(f"sqlite:///{db_file}")
    try:
        assert "students" not in inspect(engine).get_table_names()
    finally:
        engine.dispose()
