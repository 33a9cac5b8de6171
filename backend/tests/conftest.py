"""
Roster Backend — Test Configuration (conftest.py)
==================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Each test gets a fresh in-memory SQLite database (aiosqlite,
       StaticPool so every session shares the one connection), seeded with
       two students, and a fresh app whose get_db_session dependency is
       overridden to use it.

Fixture Hierarchy (all function-scoped):
    db_engine ─▶ session_factory ─▶ seeded ─┬─▶ db_session
                                            └─▶ app ─▶ test_client
"""

import os

# Override settings for testing BEFORE any roster imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"

from datetime import datetime, timezone  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from roster.database import Base, get_db_session  # noqa: E402
from roster.models.student import Student  # noqa: E402


STUDENTS = [
    {
        "id": 7,
        "name": "Ada Lovelace",
        "email": "ada@example.edu",
        "student_number": "S-2024-0007",
        "enrolled_at": datetime(2024, 9, 2, 8, 30, tzinfo=timezone.utc),
    },
    {
        "id": 8,
        "name": "Alan Turing",
        "email": "alan@example.edu",
        "student_number": "S-2024-0008",
        "enrolled_at": datetime(2024, 9, 2, 9, 0, tzinfo=timezone.utc),
    },
]


@pytest_asyncio.fixture
async def db_engine():
    """In-memory SQLite engine with the schema created from model metadata."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def seeded(session_factory):
    """Inserts STUDENTS and returns the raw rows."""
    async with session_factory() as session:
        session.add_all([Student(**row) for row in STUDENTS])
        await session.commit()
    return STUDENTS


@pytest_asyncio.fixture
async def db_session(session_factory, seeded):
    """
    A session on the seeded database, for calling the resolver directly.

    Usage:
        async def test_found(db_session):
            outcome = await resolve(db_session, Student, "7")
    """
    async with session_factory() as session:
        yield session


@pytest.fixture
def app(session_factory, seeded):
    """Fresh application with get_db_session pointed at the test database."""
    from roster.main import create_app

    application = create_app()

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application.dependency_overrides[get_db_session] = override_get_db_session
    return application


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed directly to the app via ASGITransport.

    Usage:
        async def test_detail(test_client):
            response = await test_client.get("/student/7/detail")
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
