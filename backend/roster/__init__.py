"""
Roster Backend — Application Package Initializer
================================================

What: Marks the `roster` directory as a Python package.
Who:  Imported by uvicorn (roster.main:app), Alembic, and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns + route bindings
    ├─────────────────────────────────────┤
    │      Services (Resource Resolver)   │  ← key → entity lookup
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Route handlers receive already-resolved entities. The lookup and the
    404 short-circuit live in the binding layer, so handlers never fetch
    the row themselves.
"""

__version__ = "1.0.0"
