"""
TaskHub Backend: Application Package Initializer
==================================================

What: Marks the `taskhub` directory as a Python package.
Who:  Used by uvicorn (`taskhub.main:app`), Alembic and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │    Services (handler logic,         │  ← envelopes, visibility,
    │    authorization filter)            │    error translation
    ├─────────────────────────────────────┤
    │      Repositories (per table)       │  ← CRUD against one collection
    ├─────────────────────────────────────┤
    │  Models & Schemas (Data contracts)  │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
