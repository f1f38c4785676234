"""
TaskHub Backend: Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test gets a fresh in-memory SQLite database (aiosqlite,
       StaticPool so all sessions share the one connection). API tests
       override `get_db_session` so the app talks to that database.

Fixture Hierarchy (all function-scoped):
    ├── db_engine:        in-memory engine with all tables created
    ├── session_factory:  sessionmaker bound to db_engine
    ├── db_session:       one AsyncSession for service/repository tests
    ├── test_client:      HTTPX AsyncClient wired to the FastAPI app
    └── api:              small helper around test_client for common setup
"""

import os

# Override settings BEFORE any taskhub import
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["DB_CREATE_TABLES"] = "false"
os.environ["BCRYPT_ROUNDS"] = "10"
os.environ["LOG_LEVEL"] = "WARNING"

import uuid
from typing import Any, Dict, List, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import taskhub.models  # noqa: F401
from taskhub.database import Base, get_db_session


@pytest_asyncio.fixture
async def db_engine():
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
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    HTTPX AsyncClient talking to the app through ASGITransport.

    The session dependency is replaced with one bound to the test database,
    with the same commit/rollback behavior as the real one.
    """
    from taskhub.main import app

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


class ApiHelper:
    """Shortcuts for the setup steps most API tests repeat."""

    def __init__(self, client: AsyncClient):
        self.client = client

    async def register(self, username: str, email: Optional[str] = None, password: str = "secreto1") -> str:
        """Register a user and return its id."""
        response = await self.client.post(
            "/register",
            json={"username": username, "email": email or f"{username}@example.com", "password": password},
        )
        assert response.status_code == 200, response.text
        return await self.user_id(username)

    async def user_id(self, username: str) -> str:
        users = (await self.client.get("/users")).json()["users"]
        return next(user["_id"] for user in users if user["username"] == username)

    async def make_admin(self, user_id: str) -> None:
        response = await self.client.put(f"/users/{user_id}/role", json={"role": 1})
        assert response.status_code == 200, response.text

    async def create_group(self, name: str, created_by: str, members: List[str]) -> str:
        response = await self.client.post(
            "/groups",
            json={"name": name, "createdBy": created_by, "members": members},
        )
        assert response.status_code == 200, response.text
        return response.json()["group"]["_id"]

    async def create_task(self, name: str, created_by: str, **fields: Any) -> Dict[str, Any]:
        body = {
            "name": name,
            "description": f"Descripción de {name}",
            "dueDate": "2026-12-01T10:00:00Z",
            "category": "trabajo",
            "status": "pendiente",
            "createdBy": created_by,
        }
        body.update(fields)
        response = await self.client.post("/tasks", json=body)
        assert response.status_code == 200, response.text
        return response.json()["task"]


@pytest.fixture
def api(test_client):
    return ApiHelper(test_client)


@pytest.fixture
def unknown_id() -> str:
    return str(uuid.uuid4())
