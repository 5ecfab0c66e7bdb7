"""Pytest configuration and fixtures for todo.

Uses app.main:app for HTTP tests and app.infrastructure.persistence.database
for DB-dependent fixtures. Each test that needs a database gets its own
SQLite file under tmp_path. All imports use app.*.
"""

import os

# Before app import: no rate limiting, no startup schema creation.
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("DATABASE_AUTO_CREATE", "false")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.task import Task, TaskSearchCriteria
from app.core.config import get_settings
from app.infrastructure.persistence import database
from app.infrastructure.persistence.repositories.task_repo import TaskRepository
from app.infrastructure.persistence.seed import seed_sample_tasks
from app.main import app


@pytest.fixture
async def test_database(tmp_path, monkeypatch):
    """Point DATABASE_URL at a fresh SQLite file and create the schema."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    get_settings.cache_clear()
    await database.dispose_engine()
    await database.create_schema()
    yield
    await database.dispose_engine()
    get_settings.cache_clear()


@pytest.fixture
async def client(test_database) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_session(test_database) -> AsyncSession:
    """Database session for repository tests. Rolls back after test."""
    session_factory = database._ensure_engine()
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def seeded(test_database) -> list[Task]:
    """Commit the two sample tasks (ids 1 and 2) and return them as stored."""
    session_factory = database._ensure_engine()
    async with session_factory() as session:
        async with session.begin():
            await seed_sample_tasks(session)
        return await TaskRepository(session).select(TaskSearchCriteria())
