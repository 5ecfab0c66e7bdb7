"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, the task repository and
TaskService. Routes depend only on these dependencies, not on infra directly.
Read dependencies use a plain session; write dependencies share one
transaction per request so a write and its re-read commit together.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.use_cases.tasks import TaskService
from app.infrastructure.persistence.database import get_db, get_db_transactional
from app.infrastructure.persistence.repositories import TaskRepository


async def get_task_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TaskRepository:
    """Task repository for read operations."""
    return TaskRepository(db)


async def get_task_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> TaskRepository:
    """Task repository for create/update/delete (transactional session)."""
    return TaskRepository(db)


async def get_task_service(
    repo: Annotated[TaskRepository, Depends(get_task_repo)],
) -> TaskService:
    """TaskService for queries."""
    return TaskService(repo)


async def get_task_service_for_write(
    repo: Annotated[TaskRepository, Depends(get_task_repo_for_write)],
) -> TaskService:
    """TaskService for mutations (same transaction as the request)."""
    return TaskService(repo)
