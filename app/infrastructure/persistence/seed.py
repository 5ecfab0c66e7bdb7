"""Sample tasks for local development and demos.

Inserted only into an empty tasks table so repeated runs are harmless.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.task import Task
from app.domain.enums import TaskStatus
from app.infrastructure.persistence.repositories.task_repo import TaskRepository

logger = logging.getLogger(__name__)

SAMPLE_TASKS: tuple[Task, ...] = (
    Task(id=None, summary="Spring Boot を学ぶ", description="TODO アプリを作ってみる", status=TaskStatus.DONE),
    Task(id=None, summary="Spring Security を学ぶ", description="ログイン機能を作ってみる", status=TaskStatus.TODO),
)


async def seed_sample_tasks(session: AsyncSession) -> int:
    """Insert SAMPLE_TASKS when no task exists. Return the number inserted.

    Caller owns the transaction (commit/rollback).
    """
    repo = TaskRepository(session)
    if await repo.select_max_id() is not None:
        logger.info("Tasks already present; skipping sample data")
        return 0
    for task in SAMPLE_TASKS:
        await repo.insert(task)
    logger.info("Inserted %d sample tasks", len(SAMPLE_TASKS))
    return len(SAMPLE_TASKS)
