"""Task operations: find, get, create, update, delete (delegate to ITaskRepository).

Writes re-read the row afterwards so callers always receive the store's
canonical values (generated id, column defaults). Run each call inside one
transactional session so the write and the re-read are atomic.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from app.application.dtos.task import Task, TaskSearchCriteria
from app.application.interfaces.repositories import ITaskRepository
from app.domain.exceptions import ResourceNotFoundException

logger = logging.getLogger(__name__)


class TaskService:
    """Query and mutate tasks. Store errors propagate unchanged (no retries)."""

    def __init__(self, task_repo: ITaskRepository) -> None:
        self.task_repo = task_repo

    async def find(self, criteria: TaskSearchCriteria) -> list[Task]:
        """Return tasks matching criteria."""
        logger.debug(
            "Searching tasks: summary=%r statuses=%s",
            criteria.summary,
            sorted(s.value for s in criteria.statuses),
        )
        return await self.task_repo.select(criteria)

    async def find_by_id(self, task_id: int) -> Task | None:
        """Return task by id, or None."""
        return await self.task_repo.select_by_id(task_id)

    async def get(self, task_id: int) -> Task:
        """Return task by id; raise ResourceNotFoundException if absent."""
        task = await self.task_repo.select_by_id(task_id)
        if task is None:
            raise ResourceNotFoundException("task", task_id)
        return task

    async def create(self, task: Task) -> Task:
        """Insert task and return it as stored.

        Any id on the input is ignored; the store assigns one. If the re-read
        misses, the input is returned with the assigned id.
        """
        new_id = await self.task_repo.insert(task)
        created = await self.task_repo.select_by_id(new_id)
        logger.info("Task created: id=%s status=%s", new_id, task.status.value)
        if created is None:
            logger.warning("Task %s not found on re-read after insert", new_id)
            return replace(task, id=new_id)
        return created

    async def update(self, task: Task) -> Task:
        """Replace all fields of task.id and return the stored row.

        Raises ResourceNotFoundException when no row has task.id.
        """
        if task.id is None:
            raise ResourceNotFoundException("task", "None")
        if not await self.task_repo.update(task):
            raise ResourceNotFoundException("task", task.id)
        logger.info("Task updated: id=%s status=%s", task.id, task.status.value)
        updated = await self.task_repo.select_by_id(task.id)
        return updated if updated is not None else task

    async def delete(self, task_id: int) -> None:
        """Delete task by id. Deleting an absent task is a no-op."""
        deleted = await self.task_repo.delete(task_id)
        if deleted:
            logger.info("Task deleted: id=%s", task_id)
        else:
            logger.debug("Delete of absent task ignored: id=%s", task_id)
