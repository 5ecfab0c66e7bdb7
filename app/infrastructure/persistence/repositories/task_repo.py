"""Task repository. Filtered search, point lookup, and mutations by primary key."""

from __future__ import annotations

from sqlalchemy import ColumnElement, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.task import Task, TaskSearchCriteria
from app.domain.enums import TaskStatus
from app.infrastructure.persistence.models.task import TaskModel


def _to_result(t: TaskModel) -> Task:
    """Map TaskModel ORM to Task DTO."""
    return Task(
        id=t.id,
        summary=t.summary,
        description=t.description,
        status=TaskStatus(t.status),
    )


class TaskRepository:
    """Task repository. Implements ITaskRepository."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    def _summary_contains(self, term: str) -> ColumnElement[bool]:
        """Case-sensitive substring match on summary.

        SQLite LIKE ignores ASCII case, so it uses instr() there.
        """
        if self.db.get_bind().dialect.name == "sqlite":
            return func.instr(TaskModel.summary, term) > 0
        return TaskModel.summary.contains(term, autoescape=True)

    async def select(self, criteria: TaskSearchCriteria) -> list[Task]:
        """Return tasks matching all given predicates, in id order."""
        stmt = select(TaskModel)
        if criteria.summary:
            stmt = stmt.where(self._summary_contains(criteria.summary))
        if criteria.statuses:
            stmt = stmt.where(
                TaskModel.status.in_(sorted(s.value for s in criteria.statuses))
            )
        result = await self.db.execute(stmt.order_by(TaskModel.id.asc()))
        return [_to_result(t) for t in result.scalars().all()]

    async def select_by_id(self, task_id: int) -> Task | None:
        """Return task by ID, read from the database (not the identity map)."""
        result = await self.db.execute(
            select(TaskModel)
            .where(TaskModel.id == task_id)
            .execution_options(populate_existing=True)
        )
        row = result.scalar_one_or_none()
        return _to_result(row) if row else None

    async def insert(self, task: Task) -> int:
        """Insert task and return the generated ID (INSERT ... RETURNING)."""
        result = await self.db.execute(
            insert(TaskModel)
            .values(
                summary=task.summary,
                description=task.description,
                status=task.status.value,
            )
            .returning(TaskModel.id)
        )
        return result.scalar_one()

    async def select_max_id(self) -> int | None:
        """Return the largest task ID, or None when the table is empty.

        Not safe for recovering the ID of a just-inserted row under concurrent
        inserts; insert() returns that ID directly.
        """
        result = await self.db.execute(select(func.max(TaskModel.id)))
        return result.scalar_one_or_none()

    async def update(self, task: Task) -> bool:
        """Replace summary, description, status for task.id; return True if a row matched."""
        result = await self.db.execute(
            update(TaskModel)
            .where(TaskModel.id == task.id)
            .values(
                summary=task.summary,
                description=task.description,
                status=task.status.value,
            )
        )
        return result.rowcount > 0

    async def delete(self, task_id: int) -> bool:
        """Delete task by ID; return True if a row was removed."""
        result = await self.db.execute(delete(TaskModel).where(TaskModel.id == task_id))
        return result.rowcount > 0
