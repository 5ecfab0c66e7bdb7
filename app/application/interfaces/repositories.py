"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.task import Task, TaskSearchCriteria


class ITaskRepository(Protocol):
    """Protocol for task repository (DIP)."""

    async def select(self, criteria: TaskSearchCriteria) -> list[Task]:
        """Return tasks matching criteria in primary key order."""

    async def select_by_id(self, task_id: int) -> Task | None:
        """Return task by ID, or None."""

    async def insert(self, task: Task) -> int:
        """Insert task (ignoring task.id) and return the generated ID."""

    async def select_max_id(self) -> int | None:
        """Return the largest assigned ID, or None when there are no tasks."""

    async def update(self, task: Task) -> bool:
        """Replace summary, description, status of task.id. Return True if a row changed."""

    async def delete(self, task_id: int) -> bool:
        """Delete task by ID. Return True if a row was removed."""
