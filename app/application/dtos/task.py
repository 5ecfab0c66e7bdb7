"""DTOs for tasks (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass, field

from app.domain.enums import TaskStatus


@dataclass(frozen=True)
class Task:
    """Task value. id is None until the store assigns one on insert."""

    id: int | None
    summary: str
    description: str | None
    status: TaskStatus


@dataclass(frozen=True)
class TaskSearchCriteria:
    """Search filter for tasks.

    summary matches as a substring when non-empty; statuses restricts to the
    given set when non-empty. Both empty means no filter.
    """

    summary: str | None = None
    statuses: frozenset[TaskStatus] = field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        """True when neither predicate applies."""
        return not self.summary and not self.statuses
