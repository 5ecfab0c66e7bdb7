"""Task API schemas: request bodies, HTML form, response, and search query."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from app.application.dtos.task import Task, TaskSearchCriteria
from app.core.constants import SUMMARY_MAX_LENGTH, ValidationMessages
from app.domain.enums import TaskStatus
from app.domain.exceptions import ValidationException


class TaskFields(BaseModel):
    """Fields shared by create/update bodies and the HTML form.

    summary and status default to None so that a missing value reports the
    same NotBlank error as an empty one.
    """

    summary: str | None = Field(
        default=None,
        validate_default=True,
        description=f"Required, not blank, at most {SUMMARY_MAX_LENGTH} characters",
    )
    description: str | None = Field(default=None)
    status: str | None = Field(
        default=None,
        validate_default=True,
        description="One of TODO, DOING, DONE",
        examples=["TODO"],
    )

    @field_validator("summary")
    @classmethod
    def _check_summary(cls, value: str | None) -> str:
        violations = []
        if value is None or not value.strip():
            violations.append(("NotBlank", ValidationMessages.SUMMARY_REQUIRED))
        # Length is in code points.
        if value is not None and len(value) > SUMMARY_MAX_LENGTH:
            violations.append(("Size", ValidationMessages.SUMMARY_SIZE))
        if violations:
            (code, message), *more = violations
            # Further violations of the same field ride along in ctx["more"].
            raise PydanticCustomError(code, message, {"more": more} if more else None)
        return value

    @field_validator("status")
    @classmethod
    def _check_status(cls, value: str | None) -> str:
        if value is None or not value.strip():
            raise PydanticCustomError("NotBlank", ValidationMessages.STATUS_REQUIRED)
        if value not in TaskStatus.values():
            raise PydanticCustomError("Pattern", ValidationMessages.STATUS_PATTERN)
        return value

    def to_task(self, task_id: int | None = None) -> Task:
        """Build the Task value (id None for create)."""
        return Task(
            id=task_id,
            summary=self.summary,
            description=self.description,
            status=TaskStatus(self.status),
        )


class TaskCreateRequest(TaskFields):
    """Request body for POST /api/tasks."""


class TaskUpdateRequest(TaskFields):
    """Request body for PUT /api/tasks/{id} (all fields replaced)."""


class TaskForm(TaskFields):
    """HTML form submission for create/edit views. Empty description means none."""

    @field_validator("description")
    @classmethod
    def _blank_description_to_none(cls, value: str | None) -> str | None:
        return value if value else None


class TaskResponse(BaseModel):
    """Task response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    summary: str
    description: str | None
    status: TaskStatus


def build_search_criteria(
    summary: str | None, statuses: list[str] | None
) -> TaskSearchCriteria:
    """Build TaskSearchCriteria from query parameters.

    Raises ValidationException (field 'status') for a value outside TODO|DOING|DONE.
    """
    parsed: set[TaskStatus] = set()
    for value in statuses or []:
        if value not in TaskStatus.values():
            raise ValidationException(
                ValidationMessages.STATUS_PATTERN, field="status", code="Pattern"
            )
        parsed.add(TaskStatus(value))
    return TaskSearchCriteria(summary=summary or None, statuses=frozenset(parsed))
