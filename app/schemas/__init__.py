"""Pydantic request/response schemas for the API and HTML forms."""

from app.schemas.errors import FieldErrorDetail, ValidationErrorResponse
from app.schemas.health import HealthResponse
from app.schemas.task import (
    TaskCreateRequest,
    TaskForm,
    TaskResponse,
    TaskUpdateRequest,
)

__all__ = [
    "FieldErrorDetail",
    "HealthResponse",
    "TaskCreateRequest",
    "TaskForm",
    "TaskResponse",
    "TaskUpdateRequest",
    "ValidationErrorResponse",
]
