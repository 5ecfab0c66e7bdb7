"""Application DTOs (frozen dataclasses, no dependency on ORM)."""

from app.application.dtos.task import Task, TaskSearchCriteria

__all__ = ["Task", "TaskSearchCriteria"]
