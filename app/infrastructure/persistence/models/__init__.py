"""Persistence models: ORM entities."""

from app.infrastructure.persistence.models.task import TaskModel

__all__ = ["TaskModel"]
