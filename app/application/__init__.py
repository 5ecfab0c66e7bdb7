"""Application layer: DTOs, interfaces, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories).
"""

from app.application.interfaces import ITaskRepository
from app.application.use_cases import TaskService

__all__ = ["ITaskRepository", "TaskService"]
