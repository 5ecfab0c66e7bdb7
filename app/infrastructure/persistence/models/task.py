"""Task ORM model. Table: tasks."""

from sqlalchemy import CheckConstraint, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.core.constants import SUMMARY_MAX_LENGTH
from app.domain.enums import TaskStatus
from app.infrastructure.persistence.database import Base

_STATUS_VALUES = ", ".join(f"'{s}'" for s in TaskStatus.values())


class TaskModel(Base):
    """Task row. id is assigned by the database and never reused (AUTOINCREMENT on SQLite)."""

    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    summary: Mapped[str] = mapped_column(String(SUMMARY_MAX_LENGTH), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(16), nullable=False)

    __table_args__ = (
        CheckConstraint(f"status IN ({_STATUS_VALUES})", name="tasks_status_check"),
        {"sqlite_autoincrement": True},
    )
