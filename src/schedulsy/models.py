"""Data models for tracked tasks."""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TaskStatus(str, Enum):
    """Lifecycle status of a task.

    Only COMPLETED counts as done. IN_PROGRESS and CANCELLED are neither
    pending nor completed for metrics purposes.
    """

    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class TaskPriority(str, Enum):
    """Task priority levels, lowest first."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"


class Task(BaseModel):
    """A single trackable unit of work."""

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(min_length=1)
    title: str = Field(min_length=1)
    description: str | None = None
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: date | None = None
    estimated_duration: int | None = Field(default=None, ge=0)
    """Estimated effort in minutes."""

    @property
    def is_completed(self) -> bool:
        """Whether the task is in the COMPLETED state."""
        return self.status == TaskStatus.COMPLETED
