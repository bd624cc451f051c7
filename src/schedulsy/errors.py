"""Error taxonomy for schedulsy.

Every error here is local and recoverable: the store is left untouched and
the immediate caller decides how to report it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from schedulsy.session import SessionStatus


class TaskError(Exception):
    """Base class for recoverable task tracking errors."""


class TaskValidationError(TaskError):
    """A task title was empty or whitespace-only."""

    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__("Task title must not be empty")


class TaskNotFoundError(TaskError):
    """No task with the requested id exists in the store."""

    def __init__(self, task_id: str) -> None:
        self.task_id = task_id
        super().__init__(f"Task not found: {task_id}")


class DuplicateTaskIdError(TaskError):
    """The id factory produced an id that is already in use."""

    def __init__(self, task_id: str) -> None:
        self.task_id = task_id
        super().__init__(f"Task id already in use: {task_id}")


class SessionGateError(TaskError):
    """A task intent arrived while the session does not allow tracking."""

    def __init__(self, status: SessionStatus) -> None:
        self.status = status
        super().__init__(f"Task operations unavailable while session is {status.value}")
