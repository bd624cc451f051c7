"""Task store - the single writer of task state for a session.

The store owns an insertion-ordered collection of tasks. Callers only ever
see copies; every change goes through one of the mutation methods below,
each of which either succeeds completely or raises and leaves the store
untouched.
"""

from __future__ import annotations

import logging
import threading
import time
import uuid
from collections.abc import Callable, Iterator
from typing import Literal

from schedulsy.errors import DuplicateTaskIdError, TaskNotFoundError, TaskValidationError
from schedulsy.models import Task, TaskStatus

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]


def uuid_ids() -> IdFactory:
    """Return a factory producing random uuid4 hex ids."""

    def factory() -> str:
        return uuid.uuid4().hex

    return factory


def timestamp_ids(clock: Callable[[], float] = time.time) -> IdFactory:
    """Return a factory producing millisecond timestamp ids.

    Ids are strictly increasing: two calls within the same millisecond (or a
    clock that steps backwards) get bumped past the last issued value.
    """
    last = 0
    lock = threading.Lock()

    def factory() -> str:
        nonlocal last
        with lock:
            candidate = int(clock() * 1000)
            if candidate <= last:
                candidate = last + 1
            last = candidate
            return str(candidate)

    return factory


def id_factory_for(strategy: Literal["uuid", "timestamp"]) -> IdFactory:
    """Build the id factory named by a config strategy."""
    if strategy == "timestamp":
        return timestamp_ids()
    return uuid_ids()


class TaskStore:
    """In-memory, insertion-ordered task collection for one session."""

    def __init__(self, id_factory: IdFactory | None = None) -> None:
        self._tasks: dict[str, Task] = {}
        self._id_factory = id_factory or uuid_ids()
        self._lock = threading.RLock()
        self._revision = 0

    @property
    def revision(self) -> int:
        """Number of successful mutations applied so far."""
        return self._revision

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Snapshot of all tasks in insertion order."""
        with self._lock:
            return tuple(task.model_copy() for task in self._tasks.values())

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks

    def get(self, task_id: str) -> Task:
        """Return a copy of the task with the given id."""
        with self._lock:
            return self._require(task_id).model_copy()

    def add(self, title: str) -> Task:
        """Create a PENDING, MEDIUM priority task and append it.

        Raises:
            TaskValidationError: If the title is empty after trimming.
            DuplicateTaskIdError: If the id factory returned an id in use.
        """
        if not title.strip():
            logger.info("Rejected task with empty title")
            raise TaskValidationError(title)

        with self._lock:
            task_id = self._id_factory()
            if task_id in self._tasks:
                logger.warning("Id factory returned duplicate id %s", task_id)
                raise DuplicateTaskIdError(task_id)

            task = Task(id=task_id, title=title)
            self._tasks[task_id] = task
            self._revision += 1

        logger.debug("Added task %s (%d total)", task_id, len(self._tasks))
        return task.model_copy()

    def toggle_completion(self, task_id: str) -> Task:
        """Flip a task between completed and not completed.

        COMPLETED goes back to PENDING. Every other status becomes COMPLETED;
        the previous non-completed status is not remembered.

        Raises:
            TaskNotFoundError: If no task has this id.
        """
        with self._lock:
            task = self._require(task_id)
            if task.status == TaskStatus.COMPLETED:
                new_status = TaskStatus.PENDING
            else:
                new_status = TaskStatus.COMPLETED
            return self._apply_status(task, new_status)

    def set_status(self, task_id: str, status: TaskStatus) -> Task:
        """Set a task's status explicitly.

        Raises:
            TaskNotFoundError: If no task has this id.
        """
        status = TaskStatus(status)
        with self._lock:
            return self._apply_status(self._require(task_id), status)

    def remove(self, task_id: str) -> Task:
        """Remove a task and return its final state.

        Raises:
            TaskNotFoundError: If no task has this id.
        """
        with self._lock:
            self._require(task_id)
            task = self._tasks.pop(task_id)
            self._revision += 1

        logger.debug("Removed task %s", task_id)
        return task

    def _require(self, task_id: str) -> Task:
        try:
            return self._tasks[task_id]
        except KeyError:
            logger.info("Task %s not found", task_id)
            raise TaskNotFoundError(task_id) from None

    def _apply_status(self, task: Task, status: TaskStatus) -> Task:
        previous = task.status
        task.status = status
        self._revision += 1
        logger.debug("Task %s: %s -> %s", task.id, previous.value, status.value)
        return task.model_copy()
