"""Tracking surface controller.

Routes user intents to the task store, enforces the session gate, and
produces read-only snapshots for rendering.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from schedulsy.errors import SessionGateError, TaskNotFoundError
from schedulsy.metrics import TaskMetrics, project_metrics
from schedulsy.models import Task
from schedulsy.session import Session
from schedulsy.store import TaskStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardView:
    """Everything the presentation layer needs for one render."""

    session: Session
    tasks: tuple[Task, ...]
    metrics: TaskMetrics

    @property
    def greeting_name(self) -> str:
        return self.session.greeting_name


class Dashboard:
    """The tracking surface for one session."""

    def __init__(self, store: TaskStore, session: Session) -> None:
        self.store = store
        self.session = session

    def request_add_task(self, title: str) -> Task:
        """Handle an add-task intent."""
        self._require_active()
        task = self.store.add(title)
        logger.info("Added task %s", task.id)
        return task

    def request_toggle(self, task_id: str) -> Task:
        """Handle a toggle-completion intent."""
        self._require_active()
        task = self.store.toggle_completion(task_id)
        logger.info("Task %s is now %s", task.id, task.status.value)
        return task

    def view(self) -> DashboardView:
        """Snapshot the current tasks with freshly projected metrics."""
        tasks = self.store.tasks
        return DashboardView(session=self.session, tasks=tasks, metrics=project_metrics(tasks))

    def resolve_task_ref(self, ref: str) -> str:
        """Map a 1-based list position or a task id to a task id.

        Exact ids win over positions so numeric ids stay addressable.
        """
        ref = ref.strip()
        if ref in self.store:
            return ref

        if ref.isdecimal():
            tasks = self.store.tasks
            position = int(ref)
            if 1 <= position <= len(tasks):
                return tasks[position - 1].id

        raise TaskNotFoundError(ref)

    def _require_active(self) -> None:
        if not self.session.is_authenticated:
            logger.warning("Ignoring task intent while session is %s", self.session.status.value)
            raise SessionGateError(self.session.status)
