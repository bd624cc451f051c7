"""Aggregate progress metrics derived from a task collection."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from schedulsy.models import Task, TaskStatus


@dataclass(frozen=True)
class TaskMetrics:
    """Counts and completion percentage for a task collection.

    `pending` counts only PENDING tasks, so `completed + pending` can be
    smaller than `total` when tasks are IN_PROGRESS or CANCELLED.
    """

    total: int = 0
    completed: int = 0
    pending: int = 0
    completion_percentage: float = 0.0

    @property
    def rounded_percentage(self) -> int:
        """Completion percentage rounded to the nearest integer, halves up."""
        return int(self.completion_percentage + 0.5)


def project_metrics(tasks: Iterable[Task]) -> TaskMetrics:
    """Compute metrics for the given tasks.

    Pure function; call it again after every mutation rather than caching
    the result.
    """
    total = 0
    completed = 0
    pending = 0
    for task in tasks:
        total += 1
        if task.status == TaskStatus.COMPLETED:
            completed += 1
        elif task.status == TaskStatus.PENDING:
            pending += 1

    percentage = completed / total * 100 if total > 0 else 0.0
    return TaskMetrics(
        total=total,
        completed=completed,
        pending=pending,
        completion_percentage=percentage,
    )
