"""Tests for schedulsy.metrics module."""

from __future__ import annotations

import pytest

from schedulsy.metrics import TaskMetrics, project_metrics
from schedulsy.models import Task, TaskStatus
from schedulsy.store import TaskStore


def _task(n: int, status: TaskStatus) -> Task:
    return Task(id=f"task-{n}", title=f"Task {n}", status=status)


class TestProjectMetrics:
    """Tests for project_metrics."""

    def test_empty_collection(self) -> None:
        """Test an empty collection gives zero everywhere, no division error."""
        metrics = project_metrics([])
        assert metrics == TaskMetrics(total=0, completed=0, pending=0, completion_percentage=0)
        assert metrics.completion_percentage == 0
        assert metrics.rounded_percentage == 0

    def test_counts_by_status(self) -> None:
        """Test completed and pending buckets."""
        tasks = [
            _task(1, TaskStatus.COMPLETED),
            _task(2, TaskStatus.PENDING),
            _task(3, TaskStatus.PENDING),
            _task(4, TaskStatus.COMPLETED),
        ]
        metrics = project_metrics(tasks)
        assert metrics.total == 4
        assert metrics.completed == 2
        assert metrics.pending == 2
        assert metrics.completion_percentage == 50

    def test_in_progress_and_cancelled_in_neither_bucket(self) -> None:
        """Test IN_PROGRESS and CANCELLED count toward total only."""
        tasks = [
            _task(1, TaskStatus.IN_PROGRESS),
            _task(2, TaskStatus.CANCELLED),
            _task(3, TaskStatus.COMPLETED),
        ]
        metrics = project_metrics(tasks)
        assert metrics.total == 3
        assert metrics.completed == 1
        assert metrics.pending == 0
        assert metrics.completion_percentage == pytest.approx(100 / 3)

    def test_all_completed(self) -> None:
        """Test full completion is exactly 100."""
        metrics = project_metrics([_task(1, TaskStatus.COMPLETED)])
        assert metrics.completion_percentage == 100
        assert metrics.rounded_percentage == 100

    def test_accepts_generators(self) -> None:
        """Test any iterable works."""
        metrics = project_metrics(_task(n, TaskStatus.PENDING) for n in range(3))
        assert metrics.total == 3
        assert metrics.pending == 3

    def test_tracks_store_mutations(self, store: TaskStore) -> None:
        """Test recomputing after each mutation reflects the new state."""
        first = store.add("Write report")
        assert project_metrics(store.tasks).pending == 1

        store.toggle_completion(first.id)
        metrics = project_metrics(store.tasks)
        assert metrics.completed == 1
        assert metrics.pending == 0
        assert metrics.completion_percentage == 100


class TestRoundedPercentage:
    """Tests for TaskMetrics.rounded_percentage."""

    @pytest.mark.parametrize(
        ("percentage", "expected"),
        [(0.0, 0), (33.333, 33), (50.0, 50), (62.5, 63), (66.667, 67), (12.5, 13)],
    )
    def test_rounds_half_up(self, percentage: float, expected: int) -> None:
        """Test halves round up rather than to even."""
        metrics = TaskMetrics(total=1, completion_percentage=percentage)
        assert metrics.rounded_percentage == expected
