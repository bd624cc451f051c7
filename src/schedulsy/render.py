"""Rich rendering of the dashboard."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from schedulsy.config import DisplayConfig
from schedulsy.dashboard import DashboardView
from schedulsy.metrics import TaskMetrics
from schedulsy.models import Task, TaskPriority

PRIORITY_STYLES: dict[TaskPriority, str] = {
    TaskPriority.URGENT: "bold red",
    TaskPriority.HIGH: "bold dark_orange",
    TaskPriority.MEDIUM: "bold yellow",
    TaskPriority.LOW: "bold green",
}

CHECKED = "✓"
UNCHECKED = "○"


def build_dashboard(view: DashboardView, config: DisplayConfig | None = None) -> Panel:
    """Build the full dashboard renderable for a view snapshot."""
    if config is None:
        config = DisplayConfig()

    content = Group(
        _build_welcome(view),
        Text(),
        _build_metrics_table(view.metrics),
        _build_progress(view.metrics, config),
        Text(),
        _build_tasks(view.tasks, config),
    )

    subtitle = view.session.display_name
    return Panel(
        content,
        title=f"[bold]{escape(config.title)}[/bold]",
        subtitle=f"[dim]{escape(subtitle)}[/dim]" if subtitle else None,
        border_style="cyan",
    )


def _build_welcome(view: DashboardView) -> Group:
    heading = Text()
    heading.append(f"Welcome back, {view.greeting_name}!", style="bold")

    summary = Text(
        f"Let's make today productive. You have {view.metrics.pending} tasks pending.",
        style="dim",
    )
    return Group(heading, summary)


def _build_metrics_table(metrics: TaskMetrics) -> Table:
    table = Table(show_header=True, box=None, padding=(0, 3))
    table.add_column("Total Tasks", style="blue bold", justify="center")
    table.add_column("Completed", style="green bold", justify="center")
    table.add_column("Pending", style="yellow bold", justify="center")
    table.add_row(str(metrics.total), str(metrics.completed), str(metrics.pending))
    return table


def _build_progress(metrics: TaskMetrics, config: DisplayConfig) -> Group:
    label = Text()
    label.append("Today's Progress ", style="bold")
    label.append(f"{metrics.rounded_percentage}%", style="cyan")

    bar = ProgressBar(
        total=100,
        completed=metrics.completion_percentage,
        width=config.progress_bar_width,
        complete_style="magenta",
        finished_style="green bold",
    )
    return Group(label, bar)


def _build_tasks(tasks: tuple[Task, ...], config: DisplayConfig) -> RenderableType:
    if not tasks:
        return Group(
            Text("No tasks", style="bold"),
            Text("Get started by creating a new task.", style="dim"),
        )

    table = Table(title="Today's Tasks", show_header=True, expand=True)
    table.add_column("#", style="dim", width=3)
    table.add_column("", width=1)
    table.add_column("Title", style="white", ratio=1)
    table.add_column("Priority", width=8)
    table.add_column("Due", style="dim")

    for position, task in enumerate(tasks, 1):
        table.add_row(
            str(position),
            Text(CHECKED, style="green") if task.is_completed else Text(UNCHECKED, style="dim"),
            _task_title(task, config),
            Text(task.priority.value, style=PRIORITY_STYLES[task.priority]),
            task.due_date.isoformat() if task.due_date else "",
        )

    return table


def _task_title(task: Task, config: DisplayConfig) -> Text:
    title = task.title
    if len(title) > config.max_title_length:
        title = title[: config.max_title_length - 3] + "..."

    text = Text(title, style="dim strike" if task.is_completed else "")
    if config.show_descriptions and task.description:
        text.append(f"\n{task.description}", style="dim")
    return text
