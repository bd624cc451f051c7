"""CLI interface for schedulsy."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from schedulsy import __version__
from schedulsy.config import CONFIG_FILE, SchedulsyConfig
from schedulsy.dashboard import Dashboard
from schedulsy.errors import TaskError
from schedulsy.logging_setup import setup_logging
from schedulsy.render import build_dashboard
from schedulsy.session import Session, SessionStatus, Surface, resolve_surface
from schedulsy.store import TaskStore, id_factory_for

console = Console()

INTERACTIVE_HELP = (
    "[cyan]add <title>[/cyan]  add a task\n"
    "[cyan]toggle <n|id>[/cyan]  toggle completion\n"
    "[cyan]show[/cyan]  redraw the dashboard\n"
    "[cyan]quit[/cyan]  leave"
)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="schedulsy")
@click.pass_context
def main(ctx: click.Context) -> None:
    """schedulsy - Smart daily planner.

    Track today's tasks and watch your progress.

    \b
    Quick start:
      schedulsy dashboard -i             # Interactive session
      schedulsy dashboard --add "Write report" --toggle 1
    """
    ctx.ensure_object(dict)
    config = SchedulsyConfig.load()
    ctx.obj["config"] = config
    setup_logging(config.logging, console=Console(stderr=True))

    # If no subcommand, show help
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command()
@click.option("--name", help="Display name of the signed-in user")
@click.option("--email", help="Email of the signed-in user")
@click.option(
    "--status",
    "session_status",
    type=click.Choice([s.value for s in SessionStatus]),
    default=SessionStatus.AUTHENTICATED.value,
    show_default=True,
    help="Session status reported by the identity provider",
)
@click.option("--add", "-a", "titles", multiple=True, help="Add a task (repeatable)")
@click.option(
    "--toggle", "-t", "refs", multiple=True, help="Toggle a task by position or id (repeatable)"
)
@click.option("--interactive", "-i", is_flag=True, help="Keep the session open for commands")
@click.pass_context
def dashboard(
    ctx: click.Context,
    name: str | None,
    email: str | None,
    session_status: str,
    titles: tuple[str, ...],
    refs: tuple[str, ...],
    interactive: bool,
) -> None:
    """Open the task dashboard for a single session.

    Tasks live only for the lifetime of the command. Adds are applied
    first, then toggles, then the dashboard is drawn.
    """
    config: SchedulsyConfig = ctx.obj["config"]

    session = Session(SessionStatus(session_status), name=name, email=email)
    surface = resolve_surface(session)

    if surface == Surface.LOADING:
        console.print("[dim]Loading session...[/dim]")
        return
    if surface == Surface.LANDING:
        console.print("[red]Not signed in.[/red] Sign in to view your dashboard.")
        ctx.exit(1)

    store = TaskStore(id_factory=id_factory_for(config.store.id_strategy))
    board = Dashboard(store, session)

    try:
        for title in titles:
            board.request_add_task(title)
        for ref in refs:
            board.request_toggle(board.resolve_task_ref(ref))
    except TaskError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        ctx.exit(1)

    console.print(build_dashboard(board.view(), config.display))

    if interactive:
        _interactive_loop(board, config)


def _interactive_loop(board: Dashboard, config: SchedulsyConfig) -> None:
    """Read and apply commands until quit or end of input."""
    console.print(Panel.fit(INTERACTIVE_HELP, title="Commands"))

    while True:
        try:
            line = click.prompt("schedulsy", prompt_suffix="> ", default="", show_default=False)
        except (EOFError, click.Abort):
            break

        command, _, arg = line.strip().partition(" ")
        command = command.lower()

        if not command:
            continue
        if command in ("quit", "exit", "q"):
            break

        try:
            if command == "add":
                task = board.request_add_task(arg)
                console.print(f"[green]Added:[/green] {escape(task.title)}")
            elif command == "toggle":
                task = board.request_toggle(board.resolve_task_ref(arg))
                console.print(f"[green]{escape(task.title)}:[/green] {task.status.value}")
            elif command == "show":
                pass
            else:
                console.print(f"[yellow]Unknown command:[/yellow] {escape(command)}")
                continue
        except TaskError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            continue

        console.print(build_dashboard(board.view(), config.display))


@main.group()
def config() -> None:
    """Manage schedulsy configuration."""
    pass


@config.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show the effective configuration."""
    cfg: SchedulsyConfig = ctx.obj["config"]

    display_table = Table(title="Display", show_header=True)
    display_table.add_column("Setting", style="cyan")
    display_table.add_column("Value", style="white")
    descriptions_icon = "[green]✓[/green]" if cfg.display.show_descriptions else "[dim]✗[/dim]"
    display_table.add_row("Title", escape(cfg.display.title))
    display_table.add_row("Show descriptions", descriptions_icon)
    display_table.add_row("Max title length", str(cfg.display.max_title_length))
    display_table.add_row("Progress bar width", str(cfg.display.progress_bar_width))

    console.print(display_table)
    console.print()

    logging_table = Table(title="Logging", show_header=True)
    logging_table.add_column("Setting", style="cyan")
    logging_table.add_column("Value", style="white")
    file_icon = "[green]✓[/green]" if cfg.logging.file_enabled else "[dim]✗[/dim]"
    logging_table.add_row("Level", cfg.logging.level)
    logging_table.add_row("Console level", cfg.logging.console_level)
    logging_table.add_row("Log to file", file_icon)
    logging_table.add_row("Directory", escape(cfg.logging.directory))

    console.print(logging_table)
    console.print()

    console.print(f"[cyan]Task ids:[/cyan] {cfg.store.id_strategy}")
    if not CONFIG_FILE.exists():
        console.print("[dim]Using defaults (no config file).[/dim]")


@config.command("init")
@click.option("--force", "-f", is_flag=True, help="Overwrite existing config")
def config_init(force: bool) -> None:
    """Write a default configuration file."""
    if CONFIG_FILE.exists() and not force:
        console.print(
            f"[yellow]Config already exists:[/yellow] {CONFIG_FILE}  (use --force to overwrite)"
        )
        return

    SchedulsyConfig().save()
    console.print(f"[green]Wrote config:[/green] {CONFIG_FILE}")
