"""Command-line interface for push-release.

Provides commands for:
- run: Run one or more tasks (push, push-only, push-commit, ...)
- tasks: List the available tasks
- init-config: Generate configuration
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from push_release import __version__
from push_release.config.defaults import write_default_config
from push_release.config.loader import load_config
from push_release.exceptions import ReleaseError
from push_release.reporting import Reporter
from push_release.tasks import TaskRegistry, TaskRunner

app = typer.Typer(
    name="push-release",
    help="Bump the version, commit, tag, push and publish",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"push-release version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(  # noqa: B008
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Bump the version, commit, tag, push and publish.

    Tasks take colon-separated arguments: an increment kind
    (major, minor, patch, pre*, git or an explicit version) and, for
    the push task, a mode (bump-only, commit-only, push-release,
    push-publish).
    """


@app.command()
def run(
    tasks: list[str] = typer.Argument(  # noqa: B008
        ...,
        help="Task specs to run in order, e.g. push:minor or push-only:patch",
    ),
    config: Path | None = typer.Option(  # noqa: B008
        None,
        "--config",
        "-c",
        help="Path to configuration file (searched for when omitted)",
    ),
    dry_run: bool = typer.Option(  # noqa: B008
        False,
        "--dry-run",
        "-n",
        help="Show what would be done without writing files or running git/npm",
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False,
        "--verbose",
        "-v",
        help="Show detailed output",
    ),
) -> None:
    """Run tasks.

    Examples:
        push-release run push              # 1.0.0 -> 1.0.1, commit, tag, push
        push-release run push:minor        # 1.0.0 -> 1.1.0
        push-release run push:git          # version from git describe
        push-release run push-only:major   # bump only
        push-release run push-commit       # commit, tag, push current version
        push-release run push-release      # bump, push and npm publish
        push-release run push-publish      # npm publish only
    """
    reporter = Reporter(console=console, verbose=verbose)
    try:
        cfg = load_config(config)

        if dry_run:
            console.print(
                Panel("[yellow]DRY RUN MODE[/yellow] - No changes will be made")
            )

        runner = TaskRunner(
            config=cfg,
            reporter=reporter,
            project_root=Path.cwd(),
            dry_run=dry_run,
        )
        outcomes = runner.run(tasks)

    except ReleaseError as e:
        console.print(f"\n[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=e.exit_code) from None

    released = [o.version for o in outcomes if o.version]
    summary = "[bold green]Done[/bold green]"
    if released:
        summary += f" - version {released[-1]}"
    if reporter.warnings:
        summary += f"\n[yellow]{len(reporter.warnings)} warning(s)[/yellow]"
    console.print(Panel(summary, border_style="green"))


@app.command(name="tasks")
def list_tasks() -> None:
    """List the available tasks."""
    table = Table(title="Tasks")
    table.add_column("Task", style="cyan")
    table.add_column("Description")

    for task in TaskRegistry.list_registered():
        table.add_row(task.name, task.description)

    console.print(table)


@app.command(name="init-config")
def init_config(
    output: Path = typer.Option(  # noqa: B008
        Path("push_release.yml"),
        "--output",
        "-o",
        help="Output path for configuration file",
    ),
    force: bool = typer.Option(  # noqa: B008
        False,
        "--force",
        "-f",
        help="Overwrite existing configuration",
    ),
) -> None:
    """Generate a configuration file listing every option.

    Examples:
        push-release init-config
        push-release init-config -o config/push_release.yml
    """
    if output.exists() and not force:
        console.print(f"[red]Configuration already exists:[/red] {output}")
        console.print("Use --force to overwrite")
        raise typer.Exit(code=1)

    try:
        write_default_config(output)
    except ReleaseError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=e.exit_code) from None

    console.print(f"[green]Configuration written to:[/green] {output}")


if __name__ == "__main__":
    app()
