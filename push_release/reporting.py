"""Console reporting for release tasks.

All task output goes through a Reporter so that warnings can be counted
and verbose output switched on from the command line.
"""

from rich.console import Console
from rich.markup import escape


class Reporter:
    """Thin wrapper around a rich Console.

    Attributes:
        console: Console used for output
        verbose_enabled: Whether verbose() lines are printed
        warnings: Every warning emitted so far, in order
    """

    def __init__(self, console: Console | None = None, verbose: bool = False) -> None:
        self.console = console if console is not None else Console()
        self.verbose_enabled = verbose
        self.warnings: list[str] = []

    def task(self, spec: str) -> None:
        self.console.print(f'\n[bold underline]Running "{escape(spec)}" task[/bold underline]')

    def step(self, name: str) -> None:
        self.console.print(f"\n[bold cyan]>[/bold cyan] {escape(name)}...")

    def ok(self, message: str) -> None:
        self.console.print(f"[green]  {escape(message)}[/green]")

    def warn(self, message: str) -> None:
        """Print a non-fatal warning and record it."""
        self.warnings.append(message)
        self.console.print(f"[yellow]  Warning: {escape(message)}[/yellow]")

    def verbose(self, message: str) -> None:
        if self.verbose_enabled:
            self.console.print(f"[dim]  {escape(message)}[/dim]")

    def error(self, message: str) -> None:
        """Mark the current step as failed.

        Details and fix hints are left to whoever handles the raised error.
        """
        self.console.print(f"[red]  Failed: {escape(message)}[/red]")
