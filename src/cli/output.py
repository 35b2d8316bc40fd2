"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output.
Uses Rich for spinners, colored output and tables of Nuclino objects.
Supports verbosity levels and the --no-color flag.
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence
from uuid import UUID

from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.spinner import Spinner
from rich.table import Table

from src.models.page import Page
from src.models.user import Team
from src.models.workspace import Workspace


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Page created")
        >>> with handler.spinner("Fetching pages..."):
        ...     pass
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False, console: Optional[Console] = None):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
            console: Console to print to (a new one is created if omitted)
        """
        self.verbosity = verbosity
        self.console = console or Console(
            no_color=no_color,
            highlight=False,
        )

    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]✗[/red] {message}", style="red")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]⚠[/yellow] {message}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(message)

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2)."""
        if self.verbosity >= 2:
            self.console.print(f"[dim]{message}[/dim]")

    def print(self, message: str) -> None:
        """Display message without formatting."""
        self.console.print(message, markup=False)

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Display spinner while a request is in flight.

        Example:
            >>> with handler.spinner("Fetching page..."):
            ...     page = client.page(page_id)
        """
        if not self.console.is_terminal:
            yield
            return
        spinner = Spinner("dots", text=message)
        with Live(spinner, console=self.console, refresh_per_second=10, transient=True):
            yield

    def print_teams(self, teams: Sequence[Team]) -> None:
        table = Table(title="Teams")
        table.add_column("Name", style="blue")
        table.add_column("ID")
        table.add_column("URL")
        for team in teams:
            table.add_row(escape(team.name), str(team.id), escape(team.url))
        self.console.print(table)

    def print_workspaces(self, workspaces: Sequence[Workspace]) -> None:
        table = Table(title="Workspaces")
        table.add_column("Name", style="blue")
        table.add_column("ID")
        table.add_column("Pages", justify="right")
        for workspace in workspaces:
            table.add_row(escape(workspace.name), str(workspace.id), str(len(workspace.children)))
        self.console.print(table)

    def print_pages(self, pages: Sequence[Page], title: str = "Pages") -> None:
        """Display pages as a table, one row per page with its kind."""
        table = Table(title=escape(title))
        table.add_column("Title", style="yellow")
        table.add_column("Kind")
        table.add_column("ID")
        if self.verbosity >= 1:
            table.add_column("Modified")
        for page in pages:
            row: List[str] = [escape(page.title), page.kind.value, str(page.id)]
            if self.verbosity >= 1:
                row.append(page.modified)
            table.add_row(*row)
        self.console.print(table)

        highlights = [page.item.highlight for page in pages if page.item and page.item.highlight]
        for highlight in highlights:
            self.debug(f"  … {escape(highlight)}")

    def print_page(self, page: Page) -> None:
        """Display a single page with its content or children."""
        self.console.print(f"[bold yellow]{escape(page.title)}[/bold yellow] ({page.kind.value})")
        self.console.print(f"  ID: {page.id}")
        self.print(f"  URL: {page.url}")
        self.console.print(f"  Modified: {page.modified} by {page.modified_by}")

        if page.collection is not None:
            self._print_ids("Children", page.collection.children)
            return

        item = page.item
        if item is None:
            return
        for name, value in item.field_values.items():
            self.print(f"  {name}: {value}")
        if item.content:
            self.console.print("")
            self.print(item.content)

    def _print_ids(self, label: str, ids: Sequence[UUID]) -> None:
        self.console.print(f"  {label} ({len(ids)}):")
        for child_id in ids:
            self.console.print(f"    • {child_id}")
