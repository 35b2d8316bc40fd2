"""Main CLI entry point for the nuclino command.

This module provides the Typer application that serves as the entry point for
the nuclino command-line tool: a thin layer over NuclinoClient for browsing
teams, workspaces and pages, creating, updating and deleting pages, and
downloading files. The API key is read from NUCLINO_API_KEY (or a .env file).
"""

import logging
import sys
from pathlib import Path
from typing import Callable, Optional, TypeVar

import typer
from rich.markup import escape

from src.cli.models import ExitCode
from src.cli.output import OutputHandler
from src.nuclino_client.client import NuclinoClient
from src.nuclino_client.errors import NuclinoError
from src.nuclino_client.payloads import ModifyItem, NewPageBuilder

T = TypeVar('T')

app = typer.Typer(
    name="nuclino",
    help="""Command-line access to the Nuclino wiki API.

Set NUCLINO_API_KEY in the environment or in a .env file first.""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'src' namespace logger to avoid affecting third-party
    libraries. The root logger is left unchanged.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    app_logger = logging.getLogger("src")
    app_logger.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)8s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.handlers.clear()
    app_logger.addHandler(console_handler)


def _output(ctx: typer.Context) -> OutputHandler:
    if isinstance(ctx.obj, OutputHandler):
        return ctx.obj
    return OutputHandler()


def _run(output: OutputHandler, message: str, action: Callable[[NuclinoClient], T]) -> T:
    """Create a client from the environment and run one action with it.

    Client errors are reported and turned into the matching exit code.
    """
    try:
        client = NuclinoClient.create_from_env()
        with output.spinner(message):
            return action(client)
    except NuclinoError as e:
        logger.error(f"{message} failed: {e}")
        output.error(escape(str(e)))
        raise typer.Exit(ExitCode.for_error(e))
    except ValueError as e:
        output.error(f"Invalid input: {escape(str(e))}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)


@app.callback()
def main(
    ctx: typer.Context,
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
) -> None:
    """Command-line access to the Nuclino wiki API."""
    _configure_logging(verbosity)
    ctx.obj = OutputHandler(verbosity=verbosity, no_color=no_color)


@app.command()
def teams(
    ctx: typer.Context,
    limit: Optional[int] = typer.Option(None, "--limit", help="Maximum number of teams"),
    after: Optional[str] = typer.Option(None, "--after", help="Continue after this team id"),
) -> None:
    """List the teams you have access to."""
    output = _output(ctx)
    result = _run(output, "Fetching teams...", lambda c: c.team_list(limit, after))
    output.print_teams(result)


@app.command()
def workspaces(
    ctx: typer.Context,
    limit: Optional[int] = typer.Option(None, "--limit", help="Maximum number of workspaces"),
    after: Optional[str] = typer.Option(None, "--after", help="Continue after this workspace id"),
) -> None:
    """List the workspaces you have access to."""
    output = _output(ctx)
    result = _run(output, "Fetching workspaces...", lambda c: c.workspace_list(limit, after))
    output.print_workspaces(result)


@app.command()
def pages(
    ctx: typer.Context,
    workspace_id: str = typer.Argument(..., help="Workspace to list pages of"),
    limit: Optional[int] = typer.Option(None, "--limit", help="Maximum number of pages (server default 100)"),
    after: Optional[str] = typer.Option(None, "--after", help="Continue after this page id"),
) -> None:
    """List all items and collections in a workspace."""
    output = _output(ctx)
    result = _run(
        output,
        "Fetching pages...",
        lambda c: c.all_pages_for_workspace(workspace_id, limit, after),
    )
    output.print_pages(result.as_list())

    cursor = result.next_cursor()
    if cursor is not None:
        output.info(f"Next batch: --after {cursor}")


@app.command()
def show(
    ctx: typer.Context,
    page_id: str = typer.Argument(..., help="Page to show"),
) -> None:
    """Show a page with its content (items) or children (collections)."""
    output = _output(ctx)
    page = _run(output, "Fetching page...", lambda c: c.page(page_id))
    output.print_page(page)


@app.command()
def search(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text to search for"),
    workspace: Optional[str] = typer.Option(None, "--workspace", help="Search within this workspace"),
    team: Optional[str] = typer.Option(None, "--team", help="Search within this team"),
    limit: Optional[int] = typer.Option(None, "--limit", help="Maximum number of results"),
) -> None:
    """Search pages in a workspace or a team."""
    output = _output(ctx)
    if (workspace is None) == (team is None):
        output.error("Pass exactly one of --workspace or --team")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    if workspace is not None:
        results = _run(output, "Searching...", lambda c: c.search_workspace(workspace, text, limit))
    else:
        results = _run(output, "Searching...", lambda c: c.search_team(team, text, limit))

    if not results:
        output.warning(f"No pages match '{escape(text)}'")
        return
    output.print_pages(results, title=f"Results for '{text}'")


@app.command()
def create(
    ctx: typer.Context,
    title: str = typer.Option(..., "--title", help="Title of the new page"),
    workspace: Optional[str] = typer.Option(None, "--workspace", help="Create at the top level of this workspace"),
    parent: Optional[str] = typer.Option(None, "--parent", help="Create inside this collection"),
    content: Optional[str] = typer.Option(None, "--content", help="Markdown content (items only)"),
    collection: bool = typer.Option(False, "--collection", help="Create a collection instead of an item"),
    index: Optional[int] = typer.Option(None, "--index", help="Position among the parent's children"),
) -> None:
    """Create an item or a collection."""
    output = _output(ctx)
    if (workspace is None) == (parent is None):
        output.error("Pass exactly one of --workspace or --parent")
        raise typer.Exit(ExitCode.GENERAL_ERROR)
    if collection and content is not None:
        output.warning("Collections have no content; --content is ignored")

    def _create(client: NuclinoClient):
        builder = NewPageBuilder.collection() if collection else NewPageBuilder.item()
        builder.title(title)
        if workspace is not None:
            builder.workspace(workspace)
        else:
            builder.parent(parent)
        if content is not None:
            builder.content(content)
        if index is not None:
            builder.index(index)
        return client.page_create(builder.build())

    page = _run(output, "Creating page...", _create)
    output.success(f"Created {page.kind.value} '{escape(page.title)}' at {escape(page.url)}")


@app.command()
def update(
    ctx: typer.Context,
    page_id: str = typer.Argument(..., help="Page to update"),
    title: Optional[str] = typer.Option(None, "--title", help="New title"),
    content: Optional[str] = typer.Option(None, "--content", help="New Markdown content"),
) -> None:
    """Update the title and/or content of a page."""
    output = _output(ctx)
    if title is None and content is None:
        output.error("Nothing to update; pass --title and/or --content")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    changes = ModifyItem(title=title, content=content)
    page = _run(output, "Updating page...", lambda c: c.page_update(page_id, changes))
    output.success(f"Updated '{escape(page.title)}'")


@app.command()
def delete(
    ctx: typer.Context,
    page_id: str = typer.Argument(..., help="Page to move to the trash"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Move a page to the trash."""
    output = _output(ctx)
    if not yes and not typer.confirm(f"Move page {page_id} to the trash?"):
        raise typer.Exit(ExitCode.SUCCESS)

    deleted = _run(output, "Deleting page...", lambda c: c.page_delete(page_id))
    output.success(f"Moved page {deleted.id} to the trash")


@app.command()
def download(
    ctx: typer.Context,
    file_id: str = typer.Argument(..., help="File to download"),
    destination: Path = typer.Option(Path("."), "--output", "-o", help="File or directory to write to"),
) -> None:
    """Download a file attached to a page."""
    output = _output(ctx)
    path = _run(output, "Downloading file...", lambda c: c.save_file(file_id, destination))
    output.success(f"Saved {escape(str(path))}")


if __name__ == "__main__":
    app()
