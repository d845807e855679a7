"""
Command line interface for the git remotes discovery tool.
"""

from __future__ import annotations

import logging
from contextlib import nullcontext
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from .errors import GitRemotesError, InvalidRootError
from .logger import configure_logging, get_logger, redirect_logging_to_file
from .rendering import OutputFormat
from .services import ScannerService, ScanRequest
from .settings import settings
from .version import get_version

app = typer.Typer(
    name="gitremotes",
    help="Search a directory for Git repositories and print their remotes.",
    add_completion=False,
)
configure_logging(enable_console=False)
log = get_logger(__name__)
console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(get_version())
        raise typer.Exit()


def _setup_logging(verbose: bool, log_file: Optional[Path]) -> None:
    if verbose:
        configure_logging(level=logging.DEBUG, enable_console=True)
    else:
        configure_logging(level=settings.log_level, enable_console=False)
    target = log_file or settings.log_file
    if target:
        redirect_logging_to_file(
            target.resolve(), level=logging.DEBUG if verbose else settings.log_level
        )


@app.command()
def main(
    directory: Optional[Path] = typer.Argument(
        None,
        help="Directory to search in (defaults to current directory).",
        show_default=False,
    ),
    tree: bool = typer.Option(
        False, "--tree", "-t", help="Recursively search through subdirectories."
    ),
    output_format: Optional[OutputFormat] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format (defaults to plain).",
        case_sensitive=False,
    ),
    follow_symlinks: bool = typer.Option(
        False,
        "--follow-symlinks",
        help="Descend into symlinked directories.",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Emit debug logs on stderr."
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log", help="Write detailed logs to the given file."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Search for .git/config files and print the remotes they declare."""
    _setup_logging(verbose, log_file)

    search_dir = directory if directory is not None else Path.cwd()
    request = ScanRequest(
        root=search_dir,
        recursive=tree or settings.tree,
        follow_symlinks=follow_symlinks or settings.follow_symlinks,
    )
    service = ScannerService()

    status = (
        console.status(f"Scanning {search_dir}")
        if console.is_terminal
        else nullcontext()
    )
    try:
        with status:
            result = service.scan(request)
        rendered = service.render(result, output_format)
    except InvalidRootError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)
    except GitRemotesError as exc:
        log.error("scan_failed", error=str(exc))
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(rendered.rstrip("\n"))


if __name__ == "__main__":  # pragma: no cover
    app()
