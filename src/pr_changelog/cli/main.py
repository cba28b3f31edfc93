"""Typer application."""

from __future__ import annotations

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from pr_changelog import __version__

app = typer.Typer(
    name="pr-changelog",
    help="Post a changelog comment on a pull request and compute the next version.",
    no_args_is_help=True,
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
    # Request logs from httpx are noisy at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"pr-changelog {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    _version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit."),
    ] = False,
) -> None:
    """pr-changelog command line."""


@app.command()
def run(
    path: Annotated[str | None, typer.Option("--path", "-p", help="Repository checkout path.")] = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Render without commenting or setting outputs.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """Generate the changelog comment and next version for the current pull request."""
    from pr_changelog.cli.commands.run import run_changelog

    _setup_logging(verbose)
    run_changelog(path, dry_run, console, err_console)


if __name__ == "__main__":
    app()
