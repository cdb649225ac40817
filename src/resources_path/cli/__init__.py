"""CLI shared utilities: helpers used across all commands."""

from __future__ import annotations

from typing import NoReturn

import typer
from rich.console import Console

console = Console()


def cli_error(message: str) -> NoReturn:
    """Print a red error message and exit with code 1."""
    console.print(f"[red]{message}[/red]")
    raise typer.Exit(code=1)
