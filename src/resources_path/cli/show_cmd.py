"""Inspect Resources directory resolution from the shell."""

from __future__ import annotations

import asyncio

import typer
from rich.table import Table

from resources_path.cli import cli_error, console
from resources_path.config import FOLDER_NAME, HOME_ENV, OVERRIDE_ENV, WORKSPACE_ENV
from resources_path.core.resolver import get_default_resolver


def show_command(
    explain: bool = typer.Option(
        False, "--explain", "-e", help="Show which convention matched."
    ),
    require_exists: bool = typer.Option(
        False, "--require-exists", help="Fail if no existing directory was found."
    ),
) -> None:
    """Print the resolved Resources directory."""
    resolver = get_default_resolver()

    if not (explain or require_exists):
        typer.echo(resolver.get_sync())
        return

    resolution = asyncio.run(resolver.resolve())
    if explain:
        table = Table(title=f"{FOLDER_NAME} Directory")
        table.add_column("Field", style="cyan")
        table.add_column("Value", overflow="fold")
        table.add_row("path", resolution.path)
        table.add_row("probe", f"[green]{resolution.probe.value}[/green]")
        table.add_row("exists", "yes" if resolution.exists else "[red]no[/red]")
        console.print(table)
    else:
        typer.echo(resolution.path)

    if require_exists and not resolution.exists:
        cli_error(
            f"No {FOLDER_NAME} directory found. "
            f"Set {OVERRIDE_ENV} or create {resolution.path}."
        )


def file_command(
    name: str = typer.Argument(..., help="File name relative to the Resources directory."),
) -> None:
    """Print the absolute path of a file under the Resources directory."""
    typer.echo(get_default_resolver().get_resource_file_path_sync(name))


def env_command() -> None:
    """Show the environment signals that gate each convention."""
    env = get_default_resolver().environment
    report = asyncio.run(env.report())

    table = Table(title="Runtime Environment")
    table.add_column("Signal", style="cyan")
    table.add_column("Value", overflow="fold")

    for signal, value in report.model_dump().items():
        table.add_row(signal, "[green]yes[/green]" if value else "[dim]no[/dim]")

    table.add_section()
    for var in (OVERRIDE_ENV, HOME_ENV, WORKSPACE_ENV):
        table.add_row(var, env.getenv(var) or "[dim](unset)[/dim]")

    console.print(table)
