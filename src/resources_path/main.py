import logging
from importlib.metadata import version as pkg_version
from typing import Optional

import typer

from resources_path.cli.show_cmd import env_command, file_command, show_command
from resources_path.config import load_env_file

app = typer.Typer(
    name="resources-path",
    help="Locate the application's Resources directory.",
    no_args_is_help=True,
    invoke_without_command=True,
)

app.command("show")(show_command)
app.command("file")(file_command)
app.command("env")(env_command)


def version_callback(value: bool):
    if value:
        typer.echo(f"resources-path {pkg_version('resources-path')}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit.",
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Enable debug logging.",
    ),
):
    """Locate the application's Resources directory."""
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(level=logging.WARNING, format="%(name)s %(levelname)s: %(message)s")
    logging.getLogger("resources_path").setLevel(level)
    load_env_file()


if __name__ == "__main__":
    app()
