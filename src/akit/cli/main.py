"""Typer app: global options and command registration."""

from __future__ import annotations

import logging

import typer
from rich.logging import RichHandler

from akit import __version__
from akit.utils.output import error_console

app = typer.Typer(
    name="akit",
    help="assistantkit: convert AI coding-assistant configuration between tool formats.",
    no_args_is_help=True,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_path=False)],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"akit {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    _configure_logging(verbose)


# Register commands
from akit.cli.config_cmd import config_app
from akit.cli.convert_cmd import register_convert_commands
from akit.cli.generate_cmd import register_generate_commands
from akit.cli.publish_cmd import register_publish_commands

app.add_typer(config_app, name="config", help="Manage global configuration")

register_convert_commands(app)
register_generate_commands(app)
register_publish_commands(app)
