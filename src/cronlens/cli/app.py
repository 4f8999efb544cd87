# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

from typing import Annotated

import typer

from cronlens import __version__
from cronlens.cli.commands.convert import convert_command
from cronlens.cli.commands.diff import diff_command
from cronlens.cli.commands.examples import examples_command
from cronlens.cli.commands.explain import explain_command
from cronlens.cli.commands.generate import generate_command
from cronlens.cli.commands.next import next_command
from cronlens.cli.commands.tester import check_command
from cronlens.cli.commands.validate import validate_command

app = typer.Typer(
    name="cronlens",
    help="Decode, validate, generate and convert cron expressions",
    no_args_is_help=True,
)

app.command(name="explain")(explain_command)
app.command(name="validate")(validate_command)
app.command(name="next")(next_command)
app.command(name="diff")(diff_command)
app.command(name="generate")(generate_command)
app.command(name="convert")(convert_command)
app.command(name="test")(check_command)
app.command(name="examples")(examples_command)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"cronlens {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version", callback=_version_callback, is_eager=True, help="Show version"
        ),
    ] = False,
) -> None:
    """Configure logging before any command runs."""
    from cronlens.cli.formatters.console import print_error
    from cronlens.core.config import get_settings
    from cronlens.core.exceptions import ConfigurationError
    from cronlens.core.logging import setup_logging

    try:
        settings = get_settings()
    except ConfigurationError as exc:
        print_error(str(exc))
        raise typer.Exit(1) from None
    setup_logging("DEBUG" if verbose else settings.log_level, settings.log_format)
