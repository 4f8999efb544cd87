# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""CLI command that validates an expression."""

from __future__ import annotations

from typing import Annotated

import typer

from cronlens.cli.options import JsonOption, write_output


def validate_command(
    expression: Annotated[str, typer.Argument(help="Cron expression or @alias")],
    strict: Annotated[
        bool, typer.Option("--strict", help="Treat warnings as errors")
    ] = False,
    json_output: JsonOption = False,
) -> None:
    """Check an expression and report errors and warnings."""
    from cronlens.cli.formatters import console as fmt
    from cronlens.cli.formatters.json_fmt import format_json
    from cronlens.cron.parser import validate

    result = validate(expression)

    if json_output:
        write_output(format_json(result))
    else:
        fmt.format_validation(expression, result)

    if not result.valid or (strict and result.warnings):
        raise typer.Exit(1)
