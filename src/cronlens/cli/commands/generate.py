# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""CLI command that builds an expression from plain English."""

from __future__ import annotations

from typing import Annotated

import typer

from cronlens.cli.options import JsonOption, write_output


def generate_command(
    words: Annotated[
        list[str], typer.Argument(help='Schedule in words, e.g. "every monday at 9am"')
    ],
    json_output: JsonOption = False,
) -> None:
    """Generate a cron expression from a description."""
    from cronlens.cli.formatters import console as fmt
    from cronlens.cli.formatters.json_fmt import format_json
    from cronlens.cron.generator import generate

    text = " ".join(words)
    result = generate(text)

    if json_output:
        write_output(format_json(result))
        if not result.success:
            raise typer.Exit(1)
        return

    if not result.success:
        fmt.print_error(result.error or "could not generate an expression")
        if result.suggestion:
            fmt.console.print(result.suggestion, style="dim")
        raise typer.Exit(1)
    fmt.format_generation(text, result)
