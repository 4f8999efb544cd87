# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""CLI command converting between cron and other scheduler formats."""

from __future__ import annotations

from typing import Annotated

import typer

from cronlens.cli.options import JsonOption, write_output
from cronlens.core.constants import ScheduleFormat


def convert_command(
    expression: Annotated[
        str | None, typer.Argument(help="Expression to convert")
    ] = None,
    to_format: Annotated[
        ScheduleFormat | None,
        typer.Option("--to", help="Convert a standard expression TO this format"),
    ] = None,
    from_format: Annotated[
        ScheduleFormat | None,
        typer.Option("--from", help="Convert FROM this format to standard cron"),
    ] = None,
    formats: Annotated[
        bool, typer.Option("--formats", help="List supported formats")
    ] = False,
    json_output: JsonOption = False,
) -> None:
    """Convert an expression between scheduler syntaxes.

    Without --to or --from the source format is detected automatically and
    converted to standard cron.
    """
    import json

    from cronlens.cli.formatters import console as fmt
    from cronlens.cli.formatters.json_fmt import format_json
    from cronlens.cron.converter import FORMATS, detect_format, from_cron, to_cron

    if formats:
        if json_output:
            write_output(json.dumps({str(k): v for k, v in FORMATS.items()}, indent=2))
        else:
            fmt.format_formats(FORMATS)
        return

    if not expression:
        fmt.print_error("no expression provided")
        raise typer.Exit(1)

    if from_format is not None:
        result = to_cron(expression, from_format)
    elif to_format is not None:
        result = from_cron(expression, to_format)
    else:
        detected = detect_format(expression)
        if detected is None:
            fmt.print_error("could not detect format. use --from <format> to specify.")
            raise typer.Exit(1)
        if detected == ScheduleFormat.CRON:
            fmt.print_error(
                "already standard cron format. use --to <format> to convert elsewhere."
            )
            raise typer.Exit(1)
        result = to_cron(expression, detected)

    if not result.success:
        fmt.print_error(result.error or "conversion failed")
        raise typer.Exit(1)

    if json_output:
        write_output(format_json(result))
        return
    fmt.format_conversion(result)
