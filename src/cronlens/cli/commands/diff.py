# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""CLI command for comparing two expressions."""

from __future__ import annotations

from typing import Annotated

import typer

from cronlens.cli.options import JsonOption, TimezoneOption, resolve_timezone_option, write_output


def diff_command(
    first: Annotated[str, typer.Argument(help="First cron expression")],
    second: Annotated[str, typer.Argument(help="Second cron expression")],
    timezone: TimezoneOption = None,
    json_output: JsonOption = False,
) -> None:
    """Compare two expressions field by field."""
    from cronlens.cli.formatters import console as fmt
    from cronlens.cli.formatters.json_fmt import format_json
    from cronlens.cron.comparator import compare

    tz = resolve_timezone_option(timezone)
    result = compare(first, second, timezone=tz)

    if not result.valid:
        fmt.print_error(result.error or "invalid expression")
        raise typer.Exit(1)

    if json_output:
        write_output(format_json(result))
        return
    fmt.format_comparison(first, second, result)
