# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""CLI command that lists upcoming run times."""

from __future__ import annotations

from typing import Annotated

import typer

from cronlens.cli.options import JsonOption, TimezoneOption, resolve_timezone_option, write_output


def next_command(
    expression: Annotated[str, typer.Argument(help="Cron expression or @alias")],
    count: Annotated[
        int | None, typer.Option("--count", "-c", help="Number of runs to show")
    ] = None,
    timezone: TimezoneOption = None,
    json_output: JsonOption = False,
) -> None:
    """Show the next run times for an expression."""
    from cronlens.cli.formatters import console as fmt
    from cronlens.cli.formatters.json_fmt import format_runs
    from cronlens.core.config import get_settings
    from cronlens.cron.parser import parse
    from cronlens.cron.scheduler import get_next_occurrences

    settings = get_settings()

    parsed = parse(expression)
    if not parsed.valid:
        fmt.print_error(f"invalid expression: {', '.join(parsed.errors)}")
        raise typer.Exit(1)

    if parsed.is_reboot:
        fmt.console.print("@reboot runs once at system startup - no scheduled times.")
        return

    tz = resolve_timezone_option(timezone)
    requested = count if count is not None else settings.default_count
    requested = max(1, min(requested, settings.max_count))

    runs = get_next_occurrences(parsed, requested, timezone=tz)

    if json_output:
        write_output(format_runs(expression, tz, runs))
        return

    if not runs:
        fmt.console.print("No upcoming runs found within the next year.", style="yellow")
        return
    fmt.format_next_runs(runs, tz)
