# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""CLI command that explains an expression in plain English."""

from __future__ import annotations

import json
from typing import Annotated

import typer

from cronlens.cli.options import JsonOption, TimezoneOption, resolve_timezone_option, write_output


def explain_command(
    expression: Annotated[str, typer.Argument(help="Cron expression or @alias")],
    timezone: TimezoneOption = None,
    runs: Annotated[
        int, typer.Option("--runs", "-r", help="Also show the next N runs (0 to hide)")
    ] = 3,
    json_output: JsonOption = False,
) -> None:
    """Describe what a cron expression means."""
    from cronlens.cli.formatters import console as fmt
    from cronlens.cli.formatters.json_fmt import run_to_dict
    from cronlens.cron.describer import describe_parsed
    from cronlens.cron.parser import parse
    from cronlens.cron.scheduler import get_next_occurrences

    parsed = parse(expression)
    if not parsed.valid:
        fmt.print_error(f"invalid expression: {', '.join(parsed.errors)}")
        if parsed.suggestion:
            fmt.console.print(parsed.suggestion, style="dim")
        raise typer.Exit(1)

    tz = resolve_timezone_option(timezone)
    description = describe_parsed(parsed)
    next_runs = get_next_occurrences(parsed, max(runs, 0), timezone=tz)

    if json_output:
        data = {
            "expression": expression,
            "description": description,
            "valid": True,
            "is_reboot": parsed.is_reboot,
            "fields": (
                {name: field.model_dump() for name, field in parsed.fields.items()}
                if parsed.fields
                else None
            ),
            "timezone": tz,
            "next_runs": [run_to_dict(r) for r in next_runs],
        }
        write_output(json.dumps(data, indent=2))
        return

    fmt.print_header()
    fmt.format_explanation(expression, description, next_runs, tz)
