# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared option types and call-boundary defaults for CLI commands."""

from __future__ import annotations

import sys
from typing import Annotated

import typer

from cronlens.core.config import get_settings

JsonOption = Annotated[bool, typer.Option("--json", help="Output as JSON")]

TimezoneOption = Annotated[
    str | None,
    typer.Option("--timezone", "-t", help="IANA timezone name, or 'local'"),
]


def resolve_timezone_option(timezone: str | None) -> str:
    """Fall back to the configured zone and reject unknown names."""
    from cronlens.cli.formatters.console import print_error
    from cronlens.cron.scheduler import is_valid_timezone

    tz = timezone or get_settings().default_timezone
    if not is_valid_timezone(tz):
        print_error(f"unknown timezone: {tz}")
        raise typer.Exit(1)
    return tz


def write_output(text: str) -> None:
    sys.stdout.write(text + "\n")
