# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""CLI command testing an expression against specific dates."""

from __future__ import annotations

import json
import re
from datetime import datetime, time, timedelta
from typing import Annotated

import typer

from cronlens.cli.options import JsonOption, TimezoneOption, resolve_timezone_option, write_output

_DATE_FORMATS = (
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d",
)

_MONTH_DAY_RE = re.compile(
    r"^(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)\w*\s+(\d{1,2})(?:,?\s*(\d{4}))?$"
)
_MONTHS = ("jan", "feb", "mar", "apr", "may", "jun",
           "jul", "aug", "sep", "oct", "nov", "dec")


def parse_date(text: str, *, now: datetime | None = None) -> datetime | None:
    """Parse a user-supplied date as a naive wall-clock time, or None."""
    value = text.strip()
    for pattern in _DATE_FORMATS:
        try:
            return datetime.strptime(value, pattern)
        except ValueError:
            continue

    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        pass
    else:
        return parsed

    now = now or datetime.now()
    today = datetime.combine(now.date(), time())
    lower = value.lower()
    relative = {
        "today": today,
        "tomorrow": today + timedelta(days=1),
        "yesterday": today - timedelta(days=1),
        "now": now.replace(second=0, microsecond=0),
    }
    if lower in relative:
        return relative[lower]

    match = _MONTH_DAY_RE.match(lower)
    if match:
        month = _MONTHS.index(match.group(1)) + 1
        year = int(match.group(3)) if match.group(3) else now.year
        try:
            return datetime(year, month, int(match.group(2)))
        except ValueError:
            return None
    return None


def check_command(
    expression: Annotated[str, typer.Argument(help="Cron expression or @alias")],
    date: Annotated[
        str | None, typer.Option("--date", help='Single date, e.g. "2024-12-25 09:00"')
    ] = None,
    dates: Annotated[
        str | None, typer.Option("--dates", help="Comma-separated dates")
    ] = None,
    date_range: Annotated[
        str | None,
        typer.Option("--range", help="Date range, e.g. 2024-01-01..2024-01-07"),
    ] = None,
    timezone: TimezoneOption = None,
    json_output: JsonOption = False,
) -> None:
    """Test whether an expression runs at given dates."""
    from cronlens.cli.formatters import console as fmt
    from cronlens.core.config import get_settings
    from cronlens.cron.describer import describe_parsed
    from cronlens.cron.parser import parse
    from cronlens.cron.scheduler import matches, occurrences_between
    from cronlens.models import MatchResult

    parsed = parse(expression)
    if not parsed.valid:
        fmt.print_error(f"invalid expression: {', '.join(parsed.errors)}")
        raise typer.Exit(1)
    if parsed.is_reboot:
        fmt.console.print("@reboot runs at system startup, not at specific times.")
        return

    tz = resolve_timezone_option(timezone)
    description = describe_parsed(parsed)

    if date_range:
        start_text, _, end_text = date_range.partition("..")
        start = parse_date(start_text)
        end = parse_date(end_text)
        if start is None or end is None:
            fmt.print_error(
                f'could not parse range: "{date_range}". Use format: 2024-01-01..2024-01-07'
            )
            raise typer.Exit(1)
        end_of_day = datetime.combine(end.date(), time(23, 59))
        runs = occurrences_between(
            parsed, start, end_of_day, timezone=tz, limit=get_settings().range_limit
        )
        if json_output:
            write_output(json.dumps({
                "expression": expression,
                "description": description,
                "range": {"start": start.isoformat(), "end": end_of_day.isoformat()},
                "match_count": len(runs),
                "matches": [r.isoformat() for r in runs],
            }, indent=2))
            return
        fmt.format_range(expression, description, start, end_of_day, runs)
        return

    candidates: list[str] = []
    if date:
        candidates.append(date)
    if dates:
        candidates.extend(d.strip() for d in dates.split(",") if d.strip())
    if not candidates:
        fmt.print_error("specify a date to test with --date, --dates, or --range")
        raise typer.Exit(1)

    results: list[MatchResult] = []
    for text in candidates:
        instant = parse_date(text)
        if instant is None:
            fmt.print_error(f'could not parse date: "{text}"')
            raise typer.Exit(1)
        results.append(
            MatchResult(instant=instant, matches=matches(parsed, instant, timezone=tz))
        )

    if json_output:
        write_output(json.dumps({
            "expression": expression,
            "description": description,
            "tests": [r.model_dump(mode="json") for r in results],
        }, indent=2))
        return
    fmt.format_matches(expression, description, results)
