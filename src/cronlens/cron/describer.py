# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Render a parsed expression as an English sentence."""

from __future__ import annotations

from cronlens.core.constants import DAY_NAMES, MONTH_NAMES
from cronlens.cron.parser import parse
from cronlens.models.expression import ParsedExpression, ParsedField

REBOOT_DESCRIPTION = "Run once at system startup"

_WEEKDAYS = (1, 2, 3, 4, 5)
_WEEKEND = (0, 6)


def _joined(values: tuple[int, ...]) -> str:
    return ", ".join(str(v) for v in values)


def _step_of(field: ParsedField) -> str:
    return field.raw.split("/", 1)[1]


def _format_hour(hour: int) -> str:
    suffix = "PM" if hour >= 12 else "AM"
    if hour == 0:
        hour = 12
    elif hour > 12:
        hour -= 12
    return f"{hour}{suffix}"


def _minute_clause(field: ParsedField) -> str:
    if field.is_wildcard:
        return "Every minute"
    if len(field.values) == 1:
        return f"At minute {field.values[0]}"
    if field.has_step:
        return f"Every {_step_of(field)} minutes"
    return f"At minutes {_joined(field.values)}"


def _hour_clause(field: ParsedField) -> str | None:
    if field.is_wildcard:
        return None
    if len(field.values) == 1:
        return f"at {_format_hour(field.values[0])}"
    if field.has_step:
        return f"every {_step_of(field)} hours"
    return f"during hours {_joined(field.values)}"


def _day_of_month_clause(field: ParsedField) -> str | None:
    if field.is_wildcard:
        return None
    if len(field.values) == 1:
        return f"on day {field.values[0]}"
    return f"on days {_joined(field.values)}"


def _month_clause(field: ParsedField) -> str | None:
    if field.is_wildcard:
        return None
    return "in " + ", ".join(MONTH_NAMES[m - 1] for m in field.values)


def _day_of_week_clause(field: ParsedField) -> str | None:
    if field.is_wildcard:
        return None
    if field.values == _WEEKDAYS:
        return "on weekdays"
    if field.values == _WEEKEND:
        return "on weekends"
    return "on " + ", ".join(DAY_NAMES[d] for d in field.values)


def describe_parsed(parsed: ParsedExpression) -> str:
    if not parsed.valid:
        return f"Invalid: {', '.join(parsed.errors)}"
    if parsed.is_reboot or parsed.fields is None:
        return REBOOT_DESCRIPTION

    fields = parsed.fields
    clauses = [
        _minute_clause(fields["minute"]),
        _hour_clause(fields["hour"]),
        _day_of_month_clause(fields["dayOfMonth"]),
        _month_clause(fields["month"]),
        _day_of_week_clause(fields["dayOfWeek"]),
    ]
    return " ".join(c for c in clauses if c)


def describe(expression: str) -> str:
    """Describe *expression* in English, or return ``"Invalid: <reason>"``."""
    return describe_parsed(parse(expression))
