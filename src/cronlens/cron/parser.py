# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Expression parser: aliases, field splitting and error aggregation."""

from __future__ import annotations

import calendar

from cronlens.core.constants import FIELD_LABELS, FIELD_ORDER, ParseStatus
from cronlens.core.exceptions import ExpressionTypeError
from cronlens.cron.fields import FIELDS, parse_field
from cronlens.models.expression import ParsedExpression, ParsedField, ValidationResult

REBOOT_ALIAS = "@reboot"

ALIASES: dict[str, str | None] = {
    "@yearly": "0 0 1 1 *",
    "@annually": "0 0 1 1 *",
    "@monthly": "0 0 1 * *",
    "@weekly": "0 0 * * 0",
    "@daily": "0 0 * * *",
    "@midnight": "0 0 * * *",
    "@hourly": "0 * * * *",
    REBOOT_ALIAS: None,  # not a timed schedule
}

FIELD_ORDER_HINT = "Format: minute hour day-of-month month day-of-week"


def ensure_text(expression: object) -> str:
    if not isinstance(expression, str):
        raise ExpressionTypeError(
            f"expression must be a string, got {type(expression).__name__}"
        )
    return expression


def _field_errors(name: str, parsed: ParsedField) -> list[str]:
    label = FIELD_LABELS[name]
    errors: list[str] = []
    if parsed.out_of_range:
        values = ", ".join(str(v) for v in parsed.out_of_range)
        errors.append(f"{label}: values out of range ({values})")
    if parsed.invalid:
        errors.append(f"{label}: invalid value ({', '.join(parsed.invalid)})")
    return errors


def _parse_alias(expression: str, trimmed: str) -> ParsedExpression:
    alias = trimmed.lower()
    if alias == REBOOT_ALIAS:
        return ParsedExpression(status=ParseStatus.REBOOT, original=expression)

    substituted = ALIASES.get(alias)
    if substituted is None:
        return ParsedExpression(
            status=ParseStatus.STRUCTURAL_ERROR,
            original=expression,
            errors=[f"Unknown alias: {alias}"],
            suggestion=f"Valid aliases: {', '.join(ALIASES)}",
        )

    expanded = _parse_fields(substituted)
    return expanded.model_copy(update={"original": expression})


def _parse_fields(expression: str) -> ParsedExpression:
    parts = expression.strip().split()

    # A sixth leading field is taken as seconds and dropped
    if len(parts) not in (5, 6):
        return ParsedExpression(
            status=ParseStatus.STRUCTURAL_ERROR,
            original=expression,
            errors=[f"Invalid field count: expected 5, got {len(parts)}"],
            suggestion=FIELD_ORDER_HINT,
        )
    seconds_ignored = len(parts) == 6
    if seconds_ignored:
        parts = parts[1:]

    fields: dict[str, ParsedField] = {}
    errors: list[str] = []
    for name, raw in zip(FIELD_ORDER, parts, strict=True):
        parsed = parse_field(raw, FIELDS[name])
        fields[name] = parsed
        errors.extend(_field_errors(name, parsed))

    return ParsedExpression(
        status=ParseStatus.FIELD_ERROR if errors else ParseStatus.OK,
        original=expression,
        fields=fields,
        errors=errors,
        seconds_ignored=seconds_ignored,
    )


def parse(expression: str) -> ParsedExpression:
    """Parse a 5-field (or 6-field, seconds-first) expression or an ``@`` alias.

    Never raises for malformed text; inspect ``status`` or ``valid`` on
    the result.
    """
    ensure_text(expression)
    trimmed = expression.strip()
    if trimmed.startswith("@"):
        return _parse_alias(expression, trimmed)
    return _parse_fields(expression)


# ---------------------------------------------------------------------------
# Validation with advisory warnings
# ---------------------------------------------------------------------------


def _days_in_month(month: int) -> int:
    # Leap year so that Feb 29 counts as reachable
    return calendar.monthrange(2024, month)[1]


def _warnings(parsed: ParsedExpression) -> list[str]:
    if parsed.fields is None:
        return []

    warnings: list[str] = []
    dom = parsed.fields["dayOfMonth"]
    dow = parsed.fields["dayOfWeek"]
    month = parsed.fields["month"]

    if parsed.seconds_ignored:
        warnings.append("6 fields given: the leading seconds field is ignored")

    if not dom.is_wildcard and not dow.is_wildcard:
        warnings.append(
            "Both day of month and day of week are set: the job runs when "
            "either one matches, not only when both do"
        )
    elif not dom.is_wildcard and dom.values and month.values:
        reachable = any(
            day <= _days_in_month(m) for day in dom.values for m in month.values
        )
        if not reachable:
            warnings.append(
                "Day of month never occurs in the selected months: this may never run"
            )

    return warnings


def validate(expression: str) -> ValidationResult:
    """Return the validity verdict, collected errors and advisory warnings."""
    parsed = parse(expression)
    return ValidationResult(
        valid=parsed.valid,
        errors=list(parsed.errors),
        warnings=_warnings(parsed),
        suggestion=parsed.suggestion,
    )
