# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Convert between standard cron and other scheduler syntaxes.

Standard 5-field cron is the hub: ``from_cron`` renders it as systemd
``OnCalendar``, AWS EventBridge, GitHub Actions or Quartz/Jenkins, and
``to_cron`` brings those back.  Failures are returned as unsuccessful
``ConversionResult`` values.
"""

from __future__ import annotations

import logging
import re

from cronlens.core.constants import ScheduleFormat
from cronlens.cron.describer import describe_parsed
from cronlens.cron.parser import ensure_text, parse
from cronlens.models.expression import ParsedExpression, ParsedField
from cronlens.models.results import ConversionResult

logger = logging.getLogger("cronlens.cron.converter")

FORMATS: dict[str, str] = {
    ScheduleFormat.CRON: "Standard cron (5 fields)",
    ScheduleFormat.SYSTEMD: "systemd OnCalendar format",
    ScheduleFormat.AWS: "AWS CloudWatch Events / EventBridge",
    ScheduleFormat.GITHUB: "GitHub Actions schedule",
    ScheduleFormat.QUARTZ: "Quartz scheduler (Java)",
    ScheduleFormat.JENKINS: "Jenkins cron syntax",
}

_SYSTEMD_DAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

SYSTEMD_PRESETS: dict[str, str] = {
    "minutely": "* * * * *",
    "hourly": "0 * * * *",
    "daily": "0 0 * * *",
    "weekly": "0 0 * * 0",
    "monthly": "0 0 1 * *",
    "yearly": "0 0 1 1 *",
    "annually": "0 0 1 1 *",
}

_AWS_RE = re.compile(r"cron\s*\(\s*(.+?)\s*\)", re.IGNORECASE)
_NUMERIC_RANGE_RE = re.compile(r"^(\d+)-(\d+)$", re.ASCII)
_DETECT_AWS_RE = re.compile(r"^cron\s*\(", re.IGNORECASE)
_DETECT_SYSTEMD_RE = re.compile(r"^\w+-\w+-\w+\s")


def _failure(error: str, fmt: str | None = None) -> ConversionResult:
    logger.debug("Conversion to %s failed: %s", fmt or "unknown", error)
    return ConversionResult(success=False, format=fmt, error=error)


def _parse_for(expression: str, fmt: str) -> ParsedExpression | ConversionResult:
    parsed = parse(ensure_text(expression))
    if not parsed.valid:
        return _failure(", ".join(parsed.errors), fmt)
    return parsed


# ---------------------------------------------------------------------------
# Day-of-week numbering (0=Sunday <-> 1=Sunday)
# ---------------------------------------------------------------------------


def _to_one_based(day: int) -> int:
    return 1 if day in (0, 7) else day + 1


def _to_zero_based(day: int) -> int:
    return 0 if day == 1 else day - 1


def _one_based_weekdays(field: ParsedField) -> str:
    """Shift a standard weekday field to the 1=Sunday convention.

    A plain ``a-b`` range keeps its range form when the shifted bounds still
    cover exactly the parsed days; everything else (a range ending in 7
    included) is listed value by value.
    """
    shifted = [_to_one_based(d) for d in field.values]
    match = _NUMERIC_RANGE_RE.match(field.raw)
    if match:
        start = _to_one_based(int(match.group(1)))
        end = _to_one_based(int(match.group(2)))
        if start <= end and list(range(start, end + 1)) == shifted:
            return f"{start}-{end}"
    return ",".join(str(d) for d in shifted)


def _zero_based_token(token: str) -> str:
    if token.isascii() and token.isdigit():
        return str(_to_zero_based(int(token)))
    match = _NUMERIC_RANGE_RE.match(token)
    if match:
        start = _to_zero_based(int(match.group(1)))
        end = _to_zero_based(int(match.group(2)))
        if start <= end:
            return f"{start}-{end}"
    # Names and other syntax mean the same in both conventions
    return token


def _zero_based_weekdays(text: str) -> str:
    return ",".join(_zero_based_token(token) for token in text.split(","))


def _question_mark_days(parsed: ParsedExpression) -> tuple[str, str]:
    """Return (day-of-month, day-of-week) with ``?`` on the unconstrained side.

    AWS and Quartz reject ``*`` in both day fields.
    """
    dom = parsed.field("dayOfMonth")
    dow = parsed.field("dayOfWeek")
    if dow.is_wildcard:
        return dom.raw, "?"
    if dom.is_wildcard:
        return "?", _one_based_weekdays(dow)
    return dom.raw, _one_based_weekdays(dow)


# ---------------------------------------------------------------------------
# cron -> other formats
# ---------------------------------------------------------------------------


def _systemd_values(field: ParsedField, keep_step: bool = False) -> str:
    if field.is_wildcard:
        return "*"
    if keep_step and field.has_step:
        return field.raw
    return ",".join(str(v) for v in field.values)


def to_systemd(expression: str) -> ConversionResult:
    fmt = ScheduleFormat.SYSTEMD
    parsed = _parse_for(expression, fmt)
    if isinstance(parsed, ConversionResult):
        return parsed
    if parsed.is_reboot:
        return ConversionResult(
            success=True,
            format=fmt,
            result="@reboot",
            note="Closest systemd equivalent is OnBootSec= in a timer unit",
            exact=False,
        )

    parts: list[str] = []
    dow = parsed.field("dayOfWeek")
    if not dow.is_wildcard:
        parts.append(",".join(_SYSTEMD_DAYS[d] for d in dow.values))

    month = parsed.field("month")
    dom = parsed.field("dayOfMonth")
    if month.is_wildcard and dom.is_wildcard:
        parts.append("*")
    else:
        parts.append(f"*-{_systemd_values(month)}-{_systemd_values(dom)}")

    hour = _systemd_values(parsed.field("hour"), keep_step=True)
    minute = _systemd_values(parsed.field("minute"), keep_step=True)
    parts.append(f"{hour}:{minute}:00")

    return ConversionResult(
        success=True,
        format=fmt,
        result=" ".join(parts),
        description=describe_parsed(parsed),
        note="Use with OnCalendar= in systemd timer units",
    )


def to_aws(expression: str) -> ConversionResult:
    fmt = ScheduleFormat.AWS
    parsed = _parse_for(expression, fmt)
    if isinstance(parsed, ConversionResult):
        return parsed
    if parsed.is_reboot:
        return _failure("AWS does not support @reboot", fmt)

    dom, dow = _question_mark_days(parsed)
    minute = parsed.field("minute").raw
    hour = parsed.field("hour").raw
    month = parsed.field("month").raw

    return ConversionResult(
        success=True,
        format=fmt,
        result=f"cron({minute} {hour} {dom} {month} {dow} *)",
        description=describe_parsed(parsed),
        note="AWS CloudWatch Events / EventBridge format (times in UTC)",
    )


def to_github(expression: str) -> ConversionResult:
    fmt = ScheduleFormat.GITHUB
    parsed = _parse_for(expression, fmt)
    if isinstance(parsed, ConversionResult):
        return parsed
    if parsed.is_reboot:
        return _failure("GitHub Actions does not support @reboot", fmt)

    cron = parsed.canonical()
    yaml = f"on:\n  schedule:\n    - cron: '{cron}'"

    return ConversionResult(
        success=True,
        format=fmt,
        result=yaml,
        expression=cron,
        description=describe_parsed(parsed),
        note="GitHub Actions uses UTC timezone",
    )


def to_quartz(expression: str, fmt: str = ScheduleFormat.QUARTZ) -> ConversionResult:
    parsed = _parse_for(expression, fmt)
    if isinstance(parsed, ConversionResult):
        return parsed
    if parsed.is_reboot:
        label = "Jenkins" if fmt == ScheduleFormat.JENKINS else "Quartz"
        return _failure(f"{label} does not support @reboot", fmt)

    dom, dow = _question_mark_days(parsed)
    minute = parsed.field("minute").raw
    hour = parsed.field("hour").raw
    month = parsed.field("month").raw

    return ConversionResult(
        success=True,
        format=fmt,
        result=f"0 {minute} {hour} {dom} {month} {dow}",
        description=describe_parsed(parsed),
        note="Quartz Scheduler format (Java). First field is seconds.",
    )


def from_cron(expression: str, target_format: str) -> ConversionResult:
    """Convert a standard expression into *target_format*."""
    target = target_format.lower()
    if target == ScheduleFormat.SYSTEMD:
        return to_systemd(expression)
    if target == ScheduleFormat.AWS:
        return to_aws(expression)
    if target == ScheduleFormat.GITHUB:
        return to_github(expression)
    if target in (ScheduleFormat.QUARTZ, ScheduleFormat.JENKINS):
        return to_quartz(expression, ScheduleFormat(target))
    return _failure(f"Unknown format: {target_format}")


# ---------------------------------------------------------------------------
# other formats -> cron
# ---------------------------------------------------------------------------


def _cron_result(
    fields: list[str], *, note: str | None = None, exact: bool = True
) -> ConversionResult:
    standard = " ".join(fields)
    parsed = parse(standard)
    if not parsed.valid:
        return _failure(
            f"Converted expression {standard!r} is invalid: {', '.join(parsed.errors)}",
            ScheduleFormat.CRON,
        )
    return ConversionResult(
        success=True,
        format=ScheduleFormat.CRON,
        result=standard,
        description=describe_parsed(parsed),
        note=note,
        exact=exact,
    )


def _wildcard_question(token: str) -> str:
    return "*" if token == "?" else token


def _from_aws(expression: str) -> ConversionResult:
    match = _AWS_RE.search(expression)
    if not match:
        return _failure("Invalid AWS cron format. Expected: cron(...)", ScheduleFormat.CRON)

    parts = match.group(1).split()
    if len(parts) != 6:
        return _failure(
            f"Invalid AWS cron: expected 6 fields, got {len(parts)}", ScheduleFormat.CRON
        )

    # The trailing year field has no cron equivalent
    minute, hour, dom, month, dow = (_wildcard_question(p) for p in parts[:5])
    if dow != "*":
        dow = _zero_based_weekdays(dow)
    exact = parts[5] in ("*", "?")
    return _cron_result(
        [minute, hour, dom, month, dow],
        note=None if exact else f"Year restriction {parts[5]!r} dropped",
        exact=exact,
    )


def _systemd_weekdays(token: str) -> list[int]:
    """Expand ``Mon,Wed`` and ``Mon..Fri`` style weekday lists."""
    lookup = {name.lower(): i for i, name in enumerate(_SYSTEMD_DAYS)}
    days: list[int] = []
    for part in token.split(","):
        start, sep, end = part.partition("..")
        first = lookup.get(start[:3].lower())
        if first is None:
            continue
        if not sep:
            days.append(first)
            continue
        last = lookup.get(end[:3].lower())
        if last is None:
            continue
        # Mon..Sun wraps past Saturday
        span = (last - first) % 7
        days.extend((first + i) % 7 for i in range(span + 1))
    return sorted(set(days))


def _from_systemd(expression: str) -> ConversionResult:
    text = expression.strip()
    if text.lower().startswith("oncalendar="):
        text = text.split("=", 1)[1].strip()

    preset = SYSTEMD_PRESETS.get(text.lower())
    if preset is not None:
        return _cron_result(preset.split())

    minute = hour = dom = month = dow = "*"

    for token in text.split():
        if any(name in token for name in _SYSTEMD_DAYS):
            days = _systemd_weekdays(token)
            if days:
                dow = ",".join(str(d) for d in days)
            continue
        if "-" in token and ":" not in token:
            date_parts = token.split("-")
            if len(date_parts) >= 2:
                # *-MM-DD or YYYY-MM-DD
                if date_parts[-2] != "*":
                    month = date_parts[-2]
                if date_parts[-1] != "*":
                    dom = date_parts[-1]
            continue
        if ":" in token:
            time_parts = token.split(":")
            if time_parts[0] != "*":
                hour = time_parts[0]
            if len(time_parts) > 1 and time_parts[1] != "*":
                minute = time_parts[1]

    return _cron_result(
        [minute, hour, dom, month, dow],
        note="Conversion is best-effort. Some systemd features may not translate.",
        exact=False,
    )


def _from_quartz(expression: str) -> ConversionResult:
    parts = expression.split()
    if len(parts) not in (6, 7):
        return _failure("Invalid Quartz/Jenkins format", ScheduleFormat.CRON)

    minute, hour, dom, month, dow = (_wildcard_question(p) for p in parts[1:6])
    if dow != "*":
        dow = _zero_based_weekdays(dow)

    dropped = []
    if parts[0] not in ("0", "*"):
        dropped.append(f"seconds {parts[0]!r}")
    if len(parts) == 7 and parts[6] not in ("*", "?"):
        dropped.append(f"year {parts[6]!r}")
    return _cron_result(
        [minute, hour, dom, month, dow],
        note=f"Dropped {' and '.join(dropped)}" if dropped else None,
        exact=not dropped,
    )


def to_cron(expression: str, source_format: str) -> ConversionResult:
    """Convert *expression* written in *source_format* to standard cron."""
    ensure_text(expression)
    source = source_format.lower()
    if source == ScheduleFormat.CRON:
        return _cron_result(expression.split())
    if source == ScheduleFormat.AWS:
        return _from_aws(expression)
    if source == ScheduleFormat.SYSTEMD:
        return _from_systemd(expression)
    if source in (ScheduleFormat.QUARTZ, ScheduleFormat.JENKINS):
        return _from_quartz(expression)
    return _failure(f"Unknown format: {source_format}")


def detect_format(expression: str) -> str | None:
    """Guess the syntax of *expression*; 6 or 7 fields default to Quartz."""
    text = ensure_text(expression).strip()

    if _DETECT_AWS_RE.match(text):
        return ScheduleFormat.AWS
    if "OnCalendar" in text or _DETECT_SYSTEMD_RE.match(text):
        return ScheduleFormat.SYSTEMD

    count = len(text.split())
    if count == 5:
        return ScheduleFormat.CRON
    if count in (6, 7):
        return ScheduleFormat.QUARTZ
    return None
