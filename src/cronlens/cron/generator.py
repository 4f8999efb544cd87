# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Generate cron expressions from restricted English phrases.

Two tiers are tried in order:

1. A fixed phrase table.  Entries are checked in declaration order and the
   first phrase contained in the input wins, optionally re-timed by an
   ``at <time>`` clause.
2. A compositional fallback that lets several independent patterns
   (``every N minutes``, ``at 3pm``, ``on mondays``, ``in june`` ...) each
   fill in one or two fields of a ``* * * * *`` draft.

Every expression returned is re-validated by the parser.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from cronlens.cron.describer import describe_parsed
from cronlens.cron.parser import ensure_text, parse
from cronlens.models.results import Example, GenerationResult

logger = logging.getLogger("cronlens.cron.generator")

# Order matters: first contained phrase wins
PHRASES: tuple[tuple[str, str], ...] = (
    ("every minute", "* * * * *"),
    ("every hour", "0 * * * *"),
    ("hourly", "0 * * * *"),
    ("every day", "0 0 * * *"),
    ("daily", "0 0 * * *"),
    ("every week", "0 0 * * 0"),
    ("weekly", "0 0 * * 0"),
    ("every month", "0 0 1 * *"),
    ("monthly", "0 0 1 * *"),
    ("every year", "0 0 1 1 *"),
    ("yearly", "0 0 1 1 *"),
    ("annually", "0 0 1 1 *"),
    ("at midnight", "0 0 * * *"),
    ("midnight", "0 0 * * *"),
    ("at noon", "0 12 * * *"),
    ("noon", "0 12 * * *"),
    ("weekdays", "0 9 * * 1-5"),
    ("weekends", "0 9 * * 0,6"),
    ("every weekday", "0 9 * * 1-5"),
    ("every weekend", "0 9 * * 0,6"),
    ("business hours", "0 9-17 * * 1-5"),
    ("work hours", "0 9-17 * * 1-5"),
)

DAYS: dict[str, int] = {
    "sunday": 0, "sun": 0,
    "monday": 1, "mon": 1,
    "tuesday": 2, "tue": 2,
    "wednesday": 3, "wed": 3,
    "thursday": 4, "thu": 4,
    "friday": 5, "fri": 5,
    "saturday": 6, "sat": 6,
}

MONTHS: dict[str, int] = {
    "january": 1, "jan": 1,
    "february": 2, "feb": 2,
    "march": 3, "mar": 3,
    "april": 4, "apr": 4,
    "may": 5,
    "june": 6, "jun": 6,
    "july": 7, "jul": 7,
    "august": 8, "aug": 8,
    "september": 9, "sep": 9,
    "october": 10, "oct": 10,
    "november": 11, "nov": 11,
    "december": 12, "dec": 12,
}

SUGGESTION = (
    'Try patterns like: "every 5 minutes", "at 3pm on weekdays", "every monday at 9am"'
)

_TIME_12H_RE = re.compile(r"^(\d{1,2})(?::(\d{2}))?\s*(am|pm)?$")
_TIME_24H_RE = re.compile(r"^(\d{1,2}):(\d{2})$")
_AT_TIME_RE = re.compile(r"\bat\s+(\d{1,2}(?::\d{2})?\s*(?:am|pm)?)")
_EVERY_MINUTES_RE = re.compile(r"\bevery\s+(\d+)\s+minutes?\b")
_EVERY_HOURS_RE = re.compile(r"\bevery\s+(\d+)\s+hours?\b")
_EVERY_DAY_RE = re.compile(r"\bevery\s+day\b")
_DAY_OF_MONTH_RE = re.compile(
    r"\bon\s+(?:the\s+)?(\d{1,2})(?:st|nd|rd|th)?(?![\d:])(?!\s*(?:am|pm)\b)"
)
_DAY_RANGE_RE = re.compile(r"\b(\w+)\s+(?:through|to|-)\s+(\w+)\b")
_DAY_NAME_RES = tuple(
    (re.compile(rf"\b{name}s?\b"), value) for name, value in DAYS.items()
)
_MONTH_NAME_RES = tuple(
    (re.compile(rf"\bin\s+{name}\b"), value) for name, value in MONTHS.items()
)


@dataclass(frozen=True)
class TimeOfDay:
    hour: int
    minute: int


def parse_time(text: str) -> TimeOfDay | None:
    """Parse ``3pm``, ``3:45 pm``, ``9am`` or ``15:30``; None if unrecognised."""
    value = text.lower().strip()

    match = _TIME_12H_RE.match(value)
    if match:
        hour = int(match.group(1))
        minute = int(match.group(2) or 0)
        meridiem = match.group(3)
        if meridiem and hour > 12:
            return None
        if meridiem == "pm" and hour < 12:
            hour += 12
        elif meridiem == "am" and hour == 12:
            hour = 0
        if 0 <= hour <= 23 and 0 <= minute <= 59:
            return TimeOfDay(hour=hour, minute=minute)
        return None

    match = _TIME_24H_RE.match(value)
    if match:
        hour, minute = int(match.group(1)), int(match.group(2))
        if 0 <= hour <= 23 and 0 <= minute <= 59:
            return TimeOfDay(hour=hour, minute=minute)
    return None


def _at_time(text: str) -> TimeOfDay | None:
    match = _AT_TIME_RE.search(text)
    return parse_time(match.group(1)) if match else None


def _from_phrase_table(text: str) -> str | None:
    for phrase, template in PHRASES:
        if text == phrase or phrase in text:
            time = _at_time(text)
            if time is None:
                return template
            fields = template.split(" ")
            fields[0], fields[1] = str(time.minute), str(time.hour)
            return " ".join(fields)
    return None


class _Draft:
    """Five-field draft filled in by whichever patterns fire."""

    def __init__(self) -> None:
        self.minute = "*"
        self.hour = "*"
        self.day_of_month = "*"
        self.month = "*"
        self.day_of_week = "*"
        self.matched = False

    def default_time(self, hour: int) -> None:
        if self.minute == "*":
            self.minute = "0"
        if self.hour == "*":
            self.hour = str(hour)

    def render(self) -> str:
        return " ".join(
            (self.minute, self.hour, self.day_of_month, self.month, self.day_of_week)
        )


def _compose(text: str) -> str | None:
    draft = _Draft()

    if match := _EVERY_MINUTES_RE.search(text):
        draft.minute = f"*/{match.group(1)}"
        draft.matched = True

    if match := _EVERY_HOURS_RE.search(text):
        draft.minute = "0"
        draft.hour = f"*/{match.group(1)}"
        draft.matched = True

    if time := _at_time(text):
        draft.minute = str(time.minute)
        draft.hour = str(time.hour)
        draft.matched = True

    if _EVERY_DAY_RE.search(text):
        draft.default_time(0)
        draft.matched = True

    for pattern, value in _DAY_NAME_RES:
        if pattern.search(text):
            draft.day_of_week = str(value)
            draft.default_time(9)
            draft.matched = True
            break

    if match := _DAY_OF_MONTH_RE.search(text):
        day = int(match.group(1))
        if 1 <= day <= 31:
            draft.day_of_month = str(day)
            draft.default_time(0)
            draft.matched = True

    for pattern, value in _MONTH_NAME_RES:
        if pattern.search(text):
            draft.month = str(value)
            draft.matched = True
            break

    for match in _DAY_RANGE_RE.finditer(text):
        start = DAYS.get(match.group(1))
        end = DAYS.get(match.group(2))
        if start is not None and end is not None:
            draft.day_of_week = f"{start}-{end}"
            draft.default_time(9)
            draft.matched = True
            break

    return draft.render() if draft.matched else None


def generate(text: str) -> GenerationResult:
    """Turn a phrase such as ``"every monday at 9am"`` into an expression."""
    normalized = ensure_text(text).lower().strip()

    expression = _from_phrase_table(normalized) or _compose(normalized)
    if expression is None:
        return GenerationResult(
            success=False,
            error="Could not parse the description",
            suggestion=SUGGESTION,
        )

    parsed = parse(expression)
    if not parsed.valid:
        logger.debug("Generated %r from %r but it failed validation", expression, text)
        return GenerationResult(
            success=False,
            error=f"Generated an invalid expression: {', '.join(parsed.errors)}",
            suggestion=SUGGESTION,
        )

    return GenerationResult(
        success=True,
        expression=expression,
        description=describe_parsed(parsed),
    )


def get_examples() -> list[Example]:
    return [
        Example(description="Every minute", expression="* * * * *"),
        Example(description="Every 5 minutes", expression="*/5 * * * *"),
        Example(description="Every hour", expression="0 * * * *"),
        Example(description="Every day at midnight", expression="0 0 * * *"),
        Example(description="Every day at 9am", expression="0 9 * * *"),
        Example(description="Every Monday at 9am", expression="0 9 * * 1"),
        Example(description="Weekdays at 9am", expression="0 9 * * 1-5"),
        Example(description="First day of month at midnight", expression="0 0 1 * *"),
        Example(description="Every 15th at noon", expression="0 12 15 * *"),
        Example(description="Every Sunday at 6pm", expression="0 18 * * 0"),
        Example(description="Twice daily (9am and 5pm)", expression="0 9,17 * * *"),
        Example(
            description="Every quarter (Jan, Apr, Jul, Oct)",
            expression="0 0 1 1,4,7,10 *",
        ),
    ]
