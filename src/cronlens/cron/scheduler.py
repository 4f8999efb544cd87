# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Next-occurrence scheduler.

Walks forward from a start instant one minute at a time and tests each
candidate against the parsed field sets, evaluated in the local calendar
of the requested timezone.  The walk is bounded to one year of minutes,
so an expression that never fires (``0 0 31 2 *``) returns an empty list
instead of looping.

Candidates are stepped in UTC, so a DST gap simply never produces a local
time and a repeated local hour is visited twice.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from cronlens.core.constants import MINUTES_PER_YEAR
from cronlens.core.exceptions import UnknownTimezoneError
from cronlens.cron.parser import parse
from cronlens.models.expression import ParsedExpression

logger = logging.getLogger("cronlens.cron.scheduler")

LOCAL_TIMEZONE = "local"

_ONE_MINUTE = timedelta(minutes=1)


def resolve_timezone(name: str) -> tzinfo | None:
    """Return the tzinfo for *name*; ``None`` stands for the process zone."""
    if name == LOCAL_TIMEZONE:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise UnknownTimezoneError(f"Unknown timezone: {name!r}") from exc


def is_valid_timezone(name: str) -> bool:
    try:
        resolve_timezone(name)
    except UnknownTimezoneError:
        return False
    return True


def _to_utc(instant: datetime, zone: tzinfo | None) -> datetime:
    # Naive instants are wall times in the requested zone
    if instant.tzinfo is None:
        instant = instant.astimezone() if zone is None else instant.replace(tzinfo=zone)
    return instant.astimezone(UTC)


class _Matcher:
    """The four-clause predicate for one parsed expression."""

    def __init__(self, parsed: ParsedExpression) -> None:
        dom = parsed.field("dayOfMonth")
        dow = parsed.field("dayOfWeek")
        self.minutes = frozenset(parsed.field("minute").values)
        self.hours = frozenset(parsed.field("hour").values)
        self.days = frozenset(dom.values)
        self.months = frozenset(parsed.field("month").values)
        self.weekdays = frozenset(dow.values)
        self.dom_all = dom.is_wildcard
        self.dow_all = dow.is_wildcard

    def day_matches(self, local: datetime) -> bool:
        if self.dom_all and self.dow_all:
            return True
        # isoweekday: 1=Mon..7=Sun -> 0=Sun..6=Sat
        weekday = local.isoweekday() % 7
        if self.dom_all:
            return weekday in self.weekdays
        if self.dow_all:
            return local.day in self.days
        # POSIX: both constrained means either may match
        return local.day in self.days or weekday in self.weekdays

    def hour_matches(self, local: datetime) -> bool:
        return (
            local.month in self.months
            and local.hour in self.hours
            and self.day_matches(local)
        )

    def __call__(self, local: datetime) -> bool:
        return local.minute in self.minutes and self.hour_matches(local)


def _coerce(expression: str | ParsedExpression) -> ParsedExpression:
    if isinstance(expression, ParsedExpression):
        return expression
    return parse(expression)


def _walk(
    matcher: _Matcher,
    first: datetime,
    stop: datetime,
    zone: tzinfo | None,
    limit: int,
) -> list[datetime]:
    found: list[datetime] = []
    candidate = first
    while candidate < stop and len(found) < limit:
        local = candidate.astimezone(zone)
        if matcher.hour_matches(local):
            if local.minute in matcher.minutes:
                found.append(local)
            candidate += _ONE_MINUTE
        else:
            # Nothing else in this local hour can match
            candidate += timedelta(minutes=60 - local.minute)
    return found


def get_next_occurrences(
    expression: str | ParsedExpression,
    count: int = 5,
    *,
    timezone: str = LOCAL_TIMEZONE,
    start: datetime | None = None,
) -> list[datetime]:
    """Return up to *count* instants after *start* at which *expression* fires.

    The minute containing *start* is always skipped.  Results are aware
    datetimes in *timezone*.  Invalid expressions and ``@reboot`` yield an
    empty list.
    """
    parsed = _coerce(expression)
    if not parsed.valid or parsed.is_reboot or count <= 0:
        return []

    zone = resolve_timezone(timezone)
    if start is None:
        start = datetime.now(UTC)

    first = _to_utc(start, zone).replace(second=0, microsecond=0) + _ONE_MINUTE
    stop = first + timedelta(minutes=MINUTES_PER_YEAR)

    found = _walk(_Matcher(parsed), first, stop, zone, count)
    if len(found) < count:
        logger.debug(
            "Search window exhausted for %r: %d of %d occurrences found",
            parsed.original, len(found), count,
        )
    return found


def occurrences_between(
    expression: str | ParsedExpression,
    start: datetime,
    end: datetime,
    *,
    timezone: str = LOCAL_TIMEZONE,
    limit: int = 100,
) -> list[datetime]:
    """Return matches from the minute of *start* through *end*, inclusive."""
    parsed = _coerce(expression)
    if not parsed.valid or parsed.is_reboot or limit <= 0:
        return []

    zone = resolve_timezone(timezone)
    first = _to_utc(start, zone).replace(second=0, microsecond=0)
    stop = min(
        _to_utc(end, zone) + _ONE_MINUTE,
        first + timedelta(minutes=MINUTES_PER_YEAR),
    )
    return _walk(_Matcher(parsed), first, stop, zone, limit)


def matches(
    expression: str | ParsedExpression,
    instant: datetime,
    *,
    timezone: str = LOCAL_TIMEZONE,
) -> bool:
    """Return True if *expression* fires during the minute of *instant*.

    Aware instants are converted to *timezone* first; naive instants are
    taken as wall-clock times there.
    """
    parsed = _coerce(expression)
    if not parsed.valid or parsed.is_reboot:
        return False

    local = instant
    if instant.tzinfo is not None:
        local = instant.astimezone(resolve_timezone(timezone))
    return _Matcher(parsed)(local)
