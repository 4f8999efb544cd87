# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Compare two expressions field by field."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from cronlens.core.constants import FIELD_LABELS, FIELD_ORDER
from cronlens.cron.describer import describe_parsed
from cronlens.cron.parser import parse
from cronlens.cron.scheduler import LOCAL_TIMEZONE, get_next_occurrences
from cronlens.models.results import ComparisonResult, Descriptions, FieldDifference

OVERLAP_SAMPLE = 10
_OVERLAP_TOLERANCE = timedelta(seconds=60)


def _count_overlap(first: list[datetime], second: list[datetime]) -> int:
    return sum(
        1 for a in first if any(abs(a - b) < _OVERLAP_TOLERANCE for b in second)
    )


def compare(
    first: str,
    second: str,
    *,
    timezone: str = LOCAL_TIMEZONE,
    start: datetime | None = None,
) -> ComparisonResult:
    """Diff *first* against *second*.

    ``same`` reflects field value-set equality.  ``overlap`` counts how many
    of the first expression's next ten runs land within a minute of one of
    the second's.
    """
    parsed_first = parse(first)
    parsed_second = parse(second)

    if not parsed_first.valid:
        return ComparisonResult(
            valid=False,
            error=f"First expression invalid: {', '.join(parsed_first.errors)}",
        )
    if not parsed_second.valid:
        return ComparisonResult(
            valid=False,
            error=f"Second expression invalid: {', '.join(parsed_second.errors)}",
        )

    descriptions = Descriptions(
        first=describe_parsed(parsed_first),
        second=describe_parsed(parsed_second),
    )

    if parsed_first.is_reboot or parsed_second.is_reboot:
        same = parsed_first.is_reboot and parsed_second.is_reboot
        return ComparisonResult(
            valid=True,
            same=same,
            differences=[] if same else [
                FieldDifference(
                    field="schedule",
                    first=parsed_first.canonical(),
                    second=parsed_second.canonical(),
                )
            ],
            descriptions=descriptions,
        )

    differences: list[FieldDifference] = []
    similarities: list[str] = []
    for name in FIELD_ORDER:
        a = parsed_first.field(name)
        b = parsed_second.field(name)
        if set(a.values) == set(b.values):
            similarities.append(FIELD_LABELS[name])
        else:
            differences.append(
                FieldDifference(field=FIELD_LABELS[name], first=a.raw, second=b.raw)
            )

    if start is None:
        start = datetime.now(UTC)
    runs_first = get_next_occurrences(
        parsed_first, OVERLAP_SAMPLE, timezone=timezone, start=start
    )
    runs_second = get_next_occurrences(
        parsed_second, OVERLAP_SAMPLE, timezone=timezone, start=start
    )

    return ComparisonResult(
        valid=True,
        same=not differences,
        differences=differences,
        similarities=similarities,
        overlap=_count_overlap(runs_first, runs_second),
        descriptions=descriptions,
    )
