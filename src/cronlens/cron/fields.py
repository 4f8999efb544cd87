# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Field definitions and the single-field parser.

Each of the five cron positions is parsed independently into a concrete
set of integers.  Supported segment forms, joined with commas:

    *           every value in the field's bounds
    N           a single value (named values such as ``mon`` or ``jan`` allowed)
    A-B         an inclusive range
    X/S         any of the above stepped by S (``N/S`` runs from N to the maximum)

Out-of-range literals and unparseable tokens are recorded on the result
instead of raising, so sibling segments and fields keep parsing.
"""

from __future__ import annotations

from cronlens.models.expression import FieldDefinition, ParsedField

_MONTH_ABBRS = ("jan", "feb", "mar", "apr", "may", "jun",
                "jul", "aug", "sep", "oct", "nov", "dec")
_DAY_ABBRS = ("sun", "mon", "tue", "wed", "thu", "fri", "sat")

FIELDS: dict[str, FieldDefinition] = {
    "minute": FieldDefinition(name="minute", min=0, max=59),
    "hour": FieldDefinition(name="hour", min=0, max=23),
    "dayOfMonth": FieldDefinition(name="dayOfMonth", min=1, max=31),
    "month": FieldDefinition(
        name="month",
        min=1,
        max=12,
        named_values=tuple((name, i + 1) for i, name in enumerate(_MONTH_ABBRS)),
    ),
    # 0 and 7 both mean Sunday
    "dayOfWeek": FieldDefinition(
        name="dayOfWeek",
        min=0,
        max=7,
        named_values=tuple((name, i) for i, name in enumerate(_DAY_ABBRS)),
    ),
}


def _substitute_names(text: str, definition: FieldDefinition) -> str:
    normalized = text.lower()
    for name, value in definition.named_values:
        normalized = normalized.replace(name, str(value))
    return normalized


def _to_int(token: str) -> int | None:
    token = token.strip()
    if not (token.isascii() and token.isdigit()):
        return None
    return int(token)


class _FieldAccumulator:
    """Collects values, out-of-range literals and bad tokens for one field."""

    def __init__(self, definition: FieldDefinition) -> None:
        self.definition = definition
        self.values: set[int] = set()
        self.out_of_range: list[int] = []
        self.invalid: list[str] = []

    def in_bounds(self, value: int) -> bool:
        return self.definition.min <= value <= self.definition.max

    def add(self, value: int) -> None:
        if self.definition.name == "dayOfWeek" and value == 7:
            value = 0
        self.values.add(value)

    def add_span(self, start: int, end: int, step: int) -> None:
        # A reversed span is syntactically fine and simply selects nothing
        lo, hi = self.definition.min, self.definition.max
        if start < lo:
            # First stepped value at or above the minimum
            start += -(-(lo - start) // step) * step
        for value in range(start, min(end, hi) + 1, step):
            self.add(value)

    def parse_segment(self, segment: str) -> None:
        body, _, step_text = segment.partition("/")
        step = 1
        if step_text:
            parsed_step = _to_int(step_text)
            if parsed_step is None:
                self.invalid.append(segment)
                return
            # A zero step would never advance
            step = parsed_step or 1

        lo, hi = self.definition.min, self.definition.max

        if body == "*":
            self.add_span(lo, hi, step)
            return

        if "-" in body:
            start_text, _, end_text = body.partition("-")
            start, end = _to_int(start_text), _to_int(end_text)
            if start is None or end is None:
                self.invalid.append(segment)
                return
            for bound in (start, end):
                if not self.in_bounds(bound):
                    self.out_of_range.append(bound)
            self.add_span(start, end, step)
            return

        value = _to_int(body)
        if value is None:
            self.invalid.append(segment)
            return
        if not self.in_bounds(value):
            self.out_of_range.append(value)
            return
        if step_text:
            self.add_span(value, hi, step)
        else:
            self.add(value)


def parse_field(raw: str, definition: FieldDefinition) -> ParsedField:
    """Parse one raw field string against *definition*."""
    normalized = _substitute_names(raw, definition)
    acc = _FieldAccumulator(definition)

    for segment in normalized.split(","):
        acc.parse_segment(segment)

    return ParsedField(
        values=tuple(sorted(acc.values)),
        raw=normalized,
        out_of_range=tuple(acc.out_of_range),
        invalid=tuple(acc.invalid),
    )
