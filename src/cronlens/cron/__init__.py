# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Cron expression engine: parse, describe, schedule, compare, generate, convert."""

from cronlens.cron.comparator import compare
from cronlens.cron.converter import (
    FORMATS,
    detect_format,
    from_cron,
    to_aws,
    to_cron,
    to_github,
    to_quartz,
    to_systemd,
)
from cronlens.cron.describer import describe
from cronlens.cron.fields import FIELDS, parse_field
from cronlens.cron.generator import generate, get_examples, parse_time
from cronlens.cron.parser import ALIASES, parse, validate
from cronlens.cron.scheduler import get_next_occurrences, matches, occurrences_between

__all__ = [
    "ALIASES",
    "FIELDS",
    "FORMATS",
    "compare",
    "describe",
    "detect_format",
    "from_cron",
    "generate",
    "get_examples",
    "get_next_occurrences",
    "matches",
    "occurrences_between",
    "parse",
    "parse_field",
    "parse_time",
    "to_aws",
    "to_cron",
    "to_github",
    "to_quartz",
    "to_systemd",
    "validate",
]
