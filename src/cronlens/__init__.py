# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""cronlens - decode, validate, generate, convert and schedule cron expressions."""

__version__ = "0.1.0"

from cronlens.cron import (
    compare,
    describe,
    detect_format,
    from_cron,
    generate,
    get_examples,
    get_next_occurrences,
    matches,
    parse,
    to_aws,
    to_cron,
    to_github,
    to_quartz,
    to_systemd,
    validate,
)

__all__ = [
    "__version__",
    "compare",
    "describe",
    "detect_format",
    "from_cron",
    "generate",
    "get_examples",
    "get_next_occurrences",
    "matches",
    "parse",
    "to_aws",
    "to_cron",
    "to_github",
    "to_quartz",
    "to_systemd",
    "validate",
]
