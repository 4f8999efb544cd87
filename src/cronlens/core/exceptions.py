# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for cronlens.

Malformed expression text never raises; these cover contract violations
and CLI-level configuration problems only.
"""


class CronLensError(Exception):
    """Base exception for all cronlens errors."""


class ConfigurationError(CronLensError):
    """Invalid or missing configuration."""


class ExpressionTypeError(CronLensError, TypeError):
    """An engine entry point received something other than a string."""


class UnknownTimezoneError(CronLensError, ValueError):
    """The timezone name is not known to the zoneinfo database."""
