# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Enumerations and fixed tables shared across the engine."""

from enum import StrEnum


class ParseStatus(StrEnum):
    OK = "ok"
    REBOOT = "reboot"
    FIELD_ERROR = "field_error"
    STRUCTURAL_ERROR = "structural_error"


class ScheduleFormat(StrEnum):
    CRON = "cron"
    SYSTEMD = "systemd"
    AWS = "aws"
    GITHUB = "github"
    QUARTZ = "quartz"
    JENKINS = "jenkins"


FIELD_ORDER: tuple[str, ...] = ("minute", "hour", "dayOfMonth", "month", "dayOfWeek")

# Human field labels used in error messages and comparison output
FIELD_LABELS: dict[str, str] = {
    "minute": "minute",
    "hour": "hour",
    "dayOfMonth": "day of month",
    "month": "month",
    "dayOfWeek": "day of week",
}

MONTH_NAMES: tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# 0=Sunday, matching the cron weekday convention
DAY_NAMES: tuple[str, ...] = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)

MINUTES_PER_YEAR = 366 * 24 * 60
