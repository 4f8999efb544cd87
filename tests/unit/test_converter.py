# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for conversion between cron and other scheduler syntaxes."""

from __future__ import annotations

import pytest

from cronlens.core.constants import ScheduleFormat
from cronlens.core.exceptions import ExpressionTypeError
from cronlens.cron.converter import (
    detect_format,
    from_cron,
    to_aws,
    to_cron,
    to_github,
    to_quartz,
    to_systemd,
)


# ---------------------------------------------------------------------------
# cron -> other formats
# ---------------------------------------------------------------------------


class TestToAws:
    @pytest.mark.parametrize(
        ("expression", "expected"),
        [
            ("0 9 * * 1-5", "cron(0 9 ? * 2-6 *)"),
            ("0 9 * * 5-7", "cron(0 9 ? * 1,6,7 *)"),
            ("0 9 * * 0-7", "cron(0 9 ? * 1,2,3,4,5,6,7 *)"),
            ("0 9 * * 1-7", "cron(0 9 ? * 1,2,3,4,5,6,7 *)"),
            ("0 9 * * 0-6", "cron(0 9 ? * 1-7 *)"),
            ("0 9 * * 0", "cron(0 9 ? * 1 *)"),
            ("0 0 1 * *", "cron(0 0 1 * ? *)"),
            ("0 0 1 * 1", "cron(0 0 1 * 2 *)"),
            ("*/5 * * * *", "cron(*/5 * * * ? *)"),
            ("@daily", "cron(0 0 * * ? *)"),
        ],
    )
    def test_conversions(self, expression, expected):
        result = to_aws(expression)
        assert result.success
        assert result.format == ScheduleFormat.AWS
        assert result.result == expected

    def test_reboot_is_unsupported(self):
        result = to_aws("@reboot")
        assert not result.success
        assert "@reboot" in result.error

    def test_invalid_expression(self):
        result = to_aws("0 25 * * *")
        assert not result.success
        assert "hour" in result.error


class TestToQuartz:
    def test_weekday_range(self):
        assert to_quartz("0 9 * * 1-5").result == "0 0 9 ? * 2-6"

    def test_day_of_month(self):
        assert to_quartz("30 6 15 * *").result == "0 30 6 15 * ?"

    def test_range_ending_in_seven_lists_every_day(self):
        assert to_quartz("0 9 * * 0-7").result == "0 0 9 ? * 1,2,3,4,5,6,7"

    def test_jenkins_uses_same_layout(self):
        result = from_cron("0 9 * * 1-5", "jenkins")
        assert result.success
        assert result.format == ScheduleFormat.JENKINS
        assert result.result == "0 0 9 ? * 2-6"

    def test_reboot_is_unsupported(self):
        assert not from_cron("@reboot", "jenkins").success


class TestToGithub:
    def test_yaml_snippet(self):
        result = to_github("0 9 * * 1-5")
        assert result.success
        assert result.expression == "0 9 * * 1-5"
        assert "- cron: '0 9 * * 1-5'" in result.result
        assert result.result.startswith("on:\n  schedule:")

    def test_alias_is_expanded(self):
        assert to_github("@hourly").expression == "0 * * * *"

    def test_reboot_is_unsupported(self):
        assert not to_github("@reboot").success


class TestToSystemd:
    def test_weekdays(self):
        result = to_systemd("0 9 * * 1-5")
        assert result.success
        assert result.result == "Mon,Tue,Wed,Thu,Fri * 9:0:00"

    def test_step_is_kept(self):
        assert to_systemd("*/15 * * * *").result == "* *:*/15:00"

    def test_date(self):
        assert to_systemd("0 0 1 1 *").result == "*-1-1 0:0:00"

    def test_reboot_is_best_effort(self):
        result = to_systemd("@reboot")
        assert result.success
        assert not result.exact
        assert "OnBootSec" in result.note


class TestFromCron:
    def test_unknown_format(self):
        result = from_cron("0 9 * * *", "cobol")
        assert not result.success
        assert result.error == "Unknown format: cobol"

    def test_format_is_case_insensitive(self):
        assert from_cron("0 9 * * *", "AWS").success

    def test_description_is_attached(self):
        assert from_cron("0 9 * * 1-5", "aws").description == "At minute 0 at 9AM on weekdays"


# ---------------------------------------------------------------------------
# other formats -> cron
# ---------------------------------------------------------------------------


class TestFromAws:
    def test_weekday_range(self):
        result = to_cron("cron(0 9 ? * 2-6 *)", "aws")
        assert result.success
        assert result.format == ScheduleFormat.CRON
        assert result.result == "0 9 * * 1-5"
        assert result.exact

    def test_day_names_pass_through(self):
        result = to_cron("cron(0 9 ? * MON-FRI *)", "aws")
        assert result.success
        assert result.result == "0 9 * * MON-FRI"

    def test_round_trip(self):
        aws = to_aws("30 8 * * 1,3,5").result
        assert to_cron(aws, "aws").result == "30 8 * * 1,3,5"

    def test_year_restriction_is_flagged(self):
        result = to_cron("cron(0 9 * * ? 2025)", "aws")
        assert result.success
        assert result.result == "0 9 * * *"
        assert not result.exact
        assert "2025" in result.note

    def test_non_ascii_digit_fails_cleanly(self):
        result = to_cron("cron(0 9 ? * ² *)", "aws")
        assert not result.success
        assert "day of week: invalid value (²)" in result.error

    def test_wrong_field_count(self):
        result = to_cron("cron(0 9 *)", "aws")
        assert not result.success
        assert "expected 6 fields, got 3" in result.error

    def test_rate_expression_is_rejected(self):
        result = to_cron("rate(5 minutes)", "aws")
        assert not result.success
        assert "cron(...)" in result.error


class TestFromSystemd:
    def test_preset(self):
        result = to_cron("daily", "systemd")
        assert result.result == "0 0 * * *"

    def test_oncalendar_prefix(self):
        assert to_cron("OnCalendar=weekly", "systemd").result == "0 0 * * 0"

    def test_calendar_expression(self):
        result = to_cron("Mon,Fri *-*-* 09:30:00", "systemd")
        assert result.success
        assert result.result == "30 09 * * 1,5"
        assert not result.exact

    def test_date_parts(self):
        result = to_cron("*-06-15 12:00:00", "systemd")
        assert result.result == "00 12 15 06 *"

    def test_weekday_range(self):
        result = to_cron("Mon..Fri *-*-* 09:00:00", "systemd")
        assert result.success
        assert result.result == "00 09 * * 1,2,3,4,5"

    def test_weekday_range_wraps_past_saturday(self):
        result = to_cron("Sat..Sun *-*-* 10:00:00", "systemd")
        assert result.result == "00 10 * * 0,6"


class TestFromQuartz:
    def test_weekday_range(self):
        result = to_cron("0 0 9 ? * 2-6", "quartz")
        assert result.result == "0 9 * * 1-5"
        assert result.exact

    def test_dropped_seconds_and_year(self):
        result = to_cron("30 0 9 * * ? 2025", "quartz")
        assert result.success
        assert result.result == "0 9 * * *"
        assert not result.exact
        assert "seconds" in result.note and "year" in result.note

    def test_wrong_field_count(self):
        assert not to_cron("0 9 * * *", "quartz").success


class TestToCron:
    def test_standard_passthrough(self):
        assert to_cron("0 9 * * *", "cron").result == "0 9 * * *"

    def test_unknown_format(self):
        assert not to_cron("0 9 * * *", "cobol").success

    def test_non_string_raises(self):
        with pytest.raises(ExpressionTypeError):
            to_cron(None, "aws")


class TestDetectFormat:
    @pytest.mark.parametrize(
        ("expression", "expected"),
        [
            ("cron(0 9 * * ? *)", ScheduleFormat.AWS),
            ("OnCalendar=daily", ScheduleFormat.SYSTEMD),
            ("2024-01-01 09:00:00", ScheduleFormat.SYSTEMD),
            ("0 9 * * *", ScheduleFormat.CRON),
            ("0 0 9 * * ?", ScheduleFormat.QUARTZ),
            ("0 0 9 * * ? 2025", ScheduleFormat.QUARTZ),
            ("garbage", None),
            ("invalid format", None),
        ],
    )
    def test_detection(self, expression, expected):
        assert detect_format(expression) == expected
