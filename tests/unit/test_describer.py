# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for English descriptions of expressions."""

from __future__ import annotations

import pytest

from cronlens.cron.describer import describe


class TestDescribe:
    @pytest.mark.parametrize(
        ("expression", "expected"),
        [
            ("* * * * *", "Every minute"),
            ("*/15 * * * *", "Every 15 minutes"),
            ("0,30 * * * *", "At minutes 0, 30"),
            ("0 0 * * *", "At minute 0 at 12AM"),
            ("0 12 * * *", "At minute 0 at 12PM"),
            ("30 14 * * *", "At minute 30 at 2PM"),
            ("0 */2 * * *", "At minute 0 every 2 hours"),
            ("0 9,17 * * *", "At minute 0 during hours 9, 17"),
            ("0 0 1 * *", "At minute 0 at 12AM on day 1"),
            ("0 0 1,15 * *", "At minute 0 at 12AM on days 1, 15"),
            ("0 0 1 1,7 *", "At minute 0 at 12AM on day 1 in January, July"),
            ("0 9 * * 1-5", "At minute 0 at 9AM on weekdays"),
            ("0 9 * * sat,sun", "At minute 0 at 9AM on weekends"),
            ("0 9 * * 1,3", "At minute 0 at 9AM on Monday, Wednesday"),
            ("0 9 * * 7", "At minute 0 at 9AM on Sunday"),
        ],
    )
    def test_clauses(self, expression, expected):
        assert describe(expression) == expected

    def test_alias(self):
        assert describe("@daily") == describe("0 0 * * *")

    def test_reboot(self):
        assert describe("@reboot") == "Run once at system startup"

    def test_invalid_does_not_raise(self):
        assert describe("0 25 * * *") == "Invalid: hour: values out of range (25)"

    def test_wrong_field_count(self):
        assert describe("0 9 *").startswith("Invalid: Invalid field count")

    def test_four_weekdays_are_listed(self):
        assert describe("0 9 * * 1-4").endswith(
            "on Monday, Tuesday, Wednesday, Thursday"
        )
