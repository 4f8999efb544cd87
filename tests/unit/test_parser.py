# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for the expression parser and validator."""

from __future__ import annotations

import pytest

from cronlens.core.constants import FIELD_ORDER, ParseStatus
from cronlens.core.exceptions import ExpressionTypeError
from cronlens.cron.parser import ALIASES, parse, validate


def _value_sets(expression: str) -> dict[str, tuple[int, ...]]:
    parsed = parse(expression)
    assert parsed.fields is not None
    return {name: parsed.fields[name].values for name in FIELD_ORDER}


class TestValidExpressions:
    @pytest.mark.parametrize(
        "expression",
        ["* * * * *", "0 9 * * 1-5", "*/5 0-12 1,15 jan-jun mon,wed", "59 23 31 12 7"],
    )
    def test_well_formed_expressions_are_valid(self, expression):
        parsed = parse(expression)
        assert parsed.valid
        assert parsed.status == ParseStatus.OK
        assert parsed.errors == []
        for name in FIELD_ORDER:
            values = parsed.field(name).values
            assert list(values) == sorted(set(values))

    def test_original_text_is_kept(self):
        assert parse("  0 9 * * *  ").original == "  0 9 * * *  "

    def test_extra_whitespace_between_fields(self):
        assert parse("0   9\t*  * *").valid

    def test_six_fields_drop_leading_seconds(self):
        parsed = parse("30 0 9 * * *")
        assert parsed.valid
        assert parsed.seconds_ignored
        assert parsed.field("minute").values == (0,)
        assert parsed.field("hour").values == (9,)

    def test_sunday_as_zero_and_seven(self):
        assert parse("0 0 * * 0").field("dayOfWeek").values == (0,)
        assert parse("0 0 * * 7").field("dayOfWeek").values == (0,)


class TestAliases:
    @pytest.mark.parametrize(
        "alias", [name for name, value in ALIASES.items() if value is not None]
    )
    def test_alias_matches_expansion(self, alias):
        assert _value_sets(alias) == _value_sets(ALIASES[alias])

    def test_alias_is_case_insensitive(self):
        assert parse("@DAILY").valid

    def test_alias_keeps_original_text(self):
        parsed = parse("@hourly")
        assert parsed.original == "@hourly"
        assert parsed.canonical() == "0 * * * *"

    def test_reboot(self):
        parsed = parse("@reboot")
        assert parsed.valid
        assert parsed.is_reboot
        assert parsed.fields is None

    def test_unknown_alias(self):
        parsed = parse("@fortnightly")
        assert not parsed.valid
        assert parsed.status == ParseStatus.STRUCTURAL_ERROR
        assert "Unknown alias: @fortnightly" in parsed.errors[0]
        assert "@daily" in parsed.suggestion


class TestInvalidExpressions:
    def test_hour_out_of_range(self):
        parsed = parse("0 25 * * *")
        assert not parsed.valid
        assert parsed.status == ParseStatus.FIELD_ERROR
        assert parsed.errors == ["hour: values out of range (25)"]

    def test_minute_out_of_range(self):
        parsed = parse("60 * * * *")
        assert not parsed.valid
        assert parsed.errors == ["minute: values out of range (60)"]

    def test_too_few_fields(self):
        parsed = parse("0 9 *")
        assert not parsed.valid
        assert parsed.status == ParseStatus.STRUCTURAL_ERROR
        assert parsed.errors == ["Invalid field count: expected 5, got 3"]
        assert parsed.fields is None

    def test_too_many_fields(self):
        assert "got 7" in parse("0 0 9 * * ? 2025").errors[0]

    def test_empty_expression(self):
        assert parse("").errors == ["Invalid field count: expected 5, got 0"]

    def test_errors_accumulate_across_fields(self):
        parsed = parse("60 25 0 13 *")
        assert parsed.errors == [
            "minute: values out of range (60)",
            "hour: values out of range (25)",
            "day of month: values out of range (0)",
            "month: values out of range (13)",
        ]

    def test_range_bound_out_of_range_keeps_values(self):
        parsed = parse("0 9-99 * * *")
        assert not parsed.valid
        hour = parsed.field("hour")
        assert hour.out_of_range == (99,)
        assert hour.values == tuple(range(9, 24))

    def test_garbage_token(self):
        parsed = parse("abc * * * *")
        assert parsed.errors == ["minute: invalid value (abc)"]

    def test_non_ascii_digit_does_not_raise(self):
        parsed = parse("0 ² * * *")
        assert not parsed.valid
        assert parsed.errors == ["hour: invalid value (²)"]

    def test_huge_range_bound_is_reported(self):
        parsed = parse("0 0-30000000 * * *")
        assert not parsed.valid
        assert parsed.errors == ["hour: values out of range (30000000)"]
        assert parsed.field("hour").values == tuple(range(24))

    def test_non_string_is_a_contract_violation(self):
        with pytest.raises(ExpressionTypeError):
            parse(None)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            parse(5)  # type: ignore[arg-type]


class TestValidate:
    def test_valid_without_warnings(self):
        result = validate("0 9 * * *")
        assert result.valid
        assert result.errors == []
        assert result.warnings == []

    def test_invalid_reports_errors(self):
        result = validate("0 9 *")
        assert not result.valid
        assert result.errors
        assert result.suggestion

    def test_both_day_fields_warns_about_or(self):
        result = validate("0 0 1 * 1")
        assert result.valid
        assert any("either" in w for w in result.warnings)

    def test_impossible_date_warns(self):
        result = validate("0 0 31 2 *")
        assert result.valid
        assert any("never" in w for w in result.warnings)

    def test_leap_day_does_not_warn(self):
        assert validate("0 0 29 2 *").warnings == []

    def test_seconds_field_warns(self):
        assert any("seconds" in w for w in validate("0 0 9 * * *").warnings)
