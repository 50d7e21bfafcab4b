"""Tests for the progress calculator entry points."""

from decimal import Decimal

import pytest

from okr_engine.models.enums import KeyResultType
from okr_engine.models.results import ProgressResult
from okr_engine.progress import (
    calculate_overall_progress,
    calculate_progress,
    describe_calculation_method,
    parse_metric_value,
    validate_configuration,
)


class TestParseMetricValue:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("75", 75.0),
            (" 12.5 ", 12.5),
            ("-3", -3.0),
            (40, 40.0),
            (2.5, 2.5),
            (Decimal("3.25"), 3.25),
        ],
    )
    def test_parses_numbers(self, raw, expected):
        assert parse_metric_value(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [
            None,
            "",
            "   ",
            "abc",
            "12abc",
            "nan",
            "inf",
            float("inf"),
            True,
            10**400,
            Decimal("sNaN"),
            Decimal("NaN"),
        ],
    )
    def test_unparsable_defaults_to_zero(self, raw):
        assert parse_metric_value(raw) == 0.0


class TestCalculateProgress:
    def test_increase_to_from_strings(self):
        result = calculate_progress("75", "100", "increase_to", "0")
        assert result == ProgressResult(progress_percentage=75.0, is_completed=False, is_valid=True)

    def test_decrease_to_from_strings(self):
        result = calculate_progress("40", "20", "decrease_to", "100")
        assert result.progress_percentage == 75.0
        assert result.is_completed is False
        assert result.is_valid is True

    def test_invalid_configuration_fails_safe(self):
        result = calculate_progress(50, 10, "increase_to", 20)
        assert result.progress_percentage == 0.0
        assert result.is_valid is False
        assert result.is_completed is False

    def test_decrease_to_invalid_configuration(self):
        result = calculate_progress("40", "100", "decrease_to", "20")
        assert result.is_valid is False
        assert result.progress_percentage == 0.0

    def test_unknown_type_fails_safe(self):
        result = calculate_progress("75", "100", "increase_by", "0")
        assert result == ProgressResult(progress_percentage=0.0, is_completed=False, is_valid=False)

    def test_accepts_enum_type(self):
        result = calculate_progress("75", "100", KeyResultType.INCREASE_TO)
        assert result.progress_percentage == 75.0

    def test_base_defaults_to_zero(self):
        assert calculate_progress("30", "60", "increase_to").progress_percentage == 50.0
        assert calculate_progress("30", "60", "increase_to", "").progress_percentage == 50.0
        assert calculate_progress("30", "60", "increase_to", "n/a").progress_percentage == 50.0

    def test_blank_current_reads_as_zero(self):
        result = calculate_progress("", "100", "increase_to", "0")
        assert result.progress_percentage == 0.0
        assert result.is_valid is True

    def test_rounds_to_two_decimals(self):
        # 1/3 = 33.333...%
        assert calculate_progress("1", "3", "increase_to").progress_percentage == 33.33

    def test_clamped_when_overshooting(self):
        result = calculate_progress("500", "100", "increase_to", "0")
        assert result.progress_percentage == 100.0
        assert result.is_completed is True

    def test_binary_completion_matches_progress(self):
        for kr_type in ("achieve_or_not", "should_stay_above", "should_stay_below"):
            for current in ("0", "5", "10"):
                result = calculate_progress(current, "5", kr_type)
                assert result.is_completed == (result.progress_percentage == 100.0)

    def test_out_of_range_numbers_fail_safe(self):
        assert calculate_progress(10**400, "100", "increase_to", "0").progress_percentage == 0.0
        assert calculate_progress(Decimal("sNaN"), "100", "increase_to", "0").progress_percentage == 0.0
        assert calculate_progress("50", "100", "increase_to", 10**400).progress_percentage == 50.0

    def test_identical_inputs_give_identical_output(self):
        first = calculate_progress("40", "20", "decrease_to", "100")
        second = calculate_progress("40", "20", "decrease_to", "100")
        assert first == second


class TestDescribeCalculationMethod:
    def test_increase_to(self):
        assert describe_calculation_method("increase_to") == (
            "Progress = (Nilai Saat Ini - Nilai Awal) / (Target - Nilai Awal) × 100%"
        )

    def test_every_type_has_description(self):
        for kr_type in KeyResultType:
            assert describe_calculation_method(kr_type).startswith("Progress =")

    def test_unknown_type(self):
        assert describe_calculation_method("something_else") == "Metode perhitungan tidak dikenal"


class TestValidateConfiguration:
    def test_increase_to_valid(self):
        result = validate_configuration("100", "increase_to", "0")
        assert result.is_valid is True
        assert result.error is None

    def test_increase_to_target_below_base(self):
        result = validate_configuration("10", "increase_to", "20")
        assert result.is_valid is False
        assert result.error == "Target harus lebih besar dari nilai awal untuk tipe 'Naik ke'"

    def test_decrease_to_base_below_target(self):
        result = validate_configuration("20", "decrease_to", "10")
        assert result.is_valid is False
        assert result.error == "Nilai awal harus lebih besar dari target untuk tipe 'Turun ke'"

    def test_decrease_to_without_base_is_invalid(self):
        # base defaults to 0, which is never above a positive target
        assert validate_configuration("20", "decrease_to").is_valid is False

    def test_binary_types_always_valid(self):
        for kr_type in ("should_stay_above", "should_stay_below", "achieve_or_not"):
            assert validate_configuration("10", kr_type, "50").is_valid is True

    def test_unknown_type(self):
        result = validate_configuration("10", "increase_by")
        assert result.is_valid is False
        assert result.error == "Tipe Key Result tidak dikenal"

    @pytest.mark.parametrize("target,base", [("10", "20"), ("20", "20"), ("30", "20")])
    def test_agrees_with_calculator(self, target, base):
        for kr_type in KeyResultType:
            validation = validate_configuration(target, kr_type, base)
            progress = calculate_progress("15", target, kr_type, base)
            assert validation.is_valid == progress.is_valid


class TestCalculateOverallProgress:
    def test_averages_valid_results(self):
        results = [
            ProgressResult(75.0, False),
            ProgressResult(25.0, False),
            ProgressResult(0.0, False, is_valid=False),
        ]
        assert calculate_overall_progress(results) == 50.0

    def test_empty_is_zero(self):
        assert calculate_overall_progress([]) == 0.0

    def test_all_invalid_is_zero(self):
        assert calculate_overall_progress([ProgressResult(0.0, False, False)]) == 0.0

    def test_rounds_to_two_decimals(self):
        results = [ProgressResult(100.0, True), ProgressResult(0.0, False), ProgressResult(0.0, False)]
        assert calculate_overall_progress(results) == 33.33
