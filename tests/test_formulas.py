"""Unit tests for each progress formula and the formula registry."""

import pytest

from okr_engine.models.enums import KeyResultType
from okr_engine.progress.formulas import (
    calc_achieve_or_not,
    calc_decrease_to,
    calc_increase_to,
    calc_should_stay_above,
    calc_should_stay_below,
    clamp_progress,
)
from okr_engine.progress.registry import (
    InvalidConfigurationError,
    get_all_formulas,
    get_formula,
)


class TestIncreaseTo:
    def test_basic_calculation(self):
        # (75 - 0) / (100 - 0) = 75%
        progress, completed = calc_increase_to(current=75, target=100, base=0)
        assert progress == pytest.approx(75.0)
        assert completed is False

    def test_with_base_value(self):
        # (60 - 20) / (100 - 20) = 50%
        progress, _ = calc_increase_to(current=60, target=100, base=20)
        assert progress == pytest.approx(50.0)

    def test_overshoot_clamped_to_100(self):
        progress, completed = calc_increase_to(current=250, target=100, base=0)
        assert progress == 100.0
        assert completed is True

    def test_below_base_clamped_to_0(self):
        progress, completed = calc_increase_to(current=5, target=100, base=20)
        assert progress == 0.0
        assert completed is False

    def test_exactly_on_target_is_completed(self):
        progress, completed = calc_increase_to(current=100, target=100, base=0)
        assert progress == 100.0
        assert completed is True

    def test_target_not_above_base_raises(self):
        with pytest.raises(InvalidConfigurationError, match="Naik ke"):
            calc_increase_to(current=50, target=10, base=20)

    def test_target_equal_to_base_raises(self):
        with pytest.raises(InvalidConfigurationError):
            calc_increase_to(current=50, target=20, base=20)


class TestDecreaseTo:
    def test_basic_calculation(self):
        # (100 - 40) / (100 - 20) = 75%
        progress, completed = calc_decrease_to(current=40, target=20, base=100)
        assert progress == pytest.approx(75.0)
        assert completed is False

    def test_below_target_clamped_to_100(self):
        progress, completed = calc_decrease_to(current=10, target=20, base=100)
        assert progress == 100.0
        assert completed is True

    def test_above_base_clamped_to_0(self):
        progress, completed = calc_decrease_to(current=120, target=20, base=100)
        assert progress == 0.0
        assert completed is False

    def test_base_not_above_target_raises(self):
        with pytest.raises(InvalidConfigurationError, match="Turun ke"):
            calc_decrease_to(current=40, target=100, base=20)


class TestBinaryFormulas:
    def test_stay_above_met(self):
        assert calc_should_stay_above(current=5, target=5, base=0) == (100.0, True)

    def test_stay_above_missed(self):
        assert calc_should_stay_above(current=4.99, target=5, base=0) == (0.0, False)

    def test_stay_below_met(self):
        assert calc_should_stay_below(current=5, target=5, base=0) == (100.0, True)

    def test_stay_below_missed(self):
        assert calc_should_stay_below(current=6, target=5, base=0) == (0.0, False)

    def test_achieve_or_not_achieved(self):
        assert calc_achieve_or_not(current=1, target=1, base=0) == (100.0, True)

    def test_achieve_or_not_not_achieved(self):
        assert calc_achieve_or_not(current=0, target=1, base=0) == (0.0, False)

    def test_binary_ignores_base(self):
        assert calc_should_stay_above(current=5, target=5, base=999) == (100.0, True)


class TestClampProgress:
    @pytest.mark.parametrize("raw,expected", [(-50, 0.0), (0, 0.0), (42.5, 42.5), (100, 100.0), (180, 100.0)])
    def test_clamps_to_range(self, raw, expected):
        assert clamp_progress(raw) == expected


class TestAllFormulasRegistered:
    def test_five_formulas_registered(self):
        assert len(get_all_formulas()) == 5

    def test_every_key_result_type_present(self):
        all_formulas = get_all_formulas()
        for kr_type in KeyResultType:
            assert kr_type.value in all_formulas

    def test_binary_flags(self):
        assert get_formula("increase_to").binary is False
        assert get_formula("decrease_to").binary is False
        assert get_formula("should_stay_above").binary is True
        assert get_formula("should_stay_below").binary is True
        assert get_formula("achieve_or_not").binary is True

    def test_labels(self):
        assert get_formula("increase_to").label == "Naik ke (Increase To)"
        assert get_formula("achieve_or_not").label == "Ya/Tidak (Achieve or Not)"

    def test_unknown_type_not_registered(self):
        assert get_formula("increase_by") is None

    def test_registry_copy_is_detached(self):
        formulas = get_all_formulas()
        formulas.pop("increase_to")
        assert get_formula("increase_to") is not None

    def test_only_continuous_formulas_check_configuration(self):
        get_formula("should_stay_above").check_configuration(target=10, base=20)
        with pytest.raises(InvalidConfigurationError):
            get_formula("increase_to").check_configuration(target=10, base=20)
