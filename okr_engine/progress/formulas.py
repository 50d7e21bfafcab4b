"""Progress formulas for the five key result measurement types.

Each function is a pure calculation over already-parsed floats and returns
(unrounded progress percentage, is_completed). Continuous formulas raise
InvalidConfigurationError when target and base cannot produce a progress
value; the calculator turns that into is_valid=False.
"""

from okr_engine.models.enums import KeyResultType
from okr_engine.progress.registry import (
    InvalidConfigurationError,
    register_progress_formula,
)

MIN_PROGRESS = 0.0
MAX_PROGRESS = 100.0

INCREASE_TO_CONFIG_ERROR = (
    "Target harus lebih besar dari nilai awal untuk tipe 'Naik ke'"
)
DECREASE_TO_CONFIG_ERROR = (
    "Nilai awal harus lebih besar dari target untuk tipe 'Turun ke'"
)


def clamp_progress(value: float) -> float:
    return min(MAX_PROGRESS, max(MIN_PROGRESS, value))


def require_target_above_base(target: float, base: float) -> None:
    if target <= base:
        raise InvalidConfigurationError(INCREASE_TO_CONFIG_ERROR)


def require_base_above_target(target: float, base: float) -> None:
    if base <= target:
        raise InvalidConfigurationError(DECREASE_TO_CONFIG_ERROR)


@register_progress_formula(
    key_result_type=KeyResultType.INCREASE_TO.value,
    label="Naik ke (Increase To)",
    description=(
        "Progress = (Nilai Saat Ini - Nilai Awal) / (Target - Nilai Awal) × 100%"
    ),
    config_check=require_target_above_base,
)
def calc_increase_to(current: float, target: float, base: float) -> tuple[float, bool]:
    """Progress = (current - base) / (target - base) * 100, clamped to 0-100"""
    require_target_above_base(target, base)
    progress = (current - base) / (target - base) * 100
    return clamp_progress(progress), current >= target


@register_progress_formula(
    key_result_type=KeyResultType.DECREASE_TO.value,
    label="Turun ke (Decrease To)",
    description=(
        "Progress = (Nilai Awal - Nilai Saat Ini) / (Nilai Awal - Target) × 100%"
    ),
    config_check=require_base_above_target,
)
def calc_decrease_to(current: float, target: float, base: float) -> tuple[float, bool]:
    """Progress = (base - current) / (base - target) * 100, clamped to 0-100"""
    require_base_above_target(target, base)
    progress = (base - current) / (base - target) * 100
    return clamp_progress(progress), current <= target


@register_progress_formula(
    key_result_type=KeyResultType.SHOULD_STAY_ABOVE.value,
    label="Harus tetap di atas (Stay Above)",
    description="Progress = 100% jika Nilai Saat Ini ≥ Target, 0% jika sebaliknya",
    binary=True,
)
def calc_should_stay_above(current: float, target: float, base: float) -> tuple[float, bool]:
    achieved = current >= target
    return (MAX_PROGRESS if achieved else MIN_PROGRESS), achieved


@register_progress_formula(
    key_result_type=KeyResultType.SHOULD_STAY_BELOW.value,
    label="Harus tetap di bawah (Stay Below)",
    description="Progress = 100% jika Nilai Saat Ini ≤ Target, 0% jika sebaliknya",
    binary=True,
)
def calc_should_stay_below(current: float, target: float, base: float) -> tuple[float, bool]:
    achieved = current <= target
    return (MAX_PROGRESS if achieved else MIN_PROGRESS), achieved


@register_progress_formula(
    key_result_type=KeyResultType.ACHIEVE_OR_NOT.value,
    label="Ya/Tidak (Achieve or Not)",
    description="Progress = 100% jika tercapai, 0% jika belum tercapai",
    binary=True,
)
def calc_achieve_or_not(current: float, target: float, base: float) -> tuple[float, bool]:
    # Same test as should_stay_above: reaching the target counts as achieved.
    return calc_should_stay_above(current, target, base)
