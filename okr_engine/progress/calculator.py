"""Key result progress calculator.

Converts stored (current, target, base) values into a normalized progress
percentage for any registered key result type. Dirty input never raises:
unparsable numbers read as 0 and impossible configurations come back with
is_valid=False and 0% progress.
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import Iterable, Union

# Ensure all formulas are registered on import
import okr_engine.progress.formulas  # noqa: F401
from okr_engine.models.enums import KeyResultType
from okr_engine.models.results import ConfigValidation, ProgressResult
from okr_engine.progress.registry import InvalidConfigurationError, get_formula

logger = logging.getLogger(__name__)

MetricValue = Union[str, float, int, Decimal, None]

PROGRESS_DECIMALS = 2
UNKNOWN_METHOD_DESCRIPTION = "Metode perhitungan tidak dikenal"
UNKNOWN_TYPE_ERROR = "Tipe Key Result tidak dikenal"


def parse_metric_value(value: MetricValue) -> float:
    """Parse a stored metric value, falling back to 0.0.

    Values arrive as decimal strings from the datastore and legacy rows may
    hold blanks or junk, so anything that is not a finite number reads as 0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if not isinstance(value, (int, float, Decimal)):
        value = str(value).strip()
    try:
        parsed = float(value)
    except (ValueError, OverflowError):
        return 0.0
    if not math.isfinite(parsed):
        return 0.0
    return parsed


def _type_key(key_result_type: Union[KeyResultType, str]) -> str:
    if isinstance(key_result_type, KeyResultType):
        return key_result_type.value
    return str(key_result_type)


def calculate_progress(
    current_value: MetricValue,
    target_value: MetricValue,
    key_result_type: Union[KeyResultType, str],
    base_value: MetricValue = None,
) -> ProgressResult:
    """Calculate progress for a key result.

    Args:
        current_value: Current value, usually a decimal string.
        target_value: Target value.
        key_result_type: One of the KeyResultType tags.
        base_value: Starting value; defaults to 0 when absent or unparsable.

    Returns:
        ProgressResult with progress rounded to 2 decimals. Unknown types and
        impossible configurations yield is_valid=False with 0% progress.
    """
    current = parse_metric_value(current_value)
    target = parse_metric_value(target_value)
    base = parse_metric_value(base_value)

    formula = get_formula(_type_key(key_result_type))
    if formula is None:
        logger.debug("No progress formula for key result type %r", key_result_type)
        return ProgressResult(progress_percentage=0.0, is_completed=False, is_valid=False)

    try:
        progress, is_completed = formula.formula_fn(current, target, base)
    except InvalidConfigurationError:
        return ProgressResult(progress_percentage=0.0, is_completed=False, is_valid=False)

    return ProgressResult(
        progress_percentage=round(progress, PROGRESS_DECIMALS),
        is_completed=is_completed,
        is_valid=True,
    )


def describe_calculation_method(key_result_type: Union[KeyResultType, str]) -> str:
    """Human-readable formula for a key result type (UI tooltip copy)."""
    formula = get_formula(_type_key(key_result_type))
    if formula is None:
        return UNKNOWN_METHOD_DESCRIPTION
    return formula.description


def validate_configuration(
    target_value: MetricValue,
    key_result_type: Union[KeyResultType, str],
    base_value: MetricValue = None,
) -> ConfigValidation:
    """Check a key result's target/base configuration without a current value."""
    formula = get_formula(_type_key(key_result_type))
    if formula is None:
        return ConfigValidation(is_valid=False, error=UNKNOWN_TYPE_ERROR)

    try:
        formula.check_configuration(
            parse_metric_value(target_value), parse_metric_value(base_value)
        )
    except InvalidConfigurationError as e:
        return ConfigValidation(is_valid=False, error=str(e))
    return ConfigValidation(is_valid=True)


def calculate_overall_progress(results: Iterable[ProgressResult]) -> float:
    """Average progress across the valid key results of an objective."""
    valid: list[float] = [r.progress_percentage for r in results if r.is_valid]
    if not valid:
        return 0.0
    return round(sum(valid) / len(valid), PROGRESS_DECIMALS)

