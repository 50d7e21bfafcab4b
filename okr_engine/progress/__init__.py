from .calculator import (
    calculate_overall_progress,
    calculate_progress,
    describe_calculation_method,
    parse_metric_value,
    validate_configuration,
)
from .registry import (
    InvalidConfigurationError,
    ProgressFormula,
    get_all_formulas,
    get_formula,
)

__all__ = [
    "InvalidConfigurationError",
    "ProgressFormula",
    "calculate_overall_progress",
    "calculate_progress",
    "describe_calculation_method",
    "get_all_formulas",
    "get_formula",
    "parse_metric_value",
    "validate_configuration",
]
