from .classifier import (
    AHEAD_GAP_THRESHOLD,
    AT_RISK_GAP_THRESHOLD,
    BEHIND_GAP_THRESHOLD,
    COMPLETED_PROGRESS,
    assess_status,
    calculate_ideal_progress,
    classify_status,
    status_color,
    status_from_gap,
    status_label,
)
from .rollup import (
    calculate_cycle_status,
    calculate_objective_status,
    cycle_status_color,
    cycle_status_text,
    objective_status_color,
    objective_status_label,
)

__all__ = [
    "AHEAD_GAP_THRESHOLD",
    "AT_RISK_GAP_THRESHOLD",
    "BEHIND_GAP_THRESHOLD",
    "COMPLETED_PROGRESS",
    "assess_status",
    "calculate_cycle_status",
    "calculate_ideal_progress",
    "calculate_objective_status",
    "classify_status",
    "cycle_status_color",
    "cycle_status_text",
    "objective_status_color",
    "objective_status_label",
    "status_color",
    "status_from_gap",
    "status_label",
]
