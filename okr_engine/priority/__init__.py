from .calculator import (
    PriorityValidationError,
    calculate_bulk_priorities,
    calculate_priority,
    get_priority_level,
    priority_color_class,
    priority_label,
)
from .initiative_status import (
    calculate_initiative_status,
    can_cancel_initiative,
    can_close_initiative,
    can_edit_initiative,
    initiative_status_info,
    status_change_reason,
)

__all__ = [
    "PriorityValidationError",
    "calculate_bulk_priorities",
    "calculate_initiative_status",
    "calculate_priority",
    "can_cancel_initiative",
    "can_close_initiative",
    "can_edit_initiative",
    "get_priority_level",
    "initiative_status_info",
    "priority_color_class",
    "priority_label",
    "status_change_reason",
]
