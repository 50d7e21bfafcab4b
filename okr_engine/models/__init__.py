from .enums import (
    CycleStatus,
    InitiativeStatus,
    KeyResultType,
    ObjectiveStatus,
    PriorityLevel,
    ProgressStatus,
)
from .results import (
    BulkPriorityResult,
    ConfigValidation,
    InitiativeStatusInfo,
    ObjectiveStatusResult,
    PriorityInputs,
    PriorityResult,
    ProgressResult,
    StatusAssessment,
    StatusResult,
)

__all__ = [
    "BulkPriorityResult",
    "ConfigValidation",
    "CycleStatus",
    "InitiativeStatus",
    "InitiativeStatusInfo",
    "KeyResultType",
    "ObjectiveStatus",
    "ObjectiveStatusResult",
    "PriorityInputs",
    "PriorityLevel",
    "PriorityResult",
    "ProgressResult",
    "ProgressStatus",
    "StatusAssessment",
    "StatusResult",
]
