from enum import Enum


class KeyResultType(str, Enum):
    INCREASE_TO = "increase_to"
    DECREASE_TO = "decrease_to"
    SHOULD_STAY_ABOVE = "should_stay_above"
    SHOULD_STAY_BELOW = "should_stay_below"
    ACHIEVE_OR_NOT = "achieve_or_not"


class ProgressStatus(str, Enum):
    COMPLETED = "completed"
    AHEAD = "ahead"
    ON_TRACK = "on_track"
    AT_RISK = "at_risk"
    BEHIND = "behind"


class PriorityLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ObjectiveStatus(str, Enum):
    NOT_STARTED = "not_started"
    ON_TRACK = "on_track"
    AT_RISK = "at_risk"
    BEHIND = "behind"
    PAUSED = "paused"
    CANCELED = "canceled"
    COMPLETED = "completed"
    PARTIALLY_ACHIEVED = "partially_achieved"
    NOT_ACHIEVED = "not_achieved"


class CycleStatus(str, Enum):
    PLANNING = "planning"
    ACTIVE = "active"
    COMPLETED = "completed"


class InitiativeStatus(str, Enum):
    DRAFT = "draft"
    IN_PROGRESS = "sedang_berjalan"
    COMPLETED = "selesai"
    CANCELED = "dibatalkan"
