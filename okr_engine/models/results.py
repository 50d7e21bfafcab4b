"""Immutable value objects returned by the calculation functions."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional

from okr_engine.models.enums import (
    InitiativeStatus,
    ObjectiveStatus,
    PriorityLevel,
    ProgressStatus,
)


@dataclass(frozen=True)
class ProgressResult:
    """Normalized progress of a single key result.

    is_valid=False means the type/value configuration is structurally
    impossible; progress_percentage is then forced to 0.
    """

    progress_percentage: float
    is_completed: bool
    is_valid: bool = True

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ConfigValidation:
    """Outcome of a pre-flight key result configuration check."""

    is_valid: bool
    error: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class StatusResult:
    """Ideal progress, signed gap and status for one point in time."""

    ideal_progress: float
    gap: float
    status: ProgressStatus

    def to_dict(self) -> dict[str, Any]:
        return {
            "ideal_progress": self.ideal_progress,
            "gap": self.gap,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class StatusAssessment:
    """StatusResult plus the display figures and recommendation copy."""

    status_result: StatusResult
    progress_percentage: int
    time_progress_percentage: int
    recommendation: str

    @property
    def status(self) -> ProgressStatus:
        return self.status_result.status

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.status_result.to_dict(),
            "progress_percentage": self.progress_percentage,
            "time_progress_percentage": self.time_progress_percentage,
            "recommendation": self.recommendation,
        }


@dataclass(frozen=True)
class ObjectiveStatusResult:
    """Rolled-up status of an objective over its key results."""

    status: ObjectiveStatus
    reasoning: str
    confidence: str
    overall_progress: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "reasoning": self.reasoning,
            "confidence": self.confidence,
            "overall_progress": self.overall_progress,
        }


@dataclass(frozen=True)
class PriorityInputs:
    """Impact, effort and confidence estimates on a 1-5 scale."""

    impact_score: float
    effort_score: float
    confidence_score: float


@dataclass(frozen=True)
class PriorityResult:
    priority_score: float
    priority_level: PriorityLevel
    reasoning: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "priority_score": self.priority_score,
            "priority_level": self.priority_level.value,
            "reasoning": self.reasoning,
        }


@dataclass(frozen=True)
class BulkPriorityResult:
    """PriorityResult tagged with the id of the initiative it belongs to."""

    id: str
    priority_score: float
    priority_level: PriorityLevel
    reasoning: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "priority_score": self.priority_score,
            "priority_level": self.priority_level.value,
            "reasoning": self.reasoning,
        }


@dataclass(frozen=True)
class InitiativeStatusInfo:
    """Display copy and badge classes for an initiative status."""

    status: InitiativeStatus
    label: str
    description: str
    color: str
    bg_color: str
    text_color: str
    border_color: str

    def to_dict(self) -> dict[str, Any]:
        return {**asdict(self), "status": self.status.value}
