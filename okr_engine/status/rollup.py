"""Objective and cycle status derived from key results and calendar dates."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional, Sequence, Union

from okr_engine.models.enums import CycleStatus, ObjectiveStatus
from okr_engine.models.results import ObjectiveStatusResult, ProgressResult
from okr_engine.progress.calculator import calculate_overall_progress
from okr_engine.status.classifier import (
    BEHIND_GAP_THRESHOLD,
    COMPLETED_PROGRESS,
    Timestamp,
    calculate_ideal_progress,
    to_utc_datetime,
)

PARTIAL_ACHIEVEMENT_PROGRESS = 50.0

# status -> (reasoning, confidence)
_OBJECTIVE_COPY: dict[ObjectiveStatus, tuple[str, str]] = {
    ObjectiveStatus.PAUSED: (
        "Objective dihentikan sementara",
        "Misalnya karena prioritas lain, resource dipindah",
    ),
    ObjectiveStatus.CANCELED: (
        "Objective dibatalkan permanen",
        "Sudah diputuskan tidak lagi relevan",
    ),
    ObjectiveStatus.NOT_STARTED: (
        "Diawal cycle, belum ada progress sama sekali",
        "Belum mulai aktivitas",
    ),
    ObjectiveStatus.COMPLETED: (
        "Semua Key Results tercapai 100% sebelum atau setelah cycle berakhir",
        "Objective sudah tuntas dengan sukses",
    ),
    ObjectiveStatus.PARTIALLY_ACHIEVED: (
        "Cycle sudah selesai, sebagian KR tercapai (>50%)",
        "Outcome tercapai sebagian, tetapi di-close",
    ),
    ObjectiveStatus.NOT_ACHIEVED: (
        "Cycle sudah selesai, progress sangat rendah atau KR mayoritas tidak tercapai",
        "Objective gagal di periode tersebut",
    ),
    ObjectiveStatus.ON_TRACK: (
        "Cycle masih berjalan, progress sesuai timeline & target",
        "Confidence tinggi, tidak ada issue signifikan",
    ),
    ObjectiveStatus.AT_RISK: (
        "Cycle masih berjalan, ada risiko signifikan yang bisa menghambat tercapai",
        "Butuh mitigasi / perhatian manajemen",
    ),
    ObjectiveStatus.BEHIND: (
        "Cycle masih berjalan, progress jauh di bawah target timeline",
        "Confidence rendah, perlu intervensi besar",
    ),
}

_MANUAL_STATUSES = (ObjectiveStatus.PAUSED, ObjectiveStatus.CANCELED)

_OBJECTIVE_COLORS: dict[ObjectiveStatus, str] = {
    ObjectiveStatus.NOT_STARTED: "bg-blue-500",
    ObjectiveStatus.ON_TRACK: "bg-green-500",
    ObjectiveStatus.AT_RISK: "bg-orange-500",
    ObjectiveStatus.BEHIND: "bg-red-500",
    ObjectiveStatus.PAUSED: "bg-yellow-500",
    ObjectiveStatus.CANCELED: "bg-gray-500",
    ObjectiveStatus.COMPLETED: "bg-purple-500",
    ObjectiveStatus.PARTIALLY_ACHIEVED: "bg-green-400",
    ObjectiveStatus.NOT_ACHIEVED: "bg-red-600",
}
_DEFAULT_OBJECTIVE_COLOR = "bg-gray-400"

_OBJECTIVE_LABELS: dict[ObjectiveStatus, str] = {
    ObjectiveStatus.NOT_STARTED: "Not Started",
    ObjectiveStatus.ON_TRACK: "On Track",
    ObjectiveStatus.AT_RISK: "At Risk",
    ObjectiveStatus.BEHIND: "Behind",
    ObjectiveStatus.PAUSED: "Paused",
    ObjectiveStatus.CANCELED: "Canceled",
    ObjectiveStatus.COMPLETED: "Completed",
    ObjectiveStatus.PARTIALLY_ACHIEVED: "Partially Achieved",
    ObjectiveStatus.NOT_ACHIEVED: "Not Achieved",
}
_DEFAULT_OBJECTIVE_LABEL = "Unknown"

# Cycle status text is shown in Indonesian.
_CYCLE_TEXT: dict[CycleStatus, str] = {
    CycleStatus.PLANNING: "Perencanaan",
    CycleStatus.ACTIVE: "Aktif",
    CycleStatus.COMPLETED: "Selesai",
}

_CYCLE_COLORS: dict[CycleStatus, str] = {
    CycleStatus.PLANNING: "bg-yellow-100 text-yellow-800",
    CycleStatus.ACTIVE: "bg-green-100 text-green-800",
    CycleStatus.COMPLETED: "bg-blue-100 text-blue-800",
}
_DEFAULT_CYCLE_COLOR = "bg-gray-100 text-gray-800"


def _objective_result(status: ObjectiveStatus, overall_progress: float = 0.0) -> ObjectiveStatusResult:
    reasoning, confidence = _OBJECTIVE_COPY[status]
    return ObjectiveStatusResult(
        status=status,
        reasoning=reasoning,
        confidence=confidence,
        overall_progress=overall_progress,
    )


def calculate_objective_status(
    key_results: Sequence[ProgressResult],
    start_date: Timestamp,
    end_date: Timestamp,
    now: Optional[Timestamp] = None,
    manual_status: Optional[Union[ObjectiveStatus, str]] = None,
) -> ObjectiveStatusResult:
    """Roll key result progress up into an objective status.

    A manual paused/canceled status always wins. Once the cycle is over the
    objective is either partially achieved or not achieved; while it runs,
    the gap against the ideal line decides. Unlike key results, an objective
    at or above the ideal line is simply on track (there is no "ahead").
    """
    if manual_status is not None:
        try:
            manual = ObjectiveStatus(manual_status)
        except ValueError:
            manual = None
        if manual in _MANUAL_STATUSES:
            return _objective_result(manual)

    if not key_results:
        return _objective_result(ObjectiveStatus.NOT_STARTED)

    overall = calculate_overall_progress(key_results)
    if overall >= COMPLETED_PROGRESS:
        return _objective_result(ObjectiveStatus.COMPLETED, overall)

    time_progress = calculate_ideal_progress(start_date, end_date, now)
    if time_progress >= 100:
        if overall >= PARTIAL_ACHIEVEMENT_PROGRESS:
            return _objective_result(ObjectiveStatus.PARTIALLY_ACHIEVED, overall)
        return _objective_result(ObjectiveStatus.NOT_ACHIEVED, overall)

    gap = overall - time_progress
    if gap >= 0:
        return _objective_result(ObjectiveStatus.ON_TRACK, overall)
    if gap >= BEHIND_GAP_THRESHOLD:
        return _objective_result(ObjectiveStatus.AT_RISK, overall)
    return _objective_result(ObjectiveStatus.BEHIND, overall)


def _calendar_day(value: Timestamp) -> date:
    if isinstance(value, datetime):
        return to_utc_datetime(value).date()
    return value


def calculate_cycle_status(
    start_date: Timestamp,
    end_date: Timestamp,
    today: Optional[Timestamp] = None,
) -> CycleStatus:
    """Lifecycle status of a cycle; both start and end days are inclusive."""
    current = _calendar_day(today) if today is not None else datetime.now(tz=timezone.utc).date()
    if current < _calendar_day(start_date):
        return CycleStatus.PLANNING
    if current > _calendar_day(end_date):
        return CycleStatus.COMPLETED
    return CycleStatus.ACTIVE


def objective_status_color(status: Union[ObjectiveStatus, str]) -> str:
    """Badge color token for an objective status."""
    try:
        return _OBJECTIVE_COLORS[ObjectiveStatus(status)]
    except ValueError:
        return _DEFAULT_OBJECTIVE_COLOR


def objective_status_label(status: Union[ObjectiveStatus, str]) -> str:
    try:
        return _OBJECTIVE_LABELS[ObjectiveStatus(status)]
    except ValueError:
        return _DEFAULT_OBJECTIVE_LABEL


def cycle_status_text(status: Union[CycleStatus, str]) -> str:
    """Display text for a cycle status; unknown tags are shown as-is."""
    try:
        return _CYCLE_TEXT[CycleStatus(status)]
    except ValueError:
        return str(status)


def cycle_status_color(status: Union[CycleStatus, str]) -> str:
    try:
        return _CYCLE_COLORS[CycleStatus(status)]
    except ValueError:
        return _DEFAULT_CYCLE_COLOR
