"""Time-based status classification for key results.

Progress is compared against a linear "ideal" line drawn from the start of
the tracking period (0%) to its end (100%). The signed gap between actual
and ideal progress decides the status.
"""

from __future__ import annotations

import math
from datetime import date, datetime, time, timezone
from typing import Optional, Union

from okr_engine.models.enums import ProgressStatus
from okr_engine.models.results import StatusAssessment, StatusResult

Timestamp = Union[datetime, date]

COMPLETED_PROGRESS = 100.0
AHEAD_GAP_THRESHOLD = 5.0
AT_RISK_GAP_THRESHOLD = -5.0
BEHIND_GAP_THRESHOLD = -20.0

_STATUS_COLORS: dict[ProgressStatus, str] = {
    ProgressStatus.COMPLETED: "bg-green-500",
    ProgressStatus.AHEAD: "bg-blue-500",
    ProgressStatus.ON_TRACK: "bg-green-400",
    ProgressStatus.AT_RISK: "bg-yellow-500",
    ProgressStatus.BEHIND: "bg-red-500",
}
_DEFAULT_STATUS_COLOR = "bg-gray-400"

_STATUS_LABELS: dict[ProgressStatus, str] = {
    ProgressStatus.COMPLETED: "Completed",
    ProgressStatus.AHEAD: "Ahead",
    ProgressStatus.ON_TRACK: "On track",
    ProgressStatus.AT_RISK: "At risk",
    ProgressStatus.BEHIND: "Behind",
}
_DEFAULT_STATUS_LABEL = "In progress"


def to_utc_datetime(value: Timestamp) -> datetime:
    """Normalize a date or datetime to an aware UTC datetime.

    Naive datetimes are taken to be UTC; plain dates mean midnight UTC.
    """
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def calculate_ideal_progress(
    start_date: Timestamp,
    end_date: Timestamp,
    now: Optional[Timestamp] = None,
) -> float:
    """Percentage of the period elapsed at `now` (0-100).

    A zero-length or inverted timeline counts as fully elapsed once `now`
    has reached the start.
    """
    start = to_utc_datetime(start_date)
    end = to_utc_datetime(end_date)
    current = to_utc_datetime(now) if now is not None else datetime.now(tz=timezone.utc)

    elapsed = (current - start).total_seconds()
    total = (end - start).total_seconds()

    if total <= 0 and elapsed >= 0:
        return 100.0
    if elapsed <= 0:
        return 0.0
    if elapsed >= total:
        return 100.0
    return elapsed / total * 100


def status_from_gap(progress_percentage: float, ideal_progress: float) -> ProgressStatus:
    """Classify progress against the ideal line."""
    if progress_percentage >= COMPLETED_PROGRESS:
        return ProgressStatus.COMPLETED

    gap = progress_percentage - ideal_progress
    if gap >= AHEAD_GAP_THRESHOLD:
        return ProgressStatus.AHEAD
    if gap >= AT_RISK_GAP_THRESHOLD:
        return ProgressStatus.ON_TRACK
    if gap >= BEHIND_GAP_THRESHOLD:
        return ProgressStatus.AT_RISK
    return ProgressStatus.BEHIND


def classify_status(
    progress_percentage: float,
    start_date: Timestamp,
    end_date: Timestamp,
    now: Optional[Timestamp] = None,
) -> StatusResult:
    """Ideal progress, gap and status of a key result at `now`.

    Args:
        progress_percentage: Current progress (0-100).
        start_date: Start of the tracking period.
        end_date: End of the tracking period.
        now: Evaluation time; defaults to the current UTC time.

    Returns:
        StatusResult. Positive gap means ahead of schedule.
    """
    ideal = calculate_ideal_progress(start_date, end_date, now)
    return StatusResult(
        ideal_progress=ideal,
        gap=progress_percentage - ideal,
        status=status_from_gap(progress_percentage, ideal),
    )


def assess_status(
    progress_percentage: float,
    start_date: Timestamp,
    end_date: Timestamp,
    now: Optional[Timestamp] = None,
) -> StatusAssessment:
    """classify_status plus rounded display figures and a recommendation."""
    result = classify_status(progress_percentage, start_date, end_date, now)
    return StatusAssessment(
        status_result=result,
        progress_percentage=_round_half_up(progress_percentage),
        time_progress_percentage=_round_half_up(result.ideal_progress),
        recommendation=_recommendation(result),
    )


def status_color(status: Union[ProgressStatus, str]) -> str:
    """Progress bar color token for a status."""
    try:
        return _STATUS_COLORS[ProgressStatus(status)]
    except ValueError:
        return _DEFAULT_STATUS_COLOR


def status_label(status: Union[ProgressStatus, str]) -> str:
    try:
        return _STATUS_LABELS[ProgressStatus(status)]
    except ValueError:
        return _DEFAULT_STATUS_LABEL


def _round_half_up(value: float) -> int:
    # Display figures round .5 up, not to even.
    return math.floor(value + 0.5)


def _recommendation(result: StatusResult) -> str:
    gap_points = _round_half_up(abs(result.gap))
    if result.status is ProgressStatus.COMPLETED:
        return "Target tercapai 100%! Luar biasa!"
    if result.status is ProgressStatus.AHEAD:
        return f"Progress lebih cepat {gap_points}% dari jadwal ideal!"
    if result.status is ProgressStatus.ON_TRACK:
        return "Progress sesuai dengan capaian ideal hari ini."
    if result.status is ProgressStatus.AT_RISK:
        return f"Progress tertinggal {gap_points}% dari ideal, perlu percepatan."
    return f"Progress tertinggal {gap_points}% dari ideal, butuh tindakan segera."
