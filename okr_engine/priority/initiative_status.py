"""Initiative lifecycle status derived from task and success-metric activity.

An initiative starts as a draft and moves to "sedang_berjalan" as soon as
one of its tasks is started or one of its success metrics records an
achievement. Closing ("selesai") and cancelling ("dibatalkan") are manual
and final.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Union

from okr_engine.models.enums import InitiativeStatus
from okr_engine.models.results import InitiativeStatusInfo
from okr_engine.progress.calculator import parse_metric_value

ACTIVE_TASK_STATUSES = frozenset({"in_progress", "completed"})

_CLOSED_STATUSES = (InitiativeStatus.COMPLETED, InitiativeStatus.CANCELED)
_EDITABLE_STATUSES = (InitiativeStatus.DRAFT, InitiativeStatus.IN_PROGRESS)

_STATUS_INFO: dict[InitiativeStatus, InitiativeStatusInfo] = {
    InitiativeStatus.DRAFT: InitiativeStatusInfo(
        status=InitiativeStatus.DRAFT,
        label="Draft",
        description="Inisiatif dan task sudah dibuat, belum ada yang berjalan",
        color="gray",
        bg_color="bg-gray-100",
        text_color="text-gray-800",
        border_color="border-gray-200",
    ),
    InitiativeStatus.IN_PROGRESS: InitiativeStatusInfo(
        status=InitiativeStatus.IN_PROGRESS,
        label="On Progress",
        description="Minimal 1 task dimulai atau metrik diupdate",
        color="blue",
        bg_color="bg-blue-100",
        text_color="text-blue-800",
        border_color="border-blue-200",
    ),
    InitiativeStatus.COMPLETED: InitiativeStatusInfo(
        status=InitiativeStatus.COMPLETED,
        label="Selesai",
        description="Inisiatif telah diselesaikan",
        color="green",
        bg_color="bg-green-100",
        text_color="text-green-800",
        border_color="border-green-200",
    ),
    InitiativeStatus.CANCELED: InitiativeStatusInfo(
        status=InitiativeStatus.CANCELED,
        label="Dibatalkan",
        description="Inisiatif dibatalkan sebelum selesai",
        color="red",
        bg_color="bg-red-100",
        text_color="text-red-800",
        border_color="border-red-200",
    ),
}


def _as_status(status: Union[InitiativeStatus, str, None]) -> Union[InitiativeStatus, None]:
    try:
        return InitiativeStatus(status)
    except ValueError:
        return None


def _has_running_tasks(tasks: Iterable[Mapping[str, Any]], statuses: Iterable[str]) -> bool:
    wanted = frozenset(statuses)
    return any(task.get("status") in wanted for task in tasks)


def _has_metric_updates(success_metrics: Iterable[Mapping[str, Any]]) -> bool:
    return any(parse_metric_value(metric.get("achievement")) != 0 for metric in success_metrics)


def calculate_initiative_status(
    current_status: Union[InitiativeStatus, str, None],
    tasks: Iterable[Mapping[str, Any]] = (),
    success_metrics: Iterable[Mapping[str, Any]] = (),
) -> InitiativeStatus:
    """Derive an initiative's status from its tasks and success metrics.

    Args:
        current_status: Stored status tag.
        tasks: Task records; only their "status" key is read.
        success_metrics: Metric records; only their "achievement" key is read.

    Returns:
        The closed status unchanged when the initiative is already closed,
        otherwise sedang_berjalan if any task is in progress or completed or
        any metric has a non-zero achievement, else draft.
    """
    current = _as_status(current_status)
    if current in _CLOSED_STATUSES:
        return current

    if _has_running_tasks(list(tasks), ACTIVE_TASK_STATUSES) or _has_metric_updates(list(success_metrics)):
        return InitiativeStatus.IN_PROGRESS
    return InitiativeStatus.DRAFT


def status_change_reason(
    old_status: Union[InitiativeStatus, str],
    new_status: Union[InitiativeStatus, str],
    tasks: Iterable[Mapping[str, Any]] = (),
    success_metrics: Iterable[Mapping[str, Any]] = (),
) -> str:
    """Short English reason for an automatic status change, for logging."""
    old = _as_status(old_status)
    new = _as_status(new_status)
    if old is InitiativeStatus.DRAFT and new is InitiativeStatus.IN_PROGRESS:
        started = _has_running_tasks(list(tasks), ("in_progress",))
        updated = _has_metric_updates(list(success_metrics))
        if started and updated:
            return "Task started and metrics updated"
        if started:
            return "At least one task started"
        if updated:
            return "Success metrics updated"

    old_tag = old.value if old is not None else old_status
    new_tag = new.value if new is not None else new_status
    return f"Status changed from {old_tag} to {new_tag}"


def initiative_status_info(status: Union[InitiativeStatus, str]) -> InitiativeStatusInfo:
    """Display info for a status; unknown tags get the draft info."""
    return _STATUS_INFO.get(_as_status(status), _STATUS_INFO[InitiativeStatus.DRAFT])


def can_edit_initiative(status: Union[InitiativeStatus, str]) -> bool:
    return _as_status(status) in _EDITABLE_STATUSES


def can_close_initiative(status: Union[InitiativeStatus, str]) -> bool:
    return _as_status(status) is InitiativeStatus.IN_PROGRESS


def can_cancel_initiative(status: Union[InitiativeStatus, str]) -> bool:
    return _as_status(status) in _EDITABLE_STATUSES
