"""Audit hooks: one audit entry per calculation served over the API."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

logger = logging.getLogger(__name__)

RESULT_SUMMARY_LIMIT = 500

# Result fields lifted onto the entry so the trail can be filtered without
# parsing the summary.
_OUTCOME_FIELDS = ("is_valid", "status", "priority_level")


def _result_payload(result: Any) -> Any:
    to_dict = getattr(result, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if hasattr(result, "value"):
        return {"status": result.value}
    return result


def log_calculation(
    operation: str,
    inputs: dict[str, Any] | None = None,
    result: Any = None,
) -> dict[str, Any]:
    """Record a calculation in the audit log.

    The entry carries the key result type from the inputs (when there is one)
    and the validity and status of the result, next to a truncated summary.
    Calculations that came back invalid are logged at WARNING.

    Returns the audit entry dict for downstream persistence.
    """
    inputs = inputs or {}
    payload = _result_payload(result) if result is not None else None

    entry: dict[str, Any] = {
        "operation": operation,
        "key_result_type": inputs.get("key_result_type"),
        "inputs": inputs,
        "timestamp": datetime.now(tz=timezone.utc).isoformat(),
        "result_summary": str(payload)[:RESULT_SUMMARY_LIMIT] if payload is not None else None,
    }
    if isinstance(payload, dict):
        for field_name in _OUTCOME_FIELDS:
            if field_name in payload:
                entry[field_name] = payload[field_name]

    if entry.get("is_valid") is False:
        logger.warning(
            "Calculation audit: %s produced an invalid result (type=%s)",
            operation,
            entry["key_result_type"],
        )
    else:
        logger.info("Calculation audit: %s", operation)
    return entry
