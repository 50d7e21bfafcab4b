"""Initiative priority calculator.

Priority Score = (Impact x 0.4) + ((6 - Effort) x 0.3) + (Confidence x 0.3)

Impact and confidence raise priority; effort is inverted so that cheaper
work ranks higher. All three scores are human estimates on a 1-5 scale and
are validated strictly: out-of-range input raises instead of being clamped.
"""

from __future__ import annotations

import numbers
from typing import Any, Iterable, Mapping, Optional, Union

from okr_engine.models.enums import PriorityLevel
from okr_engine.models.results import (
    BulkPriorityResult,
    PriorityInputs,
    PriorityResult,
)

IMPACT_WEIGHT = 0.4
EFFORT_WEIGHT = 0.3
CONFIDENCE_WEIGHT = 0.3
EFFORT_INVERSION_BASE = 6

MIN_SCORE = 1
MAX_SCORE = 5

CRITICAL_THRESHOLD = 4.5
HIGH_THRESHOLD = 3.5
MEDIUM_THRESHOLD = 2.5

SCORE_DECIMALS = 2

_PRIORITY_COLORS: dict[PriorityLevel, str] = {
    PriorityLevel.CRITICAL: "bg-red-100 text-red-800 border-red-200",
    PriorityLevel.HIGH: "bg-orange-100 text-orange-800 border-orange-200",
    PriorityLevel.MEDIUM: "bg-yellow-100 text-yellow-800 border-yellow-200",
    PriorityLevel.LOW: "bg-green-100 text-green-800 border-green-200",
}
_DEFAULT_PRIORITY_COLOR = "bg-gray-100 text-gray-800 border-gray-200"

_PRIORITY_LABELS: dict[PriorityLevel, str] = {
    PriorityLevel.CRITICAL: "Kritis",
    PriorityLevel.HIGH: "Tinggi",
    PriorityLevel.MEDIUM: "Sedang",
    PriorityLevel.LOW: "Rendah",
}
_DEFAULT_PRIORITY_LABEL = "Tidak Diketahui"

# Bulk items may come straight from the UI layer with camelCase keys.
_FIELD_ALIASES: dict[str, str] = {
    "impact_score": "impactScore",
    "effort_score": "effortScore",
    "confidence_score": "confidenceScore",
}


class PriorityValidationError(ValueError):
    """A priority score is missing or outside the 1-5 range."""


def _validate_score(name: str, score: Any) -> float:
    if (
        isinstance(score, bool)
        or not isinstance(score, numbers.Real)
        or not (MIN_SCORE <= score <= MAX_SCORE)
    ):
        raise PriorityValidationError(
            f"All scores must be between {MIN_SCORE} and {MAX_SCORE}, "
            f"got {name}={score!r}"
        )
    return float(score)


def get_priority_level(score: float) -> PriorityLevel:
    """Map a priority score (1.0-5.0) to its level."""
    if score >= CRITICAL_THRESHOLD:
        return PriorityLevel.CRITICAL
    if score >= HIGH_THRESHOLD:
        return PriorityLevel.HIGH
    if score >= MEDIUM_THRESHOLD:
        return PriorityLevel.MEDIUM
    return PriorityLevel.LOW


def calculate_priority(
    inputs: Optional[PriorityInputs] = None,
    *,
    impact_score: Optional[float] = None,
    effort_score: Optional[float] = None,
    confidence_score: Optional[float] = None,
) -> PriorityResult:
    """Score an initiative from its impact, effort and confidence estimates.

    Pass either a PriorityInputs or the three scores as keyword arguments.

    Raises:
        PriorityValidationError: if any score is missing or outside 1-5, or
            if inputs and keyword scores are both given.
    """
    if inputs is not None:
        if any(s is not None for s in (impact_score, effort_score, confidence_score)):
            raise PriorityValidationError(
                "Pass either a PriorityInputs or keyword scores, not both"
            )
        impact_score = inputs.impact_score
        effort_score = inputs.effort_score
        confidence_score = inputs.confidence_score

    impact = _validate_score("impact_score", impact_score)
    effort = _validate_score("effort_score", effort_score)
    confidence = _validate_score("confidence_score", confidence_score)

    raw_score = (
        impact * IMPACT_WEIGHT
        + (EFFORT_INVERSION_BASE - effort) * EFFORT_WEIGHT
        + confidence * CONFIDENCE_WEIGHT
    )
    # Level from the displayed (rounded) score.
    score = round(raw_score, SCORE_DECIMALS)
    level = get_priority_level(score)

    return PriorityResult(
        priority_score=score,
        priority_level=level,
        reasoning=_generate_reasoning(impact, effort, confidence, score, level),
    )


def calculate_bulk_priorities(items: Iterable[Mapping[str, Any]]) -> list[BulkPriorityResult]:
    """Score many initiatives; each item needs an id and the three scores."""
    results: list[BulkPriorityResult] = []
    for item in items:
        if item.get("id") is None:
            raise PriorityValidationError(f"Every item needs an id, got {dict(item)!r}")
        result = calculate_priority(
            impact_score=_lookup(item, "impact_score"),
            effort_score=_lookup(item, "effort_score"),
            confidence_score=_lookup(item, "confidence_score"),
        )
        results.append(
            BulkPriorityResult(
                id=str(item["id"]),
                priority_score=result.priority_score,
                priority_level=result.priority_level,
                reasoning=result.reasoning,
            )
        )
    return results


def priority_color_class(level: Union[PriorityLevel, str]) -> str:
    """Badge color classes for a priority level."""
    try:
        return _PRIORITY_COLORS[PriorityLevel(level)]
    except ValueError:
        return _DEFAULT_PRIORITY_COLOR


def priority_label(level: Union[PriorityLevel, str]) -> str:
    """Indonesian display label for a priority level."""
    try:
        return _PRIORITY_LABELS[PriorityLevel(level)]
    except ValueError:
        return _DEFAULT_PRIORITY_LABEL


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _lookup(item: Mapping[str, Any], field_name: str) -> Any:
    if field_name in item:
        return item[field_name]
    return item.get(_FIELD_ALIASES[field_name])


def _score_level(score: float) -> str:
    if score >= 5:
        return "sangat tinggi"
    if score >= 4:
        return "tinggi"
    if score >= 3:
        return "sedang"
    if score >= 2:
        return "rendah"
    return "sangat rendah"


def _generate_reasoning(
    impact: float,
    effort: float,
    confidence: float,
    score: float,
    level: PriorityLevel,
) -> str:
    impact_desc = f"dampak bisnis {_score_level(impact)} ({impact:g}/5)"
    effort_desc = f"tingkat kesulitan {_score_level(effort)} ({effort:g}/5)"
    confidence_desc = f"tingkat keyakinan {_score_level(confidence)} ({confidence:g}/5)"
    return (
        f"Prioritas {level.value} (skor: {score:.2f}) berdasarkan {impact_desc}, "
        f"{effort_desc}, dan {confidence_desc}. "
        "Formula: (Impact×0.4) + (Kemudahan×0.3) + (Keyakinan×0.3)."
    )
