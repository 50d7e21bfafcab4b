"""Tests for result value objects and their serialization."""

import dataclasses

import pytest

from okr_engine.models import (
    BulkPriorityResult,
    ConfigValidation,
    PriorityLevel,
    PriorityResult,
    ProgressResult,
    ProgressStatus,
    StatusResult,
)


class TestProgressResult:
    def test_defaults_to_valid(self):
        assert ProgressResult(progress_percentage=10.0, is_completed=False).is_valid is True

    def test_is_frozen(self):
        result = ProgressResult(progress_percentage=10.0, is_completed=False)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.progress_percentage = 20.0

    def test_to_dict(self):
        assert ProgressResult(75.0, False, True).to_dict() == {
            "progress_percentage": 75.0,
            "is_completed": False,
            "is_valid": True,
        }


class TestConfigValidation:
    def test_valid_has_no_error(self):
        assert ConfigValidation(is_valid=True).to_dict() == {"is_valid": True, "error": None}


class TestStatusResult:
    def test_to_dict_serializes_enum(self):
        data = StatusResult(ideal_progress=50.0, gap=-10.0, status=ProgressStatus.AT_RISK).to_dict()
        assert data == {"ideal_progress": 50.0, "gap": -10.0, "status": "at_risk"}


class TestPriorityResults:
    def test_priority_to_dict(self):
        result = PriorityResult(priority_score=4.2, priority_level=PriorityLevel.HIGH, reasoning="r")
        assert result.to_dict()["priority_level"] == "high"

    def test_bulk_to_dict_includes_id(self):
        result = BulkPriorityResult(id="i-1", priority_score=1.0, priority_level=PriorityLevel.LOW, reasoning="r")
        assert result.to_dict() == {
            "id": "i-1",
            "priority_score": 1.0,
            "priority_level": "low",
            "reasoning": "r",
        }
