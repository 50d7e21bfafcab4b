"""Shared test fixtures for the OKR engine test suite."""

from datetime import datetime, timezone

import pytest


@pytest.fixture
def cycle_start() -> datetime:
    return datetime(2025, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def cycle_end() -> datetime:
    """Ten days after cycle_start."""
    return datetime(2025, 1, 11, tzinfo=timezone.utc)


@pytest.fixture
def midpoint() -> datetime:
    """Halfway through the cycle; ideal progress is exactly 50%."""
    return datetime(2025, 1, 6, tzinfo=timezone.utc)
