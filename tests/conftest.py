"""
Pytest configuration and shared fixtures for the TrapWatch engine test suite.

Factories build observation sequences relative to a fixed anchor day so that
windowed computations are deterministic; every engine entry point accepts
``today`` explicitly.
"""

import os
from datetime import date, timedelta
from typing import Optional

import pytest

# Set testing environment BEFORE importing settings
os.environ["TESTING"] = "true"

from trapwatch.config import Settings, get_settings
from trapwatch.models.observations import Observation, RatedObservation


TODAY = date(2026, 3, 15)

_next_id = iter(range(1, 1_000_000))


def day(offset: int, anchor: date = TODAY) -> date:
    """Calendar day ``offset`` days from the anchor (negative = past)."""
    return anchor + timedelta(days=offset)


def make_observation(
    offset: int = 0,
    count: int = 0,
    is_baseline: bool = False,
    anchor: date = TODAY,
    **overrides,
) -> Observation:
    """Factory function for creating test Observation objects."""
    defaults = dict(
        id=next(_next_id),
        date=day(offset, anchor),
        count=count,
        is_baseline=is_baseline,
    )
    defaults.update(overrides)
    return Observation(**defaults)


def make_baseline(offset: int = 0, anchor: date = TODAY) -> Observation:
    """Factory function for a trap setup/reset observation."""
    return make_observation(offset=offset, count=0, is_baseline=True, anchor=anchor)


def make_sequence(
    checks: list[tuple[int, int]],
    baseline_offset: Optional[int] = None,
    anchor: date = TODAY,
) -> list[Observation]:
    """
    Build a trap sequence from (offset, count) pairs.

    Args:
        checks: Day offsets and delta counts of the regular checks
        baseline_offset: Day of the trap setup, if any
        anchor: Day offsets are relative to
    """
    observations = []
    if baseline_offset is not None:
        observations.append(make_baseline(baseline_offset, anchor=anchor))
    observations.extend(
        make_observation(offset=offset, count=count, anchor=anchor) for offset, count in checks
    )
    return observations


def make_rated(
    offset: int,
    count: int,
    days_since_previous: Optional[int],
    anchor: date = TODAY,
    **overrides,
) -> RatedObservation:
    """Factory function for a RatedObservation with consistent coverage."""
    end = day(offset, anchor)
    defaults = dict(
        id=next(_next_id),
        date=end,
        count=count,
        is_baseline=False,
        days_since_previous=days_since_previous,
    )
    if days_since_previous:
        defaults.update(
            rate=count / days_since_previous,
            coverage_start=end - timedelta(days=days_since_previous - 1),
            coverage_end=end,
        )
    defaults.update(overrides)
    return RatedObservation(**defaults)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def today() -> date:
    """Fixed anchor day for windowed computations."""
    return TODAY


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults, isolated from any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def clear_settings_cache():
    """Ensure cached settings never leak between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def baseline_then_check():
    """Baseline two days ago, five insects today (rate 2.5/day)."""
    return make_sequence([(0, 5)], baseline_offset=-2)


@pytest.fixture
def stale_check():
    """Baseline five days ago, nine insects two days ago (rate 3.0/day)."""
    return make_sequence([(-2, 9)], baseline_offset=-5)


@pytest.fixture
def season_rows():
    """Raw record-store rows for a trap checked irregularly over a month."""
    return [
        {"id": 10, "date": day(-30).isoformat(), "count": 0, "isBaseline": True},
        {"id": 11, "date": day(-23).isoformat(), "count": 3, "isBaseline": False},
        {"id": 12, "date": day(-16).isoformat(), "count": 7, "isBaseline": False},
        {"id": 13, "date": day(-9).isoformat(), "count": 4, "isBaseline": False},
        {"id": 14, "date": day(-4).isoformat(), "count": 10, "isBaseline": False},
        {"id": 15, "date": f"{day(-1).isoformat()}T07:30:00.000Z", "count": 9, "isBaseline": False},
        {"id": 16, "date": day(0).isoformat(), "count": 4, "isBaseline": False},
    ]
