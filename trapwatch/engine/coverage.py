"""
Coverage Index & Window Averager — day-level rate lookup.

Growers check traps at irregular intervals, so a single large count after a
long gap is spread over the days it represents. The CoverageIndex answers
"which observation's rate applies to this calendar day"; the window averager
uses it to compute the mean daily rate over the trailing N days ending today.

Days no observation covers contribute an explicit zero, so a long silence
after risk activity decays the average toward safe.

Version: coverage_v1
"""

from datetime import date, timedelta
from typing import Optional, Sequence

import structlog

from trapwatch.models.observations import RatedObservation, day_range

logger = structlog.get_logger()


class CoverageIndex:
    """
    Interval lookup from calendar day to covering RatedObservation.

    Only observations with a rate have coverage; baselines and a leading
    observation without a predecessor are never indexed. Lookup scans
    intervals newest first, so when a malformed sequence has overlapping
    intervals the most recent observation wins. A linear scan is fine at the
    expected scale of tens to low hundreds of observations per trap.

    Attributes:
        intervals: Rated observations with coverage, newest first

    Example:
        >>> index = CoverageIndex.build(compute_rates(observations))
        >>> index.rate_for(date(2026, 2, 1))
        2.5
    """

    def __init__(self, intervals: Sequence[RatedObservation]):
        self.intervals = list(intervals)

    @classmethod
    def build(cls, rated: Sequence[RatedObservation]) -> "CoverageIndex":
        """
        Index the coverage intervals of a rated sequence.

        Args:
            rated: Output of compute_rates (any order)

        Returns:
            CoverageIndex over the observations that carry a rate
        """
        ordered = sorted(rated, key=lambda o: o.date)
        covering = [o for o in reversed(ordered) if o.has_coverage]
        return cls(covering)

    def __len__(self) -> int:
        return len(self.intervals)

    @property
    def first_covered_day(self) -> Optional[date]:
        if not self.intervals:
            return None
        return min(o.coverage_start for o in self.intervals)

    @property
    def last_covered_day(self) -> Optional[date]:
        if not self.intervals:
            return None
        return max(o.coverage_end for o in self.intervals)

    def lookup(self, day: date) -> Optional[RatedObservation]:
        """
        Find the observation whose coverage interval contains ``day``.

        Returns:
            The most recent covering observation, or None if the day is
            uncovered
        """
        for obs in self.intervals:
            if obs.covers(day):
                return obs
        return None

    def rate_for(self, day: date) -> float:
        """Covered rate of ``day``, 0.0 when uncovered."""
        obs = self.lookup(day)
        return obs.rate if obs is not None else 0.0


def window_bounds(n: int, today: date) -> tuple[date, date]:
    """Inclusive [start, end] of the ``n``-day window ending at ``today``."""
    return today - timedelta(days=n - 1), today


def average_rate_for_last_n_days(
    rated: Sequence[RatedObservation],
    n: int,
    today: Optional[date] = None,
) -> float:
    """
    Mean covered daily rate over the last ``n`` calendar days.

    The window is [today - (n - 1), today], anchored on the current day and
    not on the latest observation. Each day contributes the rate of the
    observation covering it, or 0 when none does.

    Args:
        rated: Output of compute_rates
        n: Window length in days (>= 1)
        today: Anchor day; read from the clock once when omitted

    Returns:
        Sum of per-day contributions divided by n; 0.0 for an empty sequence
        or when no coverage overlaps the window

    Raises:
        ValueError: If n < 1

    Example:
        >>> average_rate_for_last_n_days(rated, 3, today=date(2026, 2, 3))
        1.6666666666666667
    """
    if n < 1:
        raise ValueError(f"Window must cover at least one day, got n={n}")
    if not rated:
        return 0.0

    today = today or date.today()
    start, end = window_bounds(n, today)
    index = CoverageIndex.build(rated)

    total = sum(index.rate_for(day) for day in day_range(start, end))
    average = total / n

    logger.debug(
        "window_average_computed",
        window_start=start.isoformat(),
        window_end=end.isoformat(),
        window_days=n,
        covering_observations=len(index),
        average_rate=round(average, 4),
    )
    return average
