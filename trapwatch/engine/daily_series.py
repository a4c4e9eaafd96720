"""
Daily Series Expander — gap-free rate signal for charts.

Expands a rated observation sequence into one DailyRatePoint per calendar day
between the first and last observation, so charts show a continuous daily
rate instead of discrete check events.
"""

from datetime import date, timedelta
from typing import Optional, Sequence

import structlog

from trapwatch.engine.coverage import CoverageIndex
from trapwatch.models.observations import DailyRatePoint, RatedObservation, day_range

logger = structlog.get_logger()


def expand_to_daily_rates(rated: Sequence[RatedObservation]) -> list[DailyRatePoint]:
    """
    Emit one data point per day from the first to the last observation.

    Rates come from the covering observation (0.0 when uncovered). Days on
    which an observation falls are flagged and carry that observation's own
    count; interpolated days carry no count. The series never extends before
    the first or past the last observation.

    Args:
        rated: Output of compute_rates (any order)

    Returns:
        (last - first).days + 1 points ascending by date; empty for no input
    """
    if not rated:
        return []

    ordered = sorted(rated, key=lambda o: o.date)
    start, end = ordered[0].date, ordered[-1].date
    index = CoverageIndex.build(ordered)

    # Later duplicates overwrite earlier ones, matching the coverage lookup.
    on_day = {obs.date: obs for obs in ordered}

    points: list[DailyRatePoint] = []
    for day in day_range(start, end):
        covering = index.lookup(day)
        own = on_day.get(day)
        points.append(
            DailyRatePoint(
                date=day,
                timestamp=DailyRatePoint.timestamp_for(day),
                rate=covering.rate if covering is not None else 0.0,
                count=own.count if own is not None else None,
                days_since_previous=covering.days_since_previous if covering is not None else None,
                is_observation_day=own is not None,
            )
        )

    logger.debug(
        "daily_series_expanded",
        start=start.isoformat(),
        end=end.isoformat(),
        points=len(points),
        observation_days=len(on_day),
    )
    return points


def filter_to_last_n_days(
    rated: Sequence[RatedObservation],
    n: int,
    today: Optional[date] = None,
) -> list[RatedObservation]:
    """
    Keep observations dated on or after midnight ``n`` days ago.

    Plain date filtering used to bound chart ranges; coverage is not
    consulted, so an observation just before the cutoff is dropped even if
    its interval reaches into the range.

    Args:
        rated: Rated observations (order is preserved)
        n: Days to look back (>= 0)
        today: Anchor day; read from the clock once when omitted

    Raises:
        ValueError: If n < 0
    """
    if n < 0:
        raise ValueError(f"Cannot look back a negative number of days, got n={n}")

    today = today or date.today()
    cutoff = today - timedelta(days=n)
    return [obs for obs in rated if obs.date >= cutoff]
