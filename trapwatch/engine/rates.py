"""
Rate Computer — delta counts to daily rates.

Trap checks record only the insects caught since the previous check, on
irregular dates. This module divides each delta by the calendar days elapsed
since the previous check and records the interval of days the resulting rate
is attributed to (its coverage interval).

Version: rates_v1
"""

from collections import Counter
from datetime import timedelta
from typing import Iterable, Sequence

import structlog

from trapwatch.models.observations import Observation, RatedObservation

logger = structlog.get_logger()


def _base_fields(obs: Observation) -> dict:
    # Only the boundary fields; derived ones are always recomputed.
    return {
        "id": obs.id,
        "date": obs.date,
        "count": obs.count,
        "is_baseline": obs.is_baseline,
    }


def compute_rates(observations: Iterable[Observation]) -> list[RatedObservation]:
    """
    Compute the daily rate and coverage interval of every observation.

    Observations may arrive in any order; they are stable-sorted ascending by
    date first. For each observation:

    - days_since_previous is the gap to the latest observation on an earlier
      calendar day, or None when there is none
    - rate is None for baselines and for a leading observation without a
      predecessor; otherwise count / days_since_previous
    - coverage is [previous day + 1, own day] when a rate was assigned,
      empty otherwise

    Two observations on the same day violate the upstream uniqueness rule.
    Both keep their predecessor, so they share one coverage interval and
    lookups resolve to the later of the two after sorting.

    Args:
        observations: Validated observations for one trap or farm

    Returns:
        RatedObservations, same cardinality, ascending by date

    Example:
        >>> rated = compute_rates([baseline, check])
        >>> rated[-1].rate
        2.5
    """
    ordered = sorted(observations, key=lambda o: o.date)
    if not ordered:
        return []

    rated: list[RatedObservation] = []
    previous_day = None
    current_day = None

    for obs in ordered:
        if current_day is None or obs.date > current_day:
            previous_day = current_day
            current_day = obs.date

        days = (obs.date - previous_day).days if previous_day is not None else None

        if obs.is_baseline or days is None:
            rated.append(RatedObservation(**_base_fields(obs), days_since_previous=days))
            continue

        rated.append(
            RatedObservation(
                **_base_fields(obs),
                days_since_previous=days,
                rate=obs.count / days,
                coverage_start=previous_day + timedelta(days=1),
                coverage_end=obs.date,
            )
        )

    duplicates = sorted(d for d, n in Counter(o.date for o in ordered).items() if n > 1)
    if duplicates:
        logger.warning(
            "duplicate_observation_dates",
            dates=[d.isoformat() for d in duplicates],
        )

    logger.debug(
        "rates_computed",
        observations=len(rated),
        rated=sum(1 for r in rated if r.rate is not None),
        first_date=rated[0].date.isoformat(),
        last_date=rated[-1].date.isoformat(),
    )
    return rated


def most_recent_rate(rated: Sequence[RatedObservation]) -> float:
    """
    Rate of the newest observation that carries one.

    Returns:
        The rate, or 0.0 when only baselines (or nothing) are present
    """
    for obs in sorted(rated, key=lambda o: o.date, reverse=True):
        if obs.rate is not None:
            return obs.rate
    return 0.0


def aggregate_by_date(rated: Sequence[RatedObservation]) -> list[RatedObservation]:
    """
    Merge same-day observations into one entry per calendar day.

    Used by list and chart views that show one point per day. Counts are
    summed and the rate is recomputed over the first entry's
    days_since_previous (1 day when it has none). The first entry's identity
    and coverage are kept. Days with a single entry pass through unchanged.

    Args:
        rated: Rated observations, in display order

    Returns:
        One entry per day, ordered by first appearance
    """
    by_day: dict = {}
    for obs in rated:
        by_day.setdefault(obs.date, []).append(obs)

    merged: list[RatedObservation] = []
    for group in by_day.values():
        if len(group) == 1:
            merged.append(group[0])
            continue

        first = group[0]
        total = sum(o.count for o in group)
        days = first.days_since_previous or 1
        merged.append(first.model_copy(update={"count": total, "rate": total / days}))

    return merged
