"""
Observation rate and risk engine.

Turns sparse, irregularly sampled trap observations into daily rates, a
continuous daily rate series, a today-anchored windowed average and a
discrete risk level.

Components:
    compute_rates: Delta counts to per-observation daily rates
    CoverageIndex: Calendar day to covering observation lookup
    average_rate_for_last_n_days: Windowed mean anchored at today
    expand_to_daily_rates: Gap-free chart series
    classify_by_rate / classify_by_threshold: Risk classification
    decide_alert: Whether a level warrants notifying the grower
    TrapRiskService: Per-trap orchestration

All functions are pure and stateless; "today" can always be injected.

Example:
    >>> from trapwatch.engine import compute_rates, average_rate_for_last_n_days
    >>> rated = compute_rates(observations)
    >>> average_rate_for_last_n_days(rated, 3)
"""

from .alerting import alert_subject, decide_alert
from .coverage import CoverageIndex, average_rate_for_last_n_days, window_bounds
from .daily_series import expand_to_daily_rates, filter_to_last_n_days
from .rates import aggregate_by_date, compute_rates, most_recent_rate
from .risk_classifier import (
    RATE_DANGER_THRESHOLD,
    RATE_WARNING_THRESHOLD,
    THRESHOLD_WARNING_PERCENTAGE,
    classify_by_rate,
    classify_by_threshold,
    classify_observation_rate,
)
from .risk_service import TrapRiskService

__all__ = [
    "CoverageIndex",
    "RATE_DANGER_THRESHOLD",
    "RATE_WARNING_THRESHOLD",
    "THRESHOLD_WARNING_PERCENTAGE",
    "TrapRiskService",
    "aggregate_by_date",
    "alert_subject",
    "average_rate_for_last_n_days",
    "classify_by_rate",
    "classify_by_threshold",
    "classify_observation_rate",
    "compute_rates",
    "decide_alert",
    "expand_to_daily_rates",
    "filter_to_last_n_days",
    "most_recent_rate",
    "window_bounds",
]
