"""
Risk assessment and alerting models.

Pydantic models for the discrete risk classification consumed by dashboards
and alerting, the alert decision derived from it, and the per-trap report
produced by TrapRiskService.
"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import ClassificationMode, RiskLevel
from .observations import DailyRatePoint, RatedObservation


class RiskAssessment(BaseModel):
    """
    Stateless risk classification of a rate or an absolute count.

    Attributes:
        level: safe, warning or danger
        mode: Whether a rate or a count/threshold pair was classified
        percentage: Rate relative to the 2/day danger boundary (rate mode) or
            count relative to the pest threshold (threshold mode)
        current_rate: Classified average rate (rate mode only)
        count: Classified count (threshold mode only)
        threshold: Pest threshold (threshold mode only)
        should_show_warning: Whether a UI warning banner should render
        message: Short status line
        action_message: Recommended action for the grower
    """

    model_config = ConfigDict(frozen=True)

    level: RiskLevel
    mode: ClassificationMode
    percentage: float
    current_rate: Optional[float] = None
    count: Optional[int] = None
    threshold: Optional[int] = None
    should_show_warning: bool = False
    message: str = ""
    action_message: str = ""

    @property
    def rate_percentage(self) -> float:
        """Alias used by rate-mode consumers."""
        return self.percentage


class AlertDecision(BaseModel):
    """
    Whether a freshly computed risk level should notify the grower.

    Delivery is handled by the caller; this only records the decision.
    """

    model_config = ConfigDict(frozen=True)

    notify: bool
    level: RiskLevel
    previous_level: Optional[RiskLevel] = None
    escalated: bool = False
    headline: str = ""
    reason: str = Field(description="Machine-readable decision reason")


class TrapRiskReport(BaseModel):
    """
    Everything a dashboard or alert hook needs for one trap (or farm).

    Attributes:
        today: Anchor day used for every windowed computation
        window_days: Length of the averaging window
        rated_observations: All observations with rates, ascending by date
        average_rate: Mean covered rate over the window
        most_recent_rate: Rate of the newest rated observation (0.0 if none)
        assessment: Rate-mode classification of ``average_rate``
        daily_series: Gap-free chart series for the chart range
        alert: Alert decision, when one was requested
    """

    today: dt.date
    window_days: int
    rated_observations: list[RatedObservation] = Field(default_factory=list)
    average_rate: float = 0.0
    most_recent_rate: float = 0.0
    assessment: RiskAssessment
    daily_series: list[DailyRatePoint] = Field(default_factory=list)
    alert: Optional[AlertDecision] = None
