"""
Trap Risk Service — Orchestrates rates, windowed average, chart series and alerting.

Computes a trap's (or farm's) risk report on demand from its observations.
No persistence; the caller fetches observations and delivers any alert.
"""

from datetime import date
from typing import Any, Iterable, Optional

from trapwatch.config import Settings, get_settings
from trapwatch.engine.alerting import decide_alert
from trapwatch.engine.coverage import average_rate_for_last_n_days
from trapwatch.engine.daily_series import expand_to_daily_rates, filter_to_last_n_days
from trapwatch.engine.rates import compute_rates, most_recent_rate
from trapwatch.engine.risk_classifier import classify_by_rate
from trapwatch.models.enums import RiskLevel
from trapwatch.models.observations import parse_observations
from trapwatch.models.risk import TrapRiskReport
from trapwatch.utils.logging import get_logger


class TrapRiskService:
    """
    Builds TrapRiskReports for dashboards and alert hooks.

    "Today" is read once per call and threaded through every computation,
    so one report is internally consistent even across midnight.

    Attributes:
        settings: Window and chart range configuration

    Example:
        >>> service = TrapRiskService()
        >>> report = service.assess(rows, previous_level=RiskLevel.SAFE)
        >>> report.assessment.level, report.alert.notify
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.logger = get_logger(__name__)

    def assess(
        self,
        observations: Iterable[Any],
        today: Optional[date] = None,
        previous_level: Optional[RiskLevel] = None,
        evaluate_alert: bool = False,
        trap_id: Optional[str] = None,
    ) -> TrapRiskReport:
        """
        Compute the full risk report for one observation sequence.

        Args:
            observations: Observation instances or raw record-store rows
            today: Anchor day; read from the clock once when omitted
            previous_level: Level of the last notification, if any
            evaluate_alert: Produce an alert decision even without a
                previous level
            trap_id: Trap or farm identifier, used for logging only

        Returns:
            TrapRiskReport

        Raises:
            pydantic.ValidationError: If a raw row is malformed
        """
        today = today or date.today()
        window_days = self.settings.risk_window_days

        rated = compute_rates(parse_observations(observations))
        average = average_rate_for_last_n_days(rated, window_days, today=today)
        assessment = classify_by_rate(average)

        chart_window = filter_to_last_n_days(rated, self.settings.chart_range_days, today=today)
        daily_series = expand_to_daily_rates(chart_window)

        alert = None
        if previous_level is not None or evaluate_alert:
            alert = decide_alert(
                assessment,
                previous_level=previous_level,
                renotify_repeat_warning=self.settings.renotify_repeat_warning,
            )

        report = TrapRiskReport(
            today=today,
            window_days=window_days,
            rated_observations=rated,
            average_rate=average,
            most_recent_rate=most_recent_rate(rated),
            assessment=assessment,
            daily_series=daily_series,
            alert=alert,
        )

        self.logger.info(
            "trap_risk_assessed",
            trap_id=trap_id,
            today=today.isoformat(),
            observations=len(rated),
            window_days=window_days,
            average_rate=round(average, 4),
            level=assessment.level.value,
            series_points=len(daily_series),
            notify=alert.notify if alert else None,
        )
        return report
