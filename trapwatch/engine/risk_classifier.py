"""
Risk Classifier — rate or count to a discrete risk level.

Two classification modes coexist:

- Rate mode (primary): the windowed average daily rate against fixed
  boundaries of 1 and 2 insects/day. 2.0 itself is still a warning.
- Threshold mode (legacy): an absolute count against a pest type's
  threshold, warning from 80% of the threshold.

Both are pure functions; the level is recomputed on every call and alert
dispatch is left to the caller.

Version: risk_classifier_v2
"""

from typing import Optional

import structlog

from trapwatch.models.enums import ClassificationMode, RiskLevel
from trapwatch.models.risk import RiskAssessment

logger = structlog.get_logger()


RATE_WARNING_THRESHOLD = 1.0
RATE_DANGER_THRESHOLD = 2.0
THRESHOLD_WARNING_PERCENTAGE = 80.0

ACTION_MESSAGES = {
    RiskLevel.DANGER: "Action window now. Coordinate treatment timing.",
    RiskLevel.WARNING: "Activity rising. Prepare controls and check traps more often.",
    RiskLevel.SAFE: "Continue monitoring on your regular schedule.",
}


def classify_by_rate(avg_rate: float) -> RiskAssessment:
    """
    Classify an average daily rate.

    Boundaries: rate > 2 is danger, 1 <= rate <= 2 is warning, rate < 1 is
    safe. The percentage is the rate relative to the 2/day danger boundary.

    Args:
        avg_rate: Average insects per day, typically from
            average_rate_for_last_n_days

    Returns:
        RiskAssessment in rate mode

    Example:
        >>> classify_by_rate(2.0).level
        <RiskLevel.WARNING: 'warning'>
    """
    if avg_rate > RATE_DANGER_THRESHOLD:
        level = RiskLevel.DANGER
        message = f"Action required: Average rate ({avg_rate:.1f}/day) exceeds 2/day"
    elif avg_rate >= RATE_WARNING_THRESHOLD:
        level = RiskLevel.WARNING
        message = f"Warning: Average rate ({avg_rate:.1f}/day) between 1-2/day"
    else:
        level = RiskLevel.SAFE
        message = f"Safe: Average rate ({avg_rate:.1f}/day) below 1/day"

    assessment = RiskAssessment(
        level=level,
        mode=ClassificationMode.RATE,
        percentage=(avg_rate / RATE_DANGER_THRESHOLD) * 100,
        current_rate=avg_rate,
        should_show_warning=level != RiskLevel.SAFE,
        message=message,
        action_message=ACTION_MESSAGES[level],
    )
    logger.debug("risk_classified", mode="rate", level=level.value, rate=avg_rate)
    return assessment


def classify_by_threshold(count: int, threshold: int) -> RiskAssessment:
    """
    Classify an absolute count against a pest type threshold (legacy mode).

    count >= threshold is danger; percentage >= 80 is warning; anything else
    is safe. should_show_warning gates the UI banner at 80%.

    Args:
        count: Insects counted
        threshold: Pest type threshold (> 0)

    Returns:
        RiskAssessment in threshold mode

    Raises:
        ValueError: If threshold is not positive
    """
    if threshold <= 0:
        raise ValueError(f"Threshold must be positive, got {threshold}")

    percentage = (count / threshold) * 100

    if count >= threshold:
        level = RiskLevel.DANGER
        message = f"Action required: Count ({count}) exceeds threshold ({threshold})"
    elif percentage >= THRESHOLD_WARNING_PERCENTAGE:
        level = RiskLevel.WARNING
        message = f"Approaching threshold: {count}/{threshold} ({percentage:.0f}%)"
    else:
        level = RiskLevel.SAFE
        message = f"Within safe range: {count}/{threshold} ({percentage:.0f}%)"

    assessment = RiskAssessment(
        level=level,
        mode=ClassificationMode.THRESHOLD,
        percentage=percentage,
        count=count,
        threshold=threshold,
        should_show_warning=percentage >= THRESHOLD_WARNING_PERCENTAGE,
        message=message,
        action_message=ACTION_MESSAGES[level],
    )
    logger.debug(
        "risk_classified",
        mode="threshold",
        level=level.value,
        count=count,
        threshold=threshold,
    )
    return assessment


def classify_observation_rate(
    rate: Optional[float],
    rate_threshold: float = RATE_DANGER_THRESHOLD,
) -> Optional[RiskLevel]:
    """
    Severity of a single observation's rate against a pest rate threshold.

    Drives the per-observation severity dot in observation lists.

    Args:
        rate: The observation's rate; None for baselines
        rate_threshold: Pest type rate threshold in insects/day

    Returns:
        None for unrated observations, danger at >= 100% of the threshold,
        warning at >= 80%, safe otherwise

    Raises:
        ValueError: If rate_threshold is not positive
    """
    if rate_threshold <= 0:
        raise ValueError(f"Rate threshold must be positive, got {rate_threshold}")
    if rate is None:
        return None

    percentage = (rate / rate_threshold) * 100
    if percentage >= 100:
        return RiskLevel.DANGER
    if percentage >= THRESHOLD_WARNING_PERCENTAGE:
        return RiskLevel.WARNING
    return RiskLevel.SAFE
