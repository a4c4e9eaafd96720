"""
Alert Policy — should a risk level notify the grower.

Decides, from a freshly computed RiskAssessment and the level the grower was
last notified at, whether an alert is due. The previous level is supplied by
the caller; nothing is tracked here and nothing is sent.

Policy:
    safe     never notifies
    danger   always notifies
    warning  notifies on first reading or when the level changed; a repeat
             warning is suppressed unless re-notification is enabled

Version: alert_policy_v1
"""

from typing import Optional

import structlog

from trapwatch.models.enums import RiskLevel
from trapwatch.models.risk import AlertDecision, RiskAssessment

logger = structlog.get_logger()


DANGER_HEADLINE = "Immediate action required"
INCREASED_HEADLINE = "Risk level has increased"
WARNING_HEADLINE = "Warning level detected"


def decide_alert(
    assessment: RiskAssessment,
    previous_level: Optional[RiskLevel] = None,
    renotify_repeat_warning: bool = False,
) -> AlertDecision:
    """
    Decide whether ``assessment`` warrants notifying the grower.

    Args:
        assessment: Current classification (either mode)
        previous_level: Level of the last notification, None if never notified
        renotify_repeat_warning: Re-send when warning persists

    Returns:
        AlertDecision with a machine-readable reason
    """
    level = assessment.level
    escalated = previous_level is not None and level.rank > previous_level.rank
    changed = previous_level is not None and level != previous_level

    if level == RiskLevel.SAFE:
        notify, reason, headline = False, "level_safe", ""
    elif level == RiskLevel.DANGER:
        notify, reason, headline = True, "level_danger", DANGER_HEADLINE
    elif previous_level is None:
        notify, reason, headline = True, "first_warning", WARNING_HEADLINE
    elif changed:
        headline = INCREASED_HEADLINE if escalated else WARNING_HEADLINE
        notify, reason = True, "level_changed"
    elif renotify_repeat_warning:
        notify, reason, headline = True, "repeat_warning", WARNING_HEADLINE
    else:
        notify, reason, headline = False, "repeat_warning_suppressed", ""

    decision = AlertDecision(
        notify=notify,
        level=level,
        previous_level=previous_level,
        escalated=escalated,
        headline=headline,
        reason=reason,
    )
    logger.info(
        "alert_decided",
        level=level.value,
        previous_level=previous_level.value if previous_level else None,
        notify=notify,
        reason=reason,
    )
    return decision


def alert_subject(decision: AlertDecision, pest_name: str, farm_name: str) -> str:
    """
    Notification subject line for a positive decision.

    Args:
        decision: Output of decide_alert
        pest_name: Pest type display name
        farm_name: Farm display name
    """
    if decision.level == RiskLevel.DANGER:
        return f"Action Required: {pest_name} Alert - {farm_name}"
    return f"Risk Alert: {pest_name} - {farm_name}"
