"""
Enumeration types for the observation rate and risk engine.

All enums inherit from str to ensure JSON serialization compatibility.
"""

from enum import Enum


class RiskLevel(str, Enum):
    """
    Discrete pest risk level shown to growers.

    Ordered from least to most severe; use ``rank`` for comparisons.
    """

    SAFE = "safe"
    WARNING = "warning"
    DANGER = "danger"

    @property
    def rank(self) -> int:
        """Severity rank: safe=0, warning=1, danger=2."""
        return _RISK_RANK[self]

    @property
    def label(self) -> str:
        """Grower-facing label."""
        return _RISK_LABELS[self]


_RISK_RANK = {
    RiskLevel.SAFE: 0,
    RiskLevel.WARNING: 1,
    RiskLevel.DANGER: 2,
}

_RISK_LABELS = {
    RiskLevel.SAFE: "Safe",
    RiskLevel.WARNING: "Warning",
    RiskLevel.DANGER: "Action Required",
}


class ClassificationMode(str, Enum):
    """Which quantity a RiskAssessment was derived from."""

    RATE = "rate"  # windowed average daily rate
    THRESHOLD = "threshold"  # absolute count against a pest threshold
