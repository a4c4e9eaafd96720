"""
Pydantic v2 data models for the observation rate and risk engine.

Model Organization:
    - enums: RiskLevel and ClassificationMode
    - observations: boundary Observation plus derived RatedObservation and
      DailyRatePoint
    - risk: RiskAssessment, AlertDecision and the per-trap TrapRiskReport

Usage:
    >>> from trapwatch.models import Observation
    >>> obs = Observation(id=1, date="2026-02-01", count=4, isBaseline=False)
"""

from .enums import ClassificationMode, RiskLevel
from .observations import (
    DailyRatePoint,
    Observation,
    RatedObservation,
    day_range,
    parse_observations,
)
from .risk import AlertDecision, RiskAssessment, TrapRiskReport

__all__ = [
    "AlertDecision",
    "ClassificationMode",
    "DailyRatePoint",
    "Observation",
    "RatedObservation",
    "RiskAssessment",
    "RiskLevel",
    "TrapRiskReport",
    "day_range",
    "parse_observations",
]
