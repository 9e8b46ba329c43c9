"""
cost/risk.py - Risk scoring and risk-based uplift.

Composite score is a fixed-weight average of the five risk factors; the
uplift applied to the contingency base is a piecewise-linear map of it.
"""

from __future__ import annotations
from typing import Dict, Tuple

from ..inputs.schema import RiskFactors


RISK_WEIGHTS: Dict[str, float] = {
    "contamination_uncertainty": 0.25,
    "geotech_uncertainty": 0.20,
    "water_quality_uncertainty": 0.25,
    "regulatory_uncertainty": 0.15,
    "logistics_complexity": 0.15,
}

# (score, uplift %) breakpoints; linear between consecutive points
UPLIFT_BREAKPOINTS: Tuple[Tuple[float, float], ...] = (
    (0.0, 0.0),
    (20.0, 5.0),
    (40.0, 10.0),
    (60.0, 20.0),
    (80.0, 35.0),
    (100.0, 50.0),
)


def calculate_risk_score(factors: RiskFactors) -> float:
    """
    Weighted composite risk score.

    Args:
        factors: Risk factor values (0-100 each)

    Returns:
        Composite score (0-100), rounded to one decimal
    """
    score = sum(
        getattr(factors, name) * weight
        for name, weight in RISK_WEIGHTS.items()
    )
    return round(score, 1)


def risk_score_to_uplift(risk_score: float) -> float:
    """
    Convert a risk score to an uplift percentage.

    Risk Score -> Uplift:
        0-20:   0-5%
        20-40:  5-10%
        40-60:  10-20%
        60-80:  20-35%
        80-100: 35-50%

    Scores past 100 extrapolate along the last segment.
    """
    for (x0, y0), (x1, y1) in zip(UPLIFT_BREAKPOINTS, UPLIFT_BREAKPOINTS[1:]):
        if risk_score <= x1:
            return _interpolate(risk_score, x0, y0, x1, y1)
    (x0, y0), (x1, y1) = UPLIFT_BREAKPOINTS[-2:]
    return _interpolate(risk_score, x0, y0, x1, y1)


def _interpolate(x: float, x0: float, y0: float, x1: float, y1: float) -> float:
    return y0 + (x - x0) / (x1 - x0) * (y1 - y0)
