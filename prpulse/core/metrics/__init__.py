from prpulse.core.metrics.classify import classify_type
from prpulse.core.metrics.engine import compute_metrics
from prpulse.core.metrics.impact import compute_impact_score
from prpulse.core.metrics.risk import (
    DEFAULT_FACTORS,
    RiskFactor,
    RiskInputs,
    assess_risk,
    compute_regression_risk,
)

__all__ = [
    "compute_impact_score",
    "compute_regression_risk",
    "classify_type",
    "compute_metrics",
    "assess_risk",
    "RiskFactor",
    "RiskInputs",
    "DEFAULT_FACTORS",
]
