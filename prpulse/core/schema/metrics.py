from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class ImpactScore:
    score: float
    category: str


@dataclass(frozen=True, slots=True)
class RegressionRisk:
    score: float
    category: str


@dataclass(frozen=True, slots=True)
class PrMetrics:
    impact: ImpactScore
    pr_type: Optional[str]
    regression_risk: Optional[RegressionRisk]
