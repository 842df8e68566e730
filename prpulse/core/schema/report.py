from dataclasses import dataclass
from typing import Optional

from prpulse.core.schema.metrics import PrMetrics
from prpulse.core.schema.pr import PrAggregate


@dataclass(frozen=True, slots=True)
class PrSummary:
    aggregate: PrAggregate
    metrics: PrMetrics
    text: str


@dataclass(frozen=True, slots=True)
class CommandResult:
    returncode: int
    output: str


@dataclass(frozen=True, slots=True)
class CheckResult:
    name: str
    passed: bool
    output: str
    coverage: Optional[float] = None
