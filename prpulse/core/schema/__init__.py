from prpulse.core.schema.events import ActivityEvent, EventType
from prpulse.core.schema.metrics import ImpactScore, PrMetrics, RegressionRisk
from prpulse.core.schema.pr import (
    PrAggregate,
    PullRequestSnapshot,
    ReviewRecord,
    format_review_date,
    make_pr_key,
)
from prpulse.core.schema.report import CheckResult, CommandResult, PrSummary

__all__ = [
    "ActivityEvent",
    "EventType",
    "PullRequestSnapshot",
    "ReviewRecord",
    "PrAggregate",
    "make_pr_key",
    "format_review_date",
    "ImpactScore",
    "RegressionRisk",
    "PrMetrics",
    "PrSummary",
    "CommandResult",
    "CheckResult",
]
