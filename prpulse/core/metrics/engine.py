from prpulse.core.metrics.classify import classify_type
from prpulse.core.metrics.impact import compute_impact_score
from prpulse.core.metrics.risk import compute_regression_risk
from prpulse.core.schema.metrics import PrMetrics
from prpulse.core.schema.pr import PrAggregate


def compute_metrics(aggregate: PrAggregate) -> PrMetrics:
    snapshot = aggregate.snapshot
    commit_messages = aggregate.commit_messages or []
    impact = compute_impact_score(
        additions=snapshot.additions,
        deletions=snapshot.deletions,
        changed_files=snapshot.changed_files,
        commit_count=len(commit_messages),
        review_count=len(aggregate.reviews),
    )
    regression_risk = None
    if snapshot.additions is not None and snapshot.deletions is not None:
        regression_risk = compute_regression_risk(
            additions=snapshot.additions,
            deletions=snapshot.deletions,
            changed_files=snapshot.changed_files,
        )
    return PrMetrics(
        impact=impact,
        pr_type=classify_type(commit_messages),
        regression_risk=regression_risk,
    )
