from typing import List, Optional

from prpulse.core.report.numbers import as_percent, to_fixed
from prpulse.core.schema.metrics import PrMetrics
from prpulse.core.schema.pr import PrAggregate

NOT_AVAILABLE = "(data not available in event)"
NO_TITLE = "(no title)"
BULLET = "  • "


def format_title(aggregate: PrAggregate) -> str:
    snapshot = aggregate.snapshot
    return f'PR #{snapshot.number}: "{snapshot.title or NO_TITLE}" ({aggregate.repo_name})'


def format_summary(aggregate: PrAggregate, metrics: PrMetrics) -> str:
    """Render one aggregate as a plain-text block for the terminal.

    Sections always appear in the same order; optional ones are dropped
    rather than left blank.
    """
    snapshot = aggregate.snapshot
    commit_messages = aggregate.commit_messages or []

    if snapshot.additions is not None and snapshot.deletions is not None:
        line_change = f"- Lines changed: +{snapshot.additions} / -{snapshot.deletions}"
    else:
        line_change = f"- Lines changed: {NOT_AVAILABLE}"

    if snapshot.changed_files is not None:
        file_change = f"- Files changed: {snapshot.changed_files}"
    else:
        file_change = f"- Files changed: {NOT_AVAILABLE}"

    impact = metrics.impact
    impact_line = f"- Impact: {impact.category} (score {to_fixed(impact.score, 0)})"
    type_line = f"- PR type: {metrics.pr_type}" if metrics.pr_type else ""

    if commit_messages:
        commit_section = "\n".join(
            [f"- Commit messages ({len(commit_messages)}):"]
            + [f"{BULLET}{message}" for message in commit_messages]
        )
    else:
        commit_section = "- Commit messages: (none retrieved)"

    if aggregate.reviews:
        review_section = "\n".join(
            [f"- Reviews ({len(aggregate.reviews)}):"]
            + [
                f"{BULLET}{review.state} by {review.reviewer_login} on {review.date}"
                for review in aggregate.reviews
            ]
        )
    else:
        review_section = "- Reviews: (none)"

    risk_line = ""
    if metrics.regression_risk is not None:
        risk = metrics.regression_risk
        risk_line = (
            f"- Regression risk: {risk.category} (score {as_percent(risk.score)}%)"
        )

    sections: List[Optional[str]] = [
        format_title(aggregate),
        line_change,
        file_change,
        impact_line,
        type_line,
        commit_section,
        review_section,
        risk_line,
    ]
    return "\n".join(section for section in sections if section)
