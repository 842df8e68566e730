"""Markdown rendering of a single pull request for a review comment."""

from typing import List, Sequence

from prpulse.core.report.numbers import as_percent, to_fixed
from prpulse.core.schema.metrics import PrMetrics
from prpulse.core.schema.pr import PrAggregate
from prpulse.core.schema.report import CheckResult

COMMENT_MARKER = "<!-- prpulse-review -->"
NOT_AVAILABLE = "not available"
FENCE = "```"


def format_review_comment(
    aggregate: PrAggregate,
    metrics: PrMetrics,
    changed_files: Sequence[str] = (),
    checks: Sequence[CheckResult] = (),
) -> str:
    snapshot = aggregate.snapshot
    title = snapshot.title or "(no title)"
    sections: List[str] = [
        COMMENT_MARKER,
        f'## PR Review: #{snapshot.number} "{title}"',
        "",
        "| Impact | Regression risk | Type |",
        "|:---|:---|:---|",
        f"| {_impact_cell(metrics)} | {_risk_cell(metrics)} | {metrics.pr_type or '-'} |",
        "",
        "### Changes",
        "",
    ]

    if snapshot.additions is not None and snapshot.deletions is not None:
        sections.append(f"- Lines changed: +{snapshot.additions} / -{snapshot.deletions}")
    else:
        sections.append(f"- Lines changed: {NOT_AVAILABLE}")
    if snapshot.changed_files is not None:
        sections.append(f"- Files changed: {snapshot.changed_files}")
    else:
        sections.append(f"- Files changed: {NOT_AVAILABLE}")
    sections.append("")

    if changed_files:
        sections.append("<details>")
        sections.append(f"<summary>Changed files ({len(changed_files)})</summary>")
        sections.append("")
        sections.extend(f"- `{path}`" for path in changed_files)
        sections.append("")
        sections.append("</details>")
        sections.append("")

    commit_messages = aggregate.commit_messages or []
    sections.append(f"### Commits ({len(commit_messages)})")
    sections.append("")
    if commit_messages:
        sections.extend(f"- {message}" for message in commit_messages)
    else:
        sections.append("_None retrieved._")
    sections.append("")

    sections.append(f"### Reviews ({len(aggregate.reviews)})")
    sections.append("")
    if aggregate.reviews:
        sections.extend(
            f"- **{review.state}** by @{review.reviewer_login} on {review.date}"
            for review in aggregate.reviews
        )
    else:
        sections.append("_None._")
    sections.append("")

    for check in checks:
        sections.extend(_render_check(check))

    sections.append("---")
    sections.append("<sub>Generated by prpulse</sub>")
    return "\n".join(sections)


def _impact_cell(metrics: PrMetrics) -> str:
    impact = metrics.impact
    return f"{impact.category} (score {to_fixed(impact.score, 0)})"


def _risk_cell(metrics: PrMetrics) -> str:
    risk = metrics.regression_risk
    if risk is None:
        return NOT_AVAILABLE
    return f"{risk.category} ({as_percent(risk.score)}%)"


def _render_check(check: CheckResult) -> List[str]:
    status = "✅ passed" if check.passed else "❌ failed"
    heading = f"### {check.name.capitalize()}: {status}"
    lines = [heading, ""]
    if check.coverage is not None:
        lines.append(f"Total coverage: {to_fixed(check.coverage, 1)}%")
        lines.append("")
    output = check.output.strip() or "(no output)"
    lines.extend([f"{FENCE}text", output, FENCE, ""])
    return lines
