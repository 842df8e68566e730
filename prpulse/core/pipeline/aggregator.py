from typing import Dict, Iterable

from prpulse.core.schema.events import ActivityEvent, EventType
from prpulse.core.schema.pr import (
    UNKNOWN,
    PrAggregate,
    PullRequestSnapshot,
    ReviewRecord,
    format_review_date,
    make_pr_key,
)


def aggregate_events(events: Iterable[ActivityEvent]) -> Dict[str, PrAggregate]:
    """Group pull request and review events into one aggregate per PR.

    The returned dict keeps first-sighting order. Events of any other type,
    or without a repository or PR number, are skipped.
    """
    aggregates: Dict[str, PrAggregate] = {}
    for event in events:
        if not event.repo_name:
            continue
        if event.type == EventType.PULL_REQUEST:
            _add_pull_request(aggregates, event)
        elif event.type == EventType.PULL_REQUEST_REVIEW:
            _add_review(aggregates, event)
    return aggregates


def _add_pull_request(
    aggregates: Dict[str, PrAggregate], event: ActivityEvent
) -> None:
    snapshot = PullRequestSnapshot.from_payload(event.pull_request)
    if snapshot is None:
        return
    key = make_pr_key(event.repo_name, snapshot.number)
    existing = aggregates.get(key)
    if existing is None:
        aggregates[key] = PrAggregate(repo_name=event.repo_name, snapshot=snapshot)
        return
    if existing.snapshot.additions is None and snapshot.additions is not None:
        existing.snapshot = snapshot


def _add_review(aggregates: Dict[str, PrAggregate], event: ActivityEvent) -> None:
    review = event.review
    if review is None:
        return
    snapshot = PullRequestSnapshot.from_payload(event.pull_request)
    if snapshot is None:
        return
    key = make_pr_key(event.repo_name, snapshot.number)
    aggregate = aggregates.get(key)
    if aggregate is None:
        aggregate = PrAggregate(repo_name=event.repo_name, snapshot=snapshot)
        aggregates[key] = aggregate
    reviewer = review.get("user") or {}
    aggregate.reviews.append(
        ReviewRecord(
            state=review.get("state") or UNKNOWN,
            reviewer_login=reviewer.get("login") or UNKNOWN,
            date=format_review_date(event.created_at),
        )
    )
