from prpulse.core.pipeline.aggregator import aggregate_events
from prpulse.core.schema.events import ActivityEvent
from prpulse.core.schema.pr import ReviewRecord
from tests.builders import CREATED_AT, pr_event, review_event


class TestAggregateEventsKeys:
    def test_key_is_repo_and_number(self) -> None:
        result = aggregate_events([pr_event("octo/app", 7)])

        assert list(result) == ["octo/app#7"]
        assert result["octo/app#7"].key == "octo/app#7"
        assert result["octo/app#7"].repo_name == "octo/app"

    def test_same_number_in_different_repos_is_two_aggregates(self) -> None:
        result = aggregate_events([pr_event("octo/app", 1), pr_event("octo/lib", 1)])

        assert list(result) == ["octo/app#1", "octo/lib#1"]

    def test_preserves_first_sighting_order(self) -> None:
        events = [
            pr_event(number=3),
            review_event(number=1),
            pr_event(number=2),
            pr_event(number=3),
            review_event(number=2),
        ]

        result = aggregate_events(events)

        assert list(result) == ["octo/app#3", "octo/app#1", "octo/app#2"]

    def test_one_aggregate_per_key(self) -> None:
        events = [pr_event(number=5), review_event(number=5), pr_event(number=5)]

        result = aggregate_events(events)

        assert len(result) == 1


class TestAggregateEventsSkips:
    def test_ignores_events_without_repository(self) -> None:
        assert aggregate_events([pr_event(repo=None), review_event(repo=None)]) == {}

    def test_ignores_pull_request_without_number(self) -> None:
        assert aggregate_events([pr_event(number=None)]) == {}

    def test_ignores_review_without_review_payload(self) -> None:
        assert aggregate_events([review_event(include_review=False)]) == {}

    def test_ignores_review_without_pr_number(self) -> None:
        assert aggregate_events([review_event(number=None)]) == {}

    def test_ignores_other_event_types(self) -> None:
        events = [
            ActivityEvent(type="PushEvent", repo_name="octo/app", payload={"size": 1}),
            ActivityEvent(
                type="IssuesEvent",
                repo_name="octo/app",
                payload={"pull_request": {"number": 1}},
            ),
        ]

        assert aggregate_events(events) == {}


class TestAggregateEventsSnapshotMerge:
    def test_sized_snapshot_replaces_unsized_one(self) -> None:
        events = [
            pr_event(number=1, title="old"),
            pr_event(number=1, title="new", additions=10, deletions=2, changed_files=1),
        ]

        snapshot = aggregate_events(events)["octo/app#1"].snapshot

        assert snapshot.title == "new"
        assert snapshot.additions == 10

    def test_unsized_snapshot_never_replaces_sized_one(self) -> None:
        events = [
            pr_event(number=1, title="sized", additions=10),
            pr_event(number=1, title="later"),
        ]

        snapshot = aggregate_events(events)["octo/app#1"].snapshot

        assert snapshot.title == "sized"
        assert snapshot.additions == 10

    def test_later_sized_snapshot_does_not_replace_earlier_sized_one(self) -> None:
        events = [
            pr_event(number=1, title="first", additions=1),
            pr_event(number=1, title="second", additions=99),
        ]

        snapshot = aggregate_events(events)["octo/app#1"].snapshot

        assert snapshot.title == "first"
        assert snapshot.additions == 1

    def test_zero_additions_counts_as_present(self) -> None:
        events = [
            pr_event(number=1, title="empty diff", additions=0),
            pr_event(number=1, title="later", additions=5),
        ]

        snapshot = aggregate_events(events)["octo/app#1"].snapshot

        assert snapshot.title == "empty diff"
        assert snapshot.additions == 0

    def test_absent_fields_stay_absent(self) -> None:
        snapshot = aggregate_events([pr_event(number=1)])["octo/app#1"].snapshot

        assert snapshot.additions is None
        assert snapshot.deletions is None
        assert snapshot.changed_files is None
        assert snapshot.commits_url is None

    def test_pr_event_after_review_keeps_reviews(self) -> None:
        events = [
            review_event(number=1, reviewer="alice"),
            pr_event(number=1, additions=10, deletions=1, changed_files=1),
        ]

        aggregate = aggregate_events(events)["octo/app#1"]

        assert aggregate.snapshot.additions == 10
        assert [review.reviewer_login for review in aggregate.reviews] == ["alice"]


class TestAggregateEventsReviews:
    def test_review_creates_aggregate_from_partial_payload(self) -> None:
        aggregate = aggregate_events([review_event(number=4, title="from review")])[
            "octo/app#4"
        ]

        assert aggregate.snapshot.title == "from review"
        assert aggregate.snapshot.additions is None
        assert len(aggregate.reviews) == 1

    def test_review_record_fields(self) -> None:
        aggregate = aggregate_events(
            [review_event(number=1, state="changes_requested", reviewer="bob")]
        )["octo/app#1"]

        assert aggregate.reviews == [
            ReviewRecord(
                state="changes_requested",
                reviewer_login="bob",
                date=CREATED_AT.strftime("%x"),
            )
        ]

    def test_missing_state_and_reviewer_default_to_unknown(self) -> None:
        aggregate = aggregate_events([review_event(state=None, reviewer=None)])[
            "octo/app#1"
        ]

        assert aggregate.reviews[0].state == "unknown"
        assert aggregate.reviews[0].reviewer_login == "unknown"

    def test_reviews_accumulate_in_arrival_order(self) -> None:
        events = [
            review_event(number=1, reviewer="alice"),
            pr_event(number=1),
            review_event(number=1, reviewer="bob"),
            review_event(number=1, reviewer="alice", state="commented"),
        ]

        aggregate = aggregate_events(events)["octo/app#1"]

        assert [(r.reviewer_login, r.state) for r in aggregate.reviews] == [
            ("alice", "approved"),
            ("bob", "approved"),
            ("alice", "commented"),
        ]

    def test_review_does_not_replace_existing_snapshot(self) -> None:
        events = [
            pr_event(number=1, title="original"),
            review_event(number=1, title="from review", additions=50),
        ]

        aggregate = aggregate_events(events)["octo/app#1"]

        assert aggregate.snapshot.title == "original"
        assert aggregate.snapshot.additions is None

    def test_pull_request_events_start_with_no_reviews(self) -> None:
        aggregate = aggregate_events([pr_event(number=1)])["octo/app#1"]

        assert aggregate.reviews == []
        assert aggregate.commit_messages is None
