from typing import Dict, List, Optional, Sequence, Tuple

from prpulse.core.exceptions import SourceError
from prpulse.core.ports.github import GitHubSource
from prpulse.core.schema.events import ActivityEvent
from prpulse.core.schema.pr import PullRequestSnapshot, ReviewRecord

PrRef = Tuple[str, int]


class FakeGitHubSource(GitHubSource):
    """In-memory GitHubSource. Anything not registered raises SourceError."""

    def __init__(
        self,
        events: Optional[List[ActivityEvent]] = None,
        pulls: Optional[Dict[PrRef, PullRequestSnapshot]] = None,
        reviews: Optional[Dict[PrRef, List[ReviewRecord]]] = None,
        commits: Optional[Dict[str, List[str]]] = None,
        changed_files: Optional[Dict[PrRef, List[str]]] = None,
        *,
        events_error: Optional[SourceError] = None,
        post_error: Optional[SourceError] = None,
        post_result: bool = True,
    ) -> None:
        self._events = list(events or [])
        self._pulls = dict(pulls or {})
        self._reviews = dict(reviews or {})
        self._commits = dict(commits or {})
        self._changed_files = dict(changed_files or {})
        self._events_error = events_error
        self._post_error = post_error
        self._post_result = post_result
        self.calls: List[Tuple[str, object]] = []
        self.posted: List[Tuple[str, int, str]] = []

    def list_user_events(self, username: str) -> List[ActivityEvent]:
        self.calls.append(("list_user_events", username))
        if self._events_error is not None:
            raise self._events_error
        return list(self._events)

    def get_pull_request(self, repo: str, number: int) -> PullRequestSnapshot:
        self.calls.append(("get_pull_request", (repo, number)))
        try:
            return self._pulls[(repo, number)]
        except KeyError:
            raise SourceError(f"Failed to fetch PR {repo}#{number}: HTTP 500") from None

    def list_pull_request_reviews(self, repo: str, number: int) -> List[ReviewRecord]:
        self.calls.append(("list_pull_request_reviews", (repo, number)))
        try:
            return list(self._reviews[(repo, number)])
        except KeyError:
            raise SourceError("Failed to fetch reviews") from None

    def list_commit_messages(self, commits_url: str) -> List[str]:
        self.calls.append(("list_commit_messages", commits_url))
        try:
            return list(self._commits[commits_url])
        except KeyError:
            raise SourceError("Failed to fetch commits") from None

    def post_comment(self, repo: str, number: int, body: str) -> bool:
        self.calls.append(("post_comment", (repo, number)))
        if self._post_error is not None:
            raise self._post_error
        self.posted.append((repo, number, body))
        return self._post_result

    def list_changed_files(self, repo: str, number: int) -> Sequence[str]:
        self.calls.append(("list_changed_files", (repo, number)))
        try:
            return list(self._changed_files[(repo, number)])
        except KeyError:
            raise SourceError("Failed to fetch changed files") from None

    def call_names(self) -> List[str]:
        return [name for name, _ in self.calls]
