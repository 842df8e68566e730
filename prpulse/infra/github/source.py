import re
from datetime import datetime, timedelta, timezone
from typing import List, NoReturn, Tuple

from github import GithubException
from requests.exceptions import RequestException

from prpulse.core.exceptions import (
    SourceAuthenticationError,
    SourceError,
    SourceNotFoundError,
    SourceRateLimitError,
)
from prpulse.core.ports.github import GitHubSource
from prpulse.core.schema.events import ActivityEvent
from prpulse.core.schema.pr import (
    UNKNOWN,
    PullRequestSnapshot,
    ReviewRecord,
    format_review_date,
    make_pr_key,
)
from prpulse.infra.github.client import GitHubClient

_COMMITS_URL_PATTERN = re.compile(
    r"/repos/(?P<repo>[^/]+/[^/]+)/pulls/(?P<number>\d+)/commits/?$"
)
RATE_LIMIT_STATUSES = (403, 429)


def parse_commits_url(commits_url: str) -> Tuple[str, int]:
    match = _COMMITS_URL_PATTERN.search(commits_url)
    if match is None:
        raise SourceError(f"Unrecognised commits URL: {commits_url}")
    return match.group("repo"), int(match.group("number"))


class GitHubActivitySource(GitHubSource):
    def __init__(self, client: GitHubClient) -> None:
        self._client = client

    def list_user_events(self, username: str) -> List[ActivityEvent]:
        try:
            user = self._client.get_user(username)
            events = user.get_public_events().get_page(0)
            return [self._to_activity_event(event) for event in events]
        except (GithubException, RequestException) as error:
            self._translate_exception(
                f"Failed to fetch events for user {username}",
                error,
                resource=f"user {username}",
            )

    def get_pull_request(self, repo: str, number: int) -> PullRequestSnapshot:
        key = make_pr_key(repo, number)
        try:
            pull = self._client.get_repo(repo).get_pull(number)
            snapshot = PullRequestSnapshot.from_payload(pull.raw_data)
        except (GithubException, RequestException) as error:
            self._translate_exception(f"Failed to fetch PR {key}", error, resource=key)
        if snapshot is None:
            raise SourceError(f"Pull request payload for {key} has no number")
        return snapshot

    def list_pull_request_reviews(self, repo: str, number: int) -> List[ReviewRecord]:
        key = make_pr_key(repo, number)
        try:
            pull = self._client.get_repo(repo).get_pull(number)
            return [
                ReviewRecord(
                    state=review.state or UNKNOWN,
                    reviewer_login=review.user.login if review.user else UNKNOWN,
                    date=format_review_date(review.submitted_at),
                )
                for review in pull.get_reviews()
            ]
        except (GithubException, RequestException) as error:
            self._translate_exception(
                f"Failed to fetch reviews for {key}", error, resource=key
            )

    def list_commit_messages(self, commits_url: str) -> List[str]:
        repo, number = parse_commits_url(commits_url)
        key = make_pr_key(repo, number)
        try:
            pull = self._client.get_repo(repo).get_pull(number)
            return [commit.commit.message or "" for commit in pull.get_commits()]
        except (GithubException, RequestException) as error:
            self._translate_exception(
                f"Failed to fetch commits for {key}", error, resource=key
            )

    def post_comment(self, repo: str, number: int, body: str) -> bool:
        key = make_pr_key(repo, number)
        try:
            pull = self._client.get_repo(repo).get_pull(number)
            pull.create_issue_comment(body)
        except (GithubException, RequestException) as error:
            self._translate_exception(f"Failed to comment on {key}", error, resource=key)
        return True

    def list_changed_files(self, repo: str, number: int) -> List[str]:
        key = make_pr_key(repo, number)
        try:
            pull = self._client.get_repo(repo).get_pull(number)
            return [changed.filename for changed in pull.get_files()]
        except (GithubException, RequestException) as error:
            self._translate_exception(
                f"Failed to fetch changed files for {key}", error, resource=key
            )

    def _to_activity_event(self, event) -> ActivityEvent:  # noqa: ANN001
        raw = event.raw_data or {}
        repo = raw.get("repo") or {}
        return ActivityEvent(
            type=raw.get("type") or "",
            repo_name=repo.get("name"),
            payload=raw.get("payload") or {},
            created_at=event.created_at,
        )

    def _translate_exception(
        self,
        message: str,
        error: GithubException | RequestException,
        resource: str | None = None,
    ) -> NoReturn:
        if isinstance(error, RequestException):
            raise SourceError(f"{message}: {error}") from error
        status = getattr(error, "status", None)
        headers = getattr(error, "headers", {}) or {}
        detail = f"{message}: HTTP {status}" if status else message
        if status == 401:
            raise SourceAuthenticationError(detail) from error
        if status == 404:
            raise SourceNotFoundError(
                f"{resource or 'resource'} not found",
                resource or "resource",
            ) from error
        if status in RATE_LIMIT_STATUSES:
            raise SourceRateLimitError(
                "Rate limited",
                self._retry_after_from_headers(headers),
            ) from error
        raise SourceError(detail) from error

    def _retry_after_from_headers(self, headers) -> datetime | None:  # noqa: ANN001
        normalized = {str(key).lower(): value for key, value in headers.items()}
        try:
            if normalized.get("retry-after") is not None:
                return datetime.now(timezone.utc) + timedelta(
                    seconds=float(normalized["retry-after"])
                )
            if normalized.get("x-ratelimit-reset") is not None:
                return datetime.fromtimestamp(
                    float(normalized["x-ratelimit-reset"]), tz=timezone.utc
                )
        except (TypeError, ValueError, OverflowError, OSError):
            return None
        return None
