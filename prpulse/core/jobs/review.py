from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, TypeVar

from prpulse.core.checks import CheckGates
from prpulse.core.exceptions import CommentPostError, PRFetchError, SourceError
from prpulse.core.jobs.base import BaseJob
from prpulse.core.metrics import compute_metrics
from prpulse.core.pipeline.enricher import first_line
from prpulse.core.ports.display import Display
from prpulse.core.ports.github import GitHubSource
from prpulse.core.ports.logger import Logger
from prpulse.core.report import format_review_comment
from prpulse.core.schema.pr import PrAggregate, make_pr_key
from prpulse.core.schema.report import CheckResult

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ReviewOptions:
    lint_command: Optional[str] = None
    coverage_command: Optional[str] = None
    min_coverage: float = 0.0
    dry_run: bool = False


class ReviewJob(BaseJob[str]):
    """Score one pull request and post the result as a PR comment.

    The primary PR lookup and the final post are fatal on failure. The
    supporting lookups (reviews, commits, changed files) fall back to empty
    lists.
    """

    def __init__(
        self,
        logger: Logger,
        source: GitHubSource,
        display: Display,
        *,
        repository: str,
        number: int,
        gates: Optional[CheckGates] = None,
        options: ReviewOptions = ReviewOptions(),
    ) -> None:
        super().__init__(logger)
        self._source = source
        self._display = display
        self._repository = repository
        self._number = number
        self._gates = gates
        self._options = options
        self._pr_key = make_pr_key(repository, number)

    def execute(self) -> str:
        with self._display.status("Fetching pull request"):
            aggregate = self._load_aggregate()
            changed_files = self._degrade(
                "changed files",
                lambda: list(self._source.list_changed_files(self._repository, self._number)),
            )

        metrics = compute_metrics(aggregate)
        checks = self._run_checks()
        body = format_review_comment(aggregate, metrics, changed_files, checks)

        if self._options.dry_run:
            self._display.emit(body)
            return body

        with self._display.status("Posting review comment"):
            self._post(body)
        self._logger.info("Posted review comment", pr_key=self._pr_key)
        return body

    def _load_aggregate(self) -> PrAggregate:
        try:
            snapshot = self._source.get_pull_request(self._repository, self._number)
        except SourceError as error:
            raise PRFetchError(
                f"Failed to fetch pull request {self._pr_key}: {error}",
                self._pr_key,
            ) from error

        reviews = self._degrade(
            "reviews",
            lambda: self._source.list_pull_request_reviews(self._repository, self._number),
        )
        commit_messages: List[str] = []
        if snapshot.commits_url:
            commit_messages = [
                first_line(message)
                for message in self._degrade(
                    "commits",
                    lambda: self._source.list_commit_messages(snapshot.commits_url),
                )
            ]
        return PrAggregate(
            repo_name=self._repository,
            snapshot=snapshot,
            reviews=list(reviews),
            commit_messages=commit_messages,
        )

    def _run_checks(self) -> Sequence[CheckResult]:
        if self._gates is None:
            return []
        checks: List[CheckResult] = []
        if self._options.lint_command:
            with self._display.status("Running lint"):
                checks.append(self._gates.run_lint(self._options.lint_command))
        if self._options.coverage_command:
            with self._display.status("Running coverage"):
                checks.append(
                    self._gates.run_coverage(
                        self._options.coverage_command,
                        self._options.min_coverage,
                    )
                )
        return checks

    def _post(self, body: str) -> None:
        try:
            posted = self._source.post_comment(self._repository, self._number, body)
        except SourceError as error:
            raise CommentPostError(
                f"Failed to post comment on {self._pr_key}: {error}",
                self._pr_key,
            ) from error
        if not posted:
            raise CommentPostError(
                f"Comment on {self._pr_key} was not accepted",
                self._pr_key,
            )

    def _degrade(self, what: str, fetch: Callable[[], Sequence[T]]) -> List[T]:
        try:
            return list(fetch())
        except SourceError as error:
            self._logger.warning(
                f"Could not fetch {what}",
                pr_key=self._pr_key,
                error=str(error),
            )
            return []
