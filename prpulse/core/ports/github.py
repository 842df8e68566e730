from typing import List, Protocol, Sequence, runtime_checkable

from prpulse.core.schema.events import ActivityEvent
from prpulse.core.schema.pr import PullRequestSnapshot, ReviewRecord


@runtime_checkable
class GitHubSource(Protocol):
    def list_user_events(self, username: str) -> List[ActivityEvent]:
        ...

    def get_pull_request(self, repo: str, number: int) -> PullRequestSnapshot:
        ...

    def list_pull_request_reviews(self, repo: str, number: int) -> List[ReviewRecord]:
        ...

    def list_commit_messages(self, commits_url: str) -> List[str]:
        ...

    def post_comment(self, repo: str, number: int, body: str) -> bool:
        ...

    def list_changed_files(self, repo: str, number: int) -> Sequence[str]:
        ...
