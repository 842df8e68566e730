from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from typing import Any, List, Mapping, Optional

UNKNOWN = "unknown"

_SNAPSHOT_KEYS = (
    "title",
    "body",
    "additions",
    "deletions",
    "changed_files",
    "commits_url",
)


def make_pr_key(repo_name: str, number: int) -> str:
    return f"{repo_name}#{number}"


def format_review_date(created_at: Optional[datetime]) -> str:
    if created_at is None:
        return UNKNOWN
    return created_at.strftime("%x")


@dataclass(frozen=True, slots=True)
class PullRequestSnapshot:
    """Partial or complete view of a pull request.

    ``None`` means the field was absent from the payload it was built from,
    which is not the same thing as zero.
    """

    number: int
    title: Optional[str] = None
    body: Optional[str] = None
    additions: Optional[int] = None
    deletions: Optional[int] = None
    changed_files: Optional[int] = None
    commits_url: Optional[str] = None

    @classmethod
    def from_payload(
        cls, payload: Optional[Mapping[str, Any]]
    ) -> Optional["PullRequestSnapshot"]:
        if not payload or not payload.get("number"):
            return None
        values = {key: payload[key] for key in _SNAPSHOT_KEYS if key in payload}
        return cls(number=payload["number"], **values)

    @property
    def has_size(self) -> bool:
        return (
            self.additions is not None
            and self.deletions is not None
            and self.changed_files is not None
        )

    def merged_with(self, fetched: "PullRequestSnapshot") -> "PullRequestSnapshot":
        # Right-biased shallow merge: non-null fetched fields win. A null in the
        # full payload keeps the event value rather than erasing it (see
        # "Enrichment merge" in DESIGN.md).
        overrides = {
            item.name: getattr(fetched, item.name)
            for item in fields(fetched)
            if getattr(fetched, item.name) is not None
        }
        return replace(self, **overrides)


@dataclass(frozen=True, slots=True)
class ReviewRecord:
    state: str
    reviewer_login: str
    date: str


@dataclass(slots=True)
class PrAggregate:
    repo_name: str
    snapshot: PullRequestSnapshot
    reviews: List[ReviewRecord] = field(default_factory=list)
    commit_messages: Optional[List[str]] = None

    @property
    def key(self) -> str:
        return make_pr_key(self.repo_name, self.snapshot.number)

    @property
    def lines_changed(self) -> int:
        return (self.snapshot.additions or 0) + (self.snapshot.deletions or 0)
