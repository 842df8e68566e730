from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional


class EventType(str, Enum):
    PULL_REQUEST = "PullRequestEvent"
    PULL_REQUEST_REVIEW = "PullRequestReviewEvent"


@dataclass(frozen=True, slots=True)
class ActivityEvent:
    type: str
    repo_name: Optional[str]
    payload: Mapping[str, Any] = field(default_factory=dict)
    created_at: Optional[datetime] = None

    @property
    def pull_request(self) -> Optional[Mapping[str, Any]]:
        return self.payload.get("pull_request") or None

    @property
    def review(self) -> Optional[Mapping[str, Any]]:
        return self.payload.get("review") or None
