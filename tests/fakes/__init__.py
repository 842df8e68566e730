from tests.fakes.checks import FakeCheckRunner
from tests.fakes.display import FakeDisplay
from tests.fakes.github import (
    FakeCommit,
    FakeEvent,
    FakeFile,
    FakeGitCommit,
    FakeGitHubClient,
    FakeNamedUser,
    FakePaginatedList,
    FakePullRequest,
    FakeRepository,
    FakeReview,
    FakeUser,
)
from tests.fakes.logger import FakeLogger
from tests.fakes.source import FakeGitHubSource

__all__ = [
    "FakeCheckRunner",
    "FakeCommit",
    "FakeDisplay",
    "FakeEvent",
    "FakeFile",
    "FakeGitCommit",
    "FakeGitHubClient",
    "FakeGitHubSource",
    "FakeLogger",
    "FakeNamedUser",
    "FakePaginatedList",
    "FakePullRequest",
    "FakeRepository",
    "FakeReview",
    "FakeUser",
]
