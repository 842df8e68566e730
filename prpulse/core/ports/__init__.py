from prpulse.core.ports.checks import CheckRunner
from prpulse.core.ports.display import Display
from prpulse.core.ports.github import GitHubSource
from prpulse.core.ports.logger import Logger

__all__ = [
    "Logger",
    "GitHubSource",
    "CheckRunner",
    "Display",
]
