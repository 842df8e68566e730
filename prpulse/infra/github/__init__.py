from prpulse.infra.github.client import GitHubClient
from prpulse.infra.github.source import GitHubActivitySource, parse_commits_url

__all__ = ["GitHubClient", "GitHubActivitySource", "parse_commits_url"]
