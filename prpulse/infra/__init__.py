from prpulse.infra.checks import SubprocessCheckRunner
from prpulse.infra.github import GitHubActivitySource, GitHubClient
from prpulse.infra.logging import ConsoleLogger, LogfireLogger, configure_logfire
from prpulse.infra.terminal import RichDisplay

__all__ = [
    'GitHubClient',
    'GitHubActivitySource',
    'ConsoleLogger',
    'LogfireLogger',
    'configure_logfire',
    'SubprocessCheckRunner',
    'RichDisplay',
]
