from datetime import datetime
from typing import Optional


class PrPulseError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(PrPulseError):
    pass


class SourceError(PrPulseError):
    pass


class SourceAuthenticationError(SourceError):
    pass


class SourceRateLimitError(SourceError):
    def __init__(self, message: str, retry_after: Optional[datetime] = None) -> None:
        self.retry_after = retry_after
        super().__init__(message)


class SourceNotFoundError(SourceError):
    def __init__(self, message: str, resource: str) -> None:
        self.resource = resource
        super().__init__(message)


class PRFetchError(SourceError):
    def __init__(self, message: str, pr_key: str) -> None:
        self.pr_key = pr_key
        super().__init__(message)


class CommentPostError(PrPulseError):
    def __init__(self, message: str, pr_key: str) -> None:
        self.pr_key = pr_key
        super().__init__(message)


class CheckError(PrPulseError):
    def __init__(self, message: str, command: str) -> None:
        self.command = command
        super().__init__(message)
