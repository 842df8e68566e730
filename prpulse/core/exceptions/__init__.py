from prpulse.core.exceptions.errors import (
    CheckError,
    CommentPostError,
    ConfigurationError,
    PRFetchError,
    PrPulseError,
    SourceAuthenticationError,
    SourceError,
    SourceNotFoundError,
    SourceRateLimitError,
)

__all__ = [
    "PrPulseError",
    "ConfigurationError",
    "SourceError",
    "SourceAuthenticationError",
    "SourceRateLimitError",
    "SourceNotFoundError",
    "PRFetchError",
    "CommentPostError",
    "CheckError",
]
