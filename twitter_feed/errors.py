from typing import Optional


class TwitterFeedError(RuntimeError):
    """Base class for every error raised by the feed."""


class ConfigError(TwitterFeedError):
    """Raised when credentials or feed settings are missing or invalid."""


class NetworkError(TwitterFeedError):
    """Raised when a request to the Twitter API fails at the transport level."""


class AuthError(TwitterFeedError):
    """Raised when the token exchange returns no usable bearer token."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(TwitterFeedError):
    """Raised when a response body is not JSON of the expected shape."""
