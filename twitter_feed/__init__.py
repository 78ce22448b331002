"""
Twitter Feed
Fetch a user's recent tweets and render them with linked hashtags, mentions and URLs.
"""

__version__ = "0.1.0"
__author__ = "Developer"

from .auth import BearerToken, Credentials, TokenProvider
from .client import RenderedPost, TimelineFetcher, Tweet, TwitterFeed
from .config import Config, FeedSettings
from .errors import AuthError, ConfigError, NetworkError, ParseError, TwitterFeedError
from .utils import prepare_tweet

__all__ = [
    "AuthError",
    "BearerToken",
    "Config",
    "ConfigError",
    "Credentials",
    "FeedSettings",
    "NetworkError",
    "ParseError",
    "RenderedPost",
    "TimelineFetcher",
    "TokenProvider",
    "Tweet",
    "TwitterFeed",
    "TwitterFeedError",
    "prepare_tweet",
]
