from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv
import os

from .errors import ConfigError

load_dotenv()

USERNAME_MAX_LENGTH = 512


def int_env(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e


class Config:
    TWITTER_API_KEY = os.getenv('TWITTER_API_KEY')
    TWITTER_API_SECRET = os.getenv('TWITTER_API_SECRET')

    TWITTER_MAX_TWEETS = int_env('TWITTER_MAX_TWEETS', 10)

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


def tweet_count_options(max_tweets: int) -> List[int]:
    """Selectable tweet counts, 0 through max_tweets inclusive."""
    if max_tweets < 0:
        raise ConfigError(f"max_tweets must be >= 0, got {max_tweets}")
    return list(range(0, max_tweets + 1))


@dataclass(frozen=True)
class FeedSettings:
    """Per-block settings: whose tweets to show and how many."""

    username: str
    num_tweets: int

    @classmethod
    def defaults(cls, max_tweets: Optional[int] = None) -> "FeedSettings":
        if max_tweets is None:
            max_tweets = Config.TWITTER_MAX_TWEETS
        return cls(username='', num_tweets=max_tweets)

    def validate(self, max_tweets: Optional[int] = None) -> "FeedSettings":
        """
        Check the settings before they are used for a request.

        Args:
            max_tweets: Upper bound for num_tweets, or None for no bound

        Returns:
            The settings themselves, so calls can be chained

        Raises:
            ConfigError: If the username or the tweet count is invalid
        """
        if not isinstance(self.username, str) or not self.username.strip():
            raise ConfigError("username is required")
        if len(self.username) > USERNAME_MAX_LENGTH:
            raise ConfigError(f"username must be at most {USERNAME_MAX_LENGTH} characters")
        if isinstance(self.num_tweets, bool) or not isinstance(self.num_tweets, int):
            raise ConfigError(f"num_tweets must be an integer, got {self.num_tweets!r}")
        if self.num_tweets < 0:
            raise ConfigError(f"num_tweets must be >= 0, got {self.num_tweets}")
        if max_tweets is not None and self.num_tweets not in tweet_count_options(max_tweets):
            raise ConfigError(f"num_tweets must be between 0 and {max_tweets}, got {self.num_tweets}")
        return self
