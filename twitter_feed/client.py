"""
Twitter Feed Client
Fetch a user's timeline with an application-only bearer token and render it.
"""

from typing import Any, Dict, List, NamedTuple, Optional

import requests

from .auth import BearerToken, Credentials, TokenProvider
from .config import FeedSettings
from .errors import NetworkError, ParseError
from .logger import logger
from .transport import TIMELINE_URL, USER_AGENT, HttpClient, default_http_client
from .utils import prepare_tweet


class Tweet(NamedTuple):
    """The two fields of an API status object the feed uses."""
    text: str
    created_at: str = ""

    @classmethod
    def from_api(cls, item: Any) -> Optional["Tweet"]:
        if not isinstance(item, dict) or not isinstance(item.get("text"), str):
            return None
        created_at = item.get("created_at")
        return cls(text=item["text"], created_at=created_at if isinstance(created_at, str) else "")


class RenderedPost(NamedTuple):
    """A tweet ready for display; text holds HTML anchors."""
    text: str
    created_at: str


def parse_timeline(response) -> List[Any]:
    """Decode a timeline body. Raises ParseError unless it is a JSON list."""
    try:
        payload = response.json()
    except ValueError as e:
        raise ParseError(f"Timeline response is not valid JSON: {e}") from e
    if not isinstance(payload, list):
        raise ParseError(f"Timeline response is a {type(payload).__name__}, expected a list")
    return payload


class TimelineFetcher:
    """Read recent tweets from the v1.1 user timeline endpoint."""

    def __init__(self, http_client: Optional[HttpClient] = None):
        self.http_client = http_client or default_http_client()

    def fetch_timeline(self, token: BearerToken, username: str, count: int) -> List[Tweet]:
        """
        Get a user's recent tweets. Makes exactly one request.

        Args:
            token: Bearer token from TokenProvider
            username: Twitter screen name
            count: Number of tweets to ask for, passed through unchanged

        Returns:
            Tweets in the order the API returned them; empty when the body
            cannot be parsed

        Raises:
            NetworkError: If the request fails or the API answers with an error status
        """
        headers = {
            "Authorization": token.authorization_header(),
            "User-Agent": USER_AGENT,
        }
        params = {"screen_name": username, "count": count}

        try:
            response = self.http_client.get(TIMELINE_URL, headers=headers, params=params)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning("Timeline request for %s failed: %s", username, e)
            raise NetworkError(f"Timeline request for {username} failed: {e}") from e

        try:
            items = parse_timeline(response)
        except ParseError as e:
            logger.warning("Ignoring timeline for %s: %s", username, e)
            return []

        tweets = []
        for item in items:
            tweet = Tweet.from_api(item)
            if tweet is None:
                logger.debug("Skipping timeline item without text")
                continue
            tweets.append(tweet)
        logger.info("Fetched %d tweets for %s", len(tweets), username)
        return tweets


class TwitterFeed:
    """
    One fetch cycle: token exchange, timeline request, rendering.

    The bearer token is obtained at most once per instance and reused for
    every fetch made through it. Create a new instance per render.
    """

    def __init__(self, credentials: Credentials, http_client: Optional[HttpClient] = None):
        self.credentials = credentials
        self.http_client = http_client or default_http_client()
        self.token_provider = TokenProvider(self.http_client)
        self.timeline = TimelineFetcher(self.http_client)
        self.access_token: Optional[BearerToken] = None

    def get_bearer_token(self) -> BearerToken:
        if self.access_token:
            return self.access_token
        self.access_token = self.token_provider.obtain_token(self.credentials)
        return self.access_token

    def fetch(self, settings: FeedSettings) -> List[Tweet]:
        """
        Fetch the configured user's tweets.

        The tweet count is not bounded here; the maximum only limits the
        choices offered when the settings are edited.

        Token errors (AuthError, NetworkError) propagate; a failed timeline
        request degrades to an empty list.
        """
        settings.validate()
        token = self.get_bearer_token()
        try:
            return self.timeline.fetch_timeline(token, settings.username, settings.num_tweets)
        except NetworkError:
            return []

    def build(self, settings: FeedSettings) -> Dict[str, Any]:
        """Fetch and linkify tweets; returns the username and rendered posts."""
        tweets = self.fetch(settings)
        rendered = [RenderedPost(text=prepare_tweet(t.text), created_at=t.created_at) for t in tweets]
        return {
            "username": settings.username,
            "tweets": rendered,
        }
