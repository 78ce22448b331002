#!/usr/bin/env python3
"""Print a user's recent tweets with hashtags, mentions and URLs linked."""
import argparse
import json

from .auth import Credentials
from .client import TwitterFeed
from .config import Config, FeedSettings
from .errors import TwitterFeedError
from .logger import logger


def render(result: dict, as_json: bool = False) -> str:
    if as_json:
        return json.dumps(
            {
                "username": result["username"],
                "tweets": [tweet._asdict() for tweet in result["tweets"]],
            },
            ensure_ascii=False,
            indent=2,
        )
    lines = [f"@{result['username']}"]
    for tweet in result["tweets"]:
        lines.append(f"[{tweet.created_at}] {tweet.text}")
    return "\n".join(lines)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Show a user's recent tweets as linked HTML")
    parser.add_argument("username", help="Twitter username whose tweets will be displayed")
    parser.add_argument(
        "--count",
        type=int,
        default=Config.TWITTER_MAX_TWEETS,
        help=f"Number of tweets to display (default {Config.TWITTER_MAX_TWEETS})",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    args = parser.parse_args(argv)

    try:
        credentials = Credentials.from_config()
        settings = FeedSettings(username=args.username, num_tweets=args.count)
        result = TwitterFeed(credentials).build(settings)
    except TwitterFeedError as e:
        logger.error("Could not load tweets: %s", e)
        raise SystemExit(f"error: {e}")

    print(render(result, as_json=args.json))
    return 0


if __name__ == "__main__":
    main()
