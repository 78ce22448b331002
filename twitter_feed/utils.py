"""
Utility Functions
Turn URLs, #hashtags and @mentions in a tweet body into HTML links.
"""
import re

TWITTER_URL = "https://twitter.com"

# URL matcher: scheme, www prefix or bare "domain.tld/", balanced parentheses
# one level deep, and never ending on trailing punctuation.
# Each repetition consumes one character or one parenthesised group.
URL_PATTERN = re.compile(
    r"""\b(
        (?:https?://|www\d{0,3}[.]|[a-z0-9.\-]+[.][a-z]{2,4}/)
        (?:[^\s()<>]|\((?:[^\s()<>]|\([^\s()<>]+\))*\))+
        (?:\((?:[^\s()<>]|\([^\s()<>]+\))*\)|[^\s`!()\[\]{};:'".,<>?«»“”‘’])
    )""",
    re.IGNORECASE | re.VERBOSE,
)

HASHTAG_PATTERN = re.compile(r"(^|\s)#(\w*[a-zA-ZüöäßÜÄÖ_]+\w*)")

MENTION_PATTERN = re.compile(r"(^|\s)@(\w*[a-zA-Z_]+\w*)")


def format_links(tweet: str = "") -> str:
    """Wrap URLs in anchors. Only runs when the text contains 'http'."""
    if "http" in tweet:
        tweet = URL_PATTERN.sub(r'<a href="\g<1>" target="_blank">\g<1></a>', tweet)
    return tweet


def format_hashtags(tweet: str = "") -> str:
    """
    Link hashtags to the Twitter hashtag page.

    A tag must start the text or follow whitespace and contain at least one
    letter, so '#123' stays as it is. The whitespace before the tag is
    replaced by a single space.
    """
    if "#" in tweet:
        tweet = HASHTAG_PATTERN.sub(
            rf' <a href="{TWITTER_URL}/hashtag/\g<2>" target="_blank">#\g<2></a>', tweet
        )
    return tweet


def format_mentions(tweet: str = "") -> str:
    """Link @mentions to the user's profile, same boundary rule as hashtags."""
    if "@" in tweet:
        tweet = MENTION_PATTERN.sub(
            rf' <a href="{TWITTER_URL}/\g<2>" target="_blank">@\g<2></a>', tweet
        )
    return tweet


def prepare_tweet(tweet: str = "") -> str:
    """
    Link URLs, hashtags and mentions in a tweet body.

    Args:
        tweet: Raw tweet text

    Returns:
        Tweet text with HTML anchors inserted
    """
    # Order matters: '#' and '@' inside inserted URL anchors never follow
    # whitespace, so the later passes leave them alone.
    tweet = format_links(tweet)
    tweet = format_hashtags(tweet)
    tweet = format_mentions(tweet)
    return tweet


linkify = prepare_tweet
