"""Tests for tweet body linkification."""

from twitter_feed.utils import format_hashtags, format_links, format_mentions, prepare_tweet


def test_empty_tweet():
    assert prepare_tweet("") == ""
    assert prepare_tweet() == ""


def test_plain_text_untouched():
    assert prepare_tweet("nothing to see here.") == "nothing to see here."


def test_link_with_parentheses():
    assert prepare_tweet("check http://example.com/x(y) now") == (
        'check <a href="http://example.com/x(y)" target="_blank">http://example.com/x(y)</a> now'
    )


def test_link_trailing_punctuation_not_captured():
    assert format_links("see https://example.com/page.") == (
        'see <a href="https://example.com/page" target="_blank">https://example.com/page</a>.'
    )
    assert format_links("(https://example.com/a)") == (
        '(<a href="https://example.com/a" target="_blank">https://example.com/a</a>)'
    )
    assert format_links("«https://example.com/a»") == (
        '«<a href="https://example.com/a" target="_blank">https://example.com/a</a>»'
    )


def test_link_case_insensitive_scheme():
    assert format_links("HTTP://x.com/A http://y.com/") == (
        '<a href="HTTP://x.com/A" target="_blank">HTTP://x.com/A</a>'
        ' <a href="http://y.com/" target="_blank">http://y.com/</a>'
    )


def test_uppercase_scheme_alone_is_not_scanned():
    assert format_links("HTTPS://Example.com/A") == "HTTPS://Example.com/A"


def test_www_link_linked_when_http_present():
    result = format_links("http://a.com/x and www.example.com/path")
    assert '<a href="www.example.com/path" target="_blank">www.example.com/path</a>' in result


def test_links_skipped_without_http():
    assert format_links("visit www.example.com/path") == "visit www.example.com/path"


def test_hashtag():
    assert prepare_tweet("love #drupal8 today") == (
        'love <a href="https://twitter.com/hashtag/drupal8" target="_blank">#drupal8</a> today'
    )


def test_hashtag_at_start_gets_leading_space():
    assert format_hashtags("#python rocks") == (
        ' <a href="https://twitter.com/hashtag/python" target="_blank">#python</a> rocks'
    )


def test_numeric_hashtag_not_linked():
    assert prepare_tweet("#123") == "#123"


def test_hashtag_with_umlaut():
    assert format_hashtags("so #schön") == (
        'so <a href="https://twitter.com/hashtag/schön" target="_blank">#schön</a>'
    )


def test_hashtag_inside_word_not_linked():
    assert format_hashtags("issue#42abc") == "issue#42abc"


def test_mention():
    assert prepare_tweet("cc @jane_doe please") == (
        'cc <a href="https://twitter.com/jane_doe" target="_blank">@jane_doe</a> please'
    )


def test_email_address_not_a_mention():
    assert format_mentions("mail me@example.com") == "mail me@example.com"


def test_numeric_mention_not_linked():
    assert format_mentions("@1234") == "@1234"


def test_url_fragments_not_relinked():
    result = prepare_tweet("read http://example.com/#top and http://example.com/@bob")
    assert result == (
        'read <a href="http://example.com/#top" target="_blank">http://example.com/#top</a>'
        ' and <a href="http://example.com/@bob" target="_blank">http://example.com/@bob</a>'
    )


def test_all_three_together():
    result = prepare_tweet("@bob see https://t.co/abc #news")
    assert result == (
        ' <a href="https://twitter.com/bob" target="_blank">@bob</a>'
        ' see <a href="https://t.co/abc" target="_blank">https://t.co/abc</a>'
        ' <a href="https://twitter.com/hashtag/news" target="_blank">#news</a>'
    )


def test_long_trailing_punctuation_run():
    bangs = "!" * 40
    assert prepare_tweet("wow http://example.com/a" + bangs) == (
        'wow <a href="http://example.com/a" target="_blank">http://example.com/a</a>' + bangs
    )


def test_long_trailing_dots_and_question_marks():
    assert format_links("http://x.com/" + "." * 40) == (
        '<a href="http://x.com/" target="_blank">http://x.com/</a>' + "." * 40
    )
    assert format_links("http://x.com/a" + "?" * 40 + " ok") == (
        '<a href="http://x.com/a" target="_blank">http://x.com/a</a>' + "?" * 40 + " ok"
    )
