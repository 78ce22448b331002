"""Shared fixtures: a recording HTTP client that never touches the network."""
import json

import pytest
import requests


def make_response(body, status_code=200, url="https://api.twitter.com/"):
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
    response._content = (body or "").encode("utf-8")
    response.encoding = "utf-8"
    return response


class FakeHttpClient:
    """Returns queued responses (or raises queued exceptions) and records every call."""

    def __init__(self):
        self.calls = []
        self._replies = []

    def queue(self, body=None, status_code=200, error=None):
        self._replies.append((body, status_code, error))
        return self

    def _next(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        body, status_code, error = self._replies.pop(0)
        if error is not None:
            raise error
        return make_response(body, status_code=status_code, url=url)

    def get(self, url, headers=None, params=None):
        return self._next("GET", url, headers=headers, params=params)

    def post(self, url, headers=None, data=None):
        return self._next("POST", url, headers=headers, data=data)


@pytest.fixture
def http():
    return FakeHttpClient()
