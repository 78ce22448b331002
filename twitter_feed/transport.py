"""
HTTP transport used for both Twitter API calls.

Any object with requests-style ``get``/``post`` methods can be injected;
a ``requests.Session`` is used when none is given.
"""
from typing import Any, Dict, Optional, Protocol

import requests

API_BASE_URL = "https://api.twitter.com"
TOKEN_URL = f"{API_BASE_URL}/oauth2/token"
TIMELINE_URL = f"{API_BASE_URL}/1.1/statuses/user_timeline.json"

USER_AGENT = "twitter-feed v0.1.0"


class HttpResponse(Protocol):
    status_code: int

    def json(self) -> Any: ...

    def raise_for_status(self) -> None: ...


class HttpClient(Protocol):
    """The subset of ``requests.Session`` the feed relies on."""

    def get(self, url: str, headers: Optional[Dict[str, str]] = None,
            params: Optional[Dict[str, Any]] = None) -> HttpResponse: ...

    def post(self, url: str, headers: Optional[Dict[str, str]] = None,
             data: Optional[str] = None) -> HttpResponse: ...


def default_http_client() -> HttpClient:
    return requests.Session()
