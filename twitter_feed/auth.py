"""
Authentication Module
Exchange API credentials for an application-only bearer token (OAuth2 client credentials).
"""

import base64
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

import requests

from .config import Config
from .errors import AuthError, ConfigError, NetworkError
from .logger import logger
from .transport import TOKEN_URL, USER_AGENT, HttpClient, default_http_client

GRANT_BODY = "grant_type=client_credentials"


@dataclass(frozen=True)
class Credentials:
    """Twitter API key and secret."""

    api_key: str
    api_secret: str = field(repr=False)

    def __post_init__(self):
        if not self.api_key or not self.api_secret:
            raise ConfigError("Missing required authentication credentials")

    @classmethod
    def from_config(cls) -> "Credentials":
        """Build credentials from TWITTER_API_KEY / TWITTER_API_SECRET."""
        return cls(api_key=Config.TWITTER_API_KEY or "", api_secret=Config.TWITTER_API_SECRET or "")

    def basic_auth_value(self) -> str:
        raw = f"{self.api_key}:{self.api_secret}".encode("utf-8")
        return base64.b64encode(raw).decode("ascii")


@dataclass(frozen=True)
class BearerToken:
    value: str = field(repr=False)
    obtained_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __bool__(self) -> bool:
        return bool(self.value)

    def authorization_header(self) -> str:
        return f"Bearer {self.value}"


def extract_access_token(payload: Any) -> Optional[str]:
    """
    Pull the access token out of a decoded token response.

    Args:
        payload: Decoded JSON body of the token endpoint

    Returns:
        The token string, or None when the body carries no usable token
    """
    if not isinstance(payload, dict):
        return None
    token = payload.get("access_token")
    if isinstance(token, str) and token:
        return token
    return None


class TokenProvider:
    """Perform the client-credentials exchange against the token endpoint."""

    def __init__(self, http_client: Optional[HttpClient] = None):
        self.http_client = http_client or default_http_client()

    @staticmethod
    def build_headers(credentials: Credentials) -> dict:
        return {
            "Authorization": f"Basic {credentials.basic_auth_value()}",
            "Content-Length": str(len(GRANT_BODY)),
            "Content-Type": "application/x-www-form-urlencoded;charset=UTF-8",
            "Accept-Encoding": "gzip",
            "User-Agent": USER_AGENT,
        }

    def obtain_token(self, credentials: Credentials) -> BearerToken:
        """
        Exchange credentials for a bearer token. Makes exactly one request.

        Args:
            credentials: API key and secret

        Returns:
            A non-empty BearerToken

        Raises:
            NetworkError: If the request fails at the transport level
            AuthError: If the endpoint answers without a usable token
        """
        try:
            response = self.http_client.post(
                TOKEN_URL,
                headers=self.build_headers(credentials),
                data=GRANT_BODY,
            )
        except requests.RequestException as e:
            logger.error("Token request failed: %s", e)
            raise NetworkError(f"Token request failed: {e}") from e

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            status = getattr(response, "status_code", None)
            logger.error("Token endpoint returned HTTP %s", status)
            raise AuthError(f"Token endpoint returned HTTP {status}", status_code=status) from e

        try:
            payload = response.json()
        except ValueError:
            payload = None

        token = extract_access_token(payload)
        if token is None:
            logger.error("Token response did not contain an access_token")
            raise AuthError("Token response did not contain an access_token",
                            status_code=getattr(response, "status_code", None))

        logger.debug("Obtained bearer token")
        return BearerToken(value=token)
