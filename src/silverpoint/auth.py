"""Kroger OAuth2 client-credentials authentication."""

from __future__ import annotations

import base64
from datetime import datetime, timedelta, timezone
from urllib.parse import quote

import httpx

from silverpoint.config import DEFAULT_KROGER_BASE_URL
from silverpoint.logger import get_logger
from silverpoint.models import AccessToken, TokenResponse

logger = get_logger(__name__)

CLIENT_SCOPE = "product.compact"
REFRESH_MARGIN = timedelta(minutes=5)


class AuthError(Exception):
    """Raised when authentication with the Kroger API fails."""


def token_url(base_url: str = DEFAULT_KROGER_BASE_URL) -> str:
    return f"{base_url.rstrip('/')}/connect/oauth2/token"


def _basic_credentials(client_id: str, client_secret: str) -> str:
    pair = f"{quote(client_id, safe='')}:{quote(client_secret, safe='')}"
    return base64.b64encode(pair.encode()).decode()


async def get_client_token(
    client_id: str,
    client_secret: str,
    base_url: str = DEFAULT_KROGER_BASE_URL,
    timeout: float = 5.0,
) -> TokenResponse:
    """Obtain a client credentials token (no user context)."""
    credentials = _basic_credentials(client_id, client_secret)

    async with httpx.AsyncClient(timeout=timeout) as client:
        response = await client.post(
            token_url(base_url),
            headers={"Authorization": f"Basic {credentials}"},
            data={
                "grant_type": "client_credentials",
                "scope": CLIENT_SCOPE,
            },
        )
        if response.status_code != 200:
            raise AuthError(
                f"Failed to get client token: {response.status_code} {response.text}"
            )
        return TokenResponse.model_validate(response.json())


class TokenManager:
    """Owns the cached client-credentials token for one API client.

    Concurrent callers may both refresh an expiring token; the last
    response to arrive is kept.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        base_url: str = DEFAULT_KROGER_BASE_URL,
        timeout: float = 5.0,
    ) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self.base_url = base_url
        self.timeout = timeout
        self._token: AccessToken | None = None

    @property
    def configured(self) -> bool:
        return bool(self.client_id.strip() and self.client_secret.strip())

    async def get_token(self) -> AccessToken | None:
        """Return a token valid for at least five more minutes, or None.

        None means the primary source is unusable for this call, either
        because no credentials are configured or because the exchange
        failed. A failed exchange is retried on the next call only.
        """
        if not self.configured:
            logger.debug("Kroger credentials not configured; skipping token fetch")
            return None

        now = datetime.now(timezone.utc)
        if self._token is not None and now + REFRESH_MARGIN < self._token.expires_at:
            return self._token

        try:
            response = await get_client_token(
                self.client_id, self.client_secret, self.base_url, self.timeout
            )
        except AuthError as e:
            logger.warning("Kroger token fetch failed: %s", e)
            return None
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Kroger token fetch error: %s", e)
            return None

        self._token = AccessToken(
            value=response.access_token,
            expires_at=now + timedelta(seconds=response.expires_in),
        )
        logger.info("Obtained Kroger token, expires in %ss", response.expires_in)
        return self._token
