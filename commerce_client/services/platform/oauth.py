"""OAuth 2.0 client-credentials flow for the platform API."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
import asyncio
import logging

import httpx

from commerce_client.services.platform.errors import PlatformOAuthError

logger = logging.getLogger(__name__)

# Refresh this long before the platform says the token expires
EXPIRY_BUFFER = timedelta(minutes=5)


@dataclass
class AccessToken:
    """Bearer token as returned by the token endpoint."""

    access_token: str
    expires_at: datetime
    scope: Optional[str] = None

    @property
    def is_expired(self) -> bool:
        """Check if the token is expired or about to expire."""
        return datetime.now(timezone.utc) >= self.expires_at - EXPIRY_BUFFER


class ClientCredentialsAuth:
    """Obtain and refresh an access token for one project.

    Tokens are cached in memory only. Concurrent callers share a single
    in-flight token request.
    """

    def __init__(
        self,
        host: str,
        project_key: str,
        client_id: str,
        client_secret: str,
        scopes: Optional[list[str]] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the token provider.

        Args:
            host: Authentication host, e.g. https://auth.europe-west1.gcp.commercetools.com
            project_key: Project the token is scoped to
            client_id: API client id
            client_secret: API client secret
            scopes: Explicit scopes, defaults to manage_project:<project_key>
            timeout: Token request timeout in seconds
            transport: Optional httpx transport (tests inject a MockTransport)
        """
        self.host = host.rstrip("/")
        self.project_key = project_key
        self.client_id = client_id
        self.client_secret = client_secret
        self.scopes = scopes or [f"manage_project:{project_key}"]
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._token: Optional[AccessToken] = None
        self._lock = asyncio.Lock()

    @property
    def token_url(self) -> str:
        return f"{self.host}/oauth/token"

    async def get_access_token(self) -> str:
        """Get a valid access token, fetching a new one if needed.

        Returns:
            Bearer token string

        Raises:
            PlatformOAuthError: If the token endpoint rejects the request
        """
        token = self._token
        if token and not token.is_expired:
            return token.access_token

        async with self._lock:
            # Another caller may have refreshed while we waited
            if self._token and not self._token.is_expired:
                return self._token.access_token
            self._token = await self._fetch_token()
            return self._token.access_token

    def invalidate(self, access_token: Optional[str] = None) -> None:
        """Drop the cached token so the next call fetches a fresh one.

        Args:
            access_token: Only drop the cache if it still holds this token
        """
        if access_token is None or (self._token and self._token.access_token == access_token):
            self._token = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client used for token requests."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def _fetch_token(self) -> AccessToken:
        logger.info(f"Requesting access token for project {self.project_key}")

        try:
            response = await self._get_client().post(
                self.token_url,
                auth=(self.client_id, self.client_secret),
                data={
                    "grant_type": "client_credentials",
                    "scope": " ".join(self.scopes),
                },
            )
        except httpx.TransportError as e:
            error_msg = f"Token request failed: {e!r}"
            logger.error(error_msg)
            raise PlatformOAuthError(error_msg) from e

        if not response.is_success:
            error_msg = f"Token request failed: {response.status_code} - {response.text}"
            logger.error(error_msg)
            raise PlatformOAuthError(error_msg, response.status_code)

        token_data = response.json()
        expires_at = datetime.now(timezone.utc) + timedelta(
            seconds=int(token_data.get("expires_in", 172800))
        )

        logger.info("Obtained platform access token")
        return AccessToken(
            access_token=token_data["access_token"],
            expires_at=expires_at,
            scope=token_data.get("scope"),
        )
