"""Async HTTP transport for the platform API."""

from dataclasses import dataclass, field
from typing import Any, Optional
import logging

import httpx

from commerce_client.services.platform.errors import PlatformAPIError, PlatformNetworkError

logger = logging.getLogger(__name__)


@dataclass
class PlatformRequest:
    """One request descriptor: path+query, verb, headers and optional JSON body."""

    uri: str
    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None


@dataclass
class PlatformResponse:
    """Decoded platform response."""

    body: Any
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)


class HttpTransport:
    """Send request descriptors to the API host over one pooled httpx client.

    Features:
    - Connection reuse across calls
    - JSON encoding/decoding
    - Error handling with custom exceptions
    """

    def __init__(
        self,
        host: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the transport.

        Args:
            host: API host, e.g. https://api.europe-west1.gcp.commercetools.com
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests inject a MockTransport)
        """
        self.host = host.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.host,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def send(self, request: PlatformRequest) -> PlatformResponse:
        """Perform the HTTP call described by ``request``.

        Args:
            request: Request descriptor with a project-scoped path

        Returns:
            PlatformResponse with the decoded JSON body

        Raises:
            PlatformAPIError: If the platform returns a non-2xx status
            PlatformNetworkError: If no response was received
        """
        client = self._get_client()
        method = request.method.upper()

        try:
            response = await client.request(
                method=method,
                url=request.uri,
                headers=request.headers,
                json=request.body,
            )
        except httpx.TransportError as e:
            raise PlatformNetworkError(f"{method} {request.uri} failed: {e!r}") from e

        logger.debug(f"{method} {request.uri} -> {response.status_code}")

        if not response.is_success:
            response_body = None
            try:
                response_body = response.json()
            except ValueError:
                pass

            message = response.text
            if isinstance(response_body, dict) and response_body.get("message"):
                message = response_body["message"]

            raise PlatformAPIError(
                status_code=response.status_code,
                message=message,
                response_body=response_body,
            )

        body = response.json() if response.content else None
        return PlatformResponse(
            body=body,
            status_code=response.status_code,
            headers=dict(response.headers),
        )

    async def close(self) -> None:
        """Close the pooled HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
