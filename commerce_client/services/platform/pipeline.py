"""Authenticated, queued execution of platform requests."""

from dataclasses import replace
import logging

from commerce_client.services.platform.errors import PlatformAPIError
from commerce_client.services.platform.oauth import ClientCredentialsAuth
from commerce_client.services.platform.queue import RequestQueue
from commerce_client.services.platform.transport import (
    HttpTransport,
    PlatformRequest,
    PlatformResponse,
)

logger = logging.getLogger(__name__)


class PlatformPipeline:
    """Compose request queue, token provider and transport.

    Every request waits for a queue slot, gets a bearer token attached and is
    sent through the transport. A 401 drops the cached token and replays the
    request once with a fresh one; any other failure propagates unchanged.
    """

    def __init__(
        self,
        transport: HttpTransport,
        queue: RequestQueue,
        auth: ClientCredentialsAuth,
    ) -> None:
        self.transport = transport
        self.queue = queue
        self.auth = auth

    async def execute(self, request: PlatformRequest) -> PlatformResponse:
        """Execute one request descriptor.

        Args:
            request: Request descriptor built by the resource client

        Returns:
            PlatformResponse with decoded body

        Raises:
            PlatformAPIError: On non-2xx response or network failure
            PlatformOAuthError: If no access token can be obtained
        """
        async with self.queue.slot():
            token = await self.auth.get_access_token()
            try:
                return await self.transport.send(self._authorized(request, token))
            except PlatformAPIError as e:
                if e.status_code != 401:
                    raise

            logger.warning(f"Got 401 for {request.method} {request.uri}, refreshing access token")
            self.auth.invalidate(token)
            token = await self.auth.get_access_token()
            return await self.transport.send(self._authorized(request, token))

    @staticmethod
    def _authorized(request: PlatformRequest, token: str) -> PlatformRequest:
        headers = dict(request.headers)
        headers["Authorization"] = f"Bearer {token}"
        return replace(request, headers=headers)

    async def close(self) -> None:
        """Release pooled connections."""
        await self.transport.close()
        await self.auth.close()
