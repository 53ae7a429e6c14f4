"""Shared pytest fixtures: a fake platform served through httpx.MockTransport."""

from typing import Any, Callable, Optional, Union

import httpx
import pytest

from commerce_client.config import PlatformConfig
from commerce_client.services.platform.client import CommercetoolsClient

from tests.helpers import API_HOST, AUTH_HOST, PROJECT_KEY, paged

Responder = Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]


class FakePlatform:
    """In-memory stand-in for the auth and API hosts.

    The token endpoint always answers with a fresh token ("token-1",
    "token-2", ...). API responses are registered per method and path and
    served first-in first-out; unmatched requests get a 404.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.token_requests: list[httpx.Request] = []
        self._routes: list[tuple[str, str, Responder]] = []

    def add(
        self,
        method: str,
        path: str,
        json: Any = None,
        status_code: int = 200,
        results: Optional[list[Any]] = None,
        handler: Optional[Callable[[httpx.Request], httpx.Response]] = None,
    ) -> None:
        if handler is None:
            body = paged(results) if results is not None else json
            handler = httpx.Response(status_code, json=body)
        self._routes.append((method, path, handler))

    @property
    def paths(self) -> list[str]:
        return [f"{r.method} {r.url.path}" for r in self.requests]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.url.host == "auth.test" and request.url.path == "/oauth/token":
            self.token_requests.append(request)
            return httpx.Response(
                200,
                json={
                    "access_token": f"token-{len(self.token_requests)}",
                    "token_type": "Bearer",
                    "expires_in": 172800,
                    "scope": f"manage_project:{PROJECT_KEY}",
                },
            )

        self.requests.append(request)
        for i, (method, path, responder) in enumerate(self._routes):
            if method == request.method and path == request.url.path:
                del self._routes[i]
                if isinstance(responder, httpx.Response):
                    return responder
                return responder(request)

        return httpx.Response(
            404,
            json={"statusCode": 404, "message": f"No route for {request.method} {request.url.path}"},
        )


@pytest.fixture
def platform() -> FakePlatform:
    return FakePlatform()


@pytest.fixture
def mock_transport(platform: FakePlatform) -> httpx.MockTransport:
    return httpx.MockTransport(platform)


@pytest.fixture
def config() -> PlatformConfig:
    return PlatformConfig(
        project_key=PROJECT_KEY,
        client_id="client-id",
        client_secret="client-secret",
        locale="en",
        concurrency=4,
        auth_host=AUTH_HOST,
        api_host=API_HOST,
    )


@pytest.fixture
async def client(config: PlatformConfig, mock_transport: httpx.MockTransport):
    client = CommercetoolsClient(config, http_transport=mock_transport)
    yield client
    await client.close()
