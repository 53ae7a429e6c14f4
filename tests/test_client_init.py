"""Tests for lazy, single-flight client initialization."""

from unittest.mock import AsyncMock, MagicMock, patch
import asyncio

import pytest
from pydantic import ValidationError

from commerce_client.config import Settings
from commerce_client.services.platform.client import CommercetoolsClient
from commerce_client.services.platform.transport import HttpTransport

from tests.helpers import API_HOST, AUTH_HOST, PROJECT_KEY


class TestEnsureInitialized:
    """Tests for pipeline construction."""

    async def test_construction_is_offline(self, config, platform, mock_transport):
        """Should not resolve config or touch the network before the first call."""
        provider = MagicMock(return_value=config)

        client = CommercetoolsClient(provider, http_transport=mock_transport)

        assert not client.is_initialized
        assert client.locale is None
        provider.assert_not_called()
        assert platform.token_requests == []

    async def test_concurrent_first_calls_build_once(self, config, mock_transport):
        provider = AsyncMock(return_value=config)
        client = CommercetoolsClient(provider, http_transport=mock_transport)

        with patch(
            "commerce_client.services.platform.client.HttpTransport",
            MagicMock(wraps=HttpTransport),
        ) as transport_cls:
            pipelines = await asyncio.gather(*(client.ensure_initialized() for _ in range(5)))

        assert transport_cls.call_count == 1
        provider.assert_awaited_once()
        assert all(p is pipelines[0] for p in pipelines)
        assert client.locale == "en"
        await client.close()

    async def test_concurrent_operations_build_once(self, config, platform, mock_transport):
        """Should build one pipeline and fetch one token for concurrent first operations."""
        for _ in range(5):
            platform.add("GET", f"/{PROJECT_KEY}/carts", results=[])
        client = CommercetoolsClient(config, http_transport=mock_transport)

        with patch(
            "commerce_client.services.platform.client.HttpTransport",
            MagicMock(wraps=HttpTransport),
        ) as transport_cls:
            results = await asyncio.gather(*(client.fetch_carts(1, 20) for _ in range(5)))

        assert transport_cls.call_count == 1
        assert len(platform.token_requests) == 1
        assert len(platform.requests) == 5
        assert all(r["count"] == 0 for r in results)
        await client.close()

    async def test_later_calls_reuse_pipeline(self, client):
        first = await client.ensure_initialized()
        second = await client.ensure_initialized()

        assert first is second
        assert client.is_initialized

    async def test_pipeline_uses_config(self, client):
        pipeline = await client.ensure_initialized()

        assert pipeline.queue.concurrency == 4
        assert pipeline.transport.host == API_HOST
        assert pipeline.auth.token_url == f"{AUTH_HOST}/oauth/token"
        assert pipeline.auth.scopes == [f"manage_project:{PROJECT_KEY}"]

    async def test_provider_failure_is_retried(self, config, mock_transport):
        """Should propagate a provider error and try again on the next call."""
        provider = AsyncMock(side_effect=[RuntimeError("secret store unavailable"), config])
        client = CommercetoolsClient(provider, http_transport=mock_transport)

        with pytest.raises(RuntimeError, match="secret store unavailable"):
            await client.ensure_initialized()
        assert not client.is_initialized

        await client.ensure_initialized()

        assert client.is_initialized
        assert provider.await_count == 2
        await client.close()

    async def test_sync_provider_returning_mapping(self, mock_transport):
        provider = MagicMock(
            return_value={
                "projectKey": PROJECT_KEY,
                "clientId": "id",
                "clientSecret": "secret",
                "locale": "de",
                "authHost": AUTH_HOST,
                "apiHost": API_HOST,
            }
        )
        client = CommercetoolsClient(provider, http_transport=mock_transport)

        await client.ensure_initialized()

        assert client.locale == "de"
        assert client.config.project_key == PROJECT_KEY
        await client.close()

    async def test_invalid_config(self, mock_transport):
        client = CommercetoolsClient({"projectKey": PROJECT_KEY}, http_transport=mock_transport)

        with pytest.raises(ValidationError):
            await client.ensure_initialized()

        assert not client.is_initialized


class TestFromSettings:
    """Tests for CommercetoolsClient.from_settings."""

    async def test_uses_settings(self, mock_transport):
        settings = Settings(
            CTP_PROJECT_KEY=PROJECT_KEY,
            CTP_CLIENT_ID="id",
            CTP_CLIENT_SECRET="secret",
            CTP_LOCALE="fr",
            CTP_AUTH_HOST=AUTH_HOST,
            CTP_API_HOST=API_HOST,
            _env_file=None,
        )
        client = CommercetoolsClient.from_settings(settings, http_transport=mock_transport)

        await client.ensure_initialized()

        assert client.locale == "fr"
        assert client.config.api_host == API_HOST
        await client.close()


class TestRequestHeaders:
    """Tests for headers sent with every API request."""

    async def test_json_and_bearer_headers(self, client, platform):
        platform.add("GET", f"/{PROJECT_KEY}/carts", results=[])

        await client.fetch_carts(1, 20)

        request = platform.requests[0]
        assert request.headers["Accept"] == "application/json"
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["Authorization"] == "Bearer token-1"

    async def test_token_is_reused_across_calls(self, client, platform):
        platform.add("GET", f"/{PROJECT_KEY}/carts", results=[])
        platform.add("GET", f"/{PROJECT_KEY}/categories", results=[])

        await client.fetch_carts(1, 20)
        await client.fetch_categories(1, 20)

        assert len(platform.token_requests) == 1
