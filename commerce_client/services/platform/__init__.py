"""Commerce platform integration services.

This package provides:
- OAuth 2.0 client-credentials authentication
- Concurrency-bounded request pipeline over httpx
- Fluent request URI builder and query predicates
- Resource client with one method per platform operation
"""

from commerce_client.services.platform.client import CommercetoolsClient
from commerce_client.services.platform.errors import (
    InvalidArgumentError,
    PlatformAPIError,
    PlatformNetworkError,
    PlatformOAuthError,
)
from commerce_client.services.platform.oauth import (
    AccessToken,
    ClientCredentialsAuth,
)
from commerce_client.services.platform.pipeline import PlatformPipeline
from commerce_client.services.platform.queue import RequestQueue
from commerce_client.services.platform.request_builder import (
    RequestBuilder,
    SearchBuilder,
    ServiceBuilder,
    create_request_builder,
)
from commerce_client.services.platform.transport import (
    HttpTransport,
    PlatformRequest,
    PlatformResponse,
)
from commerce_client.services.platform.versioning import (
    ByEntity,
    ByKey,
    KeyOrEntity,
    coerce_key_or_entity,
    resolve_key_and_version,
)

__all__ = [
    # Client
    "CommercetoolsClient",
    # Errors
    "InvalidArgumentError",
    "PlatformAPIError",
    "PlatformNetworkError",
    "PlatformOAuthError",
    # OAuth
    "AccessToken",
    "ClientCredentialsAuth",
    # Pipeline
    "HttpTransport",
    "PlatformPipeline",
    "PlatformRequest",
    "PlatformResponse",
    "RequestQueue",
    # Request builder
    "RequestBuilder",
    "SearchBuilder",
    "ServiceBuilder",
    "create_request_builder",
    # Versioning
    "ByEntity",
    "ByKey",
    "KeyOrEntity",
    "coerce_key_or_entity",
    "resolve_key_and_version",
]
