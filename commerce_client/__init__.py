"""Async client for a commercetools-style commerce platform API."""

from commerce_client.config import PlatformConfig, Settings, get_settings
from commerce_client.services.platform import (
    ByEntity,
    ByKey,
    CommercetoolsClient,
    InvalidArgumentError,
    PlatformAPIError,
    PlatformNetworkError,
    PlatformOAuthError,
)

__version__ = "0.1.0"

__all__ = [
    "CommercetoolsClient",
    # Config
    "PlatformConfig",
    "Settings",
    "get_settings",
    # Key/version
    "ByEntity",
    "ByKey",
    # Errors
    "InvalidArgumentError",
    "PlatformAPIError",
    "PlatformNetworkError",
    "PlatformOAuthError",
]
