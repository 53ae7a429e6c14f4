"""Exceptions raised by the platform client."""

from typing import Any, Optional


class PlatformAPIError(Exception):
    """Non-2xx response from the platform API."""

    def __init__(
        self,
        status_code: int,
        message: str,
        response_body: Any = None,
    ):
        self.status_code = status_code
        self.message = message
        self.response_body = response_body
        super().__init__(f"Platform API Error {status_code}: {message}")


class PlatformNetworkError(PlatformAPIError):
    """Request never produced a response (DNS, connect, read timeout...)."""

    def __init__(self, message: str):
        super().__init__(status_code=0, message=message)


class PlatformOAuthError(Exception):
    """Token endpoint rejected the client credentials or was unreachable."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class InvalidArgumentError(ValueError):
    """Caller passed a value the operation cannot work with."""
