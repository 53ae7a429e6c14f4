"""Helpers for building fake platform payloads."""

from typing import Any
import json

import httpx

AUTH_HOST = "https://auth.test"
API_HOST = "https://api.test"
PROJECT_KEY = "test-project"


def paged(results: list[Any], **extra: Any) -> dict[str, Any]:
    """Paged query envelope as the platform returns it."""
    return {
        "offset": 0,
        "limit": 20,
        "count": len(results),
        "total": len(results),
        "results": results,
        **extra,
    }


def request_json(request: httpx.Request) -> Any:
    """Decode the JSON body of a recorded request."""
    return json.loads(request.content)
