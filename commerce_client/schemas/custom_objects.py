"""Custom object schemas."""

from typing import Any, Optional

from pydantic import Field

from commerce_client.schemas.base import PlatformModel, VersionedResource

# Containers and keys must match this on the platform
KEY_PATTERN = r"^[-_~.a-zA-Z0-9]+$"


class CustomObjectDraft(PlatformModel):
    """Create-or-update payload for a JSON document stored under container/key.

    Passing ``version`` makes the save conditional on the stored version.
    """

    container: str = Field(..., pattern=KEY_PATTERN)
    key: str = Field(..., pattern=KEY_PATTERN)
    value: Any
    version: Optional[int] = None


class CustomObject(VersionedResource):
    container: str
    key: str
    value: Any
