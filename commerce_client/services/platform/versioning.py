"""Resolve a key or an already-fetched entity to ``{key, version}``.

Versioned updates and deletes need the version the platform currently holds.
Callers either hand over an entity they just fetched (``ByEntity``, no extra
request) or only a key (``ByKey``, one lookup to read the current version).
"""

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any, Union

from commerce_client.schemas.common import EntityRef
from commerce_client.services.platform.errors import InvalidArgumentError


@dataclass(frozen=True)
class ByKey:
    """Only the key is known; the version must be looked up."""

    key: str


@dataclass(frozen=True)
class ByEntity:
    """Key and version taken from an entity the caller already holds."""

    key: str
    version: int


KeyOrEntity = Union[ByKey, ByEntity]

FetchByKey = Callable[[str], Awaitable[Any]]


def _field(value: Any, name: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(name)
    return getattr(value, name, None)


def coerce_key_or_entity(value: Any) -> KeyOrEntity:
    """Turn a bare key, a mapping or a model into the tagged variant.

    Raises:
        InvalidArgumentError: If ``value`` is neither a key nor an entity
            carrying both ``key`` and ``version``
    """
    if isinstance(value, (ByKey, ByEntity)):
        return value
    if isinstance(value, str):
        if not value:
            raise InvalidArgumentError("Invalid value for key_or_entity: empty key")
        return ByKey(value)
    if value is not None and not isinstance(value, (int, float, bool, bytes)):
        key = _field(value, "key")
        version = _field(value, "version")
        if isinstance(key, str) and key and isinstance(version, int) and not isinstance(version, bool):
            return ByEntity(key=key, version=version)
    raise InvalidArgumentError(f"Invalid value for key_or_entity: {value!r}")


async def resolve_key_and_version(key_or_entity: Any, fetch_by_key: FetchByKey) -> EntityRef:
    """Get the key and current version for a versioned mutation.

    Args:
        key_or_entity: ``ByKey`` / ``ByEntity``, a key string, or an entity
            (mapping or model) carrying ``key`` and ``version``
        fetch_by_key: Lookup used when only the key is known

    Returns:
        EntityRef with key and version

    Raises:
        InvalidArgumentError: If ``key_or_entity`` has an unsupported shape
        LookupError: If ``fetch_by_key`` finds nothing for the key
    """
    ref = coerce_key_or_entity(key_or_entity)
    if isinstance(ref, ByEntity):
        return EntityRef(key=ref.key, version=ref.version)

    entity = await fetch_by_key(ref.key)
    version = _field(entity, "version") if entity is not None else None
    if version is None:
        raise LookupError(f"No entity with key {ref.key!r} to read a version from")
    return EntityRef(key=ref.key, version=version)
