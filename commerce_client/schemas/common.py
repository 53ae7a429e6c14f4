"""Envelope, sort and entity-reference schemas."""

from typing import Any, Generic, Literal, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

from commerce_client.schemas.base import PlatformModel

T = TypeVar("T")


class EntityRef(BaseModel):
    """Minimal identity needed for a versioned update or delete."""

    model_config = ConfigDict(frozen=True)

    key: str
    version: int


class PagedQueryResult(PlatformModel, Generic[T]):
    """One page of a collection query or search."""

    offset: int
    limit: int
    count: int
    total: Optional[int] = None
    results: list[T] = []
    facets: Optional[dict[str, Any]] = None
    meta: Optional[Any] = None


class SortStatement(BaseModel):
    """Sort by one field, e.g. SortStatement(by="createdAt", direction="desc")."""

    by: str
    direction: Literal["asc", "desc"] = "asc"


Sort = list[SortStatement]
