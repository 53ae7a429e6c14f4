"""Tax category schemas."""

from typing import Optional

from pydantic import Field

from commerce_client.schemas.base import PlatformModel, VersionedResource


class SubRate(PlatformModel):
    name: str
    amount: float = Field(..., ge=0, le=1)


class TaxRateDraft(PlatformModel):
    name: str
    included_in_price: bool
    # ISO 3166-1 alpha-2
    country: str
    amount: Optional[float] = Field(None, ge=0, le=1)
    state: Optional[str] = None
    sub_rates: Optional[list[SubRate]] = None


class TaxRate(TaxRateDraft):
    id: Optional[str] = None
    amount: float = Field(..., ge=0, le=1)


class TaxCategoryDraft(PlatformModel):
    name: str
    key: Optional[str] = None
    description: Optional[str] = None
    rates: list[TaxRateDraft] = []


class TaxCategory(VersionedResource):
    key: Optional[str] = None
    name: str
    description: Optional[str] = None
    rates: list[TaxRate] = []
