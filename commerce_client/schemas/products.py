"""Product and product projection schemas."""

from typing import Any, Literal, Optional, Union

from commerce_client.schemas.base import (
    CustomFields,
    CustomFieldsDraft,
    DateTime,
    LocalizedString,
    Money,
    PlatformModel,
    Reference,
    ResourceIdentifier,
    VersionedResource,
)


class Attribute(PlatformModel):
    name: str
    value: Any


class AssetDimensions(PlatformModel):
    w: int
    h: int


class Image(PlatformModel):
    url: str
    dimensions: AssetDimensions
    label: Optional[str] = None


class AssetSource(PlatformModel):
    uri: str
    key: Optional[str] = None
    dimensions: Optional[AssetDimensions] = None
    content_type: Optional[str] = None


class AssetDraft(PlatformModel):
    sources: list[AssetSource]
    name: LocalizedString
    key: Optional[str] = None
    description: Optional[LocalizedString] = None
    tags: Optional[list[str]] = None
    custom: Optional[CustomFieldsDraft] = None


class Asset(AssetDraft):
    id: str
    custom: Optional[CustomFields] = None


class PriceTier(PlatformModel):
    minimum_quantity: int
    value: Money


class PriceDraft(PlatformModel):
    value: Money
    country: Optional[str] = None
    customer_group: Optional[Reference] = None
    channel: Optional[ResourceIdentifier] = None
    valid_from: Optional[DateTime] = None
    valid_until: Optional[DateTime] = None
    tiers: Optional[list[PriceTier]] = None
    custom: Optional[CustomFieldsDraft] = None


class Price(PlatformModel):
    id: str
    value: Money
    country: Optional[str] = None
    customer_group: Optional[Reference] = None
    channel: Optional[Reference] = None
    valid_from: Optional[DateTime] = None
    valid_until: Optional[DateTime] = None
    discounted: Optional[dict[str, Any]] = None
    custom: Optional[CustomFields] = None


class ProductVariantDraft(PlatformModel):
    sku: Optional[str] = None
    key: Optional[str] = None
    prices: Optional[list[PriceDraft]] = None
    images: Optional[list[Image]] = None
    assets: Optional[list[AssetDraft]] = None
    attributes: Optional[list[Attribute]] = None


class ProductVariantAvailability(PlatformModel):
    is_on_stock: Optional[bool] = None
    restockable_in_days: Optional[int] = None
    available_quantity: Optional[int] = None
    # Availability per channel id
    channels: Optional[dict[str, Any]] = None


class ProductVariant(PlatformModel):
    id: int
    sku: Optional[str] = None
    key: Optional[str] = None
    prices: Optional[list[Price]] = None
    attributes: Optional[list[Attribute]] = None
    price: Optional[Price] = None
    images: Optional[list[Image]] = None
    assets: Optional[list[Asset]] = None
    availability: Optional[ProductVariantAvailability] = None
    is_matching_variant: Optional[bool] = None
    scoped_price: Optional[dict[str, Any]] = None
    scoped_price_discounted: Optional[bool] = None


class ProductData(PlatformModel):
    name: LocalizedString
    categories: list[Reference] = []
    description: Optional[LocalizedString] = None
    slug: LocalizedString
    master_variant: ProductVariant
    variants: list[ProductVariant] = []


class ProductCatalogData(PlatformModel):
    published: bool
    current: ProductData
    staged: ProductData
    has_staged_changes: bool


class SearchKeywords(PlatformModel):
    text: str
    suggest_tokenizer: Optional[dict[str, Any]] = None


class ProductDraft(PlatformModel):
    """Input for creating a product."""

    name: LocalizedString
    product_type: ResourceIdentifier
    slug: LocalizedString
    key: Optional[str] = None
    description: Optional[LocalizedString] = None
    categories: Optional[list[ResourceIdentifier]] = None
    category_order_hints: Optional[dict[str, str]] = None
    meta_title: Optional[LocalizedString] = None
    meta_description: Optional[LocalizedString] = None
    meta_keywords: Optional[LocalizedString] = None
    master_variant: Optional[ProductVariantDraft] = None
    variants: Optional[list[ProductVariantDraft]] = None
    tax_category: Optional[ResourceIdentifier] = None
    search_keywords: Optional[dict[str, list[SearchKeywords]]] = None
    state: Optional[Reference] = None
    publish: Optional[bool] = None


class Product(VersionedResource):
    key: Optional[str] = None
    product_type: Reference
    master_data: ProductCatalogData
    tax_category: Optional[Reference] = None
    state: Optional[Reference] = None


class ProductProjection(VersionedResource):
    """Current or staged product data flattened for search."""

    key: Optional[str] = None
    product_type: Reference
    name: LocalizedString
    slug: LocalizedString
    description: Optional[LocalizedString] = None
    categories: list[Reference] = []
    master_variant: ProductVariant
    variants: list[ProductVariant] = []
    published: Optional[bool] = None
    has_staged_changes: Optional[bool] = None


class FacetTerm(PlatformModel):
    term: Union[str, int, float, bool]
    count: int
    product_count: Optional[int] = None


class TermFacetResult(PlatformModel):
    type: Literal["terms"] = "terms"
    data_type: Optional[str] = None
    missing: int = 0
    total: int = 0
    other: int = 0
    terms: list[FacetTerm] = []
