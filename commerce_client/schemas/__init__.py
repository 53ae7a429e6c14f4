"""Platform resource schemas.

Records are declarations only: the client returns decoded JSON unchanged and
callers may ``Model.model_validate(result)`` when they want typed access.
Drafts and update actions can be passed to the client as models or dicts.
"""

from commerce_client.schemas.base import (
    Address,
    CustomFields,
    CustomFieldsDraft,
    LocalizedString,
    Money,
    PlatformModel,
    Reference,
    ResourceIdentifier,
    VersionedResource,
)
from commerce_client.schemas.common import EntityRef, PagedQueryResult, Sort, SortStatement
from commerce_client.schemas.categories import Category
from commerce_client.schemas.channels import Channel, ChannelDraft, ChannelRole
from commerce_client.schemas.custom_objects import CustomObject, CustomObjectDraft
from commerce_client.schemas.custom_types import CustomType, CustomTypeDraft, FieldDefinition, FieldType
from commerce_client.schemas.extensions import (
    AwsLambdaDestination,
    Destination,
    Extension,
    ExtensionDraft,
    HttpDestination,
    Trigger,
)
from commerce_client.schemas.inventory import InventoryEntry, InventoryEntryDraft
from commerce_client.schemas.orders import Cart, ChangeOrderStateAction, Order, OrderState
from commerce_client.schemas.product_types import (
    AddAttributeAction,
    AttributeDefinition,
    AttributeDefinitionDraft,
    AttributeType,
    ProductType,
    ProductTypeDraft,
)
from commerce_client.schemas.products import (
    Attribute,
    Product,
    ProductDraft,
    ProductProjection,
    ProductVariantDraft,
    TermFacetResult,
)
from commerce_client.schemas.subscriptions import Subscription, SubscriptionDraft
from commerce_client.schemas.tax_categories import TaxCategory, TaxCategoryDraft, TaxRateDraft

__all__ = [
    # Base
    "Address",
    "CustomFields",
    "CustomFieldsDraft",
    "LocalizedString",
    "Money",
    "PlatformModel",
    "Reference",
    "ResourceIdentifier",
    "VersionedResource",
    # Common
    "EntityRef",
    "PagedQueryResult",
    "Sort",
    "SortStatement",
    # Resources
    "AddAttributeAction",
    "Attribute",
    "AttributeDefinition",
    "AttributeDefinitionDraft",
    "AttributeType",
    "AwsLambdaDestination",
    "Cart",
    "Category",
    "ChangeOrderStateAction",
    "Channel",
    "ChannelDraft",
    "ChannelRole",
    "CustomObject",
    "CustomObjectDraft",
    "CustomType",
    "CustomTypeDraft",
    "Destination",
    "Extension",
    "ExtensionDraft",
    "FieldDefinition",
    "FieldType",
    "HttpDestination",
    "InventoryEntry",
    "InventoryEntryDraft",
    "Order",
    "OrderState",
    "Product",
    "ProductDraft",
    "ProductProjection",
    "ProductType",
    "ProductTypeDraft",
    "ProductVariantDraft",
    "Subscription",
    "SubscriptionDraft",
    "TaxCategory",
    "TaxCategoryDraft",
    "TaxRateDraft",
    "TermFacetResult",
    "Trigger",
]
