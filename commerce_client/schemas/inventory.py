"""Inventory entry schemas."""

from typing import Optional

from commerce_client.schemas.base import (
    CustomFields,
    CustomFieldsDraft,
    DateTime,
    PlatformModel,
    Reference,
    ResourceIdentifier,
    VersionedResource,
)


class InventoryEntryDraft(PlatformModel):
    sku: str
    quantity_on_stock: int
    restockable_in_days: Optional[int] = None
    expected_delivery: Optional[DateTime] = None
    supply_channel: Optional[ResourceIdentifier] = None
    custom: Optional[CustomFieldsDraft] = None


class InventoryEntry(VersionedResource):
    sku: str
    supply_channel: Optional[Reference] = None
    quantity_on_stock: int
    available_quantity: int
    restockable_in_days: Optional[int] = None
    expected_delivery: Optional[DateTime] = None
    custom: Optional[CustomFields] = None
