"""Channel schemas."""

from typing import Any, Literal, Optional

from commerce_client.schemas.base import Address, CustomFields, CustomFieldsDraft, LocalizedString, PlatformModel, VersionedResource

ChannelRole = Literal["InventorySupply", "ProductDistribution", "OrderExport", "OrderImport", "Primary"]


class ChannelDraft(PlatformModel):
    """Input for creating a channel.

    Without roles the platform assigns InventorySupply.
    """

    key: str
    roles: Optional[list[ChannelRole]] = None
    name: Optional[LocalizedString] = None
    description: Optional[LocalizedString] = None
    address: Optional[Address] = None
    custom: Optional[CustomFieldsDraft] = None


class Channel(VersionedResource):
    key: str
    roles: list[ChannelRole] = []
    name: Optional[LocalizedString] = None
    description: Optional[LocalizedString] = None
    address: Optional[Address] = None
    review_rating_statistics: Optional[dict[str, Any]] = None
    custom: Optional[CustomFields] = None
