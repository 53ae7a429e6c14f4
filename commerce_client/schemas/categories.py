"""Category schemas."""

from typing import Optional

from commerce_client.schemas.base import CreatedBy, CustomFields, LocalizedString, Reference, VersionedResource
from commerce_client.schemas.products import Asset


class Category(VersionedResource):
    key: Optional[str] = None
    name: LocalizedString
    slug: LocalizedString
    description: Optional[LocalizedString] = None
    ancestors: list[Reference] = []
    parent: Optional[Reference] = None
    order_hint: str
    external_id: Optional[str] = None
    meta_title: Optional[LocalizedString] = None
    meta_description: Optional[LocalizedString] = None
    meta_keywords: Optional[LocalizedString] = None
    custom: Optional[CustomFields] = None
    assets: Optional[list[Asset]] = None
    created_by: Optional[CreatedBy] = None
    last_modified_by: Optional[CreatedBy] = None
