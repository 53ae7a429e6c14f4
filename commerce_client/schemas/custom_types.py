"""Custom type (``types`` endpoint) schemas."""

from typing import Any, Literal, Optional

from commerce_client.schemas.base import CreatedBy, LocalizedString, PlatformModel, VersionedResource

ReferenceTypeId = Literal[
    "cart",
    "category",
    "channel",
    "customer",
    "key-value-document",
    "order",
    "product",
    "product-type",
    "review",
    "state",
    "shipping-method",
    "zone",
]


class FieldType(PlatformModel):
    name: str
    values: Optional[list[Any]] = None
    element_type: Optional["FieldType"] = None
    reference_type_id: Optional[ReferenceTypeId] = None


class FieldDefinition(PlatformModel):
    type: FieldType
    name: str
    label: LocalizedString
    required: bool
    input_hint: Optional[Literal["SingleLine", "MultiLine"]] = None


class CustomTypeDraft(PlatformModel):
    key: str
    name: LocalizedString
    resource_type_ids: list[str]
    description: Optional[LocalizedString] = None
    field_definitions: Optional[list[FieldDefinition]] = None


class CustomType(VersionedResource):
    key: str
    name: LocalizedString
    description: Optional[LocalizedString] = None
    resource_type_ids: list[str]
    field_definitions: list[FieldDefinition] = []
    created_by: Optional[CreatedBy] = None
    last_modified_by: Optional[CreatedBy] = None
