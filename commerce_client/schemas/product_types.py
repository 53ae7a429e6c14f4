"""Product type schemas and update actions."""

from typing import Any, Literal, Optional

from commerce_client.schemas.base import CreatedBy, LocalizedString, PlatformModel, VersionedResource

AttributeConstraint = Literal["None", "Unique", "CombinationUnique", "SameForAll"]
TextInputHint = Literal["SingleLine", "MultiLine"]


class AttributeType(PlatformModel):
    """Attribute type, e.g. AttributeType(name="text") or name="enum" with values."""

    name: str
    values: Optional[list[Any]] = None
    element_type: Optional["AttributeType"] = None


class AttributeDefinitionDraft(PlatformModel):
    type: AttributeType
    name: str
    label: LocalizedString
    is_required: bool
    attribute_constraint: Optional[AttributeConstraint] = None
    input_tip: Optional[LocalizedString] = None
    input_hint: Optional[TextInputHint] = None
    is_searchable: Optional[bool] = None


class AttributeDefinition(AttributeDefinitionDraft):
    attribute_constraint: AttributeConstraint = "None"
    input_hint: TextInputHint = "SingleLine"
    is_searchable: bool = True


class ProductTypeDraft(PlatformModel):
    name: str
    description: str
    key: Optional[str] = None
    attributes: list[AttributeDefinitionDraft] = []


class ProductType(VersionedResource):
    key: Optional[str] = None
    name: str
    description: str
    attributes: list[AttributeDefinition] = []
    created_by: Optional[CreatedBy] = None
    last_modified_by: Optional[CreatedBy] = None


class AddAttributeAction(PlatformModel):
    """Update action appending one attribute definition."""

    action: Literal["addAttributeDefinition"] = "addAttributeDefinition"
    attribute: AttributeDefinitionDraft
