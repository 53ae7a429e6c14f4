"""Shared building blocks for platform schemas."""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# ISO 8601 timestamp as sent by the platform
DateTime = str

# {"en": "Shirt", "de": "Hemd"}
LocalizedString = dict[str, str]


class PlatformModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python.

    Unknown fields are kept so records survive a validate/dump round trip.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialize for a request body."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Reference(PlatformModel):
    """Reference to another resource by id."""

    type_id: str
    id: str
    obj: Optional[dict[str, Any]] = None


class ResourceIdentifier(PlatformModel):
    """Identify a resource by id or by key."""

    type_id: Optional[str] = None
    id: Optional[str] = None
    key: Optional[str] = None


class CreatedBy(PlatformModel):
    client_id: Optional[str] = None
    external_user_id: Optional[str] = None
    customer: Optional[Reference] = None
    anonymous_id: Optional[str] = None


LastModifiedBy = CreatedBy


class Money(PlatformModel):
    """Amount in the smallest currency unit."""

    type: Literal["centPrecision", "highPrecision"] = "centPrecision"
    currency_code: str
    cent_amount: int
    fraction_digits: int = 2


class CustomFields(PlatformModel):
    type: Reference
    fields: dict[str, Any] = {}


class CustomFieldsDraft(PlatformModel):
    type: ResourceIdentifier
    fields: Optional[dict[str, Any]] = None


class Address(PlatformModel):
    country: str
    id: Optional[str] = None
    key: Optional[str] = None
    title: Optional[str] = None
    salutation: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    street_name: Optional[str] = None
    street_number: Optional[str] = None
    additional_street_info: Optional[str] = None
    postal_code: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    state: Optional[str] = None
    company: Optional[str] = None
    department: Optional[str] = None
    building: Optional[str] = None
    apartment: Optional[str] = None
    p_o_box: Optional[str] = None
    phone: Optional[str] = None
    mobile: Optional[str] = None
    email: Optional[str] = None
    fax: Optional[str] = None
    additional_address_info: Optional[str] = None
    external_id: Optional[str] = None


class VersionedResource(PlatformModel):
    """Fields every mutable platform resource carries."""

    id: str
    version: int
    created_at: Optional[DateTime] = None
    last_modified_at: Optional[DateTime] = None
