"""Subscription schemas."""

from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from commerce_client.schemas.base import CreatedBy, PlatformModel, VersionedResource
from commerce_client.schemas.extensions import Destination

SubscriptionHealthStatus = Literal[
    "Healthy",
    "ConfigurationError",
    "ConfigurationErrorDeliveryStopped",
    "TemporaryError",
]


class MessageSubscription(PlatformModel):
    resource_type_id: str
    types: Optional[list[str]] = None


class ChangeSubscription(PlatformModel):
    resource_type_id: str


class PlatformFormat(PlatformModel):
    type: Literal["Platform"] = "Platform"


class CloudEventsFormat(PlatformModel):
    type: Literal["CloudEvents"] = "CloudEvents"
    cloud_events_version: str = "1.0"


Format = Annotated[Union[PlatformFormat, CloudEventsFormat], Field(discriminator="type")]


class SubscriptionDraft(PlatformModel):
    destination: Destination
    key: Optional[str] = None
    messages: Optional[list[MessageSubscription]] = None
    changes: Optional[list[ChangeSubscription]] = None
    format: Optional[Format] = None


class Subscription(VersionedResource):
    key: Optional[str] = None
    destination: Destination
    messages: list[MessageSubscription] = []
    changes: list[ChangeSubscription] = []
    format: Optional[Format] = None
    status: SubscriptionHealthStatus
    created_by: Optional[CreatedBy] = None
    last_modified_by: Optional[CreatedBy] = None
