"""API extension and destination schemas."""

from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from commerce_client.schemas.base import CreatedBy, PlatformModel, VersionedResource


class AuthorizationHeader(PlatformModel):
    type: Literal["AuthorizationHeader"] = "AuthorizationHeader"
    header_value: str


class AzureFunctionsAuthentication(PlatformModel):
    type: Literal["AzureFunctions"] = "AzureFunctions"
    key: str


HttpDestinationAuthentication = Annotated[
    Union[AuthorizationHeader, AzureFunctionsAuthentication],
    Field(discriminator="type"),
]


class HttpDestination(PlatformModel):
    type: Literal["HTTP"] = "HTTP"
    url: str
    authentication: Optional[HttpDestinationAuthentication] = None


class AwsLambdaDestination(PlatformModel):
    type: Literal["AWSLambda"] = "AWSLambda"
    arn: str
    access_key: str
    access_secret: str


Destination = Annotated[
    Union[HttpDestination, AwsLambdaDestination],
    Field(discriminator="type"),
]


class Trigger(PlatformModel):
    resource_type_id: Literal["cart", "order", "payment", "customer"]
    actions: list[Literal["Create", "Update"]]


class ExtensionDraft(PlatformModel):
    destination: Destination
    triggers: list[Trigger]
    key: Optional[str] = None
    timeout_in_ms: Optional[int] = None


class Extension(VersionedResource):
    key: Optional[str] = None
    destination: Destination
    triggers: list[Trigger]
    timeout_in_ms: Optional[int] = None
    created_by: Optional[CreatedBy] = None
    last_modified_by: Optional[CreatedBy] = None
