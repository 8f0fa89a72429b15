"""API key models."""

from pydantic import Field
from typing import List, Optional

from ccloud_client.models.common import (
    CCloudObject, CCloudResource, EnvironmentScopedReference, ListMetadata,
    ObjectReference, PaginationOptions, RequestModel, ResponseModel
)


class APIKeySpec(ResponseModel):
    """API key details.

    ``secret`` is only returned by the create call.
    """
    secret: Optional[str] = None
    display_name: Optional[str] = None
    description: Optional[str] = None
    owner: Optional[ObjectReference] = None
    resource: Optional[ObjectReference] = None


class APIKey(CCloudResource):
    """A credential granting a principal access to a resource."""
    spec: APIKeySpec = Field(default_factory=APIKeySpec)


class APIKeyList(CCloudObject):
    """One page of API keys."""
    metadata: ListMetadata = Field(default_factory=ListMetadata)
    data: List[APIKey] = Field(default_factory=list)


class APIKeyListOptions(PaginationOptions):
    """Query options for listing API keys."""
    owner: Optional[str] = Field(None, alias="spec.owner", description="Owner principal filter")
    resource: Optional[str] = Field(None, alias="spec.resource", description="Resource filter")


class CreateAPIKeyRequest(RequestModel):
    """Body of a create API key call."""
    display_name: Optional[str] = Field(None, description="Key name")
    description: Optional[str] = Field(None, description="Free-form description")
    owner: EnvironmentScopedReference = Field(..., description="Principal owning the key")
    resource: EnvironmentScopedReference = Field(..., description="Resource the key grants access to")


class UpdateAPIKeyRequest(RequestModel):
    """Body of an update API key call."""
    display_name: Optional[str] = None
    description: Optional[str] = None
