"""Service account models."""

from pydantic import Field
from typing import List, Optional

from ccloud_client.models.common import (
    CCloudObject, CCloudResource, ListMetadata, PaginationOptions, RequestModel
)


class ServiceAccount(CCloudResource):
    """A non-human principal that can own API keys."""
    display_name: Optional[str] = None
    description: Optional[str] = None


class ServiceAccountList(CCloudObject):
    """One page of service accounts."""
    metadata: ListMetadata = Field(default_factory=ListMetadata)
    data: List[ServiceAccount] = Field(default_factory=list)


class ServiceAccountListOptions(PaginationOptions):
    """Query options for listing service accounts."""


class ServiceAccountCreateRequest(RequestModel):
    """Body of a create service account call."""
    display_name: str = Field(..., min_length=1, description="Account name, unique in the organization")
    description: Optional[str] = Field(None, description="Free-form description")


class ServiceAccountUpdateRequest(RequestModel):
    """Body of an update service account call. Only the description can change."""
    description: str = Field(..., description="New description")
