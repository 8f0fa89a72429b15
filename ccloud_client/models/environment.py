"""Environment models."""

from pydantic import Field
from typing import List, Optional

from ccloud_client.models.common import (
    CCloudObject, CCloudResource, ListMetadata, PaginationOptions, RequestModel
)


class Environment(CCloudResource):
    """An environment grouping clusters and other resources."""
    display_name: Optional[str] = None


class EnvironmentList(CCloudObject):
    """One page of environments."""
    metadata: ListMetadata = Field(default_factory=ListMetadata)
    data: List[Environment] = Field(default_factory=list)


class EnvironmentListOptions(PaginationOptions):
    """Query options for listing environments."""


class EnvironmentCreateRequest(RequestModel):
    display_name: str = Field(..., min_length=1)


class EnvironmentUpdateRequest(RequestModel):
    display_name: str = Field(..., min_length=1)
