"""Shared envelope, reference and query option models."""

from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Dict, Any, Optional
from enum import Enum
from datetime import datetime
from urllib.parse import urlparse, parse_qs


class CloudProvider(str, Enum):
    """Supported cloud providers."""
    AWS = "AWS"
    GCP = "GCP"
    AZURE = "AZURE"


class ResponseModel(BaseModel):
    """Base for models decoded from API responses.

    A JSON ``null`` decodes like an absent field: lists come back empty and
    nested objects get their defaults.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def drop_null_fields(cls, data: Any) -> Any:
        """Remove null members so field defaults apply."""
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class RequestModel(BaseModel):
    """Base for models serialized into request bodies."""
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to a JSON-ready dict, dropping unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def wrap_spec(request: RequestModel) -> Dict[str, Any]:
    """Nest a request payload under the ``spec`` key."""
    return {"spec": request.to_payload()}


class ResourceMetadata(ResponseModel):
    """Server-side metadata attached to every resource."""
    self_link: Optional[str] = Field(None, alias="self", description="Canonical URL of the resource")
    resource_name: Optional[str] = Field(None, description="Confluent Resource Name")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None


class ListMetadata(ResponseModel):
    """Pagination metadata of a list response."""
    first: Optional[str] = None
    last: Optional[str] = None
    prev: Optional[str] = None
    next: Optional[str] = None
    total_size: Optional[int] = None

    @property
    def next_page_token(self) -> Optional[str]:
        """Page token of the next page, if there is one."""
        if not self.next:
            return None
        tokens = parse_qs(urlparse(self.next).query).get("page_token")
        return tokens[0] if tokens else None


class CCloudObject(ResponseModel):
    """Type information carried by every response object."""
    api_version: Optional[str] = None
    kind: Optional[str] = None


class CCloudResource(CCloudObject):
    """Common envelope of an identifiable resource."""
    id: str = Field(..., description="Resource identifier")
    metadata: ResourceMetadata = Field(default_factory=ResourceMetadata)


class ObjectReference(ResponseModel):
    """Back-reference to a related resource."""
    id: str = Field(..., description="Referenced resource identifier")
    environment: Optional[str] = None
    related: Optional[str] = None
    resource_name: Optional[str] = None
    api_version: Optional[str] = None
    kind: Optional[str] = None


class EnvironmentScopedReference(RequestModel):
    """Reference to a resource in a request body."""
    id: str = Field(..., min_length=1, description="Referenced resource identifier")
    environment: Optional[str] = Field(None, description="Owning environment, omitted when empty")


class QueryOptions(BaseModel):
    """Structured URL query parameters.

    Field aliases are the query parameter names. Fields left as ``None`` or
    empty are omitted from the query string.
    """
    model_config = ConfigDict(populate_by_name=True)

    def to_query_params(self) -> Dict[str, str]:
        """Encode the non-empty fields as query parameters."""
        params = {}
        for name, value in self.model_dump(by_alias=True, exclude_none=True).items():
            if value == "" or value == 0:
                continue
            params[name] = str(value)
        return params


class PaginationOptions(QueryOptions):
    """Page size and token of a list call."""
    page_size: Optional[int] = Field(None, ge=1, description="Maximum number of items per page")
    page_token: Optional[str] = Field(None, description="Token of the page to fetch")
