"""Kafka cluster models."""

from pydantic import Field, model_validator
from typing import List, Optional
from enum import Enum

from ccloud_client.models.common import (
    CCloudObject, CCloudResource, CloudProvider, EnvironmentScopedReference,
    ListMetadata, ObjectReference, PaginationOptions, RequestModel, ResponseModel
)


class KafkaClusterAvailability(str, Enum):
    """Cluster availability tier."""
    SINGLE_ZONE = "SINGLE_ZONE"
    MULTI_ZONE = "MULTI_ZONE"


class KafkaClusterKind(str, Enum):
    """Cluster type."""
    BASIC = "Basic"
    STANDARD = "Standard"
    DEDICATED = "Dedicated"


class KafkaClusterPhase(str, Enum):
    """Known server-reported lifecycle phases."""
    PROVISIONING = "PROVISIONING"
    PROVISIONED = "PROVISIONED"
    READY = "READY"
    FAILED = "FAILED"


PROVISIONED_PHASES = frozenset({KafkaClusterPhase.PROVISIONED.value, KafkaClusterPhase.READY.value})


class ConfigOperation(str, Enum):
    """Broker config alteration operation."""
    SET = "SET"
    DELETE = "DELETE"


# Response models keep availability, cloud and kind as plain strings so values
# introduced server-side still decode.

class KafkaClusterConfig(ResponseModel):
    """Capacity configuration of a cluster."""
    kind: Optional[str] = None
    cku: Optional[int] = None
    zones: List[str] = Field(default_factory=list)


class KafkaClusterSpec(ResponseModel):
    """Desired state of a cluster."""
    display_name: Optional[str] = None
    availability: Optional[str] = None
    cloud: Optional[str] = None
    region: Optional[str] = None
    kafka_bootstrap_endpoint: Optional[str] = None
    http_endpoint: Optional[str] = None
    config: Optional[KafkaClusterConfig] = None
    network: Optional[ObjectReference] = None
    environment: Optional[ObjectReference] = None


class KafkaClusterStatus(ResponseModel):
    """Observed state of a cluster."""
    phase: Optional[str] = None
    cku: Optional[int] = None


class KafkaCluster(CCloudResource):
    """A managed Kafka cluster."""
    spec: KafkaClusterSpec = Field(default_factory=KafkaClusterSpec)
    status: Optional[KafkaClusterStatus] = None

    @property
    def is_provisioned(self) -> bool:
        """Whether the server reports provisioning as finished."""
        return bool(self.status) and self.status.phase in PROVISIONED_PHASES


class KafkaClusterList(CCloudObject):
    """One page of clusters."""
    metadata: ListMetadata = Field(default_factory=ListMetadata)
    data: List[KafkaCluster] = Field(default_factory=list)


class KafkaClusterListOptions(PaginationOptions):
    """Query options for cluster list, get and delete calls."""
    environment_id: Optional[str] = Field(None, alias="environment", description="Environment filter")


class KafkaClusterCreateConfig(RequestModel):
    """Capacity configuration of a new cluster."""
    kind: KafkaClusterKind = Field(..., description="Cluster type")
    cku: Optional[int] = Field(None, ge=1, description="CKU count, Dedicated clusters only")


class KafkaClusterCreateRequest(RequestModel):
    """Body of a create cluster call."""
    display_name: str = Field(..., min_length=1, description="Cluster name")
    availability: KafkaClusterAvailability = Field(..., description="Availability tier")
    cloud: CloudProvider = Field(..., description="Cloud provider")
    region: str = Field(..., min_length=1, description="Cloud region")
    config: KafkaClusterCreateConfig = Field(..., description="Capacity configuration")
    environment: EnvironmentScopedReference = Field(..., description="Owning environment")
    network: Optional[EnvironmentScopedReference] = Field(None, description="Owning network")


class KafkaClusterUpdateConfig(RequestModel):
    """Capacity change of an existing cluster."""
    kind: KafkaClusterKind = Field(..., description="Cluster type")
    cku: Optional[int] = Field(None, ge=1, description="New CKU count")


class KafkaClusterUpdateRequest(RequestModel):
    """Body of an update cluster call."""
    display_name: Optional[str] = Field(None, min_length=1, description="New cluster name")
    config: Optional[KafkaClusterUpdateConfig] = Field(None, description="New capacity configuration")
    environment: EnvironmentScopedReference = Field(..., description="Owning environment")


class KafkaClusterConfigUpdateData(RequestModel):
    """A single broker config mutation."""
    name: str = Field(..., min_length=1, description="Config name")
    operation: Optional[ConfigOperation] = Field(None, description="SET or DELETE")
    value: Optional[str] = Field(None, description="New config value")

    @model_validator(mode="after")
    def validate_operation_or_value(self):
        """Require at least one of operation or value."""
        if self.operation is None and self.value is None:
            raise ValueError("one of operation or value must be set")
        return self


class KafkaClusterConfigUpdateRequest(RequestModel):
    """Batch of broker config mutations."""
    data: List[KafkaClusterConfigUpdateData] = Field(..., min_length=1)
