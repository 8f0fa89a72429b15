"""Typed request and response models."""

from ccloud_client.models.common import (
    CCloudObject,
    CCloudResource,
    CloudProvider,
    EnvironmentScopedReference,
    ListMetadata,
    ObjectReference,
    PaginationOptions,
    QueryOptions,
    ResourceMetadata,
)
from ccloud_client.models.cluster import (
    ConfigOperation,
    KafkaCluster,
    KafkaClusterAvailability,
    KafkaClusterConfigUpdateData,
    KafkaClusterConfigUpdateRequest,
    KafkaClusterCreateConfig,
    KafkaClusterCreateRequest,
    KafkaClusterKind,
    KafkaClusterList,
    KafkaClusterListOptions,
    KafkaClusterPhase,
    KafkaClusterUpdateConfig,
    KafkaClusterUpdateRequest,
)
from ccloud_client.models.api_key import (
    APIKey,
    APIKeyList,
    APIKeyListOptions,
    APIKeySpec,
    CreateAPIKeyRequest,
    UpdateAPIKeyRequest,
)
from ccloud_client.models.environment import (
    Environment,
    EnvironmentCreateRequest,
    EnvironmentList,
    EnvironmentListOptions,
    EnvironmentUpdateRequest,
)
from ccloud_client.models.service_account import (
    ServiceAccount,
    ServiceAccountCreateRequest,
    ServiceAccountList,
    ServiceAccountListOptions,
    ServiceAccountUpdateRequest,
)

__all__ = [
    "APIKey",
    "APIKeyList",
    "APIKeyListOptions",
    "APIKeySpec",
    "CCloudObject",
    "CCloudResource",
    "CloudProvider",
    "ConfigOperation",
    "CreateAPIKeyRequest",
    "Environment",
    "EnvironmentCreateRequest",
    "EnvironmentList",
    "EnvironmentListOptions",
    "EnvironmentScopedReference",
    "EnvironmentUpdateRequest",
    "KafkaCluster",
    "KafkaClusterAvailability",
    "KafkaClusterConfigUpdateData",
    "KafkaClusterConfigUpdateRequest",
    "KafkaClusterCreateConfig",
    "KafkaClusterCreateRequest",
    "KafkaClusterKind",
    "KafkaClusterList",
    "KafkaClusterListOptions",
    "KafkaClusterPhase",
    "KafkaClusterUpdateConfig",
    "KafkaClusterUpdateRequest",
    "ListMetadata",
    "ObjectReference",
    "PaginationOptions",
    "QueryOptions",
    "ResourceMetadata",
    "ServiceAccount",
    "ServiceAccountCreateRequest",
    "ServiceAccountList",
    "ServiceAccountListOptions",
    "ServiceAccountUpdateRequest",
    "UpdateAPIKeyRequest",
]
