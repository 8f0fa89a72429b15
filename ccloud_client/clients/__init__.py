"""Confluent Cloud REST clients."""

from ccloud_client.clients.confluent_client import (
    ConfluentClient,
    close_confluent_client,
    get_confluent_client,
)
from ccloud_client.clients.api_key_operations import APIKeyOperations
from ccloud_client.clients.cluster_operations import KafkaClusterOperations
from ccloud_client.clients.environment_operations import EnvironmentOperations
from ccloud_client.clients.service_account_operations import ServiceAccountOperations

__all__ = [
    "APIKeyOperations",
    "ConfluentClient",
    "EnvironmentOperations",
    "KafkaClusterOperations",
    "ServiceAccountOperations",
    "close_confluent_client",
    "get_confluent_client",
]
