"""
Confluent Cloud client

A typed client for the managed-Kafka control-plane REST API (clusters,
API keys, environments, service accounts) and the per-cluster REST API
used to alter broker configs.
"""

__version__ = "0.1.0"

from ccloud_client.clients.confluent_client import (  # noqa: E402
    ConfluentClient,
    close_confluent_client,
    get_confluent_client,
)
from ccloud_client.config import ClientConfig, Config  # noqa: E402
from ccloud_client.exceptions import (  # noqa: E402
    CCloudError,
    ConfigurationError,
    DecodeError,
    ErrorCode,
    TransportError,
    UnexpectedStatusError,
)

__all__ = [
    "CCloudError",
    "ClientConfig",
    "Config",
    "ConfigurationError",
    "ConfluentClient",
    "DecodeError",
    "ErrorCode",
    "TransportError",
    "UnexpectedStatusError",
    "close_confluent_client",
    "get_confluent_client",
    "__version__",
]
