"""Pytest configuration and fixtures."""

import pytest
from http import HTTPStatus
from unittest.mock import MagicMock

from ccloud_client.clients.confluent_client import ConfluentClient
from ccloud_client.config import ClientConfig


@pytest.fixture
def client_config():
    """Create test client configuration."""
    return ClientConfig(
        base_url="https://api.test.confluent.cloud",
        api_key="CLOUDKEY",
        api_secret="cloud-secret"
    )


@pytest.fixture
def make_response():
    """Factory for mock ``requests.Response`` objects."""

    def _make_response(status_code, json_data=None, text=None, reason=None):
        response = MagicMock()
        response.status_code = status_code
        response.reason = reason if reason is not None else HTTPStatus(status_code).phrase
        if json_data is None:
            response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
        else:
            response.json.return_value = json_data
        response.text = text if text is not None else ("" if json_data is None else str(json_data))
        return response

    return _make_response


@pytest.fixture
def mock_session():
    """Mock ``requests.Session`` for testing."""
    session = MagicMock()
    session.headers = {}
    return session


@pytest.fixture
def client(client_config, mock_session):
    """Client issuing requests through the mock session."""
    return ConfluentClient(client_config, session=mock_session)


@pytest.fixture
def cluster_json():
    """Cluster document as returned by the control plane."""
    return {
        "api_version": "cmk/v2",
        "kind": "Cluster",
        "id": "lkc-abc123",
        "metadata": {
            "self": "https://api.confluent.cloud/cmk/v2/clusters/lkc-abc123",
            "resource_name": "crn://confluent.cloud/organization=org-1/environment=env-1/cloud-cluster=lkc-abc123",
            "created_at": "2024-01-15T10:00:00Z",
            "updated_at": "2024-01-15T10:05:00Z"
        },
        "spec": {
            "display_name": "prod",
            "availability": "SINGLE_ZONE",
            "cloud": "AWS",
            "region": "us-east-1",
            "config": {"kind": "Basic"},
            "kafka_bootstrap_endpoint": "SASL_SSL://pkc-00000.us-east-1.aws.confluent.cloud:9092",
            "http_endpoint": "https://pkc-00000.us-east-1.aws.confluent.cloud:443",
            "environment": {
                "id": "env-1",
                "related": "https://api.confluent.cloud/v2/environments/env-1",
                "resource_name": "crn://confluent.cloud/organization=org-1/environment=env-1"
            }
        },
        "status": {"phase": "PROVISIONING"}
    }


@pytest.fixture
def api_key_json():
    """API key document as returned by the create call."""
    return {
        "api_version": "iam/v2",
        "kind": "ApiKey",
        "id": "ABCDEFGHIJKLMNOP",
        "metadata": {"created_at": "2024-01-15T10:00:00Z"},
        "spec": {
            "secret": "s3cr3t",
            "display_name": "CI key",
            "description": "Key used by CI",
            "owner": {"id": "sa-123", "kind": "ServiceAccount", "api_version": "iam/v2"},
            "resource": {"id": "lkc-abc123", "environment": "env-1", "kind": "Cluster",
                         "api_version": "cmk/v2"}
        }
    }
