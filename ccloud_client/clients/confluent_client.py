"""HTTP transport and client facade for the Confluent Cloud REST APIs."""

import logging
from typing import Any, Dict, FrozenSet, Optional, Tuple, Type

import requests
from pydantic import ValidationError

from ccloud_client.clients.api_key_operations import APIKeyOperations
from ccloud_client.clients.base import ModelT
from ccloud_client.clients.cluster_operations import KafkaClusterOperations
from ccloud_client.clients.environment_operations import EnvironmentOperations
from ccloud_client.clients.service_account_operations import ServiceAccountOperations
from ccloud_client.config import ClientConfig, config
from ccloud_client.exceptions import DecodeError, TransportError, UnexpectedStatusError
from ccloud_client.models.common import QueryOptions

logger = logging.getLogger(__name__)


class ConfluentClient:
    """Synchronous client for the control-plane and data-plane REST APIs.

    Resource operations are grouped by type::

        client = ConfluentClient(ClientConfig(api_key="...", api_secret="..."))
        clusters = client.clusters.list_kafka_clusters(
            KafkaClusterListOptions(environment_id="env-123")
        )

    The client holds no mutable state besides the ``requests.Session``, so it
    is as safe to share between threads as the session is.
    """

    def __init__(self, client_config: Optional[ClientConfig] = None,
                 session: Optional[requests.Session] = None):
        """Initialize the client.

        Args:
            client_config: Base URL, credentials and timeout. Defaults to the
                configuration loaded from the environment.
            session: Pre-configured session to issue requests with.
        """
        self.client_config = client_config or config.client
        self.session = session or requests.Session()
        self.session.auth = self.client_config.credentials
        self.session.headers.update({
            'Accept': 'application/json',
            'User-Agent': self.client_config.user_agent
        })

        self.clusters = KafkaClusterOperations(self)
        self.api_keys = APIKeyOperations(self)
        self.environments = EnvironmentOperations(self)
        self.service_accounts = ServiceAccountOperations(self)

        logger.debug(f"Created Confluent Cloud client for {self.client_config.base_url}")

    def do_request(self, path: str, method: str, body: Optional[Any] = None,
                   query_options: Optional[QueryOptions] = None) -> requests.Response:
        """Issue a control-plane request against the configured base URL.

        The caller owns the returned response and must close it.
        """
        return self._send(self.client_config.base_url, path, method, body, query_options,
                          self.client_config.credentials)

    def do_request_by_host(self, host: str, path: str, method: str, body: Optional[Any] = None,
                           query_options: Optional[QueryOptions] = None,
                           auth: Optional[Tuple[str, str]] = None) -> requests.Response:
        """Issue a request against an explicit host, e.g. a cluster REST endpoint.

        Data-plane calls authenticate with the cluster API key when one is
        configured. The caller owns the returned response and must close it.
        """
        return self._send(host, path, method, body, query_options,
                          auth or self.client_config.kafka_credentials)

    def execute(
        self,
        operation: str,
        method: str,
        path: str,
        expected_status: FrozenSet[int],
        body: Optional[Any] = None,
        query_options: Optional[QueryOptions] = None,
        response_model: Optional[Type[ModelT]] = None,
        host: Optional[str] = None
    ) -> Optional[ModelT]:
        """Run one request and decode its response.

        The response is closed on every exit path. Failures from ``requests``
        and from JSON or model decoding are not raised as-is: they arrive as
        ``TransportError`` and ``DecodeError``, with the original exception in
        ``cause`` and as ``__cause__``.

        Args:
            operation: Human-readable operation name used in errors and logs
            method: HTTP verb
            path: API route
            expected_status: Status codes documented as success
            body: JSON-serializable payload
            query_options: Structured query parameters
            response_model: Model to decode the body into, ``None`` to ignore the body
            host: Data-plane host, ``None`` for the control plane

        Returns:
            The decoded model, or ``None`` when no model was requested

        Raises:
            TransportError: If no response was received
            UnexpectedStatusError: If the status code is not in ``expected_status``
            DecodeError: If the body does not match ``response_model``
        """
        if host is None:
            response = self.do_request(path, method, body, query_options)
        else:
            response = self.do_request_by_host(host, path, method, body, query_options)

        try:
            if response.status_code not in expected_status:
                body_text = response.text
                logger.warning(
                    f"Failed to {operation}: {response.status_code} {response.reason} - {body_text}",
                    extra={'operation': operation, 'method': method, 'path': path,
                           'status_code': response.status_code}
                )
                raise UnexpectedStatusError(
                    operation=operation,
                    status_code=response.status_code,
                    reason=response.reason,
                    expected=expected_status,
                    body=body_text
                )

            if response_model is None:
                return None

            try:
                payload = response.json()
            except ValueError as e:
                raise DecodeError(f"Response of {operation} is not valid JSON: {e}",
                                  operation=operation, cause=e) from e

            try:
                return response_model.model_validate(payload)
            except ValidationError as e:
                raise DecodeError(f"Unexpected response shape for {operation}",
                                  operation=operation, cause=e) from e
        finally:
            response.close()

    def _send(self, host: str, path: str, method: str, body: Optional[Any],
              query_options: Optional[QueryOptions], auth: Tuple[str, str]) -> requests.Response:
        """Perform one HTTP round trip."""
        url = self._build_url(host, path)
        params = query_options.to_query_params() if query_options is not None else None

        headers: Dict[str, str] = {}
        if body is not None:
            headers['Content-Type'] = 'application/json'

        logger.debug(f"{method} {url}", extra={'method': method, 'path': path})

        try:
            response = self.session.request(
                method,
                url,
                params=params or None,
                json=body,
                headers=headers,
                auth=auth,
                timeout=self.client_config.timeout
            )
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}", method=method, url=url, cause=e) from e

        logger.debug(f"{method} {url} -> {response.status_code}",
                     extra={'method': method, 'path': path, 'status_code': response.status_code})
        return response

    @staticmethod
    def _build_url(host: str, path: str) -> str:
        """Join a host and an API route."""
        if '://' not in host:
            host = f"https://{host}"
        return host.rstrip('/') + '/' + path.lstrip('/')

    def close(self):
        """Close the underlying session."""
        self.session.close()

    def __enter__(self) -> 'ConfluentClient':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


# Global client instance
_confluent_client: Optional[ConfluentClient] = None


def get_confluent_client() -> ConfluentClient:
    """Get or create the global client built from environment configuration."""
    global _confluent_client
    if _confluent_client is None:
        config.client.validate()
        _confluent_client = ConfluentClient(config.client)
    return _confluent_client


def close_confluent_client():
    """Close the global client."""
    global _confluent_client
    if _confluent_client:
        _confluent_client.close()
        _confluent_client = None
