"""API key operations."""

import logging
from typing import Optional

from ccloud_client.clients.base import ResourceOperations, path_segment
from ccloud_client.models.api_key import (
    APIKey, APIKeyList, APIKeyListOptions, CreateAPIKeyRequest, UpdateAPIKeyRequest
)
from ccloud_client.models.common import wrap_spec

logger = logging.getLogger(__name__)

API_KEYS_PATH = "/iam/v2/api-keys"


class APIKeyOperations(ResourceOperations):
    """API key issuance and management."""

    EXPECTED_STATUS = {
        'create_api_key': frozenset({202}),
        'list_api_keys': frozenset({200}),
        'get_api_key': frozenset({200}),
        'update_api_key': frozenset({200}),
        'delete_api_key': frozenset({204}),
    }

    def create_api_key(self, create: CreateAPIKeyRequest) -> APIKey:
        """Issue a new API key.

        The returned key is the only place its secret is ever visible.
        """
        api_key = self._call('create_api_key', 'POST', API_KEYS_PATH,
                             body=wrap_spec(create), response_model=APIKey)
        logger.info(f"Created API key {api_key.id} for owner {create.owner.id} "
                    f"on resource {create.resource.id}")
        return api_key

    def list_api_keys(self, options: Optional[APIKeyListOptions] = None) -> APIKeyList:
        """List one page of API keys, optionally filtered by owner or resource."""
        return self._call('list_api_keys', 'GET', API_KEYS_PATH,
                          query_options=options, response_model=APIKeyList)

    def get_api_key(self, api_key_id: str) -> APIKey:
        """Get an API key. The secret is not included."""
        return self._call('get_api_key', 'GET', f"{API_KEYS_PATH}/{path_segment(api_key_id)}",
                          response_model=APIKey)

    def update_api_key(self, api_key_id: str, update: UpdateAPIKeyRequest) -> APIKey:
        """Change the display name or description of an API key."""
        return self._call('update_api_key', 'PATCH', f"{API_KEYS_PATH}/{path_segment(api_key_id)}",
                          body=wrap_spec(update), response_model=APIKey)

    def delete_api_key(self, api_key_id: str) -> None:
        """Revoke an API key."""
        self._call('delete_api_key', 'DELETE', f"{API_KEYS_PATH}/{path_segment(api_key_id)}")
        logger.info(f"Deleted API key {api_key_id}")
