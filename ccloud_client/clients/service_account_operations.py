"""Service account operations."""

import logging
from typing import Optional

from ccloud_client.clients.base import ResourceOperations, path_segment
from ccloud_client.models.service_account import (
    ServiceAccount, ServiceAccountCreateRequest, ServiceAccountList,
    ServiceAccountListOptions, ServiceAccountUpdateRequest
)

logger = logging.getLogger(__name__)

SERVICE_ACCOUNTS_PATH = "/iam/v2/service-accounts"


class ServiceAccountOperations(ResourceOperations):
    """Service account management."""

    EXPECTED_STATUS = {
        'list_service_accounts': frozenset({200}),
        'get_service_account': frozenset({200}),
        'create_service_account': frozenset({201}),
        'update_service_account': frozenset({200}),
        'delete_service_account': frozenset({204}),
    }

    def list_service_accounts(self, options: Optional[ServiceAccountListOptions] = None) -> ServiceAccountList:
        """List one page of service accounts."""
        return self._call('list_service_accounts', 'GET', SERVICE_ACCOUNTS_PATH,
                          query_options=options, response_model=ServiceAccountList)

    def get_service_account(self, service_account_id: str) -> ServiceAccount:
        """Get a single service account."""
        path = f"{SERVICE_ACCOUNTS_PATH}/{path_segment(service_account_id)}"
        return self._call('get_service_account', 'GET', path, response_model=ServiceAccount)

    def create_service_account(self, create: ServiceAccountCreateRequest) -> ServiceAccount:
        """Create a service account to own API keys."""
        account = self._call('create_service_account', 'POST', SERVICE_ACCOUNTS_PATH,
                             body=create.to_payload(), response_model=ServiceAccount)
        logger.info(f"Created service account {account.id} ({create.display_name})")
        return account

    def update_service_account(self, service_account_id: str,
                               update: ServiceAccountUpdateRequest) -> ServiceAccount:
        """Change the description of a service account."""
        path = f"{SERVICE_ACCOUNTS_PATH}/{path_segment(service_account_id)}"
        return self._call('update_service_account', 'PATCH', path,
                          body=update.to_payload(), response_model=ServiceAccount)

    def delete_service_account(self, service_account_id: str) -> None:
        """Delete a service account."""
        path = f"{SERVICE_ACCOUNTS_PATH}/{path_segment(service_account_id)}"
        self._call('delete_service_account', 'DELETE', path)
        logger.info(f"Deleted service account {service_account_id}")
