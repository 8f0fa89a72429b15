"""Environment operations."""

import logging
from typing import Optional

from ccloud_client.clients.base import ResourceOperations, path_segment
from ccloud_client.models.environment import (
    Environment, EnvironmentCreateRequest, EnvironmentList, EnvironmentListOptions,
    EnvironmentUpdateRequest
)

logger = logging.getLogger(__name__)

ENVIRONMENTS_PATH = "/org/v2/environments"


class EnvironmentOperations(ResourceOperations):
    """Environment management. Bodies are sent unwrapped."""

    EXPECTED_STATUS = {
        'list_environments': frozenset({200}),
        'get_environment': frozenset({200}),
        'create_environment': frozenset({201}),
        'update_environment': frozenset({200}),
        'delete_environment': frozenset({204}),
    }

    def list_environments(self, options: Optional[EnvironmentListOptions] = None) -> EnvironmentList:
        """List one page of environments."""
        return self._call('list_environments', 'GET', ENVIRONMENTS_PATH,
                          query_options=options, response_model=EnvironmentList)

    def get_environment(self, environment_id: str) -> Environment:
        """Get a single environment."""
        return self._call('get_environment', 'GET', f"{ENVIRONMENTS_PATH}/{path_segment(environment_id)}",
                          response_model=Environment)

    def create_environment(self, create: EnvironmentCreateRequest) -> Environment:
        """Create an environment."""
        environment = self._call('create_environment', 'POST', ENVIRONMENTS_PATH,
                                 body=create.to_payload(), response_model=Environment)
        logger.info(f"Created environment {environment.id} ({create.display_name})")
        return environment

    def update_environment(self, environment_id: str, update: EnvironmentUpdateRequest) -> Environment:
        """Rename an environment."""
        return self._call('update_environment', 'PATCH', f"{ENVIRONMENTS_PATH}/{path_segment(environment_id)}",
                          body=update.to_payload(), response_model=Environment)

    def delete_environment(self, environment_id: str) -> None:
        """Delete an environment. The server rejects it while resources remain."""
        self._call('delete_environment', 'DELETE', f"{ENVIRONMENTS_PATH}/{path_segment(environment_id)}")
        logger.info(f"Deleted environment {environment_id}")
