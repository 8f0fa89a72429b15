"""Base class for resource operation groups."""

from typing import TYPE_CHECKING, Any, Dict, FrozenSet, Optional, Type, TypeVar
from urllib.parse import quote

from pydantic import BaseModel

from ccloud_client.models.common import QueryOptions

if TYPE_CHECKING:
    from ccloud_client.clients.confluent_client import ConfluentClient

ModelT = TypeVar('ModelT', bound=BaseModel)


def path_segment(value: str) -> str:
    """Escape a value interpolated into a URL path."""
    return quote(str(value), safe='')


class ResourceOperations:
    """Operations on one resource type.

    Subclasses declare ``EXPECTED_STATUS``: for each operation, the exact
    status codes the API documents as success. Every other code, including
    other 2xx codes, is reported as an error.
    """

    EXPECTED_STATUS: Dict[str, FrozenSet[int]] = {}

    def __init__(self, client: 'ConfluentClient'):
        """Initialize operations with the owning client."""
        self.client = client

    def _call(
        self,
        operation: str,
        method: str,
        path: str,
        body: Optional[Any] = None,
        query_options: Optional[QueryOptions] = None,
        response_model: Optional[Type[ModelT]] = None,
        host: Optional[str] = None
    ) -> Optional[ModelT]:
        """Execute ``operation`` with its documented success codes."""
        return self.client.execute(
            operation=operation.replace('_', ' '),
            method=method,
            path=path,
            expected_status=self.EXPECTED_STATUS[operation],
            body=body,
            query_options=query_options,
            response_model=response_model,
            host=host
        )
