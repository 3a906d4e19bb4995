"""
Fluent item access: table(name).at(key).get() / .put(data).

table() and at() only capture arguments; each get() or put() issues a single
request. Payloads are stored in the JSON envelope attribute (see utils).
"""

from typing import Any, Dict, Mapping, Optional

from ..utils import unwrap_item, validate_key, wrap_item
from .client import DynamoClient, get_client


class TableRef:
    """A table name bound to an optional client handle."""

    def __init__(self, name: Optional[str] = None, client: Optional[DynamoClient] = None):
        self.name = name
        self._client = client

    @property
    def client(self) -> DynamoClient:
        """The bound handle, or the process-wide default looked up now."""
        if self._client is not None:
            return self._client
        return get_client()

    def at(self, key: Mapping[str, Any]) -> "ItemRef":
        """Select a single item by its partition key (and sort key).

        Raises:
            ValidationError: The key is empty, not a mapping, or uses the
                reserved envelope attribute
        """
        return ItemRef(self, validate_key(key))

    def __repr__(self) -> str:
        return f"TableRef(name={self.name!r})"


class ItemRef:
    """One item of a table, identified by its key attributes."""

    def __init__(self, table: TableRef, key: Dict[str, Any]):
        self.table = table
        self.key = key

    def get(self) -> Any:
        """
        Read the item.

        Returns:
            The stored payload when the item was written by put(), the raw
            attributes for items written by other tools, or None when no
            item exists

        Raises:
            UninitializedClientError: No handle bound and init() not called
            ConfigurationError: No table name available
        """
        client = self.table.client
        table_name = client.resolve_table_name(self.table.name)
        return unwrap_item(client.get_item(table_name, self.key))

    def put(self, data: Any) -> Dict[str, Any]:
        """
        Overwrite the item with ``data``.

        No condition is applied: an existing item is replaced, not merged.

        Returns:
            Raw PutItem response

        Raises:
            UninitializedClientError: No handle bound and init() not called
            ConfigurationError: No table name available
            SerializationError: ``data`` is not JSON serializable; nothing
                is sent
        """
        client = self.table.client
        table_name = client.resolve_table_name(self.table.name)
        item = wrap_item(self.key, data, table_name)
        return client.put_item(table_name, item)

    def __repr__(self) -> str:
        return f"ItemRef(table={self.table.name!r}, key={self.key!r})"


def table(name: Optional[str] = None, client: Optional[DynamoClient] = None) -> TableRef:
    """
    Start a fluent item access chain.

    Args:
        name: Table name; defaults to DYNAMODB_TABLE from the client's
            configuration
        client: Handle returned by init(); defaults to the process-wide one

    Example:
        item = table('users').at({'pk': 'u1', 'sk': 1711900504}).get()
    """
    return TableRef(name, client=client)
