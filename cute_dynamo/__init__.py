"""
cute_dynamo

Fluent point reads and writes for DynamoDB:

    from cute_dynamo import init, table

    init()  # AWS_REGION plus AWS_IDENTITY_POOL_ID or access keys
    table('users').at({'pk': 'u1', 'sk': 'profile'}).put({'name': 'Ada'})
    table('users').at({'pk': 'u1', 'sk': 'profile'}).get()
"""

from .config import DynamoConfig
from .exceptions import (
    BACKEND_ERRORS,
    ConfigurationError,
    ConnectionError,
    CuteDynamoError,
    SerializationError,
    UninitializedClientError,
    ValidationError,
)
from .core import (
    DynamoClient,
    FederatedCredentials,
    ItemRef,
    StaticCredentials,
    TableRef,
    get_client,
    init,
    reset,
    resolve_credentials,
    table,
)
from .utils import ENVELOPE_ATTRIBUTE

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "DynamoConfig",

    # Exceptions
    "BACKEND_ERRORS",
    "ConfigurationError",
    "ConnectionError",
    "CuteDynamoError",
    "SerializationError",
    "UninitializedClientError",
    "ValidationError",

    # Credentials
    "FederatedCredentials",
    "StaticCredentials",
    "resolve_credentials",

    # Client handle
    "DynamoClient",
    "get_client",
    "init",
    "reset",

    # Fluent item access
    "ItemRef",
    "TableRef",
    "table",
    "ENVELOPE_ATTRIBUTE",
]
