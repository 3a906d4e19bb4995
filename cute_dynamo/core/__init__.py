"""
Core components.

- credentials: credential strategy resolution and boto3 session building
- client: DynamoClient handle and the init()/get_client() registry
- items: fluent table().at().get()/put() access
"""

from .credentials import (
    CognitoIdentityProvider,
    Credentials,
    FederatedCredentials,
    StaticCredentials,
    build_session,
    resolve_credentials,
)
from .client import DynamoClient, get_client, init, reset
from .items import ItemRef, TableRef, table

__all__ = [
    "CognitoIdentityProvider",
    "Credentials",
    "FederatedCredentials",
    "StaticCredentials",
    "build_session",
    "resolve_credentials",
    "DynamoClient",
    "get_client",
    "init",
    "reset",
    "ItemRef",
    "TableRef",
    "table",
]
