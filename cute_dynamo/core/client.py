"""
DynamoDB Client Handle

init() resolves credentials, builds a DynamoClient and publishes it as the
process-wide default used by the module-level table() entry point. The
handle is also returned so callers can thread it explicitly:

    client = init(region_name="us-east-1", identity_pool_id="us-east-1:...")
    client.table("users").at({"pk": "u1"}).get()

Item operations on the default handle look it up when they run, so calling
init() again redirects them to the new handle.
"""

import logging
from typing import Any, Dict, Optional

from botocore.config import Config

from ..config import DynamoConfig
from ..exceptions import BACKEND_ERRORS, ConfigurationError, ConnectionError, UninitializedClientError
from .credentials import Credentials, build_session, resolve_credentials

logger = logging.getLogger(__name__)

_default_client: Optional["DynamoClient"] = None

# Level of the package logger before init() turned debug logging on
_level_before_debug: Optional[int] = None


class DynamoClient:
    """
    Region-bound DynamoDB handle signing with one credential strategy.

    Issues exactly one GetItem or PutItem request per call. Retries,
    connection pooling and error semantics are botocore's.
    """

    def __init__(self, config: DynamoConfig, credentials: Credentials, cognito_client=None):
        """Initialize the client handle.

        Args:
            config: DynamoDB configuration
            credentials: Credentials resolved from the configuration
            cognito_client: Optional cognito-identity client for federated
                credentials
        """
        self.config = config
        self.credentials = credentials
        self._cognito_client = cognito_client
        self._session = None
        self._dynamodb = None
        self._tables: Dict[str, Any] = {}

    @property
    def strategy(self) -> str:
        return self.credentials.kind

    @property
    def session(self):
        """Lazy initialization of the boto3 session."""
        if self._session is None:
            self._session = build_session(
                self.credentials,
                region_name=self.config.region_name,
                cognito_client=self._cognito_client
            )
        return self._session

    @property
    def dynamodb(self):
        """Lazy initialization of DynamoDB resource."""
        if self._dynamodb is None:
            try:
                dynamodb_config = {}

                if self.config.endpoint_url:
                    dynamodb_config['endpoint_url'] = self.config.endpoint_url

                # Add retry and timeout configuration
                boto_config = Config(
                    retries={'max_attempts': self.config.retries},
                    max_pool_connections=self.config.max_pool_connections,
                    read_timeout=self.config.timeout_seconds,
                    connect_timeout=self.config.timeout_seconds
                )
                dynamodb_config['config'] = boto_config

                self._dynamodb = self.session.resource('dynamodb', **dynamodb_config)
            except BACKEND_ERRORS:
                # botocore failures (e.g. NoRegionError) reach the caller as-is
                raise
            except Exception as e:
                logger.error(f"Failed to create DynamoDB resource: {e}")
                raise ConnectionError(f"Failed to connect to DynamoDB: {e}", e) from e
        return self._dynamodb

    def get_table(self, table_name: str):
        """Get the boto3 Table resource for a table, cached per name."""
        table = self._tables.get(table_name)
        if table is None:
            table = self.dynamodb.Table(table_name)
            self._tables[table_name] = table
        return table

    def resolve_table_name(self, table_name: Optional[str] = None) -> str:
        """Return the explicit table name or the configured default.

        Raises:
            ConfigurationError: Neither is set
        """
        name = table_name or self.config.table_name
        if not name:
            raise ConfigurationError(
                "No table name given and DYNAMODB_TABLE is not set",
                missing=["table_name"]
            )
        return name

    def get_item(self, table_name: str, key: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Point lookup of a single item.

        Args:
            table_name: DynamoDB table name
            key: Full primary key of the item

        Returns:
            The stored item attributes, or None when no item exists
        """
        logger.debug(f"GetItem on {table_name}: {key}")
        response = self.get_table(table_name).get_item(Key=key)
        return response.get('Item')

    def put_item(self, table_name: str, item: Dict[str, Any]) -> Dict[str, Any]:
        """
        Unconditional overwrite of a single item.

        Args:
            table_name: DynamoDB table name
            item: Complete item including key attributes

        Returns:
            Raw PutItem response
        """
        logger.debug(f"PutItem on {table_name}: {sorted(item)}")
        return self.get_table(table_name).put_item(Item=item)

    def table(self, name: Optional[str] = None):
        """Fluent entry point bound to this handle."""
        # Imported here to avoid a circular import (items -> client)
        from .items import TableRef
        return TableRef(name, client=self)

    def __repr__(self) -> str:
        return f"DynamoClient(strategy={self.strategy!r}, region_name={self.config.region_name!r})"


def init(config: Optional[DynamoConfig] = None, **options: Any) -> DynamoClient:
    """
    Resolve credentials and publish a new default client handle.

    Supports two authentication methods:
    1. Cognito identity pool (``identity_pool_id`` + ``region_name``),
       for code running without long-lived keys
    2. Static keys (``access_key_id`` + ``secret_access_key``)

    Every option falls back to its environment variable (AWS_REGION,
    AWS_IDENTITY_POOL_ID, AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY,
    DYNAMODB_TABLE). The identity pool wins when both are available.

    Args:
        config: Complete configuration; when omitted one is built from
            ``options`` and the environment
        **options: DynamoConfig fields, overriding ``config`` when both
            are given

    Returns:
        The new DynamoClient, also installed as the process-wide default

    Raises:
        ConfigurationError: Neither credential strategy can be satisfied

    Example:
        init()
        init(region_name='us-east-1', identity_pool_id='us-east-1:example')
        init(region_name='us-east-1', access_key_id='AKIAEXAMPLE',
             secret_access_key='secret')
    """
    global _default_client, _level_before_debug

    if config is None:
        config = DynamoConfig(**options)
    elif options:
        config = DynamoConfig(**{**config.model_dump(), **options})

    package_logger = logging.getLogger("cute_dynamo")
    if config.enable_debug_logging:
        if _level_before_debug is None:
            _level_before_debug = package_logger.level
        package_logger.setLevel(logging.DEBUG)
    elif _level_before_debug is not None:
        package_logger.setLevel(_level_before_debug)
        _level_before_debug = None

    credentials = resolve_credentials(config)
    client = DynamoClient(config, credentials)

    if _default_client is not None:
        logger.debug("Replacing existing default DynamoDB client")
    _default_client = client
    logger.info(f"Initialized DynamoDB client with {credentials.kind} credentials (region={config.region_name})")
    return client


def get_client() -> DynamoClient:
    """Return the default client handle.

    Raises:
        UninitializedClientError: init() has not succeeded yet
    """
    if _default_client is None:
        raise UninitializedClientError()
    return _default_client


def reset() -> None:
    """Forget the default client handle."""
    global _default_client
    _default_client = None
