import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file if it exists
load_dotenv()


class DynamoConfig(BaseModel):
    """Configuration for the DynamoDB client handle created by init()."""

    region_name: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_REGION"),
        description="AWS region name (boto3 resolves it when unset)"
    )

    # Credential strategy: identity pool wins when both are present
    identity_pool_id: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_IDENTITY_POOL_ID"),
        description="Cognito identity pool id for federated credentials"
    )

    access_key_id: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_ACCESS_KEY_ID"),
        description="AWS access key ID"
    )

    secret_access_key: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_SECRET_ACCESS_KEY"),
        description="AWS secret access key"
    )

    # Table used when table() is called without a name
    table_name: Optional[str] = Field(
        default_factory=lambda: os.getenv("DYNAMODB_TABLE"),
        description="Default DynamoDB table name"
    )

    # DynamoDB specific settings
    endpoint_url: Optional[str] = Field(
        default_factory=lambda: os.getenv("DYNAMODB_ENDPOINT_URL"),
        description="DynamoDB endpoint URL (for local development)"
    )

    # Connection settings
    max_pool_connections: int = Field(
        default=50,
        ge=1,
        description="Maximum number of connections in the connection pool"
    )

    retries: int = Field(
        default=3,
        ge=0,
        description="Number of retry attempts botocore makes for failed requests"
    )

    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Connect and read timeout in seconds"
    )

    # Logging settings
    enable_debug_logging: bool = Field(
        default_factory=lambda: os.getenv("DYNAMODB_DEBUG_LOGGING", "false").lower() == "true",
        description="Enable debug logging for DynamoDB operations"
    )

    @field_validator(
        'region_name', 'identity_pool_id', 'access_key_id',
        'secret_access_key', 'table_name', 'endpoint_url',
        mode='before'
    )
    @classmethod
    def blank_as_unset(cls, v):
        """Treat empty strings (e.g. ``AWS_REGION=``) as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def has_static_keys(self) -> bool:
        return bool(self.access_key_id and self.secret_access_key)

    @property
    def strategy(self) -> Optional[str]:
        """Credential strategy this configuration selects.

        Returns:
            "federated", "static", or None when neither can be satisfied
        """
        if self.identity_pool_id:
            return "federated"
        if self.has_static_keys:
            return "static"
        return None

    @classmethod
    def from_env(cls) -> 'DynamoConfig':
        """Create configuration from environment variables.

        Returns:
            DynamoConfig instance
        """
        return cls()

    @classmethod
    def for_local_development(cls, endpoint_url: str = "http://localhost:8000", **kwargs) -> 'DynamoConfig':
        """Create configuration for DynamoDB Local or LocalStack.

        Args:
            endpoint_url: Local DynamoDB endpoint
            **kwargs: Additional configuration parameters

        Returns:
            DynamoConfig instance using dummy static keys
        """
        options = {
            "access_key_id": "local",
            "secret_access_key": "local",
            "region_name": "us-east-1",
            "identity_pool_id": None,
            "endpoint_url": endpoint_url,
            "enable_debug_logging": True,
        }
        options.update(kwargs)
        return cls(**options)

    model_config = ConfigDict(
        validate_assignment=True,
        validate_default=True,
        extra='forbid'
    )
