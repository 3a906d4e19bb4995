"""
Credential Resolution

Turns a DynamoConfig into one of two credential strategies:

1. Federated: temporary credentials from a Cognito identity pool. The
   GetId/GetCredentialsForIdentity exchange is deferred until botocore first
   signs a request and is refreshed by botocore when the credentials expire.
2. Static: an access key id and secret access key used as-is.

The identity pool always wins when both are configured.
"""

import logging
from typing import Any, Dict, Literal, Optional, Union

import boto3
import botocore.session
from botocore import UNSIGNED
from botocore import credentials as botocore_credentials
from botocore.config import Config
from pydantic import BaseModel, ConfigDict, Field

from ..config import DynamoConfig
from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class StaticCredentials(BaseModel):
    """Long-lived access key pair."""

    kind: Literal["static"] = "static"
    access_key_id: str
    secret_access_key: str = Field(repr=False)

    model_config = ConfigDict(frozen=True)


class FederatedCredentials(BaseModel):
    """Cognito identity pool credentials, fetched lazily."""

    kind: Literal["federated"] = "federated"
    region_name: str
    identity_pool_id: str

    model_config = ConfigDict(frozen=True)


Credentials = Union[FederatedCredentials, StaticCredentials]


def resolve_credentials(config: DynamoConfig) -> Credentials:
    """Pick the credential strategy for a configuration.

    Args:
        config: DynamoDB configuration

    Returns:
        FederatedCredentials when an identity pool id is set, otherwise
        StaticCredentials

    Raises:
        ConfigurationError: No strategy can be satisfied, or the identity
            pool is configured without a region
    """
    if config.identity_pool_id:
        if config.has_static_keys:
            logger.warning(
                "Both AWS_IDENTITY_POOL_ID and static access keys are configured; "
                "using the identity pool and ignoring the access keys"
            )
        if not config.region_name:
            raise ConfigurationError(
                "Identity pool credentials require a region",
                missing=["region_name"],
            )
        return FederatedCredentials(
            region_name=config.region_name,
            identity_pool_id=config.identity_pool_id,
        )

    if config.has_static_keys:
        return StaticCredentials(
            access_key_id=config.access_key_id,
            secret_access_key=config.secret_access_key,
        )

    missing = [
        name for name in ("access_key_id", "secret_access_key")
        if not getattr(config, name)
    ]
    raise ConfigurationError(
        "Insufficient credentials provided: set identity_pool_id, "
        "or both access_key_id and secret_access_key",
        missing=["identity_pool_id"] + missing,
    )


class CognitoIdentityProvider(botocore_credentials.CredentialProvider):
    """botocore credential provider backed by a Cognito identity pool.

    Only unauthenticated identities are supported; the Cognito calls are
    unsigned.
    """

    METHOD = "cognito-identity-pool"
    CANONICAL_NAME = "CognitoIdentityPool"

    def __init__(self, identity_pool_id: str, region_name: str, client=None):
        super().__init__()
        self.identity_pool_id = identity_pool_id
        self.region_name = region_name
        self._client = client
        self._identity_id: Optional[str] = None

    @property
    def client(self):
        """Lazy initialization of the unsigned cognito-identity client."""
        if self._client is None:
            self._client = boto3.Session(region_name=self.region_name).client(
                'cognito-identity',
                config=Config(signature_version=UNSIGNED)
            )
        return self._client

    def fetch_credentials(self) -> Dict[str, Any]:
        """Exchange the pool id for temporary credentials.

        The identity id is obtained once and reused on every refresh.
        """
        if self._identity_id is None:
            response = self.client.get_id(IdentityPoolId=self.identity_pool_id)
            self._identity_id = response['IdentityId']

        response = self.client.get_credentials_for_identity(IdentityId=self._identity_id)
        creds = response['Credentials']
        logger.info(f"Fetched Cognito credentials for identity {self._identity_id}")

        return {
            'access_key': creds['AccessKeyId'],
            'secret_key': creds['SecretKey'],
            'token': creds['SessionToken'],
            'expiry_time': creds['Expiration'].isoformat(),
        }

    def load(self):
        return botocore_credentials.DeferredRefreshableCredentials(
            refresh_using=self.fetch_credentials,
            method=self.METHOD,
        )


def build_session(credentials: Credentials, region_name: Optional[str] = None, cognito_client=None) -> boto3.Session:
    """Create a boto3 Session that signs with the given credentials.

    Args:
        credentials: Resolved credentials
        region_name: Region for static credentials (federated credentials
            carry their own)
        cognito_client: Optional pre-built cognito-identity client

    Returns:
        boto3 Session
    """
    if isinstance(credentials, FederatedCredentials):
        provider = CognitoIdentityProvider(
            credentials.identity_pool_id,
            credentials.region_name,
            client=cognito_client,
        )
        botocore_session = botocore.session.get_session()
        botocore_session.register_component(
            'credential_provider',
            botocore_credentials.CredentialResolver(providers=[provider])
        )
        return boto3.Session(
            botocore_session=botocore_session,
            region_name=credentials.region_name
        )

    return boto3.Session(
        aws_access_key_id=credentials.access_key_id,
        aws_secret_access_key=credentials.secret_access_key,
        region_name=region_name
    )
