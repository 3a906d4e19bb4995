"""
Test configuration and fixtures for cute_dynamo.

Provides a clean AWS environment per test, reset of the default client
handle, and moto-backed DynamoDB tables.
"""

import boto3
import pytest
from moto import mock_aws

from cute_dynamo import DynamoConfig, init, reset

AWS_ENV_VARS = [
    "AWS_REGION",
    "AWS_DEFAULT_REGION",
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
    "AWS_IDENTITY_POOL_ID",
    "DYNAMODB_TABLE",
    "DYNAMODB_ENDPOINT_URL",
    "DYNAMODB_DEBUG_LOGGING",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove AWS settings from the environment and forget the default client."""
    for name in AWS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset()
    yield
    reset()


@pytest.fixture
def static_config():
    """Static-key configuration for mocked testing."""
    return DynamoConfig(
        region_name="us-east-1",
        access_key_id="test_key",
        secret_access_key="test_secret",
        identity_pool_id=None,
        table_name="users",
        endpoint_url=None,  # Use default AWS endpoint for moto
    )


@pytest.fixture
def mock_dynamodb_resource():
    """Mock DynamoDB resource."""
    with mock_aws():
        yield boto3.resource('dynamodb', region_name='us-east-1')


@pytest.fixture
def users_table(mock_dynamodb_resource):
    """Create users table keyed by pk (HASH) and sk (RANGE)."""
    return mock_dynamodb_resource.create_table(
        TableName='users',
        KeySchema=[
            {'AttributeName': 'pk', 'KeyType': 'HASH'},
            {'AttributeName': 'sk', 'KeyType': 'RANGE'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'pk', 'AttributeType': 'S'},
            {'AttributeName': 'sk', 'AttributeType': 'S'}
        ],
        BillingMode='PAY_PER_REQUEST'
    )


@pytest.fixture
def single_key_users_table(mock_dynamodb_resource):
    """Create users table keyed by pk only."""
    return mock_dynamodb_resource.create_table(
        TableName='users',
        KeySchema=[
            {'AttributeName': 'pk', 'KeyType': 'HASH'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'pk', 'AttributeType': 'S'}
        ],
        BillingMode='PAY_PER_REQUEST'
    )


@pytest.fixture
def events_table(mock_dynamodb_resource):
    """Create events table with a numeric sort key."""
    return mock_dynamodb_resource.create_table(
        TableName='events',
        KeySchema=[
            {'AttributeName': 'device', 'KeyType': 'HASH'},
            {'AttributeName': 'ts', 'KeyType': 'RANGE'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'device', 'AttributeType': 'S'},
            {'AttributeName': 'ts', 'AttributeType': 'N'}
        ],
        BillingMode='PAY_PER_REQUEST'
    )


@pytest.fixture
def client(static_config, users_table):
    """Default client handle initialized against the mocked users table."""
    return init(static_config)
