#!/usr/bin/env python3
"""
Basic usage examples for cute_dynamo.

This example demonstrates:
1. Initializing with static keys or a Cognito identity pool
2. Writing and reading a structured value with table().at()
3. Reading items written by other tools
4. Threading an explicit client handle
"""

import logging
import os

from cute_dynamo import (
    BACKEND_ERRORS,
    ConfigurationError,
    DynamoConfig,
    init,
    table,
)


def main():
    """Demonstrate basic usage of cute_dynamo."""
    logging.basicConfig(level=logging.INFO)

    # 1. Initialize. With no arguments everything comes from the environment:
    #    AWS_REGION plus AWS_IDENTITY_POOL_ID, or AWS_ACCESS_KEY_ID and
    #    AWS_SECRET_ACCESS_KEY. DYNAMODB_TABLE names the default table.
    print("1. Initializing...")
    try:
        if os.getenv("DYNAMODB_ENDPOINT_URL"):
            client = init(DynamoConfig.for_local_development(
                os.environ["DYNAMODB_ENDPOINT_URL"],
                table_name=os.getenv("DYNAMODB_TABLE", "users")
            ))
        else:
            client = init()
    except ConfigurationError as e:
        print(f"   Cannot initialize: {e}")
        return

    # Other ways to initialize:
    # init(region_name='us-east-1', identity_pool_id='us-east-1:exampleId')
    # init(region_name='us-east-1', access_key_id='AKIAEXAMPLE', secret_access_key='secret')
    print(f"   Using {client.strategy} credentials")

    # 2. Write and read back a structured value
    print("2. Writing a profile...")
    profile = table('users').at({'pk': 'u1', 'sk': 'profile'})
    try:
        profile.put({'name': 'Ada', 'age': 30, 'languages': ['English', 'French']})
        print(f"   Read back: {profile.get()}")

        # 3. Missing items are None, not errors
        print("3. Reading a missing item...")
        print(f"   Result: {table('users').at({'pk': 'missing', 'sk': 'profile'}).get()}")

        # 4. The handle returned by init() can be used directly
        print("4. Using the client handle explicitly...")
        print(f"   Result: {client.table('users').at({'pk': 'u1', 'sk': 'profile'}).get()}")
    except BACKEND_ERRORS as e:
        print(f"   DynamoDB request failed: {e}")

    print("Example completed!")


if __name__ == "__main__":
    main()
