"""
cute_dynamo exceptions.

Organized by category:
1. Setup Errors (configuration, uninitialized client, local connection setup)
2. Item Errors (key validation, payload serialization)
3. Backend Errors (botocore types, passed through untouched)
"""

from typing import Any, Dict, List, Optional

from botocore.exceptions import BotoCoreError, ClientError

from .base import CuteDynamoError


# =============================================================================
# Setup Errors
# =============================================================================

class ConfigurationError(CuteDynamoError):
    """Raised when no usable configuration can be derived.

    Used for:
    - Neither an identity pool id nor a complete access key pair is available
    - Identity pool configured without a region
    - Item operations with no explicit or configured table name
    """

    def __init__(self, message: str, missing: Optional[List[str]] = None, original_error: Optional[Exception] = None):
        """Initialize configuration error.

        Args:
            message: Human-readable error message
            missing: Names of the settings that were missing
            original_error: The original exception that caused this error
        """
        self.missing = missing or []
        context = {}
        if self.missing:
            context['missing'] = self.missing
        super().__init__(message, original_error, context)


class UninitializedClientError(CuteDynamoError):
    """Raised when an item operation runs before init() has succeeded."""

    def __init__(self, message: str = "cute_dynamo is not initialized; call init() first"):
        super().__init__(message)


class ConnectionError(CuteDynamoError):
    """Raised when the boto3 session or DynamoDB resource cannot be built.

    This covers local construction only (bad endpoint URL, unknown region
    format). Network failures while talking to DynamoDB are botocore errors.
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, original_error, context)


# =============================================================================
# Item Errors
# =============================================================================

class ValidationError(CuteDynamoError):
    """Raised when an item key is unusable.

    Used for:
    - Empty or non-mapping keys
    - Keys that use the reserved envelope attribute name
    """

    def __init__(self, message: str, errors: Optional[Dict[str, Any]] = None, original_error: Optional[Exception] = None):
        """Initialize validation error.

        Args:
            message: Human-readable error message
            errors: Dictionary of field-level validation errors
            original_error: The original exception that caused this error
        """
        self.errors = errors or {}
        context = {
            'validation_errors': self.errors
        }
        super().__init__(message, original_error, context)


class SerializationError(CuteDynamoError):
    """Raised when a put payload cannot be serialized to JSON.

    Raised before any request is sent, so a failed put has no side effects.
    """

    def __init__(self, message: str, table_name: Optional[str] = None, key: Optional[dict] = None, original_error: Optional[Exception] = None):
        super().__init__(message, original_error, {'table_name': table_name, 'key': key or None})


# =============================================================================
# Backend Errors
# =============================================================================

# Everything DynamoDB, Cognito or the transport can raise. These propagate
# unmodified; the tuple exists for callers' except clauses.
BACKEND_ERRORS = (ClientError, BotoCoreError)
