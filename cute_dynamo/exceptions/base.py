from typing import Any, Dict, Optional


class CuteDynamoError(Exception):
    """Base exception for errors raised by cute_dynamo itself.

    Failures reported by DynamoDB or botocore are never wrapped in this
    hierarchy; they reach the caller as botocore's own exception types.

    Attributes:
        message: Human-readable error message
        original_error: The exception that triggered this one, if any
        context: What the failing call was working on, e.g. ``table_name``,
            ``key`` or the ``missing`` settings
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.original_error = original_error
        self.context = {k: v for k, v in (context or {}).items() if v is not None}
        super().__init__(message)

    @property
    def table_name(self) -> Optional[str]:
        return self.context.get('table_name')

    @property
    def key(self) -> Optional[dict]:
        return self.context.get('key')

    def __str__(self) -> str:
        """Message followed by the table/key the error concerns."""
        if not self.context:
            return self.message
        details = ", ".join(f"{k}={v!r}" if k == 'key' else f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} [{details}]"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, original_error={self.original_error!r}, context={self.context!r})"
