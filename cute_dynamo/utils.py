"""
Item envelope utilities.

Payloads are stored as a JSON string in a single reserved attribute next to
the item's key attributes:

    {'pk': 'u1', 'sk': 'profile', 'JSON': '{"name": "Ada", "age": 30}'}

Items without that attribute (written by other tools) are read back as-is.
"""

import json
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional

from .exceptions import SerializationError, ValidationError

ENVELOPE_ATTRIBUTE = "JSON"


def _encode_default(obj: Any) -> Any:
    # boto3 returns every DynamoDB number as Decimal
    if isinstance(obj, Decimal):
        return int(obj) if obj == obj.to_integral_value() else float(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def serialize_payload(data: Any, table_name: Optional[str] = None, key: Optional[Mapping[str, Any]] = None) -> str:
    """Serialize a put payload to the envelope string.

    Args:
        data: Any JSON-serializable value
        table_name: Target table, for error context
        key: Target item key, for error context

    Raises:
        SerializationError: Circular references or unsupported types
    """
    try:
        return json.dumps(data, default=_encode_default)
    except (TypeError, ValueError) as e:
        raise SerializationError(
            f"Payload is not JSON serializable: {e}",
            table_name=table_name,
            key=dict(key) if key else None,
            original_error=e,
        ) from e


def validate_key(key: Any) -> Dict[str, Any]:
    """Check that a key can identify an item.

    Args:
        key: Mapping of key attribute name to scalar value

    Returns:
        A plain dict copy of the key

    Raises:
        ValidationError: Empty or non-mapping key, or the key uses the
            reserved envelope attribute
    """
    if not isinstance(key, Mapping):
        raise ValidationError(
            f"Item key must be a mapping of attribute name to value, got {type(key).__name__}",
            errors={'key': 'not a mapping'}
        )
    if not key:
        raise ValidationError("Item key must name at least one attribute", errors={'key': 'empty'})
    if ENVELOPE_ATTRIBUTE in key:
        raise ValidationError(
            f"'{ENVELOPE_ATTRIBUTE}' is reserved for the payload and cannot be a key attribute",
            errors={ENVELOPE_ATTRIBUTE: 'reserved'}
        )
    return dict(key)


def wrap_item(key: Mapping[str, Any], data: Any, table_name: Optional[str] = None) -> Dict[str, Any]:
    """Build the stored item: key attributes plus the serialized payload."""
    item = dict(key)
    item[ENVELOPE_ATTRIBUTE] = serialize_payload(data, table_name, key)
    return item


def unwrap_item(item: Optional[Dict[str, Any]]) -> Any:
    """Turn a stored item back into the value the caller sees.

    Returns:
        None for a missing item, the deserialized payload for enveloped
        items, otherwise the raw item attributes
    """
    if not item:
        return None
    payload = item.get(ENVELOPE_ATTRIBUTE)
    if isinstance(payload, str) and payload:
        return json.loads(payload)
    return item
