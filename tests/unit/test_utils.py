"""
Tests for the JSON envelope helpers (utils.py)
"""

import json
from decimal import Decimal

import pytest

from cute_dynamo.exceptions import SerializationError, ValidationError
from cute_dynamo.utils import (
    ENVELOPE_ATTRIBUTE,
    serialize_payload,
    unwrap_item,
    validate_key,
    wrap_item,
)


class TestWrapItem:
    """Test building stored items."""

    def test_key_attributes_and_envelope(self):
        item = wrap_item({'pk': 'u1', 'sk': 'profile'}, {'name': 'Ada', 'age': 30})

        assert item['pk'] == 'u1'
        assert item['sk'] == 'profile'
        assert json.loads(item[ENVELOPE_ATTRIBUTE]) == {'name': 'Ada', 'age': 30}
        assert set(item) == {'pk', 'sk', ENVELOPE_ATTRIBUTE}

    def test_key_is_not_mutated(self):
        key = {'pk': 'u1'}

        wrap_item(key, [1, 2, 3])

        assert key == {'pk': 'u1'}

    @pytest.mark.parametrize("data", [
        "plain string",
        42,
        3.5,
        True,
        None,
        [1, "two", {"three": 3}],
        {"nested": {"list": [None, False, 0]}},
    ])
    def test_scalars_and_structures(self, data):
        item = wrap_item({'pk': 'u1'}, data)

        assert isinstance(item[ENVELOPE_ATTRIBUTE], str)
        assert unwrap_item(item) == data

    def test_payload_may_contain_envelope_name(self):
        """Test a payload field called JSON is nested, not colliding."""
        item = wrap_item({'pk': 'u1'}, {ENVELOPE_ATTRIBUTE: 'inner'})

        assert unwrap_item(item) == {ENVELOPE_ATTRIBUTE: 'inner'}

    def test_decimal_values(self):
        """Test numbers read back from DynamoDB can be written again."""
        item = wrap_item({'pk': 'u1'}, {'count': Decimal('3'), 'ratio': Decimal('0.25')})

        assert unwrap_item(item) == {'count': 3, 'ratio': 0.25}


class TestSerializePayload:
    """Test serialization failures."""

    def test_circular_structure(self):
        data = {}
        data['self'] = data

        with pytest.raises(SerializationError, match="not JSON serializable") as exc_info:
            serialize_payload(data, 'users', {'pk': 'u1'})

        assert isinstance(exc_info.value.original_error, ValueError)
        assert exc_info.value.table_name == 'users'
        assert exc_info.value.key == {'pk': 'u1'}

    def test_unsupported_type(self):
        with pytest.raises(SerializationError) as exc_info:
            serialize_payload({'tags': {'a', 'b'}})

        assert isinstance(exc_info.value.original_error, TypeError)
        assert exc_info.value.context == {}


class TestUnwrapItem:
    """Test reading stored items."""

    def test_missing_item(self):
        assert unwrap_item(None) is None

    def test_enveloped_item(self):
        item = {'pk': 'u1', ENVELOPE_ATTRIBUTE: '{"name": "Ada"}'}

        assert unwrap_item(item) == {'name': 'Ada'}

    def test_raw_item(self):
        """Test items written by other tools come back verbatim."""
        item = {'pk': 'u1', 'name': 'Ada', 'age': Decimal('30')}

        assert unwrap_item(item) is item

    def test_empty_envelope_returns_raw_item(self):
        item = {'pk': 'u1', ENVELOPE_ATTRIBUTE: ''}

        assert unwrap_item(item) == item

    def test_non_string_envelope_returns_raw_item(self):
        item = {'pk': 'u1', ENVELOPE_ATTRIBUTE: {'name': 'Ada'}}

        assert unwrap_item(item) == item

    def test_enveloped_null(self):
        item = {'pk': 'u1', ENVELOPE_ATTRIBUTE: 'null'}

        assert unwrap_item(item) is None


class TestValidateKey:
    """Test key validation."""

    def test_valid_key_is_copied(self):
        key = {'pk': 'u1', 'sk': 1711900504}

        result = validate_key(key)

        assert result == key
        assert result is not key

    @pytest.mark.parametrize("key", ["u1", ["pk", "u1"], None, 42])
    def test_non_mapping(self, key):
        with pytest.raises(ValidationError, match="must be a mapping"):
            validate_key(key)

    def test_empty_key(self):
        with pytest.raises(ValidationError, match="at least one attribute"):
            validate_key({})

    def test_reserved_attribute(self):
        with pytest.raises(ValidationError, match="reserved") as exc_info:
            validate_key({'pk': 'u1', ENVELOPE_ATTRIBUTE: 'x'})

        assert exc_info.value.errors == {ENVELOPE_ATTRIBUTE: 'reserved'}
