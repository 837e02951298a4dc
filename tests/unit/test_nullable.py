"""
Unit tests for null-to-default normalization.
"""
from typing import Dict, List, Optional

import pytest
from pydantic import Field, StrictStr

from dockwire.exceptions import SchemaError
from dockwire.MODELS.nullable import NullAsDefault, normalize_nullable, zero_value
from dockwire.MODELS.wire_model import WireModel


class TestZeroValue:
    """Tests for zero values of field types."""

    @pytest.mark.parametrize(
        "tp,expected",
        [
            (List[str], []),
            (Dict[str, int], {}),
            (int, 0),
            (str, ""),
            (bool, False),
            (StrictStr, ""),
            (List[StrictStr], []),
        ],
    )
    def test_zero_values(self, tp, expected):
        """Test the zero value of common types."""
        assert zero_value(tp) == expected
        assert type(zero_value(tp)) is type(expected)

    def test_no_zero_value(self):
        """Test that types without a natural zero value are rejected."""
        with pytest.raises(TypeError):
            zero_value(Optional[int])


class TestNormalizeNullable:
    """Tests for normalize_nullable."""

    def test_null_gives_zero_value(self):
        """Test that null decodes as the zero value."""
        assert normalize_nullable(None, List[str]) == []
        assert normalize_nullable(None, Dict[str, str]) == {}
        assert normalize_nullable(None, int) == 0

    def test_present_value_is_decoded(self):
        """Test that a present value passes through decoding."""
        assert normalize_nullable(["a", "b"], List[str]) == ["a", "b"]

    def test_wrong_shape_fails(self):
        """Test that a malformed present value is an error, not a default."""
        with pytest.raises(SchemaError):
            normalize_nullable("a", List[int])

    def test_each_call_returns_fresh_zero(self):
        """Test that zero values are not shared between decodes."""
        first = normalize_nullable(None, List[str])
        first.append("x")
        assert normalize_nullable(None, List[str]) == []


class TestNullAsDefault:
    """Tests for the field annotation."""

    class Labelled(WireModel):
        names: NullAsDefault(Dict[StrictStr, StrictStr]) = Field(None, alias="Names", validate_default=True)

    def test_annotated_field(self):
        """Test null, omission and a present value on an annotated field."""
        assert self.Labelled.decode({"Names": None}).names == {}
        assert self.Labelled.decode({}).names == {}
        assert self.Labelled.decode({"Names": {"a": "b"}}).names == {"a": "b"}

    def test_annotated_field_wrong_shape(self):
        """Test that the annotation still validates present values."""
        with pytest.raises(SchemaError):
            self.Labelled.decode({"Names": ["a"]})

    def test_requires_zero_value(self):
        """Test that the annotation refuses types it cannot default."""
        with pytest.raises(TypeError):
            NullAsDefault(Optional[str])
