"""Test validation logic."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from nfl_field.core.constants import FIELD_WIDTH_YARDS, FIELD_LENGTH_YARDS
from nfl_field.core.field import Field
from nfl_field.core.models import Coordinate
from nfl_field.core.validation import (
    ValidationError, FieldError, FieldErrorKind, CoordinateError,
    CoordinateErrorKind, validate_coordinate, validate_field
)


def test_valid_coordinates_pass():
    """Test that on-field coordinates pass."""
    # Should not raise
    validate_coordinate(Coordinate(x=26.67, y=60.0))
    validate_coordinate(Coordinate(x=0.0, y=0.0))
    validate_coordinate(Coordinate(x=FIELD_WIDTH_YARDS, y=FIELD_LENGTH_YARDS))


@pytest.mark.parametrize("x", [-0.1, 53.4, -100.0])
def test_out_of_bounds_x(x):
    """Test that bad x reports OUT_OF_BOUNDS_X."""
    with pytest.raises(CoordinateError) as exc_info:
        validate_coordinate(Coordinate(x=x, y=60.0))
    assert exc_info.value.kind == CoordinateErrorKind.OUT_OF_BOUNDS_X


@pytest.mark.parametrize("y", [-0.1, 120.1, 500.0])
def test_out_of_bounds_y(y):
    """Test that bad y reports OUT_OF_BOUNDS_Y."""
    with pytest.raises(CoordinateError) as exc_info:
        validate_coordinate(Coordinate(x=26.67, y=y))
    assert exc_info.value.kind == CoordinateErrorKind.OUT_OF_BOUNDS_Y


def test_x_reported_before_y():
    """Both axes out of bounds reports x."""
    with pytest.raises(CoordinateError) as exc_info:
        validate_coordinate(Coordinate(x=-1.0, y=-1.0))
    assert exc_info.value.kind == CoordinateErrorKind.OUT_OF_BOUNDS_X


def test_nan_is_invalid_coordinate():
    """NaN cannot be placed against a bound."""
    with pytest.raises(CoordinateError) as exc_info:
        validate_coordinate(Coordinate(x=26.67, y=float("nan")))
    assert exc_info.value.kind == CoordinateErrorKind.INVALID_COORDINATE


def test_error_hierarchy():
    """Both error families share a base and carry their kind."""
    assert issubclass(FieldError, ValidationError)
    assert issubclass(CoordinateError, ValidationError)

    err = FieldError(FieldErrorKind.ALLOCATION_ERROR)
    assert err.kind == FieldErrorKind.ALLOCATION_ERROR
    assert str(err) == "AllocationError"


def test_error_kinds_are_distinct():
    """Test closed kind enums."""
    assert len(set(FieldErrorKind)) == 2
    assert len(set(CoordinateErrorKind)) == 3
    assert FieldErrorKind.INVALID_DIMENSIONS != FieldErrorKind.ALLOCATION_ERROR


def test_validate_field():
    """Test field dimension validation."""
    validate_field(Field())
    validate_field(Field.init_custom(100.0, 50.0, 8.0))

    # Attribute assignment bypasses construction-time checks
    field = Field()
    field.endzone_length = 60.0
    with pytest.raises(FieldError) as exc_info:
        validate_field(field)
    assert exc_info.value.kind == FieldErrorKind.INVALID_DIMENSIONS


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
