"""Validation errors and checks for coordinates and fields."""

import math
from enum import Enum
from typing import TYPE_CHECKING

from .constants import FIELD_LENGTH_YARDS, FIELD_WIDTH_YARDS
from .models import Coordinate

if TYPE_CHECKING:
    from .field import Field


class FieldErrorKind(str, Enum):
    INVALID_DIMENSIONS = "InvalidDimensions"
    ALLOCATION_ERROR = "AllocationError"


class CoordinateErrorKind(str, Enum):
    OUT_OF_BOUNDS_X = "OutOfBoundsX"
    OUT_OF_BOUNDS_Y = "OutOfBoundsY"
    INVALID_COORDINATE = "InvalidCoordinate"


class ValidationError(Exception):
    """Base error for the field geometry package."""

    def __init__(self, kind: Enum, message: str = ""):
        self.kind = kind
        super().__init__(message or kind.value)


class FieldError(ValidationError):
    """Field construction or configuration failed."""

    def __init__(self, kind: FieldErrorKind, message: str = ""):
        super().__init__(kind, message)


class CoordinateError(ValidationError):
    """Coordinate lies outside the standard field."""

    def __init__(self, kind: CoordinateErrorKind, message: str = ""):
        super().__init__(kind, message)


def check_dimensions(length: float, width: float, endzone_length: float) -> None:
    """
    Validate field dimension invariants:
    - length, width and endzone_length strictly positive (NaN rejected)
    - both end zones together shorter than the field (equality rejected)
    """
    if not (length > 0 and width > 0 and endzone_length > 0):
        raise FieldError(
            FieldErrorKind.INVALID_DIMENSIONS,
            f"Field dimensions must be positive, got length={length}, "
            f"width={width}, endzone_length={endzone_length}"
        )

    if endzone_length * 2 >= length:
        raise FieldError(
            FieldErrorKind.INVALID_DIMENSIONS,
            f"End zones ({endzone_length} yds each) must be shorter than "
            f"half the field length ({length} yds)"
        )


def validate_coordinate(coord: Coordinate) -> None:
    """
    Validate a coordinate against the standard field.

    X is checked before Y, so a coordinate out of bounds on both axes
    reports OUT_OF_BOUNDS_X. NaN components compare false against every
    bound, so they are reported as INVALID_COORDINATE up front.
    """
    if math.isnan(coord.x) or math.isnan(coord.y):
        raise CoordinateError(
            CoordinateErrorKind.INVALID_COORDINATE,
            f"Coordinate has NaN component: ({coord.x}, {coord.y})"
        )
    if coord.x < 0.0 or coord.x > FIELD_WIDTH_YARDS:
        raise CoordinateError(
            CoordinateErrorKind.OUT_OF_BOUNDS_X,
            f"x={coord.x} outside 0..{FIELD_WIDTH_YARDS}"
        )
    if coord.y < 0.0 or coord.y > FIELD_LENGTH_YARDS:
        raise CoordinateError(
            CoordinateErrorKind.OUT_OF_BOUNDS_Y,
            f"y={coord.y} outside 0..{FIELD_LENGTH_YARDS}"
        )


def validate_field(field: "Field") -> None:
    """Validate a field's stored dimensions (registry validator)."""
    check_dimensions(field.length, field.width, field.endzone_length)
