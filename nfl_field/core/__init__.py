"""Field geometry core: coordinates, fields, validation and conversions."""

from .constants import (
    FIELD_LENGTH_YARDS,
    PLAYING_FIELD_LENGTH_YARDS,
    END_ZONE_LENGTH_YARDS,
    FIELD_WIDTH_YARDS,
    FIELD_WIDTH_FEET,
    HASH_SEPARATION_YARDS,
    HASH_FROM_SIDELINE_YARDS,
    YARDS_TO_FEET,
    FEET_TO_YARDS,
    BOUNDARY_EPSILON_YARDS,
)
from .models import Coordinate, SurfaceType, Orientation, BoundaryViolation
from .field import Field, FieldBuilder
from .validation import (
    ValidationError,
    FieldError,
    FieldErrorKind,
    CoordinateError,
    CoordinateErrorKind,
    validate_coordinate,
    validate_field,
)
from .conversions import coordinate_to_field_position, field_position_to_coordinate

__all__ = [
    "FIELD_LENGTH_YARDS",
    "PLAYING_FIELD_LENGTH_YARDS",
    "END_ZONE_LENGTH_YARDS",
    "FIELD_WIDTH_YARDS",
    "FIELD_WIDTH_FEET",
    "HASH_SEPARATION_YARDS",
    "HASH_FROM_SIDELINE_YARDS",
    "YARDS_TO_FEET",
    "FEET_TO_YARDS",
    "BOUNDARY_EPSILON_YARDS",
    "Coordinate",
    "SurfaceType",
    "Orientation",
    "BoundaryViolation",
    "Field",
    "FieldBuilder",
    "ValidationError",
    "FieldError",
    "FieldErrorKind",
    "CoordinateError",
    "CoordinateErrorKind",
    "validate_coordinate",
    "validate_field",
    "coordinate_to_field_position",
    "field_position_to_coordinate",
]
