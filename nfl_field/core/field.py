"""Field model: dimensions, boundaries, zones and the fluent builder."""

import logging
from typing import Optional

from pydantic import BaseModel, computed_field, model_validator

from .constants import (
    FIELD_LENGTH_YARDS,
    FIELD_WIDTH_YARDS,
    END_ZONE_LENGTH_YARDS,
    HASH_FROM_SIDELINE_YARDS,
    CUSTOM_HASH_RATIO,
    DEFAULT_FIELD_NAME,
)
from .models import Coordinate, SurfaceType, Orientation, BoundaryViolation
from .validation import FieldError, check_dimensions

logger = logging.getLogger("nfl_field.field")


class Field(BaseModel):
    """
    A rectangular playing surface.

    Same axes as Coordinate: origin at the southwest corner, x across the
    width, y along the length. Defaults are official NFL dimensions;
    use Field.init_custom() or FieldBuilder for anything else.
    """
    width: float = FIELD_WIDTH_YARDS
    length: float = FIELD_LENGTH_YARDS
    endzone_length: float = END_ZONE_LENGTH_YARDS

    name: str = DEFAULT_FIELD_NAME
    surface_type: SurfaceType = SurfaceType.TURF
    orientation: Orientation = Orientation.NORTH_SOUTH

    left_hash_x: float = HASH_FROM_SIDELINE_YARDS
    right_hash_x: float = FIELD_WIDTH_YARDS - HASH_FROM_SIDELINE_YARDS

    @model_validator(mode='after')
    def validate_dimensions(self):
        """
        Reject end zones that swallow the field (raises FieldError).

        A non-standard width without explicit hash marks gets proportional
        hashes, so they stay symmetric about the center line.
        """
        check_dimensions(self.length, self.width, self.endzone_length)

        hashes_given = {"left_hash_x", "right_hash_x"} & self.model_fields_set
        if self.width != FIELD_WIDTH_YARDS and not hashes_given:
            hash_from_sideline = self.width * CUSTOM_HASH_RATIO
            self.left_hash_x = hash_from_sideline
            self.right_hash_x = self.width - hash_from_sideline
        return self

    @classmethod
    def init_custom(cls, length: float, width: float, endzone_length: float) -> "Field":
        """
        Create a field with custom dimensions.

        Hash marks are placed proportionally at 28% and 72% of the width.

        Raises:
            FieldError: INVALID_DIMENSIONS for non-positive values or when
                endzone_length * 2 >= length
        """
        try:
            check_dimensions(length, width, endzone_length)
        except FieldError as e:
            logger.debug(f"Rejected custom field: {e}")
            raise

        hash_from_sideline = width * CUSTOM_HASH_RATIO
        return cls(
            length=length,
            width=width,
            endzone_length=endzone_length,
            left_hash_x=hash_from_sideline,
            right_hash_x=width - hash_from_sideline,
        )

    def reset(self) -> None:
        """Restore NFL defaults in place; references to this field stay live."""
        defaults = Field()
        for name in type(self).model_fields:
            setattr(self, name, getattr(defaults, name))

    # ========================================================================
    # Derived geometry
    # ========================================================================

    @computed_field
    @property
    def north_boundary(self) -> float:
        return self.length

    @computed_field
    @property
    def south_boundary(self) -> float:
        return 0.0

    @computed_field
    @property
    def east_boundary(self) -> float:
        return self.width

    @computed_field
    @property
    def west_boundary(self) -> float:
        return 0.0

    @computed_field
    @property
    def center_x(self) -> float:
        return self.width / 2.0

    # ========================================================================
    # Containment
    # ========================================================================

    def contains(self, x: float, y: float) -> bool:
        """Inclusive bounds check against [0, width] x [0, length]."""
        return 0.0 <= x <= self.width and 0.0 <= y <= self.length

    def contains_coordinate(self, coord: Coordinate) -> bool:
        return self.contains(coord.x, coord.y)

    def contains_in_play(self, coord: Coordinate) -> bool:
        """In the playing field: end zones excluded, goal lines included."""
        return (0.0 <= coord.x <= self.width and
                self.endzone_length <= coord.y <= self.length - self.endzone_length)

    def contains_area(self, top_left: Coordinate, bottom_right: Coordinate) -> bool:
        """
        Check a rectangle lies entirely on the field.

        top_left must be the northwest corner (greater y, lesser x) and
        bottom_right the southeast corner. Swapped corners or a rectangle
        with zero width or height return False.
        """
        if not self.contains_coordinate(top_left) or not self.contains_coordinate(bottom_right):
            return False

        if bottom_right.x <= top_left.x or bottom_right.y >= top_left.y:
            return False

        return True

    def contains_line(self, start: Coordinate, end: Coordinate) -> bool:
        """A segment is on the field iff both endpoints are (the field is convex)."""
        return self.contains_coordinate(start) and self.contains_coordinate(end)

    def get_boundary_violation(self, coord: Coordinate) -> Optional[BoundaryViolation]:
        """First violated edge, checked west, east, south, north; None if on field."""
        if coord.x < self.west_boundary:
            return BoundaryViolation.WEST_OUT_OF_BOUNDS
        if coord.x > self.east_boundary:
            return BoundaryViolation.EAST_OUT_OF_BOUNDS
        if coord.y < self.south_boundary:
            return BoundaryViolation.SOUTH_OUT_OF_BOUNDS
        if coord.y > self.north_boundary:
            return BoundaryViolation.NORTH_OUT_OF_BOUNDS
        return None

    # ========================================================================
    # Distances (yards; negative means outside)
    # ========================================================================

    def distance_to_boundary(self, coord: Coordinate) -> float:
        """Minimum signed distance to any of the four edges."""
        return min(
            coord.x - self.west_boundary,
            self.east_boundary - coord.x,
            coord.y - self.south_boundary,
            self.north_boundary - coord.y,
        )

    def distance_to_sideline(self, coord: Coordinate) -> float:
        return min(coord.x - self.west_boundary, self.east_boundary - coord.x)

    def distance_to_end_zone(self, coord: Coordinate) -> float:
        """
        Distance to the nearer goal line.

        Negative inside an end zone (magnitude is the depth into it),
        zero on a goal line, positive in the playing field.
        """
        away_goal_line = self.length - self.endzone_length

        if coord.y < self.endzone_length:
            return coord.y - self.endzone_length
        if coord.y > away_goal_line:
            return away_goal_line - coord.y

        return min(coord.y - self.endzone_length, away_goal_line - coord.y)

    # ========================================================================
    # Zone bands (by y only)
    # ========================================================================

    def is_in_home_endzone(self, y: float) -> bool:
        return 0.0 <= y < self.endzone_length

    def is_in_away_endzone(self, y: float) -> bool:
        return self.length - self.endzone_length < y <= self.length

    def is_in_playing_field(self, y: float) -> bool:
        return self.endzone_length <= y <= self.length - self.endzone_length


class FieldBuilder:
    """
    Fluent construction of Field instances.

        field = (FieldBuilder()
                 .set_name("Lambeau Field")
                 .set_surface(SurfaceType.GRASS)
                 .build())
    """

    def __init__(self):
        self.field = Field()

    def set_name(self, name: str) -> "FieldBuilder":
        self.field.name = name
        return self

    def set_surface(self, surface: SurfaceType) -> "FieldBuilder":
        self.field.surface_type = surface
        return self

    def set_orientation(self, orientation: Orientation) -> "FieldBuilder":
        self.field.orientation = orientation
        return self

    def set_dimensions(self, length: float, width: float) -> "FieldBuilder":
        """
        Resize the field, keeping the current end zone length.

        Boundaries, proportional hash marks and the center follow the new
        width. On FieldError nothing is changed.
        """
        try:
            check_dimensions(length, width, self.field.endzone_length)
        except FieldError as e:
            logger.debug(f"Builder rejected dimensions: {e}")
            raise

        hash_from_sideline = width * CUSTOM_HASH_RATIO
        self.field.length = length
        self.field.width = width
        self.field.left_hash_x = hash_from_sideline
        self.field.right_hash_x = width - hash_from_sideline
        return self

    def build(self) -> Field:
        """Return the configured field; later builder calls do not affect it."""
        return self.field.model_copy()
