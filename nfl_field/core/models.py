"""Canonical data models for the NFL field coordinate system."""

import math
from enum import Enum
from typing import Optional, TYPE_CHECKING

import numpy as np
from pydantic import BaseModel, ConfigDict

from .constants import (
    FIELD_LENGTH_YARDS,
    FIELD_WIDTH_YARDS,
    END_ZONE_LENGTH_YARDS,
    YARDS_TO_FEET,
    BOUNDARY_EPSILON_YARDS,
)

if TYPE_CHECKING:
    from .field import Field


# ============================================================================
# Enums
# ============================================================================

class SurfaceType(str, Enum):
    GRASS = "grass"
    TURF = "turf"
    HYBRID = "hybrid"


class Orientation(str, Enum):
    """Direction the long axis of the field runs."""
    NORTH_SOUTH = "north_south"
    EAST_WEST = "east_west"


class BoundaryViolation(str, Enum):
    """Which edge of the field a coordinate lies beyond."""
    WEST_OUT_OF_BOUNDS = "west_out_of_bounds"
    EAST_OUT_OF_BOUNDS = "east_out_of_bounds"
    SOUTH_OUT_OF_BOUNDS = "south_out_of_bounds"
    NORTH_OUT_OF_BOUNDS = "north_out_of_bounds"


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties away from zero (25.5 -> 26)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


# ============================================================================
# Coordinate
# ============================================================================

class Coordinate(BaseModel):
    """
    Position on the field in yards.

    Origin at the southwest corner: x runs east across the field width,
    y runs north along the field length. Construction never validates;
    an off-field coordinate is representable and simply reports
    is_valid() == False.
    """
    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def distance_to(self, other: "Coordinate") -> float:
        """Euclidean distance to another coordinate."""
        dx = other.x - self.x
        dy = other.y - self.y
        return float(np.sqrt(dx*dx + dy*dy))

    # ------------------------------------------------------------------
    # Validity
    # ------------------------------------------------------------------

    def is_valid(self) -> bool:
        """Check against standard NFL field boundaries (end zones included)."""
        return (0.0 <= self.x <= FIELD_WIDTH_YARDS and
                0.0 <= self.y <= FIELD_LENGTH_YARDS)

    def is_in_bounds(self) -> bool:
        """Check the playing field only: goal lines count, sidelines do not."""
        return (END_ZONE_LENGTH_YARDS <= self.y <= FIELD_LENGTH_YARDS - END_ZONE_LENGTH_YARDS and
                0.0 < self.x < FIELD_WIDTH_YARDS)

    def is_valid_for_field(self, field: "Field") -> bool:
        """Check against a specific (possibly custom) field."""
        return field.contains(self.x, self.y)

    # ------------------------------------------------------------------
    # Zones and lines
    # ------------------------------------------------------------------

    def is_in_end_zone(self) -> bool:
        return self.is_in_south_end_zone() or self.is_in_north_end_zone()

    def is_in_south_end_zone(self) -> bool:
        return self.is_valid() and self.y < END_ZONE_LENGTH_YARDS

    def is_in_north_end_zone(self) -> bool:
        return self.is_valid() and self.y > FIELD_LENGTH_YARDS - END_ZONE_LENGTH_YARDS

    def is_on_sideline(self) -> bool:
        """Within BOUNDARY_EPSILON_YARDS of the west or east sideline."""
        return self.is_valid() and (
            abs(self.x) < BOUNDARY_EPSILON_YARDS or
            abs(self.x - FIELD_WIDTH_YARDS) < BOUNDARY_EPSILON_YARDS
        )

    def is_on_goal_line(self) -> bool:
        """Within BOUNDARY_EPSILON_YARDS of either goal line."""
        return self.is_valid() and (
            abs(self.y - END_ZONE_LENGTH_YARDS) < BOUNDARY_EPSILON_YARDS or
            abs(self.y - (FIELD_LENGTH_YARDS - END_ZONE_LENGTH_YARDS)) < BOUNDARY_EPSILON_YARDS
        )

    def clamp(self) -> "Coordinate":
        """Project onto the field; the result is always valid."""
        return Coordinate(
            x=float(np.clip(self.x, 0.0, FIELD_WIDTH_YARDS)),
            y=float(np.clip(self.y, 0.0, FIELD_LENGTH_YARDS))
        )

    # ------------------------------------------------------------------
    # Unit conversion
    # ------------------------------------------------------------------

    def to_feet(self) -> "Coordinate":
        return Coordinate(x=self.x * YARDS_TO_FEET, y=self.y * YARDS_TO_FEET)

    @classmethod
    def from_feet(cls, x_feet: float, y_feet: float) -> "Coordinate":
        return cls(x=x_feet / YARDS_TO_FEET, y=y_feet / YARDS_TO_FEET)

    def nearest_yard_line(self) -> Optional[int]:
        """
        Yard line (0-100, measured from the home goal line) closest to y.

        Returns None inside either end zone or when y is NaN. Ties round
        away from zero, so y=35.5 is yard line 26.
        """
        if math.isnan(self.y):
            return None
        if (self.y < END_ZONE_LENGTH_YARDS or
                self.y > FIELD_LENGTH_YARDS - END_ZONE_LENGTH_YARDS):
            return None
        return round_half_away_from_zero(self.y - END_ZONE_LENGTH_YARDS)

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def mirror_x(self) -> "Coordinate":
        """Reflect across the vertical center line (x = width / 2)."""
        center_x = FIELD_WIDTH_YARDS / 2.0
        return Coordinate(x=center_x + (center_x - self.x), y=self.y)

    def mirror_y(self) -> "Coordinate":
        """Reflect across midfield (y = length / 2)."""
        center_y = FIELD_LENGTH_YARDS / 2.0
        return Coordinate(x=self.x, y=center_y + (center_y - self.y))

    def rotate_180(self) -> "Coordinate":
        """Rotate about the field center; same as mirror_x then mirror_y."""
        center_x = FIELD_WIDTH_YARDS / 2.0
        center_y = FIELD_LENGTH_YARDS / 2.0
        return Coordinate(
            x=center_x + (center_x - self.x),
            y=center_y + (center_y - self.y)
        )
