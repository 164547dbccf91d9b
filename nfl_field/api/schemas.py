"""API request/response schemas."""

from typing import Optional, Dict, Any
from pydantic import BaseModel, Field

from ..core.models import Coordinate, SurfaceType, Orientation, BoundaryViolation
from ..core.constants import DEFAULT_FIELD_NAME


# ============================================================================
# Health
# ============================================================================

class HealthResponse(BaseModel):
    """Health check response."""
    ok: bool = True
    version: str = "0.1.0"


# ============================================================================
# Fields
# ============================================================================

class CreateFieldRequest(BaseModel):
    """Create field request. Omitted dimensions keep NFL defaults."""
    id: Optional[str] = None
    name: str = DEFAULT_FIELD_NAME
    surface_type: SurfaceType = SurfaceType.TURF
    orientation: Orientation = Orientation.NORTH_SOUTH
    # Range checks beyond "is a number" live in the core (FieldError -> 400)
    length: Optional[float] = None
    width: Optional[float] = None
    endzone_length: Optional[float] = None


class FieldResponse(BaseModel):
    """Registered field with its derived geometry."""
    id: str
    field: Dict[str, Any]


class SeedDataResponse(BaseModel):
    """Seed demo fields response."""
    fields_loaded: int
    message: str


# ============================================================================
# Queries
# ============================================================================

class AreaQuery(BaseModel):
    """Rectangle given by its northwest and southeast corners."""
    top_left: Coordinate
    bottom_right: Coordinate


class LineQuery(BaseModel):
    start: Coordinate
    end: Coordinate


class ContainsResponse(BaseModel):
    contains: bool


class LocateResponse(BaseModel):
    """Field-relative view of one coordinate."""
    field_id: str
    coordinate: Coordinate
    contains: bool
    contains_in_play: bool
    boundary_violation: Optional[BoundaryViolation] = None
    distance_to_boundary: float
    distance_to_sideline: float
    distance_to_end_zone: float
    in_home_endzone: bool
    in_away_endzone: bool
    in_playing_field: bool


class DescribeResponse(BaseModel):
    """Standard-field view of one coordinate."""
    coordinate: Coordinate
    is_valid: bool
    is_in_bounds: bool
    is_in_end_zone: bool
    is_in_south_end_zone: bool
    is_in_north_end_zone: bool
    is_on_sideline: bool
    is_on_goal_line: bool
    nearest_yard_line: Optional[int] = Field(default=None, ge=0, le=100)
    field_position: str
    validation_error: Optional[str] = None
    clamped: Coordinate
    feet: Coordinate
    mirror_x: Coordinate
    mirror_y: Coordinate
    rotate_180: Coordinate
