"""API route handlers."""

import logging
import math
from typing import List

from fastapi import APIRouter, HTTPException, Query, Response, status

from . import schemas
from .factory import register_field, load_demo_fields
from ..core.field import Field
from ..core.models import Coordinate
from ..core.registry import registry
from ..core.validation import CoordinateError, FieldError, validate_coordinate
from ..core.conversions import coordinate_to_field_position, field_position_to_coordinate

logger = logging.getLogger("nfl_field.api")

router = APIRouter()


def _get_field_or_404(field_id: str) -> Field:
    field = registry.fields.get(field_id)
    if field is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Field {field_id} not found"
        )
    return field


def _field_response(field_id: str, field: Field) -> schemas.FieldResponse:
    return schemas.FieldResponse(id=field_id, field=field.model_dump(mode="json"))


def _require_finite(coord: Coordinate) -> None:
    # JSON responses cannot carry NaN or infinities
    if not (math.isfinite(coord.x) and math.isfinite(coord.y)):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Coordinate components must be finite, got ({coord.x}, {coord.y})"
        )


# ============================================================================
# Health
# ============================================================================

@router.get("/health", response_model=schemas.HealthResponse)
async def health_check():
    """Health check endpoint."""
    return schemas.HealthResponse(ok=True, version="0.1.0")


# ============================================================================
# Fields CRUD
# ============================================================================

@router.get("/fields", response_model=List[schemas.FieldResponse])
async def list_fields():
    """List all registered fields."""
    return [_field_response(field_id, field) for field_id, field in registry.fields.items()]


@router.post("/fields", response_model=schemas.FieldResponse, status_code=status.HTTP_201_CREATED)
async def create_field(request: schemas.CreateFieldRequest):
    """Create a new field (default NFL dimensions unless overridden)."""
    try:
        field_id = register_field(request)
    except (FieldError, ValueError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    return _field_response(field_id, registry.fields.get(field_id))


@router.get("/fields/{field_id}", response_model=schemas.FieldResponse)
async def get_field(field_id: str):
    """Get a specific field."""
    return _field_response(field_id, _get_field_or_404(field_id))


@router.delete("/fields/{field_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_field(field_id: str):
    """Delete a field."""
    if not registry.fields.delete(field_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Field {field_id} not found"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/fields/{field_id}/reset", response_model=schemas.FieldResponse)
async def reset_field(field_id: str):
    """Restore a field to NFL defaults."""
    field = _get_field_or_404(field_id)
    field.reset()
    logger.info(f"Field {field_id} reset to NFL defaults")
    return _field_response(field_id, field)


# ============================================================================
# Field queries
# ============================================================================

@router.post("/fields/{field_id}/locate", response_model=schemas.LocateResponse)
async def locate(field_id: str, coord: Coordinate):
    """Describe a coordinate relative to a registered field."""
    field = _get_field_or_404(field_id)
    _require_finite(coord)
    return schemas.LocateResponse(
        field_id=field_id,
        coordinate=coord,
        contains=field.contains_coordinate(coord),
        contains_in_play=field.contains_in_play(coord),
        boundary_violation=field.get_boundary_violation(coord),
        distance_to_boundary=field.distance_to_boundary(coord),
        distance_to_sideline=field.distance_to_sideline(coord),
        distance_to_end_zone=field.distance_to_end_zone(coord),
        in_home_endzone=field.is_in_home_endzone(coord.y),
        in_away_endzone=field.is_in_away_endzone(coord.y),
        in_playing_field=field.is_in_playing_field(coord.y),
    )


@router.post("/fields/{field_id}/area", response_model=schemas.ContainsResponse)
async def contains_area(field_id: str, request: schemas.AreaQuery):
    """Check a rectangle (northwest/southeast corners) lies on the field."""
    field = _get_field_or_404(field_id)
    return schemas.ContainsResponse(
        contains=field.contains_area(request.top_left, request.bottom_right)
    )


@router.post("/fields/{field_id}/line", response_model=schemas.ContainsResponse)
async def contains_line(field_id: str, request: schemas.LineQuery):
    """Check a segment lies on the field."""
    field = _get_field_or_404(field_id)
    return schemas.ContainsResponse(contains=field.contains_line(request.start, request.end))


# ============================================================================
# Standard-field coordinate queries
# ============================================================================

@router.post("/coordinates/describe", response_model=schemas.DescribeResponse)
async def describe_coordinate(coord: Coordinate):
    """Predicates, transforms and labels for a coordinate on the standard field."""
    _require_finite(coord)
    try:
        validate_coordinate(coord)
        validation_error = None
    except CoordinateError as e:
        validation_error = e.kind.value

    return schemas.DescribeResponse(
        coordinate=coord,
        is_valid=coord.is_valid(),
        is_in_bounds=coord.is_in_bounds(),
        is_in_end_zone=coord.is_in_end_zone(),
        is_in_south_end_zone=coord.is_in_south_end_zone(),
        is_in_north_end_zone=coord.is_in_north_end_zone(),
        is_on_sideline=coord.is_on_sideline(),
        is_on_goal_line=coord.is_on_goal_line(),
        nearest_yard_line=coord.nearest_yard_line(),
        field_position=coordinate_to_field_position(coord),
        validation_error=validation_error,
        clamped=coord.clamp(),
        feet=coord.to_feet(),
        mirror_x=coord.mirror_x(),
        mirror_y=coord.mirror_y(),
        rotate_180=coord.rotate_180(),
    )


@router.get("/positions/{yard_line}", response_model=Coordinate)
async def position_to_coordinate(yard_line: int, x: float = Query(default=0.0)):
    """Coordinate for a yard line (home perspective) and lateral position."""
    coord = field_position_to_coordinate(yard_line, x)
    _require_finite(coord)
    return coord


# ============================================================================
# Seed Data
# ============================================================================

@router.post("/seed-demo-fields", response_model=schemas.SeedDataResponse)
async def seed_demo_fields_endpoint():
    """Load demo fields into registry."""
    try:
        count = load_demo_fields()
    except (OSError, ValueError, FieldError) as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to load demo data: {str(e)}"
        )
    return schemas.SeedDataResponse(
        fields_loaded=count,
        message=f"Successfully loaded demo data: {count} fields"
    )
