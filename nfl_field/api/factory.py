"""Field construction from API requests and demo data."""

import json
import logging
from pathlib import Path

from . import schemas
from ..core.constants import FIELD_LENGTH_YARDS, FIELD_WIDTH_YARDS
from ..core.field import Field, FieldBuilder
from ..core.ids import FieldId, generate_id
from ..core.registry import registry

logger = logging.getLogger("nfl_field.api")

DEMO_DATA_DIR = Path(__file__).parent.parent / "data" / "demo"


def build_field(request: schemas.CreateFieldRequest) -> Field:
    """
    Build a field from a create request.

    A request with an endzone_length goes through Field.init_custom;
    otherwise the builder resizes the default field when length or width
    is given. Raises FieldError for invalid dimensions.
    """
    length = request.length if request.length is not None else FIELD_LENGTH_YARDS
    width = request.width if request.width is not None else FIELD_WIDTH_YARDS

    if request.endzone_length is not None:
        field = Field.init_custom(length, width, request.endzone_length)
        field.name = request.name
        field.surface_type = request.surface_type
        field.orientation = request.orientation
        return field

    builder = FieldBuilder()
    if request.length is not None or request.width is not None:
        builder.set_dimensions(length, width)

    return (builder
            .set_name(request.name)
            .set_surface(request.surface_type)
            .set_orientation(request.orientation)
            .build())


def register_field(request: schemas.CreateFieldRequest) -> FieldId:
    """Build and register a field; returns its id."""
    field = build_field(request)
    field_id = FieldId(request.id or generate_id("field"))
    registry.fields.create(field_id, field)
    logger.info(f"Registered field {field_id} ({field.name}, "
                f"{field.length:.1f}x{field.width:.1f} yds)")
    return field_id


def load_demo_fields(data_dir: Path = DEMO_DATA_DIR) -> int:
    """Replace the registry contents with the demo fields. Returns count."""
    with open(data_dir / "fields.json") as f:
        items = json.load(f)

    registry.clear_all()
    for item in items:
        register_field(schemas.CreateFieldRequest(**item))

    logger.info(f"Demo data loaded: {registry.fields.count()} fields")
    return registry.fields.count()
