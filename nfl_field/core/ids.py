"""ID generation and validation utilities."""

import uuid
from typing import NewType

FieldId = NewType("FieldId", str)


def generate_id(prefix: str = "") -> str:
    """Generate a unique ID with optional prefix."""
    unique = str(uuid.uuid4())[:8]
    return f"{prefix}_{unique}" if prefix else unique


def validate_id(id_value: str) -> bool:
    """Validate that an ID is non-empty and reasonable length."""
    return bool(id_value) and len(id_value) < 128
