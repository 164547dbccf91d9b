#!/usr/bin/env python3
"""Load demo fields into the registry."""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from nfl_field.api.factory import load_demo_fields
from nfl_field.core.registry import registry


def seed_demo_fields():
    """Load all demo fields into registry."""
    count = load_demo_fields()
    print(f"Loaded {count} fields")

    for field_id, field in registry.fields.items():
        print(f"  {field_id}: {field.name} ({field.surface_type.value}, "
              f"{field.length:g}x{field.width:g} yds, "
              f"end zones {field.endzone_length:g} yds)")


if __name__ == "__main__":
    seed_demo_fields()
