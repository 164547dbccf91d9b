"""NFL field dimension and unit-conversion constants.

Coordinate system:
    Origin (0, 0) = southwest corner of the field
    X-axis: east-west, 0 to 53.33 yards (west sideline to east sideline)
    Y-axis: north-south, 0 to 120 yards (home end line to away end line)

    (0,120) +---------------------+ (53.33,120)
            |     AWAY END ZONE   |
            +---------------------+ y=110
            |                     |
            |    PLAYING FIELD    |
            |                     |
            +---------------------+ y=10
            |     HOME END ZONE   |
      (0,0) +---------------------+ (53.33,0)
"""

# =============================================================================
# Field Dimensions
# =============================================================================

FIELD_LENGTH_YARDS = 120.0           # Including both end zones
PLAYING_FIELD_LENGTH_YARDS = 100.0   # Goal line to goal line
END_ZONE_LENGTH_YARDS = 10.0
FIELD_WIDTH_YARDS = 53.333333        # 160 feet / 3
FIELD_WIDTH_FEET = 160.0

# =============================================================================
# Hash Marks
# =============================================================================

HASH_SEPARATION_YARDS = 23.583333    # 70 feet 9 inches
HASH_FROM_SIDELINE_YARDS = 14.875

# Custom fields place hashes proportionally (28% / 72% of width)
CUSTOM_HASH_RATIO = 0.28

# =============================================================================
# Conversions / Tolerances
# =============================================================================

YARDS_TO_FEET = 3.0
FEET_TO_YARDS = 1.0 / 3.0

# Tolerance for sideline and goal line membership
BOUNDARY_EPSILON_YARDS = 0.01

DEFAULT_FIELD_NAME = "NFL Field"
