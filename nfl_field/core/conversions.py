"""Conversions between coordinates and human-readable field positions."""

import math

from .constants import END_ZONE_LENGTH_YARDS, FIELD_LENGTH_YARDS
from .models import Coordinate, round_half_away_from_zero

MIDFIELD_YARD_LINE = 50
OPPONENT_GOAL_YARD_LINE = 100
UNKNOWN_POSITION = "Unknown"


def coordinate_to_field_position(coord: Coordinate) -> str:
    """
    Describe a coordinate the way a broadcaster would.

    Examples: "Own 30", "Opp 45", "Midfield", "Own Goal", "Opp Goal",
    "South End Zone", "North End Zone". Yard lines are rounded half away
    from zero before labelling, so y=10.4 reads "Own Goal". A NaN y has no
    position and reads "Unknown".
    """
    if math.isnan(coord.y):
        return UNKNOWN_POSITION
    if coord.y < END_ZONE_LENGTH_YARDS:
        return "South End Zone"
    if coord.y > FIELD_LENGTH_YARDS - END_ZONE_LENGTH_YARDS:
        return "North End Zone"

    yard_line = round_half_away_from_zero(coord.y - END_ZONE_LENGTH_YARDS)

    if yard_line == 0:
        return "Own Goal"
    if yard_line == OPPONENT_GOAL_YARD_LINE:
        return "Opp Goal"
    if yard_line == MIDFIELD_YARD_LINE:
        return "Midfield"

    if yard_line < MIDFIELD_YARD_LINE:
        return f"Own {yard_line}"
    return f"Opp {OPPONENT_GOAL_YARD_LINE - yard_line}"


def field_position_to_coordinate(yard_line: int, x: float) -> Coordinate:
    """
    Coordinate at a yard line (home perspective, 0-100) and lateral x.

    The yard line is not range-checked: 255 yields y=265, which callers
    can detect with is_valid().
    """
    return Coordinate(x=x, y=float(yard_line) + END_ZONE_LENGTH_YARDS)
