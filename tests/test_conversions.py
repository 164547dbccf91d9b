"""Test coordinate <-> field position conversions."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from nfl_field.core.constants import END_ZONE_LENGTH_YARDS
from nfl_field.core.models import Coordinate
from nfl_field.core.conversions import (
    UNKNOWN_POSITION, coordinate_to_field_position, field_position_to_coordinate
)


@pytest.mark.parametrize("y, expected", [
    (5.0, "South End Zone"),
    (9.999, "South End Zone"),
    (115.0, "North End Zone"),
    (110.001, "North End Zone"),
    (10.0, "Own Goal"),
    (10.4, "Own Goal"),
    (110.0, "Opp Goal"),
    (109.6, "Opp Goal"),
    (60.0, "Midfield"),
    (40.0, "Own 30"),
    (20.0, "Own 10"),
    (45.5, "Own 36"),
    (65.0, "Opp 45"),
    (90.0, "Opp 20"),
    (109.0, "Opp 1"),
])
def test_coordinate_to_field_position(y, expected):
    """Test broadcaster-style labels."""
    assert coordinate_to_field_position(Coordinate(x=26.67, y=y)) == expected


def test_field_position_labels_cover_whole_field():
    """Every y from end line to end line gets a label."""
    for i in range(101):
        label = coordinate_to_field_position(Coordinate(x=26.67, y=i * 1.2))
        assert isinstance(label, str)
        assert len(label) > 0


def test_nan_field_position_is_unknown():
    """A NaN y is labelled rather than rounded."""
    assert coordinate_to_field_position(Coordinate(x=26.67, y=float("nan"))) == UNKNOWN_POSITION
    assert coordinate_to_field_position(Coordinate(x=float("nan"), y=40.0)) == "Own 30"


def test_field_position_to_coordinate():
    """y is the yard line plus the end zone."""
    coord = field_position_to_coordinate(20, 26.67)
    assert coord.x == 26.67
    assert coord.y == 30.0
    assert coord.is_valid()

    assert field_position_to_coordinate(0, 26.67).y == END_ZONE_LENGTH_YARDS
    assert field_position_to_coordinate(100, 26.67).y == 110.0


def test_field_position_to_coordinate_does_not_range_check():
    """Out of range yard lines produce invalid coordinates, not errors."""
    coord = field_position_to_coordinate(255, 26.67)
    assert coord.y == 265.0
    assert not coord.is_valid()


def test_yard_line_round_trip():
    """Yard line -> coordinate -> nearest yard line is the identity."""
    for yard_line in range(101):
        coord = field_position_to_coordinate(yard_line, 26.67)
        assert coord.nearest_yard_line() == yard_line


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
