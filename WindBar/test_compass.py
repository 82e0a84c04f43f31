"""Tests for compass and arrow derivation."""
import pytest
from compass import (
    ARROWS,
    COMPASS_POINTS,
    NO_DATA_ARROW,
    compass_direction,
    normalize_degrees,
    wind_arrow,
)


def test_compass_none():
    assert compass_direction(None) is None
    assert wind_arrow(None) == NO_DATA_ARROW


@pytest.mark.parametrize("degrees,expected", [
    (0, "N"),
    (359, "N"),
    (360, "N"),
    (11.24, "N"),
    (11.25, "NNE"),
    (22.5, "NNE"),
    (33.74, "NNE"),
    (33.75, "NE"),
    (90, "E"),
    (180, "S"),
    (202, "SSW"),
    (270, "W"),
    (348.74, "NNW"),
    (348.75, "N"),
])
def test_compass_boundaries(degrees, expected):
    assert compass_direction(degrees) == expected


def test_compass_centers():
    """Every point's own center bearing maps back to that point."""
    for i, point in enumerate(COMPASS_POINTS):
        assert compass_direction(i * 22.5) == point


@pytest.mark.parametrize("degrees", [0, 45, 202, 359, 11.25, 123.4])
@pytest.mark.parametrize("k", [-3, -1, 1, 2, 10])
def test_compass_periodicity(degrees, k):
    assert compass_direction(degrees + 360 * k) == compass_direction(degrees)
    assert wind_arrow(degrees + 360 * k) == wind_arrow(degrees)


def test_negative_degrees_wrap():
    assert normalize_degrees(-90) == 270
    assert compass_direction(-90) == "W"
    assert compass_direction(-1) == "N"
    assert wind_arrow(-90) == "←"


@pytest.mark.parametrize("degrees,expected", [
    (0, "↑"),
    (90, "→"),
    (180, "↓"),
    (270, "←"),
    (45, "↗"),
    (135, "↘"),
    (225, "↙"),
    (315, "↖"),
    (202, "↙"),
    (359, "↑"),
])
def test_arrow_directions(degrees, expected):
    assert wind_arrow(degrees) == expected


def test_arrow_sectors_are_45_degrees():
    """Walking the circle in 0.25° steps, each arrow covers exactly 45°."""
    counts = {arrow: 0 for arrow in ARROWS}
    steps = 360 * 4
    for i in range(steps):
        counts[wind_arrow(i * 0.25)] += 1
    assert all(count == 45 * 4 for count in counts.values())


def test_arrow_consistent_with_compass_at_boundaries():
    """Both derivations change value only on the shared 22.5° grid."""
    for i in range(16):
        boundary = i * 22.5 + 11.25
        before, after = boundary - 0.001, boundary
        if wind_arrow(before) != wind_arrow(after):
            assert compass_direction(before) != compass_direction(after)
        # Same compass point always gives the same arrow
        assert wind_arrow(after) == wind_arrow(after + 22.4)
