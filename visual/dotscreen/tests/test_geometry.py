import math

import pytest

from visual.dotscreen import SizingPolicy, box_half, dot_center, dot_radius, is_visible
from visual.dotscreen.geometry import AREA_FACTOR


# Test 1: suppression is inclusive at the threshold
def test_threshold_is_inclusive():
    assert is_visible(0.49, 0.5)
    assert not is_visible(0.5, 0.5)
    assert not is_visible(0.0, 0.0)
    assert not is_visible(1.0, 1.0)
    assert is_visible(0.999, 1.0)


# Test 2: odd box sizes truncate the half size
def test_box_half_truncates():
    assert box_half(50) == 25
    assert box_half(7) == 3
    assert box_half(1) == 0


# Test 3: linear policy scales the radius
def test_linear_radius():
    assert dot_radius(0.0, 50, 1) == 25
    assert dot_radius(0.0, 50, 3) == 75
    assert dot_radius(0.5, 50, 1) == 12  # 12.5 truncated
    assert dot_radius(1.0, 50, 1) == 0


# Test 4: area policy keeps the 1.7 calibration constant
def test_area_radius():
    assert AREA_FACTOR == 1.7
    expected = int(math.sqrt(1.0 / math.pi) * 1.7 * 25)
    assert dot_radius(0.0, 50, 1, SizingPolicy.AREA) == expected == 23
    assert dot_radius(0.75, 50, 2, SizingPolicy.AREA) == int(math.sqrt(0.25 / math.pi) * 1.7 * 50)
    assert dot_radius(1.0, 50, 1, SizingPolicy.AREA) == 0


# Test 5: area policy gives bigger dots than linear in the light tones
@pytest.mark.parametrize("value", [0.3, 0.5, 0.8, 0.95])
def test_area_larger_for_light_regions(value):
    assert dot_radius(value, 100, 4, SizingPolicy.AREA) > dot_radius(value, 100, 4, SizingPolicy.LINEAR)


# Test 6: radius can be zero without raising
def test_zero_radius_for_tiny_boxes():
    assert dot_radius(0.0, 1, 1) == 0
    assert dot_radius(0.0, 1, 1, SizingPolicy.AREA) == 0


# Test 7: centers sit in the middle of each box, in output pixels
def test_dot_center():
    assert dot_center(0, 0, 50, 1) == (25, 25)
    assert dot_center(1, 0, 50, 1) == (75, 25)
    assert dot_center(1, 2, 50, 2) == (150, 250)
    assert dot_center(0, 1, 7, 1) == (3, 10)


# Test 8: unknown sizing policy is rejected
def test_unknown_sizing_policy():
    with pytest.raises(ValueError):
        dot_radius(0.5, 50, 1, "circle")
