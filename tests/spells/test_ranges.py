"""
Tests for spell ranges.
"""

import pytest
from sacred_geometry.spells.ranges import RangeKind, describe_range


@pytest.mark.parametrize(
    "caster_level, close, medium, long",
    [
        (1, 25, 110, 440),
        (5, 35, 150, 600),
        (10, 50, 200, 800),
        (20, 75, 300, 1200),
    ],
)
def test_range_distances(caster_level, close, medium, long):
    assert RangeKind.TOUCH.distance(caster_level) == 0
    assert RangeKind.CLOSE.distance(caster_level) == close
    assert RangeKind.MEDIUM.distance(caster_level) == medium
    assert RangeKind.LONG.distance(caster_level) == long
    assert RangeKind.PERSONAL.distance(caster_level) is None


def test_describe_known_ranges():
    assert describe_range("Close", 6) == "40 feet (Base: 25 ft + Bonus: 15 ft)"
    assert describe_range("medium", 6) == "160 feet (Base: 100 ft + 60 ft from caster level)"
    assert describe_range("LONG", 6) == "640 feet (Base: 400 ft + 240 ft from caster level)"
    assert describe_range("Touch", 6) == "Touch range (no numerical distance)"
    assert describe_range("Personal", 6) == "Personal (self only)"


def test_describe_unknown_range_is_unchanged():
    assert describe_range("Sight", 6) == "Sight"
    assert describe_range("", 6) == ""


def test_unlimited_has_no_distance():
    assert RangeKind.UNLIMITED.distance(10) is None
    assert RangeKind.UNLIMITED.compute(10) == "Unlimited range"


def test_every_range_has_description():
    for kind in RangeKind:
        assert kind.description
        assert kind.compute(6)
