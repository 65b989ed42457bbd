"""
Tests for the vector type and rain formatting.
"""

import dataclasses

import pytest

from rain_sim.rain_core.vector import Vector2, format_rain


class TestVector2:
    """Test the vector value type."""

    def test_default_is_origin(self):
        assert Vector2() == Vector2(0.0, 0.0)
        assert Vector2.zero() == Vector2()

    def test_two_decimal_display(self):
        assert str(Vector2(1.0, -0.5)) == "(1.00, -0.50)"
        assert str(Vector2(12.3456, 0.004)) == "(12.35, 0.00)"

    def test_frozen(self):
        v = Vector2(1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.x = 3.0


class TestFormatRain:
    """Test the raindrop listing."""

    def test_each_drop_followed_by_space(self):
        rain = [Vector2(1.0, 2.0), Vector2(3.5, 0.25)]
        assert format_rain(rain) == "(1.00, 2.00) (3.50, 0.25) "

    def test_empty(self):
        assert format_rain([]) == ""
