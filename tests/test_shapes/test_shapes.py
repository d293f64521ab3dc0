"""Tests for the Rectangle value."""

import pytest

from selectorkit.shapes import Rectangle


class TestRectangle:
    def test_fields(self):
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_area(self):
        assert Rectangle(10, 20).area() == 200

    def test_area_with_floats(self):
        assert Rectangle(2.5, 4).area() == pytest.approx(10.0)

    def test_zero_area(self):
        assert Rectangle(0, 5).area() == 0

    def test_frozen(self):
        r = Rectangle(1, 2)
        with pytest.raises(AttributeError):
            r.width = 3  # type: ignore[misc]

    def test_equality(self):
        assert Rectangle(1, 2) == Rectangle(1, 2)
        assert Rectangle(1, 2) != Rectangle(2, 1)
