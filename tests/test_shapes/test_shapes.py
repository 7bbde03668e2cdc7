from __future__ import annotations

import pytest

from cssbuilder.shapes import Rectangle, area


class TestRectangle:
    def test_fields(self) -> None:
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_area_function(self) -> None:
        assert area(Rectangle(10, 20)) == 200

    def test_area_property(self) -> None:
        assert Rectangle(2.5, 4).area == 10.0

    def test_zero_size(self) -> None:
        assert area(Rectangle(0, 5)) == 0

    def test_frozen(self) -> None:
        r = Rectangle(1, 1)
        with pytest.raises(AttributeError):
            r.width = 3  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Rectangle(1, 2) == Rectangle(1, 2)
        assert Rectangle(1, 2) != Rectangle(2, 1)
