"""Rectangle value type."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    width: float
    height: float

    @property
    def area(self) -> float:
        return area(self)


def area(rect: Rectangle) -> float:
    """Return the area of *rect*."""
    return rect.width * rect.height
