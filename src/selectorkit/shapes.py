"""Rectangle value with an area accessor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle described by its width and height."""

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height
