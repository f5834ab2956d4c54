from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    """A width by height rectangle.  Sizes are not range checked."""

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    def get_area(self) -> float:
        return self.area
