"""Rectangle: a plain object with a computed area."""

from __future__ import annotations


class Rectangle:
    """Width/height pair whose area is recomputed on every call."""

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def get_area(self) -> float:
        return self.width * self.height

    def __repr__(self) -> str:
        return f"Rectangle(width={self.width!r}, height={self.height!r})"
