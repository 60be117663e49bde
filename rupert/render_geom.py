"""Plain 2d geometry used for drawing."""

from __future__ import annotations

from dataclasses import dataclass

Poly = list  # a polygon is a list of Point2d


@dataclass(frozen=True)
class Point2d:
    """A point in 2d."""

    x: float
    y: float


@dataclass(frozen=True)
class Xform:
    """A 2d transformation made of a scaling followed by a translation."""

    scale: float
    translate: Point2d

    def apply(self, p: Point2d) -> Point2d:
        return Point2d(
            self.scale * p.x + self.translate.x,
            self.scale * p.y + self.translate.y,
        )