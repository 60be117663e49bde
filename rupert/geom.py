"""Quaternions and 3d points over exact numbers or intervals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from rupert.interval import recip, square


@dataclass(frozen=True)
class Point3d:
    """A point in 3d."""

    x: Any
    y: Any
    z: Any

    def __add__(self, rhs: Point3d) -> Point3d:
        if not isinstance(rhs, Point3d):
            return NotImplemented
        return Point3d(self.x + rhs.x, self.y + rhs.y, self.z + rhs.z)

    def __sub__(self, rhs: Point3d) -> Point3d:
        if not isinstance(rhs, Point3d):
            return NotImplemented
        return Point3d(self.x - rhs.x, self.y - rhs.y, self.z - rhs.z)

    def __mul__(self, rhs: Any) -> Point3d:
        if isinstance(rhs, Point3d):
            return NotImplemented
        return Point3d(self.x * rhs, self.y * rhs, self.z * rhs)

    def cross(self, rhs: Point3d) -> Point3d:
        return Point3d(
            self.y * rhs.z - self.z * rhs.y,
            self.z * rhs.x - self.x * rhs.z,
            self.x * rhs.y - self.y * rhs.x,
        )

    def dot(self, rhs: Point3d) -> Any:
        return self.x * rhs.x + self.y * rhs.y + self.z * rhs.z


@dataclass(frozen=True)
class Quat:
    """A quaternion r + a i + b j + c k, not necessarily of unit norm."""

    r: Any
    a: Any
    b: Any
    c: Any

    def conj(self) -> Quat:
        return Quat(self.r, -self.a, -self.b, -self.c)

    def invsqnorm(self) -> Any:
        """Reciprocal of the squared norm."""
        return recip(square(self.r) + square(self.a) + square(self.b) + square(self.c))

    def rotate(self, point: Point3d) -> Point3d:
        """Rotate a point by this quaternion, normalising by its norm."""
        pure = Quat(0, point.x, point.y, point.z)
        scale = self.invsqnorm()
        non_norm = self * pure * self.conj()
        return Point3d(non_norm.a * scale, non_norm.b * scale, non_norm.c * scale)

    def __mul__(self, rhs: Any) -> Any:
        if isinstance(rhs, Point3d):
            return self.rotate(rhs)
        if not isinstance(rhs, Quat):
            return NotImplemented
        xr, xa, xb, xc = self.r, self.a, self.b, self.c
        yr, ya, yb, yc = rhs.r, rhs.a, rhs.b, rhs.c
        return Quat(
            xr * yr - xa * ya - xb * yb - xc * yc,
            xr * ya + xb * yc + xa * yr - xc * yb,
            xr * yb + xc * ya + xb * yr - xa * yc,
            xr * yc + xa * yb + xc * yr - xb * ya,
        )


def rotate_vertices(rotation: Quat, vertices: Iterable[Point3d]) -> list[Point3d]:
    """Rotate every vertex by the given rotation."""
    return [rotation * v for v in vertices]