"""Geometric primitives used throughout the map model."""

from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict


class Point2D(BaseModel):
    """Point (or direction) on the floor plane."""
    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_polar(cls, center: Point2D, radius: float, angle: float) -> Point2D:
        """Point at `radius` from `center`, `angle` radians counterclockwise from +x."""
        return cls(
            x=center.x + radius * math.cos(angle),
            y=center.y + radius * math.sin(angle),
        )

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalized(self) -> Point2D:
        ln = self.length()
        if ln < 1e-10:
            return Point2D(x=0.0, y=0.0)
        return self / ln

    def dot(self, other: Point2D) -> float:
        return self.x * other.x + self.y * other.y

    def orthogonal(self) -> Point2D:
        """90-degree counterclockwise rotation."""
        return Point2D(x=-self.y, y=self.x)

    def angle(self) -> float:
        """Direction angle in radians, (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def distance_to(self, other: Point2D) -> float:
        return (other - self).length()

    def lerp(self, other: Point2D, t: float) -> Point2D:
        return Point2D(
            x=self.x + (other.x - self.x) * t,
            y=self.y + (other.y - self.y) * t,
        )

    def __add__(self, other: Point2D) -> Point2D:
        return Point2D(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: Point2D) -> Point2D:
        return Point2D(x=self.x - other.x, y=self.y - other.y)

    def __mul__(self, scalar: float) -> Point2D:
        return Point2D(x=self.x * scalar, y=self.y * scalar)

    def __rmul__(self, scalar: float) -> Point2D:
        return self * scalar

    def __truediv__(self, scalar: float) -> Point2D:
        return Point2D(x=self.x / scalar, y=self.y / scalar)

    def __neg__(self) -> Point2D:
        return Point2D(x=-self.x, y=-self.y)

    def __str__(self) -> str:
        return f"({self.x}; {self.y})"


class Point3D(BaseModel):
    """Point in 3D space, z pointing up."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float

    def distance_to(self, other: Point3D) -> float:
        return math.sqrt(
            (self.x - other.x) ** 2
            + (self.y - other.y) ** 2
            + (self.z - other.z) ** 2
        )


def direction_from_points(start: Point2D, end: Point2D) -> Point2D:
    """Get direction vector from start to end."""
    return end - start


def order_key(p: Point2D) -> tuple[float, float]:
    """Sort key placing points left to right, bottom to top on ties."""
    return (p.x, p.y)


def is_large_arc(start_angle: float, end_angle: float) -> bool:
    """True if going from start_angle to end_angle spans more than half a turn."""
    return end_angle - start_angle > math.pi
