"""Geometric primitives used throughout the engine.

Y-up, Three.js convention: X runs across the stand front, Z is depth with
+Z pointing towards the viewer.
"""

from __future__ import annotations
import math
from pydantic import BaseModel


class Point3D(BaseModel):
    """Point in 3D space (centimeters)."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def distance_to(self, other: Point3D) -> float:
        return math.sqrt(
            (self.x - other.x) ** 2
            + (self.y - other.y) ** 2
            + (self.z - other.z) ** 2
        )

    def lerp(self, other: Point3D, t: float) -> Point3D:
        return Point3D(
            x=self.x + (other.x - self.x) * t,
            y=self.y + (other.y - self.y) * t,
            z=self.z + (other.z - self.z) * t,
        )

    def midpoint(self, other: Point3D) -> Point3D:
        return self.lerp(other, 0.5)

    def offset(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> Point3D:
        return Point3D(x=self.x + dx, y=self.y + dy, z=self.z + dz)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __add__(self, other: Vector3D) -> Point3D:
        return Point3D(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)

    def __sub__(self, other: Vector3D) -> Point3D:
        return Point3D(x=self.x - other.x, y=self.y - other.y, z=self.z - other.z)


class Vector3D(BaseModel):
    """Direction vector in 3D space."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3D:
        ln = self.length()
        if ln < 1e-10:
            return Vector3D()
        return Vector3D(x=self.x / ln, y=self.y / ln, z=self.z / ln)

    def horizontal_perpendicular(self) -> Vector3D:
        """90-degree rotation in the floor (X-Z) plane; Y is dropped."""
        return Vector3D(x=-self.z, y=0.0, z=self.x)

    def __mul__(self, scalar: float) -> Vector3D:
        return Vector3D(x=self.x * scalar, y=self.y * scalar, z=self.z * scalar)


class Size3D(BaseModel):
    """Axis-aligned box extents: width (X), height (Y), depth (Z)."""
    width: float
    height: float
    depth: float


def direction_from_points(start: Point3D, end: Point3D) -> Vector3D:
    """Get direction vector from start to end."""
    return Vector3D(x=end.x - start.x, y=end.y - start.y, z=end.z - start.z)
