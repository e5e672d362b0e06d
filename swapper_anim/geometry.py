"""Plane geometry helpers for bones and hit tests."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> Vec2:
        return Vec2(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def __truediv__(self, scale: float) -> Vec2:
        return Vec2(self.x / scale, self.y / scale)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)


def deg_to_rad(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * math.pi / 180


def rad_to_deg(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * 180 / math.pi


def unit_vector(v: Vec2) -> Vec2:
    """Return ``v`` scaled to length one."""
    length = v.length()
    if length == 0:
        raise ValueError("cannot normalise a zero-length vector")
    return v / length


def rotate_about(point: Vec2, base: Vec2, angle: float) -> Vec2:
    """Rotate ``point`` around ``base`` by ``angle`` radians."""
    offset = point - base
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    rotated = Vec2(
        offset.x * cos_a - offset.y * sin_a,
        offset.x * sin_a + offset.y * cos_a,
    )
    return rotated + base


def vector_length(v: Vec2) -> float:
    """Length of ``v``."""
    return v.length()


def dot(a: Vec2, b: Vec2) -> float:
    """Dot product of two vectors."""
    return a.x * b.x + a.y * b.y


def cross(a: Vec2, b: Vec2) -> float:
    """Z component of the cross product of two vectors."""
    return a.x * b.y - a.y * b.x


def angle_between(a: Vec2, b: Vec2) -> float:
    """Unsigned angle between two vectors, in radians within [0, pi]."""
    length_a = a.length()
    length_b = b.length()
    if length_a == 0 or length_b == 0:
        raise ValueError("angle is undefined for a zero-length vector")
    cosine = dot(a, b) / (length_a * length_b)
    return math.acos(max(-1.0, min(1.0, cosine)))


def on_line(start: Vec2, end: Vec2, point: Vec2, radius: int) -> bool:
    """Tell whether ``point`` lies within ``radius`` of the segment.

    The segment is sampled every ``radius`` units from ``start``.
    """
    if radius <= 0:
        raise ValueError("radius must be positive")
    length = (end - start).length()
    if length == 0:
        return False
    step = unit_vector(end - start) * radius
    probe = start
    travelled = 0
    while travelled < length:
        if (probe - point).length() < radius:
            return True
        probe = probe + step
        travelled += radius
    return False