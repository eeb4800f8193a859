"""Two-dimensional vector and small math helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TypeVar

__all__ = ["Vec2", "polar_to_cartesian", "cartesian_to_polar", "clamp"]


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def distance(self, other: Vec2) -> float:
        """Euclidean distance to another point."""
        return (self - other).length()


Vec2.ZERO = Vec2(0.0, 0.0)  # type: ignore[attr-defined]


def polar_to_cartesian(rho: float, theta: float) -> Vec2:
    """Convert polar coordinates to a cartesian point."""
    return Vec2(rho * math.cos(theta), rho * math.sin(theta))


def cartesian_to_polar(cartesian: Vec2) -> Vec2:
    """Convert a cartesian point to polar coordinates, returned as (rho, theta)."""
    return Vec2(
        math.sqrt(cartesian.x**2 + cartesian.y**2),
        math.atan2(cartesian.y, cartesian.x),
    )


T = TypeVar("T")


def clamp(value: T, low: T, high: T) -> T:
    """Return value bounded to the range [low, high]."""
    if value < low:  # type: ignore[operator]
        return low
    if value > high:  # type: ignore[operator]
        return high
    return value