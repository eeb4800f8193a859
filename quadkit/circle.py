"""Circles and circle collision tests."""

from __future__ import annotations

from dataclasses import dataclass

from quadkit.rect import Rect
from quadkit.vecmath import Vec2

__all__ = ["Circle"]


@dataclass
class Circle:
    """A circle given by its center and radius."""

    x: float = 0.0
    y: float = 0.0
    r: float = 0.0

    def point(self) -> Vec2:
        """Center of the circle."""
        return Vec2(self.x, self.y)

    def move_to(self, destination: Vec2) -> None:
        """Move the center to destination."""
        self.x = destination.x
        self.y = destination.y

    def scale(self, sr: float) -> None:
        """Multiply the radius by sr."""
        self.r *= sr

    def contains(self, pos: Vec2) -> bool:
        """Whether pos lies strictly inside the circle."""
        return pos.distance(self.point()) < self.r

    def overlaps(self, other: Circle) -> bool:
        """Whether the circles overlap; touching does not count."""
        return self.point().distance(other.point()) < self.r + other.r

    def overlaps_rect(self, rect: Rect) -> bool:
        """Whether the circle overlaps the rectangle; touching counts."""
        center = rect.center()
        dist_x = abs(self.x - center.x)
        dist_y = abs(self.y - center.y)
        half_w = rect.w / 2.0
        half_h = rect.h / 2.0
        if dist_x > half_w + self.r or dist_y > half_h + self.r:
            return False
        if dist_x <= half_w or dist_y <= half_h:
            return True
        dx = dist_x - half_w
        dy = dist_y - half_h
        return dx * dx + dy * dy <= self.r * self.r

    def offset(self, offset: Vec2) -> Circle:
        """A copy translated by offset."""
        return Circle(self.x + offset.x, self.y + offset.y, self.r)