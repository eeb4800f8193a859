"""Sprite-sheet animations: one animation per row of equally sized tiles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from quadkit.rect import Rect
from quadkit.vecmath import Vec2

__all__ = ["Animation", "AnimationFrame", "AnimatedSprite"]


@dataclass
class Animation:
    """One animation: the sheet row it occupies, its frame count and speed."""

    name: str
    row: int
    frames: int
    fps: int


@dataclass
class AnimationFrame:
    """Area of a frame within the sheet and the size to draw it at."""

    source_rect: Rect
    dest_size: Vec2


class AnimatedSprite:
    """Tracks the current animation and frame of a tiled sprite sheet."""

    def __init__(
        self,
        tile_width: int,
        tile_height: int,
        animations: Iterable[Animation],
        playing: bool,
    ) -> None:
        self.tile_width = float(tile_width)
        self.tile_height = float(tile_height)
        self.animations = list(animations)
        self.playing = playing
        self._current_animation = 0
        self._time = 0.0
        self._frame = 0

    @property
    def current_animation(self) -> int:
        """Index of the chosen animation."""
        return self._current_animation

    def set_animation(self, animation: int) -> None:
        """Choose the animation to show; the frame is wrapped, not reset."""
        chosen = self.animations[animation]
        self._current_animation = animation
        self._frame %= chosen.frames

    def set_frame(self, frame: int) -> None:
        """Jump to a specific frame."""
        self._frame = frame

    def update(self, frame_time: float) -> None:
        """Advance time; move to the next frame once 1/fps seconds have passed."""
        animation = self.animations[self._current_animation]
        if self.playing:
            self._time += frame_time
            period = math.inf if animation.fps == 0 else 1.0 / animation.fps
            if self._time > period:
                self._frame += 1
                self._time = 0.0
        self._frame %= animation.frames

    def frame(self) -> AnimationFrame:
        """The current frame."""
        animation = self.animations[self._current_animation]
        return AnimationFrame(
            source_rect=Rect(
                self.tile_width * self._frame,
                self.tile_height * animation.row,
                self.tile_width,
                self.tile_height,
            ),
            dest_size=Vec2(self.tile_width, self.tile_height),
        )