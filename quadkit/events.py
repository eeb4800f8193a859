"""Recorded input events that can be replayed to an event handler."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Hashable, Optional

__all__ = ["TouchPhase", "MouseButton", "KeyMods", "EventKind", "InputEvent"]


class TouchPhase(enum.Enum):
    """Stage of a touch's life."""

    STARTED = "started"
    STATIONARY = "stationary"
    MOVED = "moved"
    ENDED = "ended"
    CANCELLED = "cancelled"


class MouseButton(enum.Enum):
    """Mouse buttons."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class KeyMods:
    """Modifier keys held during a keyboard event."""

    shift: bool = False
    ctrl: bool = False
    alt: bool = False
    logo: bool = False


class EventKind(enum.Enum):
    """The kinds of input event that are recorded."""

    MOUSE_MOTION = "mouse_motion"
    MOUSE_WHEEL = "mouse_wheel"
    MOUSE_BUTTON_DOWN = "mouse_button_down"
    MOUSE_BUTTON_UP = "mouse_button_up"
    CHAR = "char"
    KEY_DOWN = "key_down"
    KEY_UP = "key_up"
    TOUCH = "touch"


@dataclass(frozen=True)
class InputEvent:
    """One input event; build it with the classmethod for its kind."""

    kind: EventKind
    x: float = 0.0
    y: float = 0.0
    button: Optional[MouseButton] = None
    character: Optional[str] = None
    keycode: Optional[Hashable] = None
    modifiers: KeyMods = field(default_factory=KeyMods)
    is_repeat: bool = False
    phase: Optional[TouchPhase] = None
    touch_id: int = 0
    time: float = 0.0

    @classmethod
    def mouse_motion(cls, x: float, y: float) -> InputEvent:
        return cls(EventKind.MOUSE_MOTION, x=x, y=y)

    @classmethod
    def mouse_wheel(cls, x: float, y: float) -> InputEvent:
        return cls(EventKind.MOUSE_WHEEL, x=x, y=y)

    @classmethod
    def mouse_button_down(cls, button: MouseButton, x: float, y: float) -> InputEvent:
        return cls(EventKind.MOUSE_BUTTON_DOWN, x=x, y=y, button=MouseButton(button))

    @classmethod
    def mouse_button_up(cls, button: MouseButton, x: float, y: float) -> InputEvent:
        return cls(EventKind.MOUSE_BUTTON_UP, x=x, y=y, button=MouseButton(button))

    @classmethod
    def char(cls, character: str, modifiers: KeyMods, repeat: bool) -> InputEvent:
        if len(character) != 1:
            raise ValueError(f"expected a single character, got {character!r}")
        return cls(
            EventKind.CHAR, character=character, modifiers=modifiers, is_repeat=repeat
        )

    @classmethod
    def key_down(cls, keycode: Hashable, modifiers: KeyMods, repeat: bool) -> InputEvent:
        return cls(
            EventKind.KEY_DOWN, keycode=keycode, modifiers=modifiers, is_repeat=repeat
        )

    @classmethod
    def key_up(cls, keycode: Hashable, modifiers: KeyMods) -> InputEvent:
        return cls(EventKind.KEY_UP, keycode=keycode, modifiers=modifiers)

    @classmethod
    def touch(
        cls, phase: TouchPhase, touch_id: int, x: float, y: float, time: float
    ) -> InputEvent:
        return cls(
            EventKind.TOUCH,
            x=x,
            y=y,
            phase=TouchPhase(phase),
            touch_id=touch_id,
            time=time,
        )

    def _call(self) -> tuple[str, tuple]:
        match self.kind:
            case EventKind.MOUSE_MOTION:
                return "mouse_motion_event", (self.x, self.y)
            case EventKind.MOUSE_WHEEL:
                return "mouse_wheel_event", (self.x, self.y)
            case EventKind.MOUSE_BUTTON_DOWN:
                return "mouse_button_down_event", (self.button, self.x, self.y)
            case EventKind.MOUSE_BUTTON_UP:
                return "mouse_button_up_event", (self.button, self.x, self.y)
            case EventKind.CHAR:
                return "char_event", (self.character, self.modifiers, self.is_repeat)
            case EventKind.KEY_DOWN:
                return "key_down_event", (self.keycode, self.modifiers, self.is_repeat)
            case EventKind.KEY_UP:
                return "key_up_event", (self.keycode, self.modifiers)
            case EventKind.TOUCH:
                return "touch_event", (
                    self.phase,
                    self.touch_id,
                    self.x,
                    self.y,
                    self.time,
                )
        raise ValueError(f"unknown event kind {self.kind!r}")

    def repeat(self, handler: Any) -> None:
        """Deliver this event to the matching ``*_event`` method of handler.

        A handler without that method ignores the event.
        """
        name, args = self._call()
        method = getattr(handler, name, None)
        if method is not None:
            method(*args)