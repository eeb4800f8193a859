"""Keyboard, mouse and touch state gathered from window events."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Hashable, Optional

from quadkit.events import InputEvent, KeyMods, MouseButton, TouchPhase
from quadkit.vecmath import Vec2

__all__ = ["Touch", "InputState"]


@dataclass
class Touch:
    """One active touch point."""

    id: int
    phase: TouchPhase
    position: Vec2
    time: float


@dataclass
class InputState:
    """Input state for one window, fed by ``*_event`` calls and read per frame.

    Keys and buttons that were pressed or released are remembered until
    ``end_frame``; keys and buttons held down stay until they are released.
    """

    screen_width: float = 800.0
    screen_height: float = 600.0
    dpi_scale: float = 1.0
    simulate_mouse_with_touch: bool = True
    cursor_grabbed: bool = False
    prevent_quit_event: bool = False
    quit_requested: bool = False
    _keys_down: dict = field(default_factory=dict, repr=False)
    _keys_pressed: dict = field(default_factory=dict, repr=False)
    _keys_released: dict = field(default_factory=dict, repr=False)
    _mouse_down: set = field(default_factory=set, repr=False)
    _mouse_pressed: set = field(default_factory=set, repr=False)
    _mouse_released: set = field(default_factory=set, repr=False)
    _touches: dict = field(default_factory=dict, repr=False)
    _chars: list = field(default_factory=list, repr=False)
    _mouse_position: Vec2 = field(default=Vec2(0.0, 0.0), repr=False)
    _mouse_wheel: Vec2 = field(default=Vec2(0.0, 0.0), repr=False)
    _subscribers: list = field(default_factory=list, repr=False)

    # -- event intake -------------------------------------------------------

    def _broadcast(self, event: InputEvent) -> None:
        for queue in self._subscribers:
            queue.append(event)

    def resize_event(self, width: float, height: float) -> None:
        """Record a new screen size."""
        self.screen_width = width
        self.screen_height = height

    def raw_mouse_motion(self, x: float, y: float) -> None:
        """Relative mouse motion; moves the cursor only while it is grabbed."""
        if not self.cursor_grabbed:
            return
        self._mouse_position = self._mouse_position + Vec2(x, y)
        self._broadcast(
            InputEvent.mouse_motion(self._mouse_position.x, self._mouse_position.y)
        )

    def mouse_motion_event(self, x: float, y: float) -> None:
        """Absolute mouse motion; ignored while the cursor is grabbed."""
        if self.cursor_grabbed:
            return
        self._mouse_position = Vec2(x, y)
        self._broadcast(InputEvent.mouse_motion(x, y))

    def mouse_wheel_event(self, x: float, y: float) -> None:
        """Record wheel movement for this frame."""
        self._mouse_wheel = Vec2(x, y)
        self._broadcast(InputEvent.mouse_wheel(x, y))

    def mouse_button_down_event(self, button: MouseButton, x: float, y: float) -> None:
        """A mouse button went down at (x, y)."""
        button = MouseButton(button)
        self._mouse_down.add(button)
        self._mouse_pressed.add(button)
        self._broadcast(InputEvent.mouse_button_down(button, x, y))
        if not self.cursor_grabbed:
            self._mouse_position = Vec2(x, y)

    def mouse_button_up_event(self, button: MouseButton, x: float, y: float) -> None:
        """A mouse button went up at (x, y)."""
        button = MouseButton(button)
        self._mouse_down.discard(button)
        self._mouse_released.add(button)
        self._broadcast(InputEvent.mouse_button_up(button, x, y))
        if not self.cursor_grabbed:
            self._mouse_position = Vec2(x, y)

    def touch_event(
        self, phase: TouchPhase, touch_id: int, x: float, y: float, time: float
    ) -> None:
        """Record a touch; may also raise the matching left-button mouse events."""
        phase = TouchPhase(phase)
        self._touches[touch_id] = Touch(touch_id, phase, Vec2(x, y), time)

        if self.simulate_mouse_with_touch:
            if phase is TouchPhase.STARTED:
                self.mouse_button_down_event(MouseButton.LEFT, x, y)
            elif phase is TouchPhase.ENDED:
                self.mouse_button_up_event(MouseButton.LEFT, x, y)
            elif phase is TouchPhase.MOVED:
                self.mouse_motion_event(x, y)

        self._broadcast(InputEvent.touch(phase, touch_id, x, y, time))

    def char_event(self, character: str, modifiers: KeyMods, repeat: bool) -> None:
        """A character was typed."""
        event = InputEvent.char(character, modifiers, repeat)
        self._chars.append(character)
        self._broadcast(event)

    def key_down_event(self, keycode: Hashable, modifiers: KeyMods, repeat: bool) -> None:
        """A key went down; auto-repeats do not count as new presses."""
        self._keys_down[keycode] = None
        if not repeat:
            self._keys_pressed[keycode] = None
        self._broadcast(InputEvent.key_down(keycode, modifiers, repeat))

    def key_up_event(self, keycode: Hashable, modifiers: KeyMods) -> None:
        """A key went up."""
        self._keys_down.pop(keycode, None)
        self._keys_released[keycode] = None
        self._broadcast(InputEvent.key_up(keycode, modifiers))

    def quit_requested_event(self) -> bool:
        """Handle a request to quit; return True if the quit is cancelled."""
        if self.prevent_quit_event:
            self.quit_requested = True
            return True
        return False

    def end_frame(self) -> None:
        """Forget per-frame input and age the touches."""
        self._mouse_wheel = Vec2(0.0, 0.0)
        self._keys_pressed.clear()
        self._keys_released.clear()
        self._mouse_pressed.clear()
        self._mouse_released.clear()
        self.quit_requested = False

        self._touches = {
            touch_id: touch
            for touch_id, touch in self._touches.items()
            if touch.phase not in (TouchPhase.ENDED, TouchPhase.CANCELLED)
        }
        for touch in self._touches.values():
            if touch.phase in (TouchPhase.STARTED, TouchPhase.MOVED):
                touch.phase = TouchPhase.STATIONARY

    # -- queries ------------------------------------------------------------

    def set_cursor_grab(self, grab: bool) -> None:
        """Constrain the mouse to the window."""
        self.cursor_grabbed = grab

    def _to_local(self, position: Vec2) -> Vec2:
        scaled = Vec2(position.x / self.screen_width, position.y / self.screen_height)
        return scaled * 2.0 - Vec2(1.0, 1.0)

    def mouse_position(self) -> tuple[float, float]:
        """Mouse position in logical pixels."""
        return (
            self._mouse_position.x / self.dpi_scale,
            self._mouse_position.y / self.dpi_scale,
        )

    def mouse_position_local(self) -> Vec2:
        """Mouse position mapped to the range [-1, 1]."""
        return self._to_local(Vec2(*self.mouse_position()))

    def touches(self) -> list[Touch]:
        """Copies of the active touches, positions in pixels."""
        return [replace(touch) for touch in self._touches.values()]

    def touches_local(self) -> list[Touch]:
        """Copies of the active touches, positions mapped to [-1, 1]."""
        return [
            replace(touch, position=self._to_local(touch.position))
            for touch in self._touches.values()
        ]

    def mouse_wheel(self) -> tuple[float, float]:
        """Wheel movement during this frame."""
        return (self._mouse_wheel.x, self._mouse_wheel.y)

    def is_key_pressed(self, keycode: Hashable) -> bool:
        """Whether the key was pressed this frame."""
        return keycode in self._keys_pressed

    def is_key_down(self, keycode: Hashable) -> bool:
        """Whether the key is held down."""
        return keycode in self._keys_down

    def is_key_released(self, keycode: Hashable) -> bool:
        """Whether the key was released this frame."""
        return keycode in self._keys_released

    def get_char_pressed(self) -> Optional[str]:
        """Take the most recently typed character from the queue, or None."""
        return self._chars.pop() if self._chars else None

    def get_last_key_pressed(self) -> Optional[Hashable]:
        """The most recently pressed key this frame, or None."""
        return next(reversed(self._keys_pressed), None)

    def is_mouse_button_down(self, button: MouseButton) -> bool:
        """Whether the button is held down."""
        return MouseButton(button) in self._mouse_down

    def is_mouse_button_pressed(self, button: MouseButton) -> bool:
        """Whether the button was pressed this frame."""
        return MouseButton(button) in self._mouse_pressed

    def is_mouse_button_released(self, button: MouseButton) -> bool:
        """Whether the button was released this frame."""
        return MouseButton(button) in self._mouse_released

    def prevent_quit(self) -> None:
        """Cancel quit requests; they are reported by is_quit_requested instead."""
        self.prevent_quit_event = True

    def is_quit_requested(self) -> bool:
        """Whether a prevented quit was requested this frame."""
        return self.quit_requested

    # -- subscribers --------------------------------------------------------

    def register_input_subscriber(self) -> int:
        """Start recording events for a new subscriber and return its id."""
        self._subscribers.append([])
        return len(self._subscribers) - 1

    def repeat_all_input(self, handler: Any, subscriber: int) -> None:
        """Replay to handler every event recorded for subscriber, then forget them."""
        queue = self._subscribers[subscriber]
        for event in queue:
            event.repeat(handler)
        queue.clear()