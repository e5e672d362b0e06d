"""Edge-detecting input state for a game pad, keyboard and mouse."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

PAD_BUTTONS = 16
KEYBOARD_KEYS = 256
STICK_MAX = 32767.0

LEFT = 0
RIGHT = 1

MOVE_RIGHT = 0.2
MOVE_LEFT = -0.2
MOVE_UP = 0.2
MOVE_DOWN = -0.2

MOUSE_BUTTONS = 2


class InputState(IntEnum):
    """State of a button between two frames."""

    NONE = 0
    PRESS = 1
    PRESSED = 2
    RELEASE = 3


@dataclass(frozen=True)
class PadStick:
    """Tilt of an analogue stick."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class MousePoint:
    """Mouse cursor position in pixels."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class InputSnapshot:
    """Raw device state sampled for one frame.

    ``mouse_buttons`` is a bit mask: bit 0 is the left button, bit 1 the right.
    """

    buttons: frozenset[int] = field(default_factory=frozenset)
    left_stick: PadStick = field(default_factory=PadStick)
    right_stick: PadStick = field(default_factory=PadStick)
    keys: frozenset[int] = field(default_factory=frozenset)
    mouse: MousePoint = field(default_factory=MousePoint)
    mouse_buttons: int = 0


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _check_index(index: int, size: int, what: str) -> None:
    if not 0 <= index < size:
        raise IndexError(f"{what} {index} out of range 0..{size - 1}")


class InputController:
    """Keeps the current and previous frame's input to report edges."""

    def __init__(self) -> None:
        self._now_buttons = [False] * PAD_BUTTONS
        self._old_buttons = [False] * PAD_BUTTONS
        self._left_stick = PadStick()
        self._right_stick = PadStick()
        # Positive: frames held; -1: released this frame; 0: idle.
        self._key_counters = [0] * KEYBOARD_KEYS
        self._mouse = MousePoint()
        self._now_mouse = [False] * MOUSE_BUTTONS
        self._old_mouse = [False] * MOUSE_BUTTONS

    def update(self, snapshot: InputSnapshot) -> None:
        """Advance one frame using freshly sampled device state."""
        self._old_buttons = self._now_buttons
        self._now_buttons = [b in snapshot.buttons for b in range(PAD_BUTTONS)]

        self._left_stick = snapshot.left_stick
        self._right_stick = snapshot.right_stick

        self._key_counters = [
            max(count, 0) + 1 if key in snapshot.keys else (-1 if count > 0 else 0)
            for key, count in enumerate(self._key_counters)
        ]

        self._mouse = snapshot.mouse

        self._old_mouse = self._now_mouse
        self._now_mouse = [
            bool(snapshot.mouse_buttons & (1 << i)) for i in range(MOUSE_BUTTONS)
        ]

    @staticmethod
    def _edge(now: bool, old: bool) -> InputState:
        if now and not old:
            return InputState.PRESS
        if now:
            return InputState.PRESSED
        if old:
            return InputState.RELEASE
        return InputState.NONE

    def button_state(self, button: int) -> InputState:
        """State of a pad button."""
        _check_index(button, PAD_BUTTONS, "button")
        return self._edge(self._now_buttons[button], self._old_buttons[button])

    def stick_state(self, stick: int) -> PadStick:
        """Raw tilt of the left (0) or right (non-zero) stick."""
        return self._right_stick if stick else self._left_stick

    def stick_ratio(self, stick: int) -> PadStick:
        """Stick tilt as a fraction of full scale, rounded to two places."""
        raw = self.stick_state(stick)
        return PadStick(
            _round_half_away(raw.x / STICK_MAX * 100.0) / 100.0,
            _round_half_away(raw.y / STICK_MAX * 100.0) / 100.0,
        )

    def key_state(self, key: int) -> InputState:
        """State of a keyboard key."""
        _check_index(key, KEYBOARD_KEYS, "key")
        count = self._key_counters[key]
        if count == 1:
            return InputState.PRESS
        if count > 1:
            return InputState.PRESSED
        if count < 0:
            return InputState.RELEASE
        return InputState.NONE

    def mouse_state(self, button: int) -> InputState:
        """State of the left (0) or right (1) mouse button."""
        _check_index(button, MOUSE_BUTTONS, "mouse button")
        return self._edge(self._now_mouse[button], self._old_mouse[button])

    def mouse_cursor(self) -> MousePoint:
        """Current mouse cursor position."""
        return self._mouse