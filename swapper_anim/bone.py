"""A single animated bone that rotates about its start point in timed steps."""

from __future__ import annotations

import math
from collections.abc import Iterable

from swapper_anim.geometry import Vec2, angle_between, cross, on_line, rotate_about
from swapper_anim.inputs import RIGHT, InputController, InputState

MAX_STEPS = 32
MAX_TEXT = 32
HIT_RADIUS = 5
EDIT_FRAMES = 180
BACKSPACE = "\b"

# Keyboard scan codes used by the editor.
KEY_RETURN = 0x1C
KEY_UP = 0xC8
KEY_LEFT = 0xCB
KEY_RIGHT = 0xCD
KEY_DOWN = 0xD0

_TAU = math.pi * 2
_UNSET = Vec2(-1.0, -1.0)


def _wrapped_sum(angles: Iterable[float]) -> float:
    """Sum angles, folding the running total back once it passes a full turn."""
    total = 0.0
    for angle in angles:
        total += angle
        if total > _TAU:
            total -= _TAU
    return total


class Bone:
    """A two-point bone whose end point turns about its start point.

    Point positions are kept relative to ``center``; each step of the
    animation turns the bone by ``moved_angles[i]`` over ``frames[i]`` frames,
    clockwise or not as ``clockwise[i]`` says.
    """

    def __init__(self) -> None:
        self.moved_angles = [0.0] * MAX_STEPS
        self.step_angles = [0.0] * MAX_STEPS
        self.frames = [0] * MAX_STEPS
        self.clockwise = [True] * MAX_STEPS
        self.angle = 0.0
        self.moving = False
        self.step = 0
        self.frame_count = 0
        self.points = [_UNSET, _UNSET]
        self.base_points = [_UNSET, _UNSET]
        self.center = _UNSET
        self.selected = False
        self.cursor = 0
        self.handover = (-1, -1)
        self.text = ""

    def initialize(self, start: Vec2, goal: Vec2) -> None:
        """Place the bone from ``start`` to ``goal``; ``start`` becomes the centre."""
        self.center = start
        self.points = [start - self.center, goal - self.center]
        self.base_points = list(self.points)

    def _frames_at(self, index: int) -> int:
        return self.frames[index] if index < MAX_STEPS else 0

    def advance_step(self) -> None:
        """Move on to the next animation step, stopping when it has no frames."""
        self.frame_count = 0
        if self.step + 1 >= MAX_STEPS:
            self.moving = False
            return
        self.step += 1
        if self._frames_at(self.step) == 0:
            self.moving = False

    def update(self) -> None:
        """Advance the animation by one frame."""
        if not self.moving:
            return
        self.frame_count += 1
        if self.clockwise[self.step]:
            self.angle += self.step_angles[self.step]
        else:
            self.angle -= self.step_angles[self.step]
        self.points[1] = rotate_about(self.base_points[1], self.base_points[0], self.angle)
        if self.frame_count >= self.frames[self.step]:
            self.advance_step()

    def target_points(self) -> list[Vec2]:
        """World positions the end point reaches at the close of each step."""
        targets = []
        for i in range(MAX_STEPS):
            if self.frames[i] == 0:
                break
            turn = _wrapped_sum(self.moved_angles[: i + 1])
            point = rotate_about(self.base_points[1], self.base_points[0], turn)
            targets.append(point + self.center)
        return targets

    def _mouse_position(self, inputs: InputController) -> Vec2:
        cursor = inputs.mouse_cursor()
        return Vec2(float(cursor.x), float(cursor.y))

    def _pressed(self, inputs: InputController, key: int) -> bool:
        return inputs.key_state(key) == InputState.PRESS

    def select_update(self, inputs: InputController) -> None:
        """Handle selection by right click and editing of the current step."""
        mouse = self._mouse_position(inputs)
        if (
            not self.selected
            and on_line(self.location(0), self.location(1), mouse, HIT_RADIUS)
            and inputs.mouse_state(RIGHT) == InputState.PRESS
        ):
            self.selected = True
            self.cursor = 0

        if not self.selected:
            return

        if self._pressed(inputs, KEY_UP):
            self.cursor -= 1
        if self._pressed(inputs, KEY_DOWN):
            self.cursor += 1

        if not self.moving:
            return

        if self.cursor == 0:
            if self._pressed(inputs, KEY_LEFT) and self.step != 0:
                self.step -= 1
            if self._pressed(inputs, KEY_RIGHT):
                self.step = min(self.step + 1, MAX_STEPS - 1)
        elif self.cursor == 1:
            if self._pressed(inputs, KEY_LEFT):
                self.clockwise[self.step] = not self.clockwise[self.step]
            if self._pressed(inputs, KEY_RIGHT):
                self.clockwise[self.step] = not self.clockwise[self.step]
        elif self.cursor == 2:
            position = self.set_moved_position(inputs)
            if position is not None:
                turn = position - _wrapped_sum(self.moved_angles[: self.step])
                if turn < 0:
                    turn += _TAU
                self.moved_angles[self.step] = turn
        elif self.cursor == 3:
            self.frames[self.step] = EDIT_FRAMES
        elif self.cursor == 4:
            if self._pressed(inputs, KEY_RETURN):
                self.set_moved(
                    self.moved_angles[self.step],
                    self.frames[self.step],
                    self.step,
                    self.clockwise[self.step],
                )
                self.step = 0
                self.selected = False

    def set_moved_position(self, inputs: InputController) -> float | None:
        """Clockwise angle from the bone to the cursor on a right click.

        Returns None when the right button was not just pressed, or when the
        cursor sits on the pivot so that no direction exists.
        """
        if inputs.mouse_state(RIGHT) != InputState.PRESS:
            return None
        mouse = self._mouse_position(inputs)
        start = self.location(0)
        bone = self.location(1) - start
        towards = mouse - start
        try:
            turn = angle_between(bone, towards)
        except ValueError:
            return None
        if cross(bone, towards) < 0:
            turn = _TAU - turn
        return turn

    def set_moved(self, angle: float, frames: int, index: int, clockwise: bool) -> None:
        """Set step ``index`` to turn by ``angle`` over ``frames`` frames and start moving."""
        if not 0 <= index < MAX_STEPS:
            raise IndexError(f"step {index} out of range 0..{MAX_STEPS - 1}")
        self.moved_angles[index] = angle
        self.frames[index] = frames
        if angle == 0:
            self.step_angles[index] = 0.0
        elif frames <= 0:
            raise ValueError("a turning step needs a positive number of frames")
        elif clockwise:
            self.step_angles[index] = angle / frames
        else:
            self.step_angles[index] = (_TAU - angle) / frames
        self.clockwise[self.step] = clockwise
        self.moving = True

    def location(self, n: int) -> Vec2:
        """World position of the start (0) or end (1) point."""
        if n not in (0, 1):
            raise IndexError(f"bone point {n} out of range 0..1")
        return self.points[n] + self.center

    def set_handover(self, bone_index: int, end: int) -> None:
        """Record which bone, and which of its ends, this bone is attached to."""
        self.handover = (bone_index, end)

    def input_string(self, char: str) -> None:
        """Feed one typed character; backspace removes, empty input is ignored."""
        if len(char) > 1:
            raise ValueError("expected at most one character")
        if char == BACKSPACE:
            if self.text:
                self.text = self.text[:-1]
        elif char and len(self.text) < MAX_TEXT:
            self.text += char