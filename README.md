# swapper-anim

Building blocks for a small 2D bone-animation editor. The package models
state only, so it can be driven from any rendering loop.

## Modules

### `swapper_anim.geometry`

- `Vec2` is an immutable vector. It supports `+`, `-`, unary `-`,
  multiplication and division by a scalar, and `length()`.
- `rotate_about(point, base, angle)` rotates a point about `base` by an angle
  given in radians.
- `angle_between(a, b)` returns the unsigned angle in `[0, pi]`. It raises
  `ValueError` for a zero-length vector.
- `dot`, `cross` (the z component), `vector_length`, and
  `deg_to_rad` / `rad_to_deg` work as their names say.
- `unit_vector(v)` normalises a vector. It raises `ValueError` for a zero
  vector.
- `on_line(start, end, point, radius)` samples the segment every `radius`
  units. It reports whether `point` lies within `radius` of any sample. It
  returns `False` for a zero-length segment and raises `ValueError` for a
  radius that is not positive.

### `swapper_anim.inputs`

`InputController.update(snapshot)` advances one frame from an
`InputSnapshot`. A snapshot holds:

- the pressed pad buttons;
- the left and right stick tilt, as `PadStick` values;
- the pressed keys;
- the mouse position, as a `MousePoint`;
- a mouse-button bit mask, where bit 0 is left and bit 1 is right.

After an update you can read the following:

- `button_state`, `key_state` and `mouse_state` return an `InputState`, one
  of `NONE`, `PRESS`, `PRESSED` or `RELEASE`. An index out of range raises
  `IndexError`.
- `stick_state(stick)` returns the raw tilt, with 0 for the left stick and
  any other value for the right.
- `stick_ratio(stick)` returns the tilt as a fraction of full scale, rounded
  to two places.
- `mouse_cursor()` returns the current cursor position.

### `swapper_anim.timing`

`FpsController` caps the frame rate and measures it. It takes an optional
millisecond `clock` and `sleep`; by default it uses the monotonic clock and
`time.sleep`.

- `set_limit_rate(rate)` sets the cap. It raises `ValueError` unless the rate
  is positive.
- `limit()` sleeps out the remainder of the frame.
- `set_update_interval(ms)` sets how often the measurement is refreshed.
- `update()` counts a frame and refreshes the `fps` property once the
  interval has passed.

### `swapper_anim.scenes`

`Scene` is an abstract base with these members:

- `update()` returns the scene to run next, or `None`.
- `draw()` renders the scene.
- `initialize()` marks the scene as started.
- `finalize()` releases what the scene holds.
- `old_scene` is an attribute for the previous scene.

`SceneManager(scene)` runs one scene at a time:

- `update()` forwards to the current scene. When that call returns a
  different scene, the manager finalizes the old one and switches to the new
  one.
- `draw()` forwards to the current scene.
- Both `update()` and `draw()` raise `RuntimeError` when no scene is running.

The module also defines:

- the `GameMainState` enum;
- the `BackGroundImage` dataclass;
- the screen constants `SCREEN_WIDTH`, `SCREEN_HEIGHT` and `SCREEN_FPS`.

### `swapper_anim.bone`

`Bone` is a two-point bone whose end point turns about its start point. It
works through up to 32 timed steps.

- `initialize(start, goal)` places the bone.
- `set_moved(angle, frames, index, clockwise)` defines a step and starts the
  motion.
- `update()` advances one frame. `advance_step()` moves on to the next step
  and stops the motion at a step with no frames.
- `location(n)` gives the world position of the start point (0) or the end
  point (1).
- `target_points()` lists where the end point lands at the close of each
  defined step.

`select_update(inputs)` edits steps from an `InputController`:

- A right click on the bone selects it.
- The Up and Down keys move a cursor.
- While the bone is moving, the cursor position sets what editing does:

  | Cursor | Effect |
  | --- | --- |
  | 0 | Left and Right change the current step. |
  | 1 | Left and Right toggle the step's direction. |
  | 2 | A right click sets the step's angle towards the cursor. |
  | 3 | Sets the step's frame count to 180. |
  | 4 | Return applies the step with `set_moved` and deselects the bone. |

`set_moved_position(inputs)` returns the clockwise angle from the bone to the
cursor when the right mouse button has just been pressed. Otherwise it
returns `None`.

`set_handover(bone_index, end)` records an attachment.

`input_string(char)` edits the bone's `text`. A backspace deletes the last
character, and the text holds at most 32 characters.

## Example

```python
from swapper_anim.geometry import Vec2
from swapper_anim.bone import Bone

bone = Bone()
bone.initialize(Vec2(100, 100), Vec2(200, 100))
bone.set_moved(3.14159, 60, 0, True)   # half a turn, clockwise, over 60 frames
for _ in range(30):
    bone.update()
print(bone.location(1))
```

## What it does not do

- There is no drawing, windowing or sound. `Scene.draw` is yours to implement.
- Nothing polls devices. You fill each `InputSnapshot` from your own backend.
- There are no concrete game scenes and no command to run. The package is a
  library for an editor or game loop that you write.

## Tests

```
pip install -e .[test]
pytest
```