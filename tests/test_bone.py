import math

import pytest

from swapper_anim.bone import (
    EDIT_FRAMES,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RETURN,
    KEY_RIGHT,
    MAX_STEPS,
    MAX_TEXT,
    Bone,
)
from swapper_anim.geometry import Vec2, rotate_about
from swapper_anim.inputs import InputController, InputSnapshot, MousePoint

START = Vec2(100.0, 100.0)
GOAL = Vec2(200.0, 100.0)


def _close(a, b, tol=1e-6):
    return math.isclose(a.x, b.x, abs_tol=tol) and math.isclose(a.y, b.y, abs_tol=tol)


def _bone():
    bone = Bone()
    bone.initialize(START, GOAL)
    return bone


def _frame(ctrl, keys=(), mouse=(0, 0), right=False):
    ctrl.update(
        InputSnapshot(
            keys=frozenset(keys),
            mouse=MousePoint(*mouse),
            mouse_buttons=2 if right else 0,
        )
    )
    return ctrl


def _fresh(keys=(), mouse=(0, 0), right=False):
    ctrl = InputController()
    return _frame(ctrl, keys, mouse, right)


def test_initialize_places_points():
    bone = _bone()
    assert bone.location(0) == START
    assert bone.location(1) == GOAL
    assert bone.center == START


def test_location_out_of_range():
    with pytest.raises(IndexError):
        _bone().location(2)


def test_clockwise_animation_reaches_target():
    bone = _bone()
    angle = math.pi / 3
    bone.set_moved(angle, 10, 0, True)
    assert bone.moving
    assert math.isclose(bone.step_angles[0], angle / 10)
    for _ in range(10):
        bone.update()
    assert _close(bone.location(1), rotate_about(GOAL, START, angle))
    assert not bone.moving
    assert bone.step == 1
    assert bone.frame_count == 0


def test_counterclockwise_ends_at_same_point():
    angle = math.pi / 3
    cw = _bone()
    cw.set_moved(angle, 12, 0, True)
    ccw = _bone()
    ccw.set_moved(angle, 12, 0, False)
    for _ in range(12):
        cw.update()
        ccw.update()
    cw_end = cw.location(1)
    ccw_end = ccw.location(1)
    assert math.isclose(cw_end.x, ccw_end.x, abs_tol=1e-6)
    assert math.isclose(cw_end.y, ccw_end.y, abs_tol=1e-6)
    assert not ccw.moving


def test_update_keeps_bone_length():
    bone = _bone()
    bone.set_moved(2.0, 30, 0, True)
    expected = (GOAL - START).length()
    for _ in range(17):
        bone.update()
        assert math.isclose((bone.location(1) - bone.location(0)).length(), expected)


def test_zero_angle_has_no_step():
    bone = _bone()
    bone.set_moved(0.0, 0, 0, False)
    assert bone.step_angles[0] == 0.0
    assert bone.moving


def test_turn_without_frames_is_rejected():
    with pytest.raises(ValueError):
        _bone().set_moved(1.0, 0, 0, True)


def test_set_moved_index_out_of_range():
    with pytest.raises(IndexError):
        _bone().set_moved(1.0, 5, MAX_STEPS, True)


def test_advance_step_continues_while_frames_remain():
    bone = _bone()
    bone.set_moved(0.5, 4, 0, True)
    bone.set_moved(0.5, 4, 1, True)
    bone.frame_count = 3
    bone.advance_step()
    assert bone.step == 1
    assert bone.frame_count == 0
    assert bone.moving
    bone.advance_step()
    assert bone.step == 2
    assert not bone.moving


def test_update_idle_does_nothing():
    bone = _bone()
    bone.update()
    assert bone.location(1) == GOAL
    assert bone.frame_count == 0


def test_target_points_accumulate_turns():
    bone = _bone()
    bone.set_moved(0.4, 5, 0, True)
    bone.set_moved(0.7, 5, 1, True)
    targets = bone.target_points()
    assert len(targets) == 2
    assert _close(targets[0], rotate_about(GOAL, START, 0.4))
    assert _close(targets[1], rotate_about(GOAL, START, 0.4 + 0.7))


def test_set_moved_position_needs_click():
    assert _bone().set_moved_position(_fresh(mouse=(100, 200))) is None


@pytest.mark.parametrize("mouse", [(100, 200), (100, 0), (0, 100), (171, 171)])
def test_set_moved_position_points_towards_cursor(mouse):
    bone = _bone()
    turn = bone.set_moved_position(_fresh(mouse=mouse, right=True))
    assert 0 <= turn <= 2 * math.pi
    target = rotate_about(GOAL, START, turn) - START
    towards = Vec2(*mouse) - START
    assert math.isclose(
        target.x * towards.y - target.y * towards.x, 0.0, abs_tol=1e-6
    )
    assert target.x * towards.x + target.y * towards.y > 0


def test_set_moved_position_on_pivot_is_none():
    assert _bone().set_moved_position(_fresh(mouse=(100, 100), right=True)) is None


def test_right_click_on_bone_selects():
    bone = _bone()
    bone.select_update(_fresh(mouse=(150, 101), right=True))
    assert bone.selected
    assert bone.cursor == 0


def test_click_away_does_not_select():
    bone = _bone()
    bone.select_update(_fresh(mouse=(150, 160), right=True))
    assert not bone.selected


def _selected_moving_bone():
    bone = _bone()
    bone.set_moved(0.5, 10, 0, True)
    bone.select_update(_fresh(mouse=(150, 100), right=True))
    return bone


def test_cursor_zero_changes_step():
    bone = _selected_moving_bone()
    bone.select_update(_fresh(keys={KEY_LEFT}))
    assert bone.step == 0
    bone.select_update(_fresh(keys={KEY_RIGHT}))
    assert bone.step == 1


def test_cursor_one_toggles_direction():
    bone = _selected_moving_bone()
    bone.cursor = 1
    before = bone.clockwise[0]
    bone.select_update(_fresh(keys={KEY_LEFT}))
    assert bone.clockwise[0] is (not before)


def test_down_moves_cursor():
    bone = _selected_moving_bone()
    bone.select_update(_fresh(keys={KEY_DOWN}))
    assert bone.cursor == 1


def test_cursor_two_sets_angle_from_click():
    bone = _selected_moving_bone()
    bone.cursor = 2
    bone.select_update(_fresh(mouse=(100, 200), right=True))
    angle = bone.moved_angles[0]
    assert 0 <= angle <= 2 * math.pi
    target = rotate_about(GOAL, START, angle)
    assert math.isclose(target.x, 100.0, abs_tol=1e-6)
    assert math.isclose(target.y, 200.0, abs_tol=1e-6)


def test_cursor_three_sets_default_frames():
    bone = _selected_moving_bone()
    bone.cursor = 3
    bone.select_update(_fresh())
    assert bone.frames[0] == EDIT_FRAMES


def test_cursor_four_commits_step():
    bone = _selected_moving_bone()
    bone.step = 1
    bone.moved_angles[1] = 1.2
    bone.frames[1] = 6
    bone.cursor = 4
    bone.select_update(_fresh(keys={KEY_RETURN}))
    assert not bone.selected
    assert bone.step == 0
    assert math.isclose(bone.step_angles[1], 1.2 / 6)


def test_editing_ignored_when_not_moving():
    bone = _bone()
    bone.select_update(_fresh(mouse=(150, 100), right=True))
    bone.cursor = 3
    bone.select_update(_fresh())
    assert bone.frames[0] == 0


def test_set_handover():
    bone = _bone()
    bone.set_handover(3, 1)
    assert bone.handover == (3, 1)


def test_input_string_append_and_backspace():
    bone = Bone()
    for char in "abc":
        bone.input_string(char)
    bone.input_string("\b")
    bone.input_string("")
    assert bone.text == "ab"


def test_input_string_backspace_on_empty():
    bone = Bone()
    bone.input_string("\b")
    assert bone.text == ""


def test_input_string_length_limit():
    bone = Bone()
    for _ in range(MAX_TEXT + 5):
        bone.input_string("x")
    assert len(bone.text) == MAX_TEXT


def test_input_string_rejects_several_characters():
    with pytest.raises(ValueError):
        Bone().input_string("ab")