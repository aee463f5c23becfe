import pytest

from enginecore.input import KeyCode, PlayerInput, calc_ndc_pos
from enginecore.vector import Vector


def test_key_code_aliases_share_state():
    inp = PlayerInput()
    inp.key_down(KeyCode.CTRL)
    assert inp.is_pressed_key(KeyCode.CONTROL)
    inp.key_down(KeyCode.ESC)
    assert KeyCode.ESCAPE in inp.pressed_keys()
    inp.key_down(0x41)
    assert inp.is_pressed_key(KeyCode.A)
    inp.key_down(0x2E)
    assert inp.key_pressed_this_frame(KeyCode.DELETE)


def test_calc_ndc_pos_maps_center_and_corner():
    size = Vector(800.0, 600.0, 0.0)
    assert calc_ndc_pos(Vector(400.0, 300.0, 0.0), size) == Vector(0.0, 0.0, 0.0)
    assert calc_ndc_pos(Vector(0.0, 0.0, 0.0), size) == Vector(-1.0, -1.0, 0.0)
    assert calc_ndc_pos(Vector(800.0, 600.0, 0.0), size) == Vector(1.0, 1.0, 0.0)


def test_key_down_sets_held_and_once():
    inp = PlayerInput()
    inp.key_down(KeyCode.W)
    assert inp.is_pressed_key(KeyCode.W)
    assert inp.key_pressed_this_frame(KeyCode.W)
    assert not inp.is_pressed_key(KeyCode.S)


def test_pre_process_expires_once_but_keeps_held():
    inp = PlayerInput()
    inp.key_down(KeyCode.DELETE)
    inp.pre_process_input()
    assert inp.is_pressed_key(KeyCode.DELETE)
    assert not inp.key_pressed_this_frame(KeyCode.DELETE)


def test_key_once_up_and_key_up():
    inp = PlayerInput()
    inp.key_down(KeyCode.Q)
    inp.key_once_up(KeyCode.Q)
    assert inp.is_pressed_key(KeyCode.Q)
    assert not inp.key_pressed_this_frame(KeyCode.Q)
    inp.key_down(KeyCode.Q)
    inp.key_up(KeyCode.Q)
    assert not inp.is_pressed_key(KeyCode.Q)
    assert not inp.key_pressed_this_frame(KeyCode.Q)


def test_pressed_keys_sorted_and_typed():
    inp = PlayerInput()
    inp.key_down(KeyCode.W)
    inp.key_down(KeyCode.A)
    inp.key_down(0x07)
    assert inp.pressed_keys() == [0x07, KeyCode.A, KeyCode.W]
    assert isinstance(inp.pressed_keys()[1], KeyCode)


def test_out_of_range_key_raises():
    inp = PlayerInput()
    with pytest.raises(ValueError):
        inp.key_down(256)
    with pytest.raises(ValueError):
        inp.is_pressed_key(-1)


def test_mouse_down_records_position_and_ndc():
    inp = PlayerInput()
    size = Vector(640.0, 480.0, 0.0)
    point = Vector(320.0, 240.0, 0.0)
    inp.mouse_key_down(point, size, True)
    assert inp.is_pressed_mouse(True)
    assert inp.mouse_pressed_this_frame(True)
    assert not inp.is_pressed_mouse(False)
    assert inp.mouse_down_pos(True) == point
    assert inp.mouse_down_ndc_pos(True) == calc_ndc_pos(point, size)


def test_mouse_up_and_expire():
    inp = PlayerInput()
    size = Vector(100.0, 100.0, 0.0)
    inp.mouse_key_down(Vector(10.0, 20.0, 0.0), size, False)
    inp.expire_once()
    assert inp.is_pressed_mouse(False)
    assert not inp.mouse_pressed_this_frame(False)
    inp.mouse_key_up(Vector(10.0, 20.0, 0.0), size, False)
    assert not inp.is_pressed_mouse(False)


def test_set_mouse_pos_tracks_previous():
    inp = PlayerInput()
    first = Vector(5.0, 6.0, 0.0)
    second = Vector(7.0, 8.0, 0.0)
    inp.set_mouse_pos(first)
    inp.set_mouse_pos(second)
    assert inp.mouse_pos == second
    assert inp.mouse_pre_pos == first