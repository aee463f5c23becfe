"""Keyboard and mouse state, tracked per frame."""

from __future__ import annotations

from enum import IntEnum
from typing import List, Union

from enginecore.vector import Vector

__all__ = ["KeyCode", "PlayerInput", "calc_ndc_pos"]


class KeyCode(IntEnum):
    """Virtual key codes."""

    BACKSPACE = 0x08
    TAB = 0x09
    ENTER = 0x0D
    SHIFT = 0x10
    CTRL = 0x11
    CONTROL = 0x11
    ALT = 0x12
    PAUSE = 0x13
    CAPS_LOCK = 0x14
    ESC = 0x1B
    ESCAPE = 0x1B
    SPACE = 0x20
    PAGE_UP = 0x21
    PAGE_DOWN = 0x22
    END = 0x23
    HOME = 0x24
    LEFT = 0x25
    UP = 0x26
    RIGHT = 0x27
    DOWN = 0x28
    SNAPSHOT = 0x2C
    PRINT_SCREEN = 0x2C
    INSERT = 0x2D
    DELETE = 0x2E
    DIGIT_0 = 0x30
    DIGIT_1 = 0x31
    DIGIT_2 = 0x32
    DIGIT_3 = 0x33
    DIGIT_4 = 0x34
    DIGIT_5 = 0x35
    DIGIT_6 = 0x36
    DIGIT_7 = 0x37
    DIGIT_8 = 0x38
    DIGIT_9 = 0x39
    A = 0x41
    B = 0x42
    C = 0x43
    D = 0x44
    E = 0x45
    F = 0x46
    G = 0x47
    H = 0x48
    I = 0x49
    J = 0x4A
    K = 0x4B
    L = 0x4C
    M = 0x4D
    N = 0x4E
    O = 0x4F
    P = 0x50
    Q = 0x51
    R = 0x52
    S = 0x53
    T = 0x54
    U = 0x55
    V = 0x56
    W = 0x57
    X = 0x58
    Y = 0x59
    Z = 0x5A
    NUM_0 = 0x60
    NUM_1 = 0x61
    NUM_2 = 0x62
    NUM_3 = 0x63
    NUM_4 = 0x64
    NUM_5 = 0x65
    NUM_6 = 0x66
    NUM_7 = 0x67
    NUM_8 = 0x68
    NUM_9 = 0x69
    NUM_MUL = 0x6A
    NUM_ADD = 0x6B
    NUM_SUB = 0x6D
    NUM_DOT = 0x6E
    NUM_DIV = 0x6F
    F1 = 0x70
    F2 = 0x71
    F3 = 0x72
    F4 = 0x73
    F5 = 0x74
    F6 = 0x75
    F7 = 0x76
    F8 = 0x77
    F9 = 0x78
    F10 = 0x79
    F11 = 0x7A
    F12 = 0x7B
    F13 = 0x7C
    F14 = 0x7D
    F15 = 0x7E
    F16 = 0x7F
    F17 = 0x80
    F18 = 0x81
    F19 = 0x82
    F20 = 0x83
    F21 = 0x84
    F22 = 0x85
    F23 = 0x86
    F24 = 0x87
    NUM_LOCK = 0x90
    SCROLL_LOCK = 0x91
    LSHIFT = 0xA0
    RSHIFT = 0xA1
    LCONTROL = 0xA2
    RCONTROL = 0xA3
    LALT = 0xA4
    RALT = 0xA5


Key = Union[KeyCode, int]


def calc_ndc_pos(mouse_pos: Vector, window_size: Vector) -> Vector:
    """Map a pixel position to normalised device coordinates in ``[-1, 1]``."""
    return Vector(
        mouse_pos.x / (window_size.x / 2) - 1,
        mouse_pos.y / (window_size.y / 2) - 1,
        0.0,
    )


def _key_index(key: Key) -> int:
    index = int(key)
    if not 0 <= index <= 0xFF:
        raise ValueError(f"key code out of range: {index}")
    return index


class PlayerInput:
    """Held and just-pressed state of keys and the two mouse buttons."""

    def __init__(self) -> None:
        self._keys: set[int] = set()
        self._once_keys: set[int] = set()
        self._mouse = [False, False]
        self._once_mouse = [False, False]
        self._mouse_down_pos = [Vector(), Vector()]
        self._mouse_down_ndc_pos = [Vector(), Vector()]
        self.mouse_pre_pos = Vector()
        self.mouse_pos = Vector()
        self.mouse_ndc_pos = Vector()

    def key_down(self, key: Key) -> None:
        """Mark ``key`` as held and as pressed this frame."""
        index = _key_index(key)
        self._keys.add(index)
        self._once_keys.add(index)

    def key_once_up(self, key: Key) -> None:
        """Clear the pressed-this-frame flag of ``key`` (auto-repeat)."""
        self._once_keys.discard(_key_index(key))

    def key_up(self, key: Key) -> None:
        """Mark ``key`` as released."""
        index = _key_index(key)
        self._keys.discard(index)
        self._once_keys.discard(index)

    def is_pressed_key(self, key: Key) -> bool:
        return _key_index(key) in self._keys

    def key_pressed_this_frame(self, key: Key) -> bool:
        return _key_index(key) in self._once_keys

    def pressed_keys(self) -> List[Key]:
        """Return the held keys in ascending code order."""
        result: List[Key] = []
        for index in sorted(self._keys):
            try:
                result.append(KeyCode(index))
            except ValueError:
                result.append(index)
        return result

    def mouse_key_down(self, point: Vector, window_size: Vector, is_right: bool) -> None:
        """Press a mouse button at ``point`` inside a window of ``window_size``."""
        button = int(bool(is_right))
        self._mouse[button] = True
        self._once_mouse[button] = True
        self._mouse_down_pos[button] = point
        self._mouse_down_ndc_pos[button] = calc_ndc_pos(point, window_size)

    def mouse_key_up(self, point: Vector, window_size: Vector, is_right: bool) -> None:
        """Release a mouse button."""
        button = int(bool(is_right))
        self._mouse[button] = False
        self._once_mouse[button] = False

    def is_pressed_mouse(self, is_right: bool) -> bool:
        return self._mouse[int(bool(is_right))]

    def mouse_pressed_this_frame(self, is_right: bool) -> bool:
        return self._once_mouse[int(bool(is_right))]

    def mouse_down_pos(self, is_right: bool) -> Vector:
        return self._mouse_down_pos[int(bool(is_right))]

    def mouse_down_ndc_pos(self, is_right: bool) -> Vector:
        return self._mouse_down_ndc_pos[int(bool(is_right))]

    def set_mouse_pos(self, pos: Vector) -> None:
        """Move the cursor, remembering the previous position."""
        self.mouse_pre_pos = self.mouse_pos
        self.mouse_pos = pos

    def expire_once(self) -> None:
        """Clear every pressed-this-frame flag."""
        self._once_mouse = [False, False]
        self._once_keys.clear()

    def pre_process_input(self) -> None:
        """Start a new frame of input."""
        self.expire_once()