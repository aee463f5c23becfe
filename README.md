# enginecore

Core building blocks for a small real-time engine, written in plain Python with
no third-party dependencies.

## What is inside

- `enginecore.mathutil`: scalar helpers `clamp`, `lerp`, `radians_to_degrees`,
  `degrees_to_radians`, `inv_sqrt` and `square`, plus the constants `PI`,
  `SMALL_NUMBER` and `KINDA_SMALL_NUMBER`.
- `enginecore.vector`: mutable dataclasses `Vector`, `Vector4` and `Vector2`.
  `Vector` has `dot`, `cross`, `length`, `length_squared`, `normalize` (in
  place, returns whether it worked), `get_safe_normal`, `get_unsafe_normal`,
  the static helpers `distance` and `normal_from_points`, and arithmetic
  operators. `Vector4.transform(matrix)` multiplies `(x, y, z, 1)` as a row
  vector by a 4x4 matrix given as nested sequences; `Vector4.coord()` divides
  by `w`.
- `enginecore.quat`: `Quat`, built with `from_euler` (roll, pitch, yaw in
  degrees), `from_axis_angle` or `from_rotation_matrix`, converted back with
  `to_euler`, and combined with `+`, `-` and `*` (Hamilton product).
- `enginecore.transform`: `Transform`, holding `position`, `rotation` and
  `scale`, with `from_euler`, `set_rotation` (a `Quat` or Euler angles as a
  `Vector`; anything else raises `TypeError`), `add_scale`, `translate`,
  `rotate`, `rotate_yaw`, `rotate_pitch` and `rotate_roll`.
- `enginecore.box`: `Box`, an axis-aligned bounding box. `from_points` bounds
  a set of points, optionally transformed by a matrix first; `build_aabb`
  builds a box from a centre and a half-size. `intersects(origin, direction)`
  returns the entry parameter of a ray, or `None` when it misses. `center()`
  and `extent()` give the midpoint and the full size.
- `enginecore.input`: `KeyCode` virtual key codes and `PlayerInput`, which
  tracks held keys and mouse buttons as well as presses that happened this
  frame (cleared by `pre_process_input` / `expire_once`). Key codes outside
  0..255 raise `ValueError`. `calc_ndc_pos` maps a window position to
  normalised device coordinates.
- `enginecore.strings`: `equals`, `find`, `contains`, `left`, `right`, `trim`,
  C-style `strcmp`, `strncmp`, `stricmp` and `strnicmp`, `sanitize_float`
  (single-precision value with six decimals) and `string_hash` (64-bit FNV-1a
  of the UTF-8 bytes), with `SearchCase`, `SearchDir` and `INDEX_NONE`.
- `enginecore.engine_types`: `EndPlayReason`, plus a thread-safe
  `UUIDGenerator` of wrapping 32-bit ids and the shared `gen_uuid()`.
- `enginecore.containers`: `Pair` and helpers that work on plain lists:
  `find_index`, `add_unique`, `remove_every`, `remove_single`, `remove_at`,
  `remove_all` and `insert_at` (which raises `IndexError` for a bad index).
- `enginecore.memory`: `AllocationTracker` keeps thread-safe, unsigned 64-bit
  byte and count totals per `AllocationType`; a shared instance is available
  as `tracker`. `index_type_bounds` gives the signed range of an 8, 16, 32 or
  64 bit index and raises `ValueError` for any other width.
- `enginecore.names`: `NamePool`, `NameEntry` and `Name`. A `Name` splits off
  trailing digits as a number stored plus one (`"Player"` has 0, `"Player0"`
  has 1), interns its text in a 128-slot pool, and compares equal to another
  name whose text matches regardless of ASCII case. `Name.compare` returns the
  difference of the numbers for the same text and `Name.MISMATCH` otherwise.
  When a pool is full a warning is logged and slot 0 is returned.

## What it does not do

This is a library of building blocks only. There is no window, renderer,
world or object system, no command to run, and no matrix type: functions that
take a matrix accept any 4x4 nested sequence of numbers.

## Installing

```
pip install .
```

Run the tests with:

```
pip install ".[test]"
pytest
```

## Example

```python
from enginecore.vector import Vector
from enginecore.quat import Quat
from enginecore.transform import Transform
from enginecore.box import Box

t = Transform()
t.translate(Vector(1.0, 0.0, 0.0))
t.rotate_yaw(90.0)

box = Box.build_aabb(Vector(0.0, 0.0, 0.0), Vector(1.0, 1.0, 1.0))
hit = box.intersects(Vector(-5.0, 0.0, 0.0), Vector(1.0, 0.0, 0.0))  # 4.0

q = Quat.from_euler(Vector(0.0, 0.0, 45.0))
print(q.to_euler())
```

```python
from enginecore.input import KeyCode, PlayerInput

state = PlayerInput()
state.key_down(KeyCode.W)
assert state.is_pressed_key(KeyCode.W)
assert state.key_pressed_this_frame(KeyCode.W)
state.pre_process_input()
assert not state.key_pressed_this_frame(KeyCode.W)
```

```python
from enginecore.names import Name

a = Name("Player3")
b = Name("player7")
assert a == b
print(a.compare(b))  # -4
print(str(a))        # Player3
```