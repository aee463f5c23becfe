import pytest

from enginecore.quat import Quat
from enginecore.transform import Transform
from enginecore.vector import Vector


def test_default_transform_is_identity():
    t = Transform()
    assert t.position == Vector(0.0, 0.0, 0.0)
    assert tuple(t.rotation) == (0.0, 0.0, 0.0, 1.0)
    assert t.scale == Vector(1.0, 1.0, 1.0)


def test_from_euler_matches_quat_from_euler():
    rot = Vector(10.0, 20.0, 30.0)
    t = Transform.from_euler(Vector(1.0, 2.0, 3.0), rot, Vector(2.0, 2.0, 2.0))
    assert tuple(t.rotation) == pytest.approx(tuple(Quat.from_euler(rot)))
    assert t.position == Vector(1.0, 2.0, 3.0)
    assert t.scale == Vector(2.0, 2.0, 2.0)


def test_set_rotation_from_vector_and_quat():
    t = Transform()
    t.set_rotation(Vector(0.0, 0.0, 45.0))
    assert tuple(t.rotation) == pytest.approx(tuple(Quat.from_euler(Vector(0.0, 0.0, 45.0))))
    q = Quat(0.0, 0.0, 0.0, 1.0)
    t.set_rotation(q)
    assert t.rotation is q


def test_set_rotation_rejects_other_types():
    with pytest.raises(TypeError):
        Transform().set_rotation((1.0, 2.0, 3.0))


def test_add_scale_and_translate():
    t = Transform()
    t.add_scale(Vector(0.5, 1.0, 2.0))
    assert t.scale == Vector(1.0, 1.0, 1.0) + Vector(0.5, 1.0, 2.0)
    t.translate(Vector(1.0, -2.0, 3.0))
    t.translate(Vector(1.0, -2.0, 3.0))
    assert t.position == Vector(1.0, -2.0, 3.0) * 2.0


@pytest.mark.parametrize(
    "method, component",
    [("rotate_yaw", "z"), ("rotate_pitch", "y"), ("rotate_roll", "x")],
)
def test_single_axis_rotation_round_trips_through_euler(method, component):
    t = Transform()
    getattr(t, method)(30.0)
    euler = t.rotation.to_euler()
    assert getattr(euler, component) == pytest.approx(30.0, abs=1e-6)
    for other in {"x", "y", "z"} - {component}:
        assert getattr(euler, other) == pytest.approx(0.0, abs=1e-6)


def test_rotate_applies_roll_pitch_yaw_in_order():
    a = Transform()
    a.rotate(Vector(10.0, 20.0, 30.0))
    b = Transform()
    b.rotate_roll(10.0)
    b.rotate_pitch(20.0)
    b.rotate_yaw(30.0)
    assert tuple(a.rotation) == pytest.approx(tuple(b.rotation))


def test_rotations_about_same_axis_accumulate():
    a = Transform()
    a.rotate_yaw(20.0)
    a.rotate_yaw(25.0)
    b = Transform()
    b.rotate_yaw(45.0)
    assert tuple(a.rotation) == pytest.approx(tuple(b.rotation))


def test_rotation_stays_unit_length():
    t = Transform()
    t.rotate(Vector(33.0, 47.0, 81.0))
    q = t.rotation
    assert q.x * q.x + q.y * q.y + q.z * q.z + q.w * q.w == pytest.approx(1.0)