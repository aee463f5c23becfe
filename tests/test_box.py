import pytest

from enginecore.box import FLT_MAX, Box
from enginecore.vector import Vector


def test_default_box_is_invalid_and_at_origin():
    b = Box()
    assert b.valid is False
    assert b.min == Vector(0.0, 0.0, 0.0)
    assert b.max == Vector(0.0, 0.0, 0.0)


def test_from_points_bounds_all_points():
    pts = [Vector(1.0, -2.0, 3.0), Vector(-4.0, 5.0, 0.5), Vector(2.0, 0.0, -1.0)]
    b = Box.from_points(pts)
    assert b.min == Vector(-4.0, -2.0, -1.0)
    assert b.max == Vector(2.0, 5.0, 3.0)
    for p in pts:
        assert b.min.x <= p.x <= b.max.x
        assert b.min.y <= p.y <= b.max.y
        assert b.min.z <= p.z <= b.max.z


def test_from_points_empty_is_inverted():
    b = Box.from_points([])
    assert b.min == Vector(FLT_MAX, FLT_MAX, FLT_MAX)
    assert b.max == Vector(-FLT_MAX, -FLT_MAX, -FLT_MAX)


def test_from_points_with_translation_matrix():
    pts = [Vector(1.0, 2.0, 3.0), Vector(-1.0, 0.0, 1.0)]
    t = Vector(10.0, 20.0, 30.0)
    matrix = [
        [1.0, 0.0, 0.0, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [t.x, t.y, t.z, 1.0],
    ]
    plain = Box.from_points(pts)
    moved = Box.from_points(pts, matrix)
    assert moved.min == plain.min + t
    assert moved.max == plain.max + t


def test_build_aabb_center_and_extent():
    origin = Vector(1.0, 2.0, 3.0)
    ext = Vector(0.5, 1.5, 2.5)
    b = Box.build_aabb(origin, ext)
    assert b.min == origin - ext
    assert b.max == origin + ext
    assert b.center() == origin
    assert b.extent() == ext * 2.0


def test_ray_hits_box_from_outside():
    b = Box.build_aabb(Vector(0.0, 0.0, 0.0), Vector(1.0, 1.0, 1.0))
    dist = b.intersects(Vector(-5.0, 0.0, 0.0), Vector(1.0, 0.0, 0.0))
    assert dist == pytest.approx(4.0)


def test_ray_parallel_outside_slab_misses():
    b = Box.build_aabb(Vector(0.0, 0.0, 0.0), Vector(1.0, 1.0, 1.0))
    assert b.intersects(Vector(-5.0, 3.0, 0.0), Vector(1.0, 0.0, 0.0)) is None


def test_ray_pointing_away_misses():
    b = Box.build_aabb(Vector(0.0, 0.0, 0.0), Vector(1.0, 1.0, 1.0))
    assert b.intersects(Vector(-5.0, 0.0, 0.0), Vector(-1.0, 0.0, 0.0)) is None


def test_ray_starting_inside_hits_with_non_positive_entry():
    b = Box.build_aabb(Vector(0.0, 0.0, 0.0), Vector(1.0, 1.0, 1.0))
    dist = b.intersects(Vector(0.0, 0.0, 0.0), Vector(0.0, 1.0, 0.0))
    assert dist is not None and dist <= 0.0


def test_diagonal_ray_hit_point_lies_on_box():
    b = Box.build_aabb(Vector(0.0, 0.0, 0.0), Vector(1.0, 1.0, 1.0))
    origin = Vector(-3.0, -3.0, -3.0)
    direction = Vector(1.0, 1.0, 1.0)
    dist = b.intersects(origin, direction)
    hit = origin + direction * dist
    assert hit.x == pytest.approx(b.min.x)
    assert hit.y == pytest.approx(b.min.y)
    assert hit.z == pytest.approx(b.min.z)