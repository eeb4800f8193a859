import pytest

from quadkit.mouse_camera import Camera
from quadkit.vecmath import Vec2


def test_default_camera():
    camera = Camera()
    assert camera.offset == Vec2(0.0, 0.0)
    assert camera.scale == 1.0


def test_scale_new_around_point():
    camera = Camera()
    camera.scale_new(Vec2(1.0, 1.0), 2.0)
    assert camera.scale == 2.0
    assert camera.offset == Vec2(-1.0, -1.0)


def test_scale_around_offset_keeps_offset():
    camera = Camera(Vec2(3.0, 4.0), 1.5)
    camera.scale_new(Vec2(3.0, 4.0), 6.0)
    assert camera.offset == Vec2(3.0, 4.0)


def test_scale_mul_matches_scale_new():
    a = Camera(Vec2(2.0, -1.0), 2.0)
    b = Camera(Vec2(2.0, -1.0), 2.0)
    a.scale_mul(Vec2(0.5, 0.5), 3.0)
    b.scale_new(Vec2(0.5, 0.5), 6.0)
    assert a == b


def test_wheel_in_then_out_restores():
    camera = Camera(Vec2(1.0, 2.0), 1.0)
    center = Vec2(0.3, -0.7)
    camera.scale_wheel(center, 1.0, 1.25)
    assert camera.scale == pytest.approx(1.25)
    camera.scale_wheel(center, -1.0, 1.25)
    assert camera.scale == pytest.approx(1.0)
    assert camera.offset.x == pytest.approx(1.0)
    assert camera.offset.y == pytest.approx(2.0)


def test_zero_wheel_changes_nothing():
    camera = Camera(Vec2(1.0, 2.0), 3.0)
    camera.scale_wheel(Vec2(5.0, 5.0), 0.0, 2.0)
    assert camera.scale == 3.0
    assert camera.offset == Vec2(1.0, 2.0)


def test_update_pans_only_when_asked():
    camera = Camera()
    camera.update(Vec2(1.0, 1.0), False)
    assert camera.offset == Vec2(0.0, 0.0)
    camera.update(Vec2(3.0, 4.0), True)
    assert camera.offset == Vec2(2.0, 3.0)