"""Tests for the perspective camera."""

import numpy as np

from cubeview.core.math_utils import transform_point, vec3
from cubeview.rendering.camera import Camera, init_camera


def test_defaults():
    cam = Camera()
    assert cam.fov == 45.0
    assert cam.near == 0.1
    assert cam.far == 1000.0
    np.testing.assert_array_equal(cam.position, [-30, 40, 30])


def test_init_camera_position_and_target():
    cam = init_camera((0, 20, 40))
    np.testing.assert_array_equal(cam.position, [0, 20, 40])
    np.testing.assert_array_equal(cam.target, [0, 0, 0])


def test_init_camera_default_position():
    cam = init_camera()
    np.testing.assert_array_equal(cam.position, [-30, 40, 30])


def test_view_matrix_looks_at_target():
    cam = init_camera((0, 0, 10))
    p = transform_point(cam.get_view_matrix(), vec3(0, 0, 0))
    np.testing.assert_array_almost_equal(p, [0, 0, -10])


def test_view_matrix_cached_until_dirty():
    cam = init_camera((0, 0, 10))
    first = cam.get_view_matrix()
    cam.position = vec3(0, 0, 20)
    assert cam.get_view_matrix() is first
    cam.mark_view_dirty()
    p = transform_point(cam.get_view_matrix(), vec3(0, 0, 0))
    np.testing.assert_array_almost_equal(p, [0, 0, -20])


def test_set_aspect():
    cam = Camera()
    cam.set_aspect(1600, 800)
    assert cam.aspect == 2.0
    proj = cam.get_projection_matrix()
    assert abs(proj[1, 1] / proj[0, 0] - 2.0) < 1e-9


def test_set_aspect_ignores_zero_height():
    cam = Camera()
    cam.set_aspect(100, 0)
    assert cam.aspect == 1.0
