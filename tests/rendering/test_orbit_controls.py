"""Tests for orbit controls."""

import numpy as np

from cubeview.core.settings import ControlsSettings
from cubeview.rendering.camera import init_camera
from cubeview.rendering.orbit_controls import OrbitControls, init_orbit_controls


def _distance(controls):
    return float(np.linalg.norm(controls.camera.position - controls.target))


def test_init_applies_settings():
    settings = ControlsSettings(rotate_speed=2.0, zoom_speed=3.0, no_pan=True, keys=(1, 2, 3))
    controls = init_orbit_controls(init_camera((0, 20, 40)), settings)
    assert controls.rotate_speed == 2.0
    assert controls.zoom_speed == 3.0
    assert controls.no_pan is True
    assert controls.keys == (1, 2, 3)


def test_sync_preserves_camera_position():
    cam = init_camera((0, 20, 40))
    controls = OrbitControls(cam)
    controls.update(0.016)
    np.testing.assert_array_almost_equal(cam.position, [0, 20, 40])


def test_orbit_keeps_distance():
    controls = OrbitControls(init_camera((0, 20, 40)))
    before = _distance(controls)
    controls.on_mouse_press(100, 100, OrbitControls.BUTTON_LEFT)
    controls.on_mouse_move(150, 120)
    controls.on_mouse_release()
    assert abs(_distance(controls) - before) < 1e-9
    assert not np.allclose(controls.camera.position, [0, 20, 40])


def test_scroll_zooms_in():
    controls = OrbitControls(init_camera((0, 20, 40)))
    before = _distance(controls)
    controls.on_scroll(1.0)
    assert _distance(controls) < before


def test_no_zoom():
    controls = OrbitControls(init_camera((0, 20, 40)))
    controls.no_zoom = True
    before = _distance(controls)
    controls.on_scroll(1.0)
    assert _distance(controls) == before


def test_right_drag_pans_target():
    controls = OrbitControls(init_camera((0, 20, 40)))
    controls.on_mouse_press(0, 0, OrbitControls.BUTTON_RIGHT)
    controls.on_mouse_move(50, 0)
    assert not np.allclose(controls.target, [0, 0, 0])


def test_no_pan():
    controls = OrbitControls(init_camera((0, 20, 40)))
    controls.no_pan = True
    controls.on_mouse_press(0, 0, OrbitControls.BUTTON_RIGHT)
    controls.on_mouse_move(50, 0)
    np.testing.assert_array_equal(controls.target, [0, 0, 0])


def test_held_key_forces_zoom_on_left_drag():
    controls = OrbitControls(init_camera((0, 20, 40)))
    before = _distance(controls)
    controls.on_key_press(83)  # S
    controls.on_mouse_press(0, 0, OrbitControls.BUTTON_LEFT)
    controls.on_mouse_move(0, 40)
    assert _distance(controls) > before
    controls.on_key_release(83)


def test_static_moving_stops_on_release():
    controls = OrbitControls(init_camera((0, 20, 40)))
    controls.on_mouse_press(0, 0, OrbitControls.BUTTON_LEFT)
    controls.on_mouse_move(30, 0)
    controls.on_mouse_release()
    after_release = controls.camera.position.copy()
    controls.update(0.016)
    np.testing.assert_array_equal(controls.camera.position, after_release)


def test_dynamic_moving_keeps_spinning_and_decays():
    controls = OrbitControls(init_camera((0, 20, 40)))
    controls.static_moving = False
    controls.on_mouse_press(0, 0, OrbitControls.BUTTON_LEFT)
    controls.on_mouse_move(30, 0)
    controls.on_mouse_release()

    p0 = controls.camera.position.copy()
    controls.update(1 / 60)
    p1 = controls.camera.position.copy()
    controls.update(1 / 60)
    p2 = controls.camera.position.copy()
    first_step = np.linalg.norm(p1 - p0)
    second_step = np.linalg.norm(p2 - p1)
    assert first_step > 0
    assert second_step < first_step
