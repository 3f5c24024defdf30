"""Tests for demo settings loading."""

import json
import logging

from cubeview import constants
from cubeview.core.settings import ControlsSettings, DemoSettings, load_settings


def test_defaults():
    settings = DemoSettings()
    assert settings.camera_position == constants.DEMO_CAMERA_POS
    assert settings.light_position == constants.DEFAULT_LIGHT_POS
    assert settings.rotation_step == (0.01, 0.02, 0.03)
    assert isinstance(settings.controls, ControlsSettings)
    assert settings.controls.keys == (65, 83, 68)


def test_from_dict_converts_lists_to_tuples():
    settings = DemoSettings.from_dict({"camera_position": [1, 2, 3], "ground_texture": True})
    assert settings.camera_position == (1, 2, 3)
    assert settings.ground_texture is True


def test_from_dict_nested_controls():
    settings = DemoSettings.from_dict({"controls": {"zoom_speed": 2.5, "no_pan": True}})
    assert settings.controls.zoom_speed == 2.5
    assert settings.controls.no_pan is True
    assert settings.controls.rotate_speed == constants.CONTROLS_ROTATE_SPEED


def test_unknown_keys_ignored(caplog):
    with caplog.at_level(logging.WARNING):
        settings = DemoSettings.from_dict({"bogus": 1})
    assert not hasattr(settings, "bogus")
    assert "bogus" in caplog.text


def test_load_settings_from_file(tmp_path):
    path = tmp_path / "demo.json"
    path.write_text(json.dumps({"cube_texture": "crate.png", "window_size": [640, 480]}))
    settings = load_settings(path)
    assert settings.cube_texture == "crate.png"
    assert settings.window_size == (640, 480)


def test_shipped_config_loads():
    settings = load_settings()
    assert settings.camera_position == (0, 20, 40)
    assert settings.controls.static_moving is True
