"""Demo settings loaded from ``assets/config/demo.json``."""

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

from cubeview import constants
from cubeview.core.config_loader import load_config, load_json

logger = logging.getLogger(__name__)


@dataclass
class ControlsSettings:
    """Orbit control sensitivity."""
    rotate_speed: float = constants.CONTROLS_ROTATE_SPEED
    zoom_speed: float = constants.CONTROLS_ZOOM_SPEED
    pan_speed: float = constants.CONTROLS_PAN_SPEED
    no_zoom: bool = False
    no_pan: bool = False
    static_moving: bool = True
    dynamic_damping_factor: float = constants.CONTROLS_DAMPING_FACTOR
    keys: tuple[int, int, int] = constants.CONTROLS_KEYS


@dataclass
class DemoSettings:
    """Everything the demo reads at start-up."""
    camera_position: tuple[float, float, float] = constants.DEMO_CAMERA_POS
    light_position: tuple[float, float, float] = constants.DEFAULT_LIGHT_POS
    cube_texture: str = constants.CUBE_TEXTURE
    ground_texture: bool = False
    ground_offset_y: float = constants.GROUND_OFFSET_Y
    rotation_step: tuple[float, float, float] = constants.ROTATION_STEP
    window_size: tuple[int, int] = (1280, 800)
    controls: ControlsSettings = field(default_factory=ControlsSettings)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DemoSettings":
        """Build settings from a parsed JSON mapping; unknown keys are ignored."""
        settings = cls()
        _apply(settings, data)
        return settings


def load_settings(path: Optional[Path] = None) -> DemoSettings:
    """Load settings from *path*, or the default config file if present."""
    if path is None:
        default = constants.CONFIG_DIR / constants.DEFAULT_SETTINGS_FILE
        if not default.exists():
            logger.info("No settings file at %s, using defaults.", default)
            return DemoSettings()
        return DemoSettings.from_dict(load_config(constants.DEFAULT_SETTINGS_FILE))
    return DemoSettings.from_dict(load_json(path))


def _apply(target: Any, data: dict[str, Any]) -> None:
    known = {f.name: f for f in fields(target)}
    for key, value in data.items():
        if key not in known:
            logger.warning("Ignoring unknown setting '%s'.", key)
            continue
        current = getattr(target, key)
        if isinstance(current, ControlsSettings):
            _apply(current, value)
        elif isinstance(current, tuple):
            setattr(target, key, tuple(value))
        else:
            setattr(target, key, value)
