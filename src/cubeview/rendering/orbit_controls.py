"""Mouse-driven orbit, pan, and zoom controls using spherical coordinates."""

import math
from typing import Optional

import numpy as np

from cubeview.constants import (
    CONTROLS_DAMPING_FACTOR,
    CONTROLS_KEYS,
    CONTROLS_PAN_SPEED,
    CONTROLS_ROTATE_SPEED,
    CONTROLS_ZOOM_SPEED,
    TARGET_FPS,
)
from cubeview.core.math_utils import Vec3, vec3, clamp
from cubeview.rendering.camera import Camera


class OrbitControls:
    """Orbits the camera around a target point.

    Uses spherical coordinates (theta, phi, radius).  With
    ``static_moving`` off, a released drag keeps spinning and decays by
    ``dynamic_damping_factor`` per frame.  Holding one of ``keys`` while
    dragging with the left button forces rotate, zoom or pan respectively.

    Parameters
    ----------
    camera : Camera
        The camera whose position will be updated.
    """

    # Mouse button constants
    BUTTON_LEFT = 1
    BUTTON_MIDDLE = 2
    BUTTON_RIGHT = 3

    # Base rates scaled by the *_speed settings
    _ROTATE_RATE = 0.005   # radians per pixel
    _ZOOM_RATE = 0.1       # fraction per wheel notch
    _PAN_RATE = 0.0025     # fraction of distance per pixel

    def __init__(self, camera: Camera) -> None:
        self.camera = camera
        self.target: Vec3 = camera.target.copy()

        self._theta: float = 0.0
        self._phi: float = math.pi / 2
        self._radius: float = 0.0

        # Limits
        self.min_radius: float = 1.0
        self.max_radius: float = 900.0
        self.min_phi: float = 0.05  # avoid gimbal lock at poles
        self.max_phi: float = math.pi - 0.05

        # Sensitivity
        self.rotate_speed: float = CONTROLS_ROTATE_SPEED
        self.zoom_speed: float = CONTROLS_ZOOM_SPEED
        self.pan_speed: float = CONTROLS_PAN_SPEED
        self.no_zoom: bool = False
        self.no_pan: bool = False
        self.static_moving: bool = True
        self.dynamic_damping_factor: float = CONTROLS_DAMPING_FACTOR
        self.keys: tuple[int, int, int] = tuple(CONTROLS_KEYS)

        self._velocity_theta: float = 0.0
        self._velocity_phi: float = 0.0

        # Interaction state
        self._active_button: Optional[int] = None
        self._held_key: Optional[int] = None
        self._last_x: float = 0.0
        self._last_y: float = 0.0

        self._sync_from_camera()

    # ------------------------------------------------------------------
    # Input handlers
    # ------------------------------------------------------------------

    def on_mouse_press(self, x: float, y: float, button: int) -> None:
        """Begin an orbit (left), pan (right), or zoom (middle) drag."""
        self._active_button = button
        self._last_x = x
        self._last_y = y
        self._velocity_theta = 0.0
        self._velocity_phi = 0.0

    def on_mouse_move(self, x: float, y: float) -> None:
        if self._active_button is None:
            return

        dx = x - self._last_x
        dy = y - self._last_y
        self._last_x = x
        self._last_y = y

        action = self._action_for(self._active_button)
        if action == "rotate":
            self._orbit(dx, dy)
        elif action == "pan" and not self.no_pan:
            self._pan(dx, dy)
        elif action == "zoom" and not self.no_zoom:
            self._zoom_drag(dy)

    def on_mouse_release(self) -> None:
        self._active_button = None
        if self.static_moving:
            self._velocity_theta = 0.0
            self._velocity_phi = 0.0

    def on_scroll(self, delta: float) -> None:
        """Zoom in/out via scroll wheel. Positive *delta* zooms in."""
        if self.no_zoom:
            return
        factor = 1.0 - delta * self._ZOOM_RATE * self.zoom_speed
        self._radius = clamp(self._radius * factor, self.min_radius, self.max_radius)
        self._apply_to_camera()

    def on_key_press(self, key: int) -> None:
        if key in self.keys:
            self._held_key = key

    def on_key_release(self, key: int) -> None:
        if key == self._held_key:
            self._held_key = None

    # ------------------------------------------------------------------
    # Per-frame update
    # ------------------------------------------------------------------

    def update(self, dt: float = 1.0 / TARGET_FPS) -> None:
        """Apply drag inertia. Call once per frame with the elapsed seconds."""
        if self.static_moving or self._active_button is not None:
            return
        if abs(self._velocity_theta) < 1e-6 and abs(self._velocity_phi) < 1e-6:
            return

        frames = dt * TARGET_FPS
        self._theta += self._velocity_theta * frames
        self._phi = clamp(self._phi + self._velocity_phi * frames, self.min_phi, self.max_phi)
        decay = (1.0 - self.dynamic_damping_factor) ** frames
        self._velocity_theta *= decay
        self._velocity_phi *= decay
        self._apply_to_camera()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _action_for(self, button: int) -> str:
        if button == self.BUTTON_LEFT and self._held_key is not None:
            return ("rotate", "zoom", "pan")[self.keys.index(self._held_key)]
        if button == self.BUTTON_RIGHT:
            return "pan"
        if button == self.BUTTON_MIDDLE:
            return "zoom"
        return "rotate"

    def _orbit(self, dx: float, dy: float) -> None:
        d_theta = -dx * self._ROTATE_RATE * self.rotate_speed
        d_phi = -dy * self._ROTATE_RATE * self.rotate_speed

        self._theta += d_theta
        self._phi = clamp(self._phi + d_phi, self.min_phi, self.max_phi)

        self._velocity_theta = d_theta
        self._velocity_phi = d_phi

        self._apply_to_camera()

    def _pan(self, dx: float, dy: float) -> None:
        """Pan the camera (and target) perpendicular to the view direction."""
        offset = self.camera.position - self.target
        dist = float(np.linalg.norm(offset))

        view = self.camera.get_view_matrix()
        right = vec3(view[0, 0], view[0, 1], view[0, 2])
        up = vec3(view[1, 0], view[1, 1], view[1, 2])

        pan = (-dx * right + dy * up) * self.pan_speed * dist * self._PAN_RATE
        self.target = self.target + pan
        self._apply_to_camera()

    def _zoom_drag(self, dy: float) -> None:
        factor = 1.0 + dy * 0.005 * self.zoom_speed
        self._radius = clamp(self._radius * factor, self.min_radius, self.max_radius)
        self._apply_to_camera()

    def _sync_from_camera(self) -> None:
        """Derive spherical coords from the current camera position/target."""
        offset = self.camera.position - self.target
        self._radius = float(np.linalg.norm(offset))
        if self._radius < 1e-6:
            self._radius = 1.0
            return

        n = offset / self._radius
        self._phi = math.acos(clamp(float(n[1]), -1.0, 1.0))
        self._theta = math.atan2(float(n[0]), float(n[2]))

    def _apply_to_camera(self) -> None:
        """Write spherical coords back to the camera position."""
        sin_phi = math.sin(self._phi)
        x = self._radius * sin_phi * math.sin(self._theta)
        y = self._radius * math.cos(self._phi)
        z = self._radius * sin_phi * math.cos(self._theta)

        self.camera.position = self.target + vec3(x, y, z)
        self.camera.target = self.target.copy()
        self.camera.mark_view_dirty()


def init_orbit_controls(camera: Camera, settings=None) -> OrbitControls:
    """Create controls for *camera*, applying a :class:`ControlsSettings` if given."""
    controls = OrbitControls(camera)
    if settings is not None:
        controls.rotate_speed = settings.rotate_speed
        controls.zoom_speed = settings.zoom_speed
        controls.pan_speed = settings.pan_speed
        controls.no_zoom = settings.no_zoom
        controls.no_pan = settings.no_pan
        controls.static_moving = settings.static_moving
        controls.dynamic_damping_factor = settings.dynamic_damping_factor
        controls.keys = tuple(settings.keys)
    return controls
