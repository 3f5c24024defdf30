"""Perspective camera with view and projection matrices."""

from typing import Optional, Sequence

from cubeview.core.math_utils import (
    Mat4,
    Vec3,
    deg_to_rad,
    mat4_identity,
    mat4_look_at,
    mat4_perspective,
    vec3,
)
from cubeview.constants import (
    CAMERA_FAR,
    CAMERA_FOV,
    CAMERA_NEAR,
    DEFAULT_CAMERA_POS,
    DEFAULT_CAMERA_TARGET,
)


class Camera:
    """A perspective camera that produces view and projection matrices.

    Parameters
    ----------
    fov : float
        Vertical field-of-view in degrees.
    near : float
        Near clipping plane distance.
    far : float
        Far clipping plane distance.
    """

    def __init__(
        self,
        fov: float = CAMERA_FOV,
        near: float = CAMERA_NEAR,
        far: float = CAMERA_FAR,
    ) -> None:
        self.fov = fov
        self.near = near
        self.far = far
        self.aspect: float = 1.0

        self.position: Vec3 = vec3(*DEFAULT_CAMERA_POS)
        self.target: Vec3 = vec3(*DEFAULT_CAMERA_TARGET)
        self.up: Vec3 = vec3(0.0, 1.0, 0.0)

        # Cached matrices (recomputed on demand)
        self._view_dirty: bool = True
        self._proj_dirty: bool = True
        self._view: Mat4 = mat4_identity()
        self._proj: Mat4 = mat4_identity()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def set_aspect(self, width: int, height: int) -> None:
        """Update the aspect ratio from viewport dimensions."""
        if height > 0:
            self.aspect = width / height
            self._proj_dirty = True

    def get_view_matrix(self) -> Mat4:
        if self._view_dirty:
            self._view = mat4_look_at(self.position, self.target, self.up)
            self._view_dirty = False
        return self._view

    def get_projection_matrix(self) -> Mat4:
        if self._proj_dirty:
            fov_rad = deg_to_rad(self.fov)
            self._proj = mat4_perspective(fov_rad, self.aspect, self.near, self.far)
            self._proj_dirty = False
        return self._proj

    # ------------------------------------------------------------------
    # Convenience mutators (mark view dirty)
    # ------------------------------------------------------------------

    def look_at(self, target: Vec3) -> None:
        self.target = target.copy()
        self._view_dirty = True

    def set_position(self, x: float, y: float, z: float) -> None:
        self.position = vec3(x, y, z)
        self._view_dirty = True

    def mark_view_dirty(self) -> None:
        """Call after externally modifying ``position`` or ``target``."""
        self._view_dirty = True


def init_camera(initial_position: Optional[Sequence[float]] = None) -> Camera:
    """Create the demo camera at *initial_position*, aimed at the origin."""
    camera = Camera()
    camera.set_position(*(initial_position if initial_position is not None else DEFAULT_CAMERA_POS))
    camera.look_at(vec3(0.0, 0.0, 0.0))
    return camera
