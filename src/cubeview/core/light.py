"""Light nodes: ambient and shadow-casting spot light."""

import math
from dataclasses import dataclass

from cubeview.core.color import Color
from cubeview.core.math_utils import Vec3, vec3
from cubeview.core.scene_graph import SceneNode


@dataclass
class LightShadow:
    """Shadow map settings carried by a shadow-casting light."""
    map_width: int = 512
    map_height: int = 512
    camera_fov: float = 50.0
    camera_near: float = 0.5
    camera_far: float = 500.0

    def set_map_size(self, size: int) -> None:
        self.map_width = size
        self.map_height = size


class Light(SceneNode):
    """Base class for light nodes."""

    def __init__(self, color: int = 0xFFFFFF, intensity: float = 1.0, name: str = "") -> None:
        super().__init__(name)
        self.color: Color = Color.from_hex(color)
        self.intensity: float = intensity


class AmbientLight(Light):
    """Uniform light applied to every surface."""


class SpotLight(Light):
    """A cone light aimed at ``target``.

    Attributes
    ----------
    distance : float
        Cut-off range; 0 means unlimited.
    angle : float
        Cone half-angle in radians.
    penumbra : float
        Fraction of the cone that fades out at the edge (0..1).
    decay : float
        Attenuation exponent along the light distance.
    """

    def __init__(
        self,
        color: int = 0xFFFFFF,
        intensity: float = 1.0,
        distance: float = 0.0,
        angle: float = math.pi / 3,
        penumbra: float = 0.0,
        decay: float = 1.0,
        name: str = "",
    ) -> None:
        super().__init__(color, intensity, name)
        self.distance = distance
        self.angle = angle
        self.penumbra = penumbra
        self.decay = decay
        self.target: Vec3 = vec3()
        self.cast_shadow: bool = False
        self.shadow = LightShadow()
