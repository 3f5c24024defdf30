"""Gather scene lights and upload them as shader uniforms."""

import math
from typing import Optional

import numpy as np

from cubeview.core.light import AmbientLight, SpotLight
from cubeview.core.math_utils import Mat4, Vec3, normalize, transform_point, vec3
from cubeview.core.scene_graph import Scene
from cubeview.rendering.shader_program import ShaderProgram


class LightSetup:
    """Ambient term plus at most one spot light, read from the scene.

    Attributes
    ----------
    ambient_color : Vec3
        Sum of all ambient lights (color * intensity).
    spot : Optional[SpotLight]
        The first visible spot light, if any.  Further spot lights are
        ignored.
    """

    def __init__(self) -> None:
        self.ambient_color: Vec3 = vec3()
        self.spot: Optional[SpotLight] = None

    @classmethod
    def from_scene(cls, scene: Scene) -> "LightSetup":
        setup = cls()
        for light in scene.collect_lights():
            if isinstance(light, AmbientLight):
                setup.ambient_color = setup.ambient_color + (
                    np.array(light.color.to_tuple()) * light.intensity
                )
            elif isinstance(light, SpotLight) and setup.spot is None:
                setup.spot = light
        return setup

    def apply(self, shader: ShaderProgram, view: Mat4) -> None:
        """Upload light uniforms.  *view* transforms world -> view space.

        Must be called after ``shader.use()``.
        """
        shader.set_uniform_vec3("uAmbientColor", self.ambient_color)

        spot = self.spot
        if spot is None:
            shader.set_uniform_int("uHasSpotLight", 0)
            return

        shader.set_uniform_int("uHasSpotLight", 1)

        pos_w = spot.get_world_position()
        pos_v = transform_point(view, pos_w)
        dir_w = normalize(spot.target - pos_w)
        dir_v = view[:3, :3] @ dir_w

        cone_cos = math.cos(spot.angle)
        penumbra_cos = math.cos(spot.angle * (1.0 - spot.penumbra))

        shader.set_uniform_vec3("uSpotPosition", pos_v)
        shader.set_uniform_vec3("uSpotDirection", dir_v)
        shader.set_uniform_vec3("uSpotColor", np.array(spot.color.to_tuple()) * spot.intensity)
        shader.set_uniform_float("uSpotDistance", spot.distance)
        shader.set_uniform_float("uSpotDecay", spot.decay)
        shader.set_uniform_float("uSpotConeCos", cone_cos)
        shader.set_uniform_float("uSpotPenumbraCos", penumbra_cos)
