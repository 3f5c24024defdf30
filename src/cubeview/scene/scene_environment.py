"""Ground plane and default lighting for the demo scene.

Hierarchy::

    Scene
    +-- ground       (10000 x 10000 plane, white Phong, receives shadows)
    +-- spotLight    (white, casts shadows)
    +-- ambientLight (dim grey)
"""

import logging
import math
from typing import Optional, Sequence

from cubeview import constants
from cubeview.core.light import AmbientLight, SpotLight
from cubeview.core.material import MeshPhongMaterial
from cubeview.core.mesh import MeshInstance
from cubeview.core.scene_graph import Scene, SceneNode
from cubeview.core.texture import Wrapping
from cubeview.loaders.texture_loader import TextureLoader
from cubeview.scene.procedural_geometry import make_plane

logger = logging.getLogger(__name__)


def add_large_ground_plane(
    scene: Scene,
    use_texture: bool = False,
    loader: Optional[TextureLoader] = None,
) -> SceneNode:
    """Add a large horizontal plane that receives shadows and return its node."""
    material = MeshPhongMaterial()
    material.color.set_hex(0xFFFFFF)
    if use_texture:
        loader = loader or TextureLoader()
        texture = loader.load(constants.GROUND_TEXTURE)
        texture.wrap_s = Wrapping.REPEAT
        texture.wrap_t = Wrapping.REPEAT
        texture.set_repeat(*constants.GROUND_TEXTURE_REPEAT)
        material.map = texture

    mesh = MeshInstance(
        name="ground",
        geometry=make_plane(constants.GROUND_SIZE, constants.GROUND_SIZE),
        material=material,
        receive_shadow=True,
    )
    plane = SceneNode("ground")
    plane.mesh = mesh

    # Lay the XY plane flat, facing up
    plane.set_rotation(-0.5 * math.pi, 0.0, 0.0)
    plane.set_position(0.0, 0.0, 0.0)

    scene.add(plane)
    return plane


def init_default_lighting(
    scene: Scene,
    position: Optional[Sequence[float]] = None,
) -> tuple[SpotLight, AmbientLight]:
    """Add the shadow-casting spot light and a low ambient light to *scene*."""
    if position is None:
        position = constants.DEFAULT_LIGHT_POS

    spot_light = SpotLight(constants.SPOT_LIGHT_COLOR, name="spotLight")
    spot_light.set_position(*position)
    spot_light.shadow.set_map_size(constants.SPOT_SHADOW_MAP_SIZE)
    spot_light.shadow.camera_fov = constants.SPOT_SHADOW_FOV
    spot_light.cast_shadow = True
    spot_light.decay = constants.SPOT_DECAY
    spot_light.penumbra = constants.SPOT_PENUMBRA
    spot_light.angle = constants.SPOT_ANGLE
    scene.add(spot_light)

    ambient_light = AmbientLight(constants.AMBIENT_LIGHT_COLOR, name="ambientLight")
    scene.add(ambient_light)

    logger.debug("Default lighting at (%.1f, %.1f, %.1f).", *position)
    return spot_light, ambient_light
