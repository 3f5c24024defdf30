"""Assembles the demo scene and registers its material in the panel."""

import logging
from dataclasses import dataclass
from typing import Optional

from cubeview import constants
from cubeview.core.light import AmbientLight
from cubeview.core.material import MeshStandardMaterial
from cubeview.core.mesh import BufferGeometry, MeshInstance
from cubeview.core.scene_graph import Scene, SceneNode
from cubeview.core.settings import DemoSettings
from cubeview.core.texture import Texture
from cubeview.loaders.texture_loader import TextureLoader
from cubeview.scene.procedural_geometry import make_box
from cubeview.scene.scene_environment import add_large_ground_plane, init_default_lighting
from cubeview.ui.material_inspector import (
    ControlsRegistry,
    add_basic_material_settings,
    add_specific_material_settings,
)
from cubeview.ui.panel import Panel

logger = logging.getLogger(__name__)


def add_geometry(
    scene: Scene,
    geometry: BufferGeometry,
    name: str,
    texture: Optional[Texture],
    panel: Panel,
    registry: ControlsRegistry,
) -> SceneNode:
    """Wrap *geometry* in a textured standard material, add it to *scene*,
    and expose the material in two panel folders.
    """
    material = MeshStandardMaterial(
        map=texture,
        metalness=constants.CUBE_METALNESS,
        roughness=constants.CUBE_ROUGHNESS,
    )
    mesh = MeshInstance(name=name, geometry=geometry, material=material, cast_shadow=True)
    node = SceneNode(name)
    node.mesh = mesh

    scene.add(node)
    add_basic_material_settings(panel, registry, material, f"{name}-Material")
    add_specific_material_settings(panel, registry, material, f"{name}-MeshStandardMaterial")

    return node


@dataclass
class DemoScene:
    """Handles to the pieces of the demo the frame loop and UI need."""
    scene: Scene
    cube: SceneNode
    ground: SceneNode


def build_demo_scene(
    settings: DemoSettings,
    panel: Panel,
    registry: ControlsRegistry,
    loader: Optional[TextureLoader] = None,
) -> DemoScene:
    """Ground plane, default lighting, an extra ambient light, and one textured cube."""
    loader = loader or TextureLoader()
    scene = Scene()

    ground = add_large_ground_plane(scene, use_texture=settings.ground_texture, loader=loader)
    ground.set_position(0.0, settings.ground_offset_y, 0.0)
    init_default_lighting(scene, settings.light_position)
    scene.add(AmbientLight(constants.DEMO_AMBIENT_COLOR))

    cube_geometry = make_box(constants.CUBE_SIZE, constants.CUBE_SIZE, constants.CUBE_SIZE)
    cube = add_geometry(
        scene, cube_geometry, "cube", loader.load(settings.cube_texture), panel, registry,
    )

    logger.info("Demo scene built: %d nodes.", len(scene.children))
    return DemoScene(scene=scene, cube=cube, ground=ground)
