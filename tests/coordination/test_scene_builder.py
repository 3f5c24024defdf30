"""Tests for assembling the demo scene."""

import numpy as np

from cubeview import constants
from cubeview.core.events import EventBus
from cubeview.core.light import AmbientLight, SpotLight
from cubeview.core.material import MeshStandardMaterial
from cubeview.core.scene_graph import Scene
from cubeview.core.settings import DemoSettings
from cubeview.core.texture import Texture, make_checker_image
from cubeview.coordination.scene_builder import add_geometry, build_demo_scene
from cubeview.scene.procedural_geometry import make_box
from cubeview.ui.material_inspector import ControlsRegistry
from cubeview.ui.panel import Panel


class _FakeLoader:
    def __init__(self):
        self.requested = []

    def load(self, path):
        self.requested.append(path)
        return Texture(image=make_checker_image(8, 2), source=path)


def test_add_geometry_wires_material_and_folders():
    scene = Scene()
    panel = Panel()
    texture = Texture(image=make_checker_image(8, 2))
    node = add_geometry(scene, make_box(1, 1, 1), "cube", texture, panel, ControlsRegistry())

    assert node in scene.children
    mat = node.mesh.material
    assert isinstance(mat, MeshStandardMaterial)
    assert mat.map is texture
    assert mat.metalness == constants.CUBE_METALNESS
    assert mat.roughness == constants.CUBE_ROUGHNESS
    assert node.mesh.cast_shadow is True

    assert [f.name for f in panel.folders] == ["cube-Material", "cube-MeshStandardMaterial"]
    assert len(panel.folder("cube-Material")) == 14
    assert panel.folder("cube-MeshStandardMaterial").field_names() == [
        "color", "emissive", "metalness", "roughness", "wireframe",
    ]


def test_add_geometry_without_texture():
    node = add_geometry(Scene(), make_box(1, 1, 1), "box", None, Panel(), ControlsRegistry())
    assert node.mesh.material.map is None


def test_panel_edits_reach_scene_material():
    scene = Scene()
    panel = Panel()
    node = add_geometry(scene, make_box(1, 1, 1), "cube", None, panel, ControlsRegistry())
    panel.folder("cube-MeshStandardMaterial").field("roughness").set(0.5)
    panel.folder("cube-Material").field("side").set("2")
    assert node.mesh.material.roughness == 0.5
    assert int(node.mesh.material.side) == 2


def test_build_demo_scene():
    loader = _FakeLoader()
    panel = Panel()
    demo = build_demo_scene(DemoSettings(), panel, ControlsRegistry(EventBus()), loader)

    names = [child.name for child in demo.scene.children]
    assert names[:3] == ["ground", "spotLight", "ambientLight"]
    assert demo.scene.find("cube") is demo.cube
    assert loader.requested == [constants.CUBE_TEXTURE]
    assert demo.cube.mesh.material.map.source == constants.CUBE_TEXTURE

    lights = demo.scene.collect_lights()
    assert sum(isinstance(l, SpotLight) for l in lights) == 1
    ambient = [l for l in lights if isinstance(l, AmbientLight)]
    assert [a.color.get_hex() for a in ambient] == [0x343434, 0x444444]

    np.testing.assert_array_almost_equal(demo.ground.position, [0, -10, 0])
    assert [f.name for f in panel.folders] == ["cube-Material", "cube-MeshStandardMaterial"]


def test_build_demo_scene_textured_ground():
    loader = _FakeLoader()
    settings = DemoSettings(ground_texture=True)
    demo = build_demo_scene(settings, Panel(), ControlsRegistry(), loader)
    assert loader.requested == [constants.GROUND_TEXTURE, constants.CUBE_TEXTURE]
    assert demo.ground.mesh.material.map is not None
