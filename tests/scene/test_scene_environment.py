"""Tests for the ground plane and default lighting."""

import math

import numpy as np

from cubeview import constants
from cubeview.core.light import AmbientLight, SpotLight
from cubeview.core.material import MeshPhongMaterial
from cubeview.core.scene_graph import Scene
from cubeview.core.texture import Texture, Wrapping, make_checker_image
from cubeview.scene.scene_environment import add_large_ground_plane, init_default_lighting


class _FakeLoader:
    def __init__(self):
        self.requested = []

    def load(self, path):
        self.requested.append(path)
        return Texture(image=make_checker_image(8, 2), source=path)


def test_ground_plane_untextured():
    scene = Scene()
    ground = add_large_ground_plane(scene)
    assert ground in scene.children
    assert ground.name == "ground"
    mat = ground.mesh.material
    assert isinstance(mat, MeshPhongMaterial)
    assert mat.color.get_hex() == 0xFFFFFF
    assert mat.map is None
    assert ground.mesh.receive_shadow is True


def test_ground_plane_lies_flat():
    scene = Scene()
    ground = add_large_ground_plane(scene)
    scene.update()
    # Plane normal (+Z local) now points up
    normal = ground.world_matrix[:3, :3] @ np.array([0.0, 0.0, 1.0])
    np.testing.assert_array_almost_equal(normal, [0, 1, 0])
    np.testing.assert_almost_equal(ground.rotation[0], -0.5 * math.pi)


def test_ground_plane_textured_repeats():
    scene = Scene()
    loader = _FakeLoader()
    ground = add_large_ground_plane(scene, use_texture=True, loader=loader)
    texture = ground.mesh.material.map
    assert loader.requested == [constants.GROUND_TEXTURE]
    assert texture.wrap_s is Wrapping.REPEAT
    assert texture.wrap_t is Wrapping.REPEAT
    assert texture.repeat == constants.GROUND_TEXTURE_REPEAT


def test_default_lighting():
    scene = Scene()
    spot, ambient = init_default_lighting(scene)
    assert isinstance(spot, SpotLight)
    assert isinstance(ambient, AmbientLight)
    assert scene.collect_lights() == [spot, ambient]
    np.testing.assert_array_equal(spot.position, constants.DEFAULT_LIGHT_POS)
    assert spot.cast_shadow is True
    assert spot.shadow.map_width == 2048
    assert spot.shadow.map_height == 2048
    assert spot.shadow.camera_fov == 15.0
    assert spot.decay == 2.0
    assert spot.penumbra == 0.05
    assert spot.angle == math.pi / 3
    assert ambient.color.get_hex() == 0x343434


def test_default_lighting_custom_position():
    scene = Scene()
    spot, _ = init_default_lighting(scene, (1, 2, 3))
    np.testing.assert_array_equal(spot.position, [1, 2, 3])
