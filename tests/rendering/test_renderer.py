"""GL-free tests for the renderer's program selection and light gathering."""

import math

import numpy as np
import pytest

pytest.importorskip("OpenGL.GL")

from cubeview.core.light import AmbientLight, SpotLight
from cubeview.core.material import MaterialKind, MeshBasicMaterial, MeshStandardMaterial
from cubeview.core.math_utils import mat4_identity
from cubeview.core.scene_graph import Scene
from cubeview.rendering.lights import LightSetup
from cubeview.rendering.renderer import GLRenderer


class _FakeProgram:
    def __init__(self, label):
        self.label = label
        self.uniforms = {}

    def set_uniform_vec3(self, name, value):
        self.uniforms[name] = tuple(float(v) for v in value)

    def set_uniform_float(self, name, value):
        self.uniforms[name] = float(value)

    def set_uniform_int(self, name, value):
        self.uniforms[name] = int(value)


def _renderer_with_fake_programs():
    renderer = GLRenderer()
    for kind in MaterialKind:
        for flat in (False, True):
            renderer._programs[(kind, flat)] = _FakeProgram(f"{kind.name}-{flat}")
    return renderer


def test_program_follows_kind_and_flat_shading():
    renderer = _renderer_with_fake_programs()
    mat = MeshStandardMaterial()
    assert renderer._program_for(mat).label == "STANDARD-False"
    assert renderer._program_for(MeshBasicMaterial()).label == "BASIC-False"


def test_program_reresolved_after_needs_update():
    renderer = _renderer_with_fake_programs()
    mat = MeshStandardMaterial()
    renderer._program_for(mat)

    mat.flat_shading = True
    # Without the flag, the cached program stays
    assert renderer._program_for(mat).label == "STANDARD-False"

    mat.needs_update = True
    assert renderer._program_for(mat).label == "STANDARD-True"
    assert mat.needs_update is False


def test_light_setup_sums_ambient_and_picks_first_spot():
    scene = Scene()
    first = SpotLight(name="first")
    scene.add(first)
    scene.add(SpotLight(name="second"))
    scene.add(AmbientLight(0x808080, intensity=0.5))
    scene.add(AmbientLight(0x808080, intensity=0.5))

    setup = LightSetup.from_scene(scene)
    assert setup.spot is first
    expected = 0x80 / 255.0
    np.testing.assert_array_almost_equal(setup.ambient_color, [expected] * 3)


def test_light_setup_uploads_spot_in_view_space():
    scene = Scene()
    spot = SpotLight(0xFFFFFF, intensity=2.0, angle=math.pi / 3, penumbra=0.5, decay=2.0)
    spot.set_position(0, 10, 0)
    scene.add(spot)
    scene.update()

    program = _FakeProgram("p")
    LightSetup.from_scene(scene).apply(program, mat4_identity())

    assert program.uniforms["uHasSpotLight"] == 1
    np.testing.assert_array_almost_equal(program.uniforms["uSpotPosition"], [0, 10, 0])
    np.testing.assert_array_almost_equal(program.uniforms["uSpotDirection"], [0, -1, 0])
    np.testing.assert_array_almost_equal(program.uniforms["uSpotColor"], [2, 2, 2])
    assert program.uniforms["uSpotConeCos"] == pytest.approx(0.5)
    assert program.uniforms["uSpotPenumbraCos"] == pytest.approx(math.cos(math.pi / 6))


def test_light_setup_without_spot():
    program = _FakeProgram("p")
    LightSetup.from_scene(Scene()).apply(program, mat4_identity())
    assert program.uniforms["uHasSpotLight"] == 0
    assert program.uniforms["uAmbientColor"] == (0.0, 0.0, 0.0)
