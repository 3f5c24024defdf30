"""Main OpenGL renderer -- traverses the scene graph and issues draw calls.

Uses OpenGL 3.3 core profile.  One shader program is compiled per
(material kind, flat shading) pair; a material's program is looked up again
whenever the material raises ``needs_update``.
"""

import logging
from typing import Optional

import numpy as np
from OpenGL.GL import (
    GL_COLOR_BUFFER_BIT,
    GL_DEPTH_BUFFER_BIT,
    GL_DEPTH_TEST,
    GL_LESS,
    GL_MULTISAMPLE,
    glClear,
    glClearColor,
    glDepthFunc,
    glEnable,
    glViewport,
)

from cubeview.constants import CLEAR_COLOR
from cubeview.core.material import Material, MaterialKind
from cubeview.core.math_utils import Mat4, mat3_normal
from cubeview.core.mesh import MeshInstance
from cubeview.core.scene_graph import Fog, Scene
from cubeview.core.texture import Texture
from cubeview.rendering.camera import Camera
from cubeview.rendering.gl_material import apply_material, restore_material_defaults
from cubeview.rendering.gl_mesh import GLMesh
from cubeview.rendering.gl_texture import GLTexture
from cubeview.rendering.lights import LightSetup
from cubeview.rendering.shader_program import ShaderProgram, load_shader_source, with_defines

logger = logging.getLogger(__name__)

# MATERIAL_KIND define values understood by mesh.frag
_KIND_DEFINES = {
    MaterialKind.BASIC: 0,
    MaterialKind.NORMAL: 1,
    MaterialKind.PHONG: 2,
    MaterialKind.STANDARD: 3,
}

ProgramKey = tuple[MaterialKind, bool]


class GLRenderer:
    """Traverses a :class:`Scene`, uploads meshes and textures on demand, and draws them.

    Usage
    -----
    1. Call :meth:`init_gl` once after a valid GL context is current.
    2. Call :meth:`resize` whenever the viewport changes.
    3. Call :meth:`render` each frame.
    4. Call :meth:`destroy` on shutdown.
    """

    def __init__(self) -> None:
        self._programs: dict[ProgramKey, ShaderProgram] = {}
        self._material_programs: dict[int, ShaderProgram] = {}  # keyed by Material.id
        self._gl_meshes: dict[int, GLMesh] = {}  # keyed by id(MeshInstance)
        self._gl_textures: dict[int, GLTexture] = {}  # keyed by id(Texture)
        self._initialised: bool = False
        self._width: int = 1
        self._height: int = 1
        self._frame_count: int = 0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def init_gl(self) -> None:
        """Set up GL state and compile all shader programs.

        Must be called with a current OpenGL context.
        """
        glClearColor(*CLEAR_COLOR)
        glEnable(GL_DEPTH_TEST)
        glDepthFunc(GL_LESS)
        glEnable(GL_MULTISAMPLE)

        self._compile_shaders()
        self._initialised = True
        logger.info("GLRenderer initialised.")

    def resize(self, width: int, height: int) -> None:
        """Update the viewport dimensions."""
        self._width = max(width, 1)
        self._height = max(height, 1)

    def destroy(self) -> None:
        """Free all GL resources."""
        for gl_mesh in self._gl_meshes.values():
            gl_mesh.destroy()
        self._gl_meshes.clear()

        for gl_texture in self._gl_textures.values():
            gl_texture.destroy()
        self._gl_textures.clear()

        for program in self._programs.values():
            program.destroy()
        self._programs.clear()
        self._material_programs.clear()

        self._initialised = False
        logger.info("GLRenderer destroyed.")

    # ------------------------------------------------------------------
    # Frame rendering
    # ------------------------------------------------------------------

    def render(self, scene: Scene, camera: Camera) -> None:
        """Render one frame: clear, traverse scene, draw all visible meshes."""
        if not self._initialised:
            return

        glViewport(0, 0, self._width, self._height)
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)

        # Update scene graph world matrices
        scene.update()

        view = camera.get_view_matrix()
        proj = camera.get_projection_matrix()
        lights = LightSetup.from_scene(scene)

        mesh_list = scene.collect_meshes()

        # Sort: opaque first, then transparent (back-to-front by distance)
        cam_pos = camera.position
        opaque: list[tuple[MeshInstance, Mat4]] = []
        transparent: list[tuple[MeshInstance, Mat4, float]] = []
        for mesh, world in mesh_list:
            if mesh.material.transparent:
                dist = float(np.linalg.norm(world[:3, 3] - cam_pos))
                transparent.append((mesh, world, dist))
            else:
                opaque.append((mesh, world))
        transparent.sort(key=lambda t: t[2], reverse=True)

        self._frame_count += 1
        if self._frame_count <= 3:
            logger.debug(
                "Frame %d: %d meshes (%d opaque, %d transparent), viewport %dx%d",
                self._frame_count, len(mesh_list), len(opaque), len(transparent),
                self._width, self._height,
            )

        for mesh, world in opaque:
            self._draw_mesh(mesh, world, view, proj, lights, scene.fog)
        for mesh, world, _dist in transparent:
            self._draw_mesh(mesh, world, view, proj, lights, scene.fog)

        restore_material_defaults()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _compile_shaders(self) -> None:
        """Compile one program per material kind and shading mode."""
        vert_src = load_shader_source("mesh.vert")
        frag_src = load_shader_source("mesh.frag")

        for kind, kind_value in _KIND_DEFINES.items():
            for flat in (False, True):
                defines = {"MATERIAL_KIND": kind_value, "FLAT_SHADED": int(flat)}
                label = f"{kind.name.lower()}{'-flat' if flat else ''}"
                program = ShaderProgram(
                    with_defines(vert_src), with_defines(frag_src, defines), label,
                )
                program.compile()
                self._programs[(kind, flat)] = program
                logger.debug("Compiled shader '%s'", label)

    def _program_for(self, material: Material) -> ShaderProgram:
        """Return the program for *material*, re-resolving after an edit."""
        program = self._material_programs.get(material.id)
        if program is None or material.needs_update:
            program = self._programs[(material.kind, bool(material.flat_shading))]
            self._material_programs[material.id] = program
            material.needs_update = False
        return program

    def _ensure_gl_mesh(self, mesh: MeshInstance) -> GLMesh:
        """Upload the GPU-side mesh for *mesh* on first use."""
        key = id(mesh)
        gl_mesh = self._gl_meshes.get(key)
        if gl_mesh is None:
            gl_mesh = GLMesh(mesh.geometry)
            gl_mesh.upload()
            mesh.gl_handle = gl_mesh
            self._gl_meshes[key] = gl_mesh
        return gl_mesh

    def _ensure_gl_texture(self, texture: Optional[Texture]) -> Optional[GLTexture]:
        if texture is None or texture.image is None:
            return None
        key = id(texture)
        gl_texture = self._gl_textures.get(key)
        if gl_texture is None:
            gl_texture = GLTexture(texture)
            self._gl_textures[key] = gl_texture
            texture.gl_handle = gl_texture
            texture.needs_update = True
        if texture.needs_update:
            gl_texture.upload()
        return gl_texture

    def _draw_mesh(
        self,
        mesh: MeshInstance,
        world: Mat4,
        view: Mat4,
        proj: Mat4,
        lights: LightSetup,
        fog: Optional[Fog],
    ) -> None:
        """Draw a single mesh with the program matching its material."""
        gl_mesh = self._ensure_gl_mesh(mesh)
        material = mesh.material
        program = self._program_for(material)

        program.use()

        model_view = view @ world
        program.set_uniform_mat4("uModelView", model_view)
        program.set_uniform_mat4("uProjection", proj)

        # Normal matrix (inverse transpose of upper-left 3x3 of model-view)
        try:
            normal_mat = mat3_normal(model_view)
        except np.linalg.LinAlgError:
            normal_mat = np.eye(3, dtype=np.float64)
        program.set_uniform_mat3("uNormalMatrix", normal_mat)

        texture = getattr(material, "map", None)
        gl_texture = self._ensure_gl_texture(texture)
        if gl_texture is not None:
            gl_texture.bind(0)
            program.set_uniform_vec2("uUVRepeat", texture.repeat)
        else:
            program.set_uniform_vec2("uUVRepeat", (1.0, 1.0))

        lights.apply(program, view)
        apply_material(program, material, fog, has_vertex_colors=gl_mesh.has_colors)

        gl_mesh.draw()
