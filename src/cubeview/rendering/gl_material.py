"""Apply Material properties to a shader program and configure GL state."""

from typing import Optional

from OpenGL.GL import (
    GL_BACK,
    GL_BLEND,
    GL_CULL_FACE,
    GL_DITHER,
    GL_FILL,
    GL_FRONT,
    GL_FRONT_AND_BACK,
    GL_LINE,
    GL_ONE,
    GL_ONE_MINUS_SRC_ALPHA,
    GL_SRC_ALPHA,
    glBlendFunc,
    glColorMask,
    glCullFace,
    glDepthMask,
    glDisable,
    glEnable,
    glPolygonMode,
)

from cubeview.core.material import Material, Side, VertexColors
from cubeview.core.scene_graph import Fog
from cubeview.rendering.shader_program import ShaderProgram

_BLACK = (0.0, 0.0, 0.0)
_WHITE = (1.0, 1.0, 1.0)


def apply_material(
    shader: ShaderProgram,
    material: Material,
    fog: Optional[Fog] = None,
    has_vertex_colors: bool = False,
) -> None:
    """Set shader uniforms and GL state to match *material*.

    Must be called after ``shader.use()`` and before the draw call.
    Uniforms a variant does not carry fall back to neutral values; the
    per-kind shader ignores the ones it does not read.
    """
    # --- Uniforms --------------------------------------------------------
    shader.set_uniform_vec3("uColor", _rgb(material, "color", _WHITE))
    shader.set_uniform_vec3("uEmissive", _rgb(material, "emissive", _BLACK))
    shader.set_uniform_vec3("uSpecular", _rgb(material, "specular", _BLACK))
    shader.set_uniform_float("uShininess", getattr(material, "shininess", 30.0))
    shader.set_uniform_float("uMetalness", getattr(material, "metalness", 0.0))
    shader.set_uniform_float("uRoughness", getattr(material, "roughness", 1.0))
    shader.set_uniform_float("uOpacity", material.opacity if material.transparent else 1.0)
    shader.set_uniform_int("uPremultipliedAlpha", 1 if material.premultiplied_alpha else 0)

    use_colors = has_vertex_colors and material.vertex_colors != VertexColors.NONE
    shader.set_uniform_int("uUseVertexColor", 1 if use_colors else 0)

    texture = getattr(material, "map", None)
    shader.set_uniform_int("uHasMap", 1 if texture is not None and texture.gl_handle else 0)
    shader.set_uniform_int("uMap", 0)

    if fog is not None and material.fog:
        shader.set_uniform_int("uFogEnabled", 1)
        shader.set_uniform_vec3("uFogColor", fog.color.to_tuple())
        shader.set_uniform_float("uFogNear", fog.near)
        shader.set_uniform_float("uFogFar", fog.far)
    else:
        shader.set_uniform_int("uFogEnabled", 0)

    # --- Transparency / blending -----------------------------------------
    if material.transparent:
        glEnable(GL_BLEND)
        if material.premultiplied_alpha:
            glBlendFunc(GL_ONE, GL_ONE_MINUS_SRC_ALPHA)
        else:
            glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glDepthMask(False)
    else:
        glDisable(GL_BLEND)
        glDepthMask(True)

    write = bool(material.color_write)
    glColorMask(write, write, write, write)

    if material.dithering:
        glEnable(GL_DITHER)
    else:
        glDisable(GL_DITHER)

    # --- Face culling ----------------------------------------------------
    if material.side == Side.DOUBLE:
        glDisable(GL_CULL_FACE)
    else:
        glEnable(GL_CULL_FACE)
        glCullFace(GL_FRONT if material.side == Side.BACK else GL_BACK)

    # --- Polygon mode for wireframe --------------------------------------
    if material.wireframe:
        glPolygonMode(GL_FRONT_AND_BACK, GL_LINE)
    else:
        glPolygonMode(GL_FRONT_AND_BACK, GL_FILL)


def restore_material_defaults() -> None:
    """Reset GL state changed by :func:`apply_material` to safe defaults."""
    glPolygonMode(GL_FRONT_AND_BACK, GL_FILL)
    glDisable(GL_BLEND)
    glDepthMask(True)
    glColorMask(True, True, True, True)
    glEnable(GL_CULL_FACE)
    glCullFace(GL_BACK)


def _rgb(material: Material, attr: str, default: tuple[float, float, float]):
    color = getattr(material, attr, None)
    return color.to_tuple() if color is not None else default
