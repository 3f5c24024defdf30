"""VAO / VBO management for uploading and drawing mesh geometry.

Uses OpenGL 3.3 core profile. Each GLMesh owns one VAO with:
  - VBO slot 0: positions      (vec3, location 0)
  - VBO slot 1: normals        (vec3, location 1)
  - VBO slot 2: uvs            (vec2, location 2, optional)
  - VBO slot 3: vertex colors  (vec3, location 3, optional)
  - Optional EBO for indexed geometry
"""

import logging
from typing import Optional

import numpy as np
from OpenGL.GL import (
    GL_ARRAY_BUFFER,
    GL_ELEMENT_ARRAY_BUFFER,
    GL_FLOAT,
    GL_FALSE,
    GL_STATIC_DRAW,
    GL_TRIANGLES,
    GL_UNSIGNED_INT,
    glBindBuffer,
    glBindVertexArray,
    glBufferData,
    glDeleteBuffers,
    glDeleteVertexArrays,
    glDrawArrays,
    glDrawElements,
    glEnableVertexAttribArray,
    glGenBuffers,
    glGenVertexArrays,
    glVertexAttribPointer,
)

from cubeview.core.mesh import BufferGeometry

logger = logging.getLogger(__name__)


class GLMesh:
    """GPU-side representation of a BufferGeometry.

    Call :meth:`upload` once and :meth:`draw` each frame.  Geometry is
    immutable shape data, so buffers are uploaded with ``GL_STATIC_DRAW``.
    """

    def __init__(self, geometry: BufferGeometry) -> None:
        self._geometry = geometry

        self._vao: int = 0
        self._buffers: list[int] = []
        self._ebo: int = 0

        self._vertex_count: int = geometry.vertex_count
        self._index_count: int = 0
        self._has_indices: bool = geometry.has_indices
        self._uploaded: bool = False

    # ------------------------------------------------------------------
    # Upload (create GL objects)
    # ------------------------------------------------------------------

    def upload(self) -> None:
        """Create VAO, VBOs (and optional EBO) and upload vertex data."""
        if self._uploaded:
            self.destroy()

        geom = self._geometry
        self._vao = glGenVertexArrays(1)
        glBindVertexArray(self._vao)

        self._upload_attribute(0, 3, geom.positions)
        self._upload_attribute(1, 3, geom.normals)
        if geom.has_uvs:
            self._upload_attribute(2, 2, geom.uvs)
        if geom.vertex_colors is not None:
            self._upload_attribute(3, 3, geom.vertex_colors)

        if self._has_indices:
            idx_data = geom.indices.astype(np.uint32)
            self._index_count = len(idx_data)
            self._ebo = glGenBuffers(1)
            glBindBuffer(GL_ELEMENT_ARRAY_BUFFER, self._ebo)
            glBufferData(GL_ELEMENT_ARRAY_BUFFER, idx_data.nbytes, idx_data, GL_STATIC_DRAW)

        # Unbind VAO (leave EBO bound inside VAO state)
        glBindVertexArray(0)
        glBindBuffer(GL_ARRAY_BUFFER, 0)

        self._uploaded = True
        logger.debug(
            "GLMesh uploaded: %d verts, %d indices, uvs=%s, colors=%s",
            self._vertex_count, self._index_count,
            geom.has_uvs, geom.vertex_colors is not None,
        )

    @property
    def has_colors(self) -> bool:
        return self._geometry.vertex_colors is not None

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def draw(self) -> None:
        """Bind the VAO and issue the draw call.

        The caller is responsible for binding the shader and setting uniforms
        before calling this method.
        """
        if not self._uploaded:
            return

        glBindVertexArray(self._vao)
        if self._has_indices:
            glDrawElements(GL_TRIANGLES, self._index_count, GL_UNSIGNED_INT, None)
        else:
            glDrawArrays(GL_TRIANGLES, 0, self._vertex_count)
        glBindVertexArray(0)

    # ------------------------------------------------------------------
    # Cleanup
    # ------------------------------------------------------------------

    def destroy(self) -> None:
        """Delete all owned GL resources."""
        if self._ebo:
            glDeleteBuffers(1, [self._ebo])
            self._ebo = 0
        if self._buffers:
            glDeleteBuffers(len(self._buffers), self._buffers)
            self._buffers = []
        if self._vao:
            glDeleteVertexArrays(1, [self._vao])
            self._vao = 0
        self._uploaded = False

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _upload_attribute(self, location: int, size: int, data: Optional[np.ndarray]) -> None:
        array = np.ascontiguousarray(data, dtype=np.float32)
        vbo = glGenBuffers(1)
        self._buffers.append(vbo)
        glBindBuffer(GL_ARRAY_BUFFER, vbo)
        glBufferData(GL_ARRAY_BUFFER, array.nbytes, array, GL_STATIC_DRAW)
        glVertexAttribPointer(location, size, GL_FLOAT, GL_FALSE, 0, None)
        glEnableVertexAttribArray(location)
