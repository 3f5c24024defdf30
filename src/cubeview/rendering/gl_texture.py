"""Upload :class:`Texture` images to GL texture objects."""

import logging

import numpy as np
from OpenGL.GL import (
    GL_CLAMP_TO_EDGE,
    GL_LINEAR,
    GL_LINEAR_MIPMAP_LINEAR,
    GL_REPEAT,
    GL_RGBA,
    GL_RGBA8,
    GL_TEXTURE0,
    GL_TEXTURE_2D,
    GL_TEXTURE_MAG_FILTER,
    GL_TEXTURE_MIN_FILTER,
    GL_TEXTURE_WRAP_S,
    GL_TEXTURE_WRAP_T,
    GL_UNPACK_ALIGNMENT,
    GL_UNSIGNED_BYTE,
    glActiveTexture,
    glBindTexture,
    glDeleteTextures,
    glGenerateMipmap,
    glGenTextures,
    glPixelStorei,
    glTexImage2D,
    glTexParameteri,
)

from cubeview.core.texture import Texture, Wrapping

logger = logging.getLogger(__name__)

_GL_WRAP = {
    Wrapping.CLAMP: GL_CLAMP_TO_EDGE,
    Wrapping.REPEAT: GL_REPEAT,
}


class GLTexture:
    """GPU-side copy of a :class:`Texture`."""

    def __init__(self, texture: Texture) -> None:
        self._texture = texture
        self._handle: int = 0

    def upload(self) -> None:
        """(Re)create the GL texture from the image and sampler settings."""
        tex = self._texture
        if tex.image is None:
            return
        if not self._handle:
            self._handle = glGenTextures(1)

        data = np.ascontiguousarray(tex.image, dtype=np.uint8)
        glBindTexture(GL_TEXTURE_2D, self._handle)
        glPixelStorei(GL_UNPACK_ALIGNMENT, 1)
        glTexImage2D(
            GL_TEXTURE_2D, 0, GL_RGBA8, tex.width, tex.height, 0,
            GL_RGBA, GL_UNSIGNED_BYTE, data,
        )
        glGenerateMipmap(GL_TEXTURE_2D)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_S, _GL_WRAP[tex.wrap_s])
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_T, _GL_WRAP[tex.wrap_t])
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR_MIPMAP_LINEAR)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_LINEAR)
        glBindTexture(GL_TEXTURE_2D, 0)

        tex.needs_update = False
        logger.debug("GLTexture uploaded: %dx%d from %s", tex.width, tex.height, tex.source)

    def bind(self, unit: int = 0) -> None:
        glActiveTexture(GL_TEXTURE0 + unit)
        glBindTexture(GL_TEXTURE_2D, self._handle)

    @property
    def uploaded(self) -> bool:
        return bool(self._handle)

    def destroy(self) -> None:
        if self._handle:
            glDeleteTextures(1, [self._handle])
            self._handle = 0
