"""Texture loading via QImage into RGBA numpy arrays."""

import logging
from pathlib import Path
from typing import Union

import numpy as np
from PySide6.QtGui import QImage

from cubeview.constants import TEXTURES_DIR
from cubeview.core.texture import Texture, make_checker_image

logger = logging.getLogger(__name__)


class TextureLoader:
    """Loads image files into :class:`Texture` objects.

    Relative paths resolve against *base_dir* (``assets/textures`` by
    default).  Loaded images are cached by resolved path, but each call
    returns its own :class:`Texture` so sampling settings stay independent.
    """

    def __init__(self, base_dir: Path = TEXTURES_DIR) -> None:
        self.base_dir = Path(base_dir)
        self._cache: dict[Path, np.ndarray] = {}

    def load(self, path: Union[str, Path]) -> Texture:
        """Load *path*; a missing or unreadable file yields a checkerboard."""
        resolved = self._resolve(path)
        image = self._cache.get(resolved)
        if image is None:
            image = read_image(resolved)
            if image is None:
                logger.warning("Could not load texture '%s', using placeholder.", resolved)
                return Texture(image=make_checker_image(), source=resolved, placeholder=True)
            self._cache[resolved] = image
            logger.info("Loaded texture '%s' (%dx%d).", resolved.name, image.shape[1], image.shape[0])
        return Texture(image=image, source=resolved)

    def _resolve(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        if not path.is_absolute():
            path = self.base_dir / path
        return path


def read_image(path: Path):
    """Decode an image file into an HxWx4 uint8 array, bottom row first.

    Returns ``None`` if the file does not exist or cannot be decoded.
    """
    if not path.is_file():
        return None
    qimage = QImage(str(path))
    if qimage.isNull():
        return None

    qimage = qimage.convertToFormat(QImage.Format.Format_RGBA8888).mirrored(False, True)
    width, height = qimage.width(), qimage.height()
    data = np.frombuffer(qimage.constBits(), dtype=np.uint8)
    rows = data.reshape(height, qimage.bytesPerLine())
    return rows[:, : width * 4].reshape(height, width, 4).copy()
