"""Texture definitions (no GL dependencies)."""

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Optional

import numpy as np
from numpy.typing import NDArray


class Wrapping(Enum):
    CLAMP = auto()
    REPEAT = auto()


@dataclass(eq=False)
class Texture:
    """An RGBA image plus sampling parameters.

    image: HxWx4 uint8 array, row 0 at the bottom (GL convention).
    """
    image: Optional[NDArray[np.uint8]] = None
    source: Optional[Path] = None
    wrap_s: Wrapping = Wrapping.CLAMP
    wrap_t: Wrapping = Wrapping.CLAMP
    repeat: tuple[float, float] = (1.0, 1.0)
    # GL handle (set by renderer)
    gl_handle: object = None
    # Flag for image/sampler updates
    needs_update: bool = True
    placeholder: bool = field(default=False)

    @property
    def width(self) -> int:
        return 0 if self.image is None else int(self.image.shape[1])

    @property
    def height(self) -> int:
        return 0 if self.image is None else int(self.image.shape[0])

    def set_repeat(self, u: float, v: float) -> None:
        self.repeat = (float(u), float(v))
        self.needs_update = True


def make_checker_image(
    size: int = 64, cells: int = 8,
    light: int = 0xB0B0B0, dark: int = 0x505050,
) -> NDArray[np.uint8]:
    """Build a checkerboard RGBA image, used when a texture file is missing."""
    idx = np.arange(size) * cells // size
    mask = (idx[:, None] + idx[None, :]) % 2 == 0
    image = np.empty((size, size, 4), dtype=np.uint8)
    for channel, shift in enumerate((16, 8, 0)):
        image[..., channel] = np.where(mask, (light >> shift) & 0xFF, (dark >> shift) & 0xFF)
    image[..., 3] = 255
    return image
