"""Material definitions for rendering.

The family is closed: every concrete material reports one
:class:`MaterialKind`, which the renderer and the material inspector
dispatch on.
"""

import itertools
import uuid as _uuid
from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import ClassVar, Optional

from cubeview.core.color import Color
from cubeview.core.texture import Texture

_material_ids = itertools.count()


class MaterialKind(Enum):
    NORMAL = auto()
    PHONG = auto()
    STANDARD = auto()
    BASIC = auto()


class Side(IntEnum):
    """Which faces get rendered."""
    FRONT = 0
    BACK = 1
    DOUBLE = 2


class VertexColors(IntEnum):
    NONE = 0
    FACE = 1
    VERTEX = 2


@dataclass(eq=False)
class Material:
    """Properties shared by every material variant."""
    kind: ClassVar[MaterialKind]

    name: str = ""
    opacity: float = 1.0
    transparent: bool = False
    visible: bool = True
    side: Side = Side.FRONT
    color_write: bool = True
    flat_shading: bool = False
    premultiplied_alpha: bool = False
    dithering: bool = False
    shadow_side: Optional[Side | str] = None  # panel edits store the raw code string
    vertex_colors: VertexColors = VertexColors.NONE
    fog: bool = True
    wireframe: bool = False
    # Set when a change requires the renderer to rebuild derived state
    needs_update: bool = False
    id: int = field(default_factory=lambda: next(_material_ids))
    uuid: str = field(default_factory=lambda: str(_uuid.uuid4()).upper())

    @property
    def type(self) -> str:
        return type(self).__name__


@dataclass(eq=False)
class MeshBasicMaterial(Material):
    """Unlit material."""
    kind: ClassVar[MaterialKind] = MaterialKind.BASIC

    color: Color = field(default_factory=lambda: Color.from_hex(0xFFFFFF))
    map: Optional[Texture] = None


@dataclass(eq=False)
class MeshNormalMaterial(Material):
    """Shades each fragment with its view-space normal."""
    kind: ClassVar[MaterialKind] = MaterialKind.NORMAL


@dataclass(eq=False)
class MeshPhongMaterial(Material):
    """Blinn-Phong material with specular highlights."""
    kind: ClassVar[MaterialKind] = MaterialKind.PHONG

    color: Color = field(default_factory=lambda: Color.from_hex(0xFFFFFF))
    specular: Color = field(default_factory=lambda: Color.from_hex(0x111111))
    shininess: float = 30.0
    emissive: Color = field(default_factory=lambda: Color.from_hex(0x000000))
    map: Optional[Texture] = None


@dataclass(eq=False)
class MeshStandardMaterial(Material):
    """Metallic/roughness material."""
    kind: ClassVar[MaterialKind] = MaterialKind.STANDARD

    color: Color = field(default_factory=lambda: Color.from_hex(0xFFFFFF))
    emissive: Color = field(default_factory=lambda: Color.from_hex(0x000000))
    metalness: float = 0.0
    roughness: float = 1.0
    map: Optional[Texture] = None
