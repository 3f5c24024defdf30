"""Mesh data structures for geometry storage (no GL dependencies)."""

from dataclasses import dataclass, field
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from cubeview.core.material import Material, MeshBasicMaterial


@dataclass(eq=False)
class BufferGeometry:
    """Stores vertex attribute arrays for a mesh.

    All arrays use float32 for GL compatibility.
    positions: Nx3 flat array (x,y,z per vertex)
    normals: Nx3 flat array
    uvs: Nx2 flat array of texture coordinates, optional
    indices: triangle index array (uint32), optional for non-indexed geometry
    vertex_colors: optional Nx3 float32 per-vertex RGB (0..1)
    """
    positions: NDArray[np.float32]
    normals: NDArray[np.float32]
    uvs: Optional[NDArray[np.float32]] = None
    indices: Optional[NDArray[np.uint32]] = None
    vertex_count: int = 0
    vertex_colors: Optional[NDArray[np.float32]] = None

    def __post_init__(self):
        if self.vertex_count == 0:
            self.vertex_count = len(self.positions) // 3

    @property
    def has_indices(self) -> bool:
        return self.indices is not None and len(self.indices) > 0

    @property
    def has_uvs(self) -> bool:
        return self.uvs is not None and len(self.uvs) > 0


@dataclass(eq=False)
class MeshInstance:
    """A mesh with material, linking geometry to rendering properties."""
    name: str
    geometry: BufferGeometry
    material: Material = field(default_factory=MeshBasicMaterial)
    cast_shadow: bool = False
    receive_shadow: bool = False
    # GL handle (set by renderer)
    gl_handle: object = None

    @property
    def visible(self) -> bool:
        return self.material.visible
