"""Procedural mesh builders for the demo scene.

All functions return :class:`BufferGeometry` with positions, normals
and UVs, compatible with the GL rendering pipeline.
"""

import numpy as np

from cubeview.core.mesh import BufferGeometry

# UVs for the four corners of each face, matching the corner winding below
_FACE_UVS = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]


def make_box(width: float, height: float, depth: float) -> BufferGeometry:
    """Create a box with unique normals per face (24 verts, 12 tris).

    Centered at origin. Dimensions along X, Y, Z respectively.  Each face
    maps the full texture.
    """
    hw, hh, hd = width / 2, height / 2, depth / 2

    positions = []
    normals = []
    uvs = []
    indices = []

    # (normal, 4 corners counter-clockwise seen from outside)
    faces = [
        ([1, 0, 0],  [(hw, -hh, hd), (hw, -hh, -hd), (hw, hh, -hd), (hw, hh, hd)]),
        ([-1, 0, 0], [(-hw, -hh, -hd), (-hw, -hh, hd), (-hw, hh, hd), (-hw, hh, -hd)]),
        ([0, 1, 0],  [(-hw, hh, hd), (hw, hh, hd), (hw, hh, -hd), (-hw, hh, -hd)]),
        ([0, -1, 0], [(-hw, -hh, -hd), (hw, -hh, -hd), (hw, -hh, hd), (-hw, -hh, hd)]),
        ([0, 0, 1],  [(-hw, -hh, hd), (hw, -hh, hd), (hw, hh, hd), (-hw, hh, hd)]),
        ([0, 0, -1], [(hw, -hh, -hd), (-hw, -hh, -hd), (-hw, hh, -hd), (hw, hh, -hd)]),
    ]

    for normal, corners in faces:
        base = len(positions)
        for c, uv in zip(corners, _FACE_UVS):
            positions.append(c)
            normals.append(normal)
            uvs.append(uv)
        indices.extend([base, base + 1, base + 2, base, base + 2, base + 3])

    return BufferGeometry(
        positions=np.array(positions, dtype=np.float32).ravel(),
        normals=np.array(normals, dtype=np.float32).ravel(),
        uvs=np.array(uvs, dtype=np.float32).ravel(),
        indices=np.array(indices, dtype=np.uint32),
    )


def make_plane(
    width: float, height: float,
    segments_w: int = 1, segments_h: int = 1,
) -> BufferGeometry:
    """Create a subdivided plane in the XY plane, normal pointing +Z.

    Centered at origin. Rotate by -pi/2 about X to lay it flat.
    """
    verts = []
    norms = []
    uvs = []
    idxs = []

    for iy in range(segments_h + 1):
        for ix in range(segments_w + 1):
            u = ix / segments_w
            v = iy / segments_h
            verts.append(((u - 0.5) * width, (v - 0.5) * height, 0.0))
            norms.append((0.0, 0.0, 1.0))
            uvs.append((u, v))

    cols = segments_w + 1
    for iy in range(segments_h):
        for ix in range(segments_w):
            a = iy * cols + ix
            b = a + 1
            c = a + cols
            d = c + 1
            idxs.extend([a, b, d, a, d, c])

    return BufferGeometry(
        positions=np.array(verts, dtype=np.float32).ravel(),
        normals=np.array(norms, dtype=np.float32).ravel(),
        uvs=np.array(uvs, dtype=np.float32).ravel(),
        indices=np.array(idxs, dtype=np.uint32),
    )
