"""Scene graph with hierarchical transforms, mirroring Three.js Object3D."""

from dataclasses import dataclass
from typing import Optional

from cubeview.core.color import Color
from cubeview.core.math_utils import (
    Mat4, Vec3,
    mat4_identity, mat4_compose, quat_from_euler, vec3,
)
from cubeview.core.mesh import MeshInstance


class SceneNode:
    """A node in the scene graph hierarchy.

    position, Euler rotation (XYZ order, radians), scale -> local matrix.
    World matrix = parent.world_matrix @ local_matrix.
    """

    def __init__(self, name: str = ""):
        self.name = name
        self.parent: Optional["SceneNode"] = None
        self.children: list["SceneNode"] = []

        # Transform
        self.position: Vec3 = vec3()
        self.rotation: Vec3 = vec3()
        self.scale: Vec3 = vec3(1, 1, 1)

        # Matrices
        self.local_matrix: Mat4 = mat4_identity()
        self.world_matrix: Mat4 = mat4_identity()

        self.visible: bool = True

        # Optional mesh attached to this node
        self.mesh: Optional[MeshInstance] = None

        self._matrix_dirty: bool = True

    def add(self, child: "SceneNode") -> "SceneNode":
        """Add a child node. Removes from previous parent if any."""
        if child.parent is not None:
            child.parent.remove(child)
        child.parent = self
        self.children.append(child)
        child._matrix_dirty = True
        return self

    def remove(self, child: "SceneNode") -> "SceneNode":
        if child in self.children:
            self.children.remove(child)
            child.parent = None
        return self

    def set_position(self, x: float, y: float, z: float) -> "SceneNode":
        self.position = vec3(x, y, z)
        self._matrix_dirty = True
        return self

    def set_rotation(self, x: float, y: float, z: float) -> "SceneNode":
        self.rotation = vec3(x, y, z)
        self._matrix_dirty = True
        return self

    def rotate(self, dx: float, dy: float, dz: float) -> "SceneNode":
        """Increment the Euler rotation on all three axes."""
        self.rotation = self.rotation + vec3(dx, dy, dz)
        self._matrix_dirty = True
        return self

    def set_scale(self, x: float, y: float, z: float) -> "SceneNode":
        self.scale = vec3(x, y, z)
        self._matrix_dirty = True
        return self

    def update_local_matrix(self) -> None:
        q = quat_from_euler(*self.rotation)
        self.local_matrix = mat4_compose(self.position, q, self.scale)
        self._matrix_dirty = False

    def update_world_matrix(self, force: bool = False) -> None:
        """Recursively update world matrices for this node and all descendants."""
        if self._matrix_dirty or force:
            self.update_local_matrix()

        if self.parent is not None:
            self.world_matrix = self.parent.world_matrix @ self.local_matrix
        else:
            self.world_matrix = self.local_matrix.copy()

        for child in self.children:
            child.update_world_matrix(force=force)

    def traverse(self, callback) -> None:
        """Visit this node and all descendants depth-first."""
        callback(self)
        for child in self.children:
            child.traverse(callback)

    def traverse_visible(self, callback) -> None:
        if not self.visible:
            return
        callback(self)
        for child in self.children:
            child.traverse_visible(callback)

    def find(self, name: str) -> Optional["SceneNode"]:
        """Find first descendant with given name."""
        if self.name == name:
            return self
        for child in self.children:
            found = child.find(name)
            if found is not None:
                return found
        return None

    def get_world_position(self) -> Vec3:
        return self.world_matrix[:3, 3].copy()


@dataclass
class Fog:
    """Linear distance fog."""
    color: Color
    near: float = 1.0
    far: float = 1000.0


class Scene(SceneNode):
    """Root scene node."""

    def __init__(self):
        super().__init__(name="scene")
        self.fog: Optional[Fog] = None

    def update(self) -> None:
        """Update all world matrices in the scene."""
        self.update_world_matrix(force=False)

    def collect_meshes(self) -> list[tuple[MeshInstance, Mat4]]:
        """Collect all visible meshes with their world transforms."""
        result = []

        def _collect(node: SceneNode):
            if node.mesh is not None and node.mesh.visible:
                result.append((node.mesh, node.world_matrix))

        self.traverse_visible(_collect)
        return result

    def collect_lights(self) -> list[SceneNode]:
        """Collect visible light nodes in insertion order."""
        from cubeview.core.light import Light

        result = []
        self.traverse_visible(lambda n: result.append(n) if isinstance(n, Light) else None)
        return result
