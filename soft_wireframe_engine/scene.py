#
# PROJECT: soft-wireframe-engine
# MODULE: soft_wireframe_engine/scene.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from typing import Iterable, List, Optional

from .camera import Camera
from .mesh import Mesh


class Scene:
    """
    What gets drawn: one camera and an ordered list of meshes.

    The scene owns its meshes; the renderer only borrows them for the
    duration of a frame.
    """

    def __init__(self, camera: Optional[Camera] = None,
                 meshes: Optional[Iterable[Mesh]] = None):
        self.camera = camera if camera is not None else Camera()
        self.meshes: List[Mesh] = list(meshes) if meshes is not None else []

    def add(self, mesh: Mesh):
        self.meshes.append(mesh)

    def clear(self):
        """Remove all meshes from the scene."""
        self.meshes.clear()

    def spin(self, dx: float, dy: float, dz: float = 0.0):
        """Add the given angles (radians) to every mesh's rotation."""
        for mesh in self.meshes:
            mesh.rotation.x += dx
            mesh.rotation.y += dy
            mesh.rotation.z += dz
