#
# PROJECT: soft-wireframe-engine
# MODULE: soft_wireframe_engine/mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from typing import NamedTuple

from .math_utils import Vec3


class Face(NamedTuple):
    """A triangle given as three indices into the owning mesh's vertices."""
    a: int
    b: int
    c: int


class Mesh:
    """
    Triangle mesh with a world position and Euler rotation (radians).

    ``vertices`` and ``faces`` are sized once at construction and filled in
    place by the loader; nothing is appended or removed afterwards.
    """
    __slots__ = ('name', 'position', 'rotation', 'vertices', 'faces')

    def __init__(self, name: str, vertices_count: int, faces_count: int):
        self.name = name
        self.position = Vec3.zero()
        self.rotation = Vec3.zero()
        self.vertices = [None] * vertices_count
        self.faces = [None] * faces_count

    def __repr__(self):
        return (f"Mesh({self.name!r}, vertices={len(self.vertices)}, "
                f"faces={len(self.faces)})")

    @classmethod
    def cube(cls, name: str = "Cube") -> 'Mesh':
        """Unit cube centred on the origin, 8 vertices and 12 triangles."""
        mesh = cls(name, 8, 12)
        corners = [
            (-1, 1, 1), (1, 1, 1), (-1, -1, 1), (1, -1, 1),
            (-1, 1, -1), (1, 1, -1), (1, -1, -1), (-1, -1, -1),
        ]
        for i, corner in enumerate(corners):
            mesh.vertices[i] = Vec3(*corner)
        triangles = [
            (0, 1, 2), (1, 2, 3), (1, 3, 6), (1, 5, 6),
            (0, 1, 4), (1, 4, 5), (2, 3, 7), (3, 6, 7),
            (0, 2, 7), (0, 4, 7), (4, 5, 6), (4, 6, 7),
        ]
        for i, tri in enumerate(triangles):
            mesh.faces[i] = Face(*tri)
        return mesh
