import numpy as np

from bodysize.gameobjects.shapes.edge import EdgeShape
from bodysize.gameobjects.shapes.shape import Shape, ShapeType, as_vertices

# Squared distance below which two chain vertices count as the same point
LINEAR_SLOP_SQ = 0.005 * 0.005


class ChainShape(Shape):
    """
    Free-form polyline made of connected edges.

    A loop closes back onto its first vertex. Only the vertices are
    used for extents; the closing edge adds no new points.
    """

    type = ShapeType.CHAIN

    def __init__(self, vertices=None, loop: bool = False):
        self.vertices = np.zeros((0, 2), dtype=np.float32)
        self.loop = False
        if vertices is not None:
            if loop:
                self.create_loop(vertices)
            else:
                self.create_chain(vertices)

    # --------------------------------------------------
    # construction
    # --------------------------------------------------

    def create_chain(self, vertices):
        verts = self._validated(vertices, minimum=2)
        self.vertices = verts
        self.loop = False
        return self

    def create_loop(self, vertices):
        verts = self._validated(vertices, minimum=3)
        self.vertices = verts
        self.loop = True
        return self

    @staticmethod
    def _validated(vertices, minimum: int) -> np.ndarray:
        verts = as_vertices(vertices)
        if len(verts) < minimum:
            raise ValueError(f"Chain needs at least {minimum} vertices, got {len(verts)}")

        steps = np.diff(verts, axis=0)
        if np.any(np.einsum("ij,ij->i", steps, steps) <= LINEAR_SLOP_SQ):
            raise ValueError("Chain vertices are too close together")
        return verts

    # --------------------------------------------------
    # access
    # --------------------------------------------------

    @property
    def edge_count(self) -> int:
        n = len(self.vertices)
        if n < 2:
            return 0
        return n if self.loop else n - 1

    def get_vertex(self, index: int) -> np.ndarray:
        return self.vertices[index].copy()

    def get_child_edge(self, index: int) -> EdgeShape:
        """
        Edge number index of the chain, with its neighbours as ghost vertices.
        """
        n = len(self.vertices)
        if not 0 <= index < self.edge_count:
            raise IndexError(f"Edge index {index} out of range ({self.edge_count} edges)")

        i1 = index
        i2 = (index + 1) % n
        if self.loop:
            v0 = self.vertices[(index - 1) % n]
            v3 = self.vertices[(index + 2) % n]
        else:
            v0 = self.vertices[index - 1] if index > 0 else None
            v3 = self.vertices[index + 2] if index + 2 < n else None
        return EdgeShape(self.vertices[i1], self.vertices[i2], v0=v0, v3=v3)

    def points(self) -> np.ndarray:
        return self.vertices
