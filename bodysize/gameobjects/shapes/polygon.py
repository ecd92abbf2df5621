import numpy as np

from bodysize.gameobjects.shapes.shape import Shape, ShapeType, as_vertices

MAX_POLYGON_VERTICES = 8


class PolygonShape(Shape):
    """
    Convex polygon.
    Vertices are stored in body-local coordinates.
    """

    type = ShapeType.POLYGON

    def __init__(self, vertices=None):
        """
        :param self: The object itself
        :param vertices: 3 to 8 (x, y) pairs, or None for an unset polygon
        """
        self.vertices = np.zeros((0, 2), dtype=np.float32)
        if vertices is not None:
            self.set(vertices)

    def set(self, vertices):
        verts = as_vertices(vertices)
        if not 3 <= len(verts) <= MAX_POLYGON_VERTICES:
            raise ValueError(
                f"Polygon needs 3..{MAX_POLYGON_VERTICES} vertices, got {len(verts)}"
            )
        self.vertices = verts
        return self

    def set_as_box(self, hx, hy, center=(0.0, 0.0), angle=0.0):
        """
        Build an oriented box.

        :param hx: Half width
        :param hy: Half height
        :param center: Box centre in body coordinates
        :param angle: Box rotation in radians
        """
        if hx <= 0 or hy <= 0:
            raise ValueError("Box half extents must be positive")

        corners = np.array(
            [[-hx, -hy], [hx, -hy], [hx, hy], [-hx, hy]], dtype=np.float32
        )
        c, s = np.cos(angle), np.sin(angle)
        rot = np.array([[c, -s], [s, c]], dtype=np.float32)
        self.vertices = (corners @ rot.T + np.asarray(center, dtype=np.float32)).astype(np.float32)
        return self

    @classmethod
    def box(cls, hx, hy, center=(0.0, 0.0), angle=0.0):
        return cls().set_as_box(hx, hy, center, angle)

    def get_vertex(self, index: int) -> np.ndarray:
        return self.vertices[index].copy()

    def points(self) -> np.ndarray:
        return self.vertices
