import numpy as np

from bodysize.gameobjects.shapes.shape import Shape, ShapeType


def _as_point(v) -> np.ndarray:
    point = np.array(v, dtype=np.float32)
    if point.shape != (2,):
        raise ValueError(f"Edge vertex must be an (x, y) pair, got shape {point.shape}")
    return point


class EdgeShape(Shape):
    """
    Line segment between vertex1 and vertex2.

    The optional ghost vertices (vertex0 before, vertex3 after) only smooth
    collisions against neighbouring edges; they never count towards size.
    """

    type = ShapeType.EDGE

    def __init__(self, v1=(0.0, 0.0), v2=(0.0, 0.0), v0=None, v3=None):
        self.set(v1, v2)
        self.vertex0 = None if v0 is None else _as_point(v0)
        self.vertex3 = None if v3 is None else _as_point(v3)

    @property
    def has_vertex0(self) -> bool:
        return self.vertex0 is not None

    @property
    def has_vertex3(self) -> bool:
        return self.vertex3 is not None

    def set(self, v1, v2):
        self.vertex1 = _as_point(v1)
        self.vertex2 = _as_point(v2)
        return self

    def points(self) -> np.ndarray:
        return np.stack([self.vertex1, self.vertex2])
