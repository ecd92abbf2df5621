from enum import Enum, auto

import numpy as np

from bodysize.physics.extents import Extents


class ShapeType(Enum):
    """
    Kinds of collision shape a fixture can carry.
    """

    CIRCLE = auto()
    EDGE = auto()
    POLYGON = auto()
    CHAIN = auto()


def as_vertices(vertices) -> np.ndarray:
    """
    Normalize vertex input to a float32 (N, 2) array.

    :param vertices: sequence of (x, y) pairs
    """
    arr = np.array(vertices, dtype=np.float32)
    if arr.size == 0:
        return np.zeros((0, 2), dtype=np.float32)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Vertices must be (x, y) pairs, got shape {arr.shape}")
    return arr


class Shape:
    """
    Base class for collision shapes.

    Subclasses provide `points()`; the outermost coordinates of those points
    are the shape's local-space extents.
    """

    type: ShapeType

    @property
    def vertex_count(self) -> int:
        return len(self.points())

    def points(self) -> np.ndarray:
        raise NotImplementedError

    def extents(self) -> Extents:
        return Extents.from_points(self.points())

    def world_extents(self, transform) -> Extents:
        """
        Extents after mapping the shape through a body transform.

        :param transform: Transform of the owning body
        """
        return Extents.from_points(transform.apply(self.points()))
