import numpy as np

from bodysize.gameobjects.shapes.shape import Shape, ShapeType
from bodysize.physics.extents import Extents


class CircleShape(Shape):
    """
    Solid circle at `position` (body-local) with `radius`.
    """

    type = ShapeType.CIRCLE

    def __init__(self, radius: float = 0.0, position=(0.0, 0.0)):
        if not np.isfinite(radius) or radius < 0:
            raise ValueError(f"Circle radius must be finite and >= 0, got {radius}")
        self.radius = float(radius)
        self.position = np.array(position, dtype=np.float32)

    @property
    def vertex_count(self) -> int:
        return 1

    def points(self) -> np.ndarray:
        return self.position.reshape(1, 2)

    def extents(self) -> Extents:
        return Extents.from_circle(self.position, self.radius)

    def world_extents(self, transform) -> Extents:
        # Rotation leaves a circle's box unchanged; only the centre moves
        center = transform.apply(self.points())[0]
        return Extents.from_circle(center, self.radius)
