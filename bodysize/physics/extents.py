import numpy as np


class Extents:
    """
    Outermost coordinates of a piece of geometry.

    Stored as top / right / bottom / left, the order a fixture is scanned in.
    """

    def __init__(self, top=0.0, right=0.0, bottom=0.0, left=0.0):
        """
        :param self: The object itself
        :param top: Largest y
        :param right: Largest x
        :param bottom: Smallest y
        :param left: Smallest x
        """
        self.top = np.float32(top)
        self.right = np.float32(right)
        self.bottom = np.float32(bottom)
        self.left = np.float32(left)

    @classmethod
    def from_points(cls, points):
        """
        Extents of a point set, seeded from the first point.

        :param points: (N, 2) array-like of x, y pairs
        """
        pts = np.asarray(points, dtype=np.float32).reshape(-1, 2)
        if pts.shape[0] == 0:
            raise ValueError("Cannot compute extents of an empty point set")

        min_v = pts.min(axis=0)
        max_v = pts.max(axis=0)
        return cls(top=max_v[1], right=max_v[0], bottom=min_v[1], left=min_v[0])

    @classmethod
    def from_circle(cls, center, radius):
        cx, cy = np.asarray(center, dtype=np.float32)
        r = np.float32(radius)
        return cls(top=cy + r, right=cx + r, bottom=cy - r, left=cx - r)

    # --------------------------------------------------
    # combination
    # --------------------------------------------------

    def merge(self, other: "Extents") -> "Extents":
        """
        Union of two extents (true min / max on every side).
        """
        return Extents(
            top=max(self.top, other.top),
            right=max(self.right, other.right),
            bottom=min(self.bottom, other.bottom),
            left=min(self.left, other.left),
        )

    def scaled(self, factor) -> "Extents":
        """
        Multiply every side by factor.

        factor may be a scalar or an (sx, sy) pair. A negative factor mirrors
        the geometry, so the sides are swapped back into order.
        """
        sx, sy = np.broadcast_to(np.asarray(factor, dtype=np.float32), (2,))
        xs = sorted((self.left * sx, self.right * sx))
        ys = sorted((self.bottom * sy, self.top * sy))
        return Extents(top=ys[1], right=xs[1], bottom=ys[0], left=xs[0])

    # --------------------------------------------------
    # derived values
    # --------------------------------------------------

    @property
    def min(self) -> np.ndarray:
        return np.array([self.left, self.bottom], dtype=np.float32)

    @property
    def max(self) -> np.ndarray:
        return np.array([self.right, self.top], dtype=np.float32)

    @property
    def center(self) -> np.ndarray:
        return (self.min + self.max) * 0.5

    @property
    def size(self) -> np.ndarray:
        """
        Width and height: (|right - left|, |top - bottom|).
        """
        return np.array(
            [abs(self.right - self.left), abs(self.top - self.bottom)],
            dtype=np.float32,
        )

    def corners(self) -> np.ndarray:
        """
        The four box corners, counter-clockwise from bottom-left.
        """
        return np.array(
            [
                [self.left, self.bottom],
                [self.right, self.bottom],
                [self.right, self.top],
                [self.left, self.top],
            ],
            dtype=np.float32,
        )

    def as_tuple(self):
        return (float(self.top), float(self.right), float(self.bottom), float(self.left))

    def __eq__(self, other):
        if not isinstance(other, Extents):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __repr__(self):
        return (
            f"Extents(top={self.top:.4f}, right={self.right:.4f}, "
            f"bottom={self.bottom:.4f}, left={self.left:.4f})"
        )
