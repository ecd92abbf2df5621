import numpy as np


class Transform:
    def __init__(self, position=(0, 0), angle=0.0):
        """
        Placement of a body in the world.

        :param self: The object itself
        :param position: The position of the body origin
        :param angle: The rotation of the body in radians
        """
        self.position = np.array(position, dtype=np.float32)
        self.angle = float(angle)

    def matrix(self):
        """
        3x3 homogeneous matrix mapping body-local points to world space.

        :param self: The object itself
        """
        m = np.identity(3, dtype=np.float32)

        # Rotation
        c, s = np.cos(self.angle), np.sin(self.angle)
        m[0, 0], m[0, 1] = c, -s
        m[1, 0], m[1, 1] = s, c

        # Translation
        m[:2, 2] = self.position
        return m

    def apply(self, points):
        """
        Map (N, 2) local points to world space.

        :param self: The object itself
        :param points: Points in body coordinates
        """
        pts = np.asarray(points, dtype=np.float32).reshape(-1, 2)
        m = self.matrix()
        return (pts @ m[:2, :2].T + m[:2, 2]).astype(np.float32)
