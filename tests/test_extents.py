import unittest

import numpy as np

from bodysize.physics.extents import Extents


class TestExtents(unittest.TestCase):
    def test_from_points_seeds_from_first_point(self):
        # Everything lies below and left of the origin
        ext = Extents.from_points([[-5.0, -2.0], [-1.0, -1.0], [-3.0, -4.0]])

        self.assertAlmostEqual(ext.top, -1.0)
        self.assertAlmostEqual(ext.right, -1.0)
        self.assertAlmostEqual(ext.bottom, -4.0)
        self.assertAlmostEqual(ext.left, -5.0)
        np.testing.assert_allclose(ext.size, [4.0, 3.0])

    def test_single_point_has_zero_size(self):
        ext = Extents.from_points([[2.5, -7.0]])
        np.testing.assert_allclose(ext.size, [0.0, 0.0])
        np.testing.assert_allclose(ext.min, [2.5, -7.0])
        np.testing.assert_allclose(ext.max, [2.5, -7.0])

    def test_empty_point_set_raises(self):
        with self.assertRaises(ValueError):
            Extents.from_points(np.zeros((0, 2)))

    def test_from_circle(self):
        ext = Extents.from_circle((-3.0, -4.0), 0.5)
        self.assertEqual(ext.as_tuple(), (-3.5, -2.5, -4.5, -3.5))

    def test_merge_takes_true_min_max(self):
        a = Extents(top=-1.0, right=-1.0, bottom=-2.0, left=-3.0)
        b = Extents(top=-0.5, right=-2.0, bottom=-5.0, left=-2.5)

        merged = a.merge(b)

        self.assertEqual(merged, Extents(top=-0.5, right=-1.0, bottom=-5.0, left=-3.0))
        np.testing.assert_allclose(merged.size, [2.0, 4.5])

    def test_scaled_scalar(self):
        ext = Extents(top=1.0, right=3.0, bottom=-1.0, left=-1.0).scaled(32.0)
        self.assertEqual(ext.as_tuple(), (32.0, 96.0, -32.0, -32.0))

    def test_scaled_negative_factor_keeps_sides_ordered(self):
        ext = Extents(top=1.0, right=3.0, bottom=-1.0, left=-1.0).scaled(-2.0)

        self.assertEqual(ext.as_tuple(), (2.0, 2.0, -2.0, -6.0))
        np.testing.assert_allclose(ext.size, [8.0, 4.0])

    def test_scaled_per_axis(self):
        ext = Extents(top=0.5, right=1.0, bottom=-0.5, left=-1.0).scaled((10.0, 20.0))
        np.testing.assert_allclose(ext.size, [20.0, 20.0])

    def test_corners_and_center(self):
        ext = Extents(top=4.0, right=3.0, bottom=2.0, left=1.0)

        np.testing.assert_allclose(
            ext.corners(), [[1.0, 2.0], [3.0, 2.0], [3.0, 4.0], [1.0, 4.0]]
        )
        np.testing.assert_allclose(ext.center, [2.0, 3.0])


if __name__ == "__main__":
    unittest.main()
