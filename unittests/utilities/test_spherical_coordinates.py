"""
test_spherical_coordinates
==========================

Tests the functionality of the routines in the spherical_coordinates module.

Test Cases
__________
"""

from unittest import TestCase

import numpy as np

from astrokit.utilities import spherical_coordinates as sc
from astrokit.exceptions import DimensionMismatchError


class TestSphericalToCartesian(TestCase):

    def test_spherical_to_cartesian(self):

        np.testing.assert_array_almost_equal(sc.spherical_to_cartesian(2, 0, 0), [2, 0, 0])

        np.testing.assert_array_almost_equal(sc.spherical_to_cartesian(1, np.pi / 2, 0), [0, 1, 0])

        np.testing.assert_array_almost_equal(sc.spherical_to_cartesian(3, 0, np.pi / 2), [0, 0, 3])

        np.testing.assert_array_almost_equal(sc.spherical_to_cartesian(2, np.pi / 4, np.pi / 4),
                                             [1, 1, np.sqrt(2)])

        self.assertEqual(sc.spherical_to_cartesian(1, 0.3, -0.2).shape, (3,))

    def test_negative_magnitude(self):

        np.testing.assert_array_almost_equal(sc.spherical_to_cartesian(-1, 0, 0), [-1, 0, 0])

    def test_broadcast(self):

        res = sc.spherical_to_cartesian([1, 2], 0, [0, np.pi / 2])

        np.testing.assert_array_almost_equal(res, [[1, 0], [0, 0], [0, 2]])


class TestCartesianToSpherical(TestCase):

    def test_cartesian_to_spherical(self):

        r, azimuth, elevation = sc.cartesian_to_spherical([0, -2, 0])

        self.assertAlmostEqual(r, 2)
        self.assertAlmostEqual(azimuth, 3 * np.pi / 2)
        self.assertAlmostEqual(elevation, 0)

        r, azimuth, elevation = sc.cartesian_to_spherical([0, 0, -5])

        self.assertAlmostEqual(r, 5)
        self.assertAlmostEqual(elevation, -np.pi / 2)

    def test_inverse(self):

        vector = np.array([1.2, 3.0, -5.0])

        np.testing.assert_allclose(sc.spherical_to_cartesian(*sc.cartesian_to_spherical(vector)), vector)

    def test_zero_vector(self):

        self.assertEqual(sc.cartesian_to_spherical([0, 0, 0]), (0, 0, 0))

    def test_columns(self):

        r, azimuth, elevation = sc.cartesian_to_spherical([[1, 0], [0, 0], [0, 3]])

        np.testing.assert_array_almost_equal(r, [1, 3])
        np.testing.assert_array_almost_equal(azimuth, [0, 0])
        np.testing.assert_array_almost_equal(elevation, [0, np.pi / 2])

    def test_dimension_mismatch(self):

        with self.assertRaises(DimensionMismatchError):
            sc.cartesian_to_spherical([1, 2])
