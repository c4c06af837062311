"""
test_vectors
============

Tests the functionality of the routines in the vectors module.

Test Cases
__________
"""

from unittest import TestCase

import numpy as np

from astrokit import vectors as vec
from astrokit.exceptions import DimensionMismatchError


class TestCross(TestCase):

    def test_cross(self):

        np.testing.assert_array_equal(vec.cross([1, 0, 0], [0, 1, 0]), [0, 0, 1])

        np.testing.assert_array_equal(vec.cross([1, 2, 3], [4, 5, 6]), [-3, 6, -3])

        np.testing.assert_array_equal(vec.cross([4, 5, 6], [1, 2, 3]), [3, -6, 3])

    def test_parallel(self):

        np.testing.assert_array_equal(vec.cross([1, 2, 3], [2, 4, 6]), [0, 0, 0])

        np.testing.assert_array_equal(vec.cross([0, 0, 0], [2, 4, 6]), [0, 0, 0])

    def test_vectorized(self):

        res = vec.cross([[1, 0], [0, 1], [0, 0]], [[0, 0], [1, 0], [0, 1]])

        np.testing.assert_array_equal(res, [[0, 1], [0, 0], [1, 0]])

        res = vec.cross([0, 0, 1], [[1, 0], [0, 1], [0, 0]])

        np.testing.assert_array_equal(res, [[0, -1], [1, 0], [0, 0]])

    def test_matches_numpy(self):

        rng = np.random.default_rng(5)

        for _ in range(10):
            a, b = rng.normal(size=(2, 3))

            with self.subTest(a=a, b=b):
                np.testing.assert_allclose(vec.cross(a, b), np.cross(a, b), atol=1e-14)

    def test_dimension_mismatch(self):

        with self.assertRaises(DimensionMismatchError):
            vec.cross([1, 2], [1, 2, 3])

        with self.assertRaises(ValueError):
            vec.cross([1, 2, 3], [1, 2, 3, 4])

        # 2 columns cannot be paired with 3 columns
        with self.assertRaises(DimensionMismatchError):
            vec.cross(np.ones((3, 2)), np.ones((3, 3)))


class TestUnit(TestCase):

    def test_unit(self):

        np.testing.assert_array_almost_equal(vec.unit([3, 0, 4]), [0.6, 0, 0.8])

        self.assertAlmostEqual(np.linalg.norm(vec.unit([1.2, 3.0, -5.0])), 1)

    def test_any_length(self):

        np.testing.assert_array_almost_equal(vec.unit([1, 1, 1, 1, 0]), [0.5, 0.5, 0.5, 0.5, 0])

    def test_degenerate(self):

        res = vec.unit([0, 0, 0])

        np.testing.assert_array_equal(res, [0, 0, 0])
        self.assertFalse(np.isnan(res).any())

        res, degenerate = vec.unit([0., 0.], return_degenerate=True)

        np.testing.assert_array_equal(res, [0, 0])
        self.assertTrue(degenerate)

        res, degenerate = vec.unit([0, 2, 0], return_degenerate=True)

        np.testing.assert_array_equal(res, [0, 1, 0])
        self.assertFalse(degenerate)

    def test_columns(self):

        res, degenerate = vec.unit([[3, 0, 0], [0, 0, 2], [4, 0, 0]], return_degenerate=True)

        np.testing.assert_array_almost_equal(res, [[0.6, 0, 0], [0, 0, 1], [0.8, 0, 0]])
        np.testing.assert_array_equal(degenerate, [False, True, False])

    def test_is_degenerate(self):

        self.assertTrue(vec.is_degenerate([0, 0, 0]))
        self.assertFalse(vec.is_degenerate([0, 1e-100, 0]))
        self.assertFalse(vec.is_degenerate([1e-320, 0, 0]))
        self.assertFalse(vec.is_degenerate([1e300, 1e300, 0]))

        np.testing.assert_array_equal(vec.is_degenerate([[0, 1], [0, 0], [0, 0]]), [True, False])

    def test_extreme_magnitudes(self):

        for vector, expected in [([1e-170, 0, 0], [1, 0, 0]),
                                 ([1e200, 0, 0], [1, 0, 0]),
                                 ([0, 3e-200, 4e-200], [0, 0.6, 0.8]),
                                 ([3e300, -4e300, 0], [0.6, -0.8, 0])]:

            with self.subTest(vector=vector):
                res, degenerate = vec.unit(vector, return_degenerate=True)

                np.testing.assert_allclose(res, expected, atol=1e-15)
                self.assertFalse(degenerate)

        res, degenerate = vec.unit([[1e-170, 0], [0, 0], [0, 1e200]], return_degenerate=True)

        np.testing.assert_allclose(res, [[1, 0], [0, 0], [0, 1]], atol=1e-15)
        np.testing.assert_array_equal(degenerate, [False, False])


class TestUhatDot(TestCase):

    def test_uhat_dot(self):

        np.testing.assert_array_almost_equal(vec.uhat_dot([2, 0, 0], [0, 3, 0]), [0, 1.5, 0])

        # motion along the vector doesn't change its direction
        np.testing.assert_array_almost_equal(vec.uhat_dot([2, 0, 0], [5, 0, 0]), [0, 0, 0])

    def test_finite_difference(self):

        def u_fun(t):
            return np.array([1 + t, 2 * t, 3 - t ** 2])

        def udot_fun(t):
            return np.array([1, 2, -2 * t])

        step = 1e-6

        for t in [-2, 0, 0.5, 4]:

            with self.subTest(t=t):
                numeric = (vec.unit(u_fun(t + step)) - vec.unit(u_fun(t - step))) / (2 * step)

                np.testing.assert_allclose(vec.uhat_dot(u_fun(t), udot_fun(t)), numeric, atol=1e-8)

    def test_degenerate(self):

        res, degenerate = vec.uhat_dot([0, 0, 0], [1, 2, 3], return_degenerate=True)

        np.testing.assert_array_equal(res, [0, 0, 0])
        self.assertTrue(degenerate)

    def test_dimension_mismatch(self):

        with self.assertRaises(DimensionMismatchError):
            vec.uhat_dot([1, 2, 3, 4], [1, 2, 3])

    def test_extreme_magnitudes(self):

        np.testing.assert_allclose(vec.uhat_dot([1e-170, 0, 0], [0, 1e-170, 0]), [0, 1, 0], atol=1e-15)

        np.testing.assert_allclose(vec.uhat_dot([1e200, 0, 0], [0, 1e200, 0]), [0, 1, 0], atol=1e-15)

        res, degenerate = vec.uhat_dot([1e-170, 0, 0], [1, 0, 0], return_degenerate=True)

        np.testing.assert_array_equal(res, [0, 0, 0])
        self.assertFalse(degenerate)


class TestUcross(TestCase):

    def test_ucross(self):

        np.testing.assert_array_almost_equal(vec.ucross([2, 0, 0], [0, 3, 0]), [0, 0, 1])

        res = vec.ucross([1.2, 3.0, -5.0], [-0.1, 16.2, 2.1])

        self.assertAlmostEqual(np.linalg.norm(res), 1)
        self.assertAlmostEqual(res @ [1.2, 3.0, -5.0], 0)

    def test_parallel(self):

        res, degenerate = vec.ucross([1, 2, 3], [-2, -4, -6], return_degenerate=True)

        np.testing.assert_array_equal(res, [0, 0, 0])
        self.assertTrue(degenerate)


class TestOuterProduct(TestCase):

    def test_outer_product(self):

        np.testing.assert_array_equal(vec.outer_product([1, 2], [3, 4, 5]), [[3, 4, 5], [6, 8, 10]])

        self.assertEqual(vec.outer_product([1, 2, 3, 4], [1]).shape, (4, 1))

    def test_not_vectors(self):

        with self.assertRaises(DimensionMismatchError):
            vec.outer_product(np.eye(2), [1, 2])


class TestBoxProduct(TestCase):

    def test_box_product(self):

        self.assertEqual(vec.box_product([1, 0, 0], [0, 1, 0], [0, 0, 1]), 1)

        self.assertEqual(vec.box_product([2, 0, 0], [0, 3, 0], [0, 0, 4]), 24)

        self.assertEqual(vec.box_product([1, 2, 3], [2, 4, 6], [0, 0, 1]), 0)

    def test_antisymmetry(self):

        rng = np.random.default_rng(7)

        for _ in range(10):
            a, b, c = rng.normal(size=(3, 3))

            with self.subTest(a=a, b=b, c=c):
                self.assertAlmostEqual(vec.box_product(a, b, c), -vec.box_product(b, a, c))
                self.assertAlmostEqual(vec.box_product(a, b, c), vec.box_product(c, a, b))

    def test_dimension_mismatch(self):

        with self.assertRaises(DimensionMismatchError):
            vec.box_product([1, 0, 0, 0], [0, 1, 0], [0, 0, 1])


class TestVectorProjection(TestCase):

    def test_projection(self):

        np.testing.assert_array_almost_equal(vec.vector_projection([1, 0, 0], [3, 4, 5]), [3, 0, 0])

        np.testing.assert_array_almost_equal(vec.vector_projection([1, 1, 1, 1], [1, 2, 3, 4]), [2.5] * 4)

    def test_idempotence(self):

        a = np.array([1.2, 3.0, -5.0])

        np.testing.assert_allclose(vec.vector_projection(a, a), a, atol=1e-14)

    def test_extreme_magnitudes(self):

        np.testing.assert_allclose(vec.vector_projection([1e200, 0, 0], [3, 4, 5]), [3, 0, 0])

        np.testing.assert_allclose(vec.vector_projection([0, 1e-170, 0], [3, 4, 5]), [0, 4, 0])

    def test_orthogonal_remainder(self):

        a = np.array([1.2, 3.0, -5.0])
        b = np.array([-0.1, 16.2, 2.1])

        remainder = b - vec.vector_projection(a, b)

        self.assertAlmostEqual(remainder @ a, 0)

    def test_degenerate(self):

        res, degenerate = vec.vector_projection([0, 0, 0], [1, 2, 3], return_degenerate=True)

        np.testing.assert_array_equal(res, [0, 0, 0])
        self.assertTrue(degenerate)

    def test_dimension_mismatch(self):

        with self.assertRaises(DimensionMismatchError):
            vec.vector_projection([1, 2, 3], [1, 2])
