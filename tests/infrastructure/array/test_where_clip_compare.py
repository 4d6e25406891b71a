import math
import unittest
from unittest import TestCase

import ndcore as nd
from ndcore.domain._errors import BackendMismatchError, BroadcastError, InvalidArgumentError


class TestComparisons(TestCase):
    def test_functions_return_ones_and_zeros(self):
        a, b = [1.0, 2.0, 3.0], [2.0, 2.0, 2.0]
        self.assertEqual(nd.equal(a, b).tolist(), [0.0, 1.0, 0.0])
        self.assertEqual(nd.not_equal(a, b).tolist(), [1.0, 0.0, 1.0])
        self.assertEqual(nd.greater(a, b).tolist(), [0.0, 0.0, 1.0])
        self.assertEqual(nd.greater_equal(a, b).tolist(), [0.0, 1.0, 1.0])
        self.assertEqual(nd.less(a, b).tolist(), [1.0, 0.0, 0.0])
        self.assertEqual(nd.less_equal(a, b).tolist(), [1.0, 1.0, 0.0])

    def test_operators(self):
        a = nd.array([1.0, 2.0, 3.0])
        self.assertEqual((a > 1.5).tolist(), [0.0, 1.0, 1.0])
        self.assertEqual((a == 2).tolist(), [0.0, 1.0, 0.0])
        self.assertEqual((a != 2).tolist(), [1.0, 0.0, 1.0])
        self.assertEqual((a <= 2).tolist(), [1.0, 1.0, 0.0])
        self.assertEqual((1.5 < a).tolist(), [0.0, 1.0, 1.0])

    def test_nan_compares_unequal(self):
        out = nd.equal([float("nan")], [float("nan")])
        self.assertEqual(out.tolist(), [0.0])

    def test_arrays_are_unhashable(self):
        with self.assertRaises(TypeError):
            hash(nd.zeros(2))


class TestWhere(TestCase):
    def test_selects_by_condition(self):
        out = nd.where([1.0, 0.0, 2.0], [10.0, 20.0, 30.0], [-1.0, -2.0, -3.0])
        self.assertEqual(out.tolist(), [10.0, -2.0, 30.0])

    def test_broadcasts_all_three(self):
        cond = nd.array([[1.0], [0.0]])
        out = nd.where(cond, [1.0, 2.0, 3.0], 0.0)
        self.assertEqual(out.shape, (2, 3))
        self.assertEqual(out.tolist(), [[1.0, 2.0, 3.0], [0.0, 0.0, 0.0]])

    def test_nan_condition_is_true(self):
        self.assertEqual(nd.where([float("nan")], 1.0, 2.0).tolist(), [1.0])

    def test_composes_with_comparison(self):
        a = nd.array([-2.0, 3.0, -1.0])
        self.assertEqual(nd.where(a > 0, a, 0.0).tolist(), [0.0, 3.0, 0.0])

    def test_errors(self):
        with self.assertRaises(BroadcastError):
            nd.where([1.0, 0.0], [1.0, 2.0, 3.0], 0.0)
        with self.assertRaises(BackendMismatchError):
            nd.where(nd.ones(2), nd.ones(2, backend="python"), 0.0)

    def test_backend_taken_from_array_operand(self):
        out = nd.where([1.0, 0.0], nd.ones(2, backend="python"), 0.0)
        self.assertEqual(out.backend, nd.Backend("python"))


class TestClip(TestCase):
    def test_two_sided(self):
        out = nd.clip([-5.0, 0.5, 5.0], 0.0, 1.0)
        self.assertEqual(out.tolist(), [0.0, 0.5, 1.0])

    def test_one_sided(self):
        self.assertEqual(nd.clip([-5.0, 5.0], lo=0.0).tolist(), [0.0, 5.0])
        self.assertEqual(nd.clip([-5.0, 5.0], hi=0.0).tolist(), [-5.0, 0.0])

    def test_nan_passes_through(self):
        self.assertTrue(math.isnan(nd.clip([float("nan")], 0.0, 1.0).item()))

    def test_invalid_bounds(self):
        with self.assertRaises(InvalidArgumentError):
            nd.clip([1.0], 2.0, 1.0)
        with self.assertRaises(InvalidArgumentError):
            nd.clip([1.0])


if __name__ == "__main__":
    unittest.main()
