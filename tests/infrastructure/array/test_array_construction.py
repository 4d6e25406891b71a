import math
import unittest
from unittest import TestCase

import numpy as np

import ndcore as nd
from ndcore import NDArray
from ndcore.domain._errors import (
    IndexOutOfBoundsError,
    InvalidArgumentError,
    InvalidElementError,
    InvalidShapeError,
    SizeMismatchError,
)


class TestFactories(TestCase):
    def test_zeros_scenario(self):
        z = nd.zeros((3, 4))
        self.assertEqual(z.size, 12)
        self.assertEqual(z.ndim, 2)
        self.assertEqual(z.shape, (3, 4))
        np.testing.assert_array_equal(z.to_numpy(), np.zeros((3, 4)))

    def test_ones_and_full(self):
        np.testing.assert_array_equal(nd.ones(5).to_numpy(), np.ones(5))
        f = nd.full([2, 2], 7.5)
        self.assertEqual(f.shape, (2, 2))
        np.testing.assert_array_equal(f.to_numpy(), np.full((2, 2), 7.5))

    def test_factories_reject_invalid_shapes(self):
        for factory in (nd.zeros, nd.ones, nd.rand, nd.randn):
            for bad in ((), (0,), (2, -1), (2.0, 3)):
                with self.assertRaises(InvalidShapeError):
                    factory(bad)
        with self.assertRaises(InvalidShapeError):
            nd.full((0, 3), 1.0)

    def test_full_rejects_non_numeric_fill(self):
        with self.assertRaises(InvalidElementError):
            nd.full((2,), "x")

    def test_like_constructors(self):
        a = nd.array([[1, 2, 3], [4, 5, 6]])
        self.assertEqual(nd.zeros_like(a).shape, (2, 3))
        np.testing.assert_array_equal(nd.ones_like(a).to_numpy(), np.ones((2, 3)))
        np.testing.assert_array_equal(nd.full_like([1, 2], 4).to_numpy(), [4.0, 4.0])

    def test_eye_and_identity(self):
        np.testing.assert_array_equal(nd.identity(3).to_numpy(), np.eye(3))
        np.testing.assert_array_equal(nd.eye(2, 4, k=1).to_numpy(), np.eye(2, 4, k=1))
        np.testing.assert_array_equal(nd.eye(4, 3, k=-2).to_numpy(), np.eye(4, 3, k=-2))
        np.testing.assert_array_equal(nd.eye(2, 2, k=5).to_numpy(), np.zeros((2, 2)))


class TestArange(TestCase):
    def test_matches_numpy(self):
        for args in [(0, 5, 1), (1, 2, 0.25), (5, 0, -1), (0, 1, 0.3), (-3, 3, 2)]:
            np.testing.assert_allclose(nd.arange(*args).to_numpy(), np.arange(*args))

    def test_single_argument_form(self):
        np.testing.assert_array_equal(nd.arange(4).to_numpy(), [0.0, 1.0, 2.0, 3.0])

    def test_element_count_is_ceil(self):
        a = nd.arange(0, 1, 0.3)
        self.assertEqual(a.size, math.ceil(1 / 0.3))

    def test_zero_step_raises(self):
        with self.assertRaises(InvalidArgumentError) as ctx:
            nd.arange(0, 5, 0)
        self.assertEqual(ctx.exception.argument, "step")

    def test_wrong_direction_is_empty_and_rejected(self):
        with self.assertRaises(InvalidShapeError):
            nd.arange(0, 5, -1)
        with self.assertRaises(InvalidShapeError):
            nd.arange(3, 3, 1)
        with self.assertRaises(InvalidShapeError) as ctx:
            nd.arange(5, 0, 1)
        self.assertEqual(ctx.exception.shape, (0,))

    def test_non_finite_arguments_rejected(self):
        with self.assertRaises(InvalidArgumentError):
            nd.arange(0, float("inf"), 1)
        with self.assertRaises(InvalidArgumentError):
            nd.arange(0, 10**400, 1)


class TestLinspace(TestCase):
    def test_inclusive_endpoints(self):
        v = nd.linspace(0.0, 1.0, 5)
        np.testing.assert_allclose(v.to_numpy(), [0.0, 0.25, 0.5, 0.75, 1.0])
        self.assertEqual(v.get(4), 1.0)

    def test_matches_numpy(self):
        np.testing.assert_allclose(nd.linspace(-2, 3, 11).to_numpy(), np.linspace(-2, 3, 11))
        np.testing.assert_allclose(nd.linspace(5, -5, 2).to_numpy(), [5.0, -5.0])

    def test_num_below_two_raises(self):
        for bad in (1, 0, -3, 2.0):
            with self.assertRaises(InvalidArgumentError):
                nd.linspace(0, 1, bad)


class TestNDArrayValue(TestCase):
    def test_explicit_flat_buffer_with_shape(self):
        a = NDArray([1, 2, 3, 4, 5, 6], (2, 3))
        self.assertEqual(a.shape, (2, 3))
        self.assertEqual(a.get(1, 2), 6.0)

    def test_size_invariant_checked(self):
        with self.assertRaises(SizeMismatchError):
            NDArray([1, 2, 3], (2, 2))

    def test_buffer_is_read_only_and_independent(self):
        src = np.array([1.0, 2.0, 3.0])
        a = nd.array(src)
        src[0] = 99.0
        self.assertEqual(a.get(0), 1.0)
        with self.assertRaises(ValueError):
            a._data[0] = 5.0
        out = a.to_numpy()
        out[1] = -1.0
        self.assertEqual(a.get(1), 2.0)

    def test_get_and_set(self):
        a = nd.array([[1, 2], [3, 4]])
        self.assertEqual(a.get(1, 0), 3.0)
        self.assertEqual(a.get((0, 1)), 2.0)
        b = a.set((0, 1), 9)
        self.assertEqual(b.get(0, 1), 9.0)
        self.assertEqual(a.get(0, 1), 2.0)
        self.assertEqual(nd.set([1, 2, 3], 2, 5.0).tolist(), [1.0, 2.0, 5.0])
        self.assertEqual(nd.get([[1, 2], [3, 4]], (1, 1)), 4.0)

    def test_get_out_of_bounds(self):
        a = nd.zeros((2, 3))
        with self.assertRaises(IndexOutOfBoundsError) as ctx:
            a.get(0, 3)
        self.assertEqual(ctx.exception.axis, 1)
        with self.assertRaises(IndexOutOfBoundsError):
            a.get(1)
        with self.assertRaises(IndexOutOfBoundsError):
            a.set((2, 0), 1.0)

    def test_set_rejects_non_numeric(self):
        with self.assertRaises(InvalidElementError):
            nd.zeros(2).set(0, "a")

    def test_item_len_bool(self):
        self.assertEqual(nd.array(3.5).item(), 3.5)
        with self.assertRaises(SizeMismatchError):
            nd.zeros(2).item()
        self.assertEqual(len(nd.zeros((4, 2))), 4)
        self.assertTrue(bool(nd.array([1.0])))
        self.assertFalse(bool(nd.array([0.0])))
        with self.assertRaises(ValueError):
            bool(nd.zeros(3))

    def test_copy_and_dtype(self):
        a = nd.array([1, 2])
        b = nd.copy(a)
        self.assertIsNot(a, b)
        self.assertTrue(nd.array_equal(a, b))
        self.assertEqual(a.dtype, np.float64)

    def test_repr_mentions_shape_and_backend(self):
        r = repr(nd.zeros((2, 2)))
        self.assertIn("shape=(2, 2)", r)
        self.assertIn("backend='numpy'", r)

    def test_numpy_interop(self):
        a = nd.array([[1, 2], [3, 4]])
        np.testing.assert_array_equal(np.asarray(a), [[1.0, 2.0], [3.0, 4.0]])
        out = np.float64(1.0) + a
        self.assertIsInstance(out, NDArray)
        np.testing.assert_array_equal(out.to_numpy(), [[2.0, 3.0], [4.0, 5.0]])


if __name__ == "__main__":
    unittest.main()
