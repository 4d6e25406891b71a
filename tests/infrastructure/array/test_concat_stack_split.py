import unittest
from unittest import TestCase

import numpy as np

import ndcore as nd
from ndcore.domain._errors import (
    AxisOutOfBoundsError,
    BackendMismatchError,
    InvalidArgumentError,
    NotDivisibleError,
    ShapeMismatchError,
)


class TestConcatenate(TestCase):
    def test_along_each_axis(self):
        a = np.arange(6, dtype=np.float64).reshape(2, 3)
        b = np.arange(6, 12, dtype=np.float64).reshape(2, 3)
        for axis in (0, 1):
            with self.subTest(axis=axis):
                out = nd.concatenate([nd.array(a), nd.array(b)], axis=axis)
                np.testing.assert_array_equal(out.to_numpy(), np.concatenate([a, b], axis=axis))

    def test_uneven_lengths_on_join_axis(self):
        out = nd.concatenate([nd.zeros((2, 1)), nd.ones((2, 3))], axis=1)
        self.assertEqual(out.shape, (2, 4))
        self.assertEqual(out.tolist()[0], [0.0, 1.0, 1.0, 1.0])

    def test_mismatches(self):
        with self.assertRaises(ShapeMismatchError):
            nd.concatenate([nd.zeros((2, 3)), nd.zeros((3, 3))], axis=1)
        with self.assertRaises(ShapeMismatchError):
            nd.concatenate([nd.zeros((2, 3)), nd.zeros(3)], axis=0)
        with self.assertRaises(AxisOutOfBoundsError):
            nd.concatenate([nd.zeros(3), nd.zeros(3)], axis=1)
        with self.assertRaises(InvalidArgumentError):
            nd.concatenate([])

    def test_backend_mismatch(self):
        with self.assertRaises(BackendMismatchError):
            nd.concatenate([nd.zeros(2), nd.zeros(2, backend="python")])

    def test_host_inputs_follow_array_backend(self):
        out = nd.concatenate([[1.0], nd.array([2.0], backend="python")])
        self.assertEqual(out.backend, nd.Backend("python"))
        self.assertEqual(out.tolist(), [1.0, 2.0])

    def test_leading_host_value_anchors_on_first_array(self):
        b = nd.array([[3.0, 4.0]], backend="python")
        out = nd.NDArray.concatenate([[[1.0, 2.0]], b], axis=0)
        self.assertEqual(out.backend, nd.Backend("python"))
        self.assertEqual(out.tolist(), [[1.0, 2.0], [3.0, 4.0]])
        stacked = nd.NDArray.stack([[1.0, 2.0], nd.array([3.0, 4.0])], axis=1)
        self.assertEqual(stacked.tolist(), [[1.0, 3.0], [2.0, 4.0]])

    def test_all_host_values_use_default_backend(self):
        out = nd.NDArray.concatenate([[1.0], [2.0, 3.0]])
        self.assertEqual(out.backend, nd.get_settings().backend)
        self.assertEqual(out.tolist(), [1.0, 2.0, 3.0])


class TestStack(TestCase):
    def test_new_axis_positions(self):
        a, b = nd.zeros((2, 3)), nd.ones((2, 3))
        self.assertEqual(nd.stack([a, b], axis=0).shape, (2, 2, 3))
        self.assertEqual(nd.stack([a, b], axis=1).shape, (2, 2, 3))
        out = nd.stack([a, b], axis=2)
        self.assertEqual(out.shape, (2, 3, 2))
        self.assertEqual(out.get(1, 2, 1), 1.0)

    def test_shape_and_axis_errors(self):
        with self.assertRaises(ShapeMismatchError):
            nd.stack([nd.zeros(2), nd.zeros(3)])
        with self.assertRaises(AxisOutOfBoundsError):
            nd.stack([nd.zeros(2), nd.zeros(2)], axis=2)
        with self.assertRaises(AxisOutOfBoundsError):
            nd.stack([nd.zeros(2), nd.zeros(2)], axis=-1)


class TestSplit(TestCase):
    def test_equal_sections(self):
        parts = nd.arange(12).reshape(4, 3).split(2, axis=0)
        self.assertEqual([p.shape for p in parts], [(2, 3), (2, 3)])
        self.assertEqual(parts[1].get(0, 0), 6.0)

    def test_cut_points(self):
        parts = nd.split(nd.arange(10), [2, 5, 9])
        self.assertEqual([p.size for p in parts], [2, 3, 4, 1])
        self.assertEqual(parts[2].tolist(), [5.0, 6.0, 7.0, 8.0])

    def test_round_trip_along_inner_axis(self):
        a = nd.rand((3, 6, 2))
        parts = a.split([1, 4], axis=1)
        self.assertTrue(nd.array_equal(nd.concatenate(parts, axis=1), a))

    def test_three_sections_reconstruct_original(self):
        a = nd.array([1, 2, 3, 4, 5, 6])
        parts = nd.split(a, 3)
        self.assertEqual([p.shape for p in parts], [(2,), (2,), (2,)])
        self.assertEqual([p.tolist() for p in parts], [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        self.assertTrue(nd.array_equal(nd.concatenate(parts), a))

    def test_pieces_are_independent(self):
        a = nd.arange(4)
        left, _ = a.split(2)
        self.assertFalse(np.shares_memory(left._data, a._data))

    def test_invalid_requests(self):
        a = nd.arange(10)
        with self.assertRaises(NotDivisibleError):
            a.split(3)
        for bad in (0, [0, 3], [3, 3], [5, 2], [10], [2.5]):
            with self.subTest(arg=bad):
                with self.assertRaises(InvalidArgumentError):
                    a.split(bad)
        with self.assertRaises(AxisOutOfBoundsError):
            a.split(2, axis=1)


if __name__ == "__main__":
    unittest.main()
