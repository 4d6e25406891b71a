import unittest
from unittest import TestCase

import numpy as np

import ndcore as nd
from ndcore.domain._errors import (
    InvalidElementError,
    InvalidShapeError,
    ShapeMismatchError,
)


class TestFromNested(TestCase):
    def test_infers_shape_from_nesting(self):
        a = nd.from_nested([[[1, 2], [3, 4], [5, 6]], [[7, 8], [9, 10], [11, 12]]])
        self.assertEqual(a.shape, (2, 3, 2))
        np.testing.assert_array_equal(a.to_numpy().reshape(-1), np.arange(1, 13))

    def test_flat_and_scalar_inputs(self):
        self.assertEqual(nd.from_nested([1, 2, 3]).shape, (3,))
        s = nd.from_nested(4)
        self.assertEqual(s.shape, (1,))
        self.assertEqual(s.tolist(), [4.0])

    def test_tuples_bools_and_numpy_scalars_are_numeric(self):
        a = nd.from_nested(((True, np.float32(2.5)), (np.int64(3), 4)))
        self.assertEqual(a.tolist(), [[1.0, 2.5], [3.0, 4.0]])

    def test_numpy_and_array_inputs(self):
        src = np.arange(6, dtype=np.int32).reshape(2, 3)
        a = nd.from_nested(src)
        self.assertEqual(a.shape, (2, 3))
        b = nd.from_nested(a)
        self.assertTrue(nd.array_equal(a, b))
        mixed = nd.from_nested([np.array([1, 2]), [3, 4]])
        self.assertEqual(mixed.tolist(), [[1.0, 2.0], [3.0, 4.0]])

    def test_sibling_length_mismatch(self):
        with self.assertRaises(ShapeMismatchError):
            nd.from_nested([[1, 2], [3]])
        with self.assertRaises(ShapeMismatchError):
            nd.from_nested([[[1], [2]], [[3], [4], [5]]])

    def test_sibling_depth_mismatch(self):
        with self.assertRaises(ShapeMismatchError):
            nd.from_nested([[1, 2], 3])
        with self.assertRaises(ShapeMismatchError):
            nd.from_nested([1, [2]])

    def test_non_numeric_leaf(self):
        for bad in (["a", "b"], [[1, None]], [[1, 2], [3, "4"]], [1 + 2j]):
            with self.assertRaises(InvalidElementError):
                nd.from_nested(bad)

    def test_invalid_element_reports_position(self):
        with self.assertRaises(InvalidElementError) as ctx:
            nd.from_nested([[1, 2], [3, "x"]])
        self.assertEqual(ctx.exception.path, (1, 1))

    def test_empty_sequences_rejected(self):
        for bad in ([], [[]], [[], []], np.zeros((0, 3))):
            with self.assertRaises(InvalidShapeError):
                nd.from_nested(bad)

    def test_integers_beyond_float64_range(self):
        for bad in (10**400, [10**400], [1, -(10**400)], [[1, 2], [3, 10**400]]):
            with self.subTest(value=bad):
                with self.assertRaises(InvalidElementError):
                    nd.array(bad)
        with self.assertRaises(InvalidElementError) as ctx:
            nd.array([[1, 2], [3, 10**400]])
        self.assertEqual(ctx.exception.path, (1, 1))

    def test_huge_integer_operands_and_fills(self):
        a = nd.array([1.0, 2.0])
        with self.assertRaises(InvalidElementError):
            a + [10**400, 1]
        with self.assertRaises(InvalidElementError):
            a.set(0, 10**400)
        with self.assertRaises(InvalidElementError):
            a.clip(0, 10**400)


class TestToNested(TestCase):
    def test_round_trip(self):
        samples = [
            [1.0, 2.0, 3.0],
            [[1.0, 2.0], [3.0, 4.0]],
            [[[0.5], [1.5]], [[2.5], [3.5]], [[4.5], [5.5]]],
            [[-1.0, 0.0, 1e300]],
        ]
        for x in samples:
            self.assertEqual(nd.to_nested(nd.from_nested(x)), x)

    def test_tolist_returns_python_floats(self):
        out = nd.array([[1, 2]]).tolist()
        self.assertIsInstance(out[0][0], float)


if __name__ == "__main__":
    unittest.main()
