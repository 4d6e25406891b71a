import math
import unittest
from unittest import TestCase

import numpy as np

import ndcore as nd
from ndcore.domain._errors import AxisOutOfBoundsError, InvalidArgumentError


class TestCumulative(TestCase):
    def test_cumsum_flattens_without_axis(self):
        out = nd.cumsum([[1, 2], [3, 4]])
        self.assertEqual(out.shape, (4,))
        self.assertEqual(out.tolist(), [1.0, 3.0, 6.0, 10.0])

    def test_cumsum_along_axis(self):
        a = nd.arange(6).reshape(2, 3)
        self.assertEqual(a.cumsum(axis=0).tolist(), [[0.0, 1.0, 2.0], [3.0, 5.0, 7.0]])
        self.assertEqual(a.cumsum(axis=1).tolist(), [[0.0, 1.0, 3.0], [3.0, 7.0, 12.0]])

    def test_cumprod(self):
        a = nd.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        np.testing.assert_allclose(
            a.cumprod(axis=1).to_numpy(), np.cumprod(a.to_numpy(), axis=1)
        )

    def test_bad_axis(self):
        with self.assertRaises(AxisOutOfBoundsError):
            nd.cumsum([1, 2, 3], axis=1)


class TestSorting(TestCase):
    def test_sort_last_axis_by_default(self):
        a = nd.array([[3.0, 1.0, 2.0], [0.0, -1.0, 5.0]])
        self.assertEqual(a.sort().tolist(), [[1.0, 2.0, 3.0], [-1.0, 0.0, 5.0]])
        self.assertEqual(a.sort(axis=0).tolist(), [[0.0, -1.0, 2.0], [3.0, 1.0, 5.0]])

    def test_nan_sorts_last(self):
        out = nd.sort([2.0, float("nan"), 1.0]).tolist()
        self.assertEqual(out[:2], [1.0, 2.0])
        self.assertTrue(math.isnan(out[2]))

    def test_argsort_is_stable(self):
        out = nd.argsort([2.0, 1.0, 2.0, 1.0])
        self.assertEqual(out.tolist(), [1.0, 3.0, 0.0, 2.0])


class TestDiff(TestCase):
    def test_first_and_second_difference(self):
        x = [1.0, 4.0, 9.0, 16.0]
        self.assertEqual(nd.diff(x).tolist(), [3.0, 5.0, 7.0])
        self.assertEqual(nd.diff(x, n=2).tolist(), [2.0, 2.0])

    def test_axis_shrinks(self):
        a = nd.arange(12).reshape(3, 4)
        out = a.diff(axis=0)
        self.assertEqual(out.shape, (2, 4))
        np.testing.assert_array_equal(out.to_numpy(), np.full((2, 4), 4.0))

    def test_invalid_order(self):
        for n in (0, 4, 1.5):
            with self.subTest(n=n):
                with self.assertRaises(InvalidArgumentError):
                    nd.diff([1.0, 2.0, 3.0, 4.0], n=n)


if __name__ == "__main__":
    unittest.main()
