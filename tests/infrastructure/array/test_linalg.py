import unittest
from unittest import TestCase

import numpy as np

import ndcore as nd
from ndcore.domain._errors import (
    InvalidArgumentError,
    ShapeMismatchError,
    UnsupportedOperandsError,
)


class TestDot(TestCase):
    def test_vector_vector_returns_float(self):
        out = nd.dot([1, 2, 3], [4, 5, 6])
        self.assertIsInstance(out, float)
        self.assertEqual(out, 32.0)

    def test_matrix_matrix(self):
        a = np.arange(6, dtype=np.float64).reshape(2, 3)
        b = np.arange(12, dtype=np.float64).reshape(3, 4)
        out = nd.array(a).dot(b)
        self.assertEqual(out.shape, (2, 4))
        np.testing.assert_allclose(out.to_numpy(), a @ b)

    def test_matrix_vector(self):
        out = nd.dot([[1, 2], [3, 4], [5, 6]], [1, -1])
        self.assertEqual(out.shape, (3,))
        self.assertEqual(out.tolist(), [-1.0, -1.0, -1.0])

    def test_identity_is_neutral(self):
        a = nd.rand((3, 3))
        np.testing.assert_allclose(a.dot(nd.eye(3)).to_numpy(), a.to_numpy())

    def test_contracted_dimension_mismatch(self):
        with self.assertRaises(ShapeMismatchError):
            nd.dot([1, 2], [1, 2, 3])
        with self.assertRaises(ShapeMismatchError):
            nd.dot(nd.zeros((2, 3)), nd.zeros((2, 3)))
        with self.assertRaises(ShapeMismatchError):
            nd.dot(nd.zeros((2, 3)), nd.zeros(2))

    def test_unsupported_ranks(self):
        for a, b in ((nd.zeros(2), nd.zeros((2, 2))), (nd.zeros((2, 2, 2)), nd.zeros(2))):
            with self.subTest(ranks=(a.ndim, b.ndim)):
                with self.assertRaises(UnsupportedOperandsError):
                    nd.dot(a, b)


class TestMatrixHelpers(TestCase):
    def test_outer(self):
        out = nd.outer([1, 2], [3, 4, 5])
        self.assertEqual(out.tolist(), [[3.0, 4.0, 5.0], [6.0, 8.0, 10.0]])

    def test_diagonal_offsets(self):
        ref = np.arange(12, dtype=np.float64).reshape(3, 4)
        a = nd.array(ref)
        for k in (-2, -1, 0, 1, 3):
            with self.subTest(k=k):
                np.testing.assert_array_equal(a.diagonal(k).to_numpy(), np.diagonal(ref, k))
        with self.assertRaises(InvalidArgumentError):
            a.diagonal(4)
        with self.assertRaises(UnsupportedOperandsError):
            nd.diagonal([1, 2, 3])

    def test_trace(self):
        self.assertEqual(nd.trace([[1, 2], [3, 4]]), 5.0)

    def test_diag(self):
        self.assertEqual(nd.diag([1, 2]).tolist(), [[1.0, 0.0], [0.0, 2.0]])
        self.assertEqual(nd.diag([[1, 2], [3, 4]]).tolist(), [1.0, 4.0])


if __name__ == "__main__":
    unittest.main()
