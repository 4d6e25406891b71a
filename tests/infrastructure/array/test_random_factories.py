import unittest
from unittest import TestCase

import numpy as np

import ndcore as nd
from ndcore.domain._errors import InvalidShapeError


class TestRandomFactories(TestCase):
    def test_seed_reproduces_draws(self):
        nd.seed(123)
        first = nd.rand((3, 4))
        nd.seed(123)
        second = nd.rand((3, 4))
        self.assertTrue(nd.array_equal(first, second))

    def test_successive_draws_differ(self):
        nd.seed(5)
        self.assertFalse(nd.array_equal(nd.rand(16), nd.rand(16)))

    def test_uniform_range_and_moments(self):
        nd.seed(0)
        x = nd.rand(20000)
        self.assertGreaterEqual(x.min(), 0.0)
        self.assertLess(x.max(), 1.0)
        self.assertAlmostEqual(x.mean(), 0.5, delta=0.02)

    def test_normal_moments(self):
        nd.seed(1)
        x = nd.randn((100, 200))
        self.assertEqual(x.shape, (100, 200))
        self.assertTrue(np.all(np.isfinite(x.to_numpy())))
        self.assertAlmostEqual(x.mean(), 0.0, delta=0.03)
        self.assertAlmostEqual(x.std(), 1.0, delta=0.03)

    def test_odd_sizes(self):
        nd.seed(2)
        self.assertEqual(nd.randn(7).size, 7)
        self.assertEqual(nd.randn(1).size, 1)

    def test_backend_keyword(self):
        self.assertEqual(nd.rand(2, backend="python").backend, nd.Backend("python"))

    def test_invalid_shape(self):
        with self.assertRaises(InvalidShapeError):
            nd.rand((2, 0))
        with self.assertRaises(InvalidShapeError):
            nd.randn(())


if __name__ == "__main__":
    unittest.main()
