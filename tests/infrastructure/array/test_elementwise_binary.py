import math
import unittest
from unittest import TestCase

import numpy as np

import ndcore as nd
from ndcore.domain._errors import BackendMismatchError, BroadcastError


class TestArithmetic(TestCase):
    def test_add_same_shape(self):
        out = nd.add([[1, 2], [3, 4]], [[10, 20], [30, 40]])
        self.assertEqual(out.tolist(), [[11.0, 22.0], [33.0, 44.0]])

    def test_broadcast_row_against_column(self):
        a = nd.array([[1], [2], [3]])
        b = nd.array([10, 20])
        out = a + b
        self.assertEqual(out.shape, (3, 2))
        self.assertEqual(out.tolist(), [[11.0, 21.0], [12.0, 22.0], [13.0, 23.0]])

    def test_broadcast_trailing_axis(self):
        a = nd.arange(6).reshape(2, 3)
        out = nd.mul(a, [1, 10, 100])
        self.assertEqual(out.tolist(), [[0.0, 10.0, 200.0], [3.0, 40.0, 500.0]])

    def test_row_plus_column_host_values(self):
        out = nd.add([[1, 2]], [[1], [2]])
        self.assertEqual(out.shape, (2, 2))
        self.assertEqual(out.tolist(), [[2.0, 3.0], [3.0, 4.0]])

    def test_incompatible_shapes(self):
        with self.assertRaises(BroadcastError):
            nd.add(nd.zeros((2, 3)), nd.zeros((3, 2)))

    def test_scalar_operands(self):
        a = nd.array([1.0, 2.0, 3.0])
        self.assertEqual((a * 2).tolist(), [2.0, 4.0, 6.0])
        self.assertEqual((10 - a).tolist(), [9.0, 8.0, 7.0])
        self.assertEqual((6 / a).tolist(), [6.0, 3.0, 2.0])
        self.assertEqual((2 ** a).tolist(), [2.0, 4.0, 8.0])
        self.assertEqual((a ** 2).tolist(), [1.0, 4.0, 9.0])

    def test_scalar_scalar_gives_length_one_array(self):
        out = nd.add(2, 3)
        self.assertEqual(out.shape, (1,))
        self.assertEqual(out.tolist(), [5.0])

    def test_reflected_sub_keeps_operand_order(self):
        out = nd.sub([1, 2], nd.array([10, 20]))
        self.assertEqual(out.tolist(), [-9.0, -18.0])

    def test_host_operand_adopts_backend(self):
        a = nd.array([1, 2], backend="python")
        self.assertEqual((a + [1, 1]).backend, nd.Backend("python"))
        self.assertEqual(nd.add([1, 1], a).backend, nd.Backend("python"))

    def test_mixed_backends_rejected(self):
        a = nd.array([1, 2], backend="numpy")
        b = nd.array([1, 2], backend="python")
        with self.assertRaises(BackendMismatchError):
            a + b

    def test_results_are_new_arrays(self):
        a = nd.array([1.0, 2.0])
        b = a + 0
        self.assertIsNot(a, b)
        self.assertFalse(np.shares_memory(a._data, b._data))


class TestDivisionAndModulo(TestCase):
    def test_div_by_zero_is_nan(self):
        out = nd.div([1.0, -1.0, 0.0, 4.0], [0.0, 0.0, 0.0, 2.0]).tolist()
        self.assertTrue(all(math.isnan(v) for v in out[:3]))
        self.assertEqual(out[3], 2.0)

    def test_mod_and_fmod_by_zero_are_nan(self):
        for fn in (nd.mod, nd.fmod):
            out = fn([5.0, -5.0], 0.0).tolist()
            self.assertTrue(all(math.isnan(v) for v in out))

    def test_mod_follows_divisor_sign(self):
        out = nd.mod([5.0, -5.0, 5.0, -5.0], [3.0, 3.0, -3.0, -3.0])
        self.assertEqual(out.tolist(), [2.0, 1.0, -1.0, -2.0])

    def test_fmod_follows_dividend_sign(self):
        out = nd.fmod([5.0, -5.0, 5.0, -5.0], [3.0, 3.0, -3.0, -3.0])
        self.assertEqual(out.tolist(), [2.0, -2.0, 2.0, -2.0])

    def test_mod_operator(self):
        self.assertEqual((nd.array([7.0, -7.0]) % 4).tolist(), [3.0, 1.0])
        self.assertEqual((7 % nd.array([4.0, -4.0])).tolist(), [3.0, -1.0])


class TestMiscBinary(TestCase):
    def test_maximum_minimum(self):
        a = [1.0, 5.0, -2.0]
        b = [3.0, 4.0, -2.0]
        self.assertEqual(nd.maximum(a, b).tolist(), [3.0, 5.0, -2.0])
        self.assertEqual(nd.minimum(a, b).tolist(), [1.0, 4.0, -2.0])

    def test_maximum_propagates_nan(self):
        out = nd.maximum([float("nan"), 1.0], [0.0, float("nan")]).tolist()
        self.assertTrue(math.isnan(out[0]) and math.isnan(out[1]))

    def test_arctan2_quadrants(self):
        out = nd.arctan2([1.0, 1.0, -1.0, -1.0], [1.0, -1.0, -1.0, 1.0]).tolist()
        expected = [math.pi / 4, 3 * math.pi / 4, -3 * math.pi / 4, -math.pi / 4]
        np.testing.assert_allclose(out, expected)

    def test_pow_special_values(self):
        out = nd.pow([0.0, -8.0, 2.0], [-1.0, 1.0 / 3.0, 0.5]).tolist()
        self.assertEqual(out[0], math.inf)
        self.assertTrue(math.isnan(out[1]))
        self.assertAlmostEqual(out[2], math.sqrt(2.0))


if __name__ == "__main__":
    unittest.main()
