import unittest
from unittest import TestCase

import numpy as np

from ndcore import array
from ndcore.domain._errors import InvalidElementError
from ndcore.domain._operand import OperandKind, classify_operand, is_scalar


class TestOperandClassification(TestCase):
    def test_scalars(self):
        for v in (1, 2.5, True, np.float64(3.0), np.int32(4), np.array(5.0)):
            self.assertIs(classify_operand(v), OperandKind.SCALAR)

    def test_non_real_scalars_are_not_scalars(self):
        for v in (1 + 2j, "1", None, b"x"):
            self.assertFalse(is_scalar(v))

    def test_flat_and_nested_sequences(self):
        self.assertIs(classify_operand([1, 2, 3]), OperandKind.FLAT_SEQUENCE)
        self.assertIs(classify_operand((1.0,)), OperandKind.FLAT_SEQUENCE)
        self.assertIs(classify_operand(np.arange(3)), OperandKind.FLAT_SEQUENCE)
        self.assertIs(classify_operand([[1, 2], [3, 4]]), OperandKind.NESTED_SEQUENCE)
        self.assertIs(classify_operand(np.ones((2, 2))), OperandKind.NESTED_SEQUENCE)

    def test_arrays(self):
        self.assertIs(classify_operand(array([1, 2])), OperandKind.ARRAY)

    def test_unsupported_values_raise(self):
        for v in ("abc", None, {"a": 1}, object(), np.array("s")):
            with self.assertRaises(InvalidElementError):
                classify_operand(v)


if __name__ == "__main__":
    unittest.main()
