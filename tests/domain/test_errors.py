import unittest
from unittest import TestCase

from ndcore.domain._errors import (
    AllocationLimitError,
    AxisOutOfBoundsError,
    BackendMismatchError,
    BackendNotSupportedError,
    BroadcastError,
    ErrorKind,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    InvalidElementError,
    InvalidPermutationError,
    InvalidShapeError,
    NDCoreError,
    NotDivisibleError,
    ShapeMismatchError,
    SizeMismatchError,
    UnsupportedOperandsError,
)


class TestErrorTaxonomy(TestCase):
    def setUp(self) -> None:
        self.cases = [
            (InvalidShapeError((0,), "bad"), ErrorKind.INVALID_SHAPE, ValueError),
            (ShapeMismatchError("stack", [(2,), (3,)]), ErrorKind.SHAPE_MISMATCH, ValueError),
            (SizeMismatchError("reshape", 6, 5), ErrorKind.SIZE_MISMATCH, ValueError),
            (BroadcastError((2,), (3,)), ErrorKind.BROADCAST, ValueError),
            (AxisOutOfBoundsError("sum", 3, 2), ErrorKind.AXIS_OUT_OF_BOUNDS, IndexError),
            (IndexOutOfBoundsError(5, 3, 0), ErrorKind.INDEX_OUT_OF_BOUNDS, IndexError),
            (InvalidPermutationError((0, 0), 2), ErrorKind.INVALID_PERMUTATION, ValueError),
            (NotDivisibleError(7, 2, 0), ErrorKind.NOT_DIVISIBLE, ValueError),
            (UnsupportedOperandsError("dot", (3, 1)), ErrorKind.UNSUPPORTED_OPERANDS, ValueError),
            (InvalidArgumentError("arange", "step", 0, "must be nonzero"), ErrorKind.INVALID_ARGUMENT, ValueError),
            (InvalidElementError("x", (0, 1)), ErrorKind.INVALID_ELEMENT, TypeError),
            (BackendMismatchError("numpy", "python"), ErrorKind.BACKEND_MISMATCH, RuntimeError),
            (BackendNotSupportedError("dot", "gpu"), ErrorKind.BACKEND_NOT_SUPPORTED, RuntimeError),
            (AllocationLimitError(100, 10), ErrorKind.ALLOCATION_LIMIT, MemoryError),
        ]

    def test_kind_and_builtin_base(self):
        for err, kind, base in self.cases:
            self.assertIsInstance(err, NDCoreError)
            self.assertIsInstance(err, base)
            self.assertIs(err.kind, kind)
            self.assertTrue(str(err))

    def test_error_kind_values_are_strings(self):
        self.assertEqual(ErrorKind.SHAPE_MISMATCH, "ShapeMismatch")
        self.assertEqual(ErrorKind("NotDivisible"), ErrorKind.NOT_DIVISIBLE)

    def test_context_attributes(self):
        err = SizeMismatchError("reshape", 6, 5, (2, 3))
        self.assertEqual((err.expected, err.actual, err.shape), (6, 5, (2, 3)))

        err = NotDivisibleError(7, 2, 1)
        self.assertEqual((err.length, err.sections, err.axis), (7, 2, 1))

        err = InvalidElementError(None, (1, 2))
        self.assertEqual(err.path, (1, 2))
        self.assertIn("[1, 2]", str(err))

        err = ShapeMismatchError("concatenate", [(2, 3), [4, 3]], "dimension 0 differs")
        self.assertEqual(err.shapes, ((2, 3), (4, 3)))
        self.assertIn("dimension 0 differs", str(err))

    def test_index_error_message_names_axis(self):
        err = IndexOutOfBoundsError(4, extent=3, axis=1)
        self.assertIn("axis 1", str(err))
        err = IndexOutOfBoundsError(9, extent=6)
        self.assertIn("Flat offset 9", str(err))


if __name__ == "__main__":
    unittest.main()
