"""
Linear algebra mixin.

Validates operand ranks and shapes for ``dot`` and lowers every supported
case to a single ``(m, k) x (k, n)`` matrix product evaluated by the
backend-dispatched :meth:`ArrayMixinLinalg._matmul_kernel`:

======================  ==================  ========================
operands                lowered product     result
======================  ==================  ========================
1-D (k,) . 1-D (k,)     (1, k) x (k, 1)     Python float
2-D (m, k) . 2-D (k, n) (m, k) x (k, n)     shape (m, n)
2-D (m, k) . 1-D (k,)   (m, k) x (k, 1)     shape (m,)
======================  ==================  ========================

Every other rank combination raises ``UnsupportedOperandsError``.
"""

from __future__ import annotations

from abc import ABC
from typing import Any, Union

import numpy as np

from .....domain._array import IArray
from .....domain._errors import (
    InvalidArgumentError,
    ShapeMismatchError,
    UnsupportedOperandsError,
)


class ArrayMixinLinalg(ABC):
    """Abstract mixin providing ``dot`` and related matrix helpers."""

    def _matmul_kernel(
        self, a: np.ndarray, b: np.ndarray, m: int, k: int, n: int
    ) -> np.ndarray:
        """
        Multiply flat row-major ``(m, k)`` and ``(k, n)`` buffers.

        Returns
        -------
        np.ndarray
            Flat ``(m, n)`` float64 buffer.
        """

    def dot(self: IArray, other: Any) -> Union[float, IArray]:
        """
        Inner product, matrix-vector or matrix-matrix product.

        Parameters
        ----------
        other : array-like
            Right operand.

        Returns
        -------
        float or NDArray
            A Python float for 1-D . 1-D, otherwise a new array.

        Raises
        ------
        ShapeMismatchError
            If the contracted dimensions disagree.
        UnsupportedOperandsError
            For any rank combination other than 1-1, 2-2 and 2-1.
        """
        b = self._lift(other)
        ra, rb = self.ndim, b.ndim

        if ra == 1 and rb == 1:
            if self.size != b.size:
                raise ShapeMismatchError("dot", [self.shape, b.shape], "vector lengths differ")
            out = self._matmul_kernel(self._data, b._data, 1, self.size, 1)
            return float(out[0])

        if ra == 2 and rb == 2:
            m, k = self.shape
            if b.shape[0] != k:
                raise ShapeMismatchError(
                    "dot", [self.shape, b.shape], f"inner dimensions {k} and {b.shape[0]} differ"
                )
            n = b.shape[1]
            return self._from_flat(
                self._matmul_kernel(self._data, b._data, m, k, n), (m, n), self.backend
            )

        if ra == 2 and rb == 1:
            m, k = self.shape
            if b.size != k:
                raise ShapeMismatchError(
                    "dot", [self.shape, b.shape], f"matrix has {k} columns but vector has {b.size} elements"
                )
            return self._from_flat(
                self._matmul_kernel(self._data, b._data, m, k, 1), (m,), self.backend
            )

        raise UnsupportedOperandsError("dot", (ra, rb))

    def outer(self: IArray, other: Any) -> IArray:
        """
        Outer product of the flattened operands.

        Returns
        -------
        NDArray
            Shape ``(self.size, other.size)`` with ``out[i, j] = a[i] * b[j]``.
        """
        b = self._lift(other)
        return self._from_flat(
            self._matmul_kernel(self._data, b._data, self.size, 1, b.size),
            (self.size, b.size),
            self.backend,
        )

    def diagonal(self: IArray, k: int = 0) -> IArray:
        """
        Extract the ``k``-th diagonal of a 2-D array.

        ``k > 0`` selects a diagonal above the main one, ``k < 0`` below.

        Raises
        ------
        UnsupportedOperandsError
            If the array is not 2-D.
        InvalidArgumentError
            If the selected diagonal is empty.
        """
        if self.ndim != 2:
            raise UnsupportedOperandsError("diagonal", (self.ndim,))
        rows, cols = self.shape
        k = int(k)
        r0, c0 = (0, k) if k >= 0 else (-k, 0)
        length = min(rows - r0, cols - c0)
        if length < 1:
            raise InvalidArgumentError("diagonal", "k", k, f"offset leaves no diagonal in shape {self.shape}")
        idx = (r0 + np.arange(length)) * cols + (c0 + np.arange(length))
        return self._from_flat(self._data[idx], (length,), self.backend)

    def trace(self: IArray) -> float:
        """Sum of the main diagonal of a 2-D array."""
        return float(self.diagonal().sum())
