"""
Reduction, scan, sort, quantile and gradient methods for :class:`NDArray`.

Every method here follows one scheme: gather the slices along the chosen
axis with a flat-index gather matrix (row ``r`` = one coordinate of the
remaining axes, column ``j`` = position along the axis), run a row-wise
kernel from :mod:`~ndcore.infrastructure.ops.reduce_cpu` or
:mod:`~ndcore.infrastructure.ops.scan_cpu`, and write the result into a new
array. Total work is ``O(size)`` for every axis.

Reductions are backend-independent; results keep the input's backend.

Result conventions
------------------
- Without ``axis`` a reduction returns a Python ``float`` (``argmin`` /
  ``argmax`` return a Python ``int`` flat index).
- With ``axis`` the axis is removed; a rank-1 input yields shape ``(1,)``.
"""

from __future__ import annotations

from numbers import Real
from typing import Any, List, Optional, Union

import numpy as np

from ...domain._array import IArray
from ...domain._errors import InvalidArgumentError
from ...domain._shape import normalize_axis
from ..ops.indexing_cpu import axis_gather_index, scatter_along_axis
from ..ops.reduce_cpu import quantile_slices, reduce_slices
from ..ops import scan_cpu
from ..ops.signal_cpu import gradient_slices


class ArrayReductionsMixin:
    """
    Axis-wise and whole-array reductions, scans and sorting.

    Notes
    -----
    The host class must provide ``shape``, ``ndim``, ``size``, ``backend``,
    ``_data`` and ``_from_flat``.
    """

    def _reduce(self: IArray, name: str, axis: Optional[int]) -> Union[float, IArray]:
        if axis is None:
            value = reduce_slices(name, self._data[None, :])[0]
            if name in ("argmin", "argmax"):
                return int(value)
            return float(value)

        ax = normalize_axis(axis, self.ndim, name)
        slices = self._data[axis_gather_index(self.shape, ax)]
        out_shape = tuple(d for k, d in enumerate(self.shape) if k != ax) or (1,)
        return self._from_flat(reduce_slices(name, slices), out_shape, self.backend)

    def sum(self, axis: Optional[int] = None) -> Union[float, IArray]:
        """
        Sum of elements, over the whole array or along ``axis``.

        Parameters
        ----------
        axis : Optional[int]
            0-based axis in ``[0, ndim)``. ``None`` reduces everything.

        Returns
        -------
        float or NDArray

        Raises
        ------
        AxisOutOfBoundsError
            If ``axis`` is not in ``[0, ndim)``.
        """
        return self._reduce("sum", axis)

    def mean(self, axis: Optional[int] = None) -> Union[float, IArray]:
        """Arithmetic mean over the whole array or along ``axis``."""
        return self._reduce("mean", axis)

    def var(self, axis: Optional[int] = None) -> Union[float, IArray]:
        """
        Population variance (divide by ``N``).

        Computed in two passes: the mean, then the mean squared deviation.
        """
        return self._reduce("var", axis)

    def std(self, axis: Optional[int] = None) -> Union[float, IArray]:
        """Population standard deviation, ``sqrt(var)``."""
        return self._reduce("std", axis)

    def min(self, axis: Optional[int] = None) -> Union[float, IArray]:
        return self._reduce("min", axis)

    def max(self, axis: Optional[int] = None) -> Union[float, IArray]:
        return self._reduce("max", axis)

    def argmin(self, axis: Optional[int] = None) -> Union[int, IArray]:
        """
        Position of the minimum.

        Without ``axis``: the flat index of the first minimum. With ``axis``:
        for each remaining coordinate, the 0-based position of the first
        minimum *within that axis* (stored as float).
        """
        return self._reduce("argmin", axis)

    def argmax(self, axis: Optional[int] = None) -> Union[int, IArray]:
        """Position of the first maximum; see :meth:`argmin`."""
        return self._reduce("argmax", axis)

    def prod(self, axis: Optional[int] = None) -> Union[float, IArray]:
        return self._reduce("prod", axis)

    def median(self, axis: Optional[int] = None) -> Union[float, IArray]:
        """Median; the mean of the two middle values for an even count."""
        return self._reduce("median", axis)

    def ptp(self, axis: Optional[int] = None) -> Union[float, IArray]:
        """Peak to peak range, ``max - min``."""
        return self._reduce("ptp", axis)

    def all(self, axis: Optional[int] = None) -> Union[float, IArray]:
        """1.0 if every element is nonzero (NaN counts as nonzero), else 0.0."""
        return self._reduce("all", axis)

    def any(self, axis: Optional[int] = None) -> Union[float, IArray]:
        """1.0 if any element is nonzero (NaN counts as nonzero), else 0.0."""
        return self._reduce("any", axis)

    # ------------------------------------------------------------------
    # along-axis rewrites
    # ------------------------------------------------------------------

    def _rewrite(self: IArray, name: str, axis: Optional[int], fn) -> IArray:
        if axis is None:
            flat = fn(self._data[None, :])[0]
            return self._from_flat(np.ascontiguousarray(flat), (self.size,), self.backend)
        ax = normalize_axis(axis, self.ndim, name)
        slices = self._data[axis_gather_index(self.shape, ax)]
        return self._from_flat(
            scatter_along_axis(fn(slices), self.shape, ax), self.shape, self.backend
        )

    def cumsum(self, axis: Optional[int] = None) -> IArray:
        """
        Cumulative sum.

        Without ``axis`` the flattened buffer is scanned and the result has
        shape ``(size,)``; with ``axis`` the result keeps the input shape.
        """
        return self._rewrite("cumsum", axis, scan_cpu.cumsum_slices)

    def cumprod(self, axis: Optional[int] = None) -> IArray:
        """Cumulative product; shape rules as in :meth:`cumsum`."""
        return self._rewrite("cumprod", axis, scan_cpu.cumprod_slices)

    def sort(self, axis: Optional[int] = None) -> IArray:
        """
        Stable ascending sort along ``axis`` (default: the last axis).

        NaN values sort to the end.
        """
        ax = self.ndim - 1 if axis is None else axis
        return self._rewrite("sort", ax, scan_cpu.sort_slices)

    def argsort(self, axis: Optional[int] = None) -> IArray:
        """Stable sorting positions along ``axis`` (default: the last axis)."""
        ax = self.ndim - 1 if axis is None else axis
        return self._rewrite("argsort", ax, scan_cpu.argsort_slices)

    def diff(self: IArray, n: int = 1, axis: Optional[int] = None) -> IArray:
        """
        ``n``-th discrete difference along ``axis`` (default: the last axis).

        The axis shrinks from ``L`` to ``L - n``.

        Raises
        ------
        InvalidArgumentError
            If ``n < 1`` or ``n >= L`` (the result would have an empty axis).
        """
        ax = normalize_axis(self.ndim - 1 if axis is None else axis, self.ndim, "diff")
        length = self.shape[ax]
        if int(n) != n or n < 1 or n >= length:
            raise InvalidArgumentError(
                "diff", "n", n, f"must be an integer in [1, {length - 1}] for an axis of length {length}"
            )
        slices = self._data[axis_gather_index(self.shape, ax)]
        out_shape = tuple(length - int(n) if k == ax else d for k, d in enumerate(self.shape))
        out = scatter_along_axis(scan_cpu.diff_slices(slices, int(n)), out_shape, ax)
        return self._from_flat(out, out_shape, self.backend)

    # ------------------------------------------------------------------
    # order statistics and derivatives
    # ------------------------------------------------------------------

    def quantile(self: IArray, q: float, axis: Optional[int] = None) -> Union[float, IArray]:
        """
        The ``q``-th quantile, interpolating linearly between order statistics.

        Parameters
        ----------
        q : float
            Quantile in ``[0, 1]``; ``0.5`` is the median.
        axis : Optional[int]
            0-based axis in ``[0, ndim)``. ``None`` uses every element.

        Returns
        -------
        float or NDArray
            Shape rules as for :meth:`sum`. A slice holding NaN yields NaN.

        Raises
        ------
        InvalidArgumentError
            If ``q`` is not a number in ``[0, 1]``.
        """
        return self._quantile("quantile", _fraction("quantile", q, 1.0), axis)

    def percentile(self: IArray, q: float, axis: Optional[int] = None) -> Union[float, IArray]:
        """The ``q``-th percentile, ``q`` in ``[0, 100]``; see :meth:`quantile`."""
        return self._quantile("percentile", _fraction("percentile", q, 100.0), axis)

    def _quantile(self: IArray, name: str, fraction: float, axis: Optional[int]) -> Union[float, IArray]:
        if axis is None:
            return float(quantile_slices(self._data[None, :], fraction)[0])
        ax = normalize_axis(axis, self.ndim, name)
        slices = self._data[axis_gather_index(self.shape, ax)]
        out_shape = tuple(d for k, d in enumerate(self.shape) if k != ax) or (1,)
        return self._from_flat(quantile_slices(slices, fraction), out_shape, self.backend)

    def gradient(
        self: IArray, spacing: float = 1.0, axis: Optional[int] = None
    ) -> Union[IArray, List[IArray]]:
        """
        Numerical derivative by finite differences.

        Central differences are used in the interior and one-sided
        differences at both ends of each axis; an axis of length 1 has
        gradient 0.

        Parameters
        ----------
        spacing : float
            Sample distance ``h``, finite and nonzero.
        axis : Optional[int]
            Differentiate along this axis only. Without ``axis`` a 1-D input
            returns one array and an N-D input returns one array per axis.

        Returns
        -------
        NDArray or list of NDArray
            Arrays of the input's shape.
        """
        h = self._scalar_value(spacing)
        if not np.isfinite(h) or h == 0.0:
            raise InvalidArgumentError("gradient", "spacing", spacing, "must be finite and nonzero")
        if axis is not None:
            ax = normalize_axis(axis, self.ndim, "gradient")
            return self._rewrite("gradient", ax, lambda s: gradient_slices(s, h))
        grads = [
            self._rewrite("gradient", k, lambda s: gradient_slices(s, h)) for k in range(self.ndim)
        ]
        return grads[0] if self.ndim == 1 else grads


def _fraction(op: str, q: Any, scale: float) -> float:
    if isinstance(q, bool) or not isinstance(q, Real) or not 0 <= q <= scale:
        raise InvalidArgumentError(op, "q", q, f"must be a number in [0, {scale:g}]")
    return float(q) / scale
