"""
Elementwise mixin defining the public arithmetic, comparison and unary math
API of :class:`~ndcore.infrastructure.array.NDArray`.

The mixin owns the *shape* half of every elementwise operation:

- operand lifting (scalars, host sequences, arrays)
- broadcasting both operands to a common shape
- building the result array

The *numeric* half is delegated to two kernels, :meth:`_binary_kernel` and
:meth:`_unary_kernel`, declared here as interface methods. Their concrete
implementations are registered per backend through the array control-path
manager (see ``_array_binary.py`` and ``_array_unary.py``) and selected at
runtime from ``self.backend``.
"""

from __future__ import annotations

from abc import ABC
from typing import Any, Optional

import numpy as np

from .....domain._array import IArray
from .....domain._broadcast import broadcast_shape
from .....domain._errors import InvalidArgumentError
from ....ops.broadcast_cpu import broadcast_to_flat


class ArrayMixinElementwise(ABC):
    """
    Abstract mixin providing elementwise operations.

    Notes
    -----
    The host class must provide ``shape``, ``backend``, ``_data``,
    ``_from_flat`` and ``_lift``.
    """

    # ------------------------------------------------------------------
    # backend kernels (control paths)
    # ------------------------------------------------------------------

    def _binary_kernel(self, op: str, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        """
        Evaluate binary operation ``op`` on two equally sized flat buffers.

        Parameters
        ----------
        op : str
            Operation name (``"add"``, ``"mod"``, ``"greater"``, ...).
        a, b : np.ndarray
            Flat float64 buffers of identical length.

        Returns
        -------
        np.ndarray
            New flat float64 buffer of the same length.

        Notes
        -----
        Implementations must never raise for floating-point domain issues:
        division by zero yields NaN for ``div``, ``mod`` and ``fmod``.
        """

    def _unary_kernel(self, op: str, a: np.ndarray) -> np.ndarray:
        """
        Evaluate unary operation ``op`` on a flat buffer.

        Domain errors propagate as NaN/inf following IEEE-754.
        """

    def _clip_kernel(
        self, a: np.ndarray, lo: Optional[float], hi: Optional[float]
    ) -> np.ndarray:
        """Clamp a flat buffer to ``[lo, hi]``; ``None`` bounds are open."""

    # ------------------------------------------------------------------
    # shared plumbing
    # ------------------------------------------------------------------

    def _binary(self: IArray, other: Any, op: str, reflected: bool = False) -> IArray:
        other_arr = self._lift(other)
        lhs, rhs = (other_arr, self) if reflected else (self, other_arr)
        out_shape = broadcast_shape(lhs.shape, rhs.shape)
        a = broadcast_to_flat(lhs._data, lhs.shape, out_shape)
        b = broadcast_to_flat(rhs._data, rhs.shape, out_shape)
        return self._from_flat(self._binary_kernel(op, a, b), out_shape, self.backend)

    def _unary(self: IArray, op: str) -> IArray:
        return self._from_flat(self._unary_kernel(op, self._data), self.shape, self.backend)

    # ------------------------------------------------------------------
    # arithmetic
    # ------------------------------------------------------------------

    def add(self, other: Any) -> IArray:
        """Elementwise ``self + other`` with broadcasting."""
        return self._binary(other, "add")

    def sub(self, other: Any) -> IArray:
        """Elementwise ``self - other`` with broadcasting."""
        return self._binary(other, "sub")

    def mul(self, other: Any) -> IArray:
        """Elementwise ``self * other`` with broadcasting."""
        return self._binary(other, "mul")

    def div(self, other: Any) -> IArray:
        """
        Elementwise true division with broadcasting.

        Elements whose divisor is zero become NaN; the call never raises.
        """
        return self._binary(other, "div")

    def pow(self, other: Any) -> IArray:
        """Elementwise ``self ** other`` with broadcasting."""
        return self._binary(other, "pow")

    def mod(self, other: Any) -> IArray:
        """
        Elementwise floor-mod: ``a - floor(a / b) * b``.

        The result takes the sign of the divisor. A zero divisor yields NaN.

        See Also
        --------
        fmod : truncated remainder (sign of the dividend)
        """
        return self._binary(other, "mod")

    def fmod(self, other: Any) -> IArray:
        """
        Elementwise truncated remainder (C ``fmod``).

        The result takes the sign of the dividend. A zero divisor yields NaN.
        """
        return self._binary(other, "fmod")

    def arctan2(self, other: Any) -> IArray:
        """Elementwise ``atan2(self, other)``."""
        return self._binary(other, "arctan2")

    def maximum(self, other: Any) -> IArray:
        """Elementwise maximum; NaN if either operand is NaN."""
        return self._binary(other, "maximum")

    def minimum(self, other: Any) -> IArray:
        """Elementwise minimum; NaN if either operand is NaN."""
        return self._binary(other, "minimum")

    # ------------------------------------------------------------------
    # comparison (1.0 for true, 0.0 for false)
    # ------------------------------------------------------------------

    def equal(self, other: Any) -> IArray:
        return self._binary(other, "equal")

    def not_equal(self, other: Any) -> IArray:
        return self._binary(other, "not_equal")

    def greater(self, other: Any) -> IArray:
        return self._binary(other, "greater")

    def greater_equal(self, other: Any) -> IArray:
        return self._binary(other, "greater_equal")

    def less(self, other: Any) -> IArray:
        return self._binary(other, "less")

    def less_equal(self, other: Any) -> IArray:
        return self._binary(other, "less_equal")

    # ------------------------------------------------------------------
    # unary math
    # ------------------------------------------------------------------

    def neg(self) -> IArray:
        return self._unary("neg")

    def abs(self) -> IArray:
        return self._unary("abs")

    def sqrt(self) -> IArray:
        """Elementwise square root; negative inputs give NaN."""
        return self._unary("sqrt")

    def exp(self) -> IArray:
        return self._unary("exp")

    def expm1(self) -> IArray:
        return self._unary("expm1")

    def log(self) -> IArray:
        """Natural logarithm; ``log(0) = -inf`` and negative inputs give NaN."""
        return self._unary("log")

    def log2(self) -> IArray:
        return self._unary("log2")

    def log10(self) -> IArray:
        return self._unary("log10")

    def log1p(self) -> IArray:
        return self._unary("log1p")

    def sin(self) -> IArray:
        return self._unary("sin")

    def cos(self) -> IArray:
        return self._unary("cos")

    def tan(self) -> IArray:
        return self._unary("tan")

    def arcsin(self) -> IArray:
        return self._unary("arcsin")

    def arccos(self) -> IArray:
        return self._unary("arccos")

    def arctan(self) -> IArray:
        return self._unary("arctan")

    def sinh(self) -> IArray:
        return self._unary("sinh")

    def cosh(self) -> IArray:
        return self._unary("cosh")

    def tanh(self) -> IArray:
        return self._unary("tanh")

    def arcsinh(self) -> IArray:
        return self._unary("arcsinh")

    def arccosh(self) -> IArray:
        return self._unary("arccosh")

    def arctanh(self) -> IArray:
        return self._unary("arctanh")

    def floor(self) -> IArray:
        return self._unary("floor")

    def ceil(self) -> IArray:
        return self._unary("ceil")

    def round(self) -> IArray:
        """Round to the nearest integer, ties to even."""
        return self._unary("round")

    def sign(self) -> IArray:
        """
        Elementwise sign.

        Returns exactly -1.0, 0.0 or 1.0 for every non-NaN input (infinities
        included, ``-0.0`` maps to ``0.0``). ``sign(NaN)`` is NaN.
        """
        return self._unary("sign")

    def isnan(self) -> IArray:
        return self._unary("isnan")

    def isinf(self) -> IArray:
        return self._unary("isinf")

    def isfinite(self) -> IArray:
        return self._unary("isfinite")

    def clip(self, lo: Optional[float] = None, hi: Optional[float] = None) -> IArray:
        """
        Clamp every element to ``[lo, hi]``.

        Parameters
        ----------
        lo, hi : Optional[float]
            Scalar bounds; ``None`` leaves that side open. At least one
            bound is required.

        Raises
        ------
        InvalidArgumentError
            If both bounds are ``None`` or ``lo > hi``.
        """
        if lo is None and hi is None:
            raise InvalidArgumentError("clip", "lo/hi", (lo, hi), "at least one bound is required")
        lo_f = None if lo is None else self._scalar_value(lo)
        hi_f = None if hi is None else self._scalar_value(hi)
        if lo_f is not None and hi_f is not None and lo_f > hi_f:
            raise InvalidArgumentError("clip", "lo", lo, f"lower bound exceeds upper bound {hi!r}")
        return self._from_flat(self._clip_kernel(self._data, lo_f, hi_f), self.shape, self.backend)

    # ------------------------------------------------------------------
    # operators
    # ------------------------------------------------------------------

    def __add__(self, other: Any) -> IArray:
        return self._binary(other, "add")

    def __radd__(self, other: Any) -> IArray:
        return self._binary(other, "add", reflected=True)

    def __sub__(self, other: Any) -> IArray:
        return self._binary(other, "sub")

    def __rsub__(self, other: Any) -> IArray:
        return self._binary(other, "sub", reflected=True)

    def __mul__(self, other: Any) -> IArray:
        return self._binary(other, "mul")

    def __rmul__(self, other: Any) -> IArray:
        return self._binary(other, "mul", reflected=True)

    def __truediv__(self, other: Any) -> IArray:
        return self._binary(other, "div")

    def __rtruediv__(self, other: Any) -> IArray:
        return self._binary(other, "div", reflected=True)

    def __pow__(self, other: Any) -> IArray:
        return self._binary(other, "pow")

    def __rpow__(self, other: Any) -> IArray:
        return self._binary(other, "pow", reflected=True)

    def __mod__(self, other: Any) -> IArray:
        return self._binary(other, "mod")

    def __rmod__(self, other: Any) -> IArray:
        return self._binary(other, "mod", reflected=True)

    def __neg__(self) -> IArray:
        return self._unary("neg")

    def __abs__(self) -> IArray:
        return self._unary("abs")

    def __eq__(self, other: Any) -> IArray:  # type: ignore[override]
        return self._binary(other, "equal")

    def __ne__(self, other: Any) -> IArray:  # type: ignore[override]
        return self._binary(other, "not_equal")

    def __gt__(self, other: Any) -> IArray:
        return self._binary(other, "greater")

    def __ge__(self, other: Any) -> IArray:
        return self._binary(other, "greater_equal")

    def __lt__(self, other: Any) -> IArray:
        return self._binary(other, "less")

    def __le__(self, other: Any) -> IArray:
        return self._binary(other, "less_equal")

    __hash__ = None  # type: ignore[assignment]
