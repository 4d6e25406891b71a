"""
Functional interface to the array engine.

Every operation of :class:`NDArray` is also available here as a plain
function accepting host values (scalars, nested sequences, NumPy arrays)
as well as arrays. Host values are ingested once via :func:`asarray`; when
an operation mixes an array with a host value, the host value adopts the
array's backend.

Scalar-scalar binary operations return a length-1 array.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple, Union

import numpy as np

from ..domain._broadcast import broadcast_shapes
from ..domain._errors import InvalidArgumentError, SizeMismatchError, UnsupportedOperandsError
from ..domain._operand import is_scalar
from ..domain._shape import ShapeLike, _is_int
from ._creation import asarray
from ._settings import check_allocation
from .array import NDArray
from .array._conversion import to_float
from .ops.broadcast_cpu import broadcast_to_flat
from .ops.search_cpu import (
    bincount_flat,
    histogram_flat,
    interp_flat,
    searchsorted_flat,
    unique_flat,
)
from .ops.signal_cpu import MODES, convolve_flat, correlate_flat

ArrayLike = Any
Result = Union[float, NDArray]


def _binary(op: str, a: ArrayLike, b: ArrayLike) -> NDArray:
    if isinstance(a, NDArray):
        return a._binary(b, op)
    if isinstance(b, NDArray):
        return b._binary(a, op, reflected=True)
    return asarray(a)._binary(b, op)


def _unary(op: str, a: ArrayLike) -> NDArray:
    return asarray(a)._unary(op)


# ----------------------------------------------------------------------
# binary
# ----------------------------------------------------------------------


def add(a: ArrayLike, b: ArrayLike) -> NDArray:
    """Elementwise ``a + b`` with broadcasting."""
    return _binary("add", a, b)


def sub(a: ArrayLike, b: ArrayLike) -> NDArray:
    """Elementwise ``a - b`` with broadcasting."""
    return _binary("sub", a, b)


def mul(a: ArrayLike, b: ArrayLike) -> NDArray:
    """Elementwise ``a * b`` with broadcasting."""
    return _binary("mul", a, b)


def div(a: ArrayLike, b: ArrayLike) -> NDArray:
    """Elementwise ``a / b``; zero divisors give NaN."""
    return _binary("div", a, b)


def pow(a: ArrayLike, b: ArrayLike) -> NDArray:
    """Elementwise ``a ** b``."""
    return _binary("pow", a, b)


def mod(a: ArrayLike, b: ArrayLike) -> NDArray:
    """Floor-mod ``a - floor(a / b) * b``; zero divisors give NaN."""
    return _binary("mod", a, b)


def fmod(a: ArrayLike, b: ArrayLike) -> NDArray:
    """Truncated remainder (sign of ``a``); zero divisors give NaN."""
    return _binary("fmod", a, b)


def arctan2(a: ArrayLike, b: ArrayLike) -> NDArray:
    return _binary("arctan2", a, b)


def maximum(a: ArrayLike, b: ArrayLike) -> NDArray:
    return _binary("maximum", a, b)


def minimum(a: ArrayLike, b: ArrayLike) -> NDArray:
    return _binary("minimum", a, b)


def equal(a: ArrayLike, b: ArrayLike) -> NDArray:
    """1.0 where ``a == b``, else 0.0."""
    return _binary("equal", a, b)


def not_equal(a: ArrayLike, b: ArrayLike) -> NDArray:
    return _binary("not_equal", a, b)


def greater(a: ArrayLike, b: ArrayLike) -> NDArray:
    """1.0 where ``a > b``, else 0.0."""
    return _binary("greater", a, b)


def greater_equal(a: ArrayLike, b: ArrayLike) -> NDArray:
    return _binary("greater_equal", a, b)


def less(a: ArrayLike, b: ArrayLike) -> NDArray:
    """1.0 where ``a < b``, else 0.0."""
    return _binary("less", a, b)


def less_equal(a: ArrayLike, b: ArrayLike) -> NDArray:
    return _binary("less_equal", a, b)


# ----------------------------------------------------------------------
# unary
# ----------------------------------------------------------------------


def neg(a: ArrayLike) -> NDArray:
    return _unary("neg", a)


def abs(a: ArrayLike) -> NDArray:
    return _unary("abs", a)


def sqrt(a: ArrayLike) -> NDArray:
    return _unary("sqrt", a)


def exp(a: ArrayLike) -> NDArray:
    return _unary("exp", a)


def expm1(a: ArrayLike) -> NDArray:
    return _unary("expm1", a)


def log(a: ArrayLike) -> NDArray:
    return _unary("log", a)


def log2(a: ArrayLike) -> NDArray:
    return _unary("log2", a)


def log10(a: ArrayLike) -> NDArray:
    return _unary("log10", a)


def log1p(a: ArrayLike) -> NDArray:
    return _unary("log1p", a)


def sin(a: ArrayLike) -> NDArray:
    return _unary("sin", a)


def cos(a: ArrayLike) -> NDArray:
    return _unary("cos", a)


def tan(a: ArrayLike) -> NDArray:
    return _unary("tan", a)


def arcsin(a: ArrayLike) -> NDArray:
    return _unary("arcsin", a)


def arccos(a: ArrayLike) -> NDArray:
    return _unary("arccos", a)


def arctan(a: ArrayLike) -> NDArray:
    return _unary("arctan", a)


def sinh(a: ArrayLike) -> NDArray:
    return _unary("sinh", a)


def cosh(a: ArrayLike) -> NDArray:
    return _unary("cosh", a)


def tanh(a: ArrayLike) -> NDArray:
    return _unary("tanh", a)


def arcsinh(a: ArrayLike) -> NDArray:
    return _unary("arcsinh", a)


def arccosh(a: ArrayLike) -> NDArray:
    return _unary("arccosh", a)


def arctanh(a: ArrayLike) -> NDArray:
    return _unary("arctanh", a)


def floor(a: ArrayLike) -> NDArray:
    return _unary("floor", a)


def ceil(a: ArrayLike) -> NDArray:
    return _unary("ceil", a)


def round(a: ArrayLike) -> NDArray:
    """Round half to even."""
    return _unary("round", a)


def sign(a: ArrayLike) -> NDArray:
    """Exactly -1.0, 0.0 or 1.0 per element; NaN stays NaN."""
    return _unary("sign", a)


def isnan(a: ArrayLike) -> NDArray:
    return _unary("isnan", a)


def isinf(a: ArrayLike) -> NDArray:
    return _unary("isinf", a)


def isfinite(a: ArrayLike) -> NDArray:
    return _unary("isfinite", a)


def clip(a: ArrayLike, lo: Optional[float] = None, hi: Optional[float] = None) -> NDArray:
    """Clamp to ``[lo, hi]``; see :meth:`NDArray.clip`."""
    return asarray(a).clip(lo, hi)


def where(cond: ArrayLike, x: ArrayLike, y: ArrayLike) -> NDArray:
    """
    Select from ``x`` where ``cond != 0``, otherwise from ``y``.

    ``cond``, ``x`` and ``y`` are broadcast mutually to a common shape; any
    of them may be a scalar. A NaN condition counts as true.

    Raises
    ------
    BroadcastError
        If the three shapes are not mutually broadcastable.
    BackendMismatchError
        If array operands use different backends.
    """
    anchor = next((v for v in (cond, x, y) if isinstance(v, NDArray)), None)
    if anchor is None:
        anchor = asarray(cond)
    c, xa, ya = (anchor._lift(v) for v in (cond, x, y))
    shape = broadcast_shapes(c.shape, xa.shape, ya.shape)
    cb = broadcast_to_flat(c._data, c.shape, shape)
    xb = broadcast_to_flat(xa._data, xa.shape, shape)
    yb = broadcast_to_flat(ya._data, ya.shape, shape)
    return NDArray._from_flat(np.where(cb != 0.0, xb, yb), shape, anchor.backend)


# ----------------------------------------------------------------------
# reductions, scans, sorting
# ----------------------------------------------------------------------


def sum(a: ArrayLike, axis: Optional[int] = None) -> Result:
    return asarray(a).sum(axis)


def mean(a: ArrayLike, axis: Optional[int] = None) -> Result:
    return asarray(a).mean(axis)


def var(a: ArrayLike, axis: Optional[int] = None) -> Result:
    """Population variance."""
    return asarray(a).var(axis)


def std(a: ArrayLike, axis: Optional[int] = None) -> Result:
    """Population standard deviation."""
    return asarray(a).std(axis)


def min(a: ArrayLike, axis: Optional[int] = None) -> Result:
    return asarray(a).min(axis)


def max(a: ArrayLike, axis: Optional[int] = None) -> Result:
    return asarray(a).max(axis)


def argmin(a: ArrayLike, axis: Optional[int] = None) -> Union[int, NDArray]:
    return asarray(a).argmin(axis)


def argmax(a: ArrayLike, axis: Optional[int] = None) -> Union[int, NDArray]:
    return asarray(a).argmax(axis)


def prod(a: ArrayLike, axis: Optional[int] = None) -> Result:
    return asarray(a).prod(axis)


def median(a: ArrayLike, axis: Optional[int] = None) -> Result:
    return asarray(a).median(axis)


def ptp(a: ArrayLike, axis: Optional[int] = None) -> Result:
    return asarray(a).ptp(axis)


def all(a: ArrayLike, axis: Optional[int] = None) -> Result:
    return asarray(a).all(axis)


def any(a: ArrayLike, axis: Optional[int] = None) -> Result:
    return asarray(a).any(axis)


def cumsum(a: ArrayLike, axis: Optional[int] = None) -> NDArray:
    return asarray(a).cumsum(axis)


def cumprod(a: ArrayLike, axis: Optional[int] = None) -> NDArray:
    return asarray(a).cumprod(axis)


def sort(a: ArrayLike, axis: Optional[int] = None) -> NDArray:
    return asarray(a).sort(axis)


def argsort(a: ArrayLike, axis: Optional[int] = None) -> NDArray:
    return asarray(a).argsort(axis)


def diff(a: ArrayLike, n: int = 1, axis: Optional[int] = None) -> NDArray:
    return asarray(a).diff(n, axis)


# ----------------------------------------------------------------------
# element access and structure
# ----------------------------------------------------------------------


def get(a: ArrayLike, indices: Union[int, Sequence[int]]) -> float:
    """Read the element at ``indices``."""
    return asarray(a).get(indices)


def set(a: ArrayLike, indices: Union[int, Sequence[int]], value: float) -> NDArray:
    """Return a copy of ``a`` with the element at ``indices`` replaced."""
    return asarray(a).set(indices, value)


def reshape(a: ArrayLike, shape: ShapeLike) -> NDArray:
    return asarray(a).reshape(shape)


def flatten(a: ArrayLike) -> NDArray:
    return asarray(a).flatten()


def squeeze(a: ArrayLike, axis: Optional[int] = None) -> NDArray:
    return asarray(a).squeeze(axis)


def expand_dims(a: ArrayLike, axis: int) -> NDArray:
    return asarray(a).expand_dims(axis)


def transpose(a: ArrayLike, perm: Optional[Sequence[int]] = None) -> NDArray:
    return asarray(a).transpose(perm)


def broadcast_to(a: ArrayLike, shape: ShapeLike) -> NDArray:
    return asarray(a).broadcast_to(shape)


def flip(a: ArrayLike, axis: Optional[int] = None) -> NDArray:
    return asarray(a).flip(axis)


def roll(a: ArrayLike, shift: int, axis: Optional[int] = None) -> NDArray:
    return asarray(a).roll(shift, axis)


def tile(a: ArrayLike, reps: Union[int, Sequence[int]]) -> NDArray:
    return asarray(a).tile(reps)


def repeat(a: ArrayLike, repeats: int, axis: Optional[int] = None) -> NDArray:
    return asarray(a).repeat(repeats, axis)


def pad(
    a: ArrayLike,
    pad_width: Union[int, Sequence[Any]],
    mode: str = "constant",
    constant_value: float = 0.0,
) -> NDArray:
    return asarray(a).pad(pad_width, mode, constant_value)


def insert(
    a: ArrayLike, index: Union[int, Sequence[int]], values: ArrayLike, axis: Optional[int] = None
) -> NDArray:
    """Insert constant slices; see :meth:`NDArray.insert`."""
    if not isinstance(a, NDArray) and isinstance(values, NDArray):
        a = values._lift(a)
    return asarray(a).insert(index, values, axis)


def delete(a: ArrayLike, index: Union[int, Sequence[int]], axis: Optional[int] = None) -> NDArray:
    return asarray(a).delete(index, axis)


def concatenate(arrays: Sequence[ArrayLike], axis: int = 0) -> NDArray:
    """Join arrays along an existing axis; see :meth:`NDArray.concatenate`."""
    return NDArray.concatenate(arrays, axis)


def stack(arrays: Sequence[ArrayLike], axis: int = 0) -> NDArray:
    """Join same-shape arrays along a new axis; see :meth:`NDArray.stack`."""
    return NDArray.stack(arrays, axis)


def split(
    a: ArrayLike, sections_or_indices: Union[int, Sequence[int]], axis: int = 0
) -> List[NDArray]:
    return asarray(a).split(sections_or_indices, axis)


# ----------------------------------------------------------------------
# order statistics, searching and counting
# ----------------------------------------------------------------------


def quantile(a: ArrayLike, q: float, axis: Optional[int] = None) -> Result:
    """Linearly interpolated quantile, ``q`` in ``[0, 1]``."""
    return asarray(a).quantile(q, axis)


def percentile(a: ArrayLike, q: float, axis: Optional[int] = None) -> Result:
    """Linearly interpolated percentile, ``q`` in ``[0, 100]``."""
    return asarray(a).percentile(q, axis)


def nonzero(a: ArrayLike) -> Tuple[NDArray, ...]:
    return asarray(a).nonzero()


def argwhere(a: ArrayLike) -> NDArray:
    return asarray(a).argwhere()


def searchsorted(a: ArrayLike, v: ArrayLike, side: str = "left") -> Union[int, NDArray]:
    """
    Positions at which ``v`` would be inserted to keep ``a`` sorted.

    Parameters
    ----------
    a : array_like
        Ascending 1-D array. The order is not verified.
    v : scalar or array_like
        Values to place.
    side : {"left", "right"}
        ``left`` returns the first suitable position, ``right`` the last.

    Returns
    -------
    int or NDArray
        An ``int`` for a scalar ``v``, otherwise an array of ``v``'s shape.

    Raises
    ------
    UnsupportedOperandsError
        If ``a`` is not 1-D.
    """
    if not isinstance(a, NDArray) and isinstance(v, NDArray):
        a = v._lift(a)
    arr = asarray(a)
    if arr.ndim != 1:
        raise UnsupportedOperandsError("searchsorted", (arr.ndim,))
    if side not in ("left", "right"):
        raise InvalidArgumentError("searchsorted", "side", side, "must be 'left' or 'right'")
    if is_scalar(v):
        return int(searchsorted_flat(arr._data, np.array([to_float(v)]), side)[0])
    values = arr._lift(v)
    return NDArray._from_flat(
        searchsorted_flat(arr._data, values._data, side), values.shape, arr.backend
    )


def unique(
    a: ArrayLike,
    return_index: bool = False,
    return_inverse: bool = False,
    return_counts: bool = False,
) -> Union[NDArray, Tuple[NDArray, ...]]:
    """
    Sorted distinct elements of the flattened input.

    Parameters
    ----------
    return_index : bool
        Also return the flat position of each value's first occurrence.
    return_inverse : bool
        Also return, for every input element, the position of its value in
        the result (shape ``(size,)``).
    return_counts : bool
        Also return the number of occurrences of each value.

    Returns
    -------
    NDArray or tuple of NDArray
        The values alone, or the values followed by the requested extras in
        the order listed above. All NaNs collapse into one trailing NaN.
    """
    arr = asarray(a)
    values, first, inverse, counts = unique_flat(arr._data)
    out = [NDArray._from_flat(values, (values.size,), arr.backend)]
    if return_index:
        out.append(NDArray._from_flat(first, (first.size,), arr.backend))
    if return_inverse:
        out.append(NDArray._from_flat(inverse, (inverse.size,), arr.backend))
    if return_counts:
        out.append(NDArray._from_flat(counts, (counts.size,), arr.backend))
    return out[0] if len(out) == 1 else tuple(out)


def histogram(
    a: ArrayLike, bins: int = 10, range: Optional[Sequence[float]] = None
) -> Tuple[NDArray, NDArray]:
    """
    Count the flattened input into equal-width bins.

    Parameters
    ----------
    bins : int
        Number of bins, at least 1.
    range : Optional[(float, float)]
        Lower and upper edge. Defaults to the smallest and largest
        non-NaN element. A zero-width range is widened to ``[lo - 0.5, hi + 0.5]``.

    Returns
    -------
    (NDArray, NDArray)
        ``counts`` of shape ``(bins,)`` and ``edges`` of shape ``(bins + 1,)``.
        Every bin is half-open except the last, which includes the upper
        edge; values outside the range and NaNs are not counted.

    Raises
    ------
    InvalidArgumentError
        For a non-positive ``bins``, a malformed or reversed ``range``, or
        an input without any non-NaN element when ``range`` is omitted.
    """
    arr = asarray(a)
    if not _is_int(bins) or bins < 1:
        raise InvalidArgumentError("histogram", "bins", bins, "must be a positive integer")
    if range is None:
        finite = arr._data[~np.isnan(arr._data)]
        if finite.size == 0:
            raise InvalidArgumentError("histogram", "a", arr.shape, "holds no non-NaN element")
        lo, hi = float(finite.min()), float(finite.max())
    else:
        bounds = list(range)
        if len(bounds) != 2:
            raise InvalidArgumentError("histogram", "range", range, "must be a (lo, hi) pair")
        lo, hi = (to_float(b) for b in bounds)
        if not (np.isfinite(lo) and np.isfinite(hi)) or lo > hi:
            raise InvalidArgumentError("histogram", "range", range, "must be finite with lo <= hi")
    if lo == hi:
        lo, hi = lo - 0.5, hi + 0.5
    check_allocation(int(bins) + 1)
    counts, edges = histogram_flat(arr._data, int(bins), lo, hi)
    return (
        NDArray._from_flat(counts, (counts.size,), arr.backend),
        NDArray._from_flat(edges, (edges.size,), arr.backend),
    )


def bincount(a: ArrayLike, weights: Optional[ArrayLike] = None, minlength: int = 0) -> NDArray:
    """
    Occurrences of every non-negative integer value in the flattened input.

    Parameters
    ----------
    weights : Optional[array_like]
        Same size as ``a``; bin ``k`` sums the weights of the elements equal
        to ``k`` instead of counting them.
    minlength : int
        Minimum result length.

    Returns
    -------
    NDArray
        Shape ``(max(max(a) + 1, minlength),)``.

    Raises
    ------
    InvalidArgumentError
        If an element is negative, fractional or not finite, or
        ``minlength`` is negative.
    SizeMismatchError
        If ``weights`` does not have the size of ``a``.
    """
    arr = asarray(a)
    data = arr._data
    if not np.all(np.isfinite(data)) or np.any(data < 0.0) or np.any(data != np.floor(data)):
        raise InvalidArgumentError("bincount", "a", arr.shape, "elements must be non-negative integers")
    if not _is_int(minlength) or minlength < 0:
        raise InvalidArgumentError("bincount", "minlength", minlength, "must be a non-negative integer")
    w = None
    if weights is not None:
        w = arr._lift(weights)._data
        if w.size != arr.size:
            raise SizeMismatchError("bincount", arr.size, int(w.size))
    length = int(np.max(data)) + 1
    if minlength > length:
        length = int(minlength)
    check_allocation(length)
    out = bincount_flat(data, w, length)
    return NDArray._from_flat(out, (out.size,), arr.backend)


def interp(
    x: ArrayLike,
    xp: ArrayLike,
    fp: ArrayLike,
    left: Optional[float] = None,
    right: Optional[float] = None,
) -> Union[float, NDArray]:
    """
    Piecewise-linear interpolation of the samples ``(xp, fp)`` at ``x``.

    Parameters
    ----------
    x : scalar or array_like
        Evaluation points.
    xp : array_like
        Non-decreasing 1-D sample positions.
    fp : array_like
        1-D sample values, same length as ``xp``.
    left, right : Optional[float]
        Results for ``x < xp[0]`` and ``x > xp[-1]``; default ``fp[0]`` and
        ``fp[-1]``.

    Returns
    -------
    float or NDArray
        A float for a scalar ``x``, otherwise an array of ``x``'s shape.

    Raises
    ------
    UnsupportedOperandsError
        If ``xp`` or ``fp`` is not 1-D.
    SizeMismatchError
        If ``xp`` and ``fp`` differ in length.
    InvalidArgumentError
        If ``xp`` decreases anywhere.
    """
    anchor = next((v for v in (x, xp, fp) if isinstance(v, NDArray)), None)
    if anchor is None:
        anchor = asarray(xp)
    xs, fs = anchor._lift(xp), anchor._lift(fp)
    if xs.ndim != 1 or fs.ndim != 1:
        raise UnsupportedOperandsError("interp", (xs.ndim, fs.ndim))
    if xs.size != fs.size:
        raise SizeMismatchError("interp", xs.size, fs.size)
    if np.any(np.diff(xs._data) < 0.0):
        raise InvalidArgumentError("interp", "xp", xs.shape, "must be non-decreasing")
    lo = fs._data[0] if left is None else anchor._scalar_value(left)
    hi = fs._data[-1] if right is None else anchor._scalar_value(right)
    if is_scalar(x):
        return float(interp_flat(np.array([to_float(x)]), xs._data, fs._data, lo, hi)[0])
    points = anchor._lift(x)
    out = interp_flat(points._data, xs._data, fs._data, lo, hi)
    return NDArray._from_flat(out, points.shape, anchor.backend)


# ----------------------------------------------------------------------
# signal processing
# ----------------------------------------------------------------------


def _signal_operands(op: str, a: ArrayLike, v: ArrayLike, mode: str) -> Tuple[NDArray, NDArray]:
    if not isinstance(a, NDArray) and isinstance(v, NDArray):
        a = v._lift(a)
    x = asarray(a)
    y = x._lift(v)
    if x.ndim != 1 or y.ndim != 1:
        raise UnsupportedOperandsError(op, (x.ndim, y.ndim))
    if mode not in MODES:
        raise InvalidArgumentError(op, "mode", mode, f"must be one of {MODES}")
    return x, y


def convolve(a: ArrayLike, v: ArrayLike, mode: str = "full") -> NDArray:
    """
    Discrete linear convolution of two 1-D arrays.

    ``mode`` is ``"full"`` (length ``N + M - 1``), ``"same"`` (length
    ``max(N, M)``) or ``"valid"`` (length ``max(N, M) - min(N, M) + 1``).
    """
    x, y = _signal_operands("convolve", a, v, mode)
    out = convolve_flat(x._data, y._data, mode)
    return NDArray._from_flat(out, (out.size,), x.backend)


def correlate(a: ArrayLike, v: ArrayLike, mode: str = "full") -> NDArray:
    """Cross-correlation of two 1-D arrays; modes as in :func:`convolve`."""
    x, y = _signal_operands("correlate", a, v, mode)
    out = correlate_flat(x._data, y._data, mode)
    return NDArray._from_flat(out, (out.size,), x.backend)


def gradient(
    a: ArrayLike, spacing: float = 1.0, axis: Optional[int] = None
) -> Union[NDArray, List[NDArray]]:
    """Finite-difference derivative; see :meth:`NDArray.gradient`."""
    return asarray(a).gradient(spacing, axis)


# ----------------------------------------------------------------------
# linear algebra
# ----------------------------------------------------------------------


def dot(a: ArrayLike, b: ArrayLike) -> Result:
    """
    Inner product (1-D . 1-D, returns a float), matrix-matrix (2-D . 2-D)
    or matrix-vector (2-D . 1-D) product.
    """
    if not isinstance(a, NDArray) and isinstance(b, NDArray):
        a = b._lift(a)
    return asarray(a).dot(b)


def outer(a: ArrayLike, b: ArrayLike) -> NDArray:
    if not isinstance(a, NDArray) and isinstance(b, NDArray):
        a = b._lift(a)
    return asarray(a).outer(b)


def diagonal(a: ArrayLike, k: int = 0) -> NDArray:
    return asarray(a).diagonal(k)


def trace(a: ArrayLike) -> float:
    return asarray(a).trace()


def diag(v: ArrayLike) -> NDArray:
    """
    Build a square matrix from a 1-D diagonal, or extract the main
    diagonal of a 2-D array.
    """
    arr = asarray(v)
    if arr.ndim == 1:
        n = arr.size
        out = np.zeros(n * n, dtype=np.float64)
        out[np.arange(n) * (n + 1)] = arr._data
        return NDArray._from_flat(out, (n, n), arr.backend)
    if arr.ndim == 2:
        return arr.diagonal()
    raise UnsupportedOperandsError("diag", (arr.ndim,))


def array_equal(a: ArrayLike, b: ArrayLike) -> bool:
    """True if both operands have the same shape and equal elements."""
    x, y = asarray(a), asarray(b)
    return x.shape == y.shape and bool(np.array_equal(x._data, y._data))


__all__ = [
    "add", "sub", "mul", "div", "pow", "mod", "fmod", "arctan2", "maximum", "minimum",
    "equal", "not_equal", "greater", "greater_equal", "less", "less_equal",
    "neg", "abs", "sqrt", "exp", "expm1", "log", "log2", "log10", "log1p",
    "sin", "cos", "tan", "arcsin", "arccos", "arctan", "sinh", "cosh", "tanh",
    "arcsinh", "arccosh", "arctanh", "floor", "ceil", "round", "sign",
    "isnan", "isinf", "isfinite", "clip", "where",
    "sum", "mean", "var", "std", "min", "max", "argmin", "argmax", "prod",
    "median", "ptp", "all", "any", "cumsum", "cumprod", "sort", "argsort", "diff",
    "get", "set", "reshape", "flatten", "squeeze", "expand_dims", "transpose",
    "broadcast_to", "flip", "roll", "tile", "repeat", "pad", "insert", "delete",
    "concatenate", "stack", "split",
    "quantile", "percentile", "nonzero", "argwhere", "searchsorted", "unique",
    "histogram", "bincount", "interp", "convolve", "correlate", "gradient",
    "dot", "outer", "diagonal", "trace", "diag", "array_equal",
]
