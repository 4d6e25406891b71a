"""
Array construction and conversion.

Factories allocate ``numel(shape)`` float64 elements and validate shapes
with :func:`~ndcore.domain._shape.normalize_shape`. Every factory accepts an
optional ``backend``; without one the configured default is used.
"""

from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Any, List, Optional, Union

import numpy as np

from ..domain._backend import Backend
from ..domain._errors import InvalidArgumentError, InvalidShapeError
from ..domain._shape import ShapeLike, normalize_shape, numel
from ._settings import check_allocation, default_backend
from .array import NDArray
from .ops import random_cpu

BackendLike = Optional[Union[str, Backend]]


def _backend(backend: BackendLike) -> Backend:
    return Backend(backend) if backend is not None else default_backend()


def _finite(op: str, name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgumentError(op, name, value, "must be a real number")
    try:
        v = float(value)
    except OverflowError:
        v = math.inf
    if not math.isfinite(v):
        raise InvalidArgumentError(op, name, value, "must be finite")
    return v


def array(data: Any, *, backend: BackendLike = None) -> NDArray:
    """
    Build an array from a scalar, (nested) sequence, NumPy array or array.

    Always copies. Equivalent to :func:`from_nested`.
    """
    return NDArray(data, backend=backend)


def from_nested(data: Any, *, backend: BackendLike = None) -> NDArray:
    """
    Parse a nested sequence into an array.

    Shape is inferred from nesting depth and per-level length.

    Raises
    ------
    ShapeMismatchError
        If sibling sub-sequences differ in length or depth.
    InvalidElementError
        If a leaf is not a real number.
    InvalidShapeError
        If any sequence is empty.
    """
    return NDArray(data, backend=backend)


def asarray(data: Any, *, backend: BackendLike = None) -> NDArray:
    """Like :func:`array`, but returns ``data`` itself when no conversion is needed."""
    if isinstance(data, NDArray) and (backend is None or data.backend == Backend(backend)):
        return data
    return NDArray(data, backend=backend)


def to_nested(a: NDArray) -> List[Any]:
    """Inverse of :func:`from_nested`: nested lists of floats."""
    return asarray(a).tolist()


def full(shape: ShapeLike, value: float, *, backend: BackendLike = None) -> NDArray:
    """
    Array of ``shape`` filled with ``value``.

    Raises
    ------
    InvalidShapeError
        If ``shape`` is empty or has a non-positive dimension.
    """
    dims = normalize_shape(shape)
    check_allocation(numel(dims))
    fill = NDArray._scalar_value(value)
    return NDArray._from_flat(np.full(numel(dims), fill, dtype=np.float64), dims, _backend(backend))


def zeros(shape: ShapeLike, *, backend: BackendLike = None) -> NDArray:
    """Array of zeros."""
    return full(shape, 0.0, backend=backend)


def ones(shape: ShapeLike, *, backend: BackendLike = None) -> NDArray:
    """Array of ones."""
    return full(shape, 1.0, backend=backend)


def full_like(a: Any, value: float, *, backend: BackendLike = None) -> NDArray:
    src = asarray(a)
    return full(src.shape, value, backend=backend if backend is not None else src.backend)


def zeros_like(a: Any, *, backend: BackendLike = None) -> NDArray:
    return full_like(a, 0.0, backend=backend)


def ones_like(a: Any, *, backend: BackendLike = None) -> NDArray:
    return full_like(a, 1.0, backend=backend)


def copy(a: Any) -> NDArray:
    """Independent copy of ``a``."""
    return asarray(a).copy()


def arange(
    start: float,
    stop: Optional[float] = None,
    step: float = 1.0,
    *,
    backend: BackendLike = None,
) -> NDArray:
    """
    Evenly stepped values in ``[start, stop)``.

    ``arange(stop)`` means ``arange(0, stop, 1)``. Produces
    ``ceil((stop - start) / step)`` elements ``start + i * step``.

    Raises
    ------
    InvalidArgumentError
        If ``step == 0`` or an argument is not a finite real number.
    InvalidShapeError
        If ``step`` does not move from ``start`` toward ``stop`` (the range
        would be empty, and empty arrays do not exist).
    """
    if stop is None:
        start, stop = 0.0, start
    lo = _finite("arange", "start", start)
    hi = _finite("arange", "stop", stop)
    st = _finite("arange", "step", step)
    if st == 0.0:
        raise InvalidArgumentError("arange", "step", step, "must be nonzero")
    n = math.ceil((hi - lo) / st)
    if n <= 0:
        # arrays have no zero-length axes, so an empty range is an error
        raise InvalidShapeError(
            (0,), f"arange({start!r}, {stop!r}, {step!r}) produces no elements"
        )
    check_allocation(n)
    values = lo + np.arange(n, dtype=np.float64) * st
    return NDArray._from_flat(values, (n,), _backend(backend))


def linspace(
    start: float, stop: float, num: int = 50, *, backend: BackendLike = None
) -> NDArray:
    """
    ``num`` evenly spaced samples from ``start`` to ``stop`` inclusive.

    ``v[i] = start + i * (stop - start) / (num - 1)``; the last sample is
    exactly ``stop``.

    Raises
    ------
    InvalidArgumentError
        If ``num`` is not an integer ``>= 2``.
    """
    if isinstance(num, bool) or not isinstance(num, Integral) or num < 2:
        raise InvalidArgumentError("linspace", "num", num, "must be an integer >= 2")
    lo = _finite("linspace", "start", start)
    hi = _finite("linspace", "stop", stop)
    n = int(num)
    check_allocation(n)
    values = lo + np.arange(n, dtype=np.float64) * ((hi - lo) / (n - 1))
    values[-1] = hi
    return NDArray._from_flat(values, (n,), _backend(backend))


def rand(shape: ShapeLike, *, backend: BackendLike = None) -> NDArray:
    """I.i.d. samples from the uniform distribution on ``[0, 1)``."""
    dims = normalize_shape(shape)
    check_allocation(numel(dims))
    return NDArray._from_flat(random_cpu.uniform(numel(dims)), dims, _backend(backend))


def randn(shape: ShapeLike, *, backend: BackendLike = None) -> NDArray:
    """I.i.d. standard normal samples (Box-Muller over paired uniforms)."""
    dims = normalize_shape(shape)
    check_allocation(numel(dims))
    return NDArray._from_flat(random_cpu.normal(numel(dims)), dims, _backend(backend))


def eye(n: int, m: Optional[int] = None, k: int = 0, *, backend: BackendLike = None) -> NDArray:
    """
    2-D array with ones on the ``k``-th diagonal and zeros elsewhere.

    Parameters
    ----------
    n : int
        Number of rows.
    m : Optional[int]
        Number of columns; defaults to ``n``.
    k : int
        Diagonal offset (positive: above the main diagonal).
    """
    rows, cols = normalize_shape((n, n if m is None else m))
    if isinstance(k, bool) or not isinstance(k, Integral):
        raise InvalidArgumentError("eye", "k", k, "must be an integer")
    check_allocation(rows * cols)
    out = np.zeros(rows * cols, dtype=np.float64)
    r = np.arange(max(0, -k), min(rows, cols - k), dtype=np.int64)
    out[r * cols + (r + k)] = 1.0
    return NDArray._from_flat(out, (rows, cols), _backend(backend))


def identity(n: int, *, backend: BackendLike = None) -> NDArray:
    """Square identity matrix of order ``n``."""
    return eye(n, backend=backend)
