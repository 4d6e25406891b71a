"""
CPU reduction kernels over gathered slices.

Every kernel takes a 2-D matrix ``slices`` of shape ``(outer, L)`` where each
row is one complete slice along the reduced axis (see
:func:`~ndcore.infrastructure.ops.indexing_cpu.axis_gather_index`), and
returns a 1-D float64 array of length ``outer``.

A whole-buffer reduction is the special case ``slices = data[None, :]``.

Numerical conventions
---------------------
- ``var``/``std`` are population statistics (divide by ``L``) computed in two
  passes: the slice mean first, then the mean of squared deviations.
- ``argmin``/``argmax`` return the first position attaining the extremum.
  A NaN in the slice wins (its first position is returned), consistent with
  ``min``/``max`` propagating NaN.
- Floating-point warnings are suppressed; results follow IEEE-754.
"""

from __future__ import annotations

from typing import Callable, Dict

import numpy as np


def _sum(slices: np.ndarray) -> np.ndarray:
    return slices.sum(axis=1)


def _mean(slices: np.ndarray) -> np.ndarray:
    return slices.sum(axis=1) / slices.shape[1]


def _var(slices: np.ndarray) -> np.ndarray:
    mu = _mean(slices)
    dev = slices - mu[:, None]
    return (dev * dev).sum(axis=1) / slices.shape[1]


def _std(slices: np.ndarray) -> np.ndarray:
    return np.sqrt(_var(slices))


def _min(slices: np.ndarray) -> np.ndarray:
    return slices.min(axis=1)


def _max(slices: np.ndarray) -> np.ndarray:
    return slices.max(axis=1)


def _argmin(slices: np.ndarray) -> np.ndarray:
    return slices.argmin(axis=1).astype(np.float64)


def _argmax(slices: np.ndarray) -> np.ndarray:
    return slices.argmax(axis=1).astype(np.float64)


def _prod(slices: np.ndarray) -> np.ndarray:
    return slices.prod(axis=1)


def _median(slices: np.ndarray) -> np.ndarray:
    return np.median(slices, axis=1)


def _ptp(slices: np.ndarray) -> np.ndarray:
    return slices.max(axis=1) - slices.min(axis=1)


def _all(slices: np.ndarray) -> np.ndarray:
    return np.all(slices != 0.0, axis=1).astype(np.float64)


def _any(slices: np.ndarray) -> np.ndarray:
    return np.any(slices != 0.0, axis=1).astype(np.float64)


REDUCTIONS: Dict[str, Callable[[np.ndarray], np.ndarray]] = {
    "sum": _sum,
    "mean": _mean,
    "var": _var,
    "std": _std,
    "min": _min,
    "max": _max,
    "argmin": _argmin,
    "argmax": _argmax,
    "prod": _prod,
    "median": _median,
    "ptp": _ptp,
    "all": _all,
    "any": _any,
}
"""Reduction name -> kernel over a ``(outer, L)`` slice matrix."""


def reduce_slices(name: str, slices: np.ndarray) -> np.ndarray:
    """
    Apply the reduction ``name`` row-wise to ``slices``.

    Parameters
    ----------
    name : str
        Key of :data:`REDUCTIONS`.
    slices : np.ndarray
        Float64 matrix of shape ``(outer, L)`` with ``L >= 1``.

    Returns
    -------
    np.ndarray
        Float64 array of length ``outer``.
    """
    with np.errstate(all="ignore"):
        return np.asarray(REDUCTIONS[name](slices), dtype=np.float64)


def quantile_slices(slices: np.ndarray, fraction: float) -> np.ndarray:
    """
    Row-wise quantile with linear interpolation between order statistics.

    For a sorted row ``s`` of length ``L`` the result is
    ``s[lo] * (1 - w) + s[lo + 1] * w`` with ``lo + w = fraction * (L - 1)``.
    A row holding NaN yields NaN.

    Parameters
    ----------
    slices : np.ndarray
        Float64 matrix of shape ``(outer, L)`` with ``L >= 1``.
    fraction : float
        Quantile in ``[0, 1]``; callers validate the range.
    """
    ordered = np.sort(slices, axis=1)
    length = ordered.shape[1]
    pos = fraction * (length - 1)
    lo = int(np.floor(pos))
    hi = min(lo + 1, length - 1)
    weight = pos - lo
    if weight == 0.0:
        out = ordered[:, lo].copy()
    else:
        with np.errstate(all="ignore"):
            out = ordered[:, lo] * (1.0 - weight) + ordered[:, hi] * weight
    out[np.isnan(slices).any(axis=1)] = np.nan
    return out
