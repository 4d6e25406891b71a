"""
Along-axis rewriting kernels (scans, sorting, differences, reversal, rotation).

Like the reduction kernels, these operate on a ``(outer, L)`` matrix of
gathered slices, but return a matrix of the same row count. The caller
scatters the result back into a flat buffer.
"""

from __future__ import annotations

import numpy as np


def cumsum_slices(slices: np.ndarray) -> np.ndarray:
    with np.errstate(all="ignore"):
        return np.cumsum(slices, axis=1)


def cumprod_slices(slices: np.ndarray) -> np.ndarray:
    with np.errstate(all="ignore"):
        return np.cumprod(slices, axis=1)


def sort_slices(slices: np.ndarray) -> np.ndarray:
    """Stable ascending sort of every row; NaN sorts last."""
    return np.sort(slices, axis=1, kind="stable")


def argsort_slices(slices: np.ndarray) -> np.ndarray:
    """Positions that would stably sort every row, as float64."""
    return np.argsort(slices, axis=1, kind="stable").astype(np.float64)


def diff_slices(slices: np.ndarray, n: int) -> np.ndarray:
    """
    Apply the first difference ``n`` times along every row.

    The row length shrinks from ``L`` to ``L - n``; callers guarantee
    ``n < L``.
    """
    out = slices
    with np.errstate(all="ignore"):
        for _ in range(n):
            out = out[:, 1:] - out[:, :-1]
    return out


def flip_slices(slices: np.ndarray) -> np.ndarray:
    return slices[:, ::-1]


def roll_slices(slices: np.ndarray, shift: int) -> np.ndarray:
    """Rotate every row right by ``shift`` positions (left when negative)."""
    return np.roll(slices, int(shift), axis=1)
