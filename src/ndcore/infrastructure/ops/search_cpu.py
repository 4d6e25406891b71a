"""
CPU kernels for searching, set extraction, counting and interpolation.

All kernels take flat float64 buffers and return new float64 buffers
(positions and counts included). Validation of arguments is the caller's
job; the kernels assume well-formed input.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import numpy as np


def searchsorted_flat(sorted_data: np.ndarray, values: np.ndarray, side: str) -> np.ndarray:
    """
    Insertion positions of ``values`` into the ascending buffer ``sorted_data``.

    ``side="left"`` gives the first position ``i`` with ``values <= a[i]``,
    ``side="right"`` the first with ``values < a[i]``.
    """
    return np.searchsorted(sorted_data, values, side=side).astype(np.float64)


def unique_flat(
    data: np.ndarray,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """
    Sorted distinct values of a buffer.

    Returns
    -------
    (values, first, inverse, counts)
        ``values`` ascending with NaNs collapsed to one trailing NaN;
        ``first[k]`` the flat position of the first occurrence of
        ``values[k]``; ``inverse`` maps every input element to its entry in
        ``values``; ``counts[k]`` the occurrences of ``values[k]``.
    """
    values, first, inverse, counts = np.unique(
        data, return_index=True, return_inverse=True, return_counts=True
    )
    return (
        values.astype(np.float64),
        first.astype(np.float64),
        inverse.reshape(-1).astype(np.float64),
        counts.astype(np.float64),
    )


def nonzero_coords(data: np.ndarray, shape: Sequence[int]) -> np.ndarray:
    """
    Multi-indices of the nonzero elements in row-major order.

    NaN counts as nonzero.

    Returns
    -------
    np.ndarray
        Integer matrix of shape ``(hits, len(shape))``; ``hits`` may be 0.
    """
    flat = np.flatnonzero(data != 0.0)
    return np.stack(np.unravel_index(flat, tuple(shape)), axis=1)


def histogram_flat(
    data: np.ndarray, bins: int, lo: float, hi: float
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Count values into ``bins`` equal-width bins spanning ``[lo, hi]``.

    Every bin is half-open except the last, which includes ``hi``. Values
    outside the range and NaNs are not counted.
    """
    finite = data[~np.isnan(data)]
    counts, edges = np.histogram(finite, bins=bins, range=(lo, hi))
    return counts.astype(np.float64), edges.astype(np.float64)


def bincount_flat(
    data: np.ndarray, weights: Optional[np.ndarray], length: int
) -> np.ndarray:
    """
    Occurrences (or summed weights) of each non-negative integer value.

    ``data`` must hold non-negative integral values below ``length``.
    """
    return np.bincount(
        data.astype(np.int64), weights=weights, minlength=length
    ).astype(np.float64)


def interp_flat(
    x: np.ndarray, xp: np.ndarray, fp: np.ndarray, left: float, right: float
) -> np.ndarray:
    """
    Piecewise-linear interpolation of ``(xp, fp)`` at the points ``x``.

    ``xp`` must be ascending. Points below ``xp[0]`` take ``left`` and points
    above ``xp[-1]`` take ``right``.
    """
    return np.interp(x, xp, fp, left=left, right=right).astype(np.float64)
