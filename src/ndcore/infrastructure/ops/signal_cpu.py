"""
CPU kernels for 1-D convolution, cross-correlation and finite differences.
"""

from __future__ import annotations

import numpy as np

MODES = ("full", "same", "valid")
"""Output windows accepted by :func:`convolve_flat` and :func:`correlate_flat`."""


def convolve_flat(a: np.ndarray, v: np.ndarray, mode: str) -> np.ndarray:
    """
    Discrete linear convolution ``(a * v)[n] = sum_m a[m] v[n - m]``.

    Output lengths for ``N = len(a)`` and ``M = len(v)``: ``full`` gives
    ``N + M - 1``, ``same`` gives ``max(N, M)`` (centered), ``valid``
    gives ``max(N, M) - min(N, M) + 1``.
    """
    with np.errstate(all="ignore"):
        return np.convolve(a, v, mode=mode).astype(np.float64)


def correlate_flat(a: np.ndarray, v: np.ndarray, mode: str) -> np.ndarray:
    """
    Cross-correlation ``c[k] = sum_n a[n + k] v[n]``.

    Output lengths follow :func:`convolve_flat`.
    """
    with np.errstate(all="ignore"):
        return np.correlate(a, v, mode=mode).astype(np.float64)


def gradient_slices(slices: np.ndarray, spacing: float) -> np.ndarray:
    """
    Finite-difference derivative of every row.

    Interior points use central differences ``(f[i+1] - f[i-1]) / 2h``;
    the first and last points use one-sided differences. Rows of length 1
    have gradient 0.
    """
    length = slices.shape[1]
    if length == 1:
        return np.zeros_like(slices)
    out = np.empty_like(slices)
    with np.errstate(all="ignore"):
        out[:, 0] = (slices[:, 1] - slices[:, 0]) / spacing
        out[:, -1] = (slices[:, -1] - slices[:, -2]) / spacing
        if length > 2:
            out[:, 1:-1] = (slices[:, 2:] - slices[:, :-2]) / (2.0 * spacing)
    return out
