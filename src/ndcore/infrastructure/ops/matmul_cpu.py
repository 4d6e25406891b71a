"""
Matrix product kernels.

Both kernels multiply an ``(m, k)`` matrix by a ``(k, n)`` matrix given as
flat row-major buffers and return the flat ``(m, n)`` result. Vector cases
are expressed by the caller as ``n == 1`` or ``m == 1``.
"""

from __future__ import annotations

import math

import numpy as np


def matmul_numpy(a: np.ndarray, b: np.ndarray, m: int, k: int, n: int) -> np.ndarray:
    """Vectorized product through :func:`numpy.dot`."""
    with np.errstate(all="ignore"):
        return np.dot(a.reshape(m, k), b.reshape(k, n)).reshape(-1)


def matmul_python(a: np.ndarray, b: np.ndarray, m: int, k: int, n: int) -> np.ndarray:
    """
    Reference triple loop.

    Each output element is accumulated with :func:`math.fsum`, so the result
    is correctly rounded for finite inputs.
    """
    av = a.tolist()
    bv = b.tolist()
    out = [0.0] * (m * n)
    for i in range(m):
        row = av[i * k : (i + 1) * k]
        for j in range(n):
            terms = [row[p] * bv[p * n + j] for p in range(k)]
            try:
                out[i * n + j] = math.fsum(terms)
            except (OverflowError, ValueError):
                # fsum refuses inf/nan partials and intermediate overflow
                out[i * n + j] = sum(terms)
    return np.asarray(out, dtype=np.float64)
