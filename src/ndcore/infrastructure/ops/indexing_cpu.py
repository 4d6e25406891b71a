"""
Vectorized multi-index helpers over row-major flat buffers.

These helpers turn the shape/stride model into NumPy integer index arrays
so that broadcast, transpose and along-axis kernels can gather from a flat
buffer in a single fancy-indexing step.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ...domain._shape import numel, strides


def coordinates(shape: Sequence[int]) -> np.ndarray:
    """
    Enumerate every multi-index of ``shape`` in row-major order.

    Parameters
    ----------
    shape : Sequence[int]
        Array shape. An empty shape denotes a single coordinate with no
        components.

    Returns
    -------
    np.ndarray
        Integer array of shape ``(numel(shape), len(shape))`` whose row ``i``
        is ``unflatten(shape, i)``.
    """
    rank = len(shape)
    if rank == 0:
        return np.zeros((1, 0), dtype=np.int64)
    grid = np.indices(tuple(shape), dtype=np.int64)
    return grid.reshape(rank, -1).T


def flat_offsets(coords: np.ndarray, axis_strides: Sequence[int]) -> np.ndarray:
    """Dot every coordinate row with ``axis_strides``."""
    out = np.zeros(coords.shape[0], dtype=np.int64)
    for k, st in enumerate(axis_strides):
        out += coords[:, k] * int(st)
    return out


def axis_gather_index(shape: Sequence[int], axis: int) -> np.ndarray:
    """
    Build the gather matrix addressing every slice along ``axis``.

    Row ``r`` corresponds to the ``r``-th coordinate (row-major) of the
    shape with ``axis`` removed; column ``j`` is the position along
    ``axis``. Entry ``[r, j]`` is the flat offset ``base_r + j * stride[axis]``.

    Returns
    -------
    np.ndarray
        Integer array of shape ``(numel(shape) // shape[axis], shape[axis])``.
    """
    st = strides(shape)
    rest_shape = tuple(d for k, d in enumerate(shape) if k != axis)
    rest_strides = tuple(s for k, s in enumerate(st) if k != axis)
    base = flat_offsets(coordinates(rest_shape), rest_strides)
    steps = np.arange(shape[axis], dtype=np.int64) * st[axis]
    return base[:, None] + steps[None, :]


def scatter_along_axis(
    values: np.ndarray, shape: Sequence[int], axis: int
) -> np.ndarray:
    """
    Inverse of gathering with :func:`axis_gather_index`.

    Parameters
    ----------
    values : np.ndarray
        Matrix of shape ``(outer, shape[axis])`` in gather order.
    shape : Sequence[int]
        Shape of the flat buffer to produce.

    Returns
    -------
    np.ndarray
        Flat float64 buffer of ``numel(shape)`` elements.
    """
    out = np.empty(numel(shape), dtype=np.float64)
    out[axis_gather_index(shape, axis)] = values
    return out
