"""
Materializing broadcast copies of flat buffers.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ...domain._shape import strides
from .indexing_cpu import coordinates


def broadcast_to_flat(
    data: np.ndarray, src_shape: Sequence[int], out_shape: Sequence[int]
) -> np.ndarray:
    """
    Copy ``data`` (laid out as ``src_shape``) into the larger ``out_shape``.

    For every output coordinate the source offset only uses source axes
    that exist and have size > 1; absent or size-1 axes always read index 0.

    Parameters
    ----------
    data : np.ndarray
        Flat source buffer.
    src_shape : Sequence[int]
        Source shape. Must broadcast to ``out_shape``; callers validate this.
    out_shape : Sequence[int]
        Target shape.

    Returns
    -------
    np.ndarray
        New flat buffer of ``numel(out_shape)`` elements.

    Notes
    -----
    Runs in ``O(numel(out_shape) * rank)``.
    """
    src_shape = tuple(src_shape)
    out_shape = tuple(out_shape)
    if src_shape == out_shape:
        return np.array(data, dtype=np.float64, copy=True)

    pad = len(out_shape) - len(src_shape)
    coords = coordinates(out_shape)
    src_index = np.zeros(coords.shape[0], dtype=np.int64)
    for k, (dim, st) in enumerate(zip(src_shape, strides(src_shape))):
        if dim > 1:
            src_index += coords[:, pad + k] * st
    return np.asarray(data, dtype=np.float64)[src_index]
