"""
Axis permutation of flat buffers.
"""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from ...domain._shape import strides
from .indexing_cpu import coordinates, flat_offsets


def permute_flat(
    data: np.ndarray, shape: Sequence[int], perm: Sequence[int]
) -> Tuple[np.ndarray, Tuple[int, ...]]:
    """
    Materialize ``data`` with its axes reordered by ``perm``.

    Output axis ``i`` is input axis ``perm[i]``. For every output coordinate
    the input offset is computed from the permuted multi-index.

    Returns
    -------
    (np.ndarray, tuple of int)
        The new flat buffer and the permuted shape.
    """
    out_shape = tuple(int(shape[p]) for p in perm)
    in_strides = strides(shape)
    src = flat_offsets(coordinates(out_shape), [in_strides[p] for p in perm])
    return np.asarray(data, dtype=np.float64)[src], out_shape
