"""
Segment-copy kernels for concatenation, splitting, padding, insertion and
deletion.

A row-major buffer of shape ``s`` viewed as a matrix of shape
``(prod(s[:axis]), prod(s[axis:]))`` has one row per *outer* coordinate and
each row holds one contiguous segment spanning the axis. Concatenation
interleaves rows of the inputs; splitting slices columns.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from ...domain._shape import numel


def _as_segments(data: np.ndarray, shape: Sequence[int], axis: int) -> np.ndarray:
    outer = numel(shape[:axis])
    return np.asarray(data, dtype=np.float64).reshape(outer, -1)


def concat_flat(
    buffers: Sequence[np.ndarray], shapes: Sequence[Sequence[int]], axis: int
) -> np.ndarray:
    """
    Concatenate flat buffers along ``axis``.

    Parameters
    ----------
    buffers : Sequence[np.ndarray]
        Flat buffers in output order.
    shapes : Sequence[Sequence[int]]
        Shapes of ``buffers``; callers guarantee they agree on every axis
        except ``axis``.
    axis : int
        Concatenation axis.

    Returns
    -------
    np.ndarray
        Flat buffer of the concatenated array.
    """
    segments = [_as_segments(b, s, axis) for b, s in zip(buffers, shapes)]
    return np.concatenate(segments, axis=1).reshape(-1)


def split_flat(
    data: np.ndarray, shape: Sequence[int], axis: int, bounds: Sequence[Tuple[int, int]]
) -> List[np.ndarray]:
    """
    Cut a flat buffer into pieces along ``axis``.

    Parameters
    ----------
    bounds : Sequence[tuple of int]
        Half-open ``(start, stop)`` ranges along ``axis``, one per piece.

    Returns
    -------
    list of np.ndarray
        One flat buffer per range, in order.
    """
    inner = numel(shape[axis + 1 :])
    segments = _as_segments(data, shape, axis)
    return [
        segments[:, start * inner : stop * inner].copy().reshape(-1)
        for start, stop in bounds
    ]


def tile_flat(
    data: np.ndarray, shape: Sequence[int], reps: Sequence[int]
) -> Tuple[np.ndarray, Tuple[int, ...]]:
    """
    Repeat a buffer ``reps[i]`` times along every axis.

    ``shape`` and ``reps`` are first left-padded with 1s to a common rank.
    """
    rank = max(len(shape), len(reps))
    shape = (1,) * (rank - len(shape)) + tuple(shape)
    reps = (1,) * (rank - len(reps)) + tuple(reps)
    out = np.tile(np.asarray(data, dtype=np.float64).reshape(shape), reps)
    return out.reshape(-1), tuple(int(d) for d in out.shape)


def repeat_flat(
    data: np.ndarray, shape: Sequence[int], repeats: int, axis: int
) -> Tuple[np.ndarray, Tuple[int, ...]]:
    """Repeat each element ``repeats`` times along ``axis``."""
    out = np.repeat(np.asarray(data, dtype=np.float64).reshape(shape), repeats, axis=axis)
    return out.reshape(-1), tuple(int(d) for d in out.shape)


def pad_flat(
    data: np.ndarray,
    shape: Sequence[int],
    widths: Sequence[Tuple[int, int]],
    mode: str,
    constant: float = 0.0,
) -> Tuple[np.ndarray, Tuple[int, ...]]:
    """
    Extend every axis by ``widths[k] = (before, after)`` elements.

    Modes
    -----
    constant
        New elements are ``constant``.
    edge
        New elements repeat the nearest edge value.
    wrap
        The axis is continued periodically.
    reflect
        The axis is mirrored about its end elements, which are not repeated.
        A size-1 axis repeats its only element.
    """
    arr = np.asarray(data, dtype=np.float64).reshape(tuple(shape))
    pad = [(int(b), int(a)) for b, a in widths]
    if mode == "constant":
        out = np.pad(arr, pad, mode="constant", constant_values=constant)
    else:
        out = np.pad(arr, pad, mode=mode)
    return out.reshape(-1), tuple(int(d) for d in out.shape)


def insert_flat(
    data: np.ndarray,
    shape: Sequence[int],
    axis: int,
    positions: Sequence[int],
    fills: Sequence[float],
) -> Tuple[np.ndarray, Tuple[int, ...]]:
    """
    Insert constant slices along ``axis``.

    Parameters
    ----------
    positions : Sequence[int]
        Ascending positions in ``[0, shape[axis]]``, relative to the input;
        a new slice lands before the input slice at that position.
        Repeated positions insert several slices in order.
    fills : Sequence[float]
        One value per position; the inserted slice is filled with it.
    """
    outer = numel(shape[:axis])
    inner = numel(shape[axis + 1 :])
    length = int(shape[axis])
    pos = np.asarray(positions, dtype=np.int64)
    src = data.reshape(outer, length, inner)

    out_len = length + len(pos)
    out = np.empty((outer, out_len, inner), dtype=np.float64)
    src_dst = np.arange(length) + np.searchsorted(pos, np.arange(length), side="right")
    ins_dst = pos + np.arange(len(pos))
    out[:, src_dst, :] = src
    out[:, ins_dst, :] = np.asarray(fills, dtype=np.float64)[None, :, None]

    out_shape = tuple(out_len if k == axis else int(d) for k, d in enumerate(shape))
    return out.reshape(-1), out_shape


def delete_flat(
    data: np.ndarray, shape: Sequence[int], axis: int, positions: Sequence[int]
) -> Tuple[np.ndarray, Tuple[int, ...]]:
    """
    Drop the slices at ``positions`` (valid, distinct, any order) along ``axis``.
    """
    keep = np.ones(int(shape[axis]), dtype=bool)
    keep[np.asarray(positions, dtype=np.int64)] = False
    arr = np.asarray(data, dtype=np.float64).reshape(tuple(shape))
    out = np.compress(keep, arr, axis=axis)
    return out.reshape(-1), tuple(int(d) for d in out.shape)
