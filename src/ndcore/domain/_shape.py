"""
Shape and stride model.

Pure functions describing the row-major (C-order) layout of an N-dimensional
array over a flat buffer:

- shape normalization and validation
- element counts
- strides
- multi-index <-> flat offset mapping
- axis validation

Shapes are always non-empty tuples of positive ints; a zero-length axis
never exists in ndcore.
"""

from numbers import Integral
from typing import Sequence, Tuple, Union

from ._errors import (
    AxisOutOfBoundsError,
    IndexOutOfBoundsError,
    InvalidShapeError,
)

Shape = Tuple[int, ...]
"""Normalized shape: a non-empty tuple of positive ints."""

ShapeLike = Union[int, Sequence[int]]
"""Anything accepted where a shape is expected."""


def _is_int(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def normalize_shape(shape: ShapeLike) -> Shape:
    """
    Validate a user-supplied shape and return it as a tuple of ints.

    Parameters
    ----------
    shape : int or Sequence[int]
        A single dimension or a sequence of dimensions.

    Returns
    -------
    tuple of int
        The normalized shape.

    Raises
    ------
    InvalidShapeError
        If the shape is empty, contains a non-integer, or contains a
        dimension smaller than 1.
    """
    if _is_int(shape):
        dims = (int(shape),)
    else:
        try:
            dims = tuple(shape)
        except TypeError:
            raise InvalidShapeError(shape, "expected an int or a sequence of ints")
    if not dims:
        raise InvalidShapeError(shape, "rank must be at least 1")
    for d in dims:
        if not _is_int(d):
            raise InvalidShapeError(shape, f"dimension {d!r} is not an integer")
        if d < 1:
            raise InvalidShapeError(shape, f"dimension {d} is not positive")
    return tuple(int(d) for d in dims)


def numel(shape: Sequence[int]) -> int:
    """Return the number of elements described by ``shape``."""
    n = 1
    for d in shape:
        n *= int(d)
    return n


def strides(shape: Sequence[int]) -> Shape:
    """
    Compute row-major element strides.

    ``stride[last] = 1`` and ``stride[i] = stride[i + 1] * shape[i + 1]``.

    Examples
    --------
    >>> strides((2, 3, 4))
    (12, 4, 1)
    """
    out = [1] * len(shape)
    for i in range(len(shape) - 2, -1, -1):
        out[i] = out[i + 1] * int(shape[i + 1])
    return tuple(out)


def flat_index(shape: Sequence[int], indices: Sequence[int]) -> int:
    """
    Map a multi-index to its flat buffer offset.

    Parameters
    ----------
    shape : Sequence[int]
        Array shape.
    indices : Sequence[int]
        One index per axis, each in ``[0, shape[i])``.

    Returns
    -------
    int
        ``sum(indices[i] * strides(shape)[i])``.

    Raises
    ------
    IndexOutOfBoundsError
        If the number of indices does not match the rank, or an index is
        outside its axis. The error names the offending axis.
    """
    if len(indices) != len(shape):
        raise IndexOutOfBoundsError(
            tuple(indices),
            detail=f"Expected {len(shape)} indices for shape {tuple(shape)}, got {len(indices)}",
        )
    offset = 0
    for axis, (idx, dim, st) in enumerate(zip(indices, shape, strides(shape))):
        if not _is_int(idx) or not 0 <= idx < dim:
            raise IndexOutOfBoundsError(idx, extent=dim, axis=axis)
        offset += int(idx) * st
    return offset


def unflatten(shape: Sequence[int], offset: int) -> Shape:
    """
    Map a flat buffer offset back to its multi-index.

    Raises
    ------
    IndexOutOfBoundsError
        If ``offset`` is not in ``[0, numel(shape))``.
    """
    size = numel(shape)
    if not _is_int(offset) or not 0 <= offset < size:
        raise IndexOutOfBoundsError(offset, extent=size)
    out = []
    rem = int(offset)
    for st in strides(shape):
        q, rem = divmod(rem, st)
        out.append(q)
    return tuple(out)


def normalize_axis(axis: int, rank: int, op: str) -> int:
    """
    Validate a 0-based axis for an operation on a rank-``rank`` array.

    Axes are strict: negative values are rejected.

    Raises
    ------
    AxisOutOfBoundsError
        If ``axis`` is not an int in ``[0, rank)``.
    """
    if not _is_int(axis) or not 0 <= axis < rank:
        raise AxisOutOfBoundsError(op, axis, rank)
    return int(axis)


def normalize_insert_axis(axis: int, rank: int, op: str) -> int:
    """
    Validate the position of a newly inserted axis.

    A negative ``axis`` is counted from ``rank + 1`` so that ``-1`` appends.
    The result must lie in ``[0, rank]``.
    """
    if not _is_int(axis):
        raise AxisOutOfBoundsError(op, axis, rank, inclusive=True)
    pos = int(axis)
    if pos < 0:
        pos += rank + 1
    if not 0 <= pos <= rank:
        raise AxisOutOfBoundsError(op, axis, rank, inclusive=True)
    return pos
