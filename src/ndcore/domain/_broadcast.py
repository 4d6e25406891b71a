"""
Broadcast shape computation.

Implements NumPy broadcasting on shapes only: both shapes are right-aligned,
the shorter one is padded with leading 1s, and each aligned pair must be
equal or contain a 1. The result dimension is the larger of the pair.
"""

from functools import reduce
from typing import Sequence

from ._errors import BroadcastError, InvalidArgumentError
from ._shape import Shape


def broadcast_shape(shape_a: Sequence[int], shape_b: Sequence[int]) -> Shape:
    """
    Compute the broadcast result shape of two shapes.

    Parameters
    ----------
    shape_a, shape_b : Sequence[int]
        Input shapes.

    Returns
    -------
    tuple of int
        The common shape.

    Raises
    ------
    BroadcastError
        If an aligned pair of dimensions differs and neither is 1.

    Notes
    -----
    The operation is commutative: ``broadcast_shape(a, b) == broadcast_shape(b, a)``.
    """
    a = tuple(int(d) for d in shape_a)
    b = tuple(int(d) for d in shape_b)
    rank = max(len(a), len(b))
    pa = (1,) * (rank - len(a)) + a
    pb = (1,) * (rank - len(b)) + b

    out = []
    for da, db in zip(pa, pb):
        if da == db or db == 1:
            out.append(da)
        elif da == 1:
            out.append(db)
        else:
            raise BroadcastError(a, b)
    return tuple(out)


def broadcast_shapes(*shapes: Sequence[int]) -> Shape:
    """Fold :func:`broadcast_shape` over any number of shapes."""
    if not shapes:
        raise InvalidArgumentError(
            "broadcast_shapes", "shapes", shapes, "at least one shape is required"
        )
    return reduce(broadcast_shape, shapes[1:], tuple(int(d) for d in shapes[0]))
