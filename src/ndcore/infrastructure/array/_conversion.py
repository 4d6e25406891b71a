"""
Ingestion of host values into flat float64 buffers.

Host values are classified once (:func:`~ndcore.domain._operand.classify_operand`)
and converted into a ``(buffer, shape)`` pair. Nested sequences are walked
recursively: the shape is inferred from the first element at every depth,
then every sibling is validated against it.
"""

from __future__ import annotations

from typing import Any, List, Sequence, Tuple

import numpy as np

from ...domain._array import IArray
from ...domain._errors import (
    InvalidElementError,
    InvalidShapeError,
    ShapeMismatchError,
)
from ...domain._operand import OperandKind, classify_operand, is_scalar


def to_float(value: Any, path: Sequence[int] = ()) -> float:
    """
    Convert one real scalar to a Python float.

    Raises
    ------
    InvalidElementError
        If the value overflows float64 (e.g. ``10**400``).
    """
    try:
        return float(value)
    except OverflowError as exc:
        raise InvalidElementError(value, path, "overflows float64") from exc


def _as_sequence(value: Any, path: Sequence[int]) -> List[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, np.ndarray):
        return value.tolist() if value.ndim > 0 else [value.item()]
    if isinstance(value, IArray):
        return value.tolist()
    raise InvalidElementError(value, path)


def _infer_shape(value: Any) -> Tuple[int, ...]:
    shape: List[int] = []
    cur = value
    path: List[int] = []
    while not is_scalar(cur):
        seq = _as_sequence(cur, path)
        if not seq:
            raise InvalidShapeError(
                tuple(shape) + (0,), f"empty sequence at position {path}"
            )
        shape.append(len(seq))
        cur = seq[0]
        path.append(0)
    return tuple(shape)


def _collect(
    value: Any, shape: Tuple[int, ...], depth: int, path: List[int], out: List[float]
) -> None:
    if depth == len(shape):
        if is_scalar(value):
            out.append(to_float(value, path))
            return
        if isinstance(value, (list, tuple, np.ndarray)) or isinstance(value, IArray):
            raise ShapeMismatchError(
                "from_nested",
                [shape],
                f"unexpected nesting below depth {depth} at position {path}",
            )
        raise InvalidElementError(value, path)

    if is_scalar(value):
        raise ShapeMismatchError(
            "from_nested",
            [shape],
            f"expected a sequence of length {shape[depth]} at position {path}, got a scalar",
        )
    seq = _as_sequence(value, path)
    if len(seq) != shape[depth]:
        raise ShapeMismatchError(
            "from_nested",
            [shape],
            f"sequence at position {path} has length {len(seq)}, expected {shape[depth]}",
        )
    for i, item in enumerate(seq):
        path.append(i)
        _collect(item, shape, depth + 1, path, out)
        path.pop()


def nested_to_flat(value: Any) -> Tuple[np.ndarray, Tuple[int, ...]]:
    """
    Convert a host value into a flat float64 buffer and its shape.

    Parameters
    ----------
    value : Any
        A real scalar, a (nested) list/tuple of real scalars, a NumPy array
        or an ndcore array.

    Returns
    -------
    (np.ndarray, tuple of int)
        A new, independent flat buffer and the inferred shape. A bare scalar
        becomes shape ``(1,)``.

    Raises
    ------
    ShapeMismatchError
        If siblings at the same depth differ in length or nesting depth.
    InvalidElementError
        If a leaf is not a real number.
    InvalidShapeError
        If a sequence at any depth is empty.
    """
    kind = classify_operand(value)

    if kind is OperandKind.SCALAR:
        return np.array([to_float(value)], dtype=np.float64), (1,)

    if kind is OperandKind.ARRAY:
        return np.array(value.to_numpy(), dtype=np.float64).reshape(-1), tuple(value.shape)

    if isinstance(value, np.ndarray) and value.dtype.kind in "biuf":
        if value.size == 0:
            raise InvalidShapeError(value.shape, "arrays with a zero-length axis are not supported")
        return np.array(value, dtype=np.float64).reshape(-1), tuple(int(d) for d in value.shape)

    if kind is OperandKind.FLAT_SEQUENCE and not isinstance(value, np.ndarray):
        if len(value) == 0:
            raise InvalidShapeError((0,), "empty sequence")
        return np.array(
            [to_float(v, (i,)) for i, v in enumerate(value)], dtype=np.float64
        ), (len(value),)

    shape = _infer_shape(value)
    out: List[float] = []
    _collect(value, shape, 0, [], out)
    return np.array(out, dtype=np.float64), shape


def flat_to_nested(data: np.ndarray, shape: Sequence[int]) -> List[Any]:
    """Rebuild nested Python lists of floats from a flat buffer."""
    return np.asarray(data, dtype=np.float64).reshape(tuple(shape)).tolist()
