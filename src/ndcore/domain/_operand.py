"""
Classification of host values crossing into the engine.

Values handed to ndcore are resolved exactly once, at ingestion, into one of
four kinds. After that the numeric core only ever sees arrays.
"""

from enum import Enum
from numbers import Real
from typing import Any

import numpy as np

from ._array import IArray
from ._errors import InvalidElementError


class OperandKind(Enum):
    """Tagged variant of everything a caller may pass as an operand."""

    SCALAR = "scalar"
    FLAT_SEQUENCE = "flat"
    NESTED_SEQUENCE = "nested"
    ARRAY = "array"


def is_scalar(value: Any) -> bool:
    """
    Return True for real numeric scalars.

    ``bool``, ``int``, ``float`` and NumPy real scalars qualify; complex
    numbers, strings and ``None`` do not.
    """
    if isinstance(value, np.generic):
        return isinstance(value, (np.bool_, np.integer, np.floating))
    return isinstance(value, Real)


def classify_operand(value: Any) -> OperandKind:
    """
    Determine the kind of a host value.

    Parameters
    ----------
    value : Any
        A scalar, a (possibly nested) list/tuple, a NumPy array or an
        ndcore array.

    Returns
    -------
    OperandKind

    Raises
    ------
    InvalidElementError
        If ``value`` is none of the accepted kinds (e.g. a string or
        ``None``).
    """
    if is_scalar(value):
        return OperandKind.SCALAR
    if isinstance(value, IArray) and not isinstance(value, np.ndarray):
        return OperandKind.ARRAY
    if isinstance(value, np.ndarray):
        if value.ndim == 0:
            if value.dtype.kind not in "biuf":
                raise InvalidElementError(value.item())
            return OperandKind.SCALAR
        return OperandKind.FLAT_SEQUENCE if value.ndim == 1 else OperandKind.NESTED_SEQUENCE
    if isinstance(value, (list, tuple)):
        if all(is_scalar(v) for v in value):
            return OperandKind.FLAT_SEQUENCE
        return OperandKind.NESTED_SEQUENCE
    raise InvalidElementError(value)
